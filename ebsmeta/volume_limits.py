"""Attachment limits for EC2 instance types."""

from __future__ import annotations

import re

HIGH_MEMORY_METAL_INSTANCES_MAX_VOLUMES = 19
HIGH_MEMORY_VIRTUAL_INSTANCES_MAX_VOLUMES = 27
BAREMETAL_MAX_VOLUMES = 31
NON_NITRO_MAX_ATTACHMENTS = 39
NITRO_MAX_ATTACHMENTS = 28

NON_NITRO_INSTANCE_FAMILIES = frozenset(
    {"t2", "c3", "m3", "r3", "c4", "m4", "r4", "x1e", "x1", "p2", "p3", "g3", "d2", "h1"}
)

# Instance types with a lower maximum number of EBS volumes.
MAX_VOLUME_LIMITS = {
    "d3.8xlarge": 3,
    "d3.12xlarge": 3,
    "g5.48xlarge": 9,
    "inf1.xlarge": 26,
    "inf1.2xlarge": 26,
    "inf1.6xlarge": 23,
    "inf1.24xlarge": 11,
    "mac1.metal": 16,
}

_HIGH_MEMORY_METAL = re.compile(r"^u-[a-z0-9]+\.metal\Z")
_HIGH_MEMORY_VIRTUAL = re.compile(r"^u-[a-z0-9]+\.[a-z0-9]+")
_BARE_METAL = re.compile(r"[a-z0-9]+\.metal\Z")

# Instance metadata does not report NVMe instance store volumes, so they are listed here.
NVME_INSTANCE_STORE_VOLUMES = {
    "c5ad.large": 1, "c5ad.xlarge": 1, "c5ad.2xlarge": 1, "c5ad.4xlarge": 2,
    "c5ad.8xlarge": 2, "c5ad.12xlarge": 2, "c5ad.16xlarge": 2, "c5ad.24xlarge": 2,
    "c5d.large": 1, "c5d.xlarge": 1, "c5d.2xlarge": 1, "c5d.4xlarge": 1,
    "c5d.9xlarge": 1, "c5d.12xlarge": 2, "c5d.18xlarge": 2, "c5d.24xlarge": 4,
    "c5d.metal": 4,
    "c6gd.medium": 1, "c6gd.large": 1, "c6gd.xlarge": 1, "c6gd.2xlarge": 1,
    "c6gd.4xlarge": 1, "c6gd.8xlarge": 1, "c6gd.12xlarge": 2, "c6gd.16xlarge": 2,
    "c6gd.metal": 2,
    "dl1.24xlarge": 4,
    "f1.2xlarge": 1, "f1.4xlarge": 1, "f1.16xlarge": 4,
    "g4ad.xlarge": 1, "g4ad.2xlarge": 1, "g4ad.4xlarge": 1, "g4ad.8xlarge": 1,
    "g4ad.16xlarge": 2,
    "g4dn.xlarge": 1, "g4dn.2xlarge": 1, "g4dn.4xlarge": 1, "g4dn.8xlarge": 1,
    "g4dn.12xlarge": 1, "g4dn.16xlarge": 1, "g4dn.metal": 2,
    "g5.xlarge": 1, "g5.2xlarge": 1, "g5.4xlarge": 1, "g5.8xlarge": 1,
    "g5.12xlarge": 1, "g5.16xlarge": 1, "g5.24xlarge": 1, "g5.48xlarge": 2,
    "i3.large": 1, "i3.xlarge": 1, "i3.2xlarge": 1, "i3.4xlarge": 2,
    "i3.8xlarge": 4, "i3.16xlarge": 8, "i3.metal": 8,
    "i3en.large": 1, "i3en.xlarge": 1, "i3en.2xlarge": 2, "i3en.3xlarge": 1,
    "i3en.6xlarge": 2, "i3en.12xlarge": 4, "i3en.24xlarge": 8, "i3en.metal": 8,
    "im4gn.large": 1, "im4gn.xlarge": 1, "im4gn.2xlarge": 1, "im4gn.4xlarge": 1,
    "im4gn.8xlarge": 2, "im4gn.16xlarge": 4,
    "is4gen.medium": 1, "is4gen.large": 1, "is4gen.xlarge": 1, "is4gen.2xlarge": 1,
    "is4gen.4xlarge": 2, "is4gen.8xlarge": 4,
    "m5ad.large": 1, "m5ad.xlarge": 1, "m5ad.2xlarge": 1, "m5ad.4xlarge": 2,
    "m5ad.8xlarge": 2, "m5ad.12xlarge": 2, "m5ad.16xlarge": 4, "m5ad.24xlarge": 4,
    "m5d.large": 1, "m5d.xlarge": 1, "m5d.2xlarge": 1, "m5d.4xlarge": 2,
    "m5d.8xlarge": 2, "m5d.12xlarge": 2, "m5d.16xlarge": 4, "m5d.24xlarge": 4,
    "m5d.metal": 4,
    "m5dn.large": 1, "m5dn.xlarge": 1, "m5dn.2xlarge": 1, "m5dn.4xlarge": 2,
    "m5dn.8xlarge": 2, "m5dn.12xlarge": 2, "m5dn.16xlarge": 4, "m5dn.24xlarge": 4,
    "m5dn.metal": 4,
    "m6gd.medium": 1, "m6gd.large": 1, "m6gd.xlarge": 1, "m6gd.2xlarge": 1,
    "m6gd.4xlarge": 1, "m6gd.8xlarge": 1, "m6gd.12xlarge": 2, "m6gd.16xlarge": 2,
    "m6gd.metal": 2,
    "m6id.large": 1, "m6id.xlarge": 1, "m6id.2xlarge": 1, "m6id.4xlarge": 1,
    "m6id.8xlarge": 1, "m6id.12xlarge": 2, "m6id.16xlarge": 2, "m6id.24xlarge": 4,
    "m6id.32xlarge": 4, "m6id.metal": 4,
    "p3dn.24xlarge": 2,
    "p4d.24xlarge": 8,
    "r5ad.large": 1, "r5ad.xlarge": 1, "r5ad.2xlarge": 1, "r5ad.4xlarge": 2,
    "r5ad.8xlarge": 2, "r5ad.12xlarge": 2, "r5ad.16xlarge": 4, "r5ad.24xlarge": 4,
    "r5d.large": 1, "r5d.xlarge": 1, "r5d.2xlarge": 1, "r5d.4xlarge": 2,
    "r5d.8xlarge": 2, "r5d.12xlarge": 2, "r5d.16xlarge": 4, "r5d.24xlarge": 4,
    "r5d.metal": 4,
    "r5dn.large": 1, "r5dn.xlarge": 1, "r5dn.2xlarge": 1, "r5dn.4xlarge": 2,
    "r5dn.8xlarge": 2, "r5dn.12xlarge": 2, "r5dn.16xlarge": 4, "r5dn.24xlarge": 4,
    "r5dn.metal": 4,
    "r6gd.medium": 1, "r6gd.large": 1, "r6gd.xlarge": 1, "r6gd.2xlarge": 1,
    "r6gd.4xlarge": 1, "r6gd.8xlarge": 1, "r6gd.12xlarge": 2, "r6gd.16xlarge": 2,
    "r6gd.metal": 2,
    "x2gd.medium": 1, "x2gd.large": 1, "x2gd.xlarge": 1, "x2gd.2xlarge": 1,
    "x2gd.4xlarge": 1, "x2gd.8xlarge": 1, "x2gd.12xlarge": 2, "x2gd.16xlarge": 2,
    "x2gd.metal": 2,
    "x2idn.16xlarge": 1, "x2idn.24xlarge": 2, "x2idn.32xlarge": 2, "x2idn.metal": 2,
    "z1d.large": 1, "z1d.xlarge": 1, "z1d.2xlarge": 1, "z1d.3xlarge": 1,
    "z1d.6xlarge": 1, "z1d.12xlarge": 2, "z1d.metal": 2,
}


def is_nitro_instance_type(it: str) -> bool:
    """Return whether the instance type belongs to a Nitro-based family.

    Raises ValueError when the type is not of the form ``family.size``.
    """
    parts = it.split(".")
    if len(parts) != 2:
        raise ValueError("cannot determine family of instance type")
    return parts[0] not in NON_NITRO_INSTANCE_FAMILIES


def get_max_attachments(nitro: bool) -> int:
    """Return the maximum number of attachments for Nitro or non-Nitro instances."""
    return NITRO_MAX_ATTACHMENTS if nitro else NON_NITRO_MAX_ATTACHMENTS


def get_ebs_limit_for_instance_type(it: str) -> int | None:
    """Return the EBS volume limit of an instance type, or None if it has no special limit."""
    if it in MAX_VOLUME_LIMITS:
        return MAX_VOLUME_LIMITS[it]
    if _HIGH_MEMORY_METAL.match(it):
        return HIGH_MEMORY_METAL_INSTANCES_MAX_VOLUMES
    if _HIGH_MEMORY_VIRTUAL.match(it):
        return HIGH_MEMORY_VIRTUAL_INSTANCES_MAX_VOLUMES
    if _BARE_METAL.search(it):
        return BAREMETAL_MAX_VOLUMES
    return None


def get_nvme_instance_store_volumes_for_instance_type(it: str) -> int:
    """Return the number of NVMe instance store volumes of an instance type."""
    return NVME_INSTANCE_STORE_VOLUMES.get(it, 0)