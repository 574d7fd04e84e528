"""Instance metadata model and the interfaces of its sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

# Instance metadata endpoints.
OUTPOST_ARN_ENDPOINT = "outpost-arn"
ENIS_ENDPOINT = "network/interfaces/macs"
BLOCK_DEVICES_ENDPOINT = "block-device-mapping"

_ARN_PREFIX = "arn:"


class MetadataError(Exception):
    """Raised when instance metadata cannot be obtained."""


@dataclass(frozen=True)
class Arn:
    """An Amazon Resource Name split into its sections."""

    partition: str
    service: str
    region: str
    account_id: str
    resource: str

    def __str__(self) -> str:
        return ":".join(
            ("arn", self.partition, self.service, self.region, self.account_id, self.resource)
        )


def parse_arn(value: str) -> Arn:
    """Parse an ARN of the form ``arn:partition:service:region:account:resource``.

    Raises ValueError if the prefix is wrong or a section is missing.
    """
    if not value.startswith(_ARN_PREFIX):
        raise ValueError("arn: invalid prefix")
    sections = value.split(":", 5)
    if len(sections) != 6:
        raise ValueError("arn: not enough sections")
    _, partition, service, region, account_id, resource = sections
    return Arn(partition, service, region, account_id, resource)


@dataclass
class InstanceIdentityDocument:
    """The part of the EC2 instance identity document the driver uses."""

    instance_id: str = ""
    instance_type: str = ""
    region: str = ""
    availability_zone: str = ""


@dataclass(frozen=True)
class Metadata:
    """Information about the instance on which the driver is running."""

    instance_id: str
    instance_type: str
    region: str
    availability_zone: str
    num_attached_enis: int = 0
    num_block_device_mappings: int = 0
    outpost_arn: Arn | None = None


@runtime_checkable
class MetadataService(Protocol):
    """What the driver needs to know about the instance it runs on."""

    instance_id: str
    instance_type: str
    region: str
    availability_zone: str
    num_attached_enis: int
    num_block_device_mappings: int
    outpost_arn: Arn | None


@runtime_checkable
class EC2Metadata(Protocol):
    """A client of the EC2 instance metadata service."""

    def available(self) -> bool:
        """Return whether the metadata service can be reached."""

    def get_metadata(self, path: str) -> str:
        """Return the value at a metadata path; raise on failure."""

    def get_instance_identity_document(self) -> InstanceIdentityDocument:
        """Return the instance identity document; raise on failure."""