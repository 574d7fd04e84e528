"""Instance metadata gathered from the Kubernetes node object."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from .metadata import Metadata, MetadataError

NODE_NAME_ENV = "CSI_NODE_NAME"

LABEL_INSTANCE_TYPE = "node.kubernetes.io/instance-type"
LABEL_TOPOLOGY_REGION = "topology.kubernetes.io/region"
LABEL_TOPOLOGY_ZONE = "topology.kubernetes.io/zone"

_AWS_INSTANCE_ID = re.compile(r"s\.i-[a-z0-9]+|i-[a-z0-9]+\Z")


@dataclass
class Node:
    """The parts of a Kubernetes node the driver reads."""

    name: str
    provider_id: str = ""
    labels: dict[str, str] = field(default_factory=dict)


@runtime_checkable
class KubernetesClient(Protocol):
    """A client able to look up nodes in the Kubernetes API."""

    def get_node(self, name: str) -> Node:
        """Return the named node; raise on failure."""


def kubernetes_api_instance_info(client: KubernetesClient) -> Metadata:
    """Build instance metadata from the node named by the CSI_NODE_NAME variable.

    Raises MetadataError when the node or a required value cannot be found.
    """
    node_name = os.environ.get(NODE_NAME_ENV, "")
    if not node_name:
        raise MetadataError(f"{NODE_NAME_ENV} env var not set")

    try:
        node = client.get_node(node_name)
    except Exception as err:
        raise MetadataError(f"error getting Node {node_name}: {err}") from err

    if not node.provider_id:
        raise MetadataError("node providerID empty, cannot parse")

    match = _AWS_INSTANCE_ID.search(node.provider_id)
    if match is None:
        raise MetadataError("did not find aws instance ID in node providerID string")

    labels = node.labels or {}
    try:
        instance_type = labels[LABEL_INSTANCE_TYPE]
    except KeyError:
        raise MetadataError("could not retrieve instance type from topology label") from None
    try:
        region = labels[LABEL_TOPOLOGY_REGION]
    except KeyError:
        raise MetadataError("could not retrieve region from topology label") from None
    try:
        availability_zone = labels[LABEL_TOPOLOGY_ZONE]
    except KeyError:
        raise MetadataError("could not retrieve AZ from topology label") from None

    return Metadata(
        instance_id=match.group(0),
        instance_type=instance_type,
        region=region,
        availability_zone=availability_zone,
        # Every node has at least one attached ENI.
        num_attached_enis=1,
        num_block_device_mappings=0,
    )