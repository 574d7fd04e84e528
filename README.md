# ebsmeta

`ebsmeta` works out what a node needs to know before it attaches EBS volumes:

- **Instance metadata**: instance ID, instance type, region, availability zone,
  the number of attached network interfaces and block device mappings, and the
  Outpost ARN when the instance runs on an Outpost.
- **Volume limits**: whether an instance type is Nitro-based, how many
  attachments it allows, any per-type EBS volume cap, and how many NVMe
  instance-store volumes it has.

It has no dependencies outside the standard library. The metadata sources are
supplied by the caller, so any HTTP client or Kubernetes client can be plugged
in.

## Installation

```
pip install ebsmeta
```

## Volume limits

```python
from ebsmeta.volume_limits import (
    is_nitro_instance_type,
    get_max_attachments,
    get_ebs_limit_for_instance_type,
    get_nvme_instance_store_volumes_for_instance_type,
)

nitro = is_nitro_instance_type("m5.large")          # True
get_max_attachments(nitro)                          # 28 (39 for non-Nitro)
get_ebs_limit_for_instance_type("mac1.metal")       # 16
get_ebs_limit_for_instance_type("m5.large")         # None: no special cap
get_nvme_instance_store_volumes_for_instance_type("i3.8xlarge")  # 4
```

- `is_nitro_instance_type` raises `ValueError` if the instance type is not of
  the form `family.size`. Families such as `t2`, `c4`, `m4`, `p3` and `x1` are
  treated as non-Nitro; every other family is Nitro.
- `get_ebs_limit_for_instance_type` returns a listed per-type cap first, then
  19 for high-memory `u-*.metal` types, 27 for other `u-*` types, 31 for any
  other `*.metal` type, and `None` otherwise.
- `get_nvme_instance_store_volumes_for_instance_type` returns 0 for types not
  in its table.

## Instance metadata

`new_metadata_service` tries the EC2 instance metadata service first and falls
back to the Kubernetes API. Each source is passed as a zero-argument factory:

```python
from ebsmeta.service import new_metadata_service

metadata = new_metadata_service(make_ec2_metadata, make_k8s_client, "us-west-2")
print(metadata.instance_id, metadata.availability_zone)
```

- `make_ec2_metadata()` returns an object implementing
  `ebsmeta.metadata.EC2Metadata`: `available()`, `get_metadata(path)` and
  `get_instance_identity_document()` (returning an
  `ebsmeta.metadata.InstanceIdentityDocument`). If the factory raises, or
  `available()` is false, the Kubernetes source is used instead.
- `make_k8s_client()` returns an `ebsmeta.metadata_k8s.KubernetesClient`, whose
  `get_node(name)` returns an `ebsmeta.metadata_k8s.Node`. The node name is
  read from the `CSI_NODE_NAME` environment variable; the instance ID comes
  from the node's provider ID and the type, region and zone from its
  `node.kubernetes.io/instance-type`, `topology.kubernetes.io/region` and
  `topology.kubernetes.io/zone` labels.

The result is an `ebsmeta.metadata.Metadata`. Failures are raised as
`ebsmeta.metadata.MetadataError`; when neither source can be created the
message is "error getting instance data from ec2 metadata or kubernetes api".

Each source can also be queried directly with
`ebsmeta.metadata_ec2.ec2_metadata_instance_info(svc, region_from_session)` or
`ebsmeta.metadata_k8s.kubernetes_api_instance_info(client)`.

From EC2 metadata:

- the number of ENIs is the number of lines at `network/interfaces/macs`;
- the number of block device mappings is the count of `ebs` entries at
  `block-device-mapping`, and is 0 in the `snow` region, where it is not
  queried;
- when the identity document has no region or zone and the session region is
  `snow`, that region is used for both;
- an `outpost-arn` query that fails with a 404 means the instance is not on an
  Outpost; any other failure is raised. An ARN that cannot be parsed is logged
  and left out.

Outpost ARNs are parsed with `ebsmeta.metadata.parse_arn`, which returns an
`ebsmeta.metadata.Arn` and raises `ValueError` for a malformed value.

## Constants

`ebsmeta.constants` holds the volume parameter keys, tag names, filesystem
type names and defaults used in provisioning, such as `VOLUME_TYPE_KEY`,
`FS_TYPE_EXT4` and `DEFAULT_BLOCK_SIZE`.

## What it does not do

`ebsmeta` is a library only. It has no command, does not talk to the EC2
metadata service or the Kubernetes API on its own (the caller supplies the
clients), and does not create, attach, mount or format volumes.

## Running the tests

```
pip install -e ".[test]"
pytest
```