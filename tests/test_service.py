import pytest

from ebsmeta.metadata import (
    BLOCK_DEVICES_ENDPOINT,
    ENIS_ENDPOINT,
    OUTPOST_ARN_ENDPOINT,
    InstanceIdentityDocument,
    MetadataError,
    parse_arn,
)
from ebsmeta.metadata_k8s import Node
from ebsmeta.service import new_metadata_service

NODE_NAME = "ip-123-45-67-890.us-west-2.compute.internal"
STD_INSTANCE_ID = "i-abcdefgh123456789"
STD_INSTANCE_TYPE = "t2.medium"
STD_REGION = "us-west-2"
STD_AZ = "us-west-2b"
SNOW_REGION = "snow"
SNOW_AZ = "snow"

RAW_OUTPOST_ARN = "arn:aws:outposts:us-west-2:111111111111:outpost/op-0aaa000a0aaaa00a0"
VALID_OUTPOST_ARN = parse_arn(RAW_OUTPOST_ARN.replace("outpost/", ""))

STD_DOC = InstanceIdentityDocument(STD_INSTANCE_ID, STD_INSTANCE_TYPE, STD_REGION, STD_AZ)
STD_PROVIDER_ID = f"aws:///{STD_AZ}/{STD_INSTANCE_ID}"


class FakeEC2Metadata:
    def __init__(self, available, document=None, document_error=None, responses=None):
        self._available = available
        self.document = document or InstanceIdentityDocument()
        self.document_error = document_error
        self.responses = responses or {}

    def available(self):
        return self._available

    def get_metadata(self, path):
        value = self.responses[path]
        if isinstance(value, Exception):
            raise value
        return value

    def get_instance_identity_document(self):
        if self.document_error is not None:
            raise self.document_error
        return self.document


class FakeKubernetesClient:
    def __init__(self, node=None, error=None):
        self.node = node
        self.error = error

    def get_node(self, name):
        if self.error is not None:
            raise self.error
        if self.node is None or self.node.name != name:
            raise LookupError(f'nodes "{name}" not found')
        return self.node


def responses(eni="00:00:00:00:00:00", block="", outpost=None):
    return {
        ENIS_ENDPOINT: eni,
        BLOCK_DEVICES_ENDPOINT: block,
        OUTPOST_ARN_ENDPOINT: Exception("404") if outpost is None else outpost,
    }


def node(labels, provider_id=STD_PROVIDER_ID):
    return Node(NODE_NAME, provider_id, labels)


ALL_LABELS = {
    "node.kubernetes.io/instance-type": STD_INSTANCE_TYPE,
    "topology.kubernetes.io/region": STD_REGION,
    "topology.kubernetes.io/zone": STD_AZ,
}

CASES = [
    pytest.param(
        dict(available=True, document=STD_DOC, responses=responses()),
        None, "", STD_REGION, 1, 0, None,
        id="success: normal",
    ),
    pytest.param(
        dict(available=True, document=STD_DOC, responses=responses(outpost=RAW_OUTPOST_ARN)),
        None, "", STD_REGION, 1, 0, VALID_OUTPOST_ARN,
        id="success: outpost-arn is available",
    ),
    pytest.param(
        dict(available=True, document=STD_DOC, responses=responses(outpost="foo")),
        None, "", STD_REGION, 1, 0, None,
        id="success: outpost-arn is invalid",
    ),
    pytest.param(
        dict(available=True, document=STD_DOC, responses=responses(outpost=Exception("404"))),
        None, "", STD_REGION, 1, 0, None,
        id="success: outpost-arn is not found",
    ),
    pytest.param(
        dict(available=False),
        FakeKubernetesClient(node(dict(ALL_LABELS))), NODE_NAME, STD_REGION, 1, 0, None,
        id="success: metadata not available, used k8s api",
    ),
    pytest.param(
        dict(available=True, document=STD_DOC,
             responses=responses(eni="00:00:00:00:00:00\n00:00:00:00:00:01")),
        None, "", STD_REGION, 2, 0, None,
        id="success: correct number of ENIs",
    ),
    pytest.param(
        dict(available=True, document=STD_DOC,
             responses=responses(block="ami\nroot\nebs1\nebs2")),
        None, "", STD_REGION, 1, 2, None,
        id="success: correct number of block device mappings",
    ),
    pytest.param(
        dict(available=True,
             document=InstanceIdentityDocument(STD_INSTANCE_ID, STD_INSTANCE_TYPE, "", ""),
             responses=responses()),
        None, "", SNOW_REGION, 1, 0, None,
        id="success: region from session is snow",
    ),
]


@pytest.mark.parametrize(
    "ec2, k8s, node_env, region, enis, block_devices, outpost", CASES
)
def test_success(monkeypatch, ec2, k8s, node_env, region, enis, block_devices, outpost):
    monkeypatch.setenv("CSI_NODE_NAME", node_env)
    k8s_calls = []

    def k8s_factory():
        k8s_calls.append(True)
        return k8s or FakeKubernetesClient()

    m = new_metadata_service(lambda: FakeEC2Metadata(**ec2), k8s_factory, region)
    assert m.instance_id == STD_INSTANCE_ID
    assert m.instance_type == STD_INSTANCE_TYPE
    assert m.region in (STD_REGION, SNOW_REGION)
    assert m.availability_zone in (STD_AZ, SNOW_AZ)
    assert m.outpost_arn == outpost
    assert m.num_attached_enis == enis
    assert m.num_block_device_mappings == block_devices
    if ec2["available"]:
        assert k8s_calls == []


ERROR_CASES = [
    pytest.param(
        dict(available=False),
        FakeKubernetesClient(error=RuntimeError("client failure")), NODE_NAME,
        f"error getting Node {NODE_NAME}: client failure",
        id="failure: k8s client error",
    ),
    pytest.param(
        dict(available=False), FakeKubernetesClient(), "",
        "CSI_NODE_NAME env var not set",
        id="failure: node name env var not set",
    ),
    pytest.param(
        dict(available=False), FakeKubernetesClient(node({}, provider_id="")), NODE_NAME,
        "node providerID empty, cannot parse",
        id="failure: no provider ID",
    ),
    pytest.param(
        dict(available=False),
        FakeKubernetesClient(node({
            "node.kubernetes.io/instance-type": STD_INSTANCE_TYPE,
            "topology.kubernetes.io/zone": STD_AZ,
        })),
        NODE_NAME,
        "could not retrieve region from topology label",
        id="failure: could not retrieve region",
    ),
    pytest.param(
        dict(available=False),
        FakeKubernetesClient(node({
            "node.kubernetes.io/instance-type": STD_INSTANCE_TYPE,
            "topology.kubernetes.io/region": STD_REGION,
        })),
        NODE_NAME,
        "could not retrieve AZ from topology label",
        id="failure: could not retrieve AZ",
    ),
    pytest.param(
        dict(available=False),
        FakeKubernetesClient(node(dict(ALL_LABELS), provider_id="aws:///us-west-2b/i-")),
        NODE_NAME,
        "did not find aws instance ID in node providerID string",
        id="failure: invalid instance id",
    ),
    pytest.param(
        dict(available=True, document_error=RuntimeError("foo")), None, "",
        "could not get EC2 instance identity metadata: foo",
        id="fail: identity document error",
    ),
    pytest.param(
        dict(available=True,
             document=InstanceIdentityDocument("", STD_INSTANCE_TYPE, STD_REGION, STD_AZ)),
        None, "",
        "could not get valid EC2 instance ID",
        id="fail: empty instance",
    ),
    pytest.param(
        dict(available=True,
             document=InstanceIdentityDocument(STD_INSTANCE_ID, STD_INSTANCE_TYPE, "", STD_AZ)),
        None, "",
        "could not get valid EC2 region",
        id="fail: empty region",
    ),
    pytest.param(
        dict(available=True,
             document=InstanceIdentityDocument(STD_INSTANCE_ID, STD_INSTANCE_TYPE, STD_REGION, "")),
        None, "",
        "could not get valid EC2 availability zone",
        id="fail: empty az",
    ),
    pytest.param(
        dict(available=True, document=STD_DOC, responses=responses(outpost=Exception("405"))),
        None, "",
        "something went wrong while getting EC2 outpost arn: 405",
        id="fail: outpost-arn failed",
    ),
]


@pytest.mark.parametrize("ec2, k8s, node_env, expected", ERROR_CASES)
def test_errors(monkeypatch, ec2, k8s, node_env, expected):
    monkeypatch.setenv("CSI_NODE_NAME", node_env)
    with pytest.raises(MetadataError) as info:
        new_metadata_service(
            lambda: FakeEC2Metadata(**ec2),
            lambda: k8s or FakeKubernetesClient(),
            STD_REGION,
        )
    assert str(info.value) == expected


def test_ec2_client_creation_failure_falls_back_to_k8s(monkeypatch):
    monkeypatch.setenv("CSI_NODE_NAME", NODE_NAME)

    def broken_ec2():
        raise RuntimeError("no session")

    m = new_metadata_service(
        broken_ec2, lambda: FakeKubernetesClient(node(dict(ALL_LABELS))), STD_REGION
    )
    assert m.instance_id == STD_INSTANCE_ID
    assert m.num_attached_enis == 1


def test_both_sources_unavailable(monkeypatch):
    monkeypatch.setenv("CSI_NODE_NAME", NODE_NAME)

    def broken_k8s():
        raise RuntimeError("not in cluster")

    with pytest.raises(MetadataError) as info:
        new_metadata_service(lambda: FakeEC2Metadata(False), broken_k8s, STD_REGION)
    assert str(info.value) == "error getting instance data from ec2 metadata or kubernetes api"