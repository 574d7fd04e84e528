"""Keys, tag names and defaults shared by the EBS CSI driver components."""

# Keys in a volume's publish context.
DEVICE_PATH_KEY = "devicePath"

# Keys in a volume's context.
VOLUME_ATTRIBUTE_PARTITION = "partition"

# Suffixes placed between a disk name and its partition number.
DISK_PARTITION_SUFFIX = ""
NVME_DISK_PARTITION_SUFFIX = "p"

# Keys in volume parameters.
VOLUME_TYPE_KEY = "type"
IOPS_PER_GB_KEY = "iopspergb"
ALLOW_AUTO_IOPS_PER_GB_INCREASE_KEY = "allowautoiopspergbincrease"
IOPS_KEY = "iops"
THROUGHPUT_KEY = "throughput"
ENCRYPTED_KEY = "encrypted"
KMS_KEY_ID_KEY = "kmskeyid"
PVC_NAME_KEY = "csi.storage.k8s.io/pvc/name"
PVC_NAMESPACE_KEY = "csi.storage.k8s.io/pvc/namespace"
PV_NAME_KEY = "csi.storage.k8s.io/pv/name"
VOLUME_SNAPSHOT_NAME_KEY = "csi.storage.k8s.io/volumesnapshot/name"
VOLUME_SNAPSHOT_NAMESPACE_KEY = "csi.storage.k8s.io/volumesnapshot/namespace"
VOLUME_SNAPSHOT_CONTENT_NAME_KEY = "csi.storage.k8s.io/volumesnapshotcontent/name"
BLOCK_EXPRESS_KEY = "blockexpress"
BLOCK_SIZE_KEY = "blocksize"
TAG_KEY_PREFIX = "tagSpecification"

# Keys in snapshot parameters.
FAST_SNAPSHOT_RESTORE_AVAILABILITY_ZONES = "fastsnapshotrestoreavailabilityzones"

# Volume tags and their values.
RESOURCE_LIFECYCLE_TAG_PREFIX = "kubernetes.io/cluster/"
RESOURCE_LIFECYCLE_OWNED = "owned"
NAME_TAG = "Name"
KUBERNETES_CLUSTER_TAG = "KubernetesCluster"
PVC_NAME_TAG = "kubernetes.io/created-for/pvc/name"
PVC_NAMESPACE_TAG = "kubernetes.io/created-for/pvc/namespace"
PV_NAME_TAG = "kubernetes.io/created-for/pv/name"

# Default command line values.
DEFAULT_CSI_ENDPOINT = "unix://tmp/csi.sock"

# Default block size (4 KiB) used when formatting a volume.
DEFAULT_BLOCK_SIZE = 4096

# Filesystem types.
FS_TYPE_EXT2 = "ext2"
FS_TYPE_EXT3 = "ext3"
FS_TYPE_EXT4 = "ext4"
FS_TYPE_XFS = "xfs"
FS_TYPE_NTFS = "ntfs"

# Filesystems on which a custom block size is not supported.
BLOCK_SIZE_EXCLUDED_FS_TYPES = frozenset({FS_TYPE_NTFS})