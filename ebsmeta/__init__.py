"""Instance metadata discovery and EBS volume attachment limits for EC2 nodes."""

__version__ = "0.1.0"

__all__ = ["constants", "metadata", "metadata_ec2", "metadata_k8s", "service", "volume_limits"]