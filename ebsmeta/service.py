"""Choosing a source of instance metadata."""

from __future__ import annotations

import logging
from typing import Callable

from .metadata import EC2Metadata, Metadata, MetadataError
from .metadata_ec2 import ec2_metadata_instance_info
from .metadata_k8s import KubernetesClient, kubernetes_api_instance_info

logger = logging.getLogger(__name__)


def new_metadata_service(
    ec2_metadata_client: Callable[[], EC2Metadata],
    k8s_api_client: Callable[[], KubernetesClient],
    region: str,
) -> Metadata:
    """Return instance metadata from EC2 metadata, falling back to the Kubernetes API.

    Raises MetadataError when neither source can be used, or when the chosen
    source fails.
    """
    logger.info("retrieving instance data from ec2 metadata")
    try:
        svc = ec2_metadata_client()
    except Exception as err:
        logger.info("error creating ec2 metadata client: %s", err)
    else:
        if not svc.available():
            logger.info("ec2 metadata is not available")
        else:
            logger.info("ec2 metadata is available")
            return ec2_metadata_instance_info(svc, region)

    logger.info("retrieving instance data from kubernetes api")
    try:
        client = k8s_api_client()
    except Exception as err:
        logger.info("error creating kubernetes api client: %s", err)
    else:
        logger.info("kubernetes api is available")
        return kubernetes_api_instance_info(client)

    raise MetadataError("error getting instance data from ec2 metadata or kubernetes api")