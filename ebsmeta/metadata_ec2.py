"""Instance metadata gathered from the EC2 instance metadata service."""

from __future__ import annotations

import logging

from .metadata import (
    BLOCK_DEVICES_ENDPOINT,
    EC2Metadata,
    ENIS_ENDPOINT,
    OUTPOST_ARN_ENDPOINT,
    Metadata,
    MetadataError,
    parse_arn,
)

logger = logging.getLogger(__name__)

_SNOW_REGION = "snow"


def _is_snow_region(region: str) -> bool:
    return region == _SNOW_REGION


def ec2_metadata_instance_info(svc: EC2Metadata, region_from_session: str) -> Metadata:
    """Build instance metadata from the EC2 instance metadata service.

    Raises MetadataError when a required value is missing or a query fails.
    """
    logger.info(
        "Retrieving EC2 instance identity metadata (region from session: %r)",
        region_from_session,
    )
    try:
        doc = svc.get_instance_identity_document()
    except Exception as err:
        raise MetadataError(f"could not get EC2 instance identity metadata: {err}") from err

    if not doc.instance_id:
        raise MetadataError("could not get valid EC2 instance ID")
    if not doc.instance_type:
        raise MetadataError("could not get valid EC2 instance type")

    session_is_snow = bool(region_from_session) and _is_snow_region(region_from_session)

    region = doc.region
    if not region:
        if not session_is_snow:
            raise MetadataError("could not get valid EC2 region")
        region = region_from_session

    availability_zone = doc.availability_zone
    if not availability_zone:
        if not session_is_snow:
            raise MetadataError("could not get valid EC2 availability zone")
        availability_zone = region_from_session

    try:
        enis = svc.get_metadata(ENIS_ENDPOINT)
    except Exception as err:
        raise MetadataError(f"could not get number of attached ENIs: {err}") from err
    if enis == "":
        raise MetadataError("the ENIs should not be empty")
    attached_enis = enis.count("\n") + 1

    block_device_mappings = 0
    if not _is_snow_region(region):
        try:
            mappings = svc.get_metadata(BLOCK_DEVICES_ENDPOINT)
        except Exception as err:
            raise MetadataError(
                f"could not get number of block device mappings: {err}"
            ) from err
        block_device_mappings = mappings.count("ebs")

    outpost_arn = None
    try:
        raw_outpost_arn = svc.get_metadata(OUTPOST_ARN_ENDPOINT)
    except Exception as err:
        # Instances outside an outpost answer with 404.
        if "404" not in str(err):
            raise MetadataError(
                f"something went wrong while getting EC2 outpost arn: {err}"
            ) from err
    else:
        logger.info("Running in an outpost environment with arn %s", raw_outpost_arn)
        raw_outpost_arn = raw_outpost_arn.replace("outpost/", "")
        try:
            outpost_arn = parse_arn(raw_outpost_arn)
        except ValueError:
            logger.info("Failed to parse the outpost arn %s", raw_outpost_arn)
        else:
            logger.info("Using outpost arn %s", outpost_arn)

    return Metadata(
        instance_id=doc.instance_id,
        instance_type=doc.instance_type,
        region=region,
        availability_zone=availability_zone,
        num_attached_enis=attached_enis,
        num_block_device_mappings=block_device_mappings,
        outpost_arn=outpost_arn,
    )