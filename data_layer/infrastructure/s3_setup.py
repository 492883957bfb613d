"""S3 log arşivi bucket'ı.

Bucket yapısı:
  supply-chain-dashboard-{account_id}/
  └── agent-logs/
"""
import logging
import os

import boto3
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)

REGION = "us-west-2"
BUCKET_PREFIX = "supply-chain-dashboard"


def get_bucket_name(region: str = REGION) -> str:
    """SUPPLY_CHAIN_LOG_BUCKET yoksa account ID ile unique bucket adı oluşturur."""
    configured = os.environ.get("SUPPLY_CHAIN_LOG_BUCKET")
    if configured:
        return configured
    sts = boto3.client("sts", region_name=region)
    account_id = sts.get_caller_identity()["Account"]
    return f"{BUCKET_PREFIX}-{account_id}"


def create_bucket(region: str = REGION) -> str:
    """S3 bucket oluşturur."""
    s3 = boto3.client("s3", region_name=region)
    bucket_name = get_bucket_name(region)

    try:
        if region == "us-east-1":
            s3.create_bucket(Bucket=bucket_name)
        else:
            s3.create_bucket(
                Bucket=bucket_name,
                CreateBucketConfiguration={"LocationConstraint": region},
            )
        logger.info("Bucket oluşturuldu: %s", bucket_name)
    except ClientError as e:
        if e.response["Error"]["Code"] in ("BucketAlreadyOwnedByYou", "BucketAlreadyExists"):
            logger.info("Bucket zaten mevcut: %s", bucket_name)
        else:
            raise

    return bucket_name


def delete_bucket(region: str = REGION):
    """Bucket ve içeriğini siler (dikkatli kullan)."""
    s3 = boto3.resource("s3", region_name=region)
    bucket_name = get_bucket_name(region)
    try:
        bucket = s3.Bucket(bucket_name)
        bucket.objects.all().delete()
        bucket.delete()
        logger.info("%s silindi", bucket_name)
    except ClientError:
        logger.info("%s bulunamadı", bucket_name)
