"""S3 upload storage adapter."""

import logging
from typing import Any

import boto3

logger = logging.getLogger(__name__)


class S3Store:
    """Stores uploads as public-read objects in one bucket."""

    def __init__(
        self,
        bucket: str,
        region: str | None = None,
        public_base_url: str | None = None,
        client: Any | None = None,
    ):
        self.bucket = bucket
        self.region = region
        self._client = client if client is not None else boto3.client("s3", region_name=region)
        if public_base_url:
            self.public_base_url = public_base_url.rstrip("/")
        elif region:
            self.public_base_url = f"https://{bucket}.s3.{region}.amazonaws.com"
        else:
            self.public_base_url = f"https://{bucket}.s3.amazonaws.com"

    def save(self, key: str, data: bytes, content_type: str) -> str:
        """Upload bytes and return the object's public URL. ClientError propagates."""
        self._client.put_object(
            Bucket=self.bucket,
            Key=key,
            Body=data,
            ContentType=content_type,
            ACL="public-read",
        )
        logger.info("Uploaded s3://%s/%s (%d bytes)", self.bucket, key, len(data))
        return f"{self.public_base_url}/{key}"
