"""S3 client wrapper for AWS operations."""

import json
import logging
from typing import Any

from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)


class S3Client:
    """Handles S3 operations."""

    def __init__(self, client: Any):
        self._client = client

    def list_objects(self, bucket: str, prefix: str = "") -> list[dict]:
        """List all objects in the bucket under prefix.

        Raises:
            ClientError: If the listing fails.
        """
        try:
            objects = []
            paginator = self._client.get_paginator("list_objects_v2")

            for page in paginator.paginate(Bucket=bucket, Prefix=prefix):
                objects.extend(page.get("Contents", []))

            return objects
        except ClientError as e:
            logger.error("Failed to list objects in s3://%s/%s: %s", bucket, prefix, e)
            raise

    def get_object_content(self, bucket: str, key: str) -> str:
        """Get object content as string.

        Raises:
            ClientError: If the object cannot be read.
        """
        try:
            response = self._client.get_object(Bucket=bucket, Key=key)
            return response["Body"].read().decode("utf-8")
        except ClientError as e:
            logger.error("Failed to get object s3://%s/%s: %s", bucket, key, e)
            raise

    def get_object_json(self, bucket: str, key: str) -> Any:
        """Get object content parsed as JSON."""
        return json.loads(self.get_object_content(bucket, key))
