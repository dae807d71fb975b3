"""Infrastructure layer for AWS client wrappers and DI container."""

from textract_query_results.infrastructure.dynamodb_client import DynamoDBClient
from textract_query_results.infrastructure.s3_client import S3Client

__all__ = [
    "DynamoDBClient",
    "S3Client",
]
