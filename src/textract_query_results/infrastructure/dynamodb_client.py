"""DynamoDB client wrapper for AWS operations."""

import logging
from typing import Any

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)


class DynamoDBClient:
    """Handles DynamoDB item reads and writes using plain Python values."""

    def __init__(self, client: Any):
        """
        Initialize DynamoDB client wrapper.

        Args:
            client: boto3 DynamoDB client instance.
        """
        self._client = client
        self._serializer = TypeSerializer()
        self._deserializer = TypeDeserializer()

    def get_item(self, table_name: str, key: dict[str, Any]) -> dict[str, Any] | None:
        """
        Read a single item by primary key.

        Args:
            table_name: DynamoDB table name.
            key: Primary key attributes as plain values.

        Returns:
            The item as plain values, or None if it does not exist.
        """
        try:
            response = self._client.get_item(
                TableName=table_name,
                Key=self._serialize(key),
                ConsistentRead=True,
            )
        except ClientError as e:
            logger.error("Failed to get item %s from %s: %s", key, table_name, e)
            raise

        item = response.get("Item")
        if item is None:
            return None
        return {name: self._deserializer.deserialize(value) for name, value in item.items()}

    def put_item(
        self,
        table_name: str,
        item: dict[str, Any],
        condition_expression: str | None = None,
        expression_attribute_names: dict[str, str] | None = None,
    ) -> None:
        """
        Write an item, optionally guarded by a condition expression.

        Raises:
            ClientError: On any failure, including a failed condition
                (code ConditionalCheckFailedException).
        """
        request: dict[str, Any] = {
            "TableName": table_name,
            "Item": self._serialize(item),
        }
        if condition_expression:
            request["ConditionExpression"] = condition_expression
        if expression_attribute_names:
            request["ExpressionAttributeNames"] = expression_attribute_names

        try:
            self._client.put_item(**request)
            logger.info("Saved item to %s", table_name)
        except ClientError as e:
            logger.error("Failed to put item to %s: %s", table_name, e)
            raise

    def _serialize(self, values: dict[str, Any]) -> dict[str, Any]:
        return {name: self._serializer.serialize(value) for name, value in values.items()}
