"""Service for loading and saving process records in DynamoDB."""

import logging
from decimal import Decimal
from typing import Any

from botocore.exceptions import ClientError

from textract_query_results.exceptions import (
    ProcessDataConflictError,
    ProcessDataNotFoundError,
)
from textract_query_results.infrastructure.dynamodb_client import DynamoDBClient
from textract_query_results.models.schemas import ProcessData

logger = logging.getLogger(__name__)


def _plain_numbers(value: Any) -> Any:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, dict):
        return {k: _plain_numbers(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_plain_numbers(v) for v in value]
    return value


def _decimal_floats(value: Any) -> Any:
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {k: _decimal_floats(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_decimal_floats(v) for v in value]
    return value


def from_item(item: dict[str, Any]) -> dict[str, Any]:
    """Prepare a stored item for validation.

    Numbers in declared fields come back as Decimal and are turned into int
    or float. Attributes owned by other stages are left exactly as the
    deserializer returned them (sets, Binary, Decimal) so they are written
    back with the same DynamoDB type.
    """
    return {
        name: _plain_numbers(value) if name in ProcessData.model_fields else value
        for name, value in item.items()
    }


def to_item(process_data: ProcessData) -> dict[str, Any]:
    """Convert a record to DynamoDB-ready values.

    None fields are dropped and floats become Decimal, which is the only
    number type the DynamoDB serializer accepts. Extra attributes are passed
    through untouched.
    """
    item = _decimal_floats(
        process_data.model_dump(include=set(ProcessData.model_fields), exclude_none=True)
    )
    item.update(process_data.model_extra or {})
    return item


class DataService:
    """Loads and saves ProcessData records."""

    def __init__(self, dynamodb_client: DynamoDBClient, table_name: str, key_name: str = "id"):
        self._dynamodb_client = dynamodb_client
        self._table_name = table_name
        self._key_name = key_name

    @property
    def table_name(self) -> str:
        return self._table_name

    def get_data(self, record_id: str) -> ProcessData:
        """Load a record by identifier.

        Raises:
            ProcessDataNotFoundError: If no record exists.
        """
        item = self._dynamodb_client.get_item(self._table_name, {self._key_name: record_id})
        if item is None:
            logger.error("No process data for %s in %s", record_id, self._table_name)
            raise ProcessDataNotFoundError(record_id)

        # The key attribute may be named differently from the model field
        item["id"] = item.pop(self._key_name, record_id)
        return ProcessData.model_validate(from_item(item))

    def save_data(self, process_data: ProcessData) -> None:
        """Persist a record that already exists in the table.

        Raises:
            ProcessDataConflictError: If the record was removed since it was loaded.
        """
        item = to_item(process_data)
        item.pop("id", None)
        item[self._key_name] = process_data.id

        try:
            self._dynamodb_client.put_item(
                self._table_name,
                item,
                condition_expression="attribute_exists(#pk)",
                expression_attribute_names={"#pk": self._key_name},
            )
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException":
                raise ProcessDataConflictError(process_data.id) from e
            raise

        logger.info("Saved process data %s", process_data.id)
