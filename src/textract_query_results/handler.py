"""AWS Lambda handler for Textract query results.

Invoked by Step Functions after the asynchronous Textract analysis job
completes. Copies the query answers into the stored process record and
passes the record id on to the next state.
"""

import json
import logging

from textract_query_results.config import config
from textract_query_results.handlers.process import process_query_results
from textract_query_results.infrastructure.dependency_injection import DependenciesContainer
from textract_query_results.models.schemas import IdMessage

# Configure root logger for Lambda (all modules will inherit this)
logging.getLogger().setLevel(logging.INFO)
logger = logging.getLogger(__name__)


def lambda_handler(event: dict, context) -> dict:
    """Lambda handler invoked as a Step Functions task.

    Args:
        event: Message with the process record id, e.g. {"Id": "..."}.
        context: Lambda context object.

    Returns:
        The same message, for the next state.

    Raises:
        Any failure is logged and re-raised so the state machine can retry or catch it.
    """
    logger.info("Received event: %s", json.dumps(event))

    try:
        message = IdMessage.model_validate(event)

        config.validate()

        container = DependenciesContainer()
        data_service = container.data_service()
        textract_service = container.textract_service()

        result = process_query_results(
            message=message,
            data_service=data_service,
            textract_service=textract_service,
        )

        logger.info("Query results processed for %s", result.id)
        return result.model_dump(by_alias=True)

    except Exception as e:
        logger.exception("Failed to process query results: %s", e)
        raise
