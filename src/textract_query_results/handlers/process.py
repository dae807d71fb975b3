"""Handler for merging Textract query answers into the process record."""

import logging

from textract_query_results.models.schemas import IdMessage
from textract_query_results.services.data_service import DataService
from textract_query_results.services.textract_service import TextractService
from textract_query_results.utils.document_analysis import get_document_query_results

logger = logging.getLogger(__name__)


def process_query_results(
    message: IdMessage,
    data_service: DataService,
    textract_service: TextractService,
) -> IdMessage:
    """Apply the finished Textract analysis to the record named by message.

    1. Load the process record
    2. Load the analysis blocks the Textract job wrote to S3
    3. For each query: append its answers and mark it valid if any were found
    4. Clear the Textract job fields and save the record

    Args:
        message: Message with the process record id.
        data_service: Store for process records.
        textract_service: Reader for Textract output.

    Returns:
        The input message, unchanged.
    """
    process_data = data_service.get_data(message.id)

    textract_model = textract_service.get_blocks_for_analysis(
        process_data.output_bucket,
        process_data.textract_output_key,
        job_id=process_data.textract_job_id,
    )

    valid = 0
    for query in process_data.queries:
        results = get_document_query_results(textract_model, query.query_id)
        query.result.extend(results)
        query.is_valid = len(results) > 0
        if query.is_valid:
            valid += 1
        logger.info("Query %s: %d results", query.query_id, len(results))

    logger.info(
        "Matched %d of %d queries for %s",
        valid,
        len(process_data.queries),
        process_data.id,
    )

    # Stage is done, the task token must not be reused
    process_data.clear_textract_job_data()

    data_service.save_data(process_data)
    return message
