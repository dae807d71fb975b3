"""Shared fixtures for query results tests."""

import pytest

from textract_query_results.models.schemas import DocumentQuery, ProcessData
from textract_query_results.models.textract import TextractDataModel


def query_block(block_id: str, alias: str, answer_ids: list[str], text: str = "") -> dict:
    """Build a raw Textract QUERY block."""
    block = {
        "BlockType": "QUERY",
        "Id": block_id,
        "Query": {"Text": text or f"What is {alias}?", "Alias": alias},
    }
    if answer_ids:
        block["Relationships"] = [{"Type": "ANSWER", "Ids": answer_ids}]
    return block


def answer_block(block_id: str, text: str, confidence: float = 90.0, page: int = 1) -> dict:
    """Build a raw Textract QUERY_RESULT block."""
    return {
        "BlockType": "QUERY_RESULT",
        "Id": block_id,
        "Text": text,
        "Confidence": confidence,
        "Page": page,
    }


@pytest.fixture
def analysis_response() -> dict:
    """GetDocumentAnalysis page with answers for two of three aliases."""
    return {
        "DocumentMetadata": {"Pages": 2},
        "JobStatus": "SUCCEEDED",
        "Blocks": [
            {"BlockType": "PAGE", "Id": "page-1", "Page": 1},
            {"BlockType": "LINE", "Id": "line-1", "Text": "Invoice 1234", "Page": 1},
            query_block("q-1", "invoice_number", ["a-1"]),
            answer_block("a-1", "1234", confidence=98.5, page=1),
            query_block("q-2", "total", ["a-2", "a-3"]),
            answer_block("a-2", "$10.00", confidence=87.25, page=1),
            answer_block("a-3", "$12.00", confidence=40.0, page=2),
            query_block("q-3", "due_date", []),
        ],
    }


@pytest.fixture
def textract_model(analysis_response) -> TextractDataModel:
    return TextractDataModel.from_responses([analysis_response])


@pytest.fixture
def process_data() -> ProcessData:
    return ProcessData(
        id="rec-1",
        external_id="ext-1",
        input_bucket="input-bucket",
        input_key="docs/invoice.pdf",
        output_bucket="output-bucket",
        textract_job_id="job-1",
        textract_task_token="token-1",
        textract_output_key="textract/rec-1",
        queries=[
            DocumentQuery(query_id="invoice_number", query_text="What is the invoice number?"),
            DocumentQuery(query_id="total", query_text="What is the total?"),
            DocumentQuery(query_id="due_date", query_text="When is it due?"),
        ],
    )
