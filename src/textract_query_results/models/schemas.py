"""Pydantic models for the process record and workflow messages."""

from pydantic import BaseModel, ConfigDict, Field


class IdMessage(BaseModel):
    """Workflow message carrying a process record identifier."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="Id")


class QueryResult(BaseModel):
    """A single Textract answer for a query."""

    answer: str
    confidence: float | None = None
    page: int | None = None


class DocumentQuery(BaseModel):
    """A named extraction request against the document."""

    query_id: str
    query_text: str | None = None
    result: list[QueryResult] = Field(default_factory=list)
    is_valid: bool = False


class ProcessData(BaseModel):
    """Workflow state for one document, persisted between pipeline stages.

    Attributes written by other stages are kept as extra fields so a
    load/save cycle does not drop them.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    external_id: str | None = None
    input_bucket: str | None = None
    input_key: str | None = None
    output_bucket: str | None = None
    textract_job_id: str | None = None
    textract_task_token: str | None = None
    textract_output_key: str | None = None
    queries: list[DocumentQuery] = Field(default_factory=list)

    def clear_textract_job_data(self) -> None:
        """Drop the fields that track the finished Textract job."""
        self.textract_job_id = None
        self.textract_task_token = None
        self.textract_output_key = None
