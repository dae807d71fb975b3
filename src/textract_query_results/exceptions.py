"""Exceptions raised while processing query results."""


class QueryResultsError(Exception):
    """Base exception for this stage."""

    pass


class ProcessDataNotFoundError(QueryResultsError):
    """Raised when no process record exists for an identifier."""

    def __init__(self, record_id: str) -> None:
        self.record_id = record_id
        super().__init__(f"Process data not found: {record_id}")


class ProcessDataConflictError(QueryResultsError):
    """Raised when the record disappeared before it could be saved."""

    def __init__(self, record_id: str) -> None:
        self.record_id = record_id
        super().__init__(f"Process data changed while saving: {record_id}")


class AnalysisOutputNotFoundError(QueryResultsError):
    """Raised when the Textract output location is missing or empty."""

    def __init__(self, bucket: str | None, key: str | None, reason: str = "") -> None:
        self.bucket = bucket
        self.key = key
        self.reason = reason
        message = f"Textract output not found: s3://{bucket or ''}/{key or ''}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
