"""Models package."""

from textract_query_results.models.schemas import (
    DocumentQuery,
    IdMessage,
    ProcessData,
    QueryResult,
)
from textract_query_results.models.textract import (
    Block,
    QueryInfo,
    Relationship,
    TextractDataModel,
)

__all__ = [
    "Block",
    "DocumentQuery",
    "IdMessage",
    "ProcessData",
    "QueryInfo",
    "QueryResult",
    "Relationship",
    "TextractDataModel",
]
