"""Services package."""

from textract_query_results.services.data_service import DataService
from textract_query_results.services.textract_service import TextractService

__all__ = [
    "DataService",
    "TextractService",
]
