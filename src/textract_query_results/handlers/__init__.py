"""Handlers package."""

from textract_query_results.handlers.process import process_query_results

__all__ = [
    "process_query_results",
]
