"""Helpers for reading answers out of Textract document analysis."""

from textract_query_results.models.schemas import QueryResult
from textract_query_results.models.textract import (
    BLOCK_TYPE_QUERY,
    RELATIONSHIP_ANSWER,
    TextractDataModel,
)


def get_document_query_results(model: TextractDataModel, query_id: str) -> list[QueryResult]:
    """Collect the answers Textract returned for the query with alias query_id.

    Query blocks are visited in document order and answers in relationship
    order. Answer ids that do not resolve to a block are skipped.
    """
    results = []

    for block in model.get_blocks_by_type(BLOCK_TYPE_QUERY):
        if block.query is None or block.query.alias != query_id:
            continue

        for relationship in block.relationships:
            if relationship.type != RELATIONSHIP_ANSWER:
                continue

            for answer_id in relationship.ids:
                answer = model.get_block_by_id(answer_id)
                if answer is None:
                    continue
                results.append(
                    QueryResult(
                        answer=answer.text or "",
                        confidence=answer.confidence,
                        page=answer.page,
                    )
                )

    return results
