"""Tests for document analysis helpers."""

from textract_query_results.models.textract import TextractDataModel
from textract_query_results.utils.document_analysis import get_document_query_results


class TestGetDocumentQueryResults:
    """Tests for get_document_query_results."""

    def test_single_answer(self, textract_model):
        """Test a query with one answer returns it with confidence and page."""
        results = get_document_query_results(textract_model, "invoice_number")

        assert len(results) == 1
        assert results[0].answer == "1234"
        assert results[0].confidence == 98.5
        assert results[0].page == 1

    def test_multiple_answers_keep_order(self, textract_model):
        """Test answers are returned in relationship order."""
        results = get_document_query_results(textract_model, "total")

        assert [r.answer for r in results] == ["$10.00", "$12.00"]
        assert [r.page for r in results] == [1, 2]

    def test_query_without_answers(self, textract_model):
        """Test a query Textract could not answer returns no results."""
        assert get_document_query_results(textract_model, "due_date") == []

    def test_unknown_alias(self, textract_model):
        """Test an alias that was never asked returns no results."""
        assert get_document_query_results(textract_model, "not_asked") == []

    def test_same_alias_on_several_pages(self):
        """Test answers from every matching query block are collected."""
        model = TextractDataModel.from_responses([
            {
                "Blocks": [
                    {
                        "BlockType": "QUERY",
                        "Id": "q-1",
                        "Query": {"Text": "Name?", "Alias": "name", "Pages": ["1"]},
                        "Relationships": [{"Type": "ANSWER", "Ids": ["a-1"]}],
                    },
                    {"BlockType": "QUERY_RESULT", "Id": "a-1", "Text": "Ada", "Confidence": 91.0, "Page": 1},
                    {
                        "BlockType": "QUERY",
                        "Id": "q-2",
                        "Query": {"Text": "Name?", "Alias": "name", "Pages": ["2"]},
                        "Relationships": [{"Type": "ANSWER", "Ids": ["a-2"]}],
                    },
                    {"BlockType": "QUERY_RESULT", "Id": "a-2", "Text": "Lovelace", "Confidence": 72.0, "Page": 2},
                ]
            }
        ])

        results = get_document_query_results(model, "name")

        assert [r.answer for r in results] == ["Ada", "Lovelace"]

    def test_skips_unresolved_and_non_answer_relationships(self):
        """Test dangling ids and other relationship types are ignored."""
        model = TextractDataModel.from_responses([
            {
                "Blocks": [
                    {
                        "BlockType": "QUERY",
                        "Id": "q-1",
                        "Query": {"Text": "Total?", "Alias": "total"},
                        "Relationships": [
                            {"Type": "CHILD", "Ids": ["w-1"]},
                            {"Type": "ANSWER", "Ids": ["missing", "a-1"]},
                        ],
                    },
                    {"BlockType": "WORD", "Id": "w-1", "Text": "noise"},
                    {"BlockType": "QUERY_RESULT", "Id": "a-1", "Text": "42"},
                ]
            }
        ])

        results = get_document_query_results(model, "total")

        assert len(results) == 1
        assert results[0].answer == "42"
        assert results[0].confidence is None

    def test_query_without_alias_is_not_matched(self):
        """Test a query block with no alias never matches."""
        model = TextractDataModel.from_responses([
            {
                "Blocks": [
                    {
                        "BlockType": "QUERY",
                        "Id": "q-1",
                        "Query": {"Text": "Total?"},
                        "Relationships": [{"Type": "ANSWER", "Ids": ["a-1"]}],
                    },
                    {"BlockType": "QUERY_RESULT", "Id": "a-1", "Text": "42"},
                ]
            }
        ])

        assert get_document_query_results(model, "total") == []
