"""Tests for locating text in a linearized document."""

from __future__ import annotations

from extratext.api_types import Document
from extratext.indexer import LinearText, linearize
from extratext.operations import TextRange
from extratext.ranges import find_range
from tests.helpers import load_golden, plain_document


class TestFindRange:
    def test_hello_world(self) -> None:
        linear = LinearText.from_text("Hello World", end_index=13)
        assert find_range(linear, "World") == TextRange(7, 12)

    def test_range_is_flat_position_plus_one(self) -> None:
        linear = linearize(plain_document("Hello World"))
        assert find_range(linear, "Hello") == TextRange(1, 6)
        assert find_range(linear, "o W") == TextRange(5, 8)

    def test_first_occurrence_only(self) -> None:
        linear = linearize(plain_document("echo echo echo"))
        assert find_range(linear, "echo") == TextRange(1, 5)

    def test_case_sensitive(self) -> None:
        linear = linearize(plain_document("Hello World"))
        assert find_range(linear, "world") is None

    def test_literal_not_regex(self) -> None:
        linear = linearize(plain_document("price: 5.00 (net)"))
        assert find_range(linear, "5.00 (net)") == TextRange(8, 18)
        assert find_range(linear, "5.0.") is None

    def test_not_found(self) -> None:
        linear = linearize(plain_document("Hello World"))
        assert find_range(linear, "Goodbye") is None

    def test_empty_needle_never_matches(self) -> None:
        linear = linearize(plain_document("Hello World"))
        assert find_range(linear, "") is None

    def test_empty_text(self) -> None:
        assert find_range(LinearText.from_text(""), "anything") is None

    def test_match_across_paragraphs(self) -> None:
        linear = linearize(plain_document("one", "two"))
        assert find_range(linear, "one\ntwo") == TextRange(1, 8)

    def test_surrogate_pairs_and_tables(self) -> None:
        linear = linearize(Document.model_validate(load_golden("mixed_structure")))

        assert find_range(linear, "World") == TextRange(10, 15)
        assert find_range(linear, "\U0001f600") == TextRange(7, 9)
        assert find_range(linear, "Goodbye") == TextRange(25, 32)

    def test_table_between_paragraphs_without_run_indexes(self) -> None:
        """Structural element indexes alone place text after a table."""
        document = Document.model_validate(
            {
                "body": {
                    "content": [
                        {"endIndex": 1, "sectionBreak": {}},
                        {
                            "endIndex": 7,
                            "paragraph": {
                                "elements": [{"textRun": {"content": "Hello\n"}}]
                            },
                        },
                        {"endIndex": 20, "table": {"rows": 1, "columns": 1}},
                        {
                            "endIndex": 26,
                            "paragraph": {
                                "elements": [{"textRun": {"content": "World\n"}}]
                            },
                        },
                    ]
                }
            }
        )
        linear = linearize(document)

        assert find_range(linear, "Hello") == TextRange(1, 6)
        assert find_range(linear, "World") == TextRange(20, 25)
