"""Tests for the in-memory document service."""

from __future__ import annotations

import pytest

from extratext.api_types import Document
from extratext.exceptions import APIError, NotFoundError
from extratext.indexer import linearize
from extratext.mock import MockDocsTransport


@pytest.fixture
def transport() -> MockDocsTransport:
    transport = MockDocsTransport()
    transport.add_document("doc", title="Notes", text="Hello\nWorld")
    return transport


class TestMockDocument:
    @pytest.mark.asyncio
    async def test_raw_document_shape(self, transport: MockDocsTransport) -> None:
        data = await transport.get_document("doc")
        content = data.raw["body"]["content"]

        assert data.title == "Notes"
        assert content[0] == {"endIndex": 1, "sectionBreak": {}}
        assert [el["startIndex"] for el in content[1:]] == [1, 7]
        assert content[-1]["endIndex"] == 13

    @pytest.mark.asyncio
    async def test_snapshot_linearizes(self, transport: MockDocsTransport) -> None:
        data = await transport.get_document("doc")
        linear = linearize(Document.model_validate(data.raw))
        assert linear.text == "Hello\nWorld\n"
        assert linear.end_index == 13

    @pytest.mark.asyncio
    async def test_unknown_document(self, transport: MockDocsTransport) -> None:
        with pytest.raises(NotFoundError):
            await transport.get_document("missing")

    def test_trailing_newline_added(self) -> None:
        transport = MockDocsTransport()
        transport.add_document("a", text="x")
        transport.add_document("b", text="x\n")
        assert transport.text("a") == transport.text("b") == "x\n"


class TestMockBatchUpdate:
    @pytest.mark.asyncio
    async def test_requests_apply_in_order(self, transport: MockDocsTransport) -> None:
        await transport.batch_update(
            "doc",
            [
                {"deleteContentRange": {"range": {"startIndex": 1, "endIndex": 12}}},
                {"insertText": {"location": {"index": 1}, "text": "Bye"}},
            ],
        )
        assert transport.text("doc") == "Bye\n"
        assert len(transport.batches) == 1

    @pytest.mark.asyncio
    async def test_final_newline_cannot_be_deleted(
        self, transport: MockDocsTransport
    ) -> None:
        with pytest.raises(APIError) as exc_info:
            await transport.batch_update(
                "doc",
                [{"deleteContentRange": {"range": {"startIndex": 1, "endIndex": 13}}}],
            )
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_empty_range_rejected(self, transport: MockDocsTransport) -> None:
        with pytest.raises(APIError, match="should not be empty"):
            await transport.batch_update(
                "doc",
                [{"deleteContentRange": {"range": {"startIndex": 1, "endIndex": 1}}}],
            )

    @pytest.mark.asyncio
    async def test_insert_past_end_rejected(self, transport: MockDocsTransport) -> None:
        with pytest.raises(APIError):
            await transport.batch_update(
                "doc", [{"insertText": {"location": {"index": 13}, "text": "x"}}]
            )

    @pytest.mark.asyncio
    async def test_batch_is_atomic(self, transport: MockDocsTransport) -> None:
        with pytest.raises(APIError, match=r"requests\[1\]"):
            await transport.batch_update(
                "doc",
                [
                    {"insertText": {"location": {"index": 1}, "text": "Oh "}},
                    {"deleteContentRange": {"range": {"startIndex": 5, "endIndex": 5}}},
                ],
            )
        assert transport.text("doc") == "Hello\nWorld\n"
        assert transport.batches == []

    @pytest.mark.asyncio
    async def test_surrogate_pair_cannot_be_split(self) -> None:
        transport = MockDocsTransport()
        transport.add_document("doc", text="a\U0001f600b")
        with pytest.raises(APIError, match="character boundary"):
            await transport.batch_update(
                "doc", [{"insertText": {"location": {"index": 3}, "text": "x"}}]
            )

    @pytest.mark.asyncio
    async def test_style_fields_mask(self, transport: MockDocsTransport) -> None:
        await transport.batch_update(
            "doc",
            [
                {
                    "updateTextStyle": {
                        "range": {"startIndex": 1, "endIndex": 6},
                        "textStyle": {
                            "bold": True,
                            "italic": True,
                            "weightedFontFamily": {"fontFamily": "Arial"},
                        },
                        "fields": "bold,weightedFontFamily.fontFamily",
                    }
                }
            ],
        )
        style = transport.document("doc").style_at(1)
        assert style == {"bold": True, "weightedFontFamily": {"fontFamily": "Arial"}}

        data = await transport.get_document("doc")
        first_run = data.raw["body"]["content"][1]["paragraph"]["elements"][0]
        assert first_run["textRun"]["content"] == "Hello"
        assert first_run["endIndex"] == 6

    @pytest.mark.asyncio
    async def test_injected_failure(self, transport: MockDocsTransport) -> None:
        transport.fail_update = APIError(500, "backend error")
        with pytest.raises(APIError):
            await transport.batch_update(
                "doc", [{"insertText": {"location": {"index": 1}, "text": "x"}}]
            )
        # Failure is one-shot
        await transport.batch_update(
            "doc", [{"insertText": {"location": {"index": 1}, "text": "x"}}]
        )
        assert transport.text("doc") == "xHello\nWorld\n"
