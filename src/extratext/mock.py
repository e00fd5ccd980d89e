"""In-memory Google Docs service for tests.

Simulates plain-paragraph documents: a leading section break (index 0-1),
one paragraph per line, and a trailing newline that is always present. The
batchUpdate requests used by extratext are applied in order with the same
range checks the Docs API performs, and each batch is atomic.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

from extratext.exceptions import APIError, NotFoundError, TransportError
from extratext.indexer import utf16_len
from extratext.transport import DocumentData, Transport


@dataclass
class MockDocument:
    """Mutable state of one simulated document.

    ``chars`` holds one entry per code point, ``styles`` the text style of
    each of them.
    """

    document_id: str
    title: str
    chars: list[str] = field(default_factory=list)
    styles: list[dict[str, Any]] = field(default_factory=list)
    revision: int = 1

    @property
    def text(self) -> str:
        return "".join(self.chars)

    @property
    def end_index(self) -> int:
        """Native endIndex of the last paragraph."""
        return 1 + utf16_len(self.text)

    def position(self, index: int) -> int:
        """Convert a native index into a position in ``chars``."""
        cursor = 1
        for pos, char in enumerate(self.chars):
            if cursor == index:
                return pos
            if cursor > index:
                break
            cursor += utf16_len(char)
        if cursor == index:
            return len(self.chars)
        raise ValueError(f"Index {index} is not a valid character boundary")

    def style_at(self, index: int) -> dict[str, Any]:
        return self.styles[self.position(index)]

    def to_raw(self) -> dict[str, Any]:
        """Render the document as a Docs API response."""
        content: list[dict[str, Any]] = [{"endIndex": 1, "sectionBreak": {}}]
        cursor = 1
        para_start = 1
        elements: list[dict[str, Any]] = []
        run_chars: list[str] = []
        run_style: dict[str, Any] | None = None
        run_start = 1

        def flush_run() -> None:
            nonlocal run_chars, run_start
            if run_chars:
                run_text = "".join(run_chars)
                elements.append(
                    {
                        "startIndex": run_start,
                        "endIndex": run_start + utf16_len(run_text),
                        "textRun": {
                            "content": run_text,
                            "textStyle": copy.deepcopy(run_style or {}),
                        },
                    }
                )
            run_chars = []

        for char, style in zip(self.chars, self.styles):
            if style != run_style:
                flush_run()
                run_style = style
                run_start = cursor
            run_chars.append(char)
            cursor += utf16_len(char)
            if char == "\n":
                flush_run()
                run_style = None
                content.append(
                    {
                        "startIndex": para_start,
                        "endIndex": cursor,
                        "paragraph": {"elements": elements},
                    }
                )
                elements = []
                para_start = cursor

        return {
            "documentId": self.document_id,
            "title": self.title,
            "revisionId": f"mock_revision_{self.revision}",
            "body": {"content": content},
        }


class MockDocsTransport(Transport):
    """Transport backed by in-memory simulated documents.

    Attributes:
        batches: Every successfully applied batch, as (document_id, requests)
        fail_get: Exception raised by the next get_document call, if set
        fail_update: Exception raised by the next batch_update call, if set
    """

    def __init__(self) -> None:
        self._documents: dict[str, MockDocument] = {}
        self.batches: list[tuple[str, list[dict[str, Any]]]] = []
        self.fail_get: TransportError | None = None
        self.fail_update: TransportError | None = None

    def add_document(self, document_id: str, title: str = "", text: str = "") -> None:
        """Create a document whose body holds ``text``.

        A trailing newline is added when ``text`` does not end with one.
        """
        if not text.endswith("\n"):
            text += "\n"
        self._documents[document_id] = MockDocument(
            document_id=document_id,
            title=title,
            chars=list(text),
            styles=[{} for _ in text],
        )

    def document(self, document_id: str) -> MockDocument:
        try:
            return self._documents[document_id]
        except KeyError:
            raise NotFoundError(document_id) from None

    def text(self, document_id: str) -> str:
        """Current body text, including the trailing newline."""
        return self.document(document_id).text

    async def get_document(self, document_id: str) -> DocumentData:
        if self.fail_get is not None:
            error, self.fail_get = self.fail_get, None
            raise error
        doc = self.document(document_id)
        return DocumentData(document_id=document_id, title=doc.title, raw=doc.to_raw())

    async def batch_update(
        self, document_id: str, requests: list[dict[str, Any]]
    ) -> dict[str, Any]:
        if self.fail_update is not None:
            error, self.fail_update = self.fail_update, None
            raise error

        current = self.document(document_id)
        working = copy.deepcopy(current)
        replies: list[dict[str, Any]] = []
        for i, request in enumerate(requests):
            try:
                _apply_request(working, request)
            except ValueError as e:
                raise APIError(400, f"Invalid requests[{i}]: {e}") from e
            replies.append({})

        working.revision += 1
        self._documents[document_id] = working
        self.batches.append((document_id, requests))
        return {"documentId": document_id, "replies": replies}

    async def close(self) -> None:
        """No-op for the in-memory transport."""


def _apply_request(doc: MockDocument, request: dict[str, Any]) -> None:
    if "deleteContentRange" in request:
        _delete_content_range(doc, request["deleteContentRange"])
    elif "insertText" in request:
        _insert_text(doc, request["insertText"])
    elif "updateTextStyle" in request:
        _update_text_style(doc, request["updateTextStyle"])
    else:
        raise ValueError(f"Unsupported request: {sorted(request)}")


def _checked_range(doc: MockDocument, range_obj: dict[str, Any]) -> tuple[int, int]:
    start = range_obj.get("startIndex", 0)
    end = range_obj.get("endIndex", 0)
    if start < 1:
        raise ValueError("The range startIndex must be at least 1")
    if end <= start:
        raise ValueError("The range should not be empty")
    if end > doc.end_index:
        raise ValueError(
            "Index must be less than the end index of the referenced segment"
        )
    return doc.position(start), doc.position(end)


def _delete_content_range(doc: MockDocument, payload: dict[str, Any]) -> None:
    start, end = _checked_range(doc, payload["range"])
    if end == len(doc.chars):
        raise ValueError(
            "The range cannot include the newline character at the end of the segment"
        )
    del doc.chars[start:end]
    del doc.styles[start:end]


def _insert_text(doc: MockDocument, payload: dict[str, Any]) -> None:
    index = payload["location"]["index"]
    if index < 1 or index >= doc.end_index:
        raise ValueError(
            "Index must be less than the end index of the referenced segment"
        )
    pos = doc.position(index)
    # Inserted text inherits the style of the character before it
    inherited = doc.styles[pos - 1] if pos > 0 else {}
    text = payload["text"]
    doc.chars[pos:pos] = list(text)
    doc.styles[pos:pos] = [copy.deepcopy(inherited) for _ in text]


def _update_text_style(doc: MockDocument, payload: dict[str, Any]) -> None:
    start, end = _checked_range(doc, payload["range"])
    fields = [f for f in payload.get("fields", "").split(",") if f]
    if not fields:
        raise ValueError("fields is required")
    text_style = payload.get("textStyle", {})
    for pos in range(start, end):
        style = copy.deepcopy(doc.styles[pos])
        for path in fields:
            _set_field(style, text_style, path.split("."))
        doc.styles[pos] = style


def _set_field(target: dict[str, Any], source: dict[str, Any], path: list[str]) -> None:
    """Copy ``path`` from source to target; an absent source value clears it."""
    key = path[0]
    if len(path) == 1:
        if key in source:
            target[key] = copy.deepcopy(source[key])
        else:
            target.pop(key, None)
        return
    child = target.setdefault(key, {})
    _set_field(child, source.get(key, {}), path[1:])
