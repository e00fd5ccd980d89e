"""Primitive edit operations and their batchUpdate request form.

Every range is a native, half-open ``[start_index, end_index)`` range
computed against the snapshot the batch was planned from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class TextRange:
    """A half-open range in the document's native index space."""

    start_index: int
    end_index: int

    def to_api(self) -> dict[str, int]:
        return {"startIndex": self.start_index, "endIndex": self.end_index}


@dataclass(frozen=True)
class DeleteRange:
    """Delete the content in ``range``."""

    range: TextRange

    def to_request(self) -> dict[str, Any]:
        return {"deleteContentRange": {"range": self.range.to_api()}}


@dataclass(frozen=True)
class InsertText:
    """Insert ``text`` before the native index ``index``."""

    index: int
    text: str

    def to_request(self) -> dict[str, Any]:
        return {
            "insertText": {
                "location": {"index": self.index},
                "text": self.text,
            }
        }


@dataclass(frozen=True)
class UpdateTextStyle:
    """Apply a partial text style to ``range``.

    Only the properties named in ``fields`` are changed; the rest of the
    existing style is left alone.
    """

    range: TextRange
    style: dict[str, Any]
    fields: tuple[str, ...]

    def to_request(self) -> dict[str, Any]:
        return {
            "updateTextStyle": {
                "range": self.range.to_api(),
                "textStyle": self.style,
                "fields": ",".join(self.fields),
            }
        }


EditOperation = Union[DeleteRange, InsertText, UpdateTextStyle]


def to_requests(operations: list[EditOperation]) -> list[dict[str, Any]]:
    """Convert a planned batch into batchUpdate request dicts, preserving order."""
    return [op.to_request() for op in operations]
