"""Linearization of Google Docs bodies into flat text.

Google Docs addresses content by UTF-16 code unit offsets. Key indexing rules
relevant here:
1. Body indexes are 1-based for content; the leading sectionBreak ends at 1
2. Text content is counted by UTF-16 code units (surrogate pairs = 2)
3. Non-text structural elements (tables, section breaks) consume indexes
   without contributing flat text
4. The document always ends with an implicit trailing newline that can
   never be deleted
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from extratext.api_types import Document


def utf16_len(text: str) -> int:
    """Calculate the length of a string in UTF-16 code units.

    Python strings are indexed by code point, but Google Docs uses UTF-16.
    Characters outside the BMP (code points > 0xFFFF) use surrogate pairs
    in UTF-16, consuming 2 code units.

    Args:
        text: The string to measure

    Returns:
        Length in UTF-16 code units
    """
    length = 0
    for char in text:
        if ord(char) > 0xFFFF:
            length += 2
        else:
            length += 1
    return length


@dataclass(frozen=True)
class LinearText:
    """Flat text of a document plus its mapping into native indexes.

    Attributes:
        text: Concatenated text of every paragraph text run
        end_index: Native endIndex of the last structural element
        native_starts: Native index of each character of ``text``
    """

    text: str
    end_index: int
    native_starts: tuple[int, ...]

    @classmethod
    def from_text(cls, text: str, end_index: int | None = None) -> LinearText:
        """Build a LinearText for a plain document whose text starts at index 1."""
        starts: list[int] = []
        cursor = 1
        for char in text:
            starts.append(cursor)
            cursor += utf16_len(char)
        return cls(
            text=text,
            end_index=cursor if end_index is None else end_index,
            native_starts=tuple(starts),
        )

    def native_index(self, position: int) -> int:
        """Map a flat text position to a native document index.

        ``position`` may equal ``len(text)``, in which case the index one
        past the last character is returned.
        """
        if position < 0 or position > len(self.text):
            raise IndexError(f"Flat position {position} out of range")
        if position < len(self.text):
            return self.native_starts[position]
        if not self.text:
            return 1
        return self.native_starts[-1] + utf16_len(self.text[-1])


def linearize(document: Document) -> LinearText:
    """Flatten a document body into text and a native index map.

    Text runs are concatenated verbatim in document order. The index cursor
    is re-anchored on every structural element (its startIndex, otherwise the
    previous element's endIndex) and on every run's own startIndex, so
    elements that occupy index space without text (tables, section breaks,
    inline objects) are accounted for even when runs carry no indexes.
    """
    content = document.body.content if document.body else None
    if not content:
        return LinearText(text="", end_index=1, native_starts=())

    parts: list[str] = []
    starts: list[int] = []
    cursor = 1

    for element in content:
        if element.start_index is not None:
            cursor = element.start_index
        elements = element.paragraph.elements if element.paragraph else None
        for para_elem in elements or []:
            if para_elem.text_run is None:
                continue
            text = para_elem.text_run.content or ""
            if para_elem.start_index is not None:
                cursor = para_elem.start_index
            for char in text:
                starts.append(cursor)
                cursor += utf16_len(char)
            parts.append(text)
        if element.end_index is not None:
            cursor = element.end_index

    end_index = content[-1].end_index or 1
    return LinearText(
        text="".join(parts),
        end_index=end_index,
        native_starts=tuple(starts),
    )
