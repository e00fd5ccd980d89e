"""Human-readable results for the document operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from extratext.indexer import linearize

if TYPE_CHECKING:
    from extratext.api_types import Document

EMPTY_DOCUMENT = "The document is empty."
NO_VISIBLE_TEXT = "The document has no visible text."


def read_text(document: Document) -> str:
    """Return the document's flat text, or a fallback message.

    An absent or empty body is reported as an empty document; a body whose
    text is blank (for example only the trailing newline) is reported as
    having no visible text.
    """
    if document.body is None or not document.body.content:
        return EMPTY_DOCUMENT

    text = linearize(document).text
    if not text.strip():
        return NO_VISIBLE_TEXT
    return text


def format_title(title: str) -> str:
    return f"The document title is: {title}"


def format_updated(document_id: str) -> str:
    return f"The document with ID {document_id} was updated successfully."


def format_appended(document_id: str) -> str:
    return f"The text was appended to the end of the document with ID {document_id}."


def format_styled(text: str) -> str:
    return f'Formatting was applied to the text "{text}".'
