"""DocsTextClient - main interface for the extratext document operations.

Each operation fetches a fresh snapshot, plans its edit against that
snapshot, and submits at most one batchUpdate. No document state is kept
between calls, so concurrent calls never share a snapshot; when two calls
target the same document the batch applied last wins.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from loguru import logger

from extratext.api_types import Document
from extratext.exceptions import (
    EmptyStyleError,
    OperationError,
    TextNotFoundError,
    TransportError,
)
from extratext.formatter import (
    format_appended,
    format_styled,
    format_title,
    format_updated,
    read_text,
)
from extratext.indexer import linearize
from extratext.operations import to_requests
from extratext.planner import plan_append, plan_replace_all, plan_restyle
from extratext.styles import StyleRequest

if TYPE_CHECKING:
    from extratext.operations import EditOperation
    from extratext.transport import Transport

# Context prefixes for wrapped document service errors
FETCH_ERROR = "Error fetching document"
UPDATE_ERROR = "Error updating document"
APPEND_ERROR = "Error appending to document"
READ_ERROR = "Error reading document"
FORMAT_ERROR = "Error formatting text"


def parse_document_id(id_or_url: str) -> str:
    """Extract document ID from a URL or return as-is if already an ID."""
    url_pattern = r"docs\.google\.com/document/d/([a-zA-Z0-9_-]+)"
    match = re.search(url_pattern, id_or_url)
    if match:
        return match.group(1)
    return id_or_url.strip()


class DocsTextClient:
    """Read and edit the text of Google Docs documents."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    async def get_title(self, document_id: str) -> str:
        """Return a message with the document title."""
        log = logger.bind(document_id=document_id)
        log.debug("Fetching title")
        try:
            data = await self._transport.get_document(document_id)
        except TransportError as e:
            log.error("Fetching title failed: {error}", error=str(e))
            raise OperationError(FETCH_ERROR, e) from e
        return format_title(data.title)

    async def update_document_content(self, document_id: str, new_content: str) -> str:
        """Replace the whole document text with ``new_content``."""
        log = logger.bind(document_id=document_id)
        log.debug("Replacing document content")
        try:
            document = await self._fetch(document_id)
            linear = linearize(document)
            ops = plan_replace_all(linear.end_index, new_content)
            await self._apply(document_id, ops)
        except TransportError as e:
            log.error("Replacing content failed: {error}", error=str(e))
            raise OperationError(UPDATE_ERROR, e) from e
        log.info("Replaced document content ({count} requests)", count=len(ops))
        return format_updated(document_id)

    async def append_to_document(self, document_id: str, text_to_append: str) -> str:
        """Append ``text_to_append`` as a new line at the end of the document."""
        log = logger.bind(document_id=document_id)
        log.debug("Appending text")
        try:
            document = await self._fetch(document_id)
            linear = linearize(document)
            ops = plan_append(linear.end_index, text_to_append)
            await self._apply(document_id, ops)
        except TransportError as e:
            log.error("Appending text failed: {error}", error=str(e))
            raise OperationError(APPEND_ERROR, e) from e
        log.info("Appended text before end index {index}", index=linear.end_index)
        return format_appended(document_id)

    async def read_document(self, document_id: str) -> str:
        """Return the document's plain text, or a fallback message."""
        log = logger.bind(document_id=document_id)
        log.debug("Reading document")
        try:
            document = await self._fetch(document_id)
        except TransportError as e:
            log.error("Reading document failed: {error}", error=str(e))
            raise OperationError(READ_ERROR, e) from e
        return read_text(document)

    async def format_text(
        self,
        document_id: str,
        text_to_find: str,
        style: StyleRequest | None = None,
    ) -> str:
        """Apply ``style`` to the first occurrence of ``text_to_find``.

        Raises:
            TextNotFoundError: If the text does not occur in the document
            EmptyStyleError: If ``style`` specifies nothing to change
            OperationError: If the document service fails
        """
        log = logger.bind(document_id=document_id)
        log.debug("Formatting {text!r}", text=text_to_find)
        try:
            document = await self._fetch(document_id)
            linear = linearize(document)
            try:
                ops = plan_restyle(linear, text_to_find, style or StyleRequest())
            except (TextNotFoundError, EmptyStyleError) as e:
                log.warning("Formatting rejected: {error}", error=str(e))
                raise
            await self._apply(document_id, ops)
        except TransportError as e:
            log.error("Formatting text failed: {error}", error=str(e))
            raise OperationError(FORMAT_ERROR, e) from e
        log.info("Formatted {text!r}", text=text_to_find)
        return format_styled(text_to_find)

    async def _fetch(self, document_id: str) -> Document:
        data = await self._transport.get_document(document_id)
        return Document.model_validate(data.raw)

    async def _apply(self, document_id: str, ops: list[EditOperation]) -> None:
        requests = to_requests(ops)
        logger.bind(document_id=document_id).debug(
            "Submitting batch of {count} requests", count=len(requests)
        )
        await self._transport.batch_update(document_id, requests)
