"""MCP server exposing the extratext document operations as tools.

Entry point: ``python -m extratext serve`` (stdio transport).
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import TYPE_CHECKING, Annotated

from loguru import logger
from mcp.server.fastmcp import FastMCP
from pydantic import Field

from extratext.client import DocsTextClient, parse_document_id
from extratext.credentials import ServiceAccountAuth
from extratext.logging import setup_logging
from extratext.styles import StyleRequest
from extratext.transport import GoogleDocsTransport

if TYPE_CHECKING:
    from extratext.config import Settings

SERVER_NAME = "extratext"

ClientFactory = Callable[[], AbstractAsyncContextManager[DocsTextClient]]

DocumentId = Annotated[
    str, Field(description="The Google Docs document ID or document URL.")
]


def google_docs_client_factory(
    auth: ServiceAccountAuth, timeout: int
) -> ClientFactory:
    """Create a factory that opens a client over a fresh Docs API transport.

    Each tool call gets its own transport. The access token is obtained by
    the transport per request, so a failed refresh is reported like any
    other failure of the operation.
    """

    @asynccontextmanager
    async def open_client() -> AsyncIterator[DocsTextClient]:
        transport = GoogleDocsTransport(
            access_token=auth.get_access_token_async, timeout=timeout
        )
        try:
            yield DocsTextClient(transport)
        finally:
            await transport.close()

    return open_client


def create_server(client_factory: ClientFactory) -> FastMCP:
    """Build the MCP server with the five document tools registered."""
    mcp = FastMCP(
        SERVER_NAME,
        instructions=(
            "Read and edit the text of Google Docs documents. Documents must "
            "be shared with the configured service account."
        ),
    )

    @mcp.tool()
    async def get_title(document_id: DocumentId) -> str:
        """Get the title of a Google Docs document."""
        async with client_factory() as client:
            return await client.get_title(parse_document_id(document_id))

    @mcp.tool()
    async def update_document_content(
        document_id: DocumentId,
        new_content: Annotated[
            str, Field(description="The new text that replaces the document content.")
        ],
    ) -> str:
        """Replace the entire content of a Google Docs document with new text."""
        async with client_factory() as client:
            return await client.update_document_content(
                parse_document_id(document_id), new_content
            )

    @mcp.tool()
    async def append_to_document(
        document_id: DocumentId,
        text_to_append: Annotated[
            str, Field(description="The text to add at the end of the document.")
        ],
    ) -> str:
        """Append text to the end of a Google Docs document without removing existing content."""
        async with client_factory() as client:
            return await client.append_to_document(
                parse_document_id(document_id), text_to_append
            )

    @mcp.tool()
    async def read_document(document_id: DocumentId) -> str:
        """Read and return all the text content of a Google Docs document."""
        async with client_factory() as client:
            return await client.read_document(parse_document_id(document_id))

    @mcp.tool()
    async def format_text(
        document_id: DocumentId,
        text_to_find: Annotated[
            str, Field(description="The exact text to format (first occurrence).")
        ],
        bold: Annotated[
            bool | None, Field(description="Apply or remove bold.")
        ] = None,
        italic: Annotated[
            bool | None, Field(description="Apply or remove italic.")
        ] = None,
        underline: Annotated[
            bool | None, Field(description="Apply or remove underline.")
        ] = None,
        font_size: Annotated[
            float | None, Field(description="Font size in points (pt).")
        ] = None,
        foreground_color: Annotated[
            str | None, Field(description="Text color as HEX (e.g. '#FF0000').")
        ] = None,
        font_family: Annotated[
            str | None,
            Field(description="Font family (e.g. 'Arial', 'Times New Roman')."),
        ] = None,
    ) -> str:
        """Apply formatting (bold, italic, color, etc.) to a specific piece of text."""
        style = StyleRequest(
            bold=bold,
            italic=italic,
            underline=underline,
            font_size=font_size,
            font_family=font_family,
            foreground_color=foreground_color,
        )
        async with client_factory() as client:
            return await client.format_text(
                parse_document_id(document_id), text_to_find, style
            )

    return mcp


def run_server(settings: Settings) -> None:
    """Load credentials and serve the MCP tools over stdio."""
    setup_logging(json_logs=settings.json_logs, log_level=settings.log_level)

    auth = ServiceAccountAuth(settings.service_account_path)
    factory = google_docs_client_factory(auth, settings.request_timeout)
    server = create_server(factory)

    logger.info(
        "MCP server started with service account {email}. Ready for requests.",
        email=auth.service_account_email,
    )
    server.run(transport="stdio")
