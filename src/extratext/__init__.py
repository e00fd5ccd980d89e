"""extratext - Read and edit Google Docs text for LLM agents.

This library exposes a small set of document operations (title, read,
replace, append, format) over the Google Docs API, addressing text through
the document's native UTF-16 index space.
"""

__version__ = "0.1.0"

from extratext.client import DocsTextClient, parse_document_id
from extratext.colors import hex_to_rgb
from extratext.exceptions import (
    APIError,
    AuthenticationError,
    EmptyStyleError,
    ExtraTextError,
    NotFoundError,
    OperationError,
    TextNotFoundError,
    TransportError,
)
from extratext.indexer import LinearText, linearize, utf16_len
from extratext.operations import (
    DeleteRange,
    EditOperation,
    InsertText,
    TextRange,
    UpdateTextStyle,
    to_requests,
)
from extratext.planner import plan_append, plan_replace_all, plan_restyle
from extratext.ranges import find_range
from extratext.styles import StyleRequest, TextStyleUpdate, build_text_style
from extratext.transport import (
    DocumentData,
    GoogleDocsTransport,
    LocalFileTransport,
    Transport,
)

__all__ = [
    "APIError",
    "AuthenticationError",
    "DeleteRange",
    "DocsTextClient",
    "DocumentData",
    "EditOperation",
    "EmptyStyleError",
    "ExtraTextError",
    "GoogleDocsTransport",
    "InsertText",
    "LinearText",
    "LocalFileTransport",
    "NotFoundError",
    "OperationError",
    "StyleRequest",
    "TextNotFoundError",
    "TextRange",
    "TextStyleUpdate",
    "Transport",
    "TransportError",
    "UpdateTextStyle",
    "__version__",
    "build_text_style",
    "find_range",
    "hex_to_rgb",
    "linearize",
    "parse_document_id",
    "plan_append",
    "plan_replace_all",
    "plan_restyle",
    "to_requests",
    "utf16_len",
]
