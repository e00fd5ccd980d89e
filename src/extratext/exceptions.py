"""Custom exceptions for extratext."""

from __future__ import annotations


class ExtraTextError(Exception):
    """Base exception for all extratext errors."""

    pass


class TransportError(ExtraTextError):
    """Base exception for transport-related errors."""

    pass


class AuthenticationError(TransportError):
    """Raised when authentication fails (401/403 or unusable credentials)."""

    pass


class NotFoundError(TransportError):
    """Raised when a document is not found (404)."""

    def __init__(self, document_id: str, message: str | None = None) -> None:
        self.document_id = document_id
        super().__init__(message or f"Document not found: {document_id}")


class APIError(TransportError):
    """Raised for other API errors."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        super().__init__(f"API error {status_code}: {message}")


class TextNotFoundError(ExtraTextError):
    """Raised when the text to format does not occur in the document."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f'The text "{text}" was not found in the document.')


class EmptyStyleError(ExtraTextError):
    """Raised when a format request specifies no applicable style."""

    def __init__(self) -> None:
        super().__init__("No formatting was specified to apply.")


class OperationError(ExtraTextError):
    """Raised when a document operation fails in the document service.

    The message carries the operation's context prefix followed by the
    underlying error message.
    """

    def __init__(self, context: str, cause: Exception) -> None:
        self.context = context
        self.cause = cause
        super().__init__(f"{context}: {cause}")
