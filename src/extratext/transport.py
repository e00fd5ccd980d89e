"""Document service transports.

A transport fetches raw document snapshots and submits batchUpdate request
lists. ``GoogleDocsTransport`` talks to the Docs REST API over httpx;
``LocalFileTransport`` serves snapshots saved as JSON files and only records
what would have been submitted.
"""

from __future__ import annotations

import json
import ssl
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

import certifi
import httpx

from extratext.exceptions import (
    APIError,
    AuthenticationError,
    NotFoundError,
    TransportError,
)

DOCS_API_URL = "https://docs.googleapis.com/v1/documents"
DEFAULT_TIMEOUT = 60

TokenProvider = Callable[[], Awaitable[str]]


@dataclass(frozen=True)
class DocumentData:
    """One fetched document snapshot.

    ``raw`` is the untouched ``documents.get`` response body.
    """

    document_id: str
    title: str
    raw: dict[str, Any]

    @classmethod
    def from_response(cls, document_id: str, response: dict[str, Any]) -> DocumentData:
        return cls(
            document_id=response.get("documentId", document_id),
            title=response.get("title", ""),
            raw=response,
        )


class Transport(ABC):
    """Where snapshots come from and where edit batches go."""

    @abstractmethod
    async def get_document(self, document_id: str) -> DocumentData:
        """Return the current snapshot of ``document_id``."""
        ...

    @abstractmethod
    async def batch_update(
        self, document_id: str, requests: list[dict[str, Any]]
    ) -> dict[str, Any]:
        """Submit ``requests`` as a single batch.

        The document service applies the batch in order and all-or-nothing.

        Returns:
            The batchUpdate response body
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release network resources held by the transport."""
        ...


class GoogleDocsTransport(Transport):
    """Transport for the Google Docs REST API, authenticated with a bearer token.

    Args:
        access_token: OAuth2 access token carrying the documents scope, or
            a coroutine function returning one. A provider is awaited before
            every request, so its failures surface as request failures.
        timeout: Per-request timeout in seconds
    """

    def __init__(
        self, access_token: str | TokenProvider, timeout: int = DEFAULT_TIMEOUT
    ) -> None:
        self._access_token = access_token
        verify = ssl.create_default_context(cafile=certifi.where())
        self._client = httpx.AsyncClient(
            timeout=timeout,
            verify=verify,
            headers={"Accept": "application/json"},
        )

    async def _token(self) -> str:
        if isinstance(self._access_token, str):
            return self._access_token
        return await self._access_token()

    async def get_document(self, document_id: str) -> DocumentData:
        response = await self._send("GET", f"{DOCS_API_URL}/{document_id}", document_id)
        return DocumentData.from_response(document_id, response)

    async def batch_update(
        self, document_id: str, requests: list[dict[str, Any]]
    ) -> dict[str, Any]:
        return await self._send(
            "POST",
            f"{DOCS_API_URL}/{document_id}:batchUpdate",
            document_id,
            {"requests": requests},
        )

    async def _send(
        self,
        method: str,
        url: str,
        document_id: str,
        payload: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        headers = {"Authorization": f"Bearer {await self._token()}"}
        try:
            response = await self._client.request(
                method, url, json=payload, headers=headers
            )
        except httpx.RequestError as e:
            raise TransportError(f"Network error: {e}") from e

        if response.is_error:
            raise _error_for(response, document_id)
        data: dict[str, Any] = response.json()
        return data

    async def close(self) -> None:
        await self._client.aclose()


def _error_for(response: httpx.Response, document_id: str) -> TransportError:
    """Map a failed Docs API response onto the transport error hierarchy."""
    status = response.status_code
    if status == 401:
        return AuthenticationError("Invalid or expired access token")
    if status == 403:
        return AuthenticationError(
            "Access denied. Check that the document is shared with the "
            "service account."
        )
    if status == 404:
        return NotFoundError(
            document_id,
            f"Document not found: {document_id}. Check the ID and sharing "
            "permissions.",
        )

    try:
        message = response.json().get("error", {}).get("message", response.text)
    except ValueError:
        message = response.text
    return APIError(status, message)


@dataclass
class LocalFileTransport(Transport):
    """Serves snapshots from ``<golden_dir>/<document_id>.json``.

    Batches are appended to ``applied`` instead of being executed, so tests
    can assert on the exact requests an operation produced.
    """

    golden_dir: Path
    applied: list[tuple[str, list[dict[str, Any]]]] = field(default_factory=list)

    async def get_document(self, document_id: str) -> DocumentData:
        path = self.golden_dir / f"{document_id}.json"
        if not path.exists():
            raise NotFoundError(document_id, f"Golden file not found: {path}")
        return DocumentData.from_response(
            document_id, json.loads(path.read_text(encoding="utf-8"))
        )

    async def batch_update(
        self, document_id: str, requests: list[dict[str, Any]]
    ) -> dict[str, Any]:
        self.applied.append((document_id, requests))
        return {"documentId": document_id, "replies": [{}] * len(requests)}

    async def close(self) -> None:
        pass
