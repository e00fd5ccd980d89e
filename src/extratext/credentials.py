"""Service account credentials for Google Docs API access."""

from __future__ import annotations

import asyncio
from pathlib import Path

from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2 import service_account
from loguru import logger

from extratext.exceptions import AuthenticationError

DOCUMENTS_SCOPE = "https://www.googleapis.com/auth/documents"


class ServiceAccountAuth:
    """Access tokens for a service account JSON key file.

    The key is loaded once; the access token is refreshed only when it has
    expired (google-auth keeps a safety margin before the real expiry).

    Args:
        key_path: Path to the service account JSON key file
        scopes: OAuth scopes to request
    """

    def __init__(
        self, key_path: str | Path, scopes: list[str] | None = None
    ) -> None:
        self._key_path = Path(key_path)
        if not self._key_path.exists():
            raise AuthenticationError(
                f"Service account file not found: {self._key_path}. "
                "Set SERVICE_ACCOUNT_PATH to a valid JSON key file."
            )
        try:
            self._credentials = service_account.Credentials.from_service_account_file(
                str(self._key_path),
                scopes=scopes or [DOCUMENTS_SCOPE],
            )
        except (ValueError, KeyError) as e:
            raise AuthenticationError(
                f"Invalid service account file {self._key_path}: {e}"
            ) from e

    @property
    def service_account_email(self) -> str:
        return str(self._credentials.service_account_email)

    def get_access_token(self) -> str:
        """Return a valid access token, refreshing it if needed."""
        if not self._credentials.valid:
            logger.debug(
                "Refreshing access token for {email}", email=self.service_account_email
            )
            try:
                self._credentials.refresh(Request())
            except GoogleAuthError as e:
                raise AuthenticationError(f"Could not obtain access token: {e}") from e
        return str(self._credentials.token)

    async def get_access_token_async(self) -> str:
        """Async wrapper; a refresh does blocking network I/O."""
        return await asyncio.to_thread(self.get_access_token)
