"""
Remote config store backed by the GitHub Gist API.

The Gist is treated as an opaque whole-document store: one named file
holds the JSON-serialized ConfigDocument, read and replaced in full.
"""

import json
import logging
import time
from dataclasses import dataclass

import httpx
from pydantic import ValidationError

from config.defaults import DEFAULT_API_URL, DEFAULT_GIST_FILENAME, GIST_ACCEPT_HEADER
from core.constants import JSON_INDENT
from core.exceptions import (
    AuthenticationError,
    DocumentNotFoundError,
    MissingCredentialsError,
    RemoteStoreError,
)
from core.models import ConfigDocument

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30  # seconds


@dataclass
class LoadedDocument:
    """A document fetched from the remote store."""

    document: ConfigDocument
    updated_at: str | None  # Gist-level last update, ISO-8601


class GistStore:
    """Whole-document load/save against a single Gist file."""

    def __init__(
        self,
        gist_id: str,
        token: str,
        file_name: str = DEFAULT_GIST_FILENAME,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.gist_id = gist_id
        self.token = token
        self.file_name = file_name
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": GIST_ACCEPT_HEADER,
        }

    def _require_credentials(self) -> None:
        if not self.token:
            raise MissingCredentialsError("Please configure a GitHub token first")
        if not self.gist_id:
            raise MissingCredentialsError("Please configure a Gist ID first")

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.api_url,
            headers=self._headers(),
            timeout=self.timeout,
            transport=self._transport,
        )

    async def load(self) -> LoadedDocument:
        """
        Fetch the current document.

        Returns:
            The parsed document and the Gist's last update timestamp

        Raises:
            MissingCredentialsError: If token or Gist ID is not configured
            AuthenticationError: If the token is rejected
            DocumentNotFoundError: If the Gist or its config file is missing
            RemoteStoreError: For any other HTTP, network, or parse failure
        """
        self._require_credentials()
        logger.info("Loading config from Gist %s", self.gist_id)

        # Cache-busting query parameter so edits from other devices show up at once
        params = {"t": str(int(time.time() * 1000))}
        async with self._client() as client:
            try:
                response = await client.get(f"/gists/{self.gist_id}", params=params)
            except httpx.RequestError as e:
                raise RemoteStoreError(f"Request failed: {e}") from e

        if response.status_code == 401:
            raise AuthenticationError("Invalid GitHub token. Please check settings.")
        if response.status_code == 404:
            raise DocumentNotFoundError("Gist not found. Please check the Gist ID.")
        _raise_for_status(response)

        try:
            gist = response.json()
        except ValueError as e:
            raise RemoteStoreError(f"Invalid response from GitHub: {e}") from e
        if not isinstance(gist, dict):
            raise RemoteStoreError("Invalid response from GitHub: expected a JSON object")

        files = gist.get("files") or {}
        if self.file_name not in files:
            raise DocumentNotFoundError(f"File '{self.file_name}' not found in gist")

        content = files[self.file_name].get("content") or ""
        try:
            document = ConfigDocument.model_validate(json.loads(content))
        except (ValueError, ValidationError) as e:
            raise RemoteStoreError(f"Invalid config document in '{self.file_name}': {e}") from e

        logger.info(
            "Loaded %d server(s)%s",
            len(document.mcpServers),
            f" (v{document.version})" if document.version else "",
        )
        return LoadedDocument(document=document, updated_at=gist.get("updated_at"))

    async def save(self, document: ConfigDocument) -> str | None:
        """
        Replace the document's file content in the Gist.

        Args:
            document: Full document to store

        Returns:
            The Gist's new last update timestamp, if reported

        Raises:
            MissingCredentialsError: If token or Gist ID is not configured
            AuthenticationError: If the token is rejected
            DocumentNotFoundError: If the Gist does not exist
            RemoteStoreError: For any other HTTP or network failure
        """
        self._require_credentials()
        payload = {
            "files": {
                self.file_name: {
                    "content": json.dumps(document.to_dict(), indent=JSON_INDENT),
                }
            }
        }

        async with self._client() as client:
            try:
                response = await client.patch(f"/gists/{self.gist_id}", json=payload)
            except httpx.RequestError as e:
                raise RemoteStoreError(f"Request failed: {e}") from e

        if response.status_code == 401:
            raise AuthenticationError("Invalid GitHub token. Please check settings.")
        if response.status_code == 404:
            raise DocumentNotFoundError("Gist not found. Please check the Gist ID.")
        _raise_for_status(response)

        logger.info("Saved config to Gist %s (v%s)", self.gist_id, document.version)
        try:
            return response.json().get("updated_at")
        except ValueError:
            return None


def _raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return
    raise RemoteStoreError(f"HTTP {response.status_code}: {response.reason_phrase}")
