"""
Client for the local config writer API.

An unreachable writer is not an error for callers: has_direct_save()
returns False and the store falls back to downloads.
"""

import logging
from typing import Any

import httpx

from config.defaults import DEFAULT_WRITER_URL, DIRECT_SAVE_CAPABILITY
from core.exceptions import WriterUnavailableError
from core.models import ConfigDocument, TargetResult

logger = logging.getLogger(__name__)

PROBE_TIMEOUT = 2  # seconds, for status and hostname checks
SAVE_TIMEOUT = 30  # seconds


class LocalWriterClient:
    """Talks to the writer's /api endpoints."""

    def __init__(
        self,
        base_url: str = DEFAULT_WRITER_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    def _client(self, timeout: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=self._transport,
        )

    async def _request(
        self, method: str, path: str, timeout: float, **kwargs: Any
    ) -> httpx.Response:
        async with self._client(timeout) as client:
            try:
                return await client.request(method, path, **kwargs)
            except httpx.HTTPError as e:
                raise WriterUnavailableError(
                    f"Config writer not reachable at {self.base_url}: {e}"
                ) from e

    async def get_status(self) -> dict[str, Any]:
        response = await self._request("GET", "/api/status", PROBE_TIMEOUT)
        if not response.is_success:
            raise WriterUnavailableError(f"Status check failed: HTTP {response.status_code}")
        return _json_or_empty(response)

    async def has_direct_save(self) -> bool:
        """Whether a writer is running that advertises direct saves."""
        try:
            status = await self.get_status()
        except WriterUnavailableError as e:
            logger.info("Direct save unavailable: %s", e)
            return False
        return DIRECT_SAVE_CAPABILITY in (status.get("capabilities") or [])

    async def get_hostname(self) -> str | None:
        """Hostname of the writer's machine, or None if it cannot be asked."""
        try:
            response = await self._request("GET", "/api/hostname", PROBE_TIMEOUT)
        except WriterUnavailableError as e:
            logger.info("Could not get hostname from writer: %s", e)
            return None
        if not response.is_success:
            return None
        return _json_or_empty(response).get("hostname") or None

    async def get_settings(self) -> dict[str, Any]:
        response = await self._request("GET", "/api/settings", PROBE_TIMEOUT)
        if not response.is_success:
            raise WriterUnavailableError(f"Could not read writer settings: HTTP {response.status_code}")
        return _json_or_empty(response)

    async def update_settings(
        self,
        paths: dict[str, str] | None = None,
        max_backups: int | None = None,
    ) -> dict[str, Any]:
        """
        Change the writer's target paths and/or retention limit.

        Returns:
            The merged settings reported by the writer
        """
        payload: dict[str, Any] = {}
        if paths:
            payload["paths"] = {target: path for target, path in paths.items() if path}
        if max_backups is not None:
            payload["maxBackups"] = max_backups

        response = await self._request("POST", "/api/settings", PROBE_TIMEOUT, json=payload)
        data = _json_or_empty(response)
        if not response.is_success or not data.get("success"):
            raise WriterUnavailableError(
                data.get("error") or f"Failed to update writer settings: HTTP {response.status_code}"
            )
        return data["settings"]

    async def save_config(self, document: ConfigDocument, target: str) -> list[TargetResult]:
        """
        Ask the writer to write the document's clean form to target.

        Returns:
            Per-target results reported by the writer

        Raises:
            WriterUnavailableError: If the writer is unreachable or rejects the request
        """
        response = await self._request(
            "POST",
            "/api/save-config",
            SAVE_TIMEOUT,
            json={"config": document.to_dict(), "target": target},
        )
        data = _json_or_empty(response)
        if not data.get("success"):
            raise WriterUnavailableError(
                data.get("error") or f"Direct save failed: HTTP {response.status_code}"
            )
        return [TargetResult.model_validate(item) for item in data.get("results", [])]


def _json_or_empty(response: httpx.Response) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
