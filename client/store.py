"""
Config store client.

Holds the in-memory ConfigDocument, syncs it with the remote store as a
whole document, and applies its clean form locally through the writer or,
when the writer is absent, as downloaded files.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Literal

from config.client_config import ClientConfig
from config.defaults import UNKNOWN_DEVICE
from core import documents
from core.clean import clean_config
from core.exceptions import InvalidOperationError, WriterUnavailableError
from core.models import ConfigDocument, ServerEntry, TargetResult
from core.version import next_version
from core.writer import resolve_targets

from .downloads import download_for_target
from .gist_store import GistStore, LoadedDocument
from .local_writer import LocalWriterClient

logger = logging.getLogger(__name__)


@dataclass
class ApplyOutcome:
    """How a config was applied to a target selector."""

    mode: Literal["direct", "download"]
    results: list[TargetResult] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)
    reason: str | None = None  # why direct save was not used

    @property
    def backups_created(self) -> int:
        return sum(1 for r in self.results if r.backup is not None and r.backup.backup)


class ConfigStore:
    """In-memory config document with remote sync and local apply."""

    def __init__(
        self,
        remote: GistStore,
        writer: LocalWriterClient,
        download_dir: Path | None = None,
    ):
        self.remote = remote
        self.writer = writer
        self.download_dir = download_dir or Path.cwd()
        self.document = ConfigDocument()
        self.updated_at: str | None = None
        self._device_name: str | None = None

    @classmethod
    def from_config(cls, config: ClientConfig) -> "ConfigStore":
        return cls(
            remote=GistStore(
                gist_id=config.gistId,
                token=config.githubToken,
                file_name=config.fileName,
                api_url=config.apiUrl,
            ),
            writer=LocalWriterClient(config.writerUrl),
            download_dir=Path(config.downloadDir).expanduser() if config.downloadDir else None,
        )

    # -------------------------------------------------------------------------
    # Remote sync
    # -------------------------------------------------------------------------

    async def load(self) -> LoadedDocument:
        """Replace the in-memory document with the remote one."""
        loaded = await self.remote.load()
        self.document = loaded.document
        self.updated_at = loaded.updated_at
        return loaded

    async def save(self) -> ConfigDocument:
        """
        Push the in-memory document, stamping version and authorship.

        The stamped copy only replaces the in-memory document once the
        remote store has accepted it.

        Returns:
            The saved document
        """
        stamped = self.document.model_copy(
            deep=True,
            update={
                "version": next_version(self.document.version),
                "lastModified": _utc_now_iso(),
                "modifiedBy": await self.device_name(),
            },
        )
        updated_at = await self.remote.save(stamped)

        self.document = stamped
        self.updated_at = updated_at or stamped.lastModified
        return stamped

    async def device_name(self) -> str:
        """Hostname reported by the writer, else the last known one."""
        hostname = await self.writer.get_hostname()
        if hostname:
            self._device_name = hostname
        return self._device_name or UNKNOWN_DEVICE

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def add_server(self, name: str, entry: ServerEntry) -> None:
        documents.add_server(self.document, name, entry)

    def update_server(self, name: str, entry: ServerEntry) -> None:
        documents.update_server(self.document, name, entry)

    def rename_server(self, old_name: str, new_name: str) -> None:
        documents.rename_server(self.document, old_name, new_name)

    def delete_server(self, name: str) -> ServerEntry:
        return documents.delete_server(self.document, name)

    def toggle_server(self, name: str) -> bool:
        return documents.toggle_server(self.document, name)

    def clean_config(self) -> dict[str, Any]:
        return clean_config(self.document)

    # -------------------------------------------------------------------------
    # Local apply
    # -------------------------------------------------------------------------

    async def apply(self, target: str) -> ApplyOutcome:
        """
        Write the clean config to target, directly if possible.

        Falls back to downloaded files when the writer is not running or
        the direct save fails.

        Raises:
            InvalidOperationError: If there are no servers to apply or the
                target is unknown
        """
        if not self.document.mcpServers:
            raise InvalidOperationError("No servers loaded yet")
        if not resolve_targets(target):
            raise InvalidOperationError(f"Unknown target '{target}', nothing was written")

        reason = "Config writer not running"
        if await self.writer.has_direct_save():
            try:
                results = await self.writer.save_config(self.document, target)
                return ApplyOutcome(mode="direct", results=results)
            except WriterUnavailableError as e:
                logger.warning("Direct save failed, falling back to download: %s", e)
                reason = str(e)

        files = download_for_target(self.clean_config(), target, self.download_dir)
        return ApplyOutcome(mode="download", files=files, reason=reason)


def _utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
