"""WriterSettings model."""

import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .defaults import (
    DEFAULT_MAX_BACKUPS,
    DEFAULT_PORT,
    MAX_BACKUPS_ENV,
    PATH_ENV_VARS,
    PORT_ENV,
)
from .paths import default_target_paths

logger = logging.getLogger(__name__)


class TargetPaths(BaseModel):
    """Resolved config file path for each target."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(description="Claude Code CLI config file")
    desktop: str = Field(description="Claude Desktop config file")
    cursor: str = Field(description="Cursor MCP config file")
    claudeIdeCursor: str = Field(description="Claude IDE integration for Cursor")

    def for_target(self, target: str) -> str:
        return getattr(self, target)


class PathsUpdate(BaseModel):
    code: str | None = None
    desktop: str | None = None
    cursor: str | None = None
    claudeIdeCursor: str | None = None


class SettingsUpdate(BaseModel):
    """Partial settings change. Omitted or empty fields are left alone."""

    paths: PathsUpdate | None = None
    maxBackups: int | None = None


class WriterSettings(BaseModel):
    """Runtime configuration of the local config writer."""

    model_config = ConfigDict(frozen=True)

    port: int = Field(default=DEFAULT_PORT, description="Port the writer listens on")
    maxBackups: int = Field(
        default=DEFAULT_MAX_BACKUPS,
        description="Backups kept per target file",
    )
    paths: TargetPaths

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        platform_id: str | None = None,
        home: Path | None = None,
    ) -> "WriterSettings":
        """
        Build settings from environment overrides on top of platform defaults.

        Args:
            environ: Environment mapping (defaults to os.environ)
            platform_id: OS identifier (defaults to sys.platform)
            home: Home directory (defaults to Path.home())

        Returns:
            WriterSettings instance
        """
        environ = os.environ if environ is None else environ
        platform_id = platform_id or sys.platform
        home = home or Path.home()

        paths = default_target_paths(platform_id, home)
        for target, env_var in PATH_ENV_VARS.items():
            if environ.get(env_var):
                paths[target] = environ[env_var]

        return cls(
            port=_int_from_env(environ, PORT_ENV, DEFAULT_PORT),
            maxBackups=_int_from_env(environ, MAX_BACKUPS_ENV, DEFAULT_MAX_BACKUPS),
            paths=TargetPaths(**paths),
        )

    def merged(self, update: SettingsUpdate) -> "WriterSettings":
        """Return a copy with the non-empty fields of update applied."""
        changes: dict = {}

        if update.paths is not None:
            new_paths = {
                target: value
                for target, value in update.paths.model_dump().items()
                if value
            }
            if new_paths:
                changes["paths"] = self.paths.model_copy(update=new_paths)

        if update.maxBackups is not None:
            changes["maxBackups"] = update.maxBackups

        return self.model_copy(update=changes)


def _int_from_env(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %d", name, raw, default)
        return default
