"""
Core business logic package.

This package contains transport-agnostic logic for editing, cleaning and
writing MCP server configs. The server and client packages wrap it.
"""

from .backups import backup_timestamp, create_backup, list_backups, prune_backups
from .clean import clean_config, is_enabled
from .documents import (
    add_server,
    delete_server,
    get_server,
    rename_server,
    toggle_server,
    update_server,
)
from .exceptions import (
    AuthenticationError,
    CoreError,
    DocumentNotFoundError,
    InvalidOperationError,
    MissingCredentialsError,
    NotFoundError,
    RemoteStoreError,
    WriterUnavailableError,
)
from .models import BackupInfo, ConfigDocument, ServerEntry, TargetResult
from .version import next_version
from .writer import resolve_targets, serialize_config, write_config

__all__ = [
    # Exceptions
    "CoreError",
    "NotFoundError",
    "InvalidOperationError",
    "RemoteStoreError",
    "MissingCredentialsError",
    "AuthenticationError",
    "DocumentNotFoundError",
    "WriterUnavailableError",
    # Models
    "ServerEntry",
    "ConfigDocument",
    "BackupInfo",
    "TargetResult",
    # Clean config
    "clean_config",
    "is_enabled",
    # Document editing
    "get_server",
    "add_server",
    "update_server",
    "rename_server",
    "delete_server",
    "toggle_server",
    "next_version",
    # Backups and writing
    "backup_timestamp",
    "create_backup",
    "list_backups",
    "prune_backups",
    "resolve_targets",
    "serialize_config",
    "write_config",
]
