"""
Configuration module for mcpilot.

Exports the settings models and loaders used by the local config writer
and the config store client.
"""

from .client_config import ClientConfig
from .defaults import (
    DEFAULT_MAX_BACKUPS,
    DEFAULT_PORT,
    DOWNLOAD_FILENAMES,
    TARGET_GROUPS,
    TARGET_LABELS,
    TARGETS,
)
from .loader import (
    load_client_config,
    load_config_file,
    merge_configs,
    save_client_config,
    strip_jsonc_comments,
)
from .paths import default_target_paths
from .settings import PathsUpdate, SettingsUpdate, TargetPaths, WriterSettings

__all__ = [
    # Constants
    "DEFAULT_PORT",
    "DEFAULT_MAX_BACKUPS",
    "TARGETS",
    "TARGET_LABELS",
    "TARGET_GROUPS",
    "DOWNLOAD_FILENAMES",
    # Config models
    "ClientConfig",
    "WriterSettings",
    "TargetPaths",
    "PathsUpdate",
    "SettingsUpdate",
    # Path resolution
    "default_target_paths",
    # Loader functions
    "load_client_config",
    "save_client_config",
    "load_config_file",
    "merge_configs",
    "strip_jsonc_comments",
]
