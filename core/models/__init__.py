"""
Domain models for mcpilot.

These are the core data structures used throughout the application.
"""

from .backup_info import BackupInfo
from .config_document import ConfigDocument
from .server_entry import ServerEntry
from .target_result import TargetResult

__all__ = [
    # Config document
    "ServerEntry",
    "ConfigDocument",
    # Writer results
    "BackupInfo",
    "TargetResult",
]
