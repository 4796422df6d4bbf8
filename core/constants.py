"""
Core constants for config writing.

This module defines system-wide constants used across the codebase.
"""

BACKUP_DIR_NAME = "backups"
BACKUP_EXTENSION = ".json"
BACKUP_TIMESTAMP_FORMAT = "%Y-%m-%dT%H-%M-%S"  # sorts lexicographically
JSON_INDENT = 2
