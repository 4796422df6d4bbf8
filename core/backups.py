"""
Timestamped backups of target config files.

Backups live in a "backups" directory next to the target and are named
<base>-<YYYY-MM-DDTHH-MM-SS>.json, so name order is chronological order.
"""

import logging
import shutil
from datetime import datetime, timezone
from pathlib import Path

from .constants import BACKUP_DIR_NAME, BACKUP_EXTENSION, BACKUP_TIMESTAMP_FORMAT
from .models import BackupInfo

logger = logging.getLogger(__name__)


def backup_timestamp(now: datetime | None = None) -> str:
    """Format a UTC timestamp with second precision and no colons."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime(BACKUP_TIMESTAMP_FORMAT)


def backup_base_name(target_path: Path) -> str:
    """File name of the target without its .json extension."""
    name = target_path.name
    if name.endswith(BACKUP_EXTENSION):
        return name[: -len(BACKUP_EXTENSION)]
    return name


def backup_dir_for(target_path: Path) -> Path:
    return target_path.parent / BACKUP_DIR_NAME


def is_backup_name(name: str, base_name: str) -> bool:
    """Whether name is <base_name>-<timestamp>.json for exactly this base."""
    prefix = f"{base_name}-"
    if not (name.startswith(prefix) and name.endswith(BACKUP_EXTENSION)):
        return False
    stamp = name[len(prefix) : -len(BACKUP_EXTENSION)]
    try:
        datetime.strptime(stamp, BACKUP_TIMESTAMP_FORMAT)
    except ValueError:
        return False
    return True


def list_backups(backup_dir: Path, base_name: str) -> list[Path]:
    """
    List backups for a base name, newest first.

    Args:
        backup_dir: Directory holding the backups
        base_name: Target file name without extension

    Returns:
        Matching backup files sorted by name, descending
    """
    if not backup_dir.is_dir():
        return []

    backups = [
        entry
        for entry in backup_dir.iterdir()
        if entry.is_file() and is_backup_name(entry.name, base_name)
    ]
    return sorted(backups, key=lambda p: p.name, reverse=True)


def prune_backups(backup_dir: Path, base_name: str, limit: int) -> list[Path]:
    """
    Delete the oldest backups beyond the retention limit.

    A limit of zero or less keeps nothing.

    Args:
        backup_dir: Directory holding the backups
        base_name: Target file name without extension
        limit: Number of newest backups to keep

    Returns:
        Paths that were deleted, newest first
    """
    keep = max(limit, 0)
    excess = list_backups(backup_dir, base_name)[keep:]

    for old_backup in excess:
        old_backup.unlink()
        logger.info("Deleted old backup: %s", old_backup.name)

    return excess


def create_backup(
    target_path: Path, max_backups: int, now: datetime | None = None
) -> BackupInfo:
    """
    Copy an existing target file into its backups directory, then prune.

    The live file is left untouched.

    Args:
        target_path: Config file about to be overwritten
        max_backups: Retention limit for this target's backups
        now: Timestamp to use (defaults to current UTC time)

    Returns:
        BackupInfo describing whether a backup was written and where

    Raises:
        OSError: If the backup directory, copy, or pruning fails
    """
    if not target_path.exists():
        return BackupInfo(backup=False)

    backup_dir = backup_dir_for(target_path)
    backup_dir.mkdir(parents=True, exist_ok=True)

    base_name = backup_base_name(target_path)
    backup_path = backup_dir / f"{base_name}-{backup_timestamp(now)}{BACKUP_EXTENSION}"

    shutil.copyfile(target_path, backup_path)
    logger.info("Backup created: %s", backup_path)

    pruned = prune_backups(backup_dir, base_name, max_backups)
    if backup_path in pruned:
        logger.info("Backup %s removed at once, retention limit is %d", backup_path.name, max_backups)
        return BackupInfo(backup=False)

    return BackupInfo(backup=True, path=str(backup_path))
