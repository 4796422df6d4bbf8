"""
Multi-target config writer.

Each target is written independently: a failure on one target is reported
in its result entry and never stops the remaining targets. A live file is
only replaced after its backup step has succeeded.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from config.defaults import TARGET_GROUPS, TARGET_LABELS, TARGETS
from config.settings import WriterSettings

from .backups import create_backup
from .constants import JSON_INDENT
from .models import TargetResult

logger = logging.getLogger(__name__)


def resolve_targets(selector: str) -> list[str]:
    """
    Expand a target selector into target identifiers.

    Args:
        selector: A single target, "both", or "all"

    Returns:
        Target identifiers in write order; empty for unknown selectors
    """
    if selector in TARGET_GROUPS:
        return list(TARGET_GROUPS[selector])
    if selector in TARGETS:
        return [selector]
    return []


def serialize_config(clean: dict[str, Any]) -> str:
    return json.dumps(clean, indent=JSON_INDENT, ensure_ascii=False)


def write_target(
    target: str,
    path: Path,
    content: str,
    max_backups: int,
    now: datetime | None = None,
) -> TargetResult:
    """Back up and overwrite one target file, capturing any OS error."""
    label = TARGET_LABELS.get(target, target)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        backup = create_backup(path, max_backups, now)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.error("Failed to save %s config to %s: %s", label, path, e)
        return TargetResult(target=target, label=label, status="error", error=str(e))

    logger.info("Saved %s config to %s", label, path)
    return TargetResult(
        target=target,
        label=label,
        status="success",
        path=str(path),
        backup=backup,
    )


def write_config(
    clean: dict[str, Any],
    selector: str,
    settings: WriterSettings,
    now: datetime | None = None,
) -> list[TargetResult]:
    """
    Write a clean config to every target named by the selector.

    Args:
        clean: Clean config as produced by clean_config()
        selector: A single target, "both", or "all"
        settings: Paths and retention limit to use
        now: Backup timestamp override

    Returns:
        One result per resolved target, in write order
    """
    targets = resolve_targets(selector)
    if not targets:
        logger.warning("Unknown save target '%s', nothing written", selector)
        return []

    content = serialize_config(clean)
    return [
        write_target(
            target,
            Path(settings.paths.for_target(target)).expanduser(),
            content,
            settings.maxBackups,
            now,
        )
        for target in targets
    ]
