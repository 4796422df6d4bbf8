"""Download-as-file fallback used when direct save is unavailable."""

import logging
from pathlib import Path
from typing import Any

from config.defaults import DOWNLOAD_FILENAMES, TARGET_GROUPS
from core.writer import serialize_config

logger = logging.getLogger(__name__)


def download_filenames(selector: str) -> list[str]:
    """
    File names to produce for a target selector.

    "both" gives the desktop and code files; "all" adds mcp.json once.
    Unknown selectors give nothing.
    """
    targets = TARGET_GROUPS.get(selector, (selector,))
    # Desktop first, matching the order users are prompted in
    ordered = sorted(targets, key=lambda t: 0 if t == "desktop" else 1)

    filenames: list[str] = []
    for target in ordered:
        filename = DOWNLOAD_FILENAMES.get(target)
        if filename and filename not in filenames:
            filenames.append(filename)
    return filenames


def download_config(clean: dict[str, Any], filename: str, directory: Path) -> Path:
    """Write a clean config into directory under filename."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(serialize_config(clean), encoding="utf-8")
    logger.info("Downloaded config to %s", path)
    return path


def download_for_target(clean: dict[str, Any], selector: str, directory: Path) -> list[Path]:
    return [
        download_config(clean, filename, directory)
        for filename in download_filenames(selector)
    ]
