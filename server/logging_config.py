"""Logging setup shared by the config writer and the mcpilot CLI."""

import logging
import os
import sys
import time
from contextlib import contextmanager
from typing import Generator, Optional, TextIO

SIMPLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DETAILED_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

# Library loggers and the level they are capped at
QUIET_LOGGERS = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "uvicorn.access": logging.WARNING,
}


def resolve_log_level(level: Optional[str] = None, default: str = DEFAULT_LOG_LEVEL) -> int:
    """Numeric level for an explicit name, else LOG_LEVEL, else default.

    Unknown names fall back to INFO.
    """
    name = (level or os.environ.get(LOG_LEVEL_ENV) or default).upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: Optional[str] = None,
    stream: Optional[TextIO] = None,
    default: str = DEFAULT_LOG_LEVEL,
) -> None:
    """Configure root logging.

    Args:
        level: Explicit level name, taking precedence over LOG_LEVEL.
        stream: Output stream, stdout unless given. The CLI passes stderr
            so command output stays parseable.
        default: Level used when neither level nor LOG_LEVEL is set.
    """
    log_level = resolve_log_level(level, default)
    logging.basicConfig(
        level=log_level,
        format=DETAILED_FORMAT if log_level <= logging.DEBUG else SIMPLE_FORMAT,
        datefmt=DATE_FORMAT,
        stream=stream or sys.stdout,
        force=True,
    )
    for name, cap in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(max(cap, log_level))


@contextmanager
def log_timing(
    logger: logging.Logger, operation: str, level: int = logging.DEBUG
) -> Generator[None, None, None]:
    """Log how long the wrapped block took, or that it failed.

    Example:
        with log_timing(logger, "Save config to 'all'"):
            results = write_config(...)
    """
    start = time.perf_counter()
    try:
        yield
    except Exception:
        duration_ms = (time.perf_counter() - start) * 1000
        logger.warning("%s failed after %.1fms", operation, duration_ms)
        raise
    duration_ms = (time.perf_counter() - start) * 1000
    logger.log(level, "%s completed in %.1fms", operation, duration_ms)
