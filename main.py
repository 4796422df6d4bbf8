"""
Config writer server entry point.
"""
import logging
import os
from pathlib import Path

import uvicorn

from config.defaults import STATIC_DIR_ENV, TARGET_LABELS
from server import app, get_settings, set_static_dir
from server.logging_config import setup_logging

# Initialize logging before anything else
setup_logging()
logger = logging.getLogger(__name__)

# Constants
DEFAULT_HOST = "127.0.0.1"


def log_startup_banner(host: str, port: int) -> None:
    """Log where the writer listens and which files it will write."""
    settings = get_settings()
    logger.info("MCP config writer running at http://%s:%d", host, port)
    logger.info("Backups kept per target: %d", settings.maxBackups)
    for target, path in settings.paths.model_dump().items():
        logger.info("%-18s %s", TARGET_LABELS[target] + ":", path)


def main() -> None:
    """Start the config writer."""
    host = os.environ.get("HOST", DEFAULT_HOST)
    port = get_settings().port

    static_dir = os.environ.get(STATIC_DIR_ENV)
    if static_dir:
        set_static_dir(Path(static_dir))

    log_startup_banner(host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
