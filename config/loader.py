"""Configuration loading utilities."""

import json
import logging
import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .client_config import ClientConfig
from .defaults import GIST_ID_ENV, GITHUB_TOKEN_ENV, WRITER_URL_ENV

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".mcpilot"
CONFIG_FILENAMES = ("config.jsonc", "config.json")

# Environment variables mapped onto ClientConfig fields
ENV_OVERRIDES = {
    GIST_ID_ENV: "gistId",
    GITHUB_TOKEN_ENV: "githubToken",
    WRITER_URL_ENV: "writerUrl",
}


def strip_jsonc_comments(content: str) -> str:
    """
    Strip comments from JSONC content to convert to valid JSON.

    Handles:
    - Single-line comments: // comment
    - Multi-line comments: /* comment */

    Args:
        content: JSONC content string

    Returns:
        JSON string with comments removed
    """
    # Single-line comments, but not the "//" inside URLs like "https://..."
    content = re.sub(r"(?<![:\"])//.*?$", "", content, flags=re.MULTILINE)
    content = re.sub(r"/\*.*?\*/", "", content, flags=re.DOTALL)
    return content


def load_config_file(path: Path) -> dict[str, Any] | None:
    """
    Load a config file from the given path.

    Supports both .json and .jsonc files with comment stripping.

    Args:
        path: Path to the config file

    Returns:
        Parsed config dictionary or None if file doesn't exist or is invalid
    """
    if not path.exists():
        return None

    try:
        content = path.read_text(encoding="utf-8")
        if path.suffix == ".jsonc":
            content = strip_jsonc_comments(content)
        data = json.loads(content)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to load config from %s: %s", path, e)
        return None

    if not isinstance(data, dict):
        logger.warning("Ignoring config at %s: expected a JSON object", path)
        return None
    return data


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two configuration dictionaries.

    Args:
        base: Base configuration
        override: Override configuration (takes precedence)

    Returns:
        Merged configuration dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def default_config_dir() -> Path:
    return Path.home() / CONFIG_DIR_NAME


def load_client_config(
    config_dir: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ClientConfig:
    """
    Load store client configuration from files and environment.

    Precedence, lowest first: built-in defaults, config.jsonc, config.json,
    then the GIST_ID / GITHUB_TOKEN / MCP_WRITER_URL environment variables.

    Args:
        config_dir: Directory holding the config files (defaults to ~/.mcpilot)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Loaded and merged ClientConfig model
    """
    config_dir = config_dir or default_config_dir()
    environ = os.environ if environ is None else environ

    config_data: dict[str, Any] = {}
    for filename in CONFIG_FILENAMES:
        file_data = load_config_file(config_dir / filename)
        if file_data:
            config_data = merge_configs(config_data, file_data)

    for env_var, field in ENV_OVERRIDES.items():
        if environ.get(env_var):
            config_data[field] = environ[env_var]

    return ClientConfig(**config_data)


def save_client_config(config: ClientConfig, config_dir: Path | None = None) -> Path:
    """
    Persist client configuration as config.json.

    Args:
        config: Configuration to write
        config_dir: Target directory (defaults to ~/.mcpilot)

    Returns:
        Path of the written file
    """
    config_dir = config_dir or default_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    path = config_dir / "config.json"
    path.write_text(
        json.dumps(config.model_dump(exclude_none=True), indent=2),
        encoding="utf-8",
    )
    logger.info("Saved client configuration to %s", path)
    return path
