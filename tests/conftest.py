"""
Shared pytest fixtures for all tests.
"""
import tempfile
from pathlib import Path
from typing import Iterator

import pytest

from config.paths import default_target_paths
from config.settings import TargetPaths, WriterSettings
from core.models import ConfigDocument, ServerEntry


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def home_dir(temp_dir: Path) -> Path:
    """A fake home directory inside the temp dir."""
    home = temp_dir / "home"
    home.mkdir()
    return home


@pytest.fixture
def writer_settings(home_dir: Path) -> WriterSettings:
    """Writer settings with Linux default paths under the fake home."""
    return WriterSettings(
        port=8080,
        maxBackups=10,
        paths=TargetPaths(**default_target_paths("linux", home_dir)),
    )


@pytest.fixture
def sample_document() -> ConfigDocument:
    """A document with enabled, disabled and implicitly enabled servers."""
    return ConfigDocument(
        mcpServers={
            "filesystem": ServerEntry(
                command="npx",
                args=["-y", "@modelcontextprotocol/server-filesystem", "/tmp"],
                enabled=True,
            ),
            "github": ServerEntry(
                command="npx",
                args=["-y", "@modelcontextprotocol/server-github"],
                env={"GITHUB_TOKEN": "ghp_test"},
            ),
            "sqlite": ServerEntry(
                command="uvx",
                args=["mcp-server-sqlite"],
                enabled=False,
            ),
        },
        version="1.2",
        lastModified="2025-01-01T00:00:00.000Z",
        modifiedBy="laptop",
    )
