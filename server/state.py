"""
Server-side state management.

The writer settings are an immutable WriterSettings value. Updates replace
the held value with a merged copy; routes read it through get_settings()
so each request works with one consistent snapshot.
"""

from pathlib import Path

from config.settings import WriterSettings

DEFAULT_STATIC_DIR = Path(__file__).resolve().parent.parent / "web"


# =============================================================================
# Writer Settings
# =============================================================================

_settings: WriterSettings | None = None


def set_settings(new_settings: WriterSettings | None) -> None:
    """Replace the current settings. Passing None resets to env defaults."""
    global _settings
    _settings = new_settings


def get_settings() -> WriterSettings:
    """Get the current settings, loading them from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = WriterSettings.from_env()
    return _settings


# =============================================================================
# Static Assets
# =============================================================================

_static_dir: Path = DEFAULT_STATIC_DIR


def set_static_dir(directory: Path) -> None:
    """Set the directory the UI assets are served from."""
    global _static_dir
    _static_dir = directory


def get_static_dir() -> Path:
    """Get the directory the UI assets are served from."""
    return _static_dir
