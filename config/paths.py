"""Default config file locations for each supported target."""

from pathlib import Path


def claude_desktop_path(platform_id: str, home: Path) -> Path:
    """Claude Desktop keeps its config in the per-user application data folder."""
    if platform_id == "win32":
        return home / "AppData" / "Roaming" / "Claude" / "claude_desktop_config.json"
    if platform_id == "darwin":
        return home / "Library" / "Application Support" / "Claude" / "claude_desktop_config.json"
    # Linux and anything unrecognized
    return home / ".config" / "Claude" / "claude_desktop_config.json"


def claude_code_path(platform_id: str, home: Path) -> Path:
    return home / ".claude.json"


def cursor_path(platform_id: str, home: Path) -> Path:
    return home / ".cursor" / "mcp.json"


_RESOLVERS = {
    "code": claude_code_path,
    "desktop": claude_desktop_path,
    "cursor": cursor_path,
    "claudeIdeCursor": cursor_path,
}


def default_target_paths(platform_id: str, home: Path) -> dict[str, str]:
    """
    Compute the default path of every known target.

    Args:
        platform_id: Operating system identifier as reported by sys.platform
        home: User home directory

    Returns:
        Mapping of target identifier to absolute path string
    """
    return {
        target: str(resolve(platform_id, home))
        for target, resolve in _RESOLVERS.items()
    }
