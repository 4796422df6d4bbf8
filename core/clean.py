"""
Clean config derivation.

Desktop applications expect a bare {"mcpServers": {...}} object, so the
management metadata kept in a ConfigDocument is stripped before export.
"""

from typing import Any

from .models import ConfigDocument, ServerEntry


def is_enabled(entry: ServerEntry) -> bool:
    """A server is enabled unless its flag is explicitly False."""
    return entry.enabled is not False


def clean_entry(entry: ServerEntry) -> dict[str, Any]:
    cleaned: dict[str, Any] = {
        "command": entry.command,
        "args": list(entry.args or []),
    }
    if entry.env:
        cleaned["env"] = dict(entry.env)
    return cleaned


def clean_config(document: ConfigDocument) -> dict[str, Any]:
    """
    Derive the publishable form of a config document.

    Args:
        document: Full config document

    Returns:
        {"mcpServers": {name: {command, args, env?}}} with disabled servers removed
    """
    return {
        "mcpServers": {
            name: clean_entry(entry)
            for name, entry in document.mcpServers.items()
            if is_enabled(entry)
        }
    }
