"""
In-memory edit operations on a config document.

Names are unique because they are mapping keys; renaming is a delete
followed by an insert under the new key.
"""

import logging

from .clean import is_enabled
from .exceptions import InvalidOperationError, NotFoundError
from .models import ConfigDocument, ServerEntry

logger = logging.getLogger(__name__)


def get_server(document: ConfigDocument, name: str) -> ServerEntry:
    try:
        return document.mcpServers[name]
    except KeyError:
        raise NotFoundError("Server", name) from None


def add_server(document: ConfigDocument, name: str, entry: ServerEntry) -> None:
    """
    Add a new server.

    Raises:
        InvalidOperationError: If the name is empty or already taken
    """
    name = name.strip()
    if not name:
        raise InvalidOperationError("Server name is required")
    if not entry.command.strip():
        raise InvalidOperationError("Server command is required")
    if name in document.mcpServers:
        raise InvalidOperationError(f"Server already exists: {name}")

    document.mcpServers[name] = entry
    logger.info("Added server '%s'", name)


def update_server(document: ConfigDocument, name: str, entry: ServerEntry) -> None:
    """Replace the entry stored under an existing name."""
    get_server(document, name)
    if not entry.command.strip():
        raise InvalidOperationError("Server command is required")

    document.mcpServers[name] = entry
    logger.info("Updated server '%s'", name)


def rename_server(document: ConfigDocument, old_name: str, new_name: str) -> None:
    """
    Move a server to a new name.

    Raises:
        NotFoundError: If old_name does not exist
        InvalidOperationError: If new_name is empty or already taken
    """
    entry = get_server(document, old_name)
    new_name = new_name.strip()
    if not new_name:
        raise InvalidOperationError("Server name is required")
    if new_name == old_name:
        return
    if new_name in document.mcpServers:
        raise InvalidOperationError(f"Server already exists: {new_name}")

    del document.mcpServers[old_name]
    document.mcpServers[new_name] = entry
    logger.info("Renamed server '%s' to '%s'", old_name, new_name)


def delete_server(document: ConfigDocument, name: str) -> ServerEntry:
    entry = get_server(document, name)
    del document.mcpServers[name]
    logger.info("Deleted server '%s'", name)
    return entry


def toggle_server(document: ConfigDocument, name: str) -> bool:
    """
    Flip a server between enabled and disabled.

    Returns:
        The new enabled state
    """
    entry = get_server(document, name)
    entry.enabled = not is_enabled(entry)
    logger.info("Server '%s' %s", name, "enabled" if entry.enabled else "disabled")
    return entry.enabled
