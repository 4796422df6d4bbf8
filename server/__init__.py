"""
Local config writer API server.

Serves the browser UI and writes clean MCP configs straight to the
config files of Claude Code, Claude Desktop and Cursor.
"""

from .app import app
from .routes import register_routes
from .state import get_settings, get_static_dir, set_settings, set_static_dir

# Register all routes with the app
register_routes(app)

__all__ = ["app", "get_settings", "set_settings", "get_static_dir", "set_static_dir"]
