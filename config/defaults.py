"""Default configuration values."""

# Local config writer
DEFAULT_PORT = 8080
DEFAULT_MAX_BACKUPS = 10
WRITER_VERSION = "1.0.0"
DIRECT_SAVE_CAPABILITY = "direct-save"

# Environment overrides for the local config writer
PORT_ENV = "MCP_PORT"
MAX_BACKUPS_ENV = "MCP_MAX_BACKUPS"
STATIC_DIR_ENV = "MCP_STATIC_DIR"
PATH_ENV_VARS = {
    "code": "MCP_CLAUDE_CODE_PATH",
    "desktop": "MCP_CLAUDE_DESKTOP_PATH",
    "cursor": "MCP_CURSOR_PATH",
    "claudeIdeCursor": "MCP_CLAUDE_IDE_CURSOR_PATH",
}

# Known targets, in write order
TARGETS = ("code", "desktop", "cursor", "claudeIdeCursor")
TARGET_LABELS = {
    "code": "Claude Code CLI",
    "desktop": "Claude Desktop",
    "cursor": "Cursor",
    "claudeIdeCursor": "Claude IDE Cursor",
}

# Aggregate selectors
TARGET_GROUPS = {
    "both": ("code", "desktop"),
    "all": TARGETS,
}

# File names used when the config is downloaded instead of written directly
DOWNLOAD_FILENAMES = {
    "desktop": "claude_desktop_config.json",
    "code": "claude.json",
    "cursor": "mcp.json",
    "claudeIdeCursor": "mcp.json",
}

# Remote store (GitHub Gist API)
DEFAULT_API_URL = "https://api.github.com"
DEFAULT_GIST_FILENAME = "mcp.txt"
GIST_ACCEPT_HEADER = "application/vnd.github.v3+json"
DEFAULT_WRITER_URL = f"http://localhost:{DEFAULT_PORT}"

# Store client environment overrides
GIST_ID_ENV = "GIST_ID"
GITHUB_TOKEN_ENV = "GITHUB_TOKEN"
WRITER_URL_ENV = "MCP_WRITER_URL"

# Device name reported when the local writer cannot be reached
UNKNOWN_DEVICE = "Unknown_Device"

# First version assigned to a document that has never been saved
INITIAL_VERSION = "1.0"
