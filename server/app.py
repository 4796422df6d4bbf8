"""
FastAPI application for the local config writer.

The writer is meant to be reached from the mcpilot UI and CLI on the same
machine. CORS stays open by default because the UI may be loaded from a
file:// page or a different port.
"""

import os
from typing import Mapping

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.defaults import WRITER_VERSION
from server.middleware import RequestLoggingMiddleware

CORS_ORIGINS_ENV = "CORS_ORIGINS"
ANY_ORIGIN = "*"


def cors_origins_from_env(environ: Mapping[str, str] | None = None) -> list[str]:
    """
    Allowed origins from CORS_ORIGINS.

    A comma-separated list narrows access, e.g.
    CORS_ORIGINS="http://localhost:3000,http://127.0.0.1:3000". Unset, empty
    or "*" allows every origin.
    """
    environ = os.environ if environ is None else environ
    raw = environ.get(CORS_ORIGINS_ENV, "").strip()
    if not raw or raw == ANY_ORIGIN:
        return [ANY_ORIGIN]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


app = FastAPI(
    title="MCP Config Writer",
    description="Writes MCP server configs for Claude Code, Claude Desktop and Cursor, with rotating backups.",
    version=WRITER_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins_from_env(),
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)
# Added last so it wraps CORS and sees preflight responses too
app.add_middleware(RequestLoggingMiddleware)

