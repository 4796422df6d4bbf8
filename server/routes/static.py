"""
Static file serving for the browser UI.

Must be registered last: its catch-all path would otherwise shadow the
API routes.
"""

import logging
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse, Response

from ..state import get_static_dir

logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"
DEFAULT_CONTENT_TYPE = "text/plain"
CONTENT_TYPES = {
    ".html": "text/html",
    ".js": "application/javascript",
    ".css": "text/css",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".ico": "image/x-icon",
}


router = APIRouter()


def is_traversal(request_path: str) -> bool:
    """Any parent-directory sequence in the request path is refused outright."""
    return ".." in request_path


def resolve_static_path(static_dir: Path, relative: str) -> Path | None:
    """Resolve a request path inside static_dir, or None if it escapes it."""
    base_dir = static_dir.resolve()
    resolved = (base_dir / relative.lstrip("/")).resolve()
    try:
        resolved.relative_to(base_dir)
    except ValueError:
        return None
    return resolved


def content_type_for(path: Path) -> str:
    return CONTENT_TYPES.get(path.suffix, DEFAULT_CONTENT_TYPE)


@router.get("/{file_path:path}", include_in_schema=False)
async def serve_static(file_path: str) -> Response:
    """Serve a UI asset from the static directory."""
    relative = file_path or INDEX_FILE

    if is_traversal(relative):
        logger.warning("Refused path traversal attempt: %s", relative)
        return PlainTextResponse("Forbidden", status_code=403)

    full_path = resolve_static_path(get_static_dir(), relative)
    if full_path is None:
        logger.warning("Refused path outside static directory: %s", relative)
        return PlainTextResponse("Forbidden", status_code=403)

    if not full_path.is_file():
        logger.info("404 Not Found: %s", relative)
        return PlainTextResponse("Not found", status_code=404)

    try:
        content = full_path.read_bytes()
    except OSError as e:
        logger.error("Error reading file %s: %s", full_path, e)
        return PlainTextResponse("Server error", status_code=500)

    content_type = content_type_for(full_path)
    logger.debug("Serving: %s (%s)", relative, content_type)
    return Response(
        content=content,
        media_type=content_type,
        headers={"Cache-Control": "no-cache"},
    )
