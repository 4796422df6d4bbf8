"""
Writer settings endpoints.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from config.settings import WriterSettings

from ..requests import MalformedBodyError, SettingsUpdate, parse_body
from ..state import get_settings, set_settings

logger = logging.getLogger(__name__)


router = APIRouter()


def settings_payload(settings: WriterSettings) -> dict:
    return {
        "port": settings.port,
        "maxBackups": settings.maxBackups,
        "paths": settings.paths.model_dump(),
    }


@router.get("/api/settings")
async def get_settings_endpoint(settings: WriterSettings = Depends(get_settings)) -> dict:
    """Get the current port, retention limit and target paths."""
    return settings_payload(settings)


@router.post("/api/settings", response_model=None)
async def update_settings_endpoint(
    request: Request,
    settings: WriterSettings = Depends(get_settings),
) -> dict | JSONResponse:
    """
    Update target paths and/or the retention limit.

    Only provided, non-empty fields are applied. Changes last for the
    lifetime of the process.
    """
    try:
        update = await parse_body(request, SettingsUpdate)
    except MalformedBodyError as e:
        logger.warning("Rejected settings update: %s", e)
        return JSONResponse(status_code=400, content={"success": False, "error": str(e)})

    merged = settings.merged(update)
    set_settings(merged)
    logger.info("Settings updated")

    return {"success": True, "settings": settings_payload(merged)}
