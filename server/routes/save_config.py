"""
Direct save endpoint.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from config.settings import WriterSettings
from core import clean_config, write_config

from ..logging_config import log_timing
from ..requests import MalformedBodyError, SaveConfigRequest, parse_body
from ..state import get_settings

logger = logging.getLogger(__name__)


router = APIRouter()


@router.post("/api/save-config", response_model=None)
async def save_config(
    request: Request,
    settings: WriterSettings = Depends(get_settings),
) -> dict | JSONResponse:
    """
    Write the clean form of a config to one or more targets.

    Each target reports its own success or error; a malformed body is the
    only failure that rejects the whole request.
    """
    try:
        body = await parse_body(request, SaveConfigRequest)
    except MalformedBodyError as e:
        logger.error("Error saving config: %s", e)
        return JSONResponse(status_code=400, content={"success": False, "error": str(e)})

    with log_timing(logger, f"Save config to '{body.target}'"):
        # File I/O stays off the event loop
        results = await run_in_threadpool(
            write_config, clean_config(body.config), body.target, settings
        )
    succeeded = sum(1 for result in results if result.status == "success")
    logger.info(
        "Saved config to %d of %d target(s) for '%s'",
        succeeded,
        len(results),
        body.target,
    )

    response = {
        "success": True,
        "results": [result.model_dump(exclude_none=True) for result in results],
    }
    if not results:
        response["warning"] = f"Unknown target '{body.target}', nothing was written"
    return response
