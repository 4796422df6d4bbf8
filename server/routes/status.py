"""
Writer status endpoint.
"""

from fastapi import APIRouter, Depends

from config.defaults import DIRECT_SAVE_CAPABILITY, WRITER_VERSION
from config.settings import WriterSettings

from ..state import get_settings


router = APIRouter()


@router.get("/api/status")
async def status(settings: WriterSettings = Depends(get_settings)) -> dict:
    """Report that the writer is running and can save configs directly."""
    return {
        "status": "running",
        "version": WRITER_VERSION,
        "capabilities": [DIRECT_SAVE_CAPABILITY],
        "paths": settings.paths.model_dump(),
        "port": settings.port,
        "maxBackups": settings.maxBackups,
    }
