"""
Host identification endpoint.
"""

import platform
import socket
import sys

from fastapi import APIRouter


router = APIRouter()


@router.get("/api/hostname")
async def hostname() -> dict:
    """Identify this machine so saves can be attributed to a device."""
    return {
        "hostname": socket.gethostname(),
        "platform": sys.platform,
        "type": platform.system(),
    }
