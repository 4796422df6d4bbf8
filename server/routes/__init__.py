"""
Route registration for the config writer API.
"""

from fastapi import FastAPI

from . import hostname, save_config, settings, static, status


def register_routes(app: FastAPI) -> None:
    """Register all routes with the FastAPI application."""
    app.include_router(status.router)
    app.include_router(hostname.router)
    app.include_router(settings.router)
    app.include_router(save_config.router)
    # Catch-all, keep last
    app.include_router(static.router)
