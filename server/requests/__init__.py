"""
HTTP request models for the API.

These are Pydantic models for validating and parsing API requests.
"""

from config.settings import SettingsUpdate

from .body import MalformedBodyError, parse_body
from .save_config_request import SaveConfigRequest

__all__ = [
    # Requests
    "SaveConfigRequest",
    "SettingsUpdate",
    # Parsing
    "MalformedBodyError",
    "parse_body",
]
