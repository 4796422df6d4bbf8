"""TargetResult model."""

from typing import Literal

from pydantic import BaseModel

from .backup_info import BackupInfo


class TargetResult(BaseModel):
    """Outcome of writing the clean config to one target."""

    target: str
    label: str
    status: Literal["success", "error"]
    path: str | None = None
    backup: BackupInfo | None = None
    error: str | None = None
