"""BackupInfo model."""

from pydantic import BaseModel


class BackupInfo(BaseModel):
    backup: bool
    path: str | None = None  # set only when a backup was written
