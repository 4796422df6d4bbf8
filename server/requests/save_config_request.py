"""SaveConfigRequest model."""

from pydantic import BaseModel

from core.models import ConfigDocument


class SaveConfigRequest(BaseModel):
    config: ConfigDocument
    target: str  # a target name, "both", or "all"
