"""ConfigDocument model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .server_entry import ServerEntry


class ConfigDocument(BaseModel):
    """The whole synchronized unit: named servers plus save metadata."""

    model_config = ConfigDict(extra="allow")

    mcpServers: dict[str, ServerEntry] = Field(
        default_factory=dict,
        description="Servers keyed by unique name",
    )
    version: str | None = Field(
        default=None,
        description="Decimal version string, advanced on every remote save",
    )
    lastModified: str | None = Field(
        default=None,
        description="ISO-8601 timestamp of the last remote save",
    )
    modifiedBy: str | None = Field(
        default=None,
        description="Device that performed the last remote save",
    )

    @field_validator("version", mode="before")
    @classmethod
    def version_as_string(cls, value: Any) -> Any:
        # Older documents stored the version as a JSON number
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def to_dict(self) -> dict[str, Any]:
        """Serialize for storage, leaving out metadata that was never set."""
        return self.model_dump(exclude_none=True)
