"""ServerEntry model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_serializer


class ServerEntry(BaseModel):
    """One managed MCP server launch configuration.

    Only command is checked. args, env and enabled are kept as given so an
    unusual entry from another device never rejects the whole document.
    """

    model_config = ConfigDict(extra="allow")

    command: str = Field(description="Executable used to start the server")
    args: list[Any] | None = Field(default_factory=list, description="Command arguments")
    env: dict[str, Any] | None = Field(
        default_factory=dict, description="Environment variables"
    )
    # Not coerced: only a literal False disables the server
    enabled: Any = Field(
        default=None,
        description="False disables the server; a missing value means enabled",
    )

    @model_serializer(mode="wrap")
    def omit_unset_optionals(self, handler) -> dict[str, Any]:
        data = handler(self)
        if not data.get("env"):
            data.pop("env", None)
        if data.get("enabled") is None:
            data.pop("enabled", None)
        return data
