"""ClientConfig model."""

from pydantic import BaseModel, Field

from .defaults import DEFAULT_API_URL, DEFAULT_GIST_FILENAME, DEFAULT_WRITER_URL


class ClientConfig(BaseModel):
    """Settings for the config store client."""

    gistId: str = Field(default="", description="ID of the Gist holding the config")
    githubToken: str = Field(default="", description="GitHub token with gist scope")
    fileName: str = Field(
        default=DEFAULT_GIST_FILENAME,
        description="Name of the file inside the Gist",
    )
    writerUrl: str = Field(
        default=DEFAULT_WRITER_URL,
        description="Base URL of the local config writer",
    )
    apiUrl: str = Field(default=DEFAULT_API_URL, description="GitHub API base URL")
    downloadDir: str | None = Field(
        default=None,
        description="Where downloaded configs go when direct save is unavailable",
    )
