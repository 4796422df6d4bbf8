"""
Tests for the local config writer client.

The happy paths run against the real writer app through httpx.ASGITransport;
failure paths use httpx.MockTransport.
"""
import json
from pathlib import Path

import httpx
import pytest

from client import LocalWriterClient
from core import WriterUnavailableError
from server import app, set_settings


@pytest.fixture(autouse=True)
def use_writer_settings(writer_settings):
    set_settings(writer_settings)
    yield writer_settings
    set_settings(None)


@pytest.fixture
def writer() -> LocalWriterClient:
    """Client wired straight into the writer app."""
    return LocalWriterClient("http://testserver", transport=httpx.ASGITransport(app=app))


def unreachable_writer() -> LocalWriterClient:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return LocalWriterClient("http://localhost:8080", transport=httpx.MockTransport(handler))


class TestProbes:
    """Test capability and hostname probes."""

    @pytest.mark.asyncio
    async def test_has_direct_save(self, writer):
        assert await writer.has_direct_save() is True

    @pytest.mark.asyncio
    async def test_unreachable_means_no_direct_save(self):
        assert await unreachable_writer().has_direct_save() is False

    @pytest.mark.asyncio
    async def test_missing_capability(self):
        client = LocalWriterClient(
            transport=httpx.MockTransport(
                lambda request: httpx.Response(200, json={"status": "running", "capabilities": []})
            )
        )

        assert await client.has_direct_save() is False

    @pytest.mark.asyncio
    async def test_error_status_means_no_direct_save(self):
        client = LocalWriterClient(transport=httpx.MockTransport(lambda request: httpx.Response(500)))

        assert await client.has_direct_save() is False

    @pytest.mark.asyncio
    async def test_hostname(self, writer):
        assert await writer.get_hostname()

    @pytest.mark.asyncio
    async def test_hostname_unreachable(self):
        assert await unreachable_writer().get_hostname() is None


class TestSettings:
    """Test reading and changing writer settings."""

    @pytest.mark.asyncio
    async def test_get_settings(self, writer, writer_settings):
        settings = await writer.get_settings()

        assert settings["paths"] == writer_settings.paths.model_dump()

    @pytest.mark.asyncio
    async def test_update_settings(self, writer, writer_settings):
        settings = await writer.update_settings(
            paths={"code": "/tmp/code.json", "desktop": None}, max_backups=2
        )

        assert settings["paths"]["code"] == "/tmp/code.json"
        assert settings["paths"]["desktop"] == writer_settings.paths.desktop
        assert settings["maxBackups"] == 2

    @pytest.mark.asyncio
    async def test_update_settings_unreachable(self):
        with pytest.raises(WriterUnavailableError):
            await unreachable_writer().update_settings(max_backups=2)


class TestSaveConfig:
    """Test direct saves through the writer."""

    @pytest.mark.asyncio
    async def test_save_config(self, writer, writer_settings, sample_document):
        results = await writer.save_config(sample_document, "both")

        assert [r.target for r in results] == ["code", "desktop"]
        assert all(r.status == "success" for r in results)
        written = json.loads(Path(writer_settings.paths.code).read_text())
        assert set(written["mcpServers"]) == {"filesystem", "github"}

    @pytest.mark.asyncio
    async def test_save_rejected_by_writer(self, sample_document):
        client = LocalWriterClient(
            transport=httpx.MockTransport(
                lambda request: httpx.Response(400, json={"success": False, "error": "bad body"})
            )
        )

        with pytest.raises(WriterUnavailableError, match="bad body"):
            await client.save_config(sample_document, "code")

    @pytest.mark.asyncio
    async def test_save_unreachable(self, sample_document):
        with pytest.raises(WriterUnavailableError, match="not reachable"):
            await unreachable_writer().save_config(sample_document, "code")
