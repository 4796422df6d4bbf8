"""
Tests for the config store client: remote sync and local apply.
"""
import json
import socket
from pathlib import Path

import httpx
import pytest

from client import ConfigStore, GistStore, LocalWriterClient, download_filenames
from config import ClientConfig
from core import InvalidOperationError, RemoteStoreError, ServerEntry
from server import app, set_settings


class FakeGist:
    """In-memory stand-in for the Gist API, served through MockTransport."""

    def __init__(self, document: dict | None = None, fail_patch: bool = False):
        self.content = json.dumps(document or {"mcpServers": {}})
        self.fail_patch = fail_patch
        self.patches = 0

    def handler(self, request: httpx.Request) -> httpx.Response:
        if request.method == "PATCH":
            if self.fail_patch:
                return httpx.Response(500)
            self.patches += 1
            self.content = json.loads(request.content)["files"]["mcp.txt"]["content"]
            return httpx.Response(200, json={"updated_at": "2025-03-14T15:09:26Z"})
        return httpx.Response(
            200,
            json={
                "updated_at": "2025-03-14T15:00:00Z",
                "files": {"mcp.txt": {"content": self.content}},
            },
        )

    def store(self) -> GistStore:
        return GistStore("gist1", "token", transport=httpx.MockTransport(self.handler))


def offline_writer() -> LocalWriterClient:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return LocalWriterClient(transport=httpx.MockTransport(handler))


def online_writer() -> LocalWriterClient:
    return LocalWriterClient("http://testserver", transport=httpx.ASGITransport(app=app))


@pytest.fixture
def use_writer_settings(writer_settings):
    set_settings(writer_settings)
    yield writer_settings
    set_settings(None)


class TestRemoteSync:
    """Test whole-document load and save."""

    @pytest.mark.asyncio
    async def test_load_replaces_document(self, sample_document):
        gist = FakeGist(sample_document.to_dict())
        store = ConfigStore(gist.store(), offline_writer())
        store.add_server("local-only", ServerEntry(command="node"))

        await store.load()

        assert "local-only" not in store.document.mcpServers
        assert store.document == sample_document
        assert store.updated_at == "2025-03-14T15:00:00Z"

    @pytest.mark.asyncio
    async def test_save_stamps_version_and_device(self, sample_document):
        gist = FakeGist(sample_document.to_dict())
        store = ConfigStore(gist.store(), offline_writer())
        await store.load()

        saved = await store.save()

        assert saved.version == "1.3"
        assert saved.modifiedBy == "Unknown_Device"
        assert saved.lastModified.endswith("Z")
        stored = json.loads(gist.content)
        assert stored["version"] == "1.3"
        assert stored["mcpServers"]["sqlite"]["enabled"] is False

    @pytest.mark.asyncio
    async def test_first_save_starts_at_one(self):
        gist = FakeGist()
        store = ConfigStore(gist.store(), offline_writer())
        store.add_server("fs", ServerEntry(command="npx"))

        saved = await store.save()

        assert saved.version == "1.0"

    @pytest.mark.asyncio
    async def test_device_name_from_writer(self, use_writer_settings):
        store = ConfigStore(FakeGist().store(), online_writer())

        saved = await store.save()

        assert saved.modifiedBy == socket.gethostname()

    @pytest.mark.asyncio
    async def test_failed_save_keeps_version(self, sample_document):
        gist = FakeGist(sample_document.to_dict(), fail_patch=True)
        store = ConfigStore(gist.store(), offline_writer())
        await store.load()

        with pytest.raises(RemoteStoreError):
            await store.save()

        assert store.document.version == "1.2"

    @pytest.mark.asyncio
    async def test_edit_then_save_round_trip(self, sample_document):
        gist = FakeGist(sample_document.to_dict())
        store = ConfigStore(gist.store(), offline_writer())
        await store.load()

        store.toggle_server("sqlite")
        store.rename_server("github", "gh")
        store.delete_server("filesystem")
        await store.save()
        await store.load()

        assert set(store.document.mcpServers) == {"sqlite", "gh"}
        assert store.document.mcpServers["sqlite"].enabled is True


class TestApply:
    """Test applying the clean config locally."""

    @pytest.mark.asyncio
    async def test_direct_save_when_writer_running(
        self, use_writer_settings, sample_document, temp_dir
    ):
        store = ConfigStore(FakeGist().store(), online_writer(), download_dir=temp_dir / "dl")
        store.document = sample_document

        outcome = await store.apply("desktop")

        assert outcome.mode == "direct"
        assert outcome.results[0].status == "success"
        assert Path(use_writer_settings.paths.desktop).exists()
        assert not (temp_dir / "dl").exists()

    @pytest.mark.asyncio
    async def test_download_fallback(self, sample_document, temp_dir):
        store = ConfigStore(FakeGist().store(), offline_writer(), download_dir=temp_dir)
        store.document = sample_document

        outcome = await store.apply("all")

        assert outcome.mode == "download"
        assert outcome.reason
        assert [p.name for p in outcome.files] == [
            "claude_desktop_config.json",
            "claude.json",
            "mcp.json",
        ]
        for path in outcome.files:
            assert json.loads(path.read_text()) == store.clean_config()

    @pytest.mark.asyncio
    async def test_fallback_when_direct_save_fails(self, sample_document, temp_dir):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/api/status":
                return httpx.Response(200, json={"capabilities": ["direct-save"]})
            return httpx.Response(500, text="boom")

        writer = LocalWriterClient(transport=httpx.MockTransport(handler))
        store = ConfigStore(FakeGist().store(), writer, download_dir=temp_dir)
        store.document = sample_document

        outcome = await store.apply("code")

        assert outcome.mode == "download"
        assert [p.name for p in outcome.files] == ["claude.json"]

    @pytest.mark.asyncio
    async def test_empty_config_refused(self, temp_dir):
        store = ConfigStore(FakeGist().store(), offline_writer(), download_dir=temp_dir)

        with pytest.raises(InvalidOperationError, match="No servers loaded"):
            await store.apply("code")
        assert list(temp_dir.iterdir()) == []

    @pytest.mark.asyncio
    async def test_unknown_target_refused(self, use_writer_settings, sample_document, temp_dir):
        store = ConfigStore(FakeGist().store(), online_writer(), download_dir=temp_dir / "dl")
        store.document = sample_document

        with pytest.raises(InvalidOperationError, match="Unknown target 'vscode'"):
            await store.apply("vscode")
        assert not (temp_dir / "dl").exists()


class TestDownloadFilenames:
    """Test the fallback file names per selector."""

    def test_single_targets(self):
        assert download_filenames("desktop") == ["claude_desktop_config.json"]
        assert download_filenames("code") == ["claude.json"]
        assert download_filenames("cursor") == ["mcp.json"]
        assert download_filenames("claudeIdeCursor") == ["mcp.json"]

    def test_groups(self):
        assert download_filenames("both") == ["claude_desktop_config.json", "claude.json"]
        assert download_filenames("all") == ["claude_desktop_config.json", "claude.json", "mcp.json"]

    def test_unknown(self):
        assert download_filenames("vscode") == []


class TestFromConfig:
    """Test building a store from client configuration."""

    def test_from_config(self, temp_dir):
        config = ClientConfig(
            gistId="g", githubToken="t", fileName="f.txt",
            writerUrl="http://127.0.0.1:9999/", downloadDir=str(temp_dir),
        )

        store = ConfigStore.from_config(config)

        assert store.remote.gist_id == "g"
        assert store.remote.file_name == "f.txt"
        assert store.writer.base_url == "http://127.0.0.1:9999"
        assert store.download_dir == temp_dir
