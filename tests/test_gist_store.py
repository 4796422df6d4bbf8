"""
Tests for the Gist-backed remote store.

Uses httpx.MockTransport in place of the GitHub API.
"""

import json

import httpx
import pytest

from client import GistStore
from core import (
    AuthenticationError,
    ConfigDocument,
    DocumentNotFoundError,
    MissingCredentialsError,
    RemoteStoreError,
    ServerEntry,
)


GIST_ID = "abc123"
UPDATED_AT = "2025-03-14T15:09:26Z"


def gist_payload(content: str, file_name: str = "mcp.txt") -> dict:
    return {
        "id": GIST_ID,
        "updated_at": UPDATED_AT,
        "files": {file_name: {"filename": file_name, "content": content}},
    }


def make_store(handler, **kwargs) -> GistStore:
    return GistStore(
        gist_id=kwargs.pop("gist_id", GIST_ID),
        token=kwargs.pop("token", "ghp_secret"),
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


class TestLoad:
    """Test fetching the document."""

    @pytest.mark.asyncio
    async def test_load_document(self, sample_document):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=gist_payload(json.dumps(sample_document.to_dict())))

        loaded = await make_store(handler).load()

        assert loaded.document == sample_document
        assert loaded.updated_at == UPDATED_AT
        request = requests[0]
        assert request.method == "GET"
        assert request.url.path == f"/gists/{GIST_ID}"
        assert "t" in request.url.params
        assert request.headers["Authorization"] == "Bearer ghp_secret"
        assert request.headers["Accept"] == "application/vnd.github.v3+json"

    @pytest.mark.asyncio
    async def test_unusual_entries_load(self):
        content = json.dumps({
            "mcpServers": {
                "nullargs": {"command": "node", "args": None},
                "numenv": {"command": "uvx", "env": {"PORT": 8080}},
                "zero": {"command": "deno", "enabled": 0},
            }
        })

        loaded = await make_store(lambda request: httpx.Response(200, json=gist_payload(content))).load()

        servers = loaded.document.mcpServers
        assert servers["nullargs"].args is None
        assert servers["numenv"].env == {"PORT": 8080}
        assert servers["zero"].enabled == 0
        assert servers["zero"].enabled is not False

    @pytest.mark.asyncio
    async def test_invalid_token(self):
        store = make_store(lambda request: httpx.Response(401, json={"message": "Bad credentials"}))

        with pytest.raises(AuthenticationError, match="Invalid GitHub token"):
            await store.load()

    @pytest.mark.asyncio
    async def test_gist_not_found(self):
        store = make_store(lambda request: httpx.Response(404))

        with pytest.raises(DocumentNotFoundError, match="Gist not found"):
            await store.load()

    @pytest.mark.asyncio
    async def test_other_http_error(self):
        store = make_store(lambda request: httpx.Response(503))

        with pytest.raises(RemoteStoreError, match="HTTP 503"):
            await store.load()

    @pytest.mark.asyncio
    async def test_file_missing_from_gist(self):
        store = make_store(
            lambda request: httpx.Response(200, json=gist_payload("{}", file_name="other.txt"))
        )

        with pytest.raises(DocumentNotFoundError, match="File 'mcp.txt' not found"):
            await store.load()

    @pytest.mark.asyncio
    async def test_invalid_document_content(self):
        store = make_store(lambda request: httpx.Response(200, json=gist_payload("not json")))

        with pytest.raises(RemoteStoreError, match="Invalid config document"):
            await store.load()

    @pytest.mark.asyncio
    async def test_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(RemoteStoreError, match="Request failed"):
            await make_store(handler).load()

    @pytest.mark.asyncio
    async def test_missing_token(self):
        store = make_store(lambda request: httpx.Response(200), token="")

        with pytest.raises(MissingCredentialsError):
            await store.load()

    @pytest.mark.asyncio
    async def test_missing_gist_id(self):
        store = make_store(lambda request: httpx.Response(200), gist_id="")

        with pytest.raises(MissingCredentialsError):
            await store.load()


class TestSave:
    """Test replacing the document."""

    @pytest.mark.asyncio
    async def test_save_patches_named_file(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"updated_at": UPDATED_AT})

        document = ConfigDocument(mcpServers={"a": ServerEntry(command="npx")}, version="1.0")

        updated_at = await make_store(handler, file_name="servers.json").save(document)

        assert updated_at == UPDATED_AT
        request = requests[0]
        assert request.method == "PATCH"
        assert request.url.path == f"/gists/{GIST_ID}"
        body = json.loads(request.content)
        content = body["files"]["servers.json"]["content"]
        assert json.loads(content) == document.to_dict()
        assert content.startswith("{\n  ")

    @pytest.mark.asyncio
    async def test_save_rejected(self):
        store = make_store(lambda request: httpx.Response(422, json={"message": "Validation"}))

        with pytest.raises(RemoteStoreError, match="HTTP 422"):
            await store.save(ConfigDocument())

    @pytest.mark.asyncio
    async def test_save_unauthorized(self):
        store = make_store(lambda request: httpx.Response(401))

        with pytest.raises(AuthenticationError):
            await store.save(ConfigDocument())
