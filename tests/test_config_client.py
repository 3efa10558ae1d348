"""Tests for the config backend client"""
import json

import httpx
import pytest

from deskconf.backend import NOT_FOUND, ConfigClient
from deskconf.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    TransportFailure,
)
from deskconf.extensions import ExtensionSpec, StdioConnection

from .conftest import BASE_URL, SECRET_KEY


@pytest.mark.integration
class TestConfigEntries:
    """Test config primitives against the reference backend"""

    async def test_read_missing_key_is_not_found(self, config_client):
        result = await config_client.read("MISSING")

        assert result == NOT_FOUND
        assert not result

    async def test_upsert_then_read(self, config_client):
        await config_client.upsert("GOOSE_MODE", "auto")

        result = await config_client.read("GOOSE_MODE")
        assert result.found
        assert result.value == "auto"

    async def test_second_upsert_wins(self, config_client):
        await config_client.upsert("TEMPERATURE", 0.2)
        await config_client.upsert("TEMPERATURE", 0.7)

        assert (await config_client.read("TEMPERATURE")).value == 0.7

    async def test_upsert_is_idempotent(self, config_client, backend_state):
        await config_client.upsert("K", {"a": [1, 2]})
        snapshot = dict(backend_state.config)
        await config_client.upsert("K", {"a": [1, 2]})

        assert backend_state.config == snapshot

    async def test_remove_is_idempotent(self, config_client, backend_state):
        await config_client.upsert("K", "v")

        assert await config_client.remove("K") is True
        after_first = dict(backend_state.config)
        assert await config_client.remove("K") is False
        assert backend_state.config == after_first
        assert (await config_client.read("K")) == NOT_FOUND

    async def test_read_all_never_returns_secrets(self, config_client):
        await config_client.upsert("PLAIN", "visible")
        await config_client.upsert("TOKEN", "hidden", is_secret=True)

        entries = await config_client.read_all()

        assert entries == {"PLAIN": "visible"}
        assert "hidden" not in entries.values()

    async def test_secret_plane_is_read_separately(self, config_client):
        await config_client.upsert("TOKEN", "hidden", is_secret=True)

        assert (await config_client.read("TOKEN")) == NOT_FOUND
        assert (await config_client.read("TOKEN", is_secret=True)).value == (
            "hidden"
        )

    async def test_list_providers(self, config_client, backend_state):
        backend_state.secrets["OPENAI_API_KEY"] = "sk-test"

        providers = {p.name: p for p in await config_client.list_providers()}

        assert providers["openai"].is_configured is True
        assert providers["anthropic"].is_configured is False
        assert providers["openai"].default_model == "gpt-4o"
        key_names = [k.name for k in providers["openrouter"].config_keys]
        assert key_names == ["OPENROUTER_API_KEY", "OPENROUTER_HOST"]


@pytest.mark.integration
class TestExtensionPrimitives:
    """Test extension endpoints against the reference backend"""

    async def test_add_twice_conflicts(self, config_client):
        spec = ExtensionSpec(name="developer")
        await config_client.add_extension(spec)

        with pytest.raises(ConflictError):
            await config_client.add_extension(spec)

    async def test_update_missing_is_not_found(self, config_client):
        with pytest.raises(NotFoundError) as exc_info:
            await config_client.update_extension(ExtensionSpec(name="ghost"))

        assert exc_info.value.name == "ghost"

    async def test_add_stores_record_in_config(self, config_client):
        spec = ExtensionSpec(
            name="fetch",
            connection=StdioConnection(cmd="uvx", args=["mcp-fetch"]),
        )
        await config_client.add_extension(spec)

        stored = (await config_client.read("extensions")).value
        assert stored["fetch"]["connection"]["cmd"] == "uvx"
        assert stored["fetch"]["enabled"] is True

    async def test_remove_missing_extension_succeeds(self, config_client):
        assert await config_client.remove_extension("shell") is False

    async def test_missing_extension_leaves_config_untouched(
        self,
        config_client,
    ):
        await config_client.remove_extension("shell")
        with pytest.raises(NotFoundError):
            await config_client.update_extension(ExtensionSpec(name="shell"))

        assert await config_client.read_all() == {}


@pytest.mark.integration
class TestSecretKeyRequired:
    """Test that /config rejects callers without the local secret key"""

    async def test_secret_read_without_key(self, http, backend_state):
        backend_state.secrets["OPENAI_API_KEY"] = "sk-real"

        with pytest.raises(AuthenticationError) as exc_info:
            await ConfigClient(http, "").read("OPENAI_API_KEY", is_secret=True)

        assert exc_info.value.status_code == 401

    async def test_secret_upsert_with_wrong_key(self, http, backend_state):
        backend_state.secrets["OPENAI_API_KEY"] = "sk-real"

        with pytest.raises(AuthenticationError):
            await ConfigClient(http, "wrong").upsert(
                "OPENAI_API_KEY",
                "sk-evil",
                is_secret=True,
            )

        assert backend_state.secrets == {"OPENAI_API_KEY": "sk-real"}

    async def test_raw_requests_without_header(self, http, backend_state):
        backend_state.secrets["OPENAI_API_KEY"] = "sk-real"
        body = {"key": "OPENAI_API_KEY", "is_secret": True}

        read = await http.post("/config/read", json=body)
        removed = await http.post("/config/remove", json=body)
        listed = await http.get("/config")

        assert read.status_code == 401
        assert "sk-real" not in read.text
        assert removed.status_code == 401
        assert listed.status_code == 401
        assert backend_state.secrets == {"OPENAI_API_KEY": "sk-real"}


def _client(http):
    return ConfigClient(http, SECRET_KEY)


@pytest.mark.unit
class TestTransportErrors:
    """Test failure mapping with respx-mocked responses"""

    @pytest.mark.respx(base_url=BASE_URL)
    async def test_connect_error(self, respx_mock, mock_http):
        route = respx_mock.post("/config/read").mock(
            side_effect=httpx.ConnectError("refused"),
        )

        with pytest.raises(TransportFailure):
            await _client(mock_http).read("X")

        # no retries
        assert route.call_count == 1

    @pytest.mark.respx(base_url=BASE_URL)
    async def test_timeout_is_transport_failure(self, respx_mock, mock_http):
        respx_mock.post("/config/upsert").mock(
            side_effect=httpx.ReadTimeout("slow"),
        )

        with pytest.raises(TransportFailure):
            await _client(mock_http).upsert("X", 1)

    @pytest.mark.respx(base_url=BASE_URL)
    async def test_server_error_carries_status(self, respx_mock, mock_http):
        route = respx_mock.post("/config/remove").respond(
            500,
            json={"detail": "boom"},
        )

        with pytest.raises(TransportFailure) as exc_info:
            await _client(mock_http).remove("X")

        assert exc_info.value.status_code == 500
        assert exc_info.value.detail == "boom"
        assert route.call_count == 1

    @pytest.mark.respx(base_url=BASE_URL)
    async def test_read_404_is_not_an_error(self, respx_mock, mock_http):
        respx_mock.post("/config/read").respond(404)

        assert await _client(mock_http).read("X") == NOT_FOUND

    @pytest.mark.respx(base_url=BASE_URL)
    async def test_read_sends_key_and_flag(self, respx_mock, mock_http):
        route = respx_mock.post("/config/read").respond(
            200,
            json={"key": "X", "value": 3, "is_secret": True},
        )

        result = await _client(mock_http).read("X", is_secret=True)

        assert result.value == 3
        sent = json.loads(route.calls.last.request.content)
        assert sent == {"key": "X", "is_secret": True}

    @pytest.mark.respx(base_url=BASE_URL)
    async def test_every_request_sends_secret_key(self, respx_mock, mock_http):
        read = respx_mock.post("/config/read").respond(404)
        listed = respx_mock.get("/config").respond(200, json={"config": {}})

        await _client(mock_http).read("X", is_secret=True)
        await _client(mock_http).read_all()

        for route in (read, listed):
            sent = route.calls.last.request.headers
            assert sent["X-Secret-Key"] == SECRET_KEY
