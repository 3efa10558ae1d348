"""Tests for the secret store client"""
import json

import httpx
import pytest

from deskconf.backend import SecretClient
from deskconf.exceptions import AuthenticationError, TransportFailure

from .conftest import BASE_URL, SECRET_KEY


@pytest.mark.integration
class TestSecretStore:
    """Test store/delete against the reference backend"""

    async def test_store_then_delete(self, secret_client, backend_state):
        await secret_client.store("OPENAI_API_KEY", "sk-test")
        assert backend_state.secrets == {"OPENAI_API_KEY": "sk-test"}

        assert await secret_client.delete("OPENAI_API_KEY") is True
        assert backend_state.secrets == {}

    async def test_store_overwrites(self, secret_client, backend_state):
        await secret_client.store("GROQ_API_KEY", "old")
        await secret_client.store("GROQ_API_KEY", "new")

        assert backend_state.secrets["GROQ_API_KEY"] == "new"

    async def test_delete_absent_key_succeeds(self, secret_client):
        assert await secret_client.delete("NEVER_STORED") is False

    async def test_wrong_secret_key_is_rejected(self, http, backend_state):
        client = SecretClient(http, "wrong")

        with pytest.raises(AuthenticationError) as exc_info:
            await client.store("OPENAI_API_KEY", "sk-test")

        assert exc_info.value.status_code == 401
        assert backend_state.secrets == {}

    async def test_missing_secret_key_is_rejected(self, http):
        with pytest.raises(AuthenticationError):
            await SecretClient(http, "").delete("OPENAI_API_KEY")

    async def test_stored_secret_not_listed(
        self,
        secret_client,
        config_client,
    ):
        await secret_client.store("OPENAI_API_KEY", "sk-test")

        assert await config_client.read_all() == {}


@pytest.mark.unit
class TestSecretRequests:
    """Test the wire format with respx"""

    @pytest.mark.respx(base_url=BASE_URL)
    async def test_store_sends_credential_header(self, respx_mock, mock_http):
        route = respx_mock.post("/secrets/store").respond(200, json={})

        await SecretClient(mock_http, SECRET_KEY).store("K", "v")

        request = route.calls.last.request
        assert request.headers["X-Secret-Key"] == SECRET_KEY
        assert json.loads(request.content) == {"key": "K", "value": "v"}

    @pytest.mark.respx(base_url=BASE_URL)
    async def test_delete_uses_delete_verb(self, respx_mock, mock_http):
        route = respx_mock.delete("/secrets/delete").respond(200, json={})

        assert await SecretClient(mock_http, SECRET_KEY).delete("K") is True
        assert json.loads(route.calls.last.request.content) == {"key": "K"}

    @pytest.mark.respx(base_url=BASE_URL)
    async def test_store_failure_is_not_retried(self, respx_mock, mock_http):
        route = respx_mock.post("/secrets/store").respond(503)

        with pytest.raises(TransportFailure) as exc_info:
            await SecretClient(mock_http, SECRET_KEY).store("K", "v")

        assert exc_info.value.status_code == 503
        assert route.call_count == 1

    @pytest.mark.respx(base_url=BASE_URL)
    async def test_unreachable_backend(self, respx_mock, mock_http):
        respx_mock.delete("/secrets/delete").mock(
            side_effect=httpx.ConnectError("refused"),
        )

        with pytest.raises(TransportFailure):
            await SecretClient(mock_http, SECRET_KEY).delete("K")
