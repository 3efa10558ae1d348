"""Shared test fixtures"""
from pathlib import Path

import httpx
import pytest

from deskconf.app import BackendState, create_app
from deskconf.backend import ConfigClient, SecretClient
from deskconf.extensions import ExtensionManager
from deskconf.providers import (
    ActiveKeysReconciler,
    CredentialManager,
    ModelSelectionManager,
)
from deskconf.session import DeskSession

SECRET_KEY = "test-secret-key"
BASE_URL = "http://backend.test"


@pytest.fixture
def backend_state() -> BackendState:
    """Empty in-memory backend storage"""
    return BackendState()


@pytest.fixture
def backend_app(backend_state: BackendState):
    """Reference backend bound to ``backend_state``"""
    return create_app(SECRET_KEY, backend_state)


@pytest.fixture
async def http(backend_app):
    """AsyncClient routed in-process to the reference backend"""
    transport = httpx.ASGITransport(app=backend_app)
    async with httpx.AsyncClient(
        transport=transport,
        base_url=BASE_URL,
    ) as client:
        yield client


@pytest.fixture
def config_client(http) -> ConfigClient:
    return ConfigClient(http, SECRET_KEY)


@pytest.fixture
def secret_client(http) -> SecretClient:
    return SecretClient(http, SECRET_KEY)


@pytest.fixture
def reconciler(config_client: ConfigClient) -> ActiveKeysReconciler:
    return ActiveKeysReconciler(config_client)


@pytest.fixture
def credentials(
    secret_client: SecretClient,
    reconciler: ActiveKeysReconciler,
) -> CredentialManager:
    return CredentialManager(secret_client, reconciler)


@pytest.fixture
def selection_path(tmp_path: Path) -> Path:
    return tmp_path / "selection.json"


@pytest.fixture
def selection(selection_path: Path) -> ModelSelectionManager:
    return ModelSelectionManager(selection_path)


@pytest.fixture
def extensions(config_client: ConfigClient) -> ExtensionManager:
    return ExtensionManager(config_client)


@pytest.fixture
async def session(http, selection_path: Path):
    """Fully wired session against the reference backend"""
    desk = DeskSession(http, SECRET_KEY, selection_path=selection_path)
    yield desk
    await desk.close()


@pytest.fixture
async def mock_http():
    """AsyncClient whose requests are served by respx routes"""
    async with httpx.AsyncClient(base_url=BASE_URL) as client:
        yield client
