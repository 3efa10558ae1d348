# -*- coding: utf-8 -*-
"""Wires clients, caches and managers for one client process."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import httpx

from .backend.config_client import ConfigClient
from .backend.http import async_client
from .backend.secret_client import SecretClient
from .config.config import Config
from .constant import ACTIVE_MODEL_KEY, ACTIVE_PROVIDER_KEY
from .extensions.manager import ExtensionManager
from .providers.active_keys import ActiveKeysReconciler
from .providers.credentials import CredentialManager
from .providers.models import SelectedModel
from .providers.selection import ModelSelectionManager

logger = logging.getLogger(__name__)


class DeskSession:
    """Owns one of each component and hands them out by reference.

    The active-keys cache starts empty; call ``active_keys.refresh()``
    before relying on ``is_configured``. When the active model changes the
    choice is also written to the backend for the agent runtime.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        secret_key: str,
        *,
        selection_path: Optional[Path] = None,
        owns_http: bool = False,
    ) -> None:
        self.http = http
        self._owns_http = owns_http
        self.config = ConfigClient(http, secret_key)
        self.secrets = SecretClient(http, secret_key)
        self.active_keys = ActiveKeysReconciler(self.config)
        self.credentials = CredentialManager(self.secrets, self.active_keys)
        self.selection = ModelSelectionManager(selection_path)
        self.extensions = ExtensionManager(self.config)
        self.selection.subscribe(self._publish_active_model)

    @classmethod
    def from_config(
        cls,
        config: Config,
        *,
        base_url: Optional[str] = None,
        selection_path: Optional[Path] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "DeskSession":
        """Create a session from config.json settings."""
        http = async_client(
            base_url or config.backend.base_url,
            timeout=config.backend.timeout,
            transport=transport,
        )
        return cls(
            http,
            config.backend.resolved_secret_key(),
            selection_path=selection_path,
            owns_http=True,
        )

    async def _publish_active_model(self, selected: SelectedModel) -> None:
        await self.config.upsert(ACTIVE_PROVIDER_KEY, selected.provider)
        await self.config.upsert(ACTIVE_MODEL_KEY, selected.model)

    async def close(self) -> None:
        await self.selection.drain()
        await self.extensions.drain()
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "DeskSession":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
