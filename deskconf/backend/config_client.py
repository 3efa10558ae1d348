# -*- coding: utf-8 -*-
"""Typed request layer over the backend's ``/config`` endpoints."""
from __future__ import annotations

import logging
from typing import Any, Dict, List

import httpx

from ..constant import SECRET_KEY_HEADER
from ..exceptions import ConflictError, NotFoundError
from ..extensions.models import ExtensionRemoveQuery, ExtensionSpec
from .http import raise_for_status, send
from .models import (
    NOT_FOUND,
    BackendProvider,
    ConfigEntry,
    ConfigKeyQuery,
    ConfigResponse,
    ReadResult,
    UpsertConfigQuery,
)

logger = logging.getLogger(__name__)


class ConfigClient:
    """One method per backend primitive; no retries, no caching.

    Every request carries *secret_key*, since the same routes reach the
    secret plane when ``is_secret`` is set.
    """

    def __init__(self, http: httpx.AsyncClient, secret_key: str) -> None:
        self.http = http
        self._headers = {SECRET_KEY_HEADER: secret_key}

    async def read_all(self) -> Dict[str, Any]:
        """Return every non-secret configuration entry."""
        resp = await send(
            self.http,
            "GET",
            "/config",
            action="read config",
            headers=self._headers,
        )
        raise_for_status(resp, "read config")
        return ConfigResponse.model_validate(resp.json()).config

    async def read(self, key: str, is_secret: bool = False) -> ReadResult:
        """Read one entry; an absent key yields ``NOT_FOUND``."""
        body = ConfigKeyQuery(key=key, is_secret=is_secret)
        resp = await send(
            self.http,
            "POST",
            "/config/read",
            action=f"read {key}",
            json=body.model_dump(),
            headers=self._headers,
        )
        if resp.status_code == 404:
            return NOT_FOUND
        raise_for_status(resp, f"read {key}")
        entry = ConfigEntry.model_validate(resp.json())
        return ReadResult(found=True, value=entry.value)

    async def upsert(
        self,
        key: str,
        value: Any,
        is_secret: bool = False,
    ) -> None:
        body = UpsertConfigQuery(key=key, value=value, is_secret=is_secret)
        resp = await send(
            self.http,
            "POST",
            "/config/upsert",
            action=f"upsert {key}",
            json=body.model_dump(mode="json"),
            headers=self._headers,
        )
        raise_for_status(resp, f"upsert {key}")
        logger.info("Config entry %s upserted (secret=%s)", key, is_secret)

    async def remove(self, key: str, is_secret: bool = False) -> bool:
        """Remove an entry. Returns False if it was already absent."""
        body = ConfigKeyQuery(key=key, is_secret=is_secret)
        resp = await send(
            self.http,
            "POST",
            "/config/remove",
            action=f"remove {key}",
            json=body.model_dump(),
            headers=self._headers,
        )
        if resp.status_code == 404:
            logger.debug("Config entry %s already absent", key)
            return False
        raise_for_status(resp, f"remove {key}")
        logger.info("Config entry %s removed", key)
        return True

    async def list_providers(self) -> List[BackendProvider]:
        resp = await send(
            self.http,
            "GET",
            "/config/providers",
            action="list providers",
            headers=self._headers,
        )
        raise_for_status(resp, "list providers")
        return [BackendProvider.model_validate(p) for p in resp.json()]

    # ------------------------------------------------------------------
    # Extensions
    # ------------------------------------------------------------------

    async def add_extension(self, spec: ExtensionSpec) -> None:
        resp = await send(
            self.http,
            "POST",
            "/config/extension",
            action=f"add extension {spec.name}",
            json=spec.model_dump(mode="json"),
            headers=self._headers,
        )
        if resp.status_code == 409:
            raise ConflictError("Extension", spec.name)
        raise_for_status(resp, f"add extension {spec.name}")

    async def update_extension(self, spec: ExtensionSpec) -> None:
        resp = await send(
            self.http,
            "PUT",
            "/config/extension",
            action=f"update extension {spec.name}",
            json=spec.model_dump(mode="json"),
            headers=self._headers,
        )
        if resp.status_code == 404:
            raise NotFoundError("Extension", spec.name)
        raise_for_status(resp, f"update extension {spec.name}")

    async def remove_extension(self, name: str) -> bool:
        """Remove an extension. Returns False if it was already absent."""
        resp = await send(
            self.http,
            "DELETE",
            "/config/extension",
            action=f"remove extension {name}",
            json=ExtensionRemoveQuery(name=name).model_dump(),
            headers=self._headers,
        )
        if resp.status_code == 404:
            return False
        raise_for_status(resp, f"remove extension {name}")
        return True
