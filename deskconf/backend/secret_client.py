# -*- coding: utf-8 -*-
"""Typed request layer over the backend's ``/secrets`` endpoints."""
from __future__ import annotations

import logging

import httpx

from ..constant import SECRET_KEY_HEADER
from .http import raise_for_status, send
from .models import SecretDeleteRequest, SecretStoreRequest

logger = logging.getLogger(__name__)


class SecretClient:
    """Store and delete credentials.

    *secret_key* authenticates this process to the local backend; it is not
    a provider API key.
    """

    def __init__(self, http: httpx.AsyncClient, secret_key: str) -> None:
        self.http = http
        self._headers = {SECRET_KEY_HEADER: secret_key}

    async def store(self, key: str, value: str) -> None:
        """Create or replace the secret stored under *key*."""
        body = SecretStoreRequest(key=key, value=value)
        resp = await send(
            self.http,
            "POST",
            "/secrets/store",
            action=f"store secret {key}",
            json=body.model_dump(),
            headers=self._headers,
        )
        raise_for_status(resp, f"store secret {key}")
        logger.info("Secret %s stored", key)

    async def delete(self, key: str) -> bool:
        """Delete *key*. Returns False if no such secret existed."""
        resp = await send(
            self.http,
            "DELETE",
            "/secrets/delete",
            action=f"delete secret {key}",
            json=SecretDeleteRequest(key=key).model_dump(),
            headers=self._headers,
        )
        if resp.status_code == 404:
            logger.debug("Secret %s already absent", key)
            return False
        raise_for_status(resp, f"delete secret {key}")
        logger.info("Secret %s deleted", key)
        return True
