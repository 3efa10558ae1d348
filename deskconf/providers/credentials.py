# -*- coding: utf-8 -*-
"""Adding, replacing and removing provider credentials."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from ..exceptions import (
    DeskConfError,
    PartialReplaceFailure,
    UnknownProviderError,
)
from .models import ProviderDefinition
from .registry import get_provider

if TYPE_CHECKING:
    from ..backend.secret_client import SecretClient
    from .active_keys import ActiveKeysReconciler

logger = logging.getLogger(__name__)


class CredentialManager:
    """Drives secret mutations and keeps the active-keys cache in step.

    The cache is refreshed only after backend-confirmed mutations.
    """

    def __init__(
        self,
        secrets: "SecretClient",
        reconciler: "ActiveKeysReconciler",
    ) -> None:
        self._secrets = secrets
        self._reconciler = reconciler

    @staticmethod
    def _definition(provider: str) -> ProviderDefinition:
        defn = get_provider(provider)
        if defn is None:
            raise UnknownProviderError(provider)
        return defn

    async def set_provider_key(
        self,
        provider: str,
        value: str,
        key: Optional[str] = None,
    ) -> bool:
        """Store *value* as *provider*'s credential.

        *key* defaults to the provider's first required key. When the
        provider is already configured the old secret is deleted first and
        the new one stored only once the delete is confirmed. Returns True
        when an existing credential was replaced.

        Raises :class:`PartialReplaceFailure` when the delete succeeded but
        the store did not; the provider is then left unconfigured.
        """
        defn = self._definition(provider)
        if key is None:
            if not defn.required_keys:
                raise ValueError(f"{defn.name} has no credential to set")
            key = defn.required_keys[0]
        elif key not in defn.required_keys:
            raise ValueError(f"{key} is not a credential of {defn.name}")
        value = value.strip()
        if not value:
            raise ValueError("Credential value must not be empty")

        replacing = self._reconciler.is_configured(defn.name)
        if replacing:
            # A failed delete propagates before anything is stored.
            await self._secrets.delete(key)

        try:
            await self._secrets.store(key, value)
        except DeskConfError as exc:
            if not replacing:
                raise
            logger.error(
                "Stored key %s for %s was deleted but replacing it failed",
                key,
                defn.name,
            )
            await self._refresh_after_partial_replace()
            raise PartialReplaceFailure(defn.name, key, exc) from exc

        await self._reconciler.refresh()
        logger.info(
            "%s API key for %s",
            "Updated" if replacing else "Added",
            defn.name,
        )
        return replacing

    async def _refresh_after_partial_replace(self) -> None:
        # The delete was confirmed, so the cache must stop reporting the
        # provider as configured; a refresh failure here must not hide the
        # replace failure being reported.
        try:
            await self._reconciler.refresh()
        except DeskConfError as exc:
            logger.warning("Refresh after failed replace failed: %s", exc)

    async def remove_provider_key(self, provider: str) -> None:
        """Delete every required secret of *provider*."""
        defn = self._definition(provider)
        for key in defn.required_keys:
            await self._secrets.delete(key)
        await self._reconciler.refresh()
        logger.info("Removed credentials for %s", defn.name)
