# -*- coding: utf-8 -*-
"""Cache of which providers currently have all required secrets."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional

from .models import ActiveKeySet, ProviderDefinition
from .registry import list_providers

if TYPE_CHECKING:
    from ..backend.config_client import ConfigClient

logger = logging.getLogger(__name__)


class ActiveKeysReconciler:
    """Owner of the process-wide :class:`ActiveKeySet`.

    ``refresh()`` is the only writer: it rebuilds the snapshot from backend
    truth and swaps the reference in one assignment, so readers see either
    the old or the new set, never a mix. ``is_configured()`` never does I/O.
    Callers that need the result of a mutation must await ``refresh()``
    before reading.
    """

    def __init__(
        self,
        config_client: "ConfigClient",
        providers: Optional[Iterable[ProviderDefinition]] = None,
    ) -> None:
        self._config = config_client
        self._providers: List[ProviderDefinition] = (
            list(providers) if providers is not None else list_providers()
        )
        self._lookup: Dict[str, ProviderDefinition] = {}
        for defn in self._providers:
            self._lookup[defn.name] = defn
            if defn.alias:
                self._lookup[defn.alias] = defn
        self._snapshot = ActiveKeySet()

    @property
    def snapshot(self) -> ActiveKeySet:
        return self._snapshot

    async def refresh(self) -> ActiveKeySet:
        """Re-query every required key and replace the cached set.

        If any read fails the previous snapshot stays in place and the
        error propagates.
        """
        wanted: List[str] = []
        for defn in self._providers:
            for key in defn.required_keys:
                if key not in wanted:
                    wanted.append(key)

        resolved = set()
        for key in wanted:
            result = await self._config.read(key, is_secret=True)
            if result.found:
                resolved.add(key)

        providers = frozenset(
            d.name
            for d in self._providers
            if set(d.required_keys) <= resolved
        )
        snapshot = ActiveKeySet(
            resolved_keys=frozenset(resolved),
            providers=providers,
            refreshed_at=datetime.now(timezone.utc),
        )
        self._snapshot = snapshot
        logger.debug("Active providers: %s", sorted(providers))
        return snapshot

    def is_configured(self, provider: str) -> bool:
        """True iff every required key of *provider* resolved at the last
        refresh. Unknown providers are never configured."""
        defn = self._lookup.get(provider)
        if defn is None:
            return False
        return set(defn.required_keys) <= self._snapshot.resolved_keys

    def active_providers(self) -> List[str]:
        """Configured provider names, in catalog order."""
        snapshot = self._snapshot
        return [
            d.name for d in self._providers if d.name in snapshot.providers
        ]
