# -*- coding: utf-8 -*-
"""Add / update / remove extensions against the backend."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, List

from pydantic import ValidationError

from ..constant import EXTENSIONS_CONFIG_KEY
from ..events import Listener, Notifier
from ..exceptions import NotFoundError
from .models import ExtensionEvent, ExtensionSpec

if TYPE_CHECKING:
    from ..backend.config_client import ConfigClient

logger = logging.getLogger(__name__)


class ExtensionManager:
    """Per-name state machine:
    ``absent -> present(enabled) <-> present(disabled) -> absent``.

    Every transition is a single backend round trip and nothing is changed
    locally before the backend confirms it. Confirmed transitions are
    published so the agent can invalidate its tool set.
    """

    def __init__(self, config_client: "ConfigClient") -> None:
        self._config = config_client
        self._changed: Notifier[ExtensionEvent] = Notifier(
            "extensions-changed",
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self._changed.subscribe(listener)

    async def list(self) -> List[ExtensionSpec]:
        """Re-read the extension records held by the backend."""
        result = await self._config.read(EXTENSIONS_CONFIG_KEY)
        if not result.found or not isinstance(result.value, dict):
            return []
        specs: List[ExtensionSpec] = []
        for name, raw in result.value.items():
            if not isinstance(raw, dict):
                continue
            try:
                specs.append(
                    ExtensionSpec.model_validate({**raw, "name": name}),
                )
            except ValidationError as exc:
                logger.warning(
                    "Skipping malformed extension %s: %s",
                    name,
                    exc,
                )
        return specs

    async def get(self, name: str) -> ExtensionSpec:
        for spec in await self.list():
            if spec.name == name:
                return spec
        raise NotFoundError("Extension", name)

    async def add(self, spec: ExtensionSpec) -> ExtensionSpec:
        """Valid from ``absent`` only; raises ConflictError otherwise."""
        await self._config.add_extension(spec)
        logger.info("Extension %s added", spec.name)
        self._changed.publish(ExtensionEvent(action="added", name=spec.name))
        return spec

    async def update(self, spec: ExtensionSpec) -> ExtensionSpec:
        """Valid from ``present`` only; raises NotFoundError otherwise."""
        await self._config.update_extension(spec)
        logger.info("Extension %s updated", spec.name)
        self._changed.publish(
            ExtensionEvent(action="updated", name=spec.name),
        )
        return spec

    async def set_enabled(self, name: str, enabled: bool) -> ExtensionSpec:
        spec = await self.get(name)
        if spec.enabled == enabled:
            return spec
        return await self.update(spec.model_copy(update={"enabled": enabled}))

    async def remove(self, name: str) -> bool:
        """Remove *name*; already absent counts as done.

        Returns True if the backend held the extension.
        """
        removed = await self._config.remove_extension(name)
        if not removed:
            logger.debug("Extension %s already absent", name)
            return False
        logger.info("Extension %s removed", name)
        self._changed.publish(ExtensionEvent(action="removed", name=name))
        return True

    async def drain(self) -> None:
        await self._changed.drain()
