# -*- coding: utf-8 -*-
"""Active (provider, model) selection and the recent-models list."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional

from ..constant import MAX_RECENT_MODELS
from ..events import Listener, Notifier
from .models import SelectedModel, SelectionState
from .registry import describe
from .store import load_selection_json, push_recent, save_selection_json

logger = logging.getLogger(__name__)


class ModelSelectionManager:
    """Owns the persisted selection and publishes "active model changed".

    Listeners receive the new :class:`SelectedModel`; delivery is
    fire-and-forget.
    """

    def __init__(
        self,
        path: Optional[Path] = None,
        max_recent: int = MAX_RECENT_MODELS,
    ) -> None:
        self._path = path
        self._max_recent = max_recent
        self._state: SelectionState = load_selection_json(path)
        self._changed: Notifier[SelectedModel] = Notifier("model-changed")

    @property
    def current(self) -> Optional[SelectedModel]:
        return self._state.selected

    def recent_models(self) -> List[SelectedModel]:
        return list(self._state.recent)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self._changed.subscribe(listener)

    def select_provider(self, provider_id: str) -> SelectedModel:
        """Switch to *provider_id* (name or alias) with its default model.

        Raises :class:`UnknownProviderError` for providers outside the
        catalog; nothing is persisted or published in that case.
        """
        info = describe(provider_id)
        selected = SelectedModel(provider=info.alias, model=info.default_model)
        return self.switch_model(selected)

    def switch_model(self, selected: SelectedModel) -> SelectedModel:
        """Persist *selected*, record it as most recent and notify."""
        state = SelectionState(
            selected=selected,
            recent=push_recent(
                self._state.recent,
                selected,
                self._max_recent,
            ),
        )
        save_selection_json(state, self._path)
        self._state = state
        logger.info(
            "Active model switched to %s / %s",
            selected.provider,
            selected.model,
        )
        self._changed.publish(selected)
        return selected

    async def drain(self) -> None:
        await self._changed.drain()
