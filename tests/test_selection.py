"""Tests for the model/provider selection manager"""
import asyncio
import json

import pytest

from deskconf.exceptions import UnknownProviderError
from deskconf.providers import (
    ModelSelectionManager,
    SelectedModel,
    load_selection_json,
)


@pytest.mark.unit
class TestModelSelectionManager:
    """Test selection, persistence and change notification"""

    def test_initial_state_is_empty(self, selection):
        assert selection.current is None
        assert selection.recent_models() == []

    def test_select_provider_uses_default_model(
        self,
        selection,
        selection_path,
    ):
        selected = selection.select_provider("openai")

        assert selected == SelectedModel(provider="openai", model="gpt-4o")
        assert selection.current == selected
        assert selection.recent_models()[0] == selected
        assert load_selection_json(selection_path).selected == selected

    def test_select_by_canonical_name_stores_alias(self, selection):
        selected = selection.select_provider("OpenRouter")

        assert selected.provider == "openrouter"
        assert selected.model == "anthropic/claude-3.5-sonnet"

    def test_unknown_provider_changes_nothing(
        self,
        selection,
        selection_path,
    ):
        seen = []
        selection.subscribe(seen.append)

        with pytest.raises(UnknownProviderError):
            selection.select_provider("mistral")

        assert selection.current is None
        assert not selection_path.exists()
        assert seen == []

    def test_switch_model_persists_and_notifies(
        self,
        selection,
        selection_path,
    ):
        seen = []
        selection.subscribe(seen.append)
        target = SelectedModel(
            provider="anthropic",
            model="claude-3-5-haiku-latest",
        )

        selection.switch_model(target)

        assert seen == [target]
        raw = json.loads(selection_path.read_text(encoding="utf-8"))
        assert raw["selected"]["model"] == "claude-3-5-haiku-latest"

    def test_state_survives_restart(self, selection, selection_path):
        selection.select_provider("groq")
        selection.select_provider("openai")

        reloaded = ModelSelectionManager(selection_path)

        assert reloaded.current == SelectedModel(
            provider="openai",
            model="gpt-4o",
        )
        assert [m.provider for m in reloaded.recent_models()] == [
            "openai",
            "groq",
        ]

    def test_recent_list_is_bounded_and_deduplicated(self, selection_path):
        manager = ModelSelectionManager(selection_path, max_recent=3)
        for pid in ["openai", "groq", "openai", "google", "ollama"]:
            manager.select_provider(pid)

        assert [m.provider for m in manager.recent_models()] == [
            "ollama",
            "google",
            "openai",
        ]

    def test_unsubscribe(self, selection):
        seen = []
        unsubscribe = selection.subscribe(seen.append)
        unsubscribe()

        selection.select_provider("openai")

        assert seen == []

    def test_failing_listener_does_not_break_selection(self, selection):
        def broken(_):
            raise RuntimeError("listener bug")

        seen = []
        selection.subscribe(broken)
        selection.subscribe(seen.append)

        selected = selection.select_provider("openai")

        assert seen == [selected]
        assert selection.current == selected

    async def test_async_listener_is_fire_and_forget(self, selection):
        started = asyncio.Event()
        release = asyncio.Event()
        done = []

        async def listener(model):
            started.set()
            await release.wait()
            done.append(model)

        selection.subscribe(listener)
        selected = selection.select_provider("openai")

        # select_provider returned before the listener finished
        assert done == []
        await started.wait()
        release.set()
        await selection.drain()
        assert done == [selected]

    def test_listener_of_discarded_surface_is_skipped(self, selection):
        calls = []

        class Panel:
            def on_model_changed(self, model):
                calls.append(model)

        panel = Panel()
        selection.subscribe(panel.on_model_changed)
        del panel

        selection.select_provider("openai")

        assert calls == []
