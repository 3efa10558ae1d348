# -*- coding: utf-8 -*-
"""Reading and writing the local model selection (selection.json)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from ..constant import MAX_RECENT_MODELS, SELECTION_FILE, WORKING_DIR
from .models import SelectedModel, SelectionState

logger = logging.getLogger(__name__)


def get_selection_json_path() -> Path:
    """Return the default selection.json path."""
    return WORKING_DIR / SELECTION_FILE


# ---------------------------------------------------------------------------
# Load / Save
# ---------------------------------------------------------------------------


def load_selection_json(path: Optional[Path] = None) -> SelectionState:
    """Load selection.json; a missing or corrupt file yields empty state."""
    if path is None:
        path = get_selection_json_path()
    if not path.is_file():
        return SelectionState()
    try:
        with open(path, "r", encoding="utf-8") as fh:
            raw = json.load(fh)
        return SelectionState.model_validate(raw)
    except (json.JSONDecodeError, ValidationError, ValueError) as exc:
        logger.warning("Ignoring unreadable %s: %s", path, exc)
        return SelectionState()


def save_selection_json(
    state: SelectionState,
    path: Optional[Path] = None,
) -> None:
    """Write the selection state to selection.json."""
    if path is None:
        path = get_selection_json_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    with open(tmp, "w", encoding="utf-8") as fh:
        json.dump(
            state.model_dump(mode="json"),
            fh,
            indent=2,
            ensure_ascii=False,
        )
    tmp.replace(path)


# ---------------------------------------------------------------------------
# Recent models
# ---------------------------------------------------------------------------


def push_recent(
    recent: List[SelectedModel],
    model: SelectedModel,
    limit: int = MAX_RECENT_MODELS,
) -> List[SelectedModel]:
    """Return *recent* with *model* moved to the front, capped at *limit*.

    Entries are de-duplicated by ``(provider, model)``.
    """
    rest = [m for m in recent if m != model]
    return [model, *rest][: max(limit, 0)]


# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------


def mask_api_key(api_key: str, visible_chars: int = 4) -> str:
    """Mask an API key for safe display.

    Example: ``"sk-abcdefghijk"`` → ``"sk-****hijk"``
    """
    if not api_key:
        return ""
    if len(api_key) <= visible_chars:
        return "*" * len(api_key)
    prefix = api_key[:3] if len(api_key) > 3 else ""
    suffix = api_key[-visible_chars:]
    hidden_len = len(api_key) - len(prefix) - visible_chars
    return f"{prefix}{'*' * max(hidden_len, 4)}{suffix}"
