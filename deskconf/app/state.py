# -*- coding: utf-8 -*-
"""In-memory storage behind the reference backend."""
from __future__ import annotations

from typing import Any, Dict

from ..constant import EXTENSIONS_CONFIG_KEY


class BackendState:
    """Two planes: plain config entries and secrets.

    Extension records live inside the config plane under
    ``EXTENSIONS_CONFIG_KEY`` as ``{name: record}``. The entry is created
    by the first stored record, never by a lookup.
    """

    def __init__(self) -> None:
        self.config: Dict[str, Any] = {}
        self.secrets: Dict[str, str] = {}

    def plane(self, is_secret: bool) -> Dict[str, Any]:
        return self.secrets if is_secret else self.config

    @property
    def extensions(self) -> Dict[str, Dict[str, Any]]:
        return self.config.get(EXTENSIONS_CONFIG_KEY, {})

    def put_extension(self, name: str, record: Dict[str, Any]) -> None:
        self.config.setdefault(EXTENSIONS_CONFIG_KEY, {})[name] = record
