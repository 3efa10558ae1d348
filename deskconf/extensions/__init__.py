# -*- coding: utf-8 -*-
"""Extension (tool integration) records and their lifecycle."""

from .manager import ExtensionManager
from .models import (
    BuiltinConnection,
    ExtensionEvent,
    ExtensionSpec,
    SseConnection,
    StdioConnection,
)

__all__ = [
    "ExtensionManager",
    "BuiltinConnection",
    "ExtensionEvent",
    "ExtensionSpec",
    "SseConnection",
    "StdioConnection",
]
