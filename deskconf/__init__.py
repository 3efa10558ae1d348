# -*- coding: utf-8 -*-
"""Provider, secret and extension configuration for a desktop agent."""

from .session import DeskSession

__version__ = "0.1.0"

__all__ = ["DeskSession", "__version__"]
