# -*- coding: utf-8 -*-
"""Clients for the local configuration and secret-store backend."""

from .config_client import ConfigClient
from .http import async_client
from .models import (
    NOT_FOUND,
    BackendProvider,
    ConfigEntry,
    ReadResult,
)
from .secret_client import SecretClient

__all__ = [
    "ConfigClient",
    "SecretClient",
    "async_client",
    "NOT_FOUND",
    "BackendProvider",
    "ConfigEntry",
    "ReadResult",
]
