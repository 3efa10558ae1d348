# -*- coding: utf-8 -*-
"""Error types raised by the configuration layer."""

from __future__ import annotations

from typing import Optional


class DeskConfError(Exception):
    """Base class for all deskconf errors."""


class NotFoundError(DeskConfError):
    """The addressed entry or extension does not exist on the backend."""

    def __init__(self, what: str, name: str):
        self.what = what
        self.name = name
        super().__init__(f"{what} '{name}' not found")


class ConflictError(DeskConfError):
    """The addressed extension already exists on the backend."""

    def __init__(self, what: str, name: str):
        self.what = what
        self.name = name
        super().__init__(f"{what} '{name}' already exists")


class TransportFailure(DeskConfError):
    """Backend unreachable, timed out, or answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        detail: str = "",
    ):
        self.status_code = status_code
        self.detail = detail
        text = message
        if status_code is not None:
            text = f"{message} (HTTP {status_code})"
        if detail:
            text = f"{text}: {detail}"
        super().__init__(text)


class AuthenticationError(TransportFailure):
    """The backend rejected the local secret key."""


class UnknownProviderError(DeskConfError):
    """Provider is absent from the catalog."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"Unknown provider: {provider}")


class PartialReplaceFailure(DeskConfError):
    """Old credential was deleted but the new one could not be stored.

    The provider is left unconfigured; callers should prompt for re-entry.
    """

    def __init__(self, provider: str, key: str, cause: Exception):
        self.provider = provider
        self.key = key
        self.cause = cause
        super().__init__(
            f"Replaced key {key} for {provider} was deleted but the new "
            f"value could not be stored: {cause}",
        )
