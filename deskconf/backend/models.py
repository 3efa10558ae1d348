# -*- coding: utf-8 -*-
"""Wire models shared by the backend clients and the reference backend."""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, Field


class ConfigKeyQuery(BaseModel):
    """Request body for ``/config/read`` and ``/config/remove``."""

    key: str
    is_secret: bool = False


class UpsertConfigQuery(BaseModel):
    """Request body for ``/config/upsert``."""

    key: str
    value: Any = None
    is_secret: bool = False


class ConfigEntry(BaseModel):
    """A key/value pair held by the backend."""

    key: str
    value: Any = None
    is_secret: bool = False


class ConfigResponse(BaseModel):
    """Response of ``GET /config``; secret entries are never included."""

    config: dict[str, Any] = Field(default_factory=dict)


class ReadResult(BaseModel):
    """Outcome of a config read. Absence is a result, not an error."""

    found: bool = False
    value: Any = None

    def __bool__(self) -> bool:
        return self.found


NOT_FOUND = ReadResult(found=False)


class SecretStoreRequest(BaseModel):
    key: str
    value: str


class SecretDeleteRequest(BaseModel):
    key: str


class BackendConfigKey(BaseModel):
    name: str
    required: bool = False
    secret: bool = False
    default: str | None = None


class BackendProvider(BaseModel):
    """Provider descriptor as reported by ``GET /config/providers``."""

    name: str
    display_name: str = ""
    description: str = ""
    default_model: str = ""
    known_models: List[str] = Field(default_factory=list)
    config_keys: List[BackendConfigKey] = Field(default_factory=list)
    is_configured: bool = False
