# -*- coding: utf-8 -*-
"""Pydantic data models for providers, credentials and model selection."""

from __future__ import annotations

from datetime import datetime
from typing import FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ConfigKey(BaseModel):
    """A non-secret setting a provider reads besides its credentials."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Config entry key, e.g. OLLAMA_HOST")
    default: Optional[str] = Field(
        default=None,
        description="Value used when the entry is absent",
    )


class ProviderDefinition(BaseModel):
    """Static catalog entry for an LLM provider."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Canonical provider name")
    alias: str = Field(
        default="",
        description="Lowercase short form; empty means name.lower()",
    )
    description: str = Field(default="", description="Human description")
    required_keys: List[str] = Field(
        default_factory=list,
        description="Secret keys that must all resolve for the provider "
        "to be usable",
    )
    default_model: str = Field(default="", description="Default model id")
    models: List[str] = Field(
        default_factory=list,
        description="Known model identifiers",
    )
    optional_keys: List[ConfigKey] = Field(default_factory=list)
    doc_url: str = Field(default="", description="Where to find models/keys")


class ProviderDescription(BaseModel):
    """Display metadata returned by ``describe``."""

    name: str
    alias: str
    description: str = ""
    required_keys: List[str] = Field(default_factory=list)
    default_model: str = ""


class SelectedModel(BaseModel):
    """The (provider, model) pair designated for agent invocation."""

    model_config = ConfigDict(frozen=True)

    provider: str = Field(..., description="Provider alias")
    model: str = Field(..., description="Model identifier")


class SelectionState(BaseModel):
    """Top-level structure of selection.json."""

    selected: Optional[SelectedModel] = None
    recent: List[SelectedModel] = Field(default_factory=list)


class ActiveKeySet(BaseModel):
    """Snapshot of which secrets resolve and which providers are usable.

    Replaced wholesale by the reconciler; never mutated in place.
    """

    model_config = ConfigDict(frozen=True)

    resolved_keys: FrozenSet[str] = Field(default_factory=frozenset)
    providers: FrozenSet[str] = Field(default_factory=frozenset)
    refreshed_at: Optional[datetime] = None


class ProviderStatus(BaseModel):
    """Provider info for listings (definition + configured flag)."""

    name: str
    alias: str
    description: str = ""
    default_model: str = ""
    required_keys: List[str] = Field(default_factory=list)
    is_configured: bool = False
    in_catalog: bool = True


