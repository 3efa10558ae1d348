# -*- coding: utf-8 -*-
"""Provider management: catalog, credentials, active keys and selection."""

from .active_keys import ActiveKeysReconciler
from .credentials import CredentialManager
from .models import (
    ActiveKeySet,
    ConfigKey,
    ProviderDefinition,
    ProviderDescription,
    ProviderStatus,
    SelectedModel,
    SelectionState,
)
from .registry import (
    PROVIDER_ALIASES,
    PROVIDERS,
    describe,
    describe_or_default,
    get_default_model,
    get_provider,
    list_providers,
    resolve_alias,
)
from .selection import ModelSelectionManager
from .store import (
    load_selection_json,
    mask_api_key,
    push_recent,
    save_selection_json,
)

__all__ = [
    # models
    "ActiveKeySet",
    "ConfigKey",
    "ProviderDefinition",
    "ProviderDescription",
    "ProviderStatus",
    "SelectedModel",
    "SelectionState",
    # registry
    "PROVIDER_ALIASES",
    "PROVIDERS",
    "describe",
    "describe_or_default",
    "get_default_model",
    "get_provider",
    "list_providers",
    "resolve_alias",
    # store
    "load_selection_json",
    "mask_api_key",
    "push_recent",
    "save_selection_json",
    # managers
    "ActiveKeysReconciler",
    "CredentialManager",
    "ModelSelectionManager",
]
