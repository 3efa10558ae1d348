# -*- coding: utf-8 -*-
"""Built-in provider catalog and alias lookup."""

from __future__ import annotations

from typing import Dict, List, Optional

from ..exceptions import UnknownProviderError
from .models import ConfigKey, ProviderDefinition, ProviderDescription

# ---------------------------------------------------------------------------
# Provider definitions
# ---------------------------------------------------------------------------

PROVIDER_OPENAI = ProviderDefinition(
    name="OpenAI",
    description="Access GPT-4o, o1 and other OpenAI models",
    required_keys=["OPENAI_API_KEY"],
    default_model="gpt-4o",
    models=["gpt-4o", "gpt-4o-mini", "gpt-4-turbo", "o1"],
    optional_keys=[
        ConfigKey(name="OPENAI_HOST", default="https://api.openai.com"),
    ],
    doc_url="https://platform.openai.com/docs/models",
)

PROVIDER_ANTHROPIC = ProviderDefinition(
    name="Anthropic",
    description="Access Claude models through the Anthropic API",
    required_keys=["ANTHROPIC_API_KEY"],
    default_model="claude-3-5-sonnet-latest",
    models=["claude-3-5-sonnet-latest", "claude-3-5-haiku-latest"],
    doc_url="https://docs.anthropic.com/en/docs/about-claude/models",
)

PROVIDER_DATABRICKS = ProviderDefinition(
    name="Databricks",
    description="Access models hosted on your Databricks instance",
    required_keys=["DATABRICKS_HOST"],
    default_model="claude-3-5-sonnet-2",
    models=["claude-3-5-sonnet-2", "gpt-4o"],
    doc_url="https://docs.databricks.com/en/generative-ai/"
    "external-models/index.html",
)

PROVIDER_GOOGLE = ProviderDefinition(
    name="Google",
    description="Access Gemini models from Google AI Studio",
    required_keys=["GOOGLE_API_KEY"],
    default_model="gemini-2.0-flash-exp",
    models=["gemini-2.0-flash-exp", "gemini-1.5-pro", "gemini-1.5-flash"],
    doc_url="https://ai.google.dev/gemini-api/docs/models",
)

PROVIDER_GROQ = ProviderDefinition(
    name="Groq",
    description="Access open models served on Groq hardware",
    required_keys=["GROQ_API_KEY"],
    default_model="llama-3.3-70b-versatile",
    models=["llama-3.3-70b-versatile", "gemma2-9b-it"],
    doc_url="https://console.groq.com/docs/models",
)

PROVIDER_OLLAMA = ProviderDefinition(
    name="Ollama",
    description="Run local models through an Ollama server",
    required_keys=["OLLAMA_HOST"],
    default_model="qwen2.5",
    models=["qwen2.5", "llama3.2"],
    doc_url="https://ollama.com/library",
)

PROVIDER_OPENROUTER = ProviderDefinition(
    name="OpenRouter",
    description="Router for many model providers",
    required_keys=["OPENROUTER_API_KEY"],
    default_model="anthropic/claude-3.5-sonnet",
    models=["anthropic/claude-3.5-sonnet"],
    optional_keys=[
        ConfigKey(name="OPENROUTER_HOST", default="https://openrouter.ai"),
    ],
    doc_url="https://openrouter.ai/models",
)

# Explicit aliases take precedence over the lowercased provider name.
PROVIDER_ALIASES: Dict[str, str] = {
    "OpenAI": "openai",
    "Anthropic": "anthropic",
    "Databricks": "databricks",
    "Google": "google",
    "Groq": "groq",
    "Ollama": "ollama",
    "OpenRouter": "openrouter",
}


def resolve_alias(name: str) -> str:
    """Return the alias for a provider name (alias table, else lowercase)."""
    return PROVIDER_ALIASES.get(name) or name.lower()


def _with_alias(defn: ProviderDefinition) -> ProviderDefinition:
    if defn.alias:
        return defn
    return defn.model_copy(update={"alias": resolve_alias(defn.name)})


# Registry: canonical name -> ProviderDefinition (catalog order preserved)
PROVIDERS: Dict[str, ProviderDefinition] = {
    d.name: d
    for d in map(
        _with_alias,
        [
            PROVIDER_OPENAI,
            PROVIDER_ANTHROPIC,
            PROVIDER_DATABRICKS,
            PROVIDER_GOOGLE,
            PROVIDER_GROQ,
            PROVIDER_OLLAMA,
            PROVIDER_OPENROUTER,
        ],
    )
}

# alias -> canonical name
_BY_ALIAS: Dict[str, str] = {d.alias: d.name for d in PROVIDERS.values()}


def get_provider(name_or_alias: str) -> Optional[ProviderDefinition]:
    """Return a provider definition by name or alias, or None."""
    defn = PROVIDERS.get(name_or_alias)
    if defn is not None:
        return defn
    canonical = _BY_ALIAS.get(name_or_alias)
    if canonical is None:
        return None
    return PROVIDERS[canonical]


def list_providers() -> List[ProviderDefinition]:
    """Return all registered provider definitions."""
    return list(PROVIDERS.values())


def describe(name_or_alias: str) -> ProviderDescription:
    """Return display metadata for a catalog provider.

    Raises :class:`UnknownProviderError` if the provider is not in the
    catalog.
    """
    defn = get_provider(name_or_alias)
    if defn is None:
        raise UnknownProviderError(name_or_alias)
    return ProviderDescription(
        name=defn.name,
        alias=defn.alias,
        description=defn.description,
        required_keys=list(defn.required_keys),
        default_model=defn.default_model,
    )


def describe_or_default(name: str) -> ProviderDescription:
    """Like :func:`describe`, but degrade to the raw name for providers the
    backend knows and the catalog does not."""
    try:
        return describe(name)
    except UnknownProviderError:
        return ProviderDescription(name=name, alias=resolve_alias(name))


def get_default_model(name_or_alias: str) -> str:
    return describe(name_or_alias).default_model
