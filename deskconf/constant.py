# -*- coding: utf-8 -*-
import os
from pathlib import Path

WORKING_DIR = (
    Path(os.environ.get("DESKCONF_WORKING_DIR", "~/.deskconf"))
    .expanduser()
    .resolve()
)

CONFIG_FILE = os.environ.get("DESKCONF_CONFIG_FILE", "config.json")

# Selected (provider, model) pair and the recent-models list.
SELECTION_FILE = os.environ.get("DESKCONF_SELECTION_FILE", "selection.json")

# Env key for app log level (used by CLI and the reference backend).
LOG_LEVEL_ENV = "DESKCONF_LOG_LEVEL"

# Local backend the desktop client talks to.
DEFAULT_API_URL = os.environ.get("DESKCONF_API_URL", "http://127.0.0.1:3000")

# Credential for the local UI-to-backend channel, not a provider API key.
SECRET_KEY_ENV = "DESKCONF_SECRET_KEY"
SECRET_KEY_HEADER = "X-Secret-Key"

REQUEST_TIMEOUT = float(os.environ.get("DESKCONF_REQUEST_TIMEOUT", "30.0"))

MAX_RECENT_MODELS = int(
    os.environ.get("DESKCONF_MAX_RECENT_MODELS", "3"),
)

# Config entry under which the backend keeps extension records.
EXTENSIONS_CONFIG_KEY = "extensions"

# Config entries written when the active model changes, read by the agent.
ACTIVE_PROVIDER_KEY = "AGENT_PROVIDER"
ACTIVE_MODEL_KEY = "AGENT_MODEL"


def get_secret_key() -> str:
    """Return the local secret key from ``DESKCONF_SECRET_KEY``.

    Empty when unset; the backend then rejects secret-store requests.
    """
    return os.environ.get(SECRET_KEY_ENV, "").strip()
