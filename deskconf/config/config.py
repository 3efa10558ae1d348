# -*- coding: utf-8 -*-
from pydantic import BaseModel, Field

from ..constant import REQUEST_TIMEOUT, get_secret_key


class BackendConfig(BaseModel):
    """Where the local configuration backend listens."""

    host: str = "127.0.0.1"
    port: int = 3000
    timeout: float = Field(default=REQUEST_TIMEOUT, gt=0)
    secret_key: str = ""

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def resolved_secret_key(self) -> str:
        """``DESKCONF_SECRET_KEY`` if set, else the stored key."""
        return get_secret_key() or self.secret_key


class Config(BaseModel):
    """Root config (config.json)."""

    backend: BackendConfig = Field(default_factory=BackendConfig)
    log_level: str = "INFO"
