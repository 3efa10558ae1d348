# -*- coding: utf-8 -*-
"""Reference implementation of the local configuration backend.

Keeps everything in memory; used for local development and tests.
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI

from .routers import router
from .state import BackendState

logger = logging.getLogger(__name__)


def create_app(
    secret_key: str,
    state: Optional[BackendState] = None,
) -> FastAPI:
    if not secret_key:
        raise ValueError("The backend needs a non-empty secret key")
    app = FastAPI(title="deskconf backend", docs_url=None, redoc_url=None)
    app.state.secret_key = secret_key
    app.state.backend = state if state is not None else BackendState()
    app.include_router(router)
    logger.debug("Reference backend created")
    return app
