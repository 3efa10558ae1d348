# -*- coding: utf-8 -*-
from fastapi import APIRouter

from .config import router as config_router
from .secrets import router as secrets_router

router = APIRouter()

router.include_router(config_router)
router.include_router(secrets_router)

__all__ = ["router"]
