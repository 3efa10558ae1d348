# -*- coding: utf-8 -*-
"""API routes for the secret store."""

from __future__ import annotations

from fastapi import APIRouter, Body, Depends, HTTPException

from ...backend.models import SecretDeleteRequest, SecretStoreRequest
from ..state import BackendState
from .config import get_state, verify_secret_key

router = APIRouter(prefix="/secrets", tags=["secrets"])


@router.post(
    "/store",
    summary="Store a secret",
    dependencies=[Depends(verify_secret_key)],
)
async def store_secret(
    body: SecretStoreRequest = Body(...),
    state: BackendState = Depends(get_state),
):
    state.secrets[body.key] = body.value
    return {"stored": body.key}


@router.delete(
    "/delete",
    summary="Delete a secret",
    dependencies=[Depends(verify_secret_key)],
)
async def delete_secret(
    body: SecretDeleteRequest = Body(...),
    state: BackendState = Depends(get_state),
):
    if body.key not in state.secrets:
        raise HTTPException(
            status_code=404,
            detail=f"Secret '{body.key}' not found",
        )
    del state.secrets[body.key]
    return {"deleted": body.key}
