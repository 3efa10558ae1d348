# -*- coding: utf-8 -*-
"""API routes for configuration entries, providers and extensions."""

from __future__ import annotations

import hmac
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Header, HTTPException, Request

from ...backend.models import (
    BackendConfigKey,
    BackendProvider,
    ConfigEntry,
    ConfigKeyQuery,
    ConfigResponse,
    UpsertConfigQuery,
)
from ...extensions.models import ExtensionRemoveQuery, ExtensionSpec
from ...providers import list_providers
from ..state import BackendState


def get_state(request: Request) -> BackendState:
    return request.app.state.backend


def verify_secret_key(
    request: Request,
    x_secret_key: Optional[str] = Header(default=None),
) -> None:
    expected = request.app.state.secret_key
    if not x_secret_key or not hmac.compare_digest(
        x_secret_key.encode(),
        expected.encode(),
    ):
        raise HTTPException(status_code=401, detail="Invalid secret key")


# Both planes are reachable through /config/read|upsert|remove.
router = APIRouter(
    prefix="/config",
    tags=["config"],
    dependencies=[Depends(verify_secret_key)],
)


# ---------------------------------------------------------------------------
# Endpoints: config entries
# ---------------------------------------------------------------------------


@router.get(
    "",
    response_model=ConfigResponse,
    summary="Read all configuration entries",
    description="Secret entries are never included.",
)
async def read_all_config(
    state: BackendState = Depends(get_state),
) -> ConfigResponse:
    return ConfigResponse(config=dict(state.config))


@router.post(
    "/read",
    response_model=ConfigEntry,
    summary="Read one configuration entry",
)
async def read_config(
    body: ConfigKeyQuery = Body(...),
    state: BackendState = Depends(get_state),
) -> ConfigEntry:
    plane = state.plane(body.is_secret)
    if body.key not in plane:
        raise HTTPException(
            status_code=404,
            detail=f"Config key '{body.key}' not found",
        )
    return ConfigEntry(
        key=body.key,
        value=plane[body.key],
        is_secret=body.is_secret,
    )


@router.post("/upsert", summary="Create or replace a configuration entry")
async def upsert_config(
    body: UpsertConfigQuery = Body(...),
    state: BackendState = Depends(get_state),
):
    state.plane(body.is_secret)[body.key] = body.value
    return {"upserted": body.key}


@router.post("/remove", summary="Remove a configuration entry")
async def remove_config(
    body: ConfigKeyQuery = Body(...),
    state: BackendState = Depends(get_state),
):
    plane = state.plane(body.is_secret)
    if body.key not in plane:
        raise HTTPException(
            status_code=404,
            detail=f"Config key '{body.key}' not found",
        )
    del plane[body.key]
    return {"removed": body.key}


# ---------------------------------------------------------------------------
# Endpoints: providers
# ---------------------------------------------------------------------------


@router.get(
    "/providers",
    response_model=List[BackendProvider],
    summary="List providers known to the backend",
)
async def providers(
    state: BackendState = Depends(get_state),
) -> List[BackendProvider]:
    out = []
    for defn in list_providers():
        keys = [
            BackendConfigKey(name=k, required=True, secret=True)
            for k in defn.required_keys
        ] + [
            BackendConfigKey(name=k.name, default=k.default)
            for k in defn.optional_keys
        ]
        out.append(
            BackendProvider(
                name=defn.alias,
                display_name=defn.name,
                description=defn.description,
                default_model=defn.default_model,
                known_models=list(defn.models),
                config_keys=keys,
                is_configured=all(
                    k in state.secrets for k in defn.required_keys
                ),
            ),
        )
    return out


# ---------------------------------------------------------------------------
# Endpoints: extensions
# ---------------------------------------------------------------------------


def _record(spec: ExtensionSpec) -> dict:
    return spec.model_dump(mode="json", exclude={"name"})


@router.post("/extension", summary="Add an extension")
async def add_extension(
    body: ExtensionSpec = Body(...),
    state: BackendState = Depends(get_state),
):
    if body.name in state.extensions:
        raise HTTPException(
            status_code=409,
            detail=f"Extension '{body.name}' already exists",
        )
    state.put_extension(body.name, _record(body))
    return {"added": body.name}


@router.put("/extension", summary="Update an extension")
async def update_extension(
    body: ExtensionSpec = Body(...),
    state: BackendState = Depends(get_state),
):
    if body.name not in state.extensions:
        raise HTTPException(
            status_code=404,
            detail=f"Extension '{body.name}' not found",
        )
    state.put_extension(body.name, _record(body))
    return {"updated": body.name}


@router.delete("/extension", summary="Remove an extension")
async def remove_extension(
    body: ExtensionRemoveQuery = Body(...),
    state: BackendState = Depends(get_state),
):
    if body.name not in state.extensions:
        raise HTTPException(
            status_code=404,
            detail=f"Extension '{body.name}' not found",
        )
    del state.extensions[body.name]
    return {"removed": body.name}
