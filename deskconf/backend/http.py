# -*- coding: utf-8 -*-
"""Shared httpx plumbing for talking to the local backend."""
from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ..constant import DEFAULT_API_URL, REQUEST_TIMEOUT
from ..exceptions import AuthenticationError, TransportFailure

logger = logging.getLogger(__name__)


def async_client(
    base_url: str = DEFAULT_API_URL,
    *,
    timeout: float = REQUEST_TIMEOUT,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url.rstrip("/"),
        timeout=timeout,
        transport=transport,
    )


def _detail(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text
    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])
    return resp.text


def raise_for_status(resp: httpx.Response, action: str) -> None:
    """Map a non-2xx response to a typed error.

    Callers handle the statuses their contract absorbs (404, 409) before
    calling this.
    """
    if resp.is_success:
        return
    if resp.status_code in (401, 403):
        raise AuthenticationError(
            f"{action} rejected",
            status_code=resp.status_code,
            detail=_detail(resp),
        )
    raise TransportFailure(
        f"{action} failed",
        status_code=resp.status_code,
        detail=_detail(resp),
    )


async def send(
    http: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    action: str,
    json: Any = None,
    headers: Optional[dict[str, str]] = None,
) -> httpx.Response:
    """Issue one request. Network errors and timeouts become
    :class:`TransportFailure`; status codes are left to the caller."""
    logger.debug("%s %s (%s)", method, url, action)
    try:
        return await http.request(method, url, json=json, headers=headers)
    except httpx.HTTPError as exc:
        raise TransportFailure(f"{action} failed", detail=str(exc)) from exc
