# -*- coding: utf-8 -*-
"""Serve the in-memory reference backend."""
from __future__ import annotations

import secrets
from typing import Optional

import click
import uvicorn

from ..app import create_app
from ..constant import SECRET_KEY_ENV, get_secret_key


@click.command("app")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=3000, type=int, show_default=True)
@click.option(
    "--secret-key",
    default=None,
    help=f"Local secret key (default: ${SECRET_KEY_ENV} or a random one)",
)
@click.pass_context
def app_cmd(
    ctx: click.Context,
    host: str,
    port: int,
    secret_key: Optional[str],
) -> None:
    """Run the reference backend (state is kept in memory only)."""
    key = secret_key or get_secret_key()
    if not key:
        key = secrets.token_urlsafe(24)
        click.echo(f"{SECRET_KEY_ENV}={key}")
    log_level = (ctx.obj or {}).get("log_level", "info").lower()
    uvicorn.run(create_app(key), host=host, port=port, log_level=log_level)
