# -*- coding: utf-8 -*-
from __future__ import annotations

import asyncio
import json
from typing import Any, Awaitable, Callable, TypeVar

import click

from ..config import load_config
from ..exceptions import DeskConfError
from ..session import DeskSession

T = TypeVar("T")


def open_session(ctx: click.Context) -> DeskSession:
    """Build a session from the global options stored on ``ctx.obj``."""
    obj = ctx.obj or {}
    config = obj.get("config") or load_config()
    return DeskSession.from_config(
        config,
        base_url=obj.get("base_url"),
        selection_path=obj.get("selection_path"),
        transport=obj.get("transport"),
    )


def run(
    ctx: click.Context,
    fn: Callable[[DeskSession], Awaitable[T]],
) -> T:
    """Run *fn* with a fresh session; typed errors exit with status 1."""

    async def _main() -> T:
        async with open_session(ctx) as session:
            return await fn(session)

    try:
        return asyncio.run(_main())
    except (DeskConfError, ValueError) as exc:
        click.echo(click.style(f"Error: {exc}", fg="red"), err=True)
        raise SystemExit(1) from exc


def print_json(data: Any) -> None:
    click.echo(json.dumps(data, ensure_ascii=False, indent=2))
