# -*- coding: utf-8 -*-
"""CLI commands for raw backend configuration entries."""
from __future__ import annotations

import json

import click

from ..session import DeskSession
from .http import print_json, run


@click.group("config")
def config_group() -> None:
    """Read and write configuration entries held by the backend."""


@config_group.command("list")
@click.pass_context
def list_cmd(ctx: click.Context) -> None:
    """Show all non-secret entries."""

    async def _list(session: DeskSession):
        return await session.config.read_all()

    print_json(run(ctx, _list))


@config_group.command("get")
@click.argument("key")
@click.pass_context
def get_cmd(ctx: click.Context, key: str) -> None:
    """Print the value of KEY."""

    async def _get(session: DeskSession):
        return await session.config.read(key)

    result = run(ctx, _get)
    if not result.found:
        click.echo(f"{key} is not set")
        raise SystemExit(1)
    print_json(result.value)


@config_group.command("set")
@click.argument("key")
@click.argument("value")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Parse VALUE as JSON instead of a plain string",
)
@click.pass_context
def set_cmd(ctx: click.Context, key: str, value: str, as_json: bool) -> None:
    """Create or replace KEY."""
    parsed = value
    if as_json:
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError as exc:
            raise click.BadParameter(str(exc), param_hint="VALUE") from exc

    async def _set(session: DeskSession) -> None:
        await session.config.upsert(key, parsed)

    run(ctx, _set)
    click.echo(f"✓ {key} set")


@config_group.command("rm")
@click.argument("key")
@click.pass_context
def rm_cmd(ctx: click.Context, key: str) -> None:
    """Remove KEY (no-op if absent)."""

    async def _rm(session: DeskSession) -> bool:
        return await session.config.remove(key)

    removed = run(ctx, _rm)
    click.echo(f"✓ {key} removed" if removed else f"{key} was not set")
