# -*- coding: utf-8 -*-
"""CLI commands for managing extensions via the backend."""
from __future__ import annotations

from typing import Optional, Tuple

import click

from ..extensions import (
    BuiltinConnection,
    ExtensionSpec,
    SseConnection,
    StdioConnection,
)
from ..session import DeskSession
from .http import print_json, run


def _parse_envs(envs: Tuple[str, ...]) -> dict[str, str]:
    out: dict[str, str] = {}
    for item in envs:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(
                f"expected KEY=VALUE, got {item!r}",
                param_hint="--env",
            )
        out[key] = value
    return out


def _build_spec(
    name: str,
    kind: str,
    cmd: Optional[str],
    args: Tuple[str, ...],
    uri: Optional[str],
    envs: Tuple[str, ...],
    timeout: Optional[int],
    enabled: bool,
) -> ExtensionSpec:
    if kind == "stdio":
        if not cmd:
            raise click.BadParameter("stdio extensions need --cmd")
        connection = StdioConnection(
            cmd=cmd,
            args=list(args),
            envs=_parse_envs(envs),
        )
    elif kind == "sse":
        if not uri:
            raise click.BadParameter("sse extensions need --uri")
        connection = SseConnection(uri=uri, envs=_parse_envs(envs))
    else:
        connection = BuiltinConnection()
    return ExtensionSpec(
        name=name,
        enabled=enabled,
        connection=connection,
        timeout=timeout,
    )


def _spec_options(fn):
    """Options shared by ``add`` and ``update``."""
    for option in reversed(
        [
            click.argument("name"),
            click.option(
                "--type",
                "kind",
                type=click.Choice(["stdio", "sse", "builtin"]),
                default="builtin",
                show_default=True,
            ),
            click.option("--cmd", default=None, help="stdio: executable"),
            click.option(
                "--arg",
                "args",
                multiple=True,
                help="stdio: argument (repeatable)",
            ),
            click.option("--uri", default=None, help="sse: endpoint URL"),
            click.option(
                "--env",
                "envs",
                multiple=True,
                help="KEY=VALUE passed to the extension (repeatable)",
            ),
            click.option("--timeout", type=int, default=None),
            click.option("--enabled/--disabled", default=True),
        ],
    ):
        fn = option(fn)
    return fn


@click.group("extensions")
def extensions_group() -> None:
    """Manage extensions (tool integrations) registered with the backend."""


@extensions_group.command("list")
@click.pass_context
def list_cmd(ctx: click.Context) -> None:
    """List extensions held by the backend."""

    async def _list(session: DeskSession):
        return await session.extensions.list()

    specs = run(ctx, _list)
    print_json([s.model_dump(mode="json") for s in specs])


@extensions_group.command("add")
@_spec_options
@click.pass_context
def add_cmd(ctx: click.Context, name: str, **kwargs) -> None:
    """Register a new extension NAME."""
    spec = _build_spec(name, **kwargs)

    async def _add(session: DeskSession):
        return await session.extensions.add(spec)

    run(ctx, _add)
    click.echo(f"✓ Added extension {name}")


@extensions_group.command("update")
@_spec_options
@click.pass_context
def update_cmd(ctx: click.Context, name: str, **kwargs) -> None:
    """Replace the record of existing extension NAME."""
    spec = _build_spec(name, **kwargs)

    async def _update(session: DeskSession):
        return await session.extensions.update(spec)

    run(ctx, _update)
    click.echo(f"✓ Updated extension {name}")


@extensions_group.command("remove")
@click.argument("name")
@click.pass_context
def remove_cmd(ctx: click.Context, name: str) -> None:
    """Remove extension NAME (no-op if it is not registered)."""

    async def _remove(session: DeskSession) -> bool:
        return await session.extensions.remove(name)

    removed = run(ctx, _remove)
    if removed:
        click.echo(f"✓ Removed extension {name}")
    else:
        click.echo(f"Extension {name} was not registered")


def _toggle(ctx: click.Context, name: str, enabled: bool) -> None:
    async def _set(session: DeskSession):
        return await session.extensions.set_enabled(name, enabled)

    run(ctx, _set)
    click.echo(f"✓ {'Enabled' if enabled else 'Disabled'} extension {name}")


@extensions_group.command("enable")
@click.argument("name")
@click.pass_context
def enable_cmd(ctx: click.Context, name: str) -> None:
    """Enable extension NAME."""
    _toggle(ctx, name, True)


@extensions_group.command("disable")
@click.argument("name")
@click.pass_context
def disable_cmd(ctx: click.Context, name: str) -> None:
    """Disable extension NAME."""
    _toggle(ctx, name, False)
