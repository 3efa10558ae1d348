# -*- coding: utf-8 -*-
"""CLI commands for the active model and the recent-models list."""
from __future__ import annotations

import click

from ..providers import SelectedModel, get_provider
from ..session import DeskSession
from .http import run


@click.group("models")
def models_group() -> None:
    """Show and switch the active LLM model."""


@models_group.command("current")
@click.pass_context
def current_cmd(ctx: click.Context) -> None:
    """Print the active provider / model."""

    async def _current(session: DeskSession):
        return session.selection.current

    current = run(ctx, _current)
    if current is None:
        click.echo("(not configured)")
    else:
        click.echo(f"{current.provider} / {current.model}")


@models_group.command("switch")
@click.argument("provider_id")
@click.argument("model")
@click.pass_context
def switch_cmd(ctx: click.Context, provider_id: str, model: str) -> None:
    """Switch to MODEL served by PROVIDER_ID."""
    defn = get_provider(provider_id)
    if defn is None:
        click.echo(click.style(f"Unknown provider: {provider_id}", fg="red"))
        raise SystemExit(1)
    if not model.strip():
        click.echo(click.style("Error: model name is required.", fg="red"))
        raise SystemExit(1)

    async def _switch(session: DeskSession) -> SelectedModel:
        return session.selection.switch_model(
            SelectedModel(provider=defn.alias, model=model.strip()),
        )

    selected = run(ctx, _switch)
    click.echo(f"✓ LLM: {defn.name} / {selected.model}")


@models_group.command("recent")
@click.pass_context
def recent_cmd(ctx: click.Context) -> None:
    """List recently used models, most recent first."""

    async def _recent(session: DeskSession):
        return session.selection.recent_models()

    recent = run(ctx, _recent)
    if not recent:
        click.echo("(none)")
    for idx, m in enumerate(recent, start=1):
        click.echo(f"  {idx}. {m.provider} / {m.model}")
