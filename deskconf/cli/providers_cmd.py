# -*- coding: utf-8 -*-
"""CLI commands for provider credentials and provider selection."""
from __future__ import annotations

from typing import List, Optional

import click

from ..providers import (
    ProviderStatus,
    describe_or_default,
    get_provider,
    list_providers,
    mask_api_key,
)
from ..session import DeskSession
from .http import print_json, run
from .utils import prompt_choice


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def _provider_statuses(session: DeskSession) -> List[ProviderStatus]:
    """Catalog providers plus any the backend reports that we don't know."""
    await session.active_keys.refresh()
    statuses = [
        ProviderStatus(
            name=d.name,
            alias=d.alias,
            description=d.description,
            default_model=d.default_model,
            required_keys=list(d.required_keys),
            is_configured=session.active_keys.is_configured(d.name),
        )
        for d in list_providers()
    ]
    for remote in await session.config.list_providers():
        if get_provider(remote.name) is not None:
            continue
        info = describe_or_default(remote.display_name or remote.name)
        statuses.append(
            ProviderStatus(
                name=info.name,
                alias=info.alias,
                default_model=remote.default_model,
                is_configured=remote.is_configured,
                in_catalog=False,
            ),
        )
    return statuses


def _select_provider_interactive(
    statuses: List[ProviderStatus],
    prompt_text: str = "Select provider:",
) -> str:
    """Prompt user to pick a provider. Returns the provider alias.

    Each option is annotated with ✓ (configured) or ✗ (not configured).
    """
    labels = [
        f"{s.name} ({s.alias}) [{'✓' if s.is_configured else '✗'}]"
        for s in statuses
    ]
    chosen = prompt_choice(prompt_text, options=labels)
    return statuses[labels.index(chosen)].alias


def _require_known(provider_id: str) -> None:
    if get_provider(provider_id) is None:
        click.echo(click.style(f"Unknown provider: {provider_id}", fg="red"))
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# Group
# ---------------------------------------------------------------------------


@click.group("providers")
def providers_group() -> None:
    """Manage provider API keys and the active provider."""


@providers_group.command("list")
@click.option("--json", "as_json", is_flag=True, help="Print JSON")
@click.pass_context
def list_cmd(ctx: click.Context, as_json: bool) -> None:
    """Show all providers and whether their keys are set."""

    async def _list(session: DeskSession):
        return await _provider_statuses(session), session.selection.current

    statuses, current = run(ctx, _list)
    if as_json:
        print_json([s.model_dump() for s in statuses])
        return

    click.echo("\n=== Providers ===")
    for s in statuses:
        mark = "✓" if s.is_configured else "✗"
        active = current is not None and current.provider == s.alias
        click.echo(f"\n{'─' * 44}")
        suffix = " *" if active else ""
        click.echo(f"  {s.name} ({s.alias}) [{mark}]{suffix}")
        click.echo(f"{'─' * 44}")
        if s.description:
            click.echo(f"  {'description':16s}: {s.description}")
        if s.required_keys:
            click.echo(f"  {'keys':16s}: {', '.join(s.required_keys)}")
        if s.default_model:
            click.echo(f"  {'default model':16s}: {s.default_model}")
    click.echo()


@providers_group.command("config-key")
@click.argument("provider_id", required=False, default=None)
@click.pass_context
def config_key_cmd(ctx: click.Context, provider_id: Optional[str]) -> None:
    """Add or replace a provider's API key."""
    if provider_id is None:
        statuses = run(ctx, _provider_statuses)
        provider_id = _select_provider_interactive(
            [s for s in statuses if s.in_catalog],
            "Select provider to configure API key:",
        )
    _require_known(provider_id)
    defn = get_provider(provider_id)
    key_name = defn.required_keys[0] if defn.required_keys else ""
    if not key_name:
        click.echo(f"{defn.name} needs no credentials.")
        return

    api_key = click.prompt(
        f"{key_name}",
        hide_input=True,
        show_default=False,
    )

    async def _set(session: DeskSession) -> bool:
        await session.active_keys.refresh()
        return await session.credentials.set_provider_key(
            defn.name,
            api_key,
        )

    replaced = run(ctx, _set)
    verb = "Updated" if replaced else "Added"
    click.echo(
        f"✓ {verb} {defn.name} {key_name}: "
        f"{mask_api_key(api_key.strip())}",
    )


@providers_group.command("remove-key")
@click.argument("provider_id")
@click.pass_context
def remove_key_cmd(ctx: click.Context, provider_id: str) -> None:
    """Delete a provider's stored credentials."""
    _require_known(provider_id)

    async def _remove(session: DeskSession) -> None:
        await session.credentials.remove_provider_key(provider_id)

    run(ctx, _remove)
    click.echo(f"✓ Removed credentials for {get_provider(provider_id).name}")


@providers_group.command("select")
@click.argument("provider_id", required=False, default=None)
@click.pass_context
def select_cmd(ctx: click.Context, provider_id: Optional[str]) -> None:
    """Switch to a configured provider with its default model."""

    async def _select(session: DeskSession):
        await session.active_keys.refresh()
        pid = provider_id
        if pid is None:
            eligible = [
                ProviderStatus(
                    name=d.name,
                    alias=d.alias,
                    is_configured=True,
                )
                for d in list_providers()
                if session.active_keys.is_configured(d.name)
            ]
            if not eligible:
                click.echo(
                    "No provider is configured yet. Run "
                    "'deskconf providers config-key' first.",
                )
                return None
            pid = _select_provider_interactive(eligible)
        elif not session.active_keys.is_configured(pid):
            click.echo(
                click.style(
                    f"Warning: {pid} has no API key configured.",
                    fg="yellow",
                ),
            )
        return session.selection.select_provider(pid)

    selected = run(ctx, _select)
    if selected is not None:
        click.echo(f"✓ Switched to {selected.provider} / {selected.model}")
