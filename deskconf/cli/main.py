# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
import os
from typing import Optional

import click
from dotenv import load_dotenv

from ..config import get_config_path, load_config, save_config
from ..constant import LOG_LEVEL_ENV
from .app_cmd import app_cmd
from .config_cmd import config_group
from .extensions_cmd import extensions_group
from .models_cmd import models_group
from .providers_cmd import providers_group


@click.group()
@click.option("--host", default=None, help="Backend host (config.json)")
@click.option("--port", default=None, type=int, help="Backend port")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR"],
        case_sensitive=False,
    ),
    help=f"Log level (default: ${LOG_LEVEL_ENV} or config.json)",
)
@click.pass_context
def cli(
    ctx: click.Context,
    host: Optional[str],
    port: Optional[int],
    log_level: Optional[str],
) -> None:
    """Configure providers, API keys, models and extensions."""
    load_dotenv()
    ctx.ensure_object(dict)
    config = ctx.obj.get("config") or load_config()
    ctx.obj["config"] = config

    level = (
        log_level or os.environ.get(LOG_LEVEL_ENV) or config.log_level
    ).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj["log_level"] = level

    if host or port:
        ctx.obj["base_url"] = (
            f"http://{host or config.backend.host}:"
            f"{port or config.backend.port}"
        )


@cli.command("init")
@click.option("--host", prompt="Backend host", default="127.0.0.1")
@click.option("--port", prompt="Backend port", default=3000, type=int)
@click.option(
    "--secret-key",
    prompt="Local secret key",
    hide_input=True,
    default="",
    show_default=False,
)
@click.pass_context
def init_cmd(
    ctx: click.Context,
    host: str,
    port: int,
    secret_key: str,
) -> None:
    """Write backend connection settings to config.json."""
    config = ctx.obj["config"]
    config.backend.host = host
    config.backend.port = port
    if secret_key:
        config.backend.secret_key = secret_key
    path = ctx.obj.get("config_path") or get_config_path()
    save_config(config, path)
    click.echo(f"✓ Saved {path}")


cli.add_command(app_cmd)
cli.add_command(config_group)
cli.add_command(extensions_group)
cli.add_command(models_group)
cli.add_command(providers_group)
