# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Optional, Sequence

import click


def prompt_choice(
    prompt_text: str,
    options: Sequence[str],
    default: Optional[str] = None,
) -> str:
    """Show a numbered list and return the chosen option."""
    click.echo(prompt_text)
    for idx, label in enumerate(options, start=1):
        click.echo(f"  {idx}. {label}")
    default_idx = options.index(default) + 1 if default in options else None
    idx = click.prompt(
        "Enter number",
        type=click.IntRange(1, len(options)),
        default=default_idx,
    )
    return options[idx - 1]
