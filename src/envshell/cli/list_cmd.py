# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envshell list`` command."""

from __future__ import annotations

import click
from rich.table import Table

from envshell.cli import _mask, _read_pairs, cli, console


@cli.command("list")
@click.option("--show", is_flag=True, help="Show values in clear text instead of masked.")
@click.pass_context
def list_keys(ctx: click.Context, show: bool) -> None:
    """List decoded variables in file order."""
    pairs = _read_pairs(ctx)
    table = Table(title=f"Variables ({ctx.obj['path']}, shell: {ctx.obj['shell']})")
    table.add_column("Key", style="cyan")
    table.add_column("Value" if show else "Value (masked)", style="white" if show else "dim")
    if not pairs:
        table.add_row("(empty)", "(empty)")
    for key, value in pairs.items():
        table.add_row(key, value if show else _mask(value))
    console.print(table)
