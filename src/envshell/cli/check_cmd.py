# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envshell check`` command."""

from __future__ import annotations

import click
from rich.table import Table

from envshell.cli import _read_pairs, cli, console
from envshell.shell import ParseError


@cli.command()
@click.pass_context
def check(ctx: click.Context) -> None:
    """Decode every line and report the ones that cannot be parsed.

    Exits with status 1 when at least one line is malformed.
    """
    path = ctx.obj["path"]
    errors: list[ParseError] = []
    pairs = _read_pairs(ctx, errors=errors)

    if not errors:
        console.print(f"[green]{path}: {len(pairs)} variable(s), no errors[/green]", soft_wrap=True)
        return

    table = Table(title=f"Errors in {path}")
    table.add_column("Line", style="cyan", justify="right")
    table.add_column("Content", style="white")
    table.add_column("Error", style="red")
    for err in errors:
        table.add_row(str(err.lineno), err.line, err.args[0])
    console.print(table)
    console.print(f"[red]{len(errors)} malformed line(s), {len(pairs)} variable(s) parsed[/red]", soft_wrap=True)
    ctx.exit(1)
