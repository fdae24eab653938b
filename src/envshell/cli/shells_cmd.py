# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envshell shells`` command."""

from __future__ import annotations

import click
from rich.table import Table

from envshell.cli import _doc_link, cli, console, get_shell_entries


@cli.command("shells")
@click.pass_context
def shells_list(ctx: click.Context) -> None:
    """List available shells (built-in first, then plugins).

    Each shell provides its short name, description, and documentation link
    via class attributes.
    """
    table = Table(title="Shells")
    table.add_column("Shell", style="cyan")
    table.add_column("Description", style="white")
    table.add_column("Documentation", style="dim")
    for _name, shell_cls in get_shell_entries():
        short_name, display_name, doc_url = shell_cls.get_shell_row()
        marker = " (selected)" if short_name == ctx.obj["shell"] else ""
        doc_cell = _doc_link(doc_url) if doc_url else ""
        table.add_row(short_name + marker, display_name, doc_cell)
    console.print(table)
