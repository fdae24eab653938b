# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envshell get`` and ``envshell decode`` commands."""

from __future__ import annotations

import click

from envshell.cli import _get_shell, _read_pairs, cli
from envshell.shell import ParseError


@cli.command()
@click.argument("key")
@click.pass_context
def get(ctx: click.Context, key: str) -> None:
    """Print the decoded value of a single variable."""
    pairs = _read_pairs(ctx)
    if key not in pairs:
        raise click.ClickException(f"Key '{key}' not found in {ctx.obj['path']}.")
    click.echo(pairs[key])


@cli.command()
@click.argument("value")
@click.pass_context
def decode(ctx: click.Context, value: str) -> None:
    """Decode a raw right-hand side VALUE against the current environment.

    Example: envshell decode '"$HOME"/bin # comment'
    """
    shell = _get_shell(ctx)
    try:
        _, decoded = shell.parse_line(f"_={value}")
    except ParseError as e:
        raise click.ClickException(str(e))
    click.echo(decoded)
