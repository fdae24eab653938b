# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envshell export`` and ``envshell unexport`` commands."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from rich.console import Console

from envshell.cli import _read_pairs, cli, console

try:
    import yaml
    HAS_YAML = True
except ImportError:
    HAS_YAML = False

# Characters that must be quoted (unix) or escaped (dotenv) on output.
_SHELL_SPECIAL = " \t'\"\\$`!#&|;(){}<>*?~"


# ---------------------------------------------------------------------------
# export
# ---------------------------------------------------------------------------

@cli.command("export")
@click.option(
    "--format", "fmt",
    type=click.Choice(["dotenv", "unix", "win", "json", "yaml"]),
    default="dotenv",
    help="Output format: dotenv (default, KEY=value), unix (export KEY=value), win (PowerShell), json, yaml.",
)
@click.option(
    "--output", "-o",
    type=click.Path(exists=False),
    default=None,
    help="Output file path (default: stdout).",
)
@click.pass_context
def export(ctx: click.Context, fmt: str, output: str | None) -> None:
    """Export the decoded variables to stdout or a file.

    The values are fully decoded (quotes, escapes, comments and $VAR
    references resolved). Use --format unix for shell sourcing:
    eval "$(envshell export --format unix)". Use --format win for
    PowerShell: envshell export --format win | Invoke-Expression.
    """
    if fmt == "yaml" and not HAS_YAML:
        raise click.ClickException("PyYAML is not installed. Install with: pip install envshell[yaml]")

    pairs = _read_pairs(ctx)
    if fmt == "dotenv":
        multiline = [key for key, value in pairs.items() if "\n" in value or "\r" in value]
        if multiline:
            raise click.ClickException(
                f"Cannot export {', '.join(multiline)} as dotenv: value contains a line break. "
                "Use --format json or yaml."
            )

    if output:
        with Path(output).open("w") as f:
            if fmt == "json":
                f.write(json.dumps(pairs, indent=2))
                f.write("\n")
            elif fmt == "yaml":
                yaml.dump(pairs, f, default_flow_style=False, sort_keys=False)
            else:
                for line in _format_export_lines(pairs, fmt):
                    f.write(line + "\n")
        console.print(f"[green]Exported {len(pairs)} variable(s) to {output}[/green]", soft_wrap=True)
    else:
        out = Console(file=sys.stdout, highlight=False, markup=False, emoji=False, soft_wrap=True)
        if fmt == "json":
            out.print(json.dumps(pairs, indent=2))
        elif fmt == "yaml":
            yaml.dump(pairs, sys.stdout, default_flow_style=False, sort_keys=False)
        else:
            for line in _format_export_lines(pairs, fmt):
                out.print(line)


def _shell_escape(value: str) -> str:
    """Escape for Unix sh: single-quote wrapped, internal ' -> '\\''."""
    if not value or any(c in _SHELL_SPECIAL for c in value):
        return "'" + value.replace("'", "'\\''") + "'"
    return value


def _dotenv_escape(value: str) -> str:
    """Backslash-escape characters the basic shell would interpret."""
    return "".join("\\" + c if c in _SHELL_SPECIAL else c for c in value)


def _powershell_escape(value: str) -> str:
    """Escape for PowerShell single-quoted string: ' -> ''."""
    return value.replace("'", "''")


def _format_export_lines(pairs: dict[str, str], fmt: str) -> list[str]:
    lines: list[str] = []
    for key, value in pairs.items():
        if fmt == "unix":
            lines.append(f"export {key}={_shell_escape(value)}")
        elif fmt == "win":
            lines.append(f"$env:{key} = '{_powershell_escape(value)}'")
        else:
            lines.append(f"{key}={_dotenv_escape(value)}")
    return lines


# ---------------------------------------------------------------------------
# unexport
# ---------------------------------------------------------------------------

@cli.command("unexport")
@click.option(
    "--format", "fmt",
    type=click.Choice(["unix", "win"]),
    default="unix",
    help="Output format. Default: unix (unset KEY). Use win for PowerShell (Remove-Item Env:KEY).",
)
@click.pass_context
def unexport(ctx: click.Context, fmt: str) -> None:
    """Output shell commands that unset every variable the file defines."""
    pairs = _read_pairs(ctx)
    out = Console(file=sys.stdout, highlight=False, markup=False, emoji=False, soft_wrap=True)
    for key in pairs:
        if fmt == "win":
            out.print(f"Remove-Item Env:{key} -ErrorAction SilentlyContinue")
        else:
            out.print(f"unset {key}")
