# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""envshell CLI -- inspect and export .env files decoded with shell syntax.

The CLI is split into per-command modules under this package.  The ``cli``
click group and shared helpers (``console``, ``_get_shell``, ``_read_pairs``,
etc.) live here so every command module can import them.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

from envshell import __version__
from envshell.config import ON_ERROR_CHOICES, load_config
from envshell.env_file import read_env_file
from envshell.shell import ParseError, Shell
from envshell.shells import get_shell_entries, make_shell

console = Console(stderr=True)


def _doc_link(url: str, label: str = "Doc Link") -> Text:
    """Rich Text with an OSC 8 hyperlink for terminal clickability."""
    return Text(label, style=Style(link=url))


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _configure_logging(verbose: bool) -> None:
    """Send envshell log records to the rich console when --verbose is given."""
    pkg_logger = logging.getLogger("envshell")
    for handler in [h for h in pkg_logger.handlers if isinstance(h, RichHandler)]:
        pkg_logger.removeHandler(handler)
    if verbose:
        pkg_logger.addHandler(RichHandler(console=console, show_time=False, show_path=False))
        pkg_logger.setLevel(logging.DEBUG)
    else:
        pkg_logger.setLevel(logging.NOTSET)


def _get_shell(ctx: click.Context) -> Shell:
    """Return the shell selected with --shell (or config)."""
    try:
        return make_shell(ctx.obj["shell"], ctx.obj["config"])
    except KeyError as e:
        raise click.UsageError(str(e.args[0]))


def _read_pairs(
    ctx: click.Context,
    errors: list[ParseError] | None = None,
) -> dict[str, str]:
    """Decode the selected file; turn read and parse failures into click errors."""
    path = ctx.obj["path"]
    on_error = "skip" if errors is not None else ctx.obj["on_error"]
    try:
        return read_env_file(
            path, _get_shell(ctx),
            incremental=ctx.obj["incremental"],
            on_error=on_error,
            errors=errors,
        )
    except OSError as e:
        raise click.ClickException(f"Cannot read {path}: {e.strerror or e}")
    except ParseError as e:
        raise click.ClickException(f"Cannot parse {path}: {e}")


def _mask(value: str) -> str:
    if len(value) <= 6:
        return "****"
    return value[:3] + "****" + value[-3:]


# ---------------------------------------------------------------------------
# Top-level click group
# ---------------------------------------------------------------------------

@click.group()
@click.option("--path", "-f", default=None, help="The .env file to read (default: ENVSHELL_PATH or config, else .env).")
@click.option(
    "--shell", "-s", default=None,
    help="Shell used to decode lines: basic, bash, or a plugin. Default: ENVSHELL_SHELL or config, else basic.",
)
@click.option(
    "--config", "config_path", default=None, type=click.Path(dir_okay=False),
    help="Config file (default: ENVSHELL_CONFIG or ./.envshell.toml).",
)
@click.option(
    "--no-incremental", is_flag=True, default=False,
    help="Resolve $NAME only from the process environment, not from earlier lines.",
)
@click.option(
    "--on-error", type=click.Choice(ON_ERROR_CHOICES), default=None,
    help="Malformed lines: raise (stop) or skip. Default: config, else raise.",
)
@click.option(
    "--quote-aware-comments", is_flag=True, default=False,
    help="Only treat ' #' as a comment outside quotes.",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.version_option(__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    path: str | None,
    shell: str | None,
    config_path: str | None,
    no_incremental: bool,
    on_error: str | None,
    quote_aware_comments: bool,
    verbose: bool,
) -> None:
    """Read .env files with shell-style quoting, comments and $VAR substitution."""
    _configure_logging(verbose)
    try:
        cfg = load_config(Path(config_path) if config_path else None)
    except (OSError, ValueError) as e:
        raise click.UsageError(f"Invalid config: {e}")
    if quote_aware_comments:
        cfg.quote_aware_comments = True
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg
    ctx.obj["path"] = path if path is not None else cfg.path
    ctx.obj["shell"] = shell if shell is not None else cfg.shell
    ctx.obj["incremental"] = cfg.incremental and not no_incremental
    ctx.obj["on_error"] = on_error or cfg.on_error
    ctx.obj["verbose"] = verbose


# ---------------------------------------------------------------------------
# Register all command modules (import triggers @cli.command registration)
# ---------------------------------------------------------------------------

from envshell.cli import (  # noqa: E402, F401
    list_cmd,
    get_cmd,
    export_cmd,
    check_cmd,
    shells_cmd,
)
