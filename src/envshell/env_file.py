# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Read .env files through a shell and load them into the environment.

The driver trims every line, skips blank lines and the lines the shell
considers ignorable, and hands the rest to ``Shell.parse_line``.

Substitution visibility: with ``incremental=True`` (the default) each line is
decoded against the values of the earlier lines of the same file layered over
the base lookup, like sourcing the file in a shell. With ``incremental=False``
every line only sees the base lookup. Nothing is written to ``os.environ``
until the whole file has been decoded.
"""

from __future__ import annotations

import logging
import os
from collections import ChainMap
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path

from envshell.config import DEFAULT_ENV_FILE, ON_ERROR_CHOICES
from envshell.shell import MalformedLineError, ParseError, Shell
from envshell.shells.basic import BasicShell

logger = logging.getLogger(__name__)


def iter_env_lines(
    lines: Iterable[str],
    shell: Shell | None = None,
    *,
    lookup: Mapping[str, str] | None = None,
    incremental: bool = True,
    on_error: str = "raise",
    errors: list[ParseError] | None = None,
) -> Iterator[tuple[str, str]]:
    """Yield ``(key, value)`` for every assignment in *lines*.

    *on_error* decides what happens to a line that fails to parse:
    ``"raise"`` re-raises the :class:`ParseError` with ``lineno`` set and
    ``pairs`` holding the assignments decoded before it,
    ``"skip"`` logs a warning and moves on to the next line. Skipped errors
    are appended to *errors* when given.
    """
    if on_error not in ON_ERROR_CHOICES:
        raise ValueError(f"Invalid on_error {on_error!r}. Must be one of: {', '.join(ON_ERROR_CHOICES)}")
    if shell is None:
        shell = BasicShell()
    base = os.environ if lookup is None else lookup
    seen: dict[str, str] = {}
    scope: Mapping[str, str] = ChainMap(seen, base) if incremental else base

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or shell.is_ignorable(line):
            continue
        try:
            key, value = shell.parse_line(line, scope)
            if not key:
                raise MalformedLineError(f"empty variable name in {line!r}", line=line)
        except ParseError as e:
            e.lineno = lineno
            if on_error == "raise":
                e.pairs = dict(seen)
                raise
            logger.warning("Skipping %s", e)
            if errors is not None:
                errors.append(e)
            continue
        logger.debug("Parsed %s on line %d", key, lineno)
        seen[key] = value
        yield key, value


def read_env_file(
    path: str | Path = DEFAULT_ENV_FILE,
    shell: Shell | None = None,
    *,
    lookup: Mapping[str, str] | None = None,
    incremental: bool = True,
    on_error: str = "raise",
    errors: list[ParseError] | None = None,
) -> dict[str, str]:
    """Read a .env file and return its decoded key-value pairs in file order.

    Later assignments of the same key replace earlier ones. Raises ``OSError``
    if the file cannot be read.
    """
    text = Path(path).read_text()
    return dict(
        iter_env_lines(
            text.splitlines(), shell,
            lookup=lookup, incremental=incremental, on_error=on_error, errors=errors,
        )
    )


def write_environ(pairs: Mapping[str, str], override: bool = True) -> int:
    """Write *pairs* into ``os.environ``; return how many variables were set.

    With ``override=False`` variables that already exist are left untouched.
    """
    count = 0
    for key, value in pairs.items():
        if key in os.environ and not override:
            continue
        os.environ[key] = value
        count += 1
    return count


def load_env_file(
    path: str | Path = DEFAULT_ENV_FILE,
    shell: Shell | None = None,
    *,
    override: bool = True,
    incremental: bool = True,
    on_error: str = "raise",
) -> dict[str, str]:
    """Decode a .env file against the process environment and commit the result.

    Returns the decoded pairs (including any that were not written because of
    ``override=False``).
    """
    pairs = read_env_file(path, shell, incremental=incremental, on_error=on_error)
    count = write_environ(pairs, override=override)
    logger.debug("Loaded %d of %d variable(s) from %s", count, len(pairs), path)
    return pairs
