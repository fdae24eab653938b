# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""BasicShell -- in-process decoder for a subset of POSIX shell value syntax.

Handles:
  - ``export KEY=VALUE`` prefix
  - single quotes (literal, no substitution) and double quotes
  - ``\\`` escapes outside single quotes
  - ``#`` comments when preceded by whitespace
  - ``$NAME`` and ``${NAME}`` substitution from a lookup mapping
"""

from __future__ import annotations

import os
import re
from collections.abc import Mapping

from envshell.scanner import TokenScanner
from envshell.shell import EXPORT_KEYWORD, Shell, split_assignment

_VAR_CHAR_RE = re.compile(r"[A-Za-z0-9_]")

ESCAPE = "\\"
SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
COMMENT = "#"
SUBSTITUTION = "$"
BRACES = "{}"


def decode_key(raw: str) -> str:
    """Strip a leading ``export`` keyword and surrounding whitespace from a key."""
    keyword_len = len(EXPORT_KEYWORD)
    if raw.startswith(EXPORT_KEYWORD) and raw[keyword_len:keyword_len + 1].isspace():
        raw = raw[keyword_len:]
    return raw.strip()


def expand_variable(scanner: TokenScanner, lookup: Mapping[str, str]) -> str:
    """Read a variable name after ``$`` and return its value from *lookup*.

    Braces are dropped wherever they appear in the name; their balance is not
    checked. The first character that cannot be part of a name is left for
    the caller: the scanner steps back so the next ``advance`` returns it.
    Unset names expand to ``""``.
    """
    name: list[str] = []
    while scanner.advance():
        c = scanner.current()
        if c in BRACES:
            continue
        if not _VAR_CHAR_RE.match(c):
            scanner.retreat()
            break
        name.append(c)
    return lookup.get("".join(name), "")


def decode_value(
    raw: str,
    lookup: Mapping[str, str] | None = None,
    *,
    quote_aware_comments: bool = False,
) -> str:
    """Decode the right-hand side of an assignment.

    A ``#`` preceded by whitespace ends the value even inside quotes, so
    ``'a #b'`` decodes to ``a``. Pass ``quote_aware_comments=True`` to only
    treat ``#`` as a comment outside quoted regions.
    """
    if lookup is None:
        lookup = os.environ
    value: list[str] = []
    in_single = False
    in_double = False

    scanner = TokenScanner(raw)
    while scanner.advance():
        c = scanner.current()

        if c == ESCAPE and not in_single:
            # A trailing backslash has nothing to escape and is dropped.
            if scanner.advance():
                value.append(scanner.current())
            continue

        if c == SINGLE_QUOTE and not in_double:
            in_single = not in_single
            continue

        if c == DOUBLE_QUOTE and not in_single:
            in_double = not in_double
            continue

        if c == COMMENT and not (quote_aware_comments and (in_single or in_double)):
            previous = scanner.previous()
            if previous is not None and previous.isspace():
                break

        if c == SUBSTITUTION and not in_single:
            value.append(expand_variable(scanner, lookup))
            continue

        value.append(c)

    return "".join(value).strip()


class BasicShell(Shell):
    """Cross-platform shell that needs no external executable.

    Supports the quoting, escaping, comment and substitution rules of
    :func:`decode_value`; no command substitution, globbing or arithmetic.
    """

    shell_name: str = "basic"
    shell_display_name: str = "Built-in subset of POSIX shell syntax"
    shell_doc_url: str = "https://pubs.opengroup.org/onlinepubs/9699919799/utilities/V3_chap02.html"

    def __init__(self, quote_aware_comments: bool = False) -> None:
        self.quote_aware_comments = quote_aware_comments

    def parse_line(
        self,
        line: str,
        lookup: Mapping[str, str] | None = None,
    ) -> tuple[str, str]:
        left, right = split_assignment(line)
        key = decode_key(left)
        value = decode_value(right, lookup, quote_aware_comments=self.quote_aware_comments)
        return key, value
