# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Abstract base class for shells and the errors they raise."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import ClassVar

# Keyword that may precede an assignment so the file can also be sourced.
EXPORT_KEYWORD: str = "export"

# Character that starts a comment line.
COMMENT_CHAR: str = "#"


class ParseError(ValueError):
    """A line could not be turned into a key/value pair.

    ``line`` is the offending (trimmed) line. ``lineno`` is filled in by the
    file driver when the line came from a file.
    ``pairs`` holds what the driver decoded before the failing line.
    """

    def __init__(self, message: str, line: str = "", lineno: int | None = None) -> None:
        super().__init__(message)
        self.line = line
        self.lineno = lineno
        self.pairs: dict[str, str] = {}

    def __str__(self) -> str:
        message = super().__str__()
        if self.lineno is not None:
            return f"line {self.lineno}: {message}"
        return message


class MalformedLineError(ParseError):
    """The line has no ``=`` separator (or no usable key)."""


class InterpreterError(ParseError):
    """An external interpreter failed to start or exited with an error."""


class Shell(ABC):
    """Interprets the lines of an env file with one family of value syntax.

    A shell is nothing more than a set of syntax rules: it decides which lines
    are ignorable (comments) and how an assignment line is split into a
    variable name and its decoded value. Blank lines never reach a shell; the
    driver drops them.

    **Listing metadata** (for ``envshell shells``): each shell defines
    ``shell_name`` (short name used with ``--shell``), ``shell_display_name``
    and ``shell_doc_url``.

    Third-party shells register under the ``envshell.shells`` entry-point
    group and are resolved by :func:`envshell.shells.get_shell_class`.
    """

    shell_name: ClassVar[str] = ""
    shell_display_name: ClassVar[str] = ""
    shell_doc_url: ClassVar[str] = ""

    @classmethod
    def get_shell_row(cls) -> tuple[str, str, str]:
        """Return (short_name, display_name, doc_url) for the shells table."""
        return (cls.shell_name, cls.shell_display_name, cls.shell_doc_url)

    def is_ignorable(self, line: str) -> bool:
        """Return True if the (already trimmed) line should be skipped."""
        return line.startswith(COMMENT_CHAR)

    @abstractmethod
    def parse_line(
        self,
        line: str,
        lookup: Mapping[str, str] | None = None,
    ) -> tuple[str, str]:
        """Parse one trimmed assignment line into ``(key, value)``.

        *lookup* resolves variable references; ``None`` means the process
        environment. Raises :class:`ParseError` (or a subclass) when the line
        cannot be parsed.
        """


def split_assignment(line: str) -> tuple[str, str]:
    """Split *line* on the first ``=``. Raises :class:`MalformedLineError` without one."""
    left, sep, right = line.partition("=")
    if not sep:
        raise MalformedLineError(f"missing '=' in {line!r}", line=line)
    return left, right
