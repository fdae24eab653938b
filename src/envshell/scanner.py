# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Character scanner that can step forward and backward over a string."""

from __future__ import annotations


class TokenScanner:
    """Cursor over an immutable input string.

    The cursor starts before the first character (``-1``); call
    :meth:`advance` before the first :meth:`current`.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._cursor = -1

    @property
    def cursor(self) -> int:
        return self._cursor

    def advance(self) -> bool:
        """Move to the next character. Returns False once past the end.

        The cursor stops one past the last character; further calls leave it
        there.
        """
        if self._cursor < len(self._text):
            self._cursor += 1
        return self._cursor < len(self._text)

    def retreat(self) -> bool:
        """Move back one character. Returns False once at the first character."""
        if self._cursor > -1:
            self._cursor -= 1
        return self._cursor > 0

    def current(self) -> str:
        if self._cursor < 0:
            raise IndexError("scanner not started; call advance() first")
        return self._text[self._cursor]

    def previous(self) -> str | None:
        """Return the character before the cursor, or ``None`` at the start."""
        if self._cursor > 0:
            return self._text[self._cursor - 1]
        return None
