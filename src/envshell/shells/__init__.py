# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shell registry -- built-in shells plus plugins from the ``envshell.shells`` entry-point group."""

from __future__ import annotations

from collections.abc import Iterator
from importlib.metadata import entry_points
from typing import TYPE_CHECKING

from envshell.shell import Shell
from envshell.shells.basic import BasicShell
from envshell.shells.bash import BashShell

if TYPE_CHECKING:
    from envshell.config import EnvShellConfig

ENTRY_POINT_GROUP = "envshell.shells"

_BUILTIN_SHELLS: dict[str, type[Shell]] = {
    BasicShell.shell_name: BasicShell,
    BashShell.shell_name: BashShell,
}


def get_shell_entries() -> Iterator[tuple[str, type[Shell]]]:
    """Yield (name, shell_class) in display order for ``envshell shells``.

    Order: basic, bash, then all other registered shells alphabetically.
    """
    yield from _BUILTIN_SHELLS.items()
    for name in list_shell_names():
        if name not in _BUILTIN_SHELLS:
            yield name, get_shell_class(name)


def get_shell_class(name: str) -> type[Shell]:
    """Return a shell class by name.

    Raises ``KeyError`` with a helpful message when the name is unknown.
    """
    if name in _BUILTIN_SHELLS:
        return _BUILTIN_SHELLS[name]
    eps = entry_points(group=ENTRY_POINT_GROUP)
    for ep in eps:
        if ep.name == name:
            return ep.load()

    available = list_shell_names()
    raise KeyError(
        f"Unknown shell {name!r}. Available shells: {', '.join(available)}"
    )


def list_shell_names() -> list[str]:
    """Return sorted names of the built-in and registered shells."""
    names = set(_BUILTIN_SHELLS)
    names.update(ep.name for ep in entry_points(group=ENTRY_POINT_GROUP))
    return sorted(names)


def make_shell(name: str, cfg: EnvShellConfig | None = None) -> Shell:
    """Instantiate the named shell with options from *cfg*."""
    shell_cls = get_shell_class(name)
    if cfg is None:
        return shell_cls()
    if shell_cls is BasicShell:
        return BasicShell(quote_aware_comments=cfg.quote_aware_comments)
    if shell_cls is BashShell:
        return BashShell(executable=cfg.bash_executable, timeout=cfg.bash_timeout)
    return shell_cls()
