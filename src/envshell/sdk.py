# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""SDK for loading .env files into the environment (python-dotenv style)."""

from __future__ import annotations

from pathlib import Path

from envshell.config import EnvShellConfig, load_config
from envshell.env_file import read_env_file, write_environ
from envshell.shell import Shell
from envshell.shells import make_shell


def _resolve_shell(shell: Shell | str | None, cfg: EnvShellConfig) -> Shell:
    """Return *shell* itself, the named shell, or the configured default."""
    if isinstance(shell, Shell):
        return shell
    return make_shell(shell or cfg.shell, cfg)


def load_dotenv(
    path: str | Path | None = None,
    shell: Shell | str | None = None,
    override: bool | None = None,
    incremental: bool | None = None,
    on_error: str | None = None,
) -> bool:
    """Load variables from a .env file into os.environ (python-dotenv compatible API).

    Arguments left as ``None`` fall back to ``ENVSHELL_PATH`` /
    ``ENVSHELL_SHELL``, then ``.envshell.toml``, then the defaults (``.env``,
    the ``basic`` shell, override, incremental, raise on error).

    Parameters
    ----------
    path : str or Path, optional
        The file to read. Defaults to ``.env``.
    shell : Shell or str, optional
        A shell instance or a registered shell name (``"basic"``, ``"bash"``).
    override : bool, optional
        If True, overwrite existing keys in os.environ. If False, only set
        keys that are not already set.
    incremental : bool, optional
        If True, ``$NAME`` references see values assigned earlier in the same
        file.
    on_error : {"raise", "skip"}, optional
        What to do with a line that cannot be parsed.

    Returns
    -------
    bool
        True if at least one variable was set, False otherwise.

    Examples
    --------
    >>> from envshell import load_dotenv
    >>> load_dotenv()  # .env with the basic shell
    True
    >>> load_dotenv(".env.test", shell="bash")
    True
    >>> load_dotenv(override=False)  # do not overwrite existing env vars
    False
    """
    cfg = load_config()
    pairs = read_env_file(
        path or cfg.path,
        _resolve_shell(shell, cfg),
        incremental=cfg.incremental if incremental is None else incremental,
        on_error=on_error or cfg.on_error,
    )
    if not pairs:
        return False
    count = write_environ(pairs, override=cfg.override if override is None else override)
    return count > 0


def dotenv_values(
    path: str | Path | None = None,
    shell: Shell | str | None = None,
    incremental: bool | None = None,
    on_error: str | None = None,
) -> dict[str, str]:
    """Return the decoded variables of a .env file without modifying os.environ.

    Same resolution of defaults as :func:`load_dotenv`. Substitutions are
    resolved against the current process environment.

    Returns
    -------
    dict[str, str]
        Mapping of variable name to decoded value, in file order.
    """
    cfg = load_config()
    return read_env_file(
        path or cfg.path,
        _resolve_shell(shell, cfg),
        incremental=cfg.incremental if incremental is None else incremental,
        on_error=on_error or cfg.on_error,
    )
