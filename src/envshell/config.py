# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

""".envshell.toml configuration loading.

Reads ``.envshell.toml`` from the current directory (or an explicit path /
``ENVSHELL_CONFIG``) and merges with ``ENVSHELL_*`` environment variables.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_FILE_NAME = ".envshell.toml"
DEFAULT_ENV_FILE = ".env"
DEFAULT_SHELL = "basic"
ON_ERROR_CHOICES = ("raise", "skip")


@dataclass
class EnvShellConfig:
    """Resolved configuration for the current invocation."""

    path: str = DEFAULT_ENV_FILE
    shell: str = DEFAULT_SHELL
    override: bool = True
    incremental: bool = True
    on_error: str = "raise"
    quote_aware_comments: bool = False
    bash_executable: str = "/bin/bash"
    bash_timeout: float | None = None
    config_path: Path | None = None

    def __post_init__(self) -> None:
        if self.on_error not in ON_ERROR_CHOICES:
            raise ValueError(
                f"Invalid on_error {self.on_error!r}. Must be one of: {', '.join(ON_ERROR_CHOICES)}"
            )


def find_config_file(start: Path | None = None) -> Path | None:
    """Return ``ENVSHELL_CONFIG`` or ``.envshell.toml`` in *start* (default cwd), if it exists."""
    explicit = os.environ.get("ENVSHELL_CONFIG")
    if explicit:
        return Path(explicit)
    candidate = (start or Path.cwd()) / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    return None


def load_config(path: Path | None = None) -> EnvShellConfig:
    """Load and return config.  Returns defaults (plus env overrides) if no file found."""
    if path is None:
        path = find_config_file()

    section: dict[str, Any] = {}
    if path is not None:
        raw: dict[str, Any] = tomllib.loads(Path(path).read_text())
        section = raw.get("envshell", {})

    bash = section.get("bash", {})
    timeout = bash.get("timeout")

    return EnvShellConfig(
        path=os.environ.get("ENVSHELL_PATH") or section.get("path", DEFAULT_ENV_FILE),
        shell=os.environ.get("ENVSHELL_SHELL") or section.get("shell", DEFAULT_SHELL),
        override=bool(section.get("override", True)),
        incremental=bool(section.get("incremental", True)),
        on_error=section.get("on_error", "raise"),
        quote_aware_comments=bool(section.get("quote_aware_comments", False)),
        bash_executable=bash.get("executable", "/bin/bash"),
        bash_timeout=float(timeout) if timeout is not None else None,
        config_path=Path(path) if path is not None else None,
    )
