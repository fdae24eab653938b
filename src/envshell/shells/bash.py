# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""BashShell -- let a real bash interpreter expand each line.

Every assignment is echoed through ``bash -c "echo -n <line>"``, so the full
bash syntax (command substitution, parameter expansion operators, ...) is
available. Requires a bash executable; use BasicShell on other platforms.
"""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Mapping

from envshell.shell import InterpreterError, MalformedLineError, Shell
from envshell.shells.basic import decode_key

logger = logging.getLogger(__name__)

DEFAULT_EXECUTABLE = "/bin/bash"


class BashShell(Shell):
    """Shell backed by an external bash process (one process per line)."""

    shell_name: str = "bash"
    shell_display_name: str = "GNU bash (external interpreter)"
    shell_doc_url: str = "https://www.gnu.org/software/bash/manual/bash.html"

    def __init__(
        self,
        executable: str = DEFAULT_EXECUTABLE,
        timeout: float | None = None,
    ) -> None:
        self.executable = executable
        self.timeout = timeout

    def parse_line(
        self,
        line: str,
        lookup: Mapping[str, str] | None = None,
    ) -> tuple[str, str]:
        env = dict(os.environ if lookup is None else lookup)
        logger.debug("Running %s for line %r", self.executable, line)
        try:
            proc = subprocess.run(
                [self.executable, "-c", f"echo -n {line}"],
                env=env,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise InterpreterError(f"failed to run {self.executable}: {e}", line=line) from e

        out = proc.stdout.decode(errors="replace")
        if proc.returncode != 0:
            raise InterpreterError(
                f"{self.executable} exited with status {proc.returncode}: {out.strip()}",
                line=line,
            )

        left, sep, right = out.partition("=")
        if not sep:
            raise MalformedLineError(f"missing '=' in interpreter output {out!r}", line=line)
        return decode_key(left), right
