# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Entry point for the envshell CLI (run via ``envshell`` or ``python -m envshell``)."""

from __future__ import annotations

import sys


def main() -> None:
    """Run the CLI."""
    try:
        from envshell.cli import cli
    except ImportError:
        sys.stderr.write("envshell CLI dependencies missing. Install with: pip install envshell\n")
        sys.exit(1)
    cli()


if __name__ == "__main__":
    main()
