"""Tests for the shell registry."""

from __future__ import annotations

import pytest

from envshell.config import EnvShellConfig
from envshell.shell import Shell
from envshell.shells import get_shell_class, get_shell_entries, list_shell_names, make_shell
from envshell.shells.basic import BasicShell
from envshell.shells.bash import BashShell


def test_get_shell_entries_order_and_content():
    """Built-in shells come first; every entry is a Shell with listing metadata."""
    entries = list(get_shell_entries())
    names = [name for name, _ in entries]
    assert names[:2] == ["basic", "bash"]
    assert names.count("basic") == 1
    for name, shell_cls in entries:
        assert issubclass(shell_cls, Shell), f"{name} is not a Shell"
        short_name, display_name, _doc_url = shell_cls.get_shell_row()
        assert short_name, f"{name} has empty shell_name"
        assert display_name, f"{name} has empty shell_display_name"


def test_list_shell_names():
    names = list_shell_names()
    assert "basic" in names
    assert "bash" in names
    assert names == sorted(names)


def test_get_shell_class():
    assert get_shell_class("basic") is BasicShell
    assert get_shell_class("bash") is BashShell


def test_get_unknown_shell_raises():
    with pytest.raises(KeyError, match="Unknown shell"):
        get_shell_class("nonexistent-shell")


def test_make_shell_without_config():
    assert isinstance(make_shell("basic"), BasicShell)


def test_make_shell_applies_config():
    cfg = EnvShellConfig(quote_aware_comments=True, bash_executable="/usr/bin/bash", bash_timeout=5.0)
    basic = make_shell("basic", cfg)
    assert isinstance(basic, BasicShell)
    assert basic.quote_aware_comments is True
    bash = make_shell("bash", cfg)
    assert isinstance(bash, BashShell)
    assert bash.executable == "/usr/bin/bash"
    assert bash.timeout == 5.0
