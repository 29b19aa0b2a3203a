"""Tests for the terminal geometry probe."""

from __future__ import annotations

import os
from unittest.mock import patch

from focustimer_cli.utils.terminal import terminal_size


def test_reports_terminal_size():
    with patch(
        "focustimer_cli.utils.terminal.os.get_terminal_size",
        return_value=os.terminal_size((120, 40)),
    ):
        assert terminal_size() == (120, 40)


def test_falls_back_when_query_fails():
    with patch(
        "focustimer_cli.utils.terminal.os.get_terminal_size",
        side_effect=OSError("not a tty"),
    ):
        assert terminal_size() == (80, 24)


def test_uses_given_fallback():
    with patch(
        "focustimer_cli.utils.terminal.os.get_terminal_size",
        side_effect=OSError("not a tty"),
    ):
        assert terminal_size((100, 30)) == (100, 30)


def test_zero_sized_window_falls_back():
    with patch(
        "focustimer_cli.utils.terminal.os.get_terminal_size",
        return_value=os.terminal_size((0, 0)),
    ):
        assert terminal_size() == (80, 24)


def test_missing_stdout_falls_back():
    with patch("focustimer_cli.utils.terminal.sys.__stdout__", None):
        assert terminal_size() == (80, 24)
