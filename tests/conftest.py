"""Shared test fixtures and configuration.

Keeps tests away from the real log directory and the real terminal.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from io import StringIO
from unittest.mock import patch

import pytest
from rich.console import Console

from focustimer_cli.models.timer.state import TimerState

START = datetime(2024, 3, 1, 9, 5, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Logging isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path):
    """Point the file logger at *tmp_path* and reset it around every test."""
    import focustimer_cli.utils.logger as logger_mod

    logger_mod._root = None
    logging.getLogger("focustimer_cli").handlers.clear()
    logging.getLogger("focustimer_cli").propagate = True

    log_dir = tmp_path / "logs"
    with patch("focustimer_cli.utils.logger.user_log_dir", return_value=str(log_dir)):
        yield log_dir

    for handler in logging.getLogger("focustimer_cli").handlers:
        handler.close()
    logging.getLogger("focustimer_cli").handlers.clear()
    logging.getLogger("focustimer_cli").propagate = True
    logger_mod._root = None


# ---------------------------------------------------------------------------
# Timer helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def terminal_console(monkeypatch) -> tuple[Console, StringIO]:
    """A Console that believes it is an 80x24 terminal and writes to a buffer."""
    monkeypatch.setenv("TERM", "xterm-256color")
    monkeypatch.delenv("NO_COLOR", raising=False)
    buf = StringIO()
    con = Console(
        file=buf,
        force_terminal=True,
        color_system="standard",
        width=80,
        height=24,
    )
    return con, buf


@pytest.fixture()
def make_state():
    """Factory for a TimerState starting at START."""

    def _make(
        *,
        width: int = 80,
        height: int = 24,
        task: str | None = "Write report",
        minutes: float = 25,
        remaining: timedelta | None = None,
    ) -> TimerState:
        duration = timedelta(minutes=minutes)
        return TimerState(
            width=width,
            height=height,
            start=START,
            end=START + duration,
            task=task,
            duration=duration,
            remaining=duration if remaining is None else remaining,
        )

    return _make
