"""Terminal geometry probe."""

import os
import sys


def terminal_size(fallback: tuple[int, int] = (80, 24)) -> tuple[int, int]:
    """Return (columns, rows) of the controlling terminal.

    Falls back to *fallback* when stdout is not a terminal or reports a
    zero-sized window.
    """
    try:
        size = os.get_terminal_size(sys.__stdout__.fileno())
    except (AttributeError, OSError, ValueError):
        return fallback
    if size.columns <= 0 or size.lines <= 0:
        return fallback
    return size.columns, size.lines
