"""Console shared by the timer display and CLI messages."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=1)
def get_console() -> Console:
    """Get the Rich Console that owns the terminal.

    Highlighting is off: the display paints exact text into exact cells.
    """
    return Console(highlight=False)
