"""focustimer: a terminal countdown timer that keeps you on one task."""

__version__ = "0.4.0"
