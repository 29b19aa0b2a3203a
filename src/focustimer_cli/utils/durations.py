"""Duration parsing and the text shown on the timer."""

import re
from datetime import datetime, timedelta

# Seconds per unit. Months and years use the average Gregorian lengths.
_UNIT_SECONDS = {
    "nsec": 1e-9,
    "ns": 1e-9,
    "usec": 1e-6,
    "us": 1e-6,
    "msec": 1e-3,
    "ms": 1e-3,
    "seconds": 1,
    "second": 1,
    "sec": 1,
    "s": 1,
    "minutes": 60,
    "minute": 60,
    "min": 60,
    "m": 60,
    "hours": 3600,
    "hour": 3600,
    "hr": 3600,
    "h": 3600,
    "days": 86400,
    "day": 86400,
    "d": 86400,
    "weeks": 604800,
    "week": 604800,
    "w": 604800,
    "months": 2_630_016,
    "month": 2_630_016,
    "M": 2_630_016,
    "years": 31_557_600,
    "year": 31_557_600,
    "y": 31_557_600,
}

_SPAN = re.compile(r"\s*(\d+)\s*([A-Za-z]+)\s*")


def parse_duration(text: str) -> timedelta:
    """Parse a human readable duration such as ``15m``, ``90s`` or ``1h 30m``.

    Every number needs a unit; a bare ``15`` is rejected.

    Raises:
        ValueError: if *text* is not a duration expression, or is too large
            to represent.
    """
    pos = 0
    total = timedelta()
    spans = 0
    while pos < len(text):
        match = _SPAN.match(text, pos)
        if not match:
            raise ValueError(f"invalid duration expression: {text!r}")
        amount, unit = match.groups()
        if unit not in _UNIT_SECONDS:
            raise ValueError(f"unknown time unit {unit!r}")
        try:
            total += timedelta(seconds=int(amount) * _UNIT_SECONDS[unit])
        except OverflowError as e:
            raise ValueError(f"duration out of range: {text!r}") from e
        spans += 1
        pos = match.end()

    if spans == 0:
        raise ValueError("empty duration expression")
    return total


def format_remaining(remaining: timedelta) -> str:
    """Format the time left for the "Remaining:" readout.

    Above one minute the label counts whole minutes plus one, so it never
    reads less time than is actually left. Two trailing spaces blank out
    the tail of a longer previous label ("10m" -> "9m").
    """
    seconds = int(remaining.total_seconds())
    if seconds > 60:
        return f"{seconds // 60 + 1}m  "
    return f"{seconds}s  "


def bar_fill(remaining: timedelta, total: timedelta, bar_width: int) -> int:
    """Number of progress bar cells to paint as elapsed."""
    elapsed = 1.0 - remaining.total_seconds() / total.total_seconds()
    return int(elapsed * bar_width)


def format_clock(moment: datetime) -> str:
    """12-hour clock with a space-padded hour, e.g. `` 9:05``."""
    return f"{moment.hour % 12 or 12:>2}:{moment.minute:02d}"
