"""Timer state for a single countdown."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Literal

from focustimer_cli.config import get_config
from focustimer_cli.utils.durations import parse_duration

TimerStatus = Literal["running", "elapsed", "interrupted"]


class InvalidDuration(ValueError):
    """Raised when the duration given on the command line cannot be used."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"'{text}' is not a valid duration.")


@dataclass
class TimerState:
    """Everything the display needs, mutated in place by the dispatcher."""

    width: int
    height: int
    start: datetime
    end: datetime
    task: str | None
    duration: timedelta
    remaining: timedelta


def initialize_state(
    width: int,
    height: int,
    task: str | None = None,
    duration: str | None = None,
    now: datetime | None = None,
    default_duration: timedelta | None = None,
) -> TimerState:
    """
    Build the state for a new countdown starting at *now*.

    Without *duration* text the configured default (25 minutes) is used.

    Raises:
        InvalidDuration: if the duration does not parse, is not positive, or
            ends past the last representable date.
    """
    if now is None:
        now = datetime.now().astimezone()

    if duration is None:
        span = get_config().default_duration if default_duration is None else default_duration
        text = str(span)
    else:
        text = duration
        try:
            span = parse_duration(duration)
        except ValueError as e:
            raise InvalidDuration(duration) from e

    if span <= timedelta():
        raise InvalidDuration(text)
    try:
        end = now + span
    except OverflowError as e:
        raise InvalidDuration(text) from e

    return TimerState(
        width=width,
        height=height,
        start=now,
        end=end,
        task=task,
        duration=span,
        remaining=end - now,
    )
