"""Countdown timer: state, events, display and the poll loop."""

from .events import EventDispatcher, GeometryChanged, Interrupted, Tick
from .interrupt import InterruptFlag
from .loop import PollLoop
from .state import InvalidDuration, TimerState, TimerStatus, initialize_state
from .ui import TimerDisplay

__all__ = [
    "EventDispatcher",
    "GeometryChanged",
    "Interrupted",
    "InterruptFlag",
    "InvalidDuration",
    "PollLoop",
    "Tick",
    "TimerDisplay",
    "TimerState",
    "TimerStatus",
    "initialize_state",
]
