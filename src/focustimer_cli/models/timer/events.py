"""Events fed to the timer and the state machine that applies them."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from .state import TimerState, TimerStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeometryChanged:
    """The terminal was resized."""

    width: int
    height: int


@dataclass(frozen=True)
class Tick:
    """The clock was sampled."""

    now: datetime


@dataclass(frozen=True)
class Interrupted:
    """An interrupt signal was observed."""


Event = GeometryChanged | Tick | Interrupted


class Renderer(Protocol):
    def draw_all(self, state: TimerState) -> None: ...

    def draw_changes(self, state: TimerState) -> None: ...

    def reset(self, state: TimerState) -> None: ...


class EventDispatcher:
    """
    Applies events to the timer state and decides what to redraw.

    ``running`` is the only non-terminal status. Entering ``elapsed`` or
    ``interrupted`` resets the terminal once, and any later event is ignored.
    """

    def __init__(self, state: TimerState, renderer: Renderer):
        self.state = state
        self.renderer = renderer
        self.status: TimerStatus = "running"

    def dispatch(self, event: Event) -> TimerStatus:
        """Apply *event* and return the resulting status."""
        if self.status != "running":
            return self.status

        match event:
            case GeometryChanged(width=width, height=height):
                logger.debug("Geometry changed to %dx%d", width, height)
                self.state.width = width
                self.state.height = height
                self.renderer.draw_all(self.state)
            case Tick(now=now):
                if now > self.state.end:
                    return self._terminate("elapsed")
                self.state.remaining = self.state.end - now
            case Interrupted():
                return self._terminate("interrupted")

        self.renderer.draw_changes(self.state)
        return self.status

    def finish(self) -> TimerStatus:
        """The countdown reached its end time without a late tick."""
        if self.status != "running":
            return self.status
        return self._terminate("elapsed")

    def close(self) -> None:
        """Reset the terminal if no terminal transition has done it yet."""
        if self.status == "running":
            self._terminate("interrupted")

    def _terminate(self, status: TimerStatus) -> TimerStatus:
        self.status = status
        logger.info("Timer %s", status)
        self.renderer.reset(self.state)
        return status
