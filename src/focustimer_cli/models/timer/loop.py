"""The poll loop driving a countdown."""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Protocol

from focustimer_cli.config import Config, get_config
from focustimer_cli.utils.terminal import terminal_size

from .events import EventDispatcher, GeometryChanged, Interrupted, Tick
from .state import TimerState, TimerStatus

logger = logging.getLogger(__name__)


class Sleeper(Protocol):
    def is_set(self) -> bool: ...

    def wait(self, timeout: float) -> bool: ...


def local_now() -> datetime:
    return datetime.now().astimezone()


class PollLoop:
    """Samples the terminal and the clock, feeds the dispatcher, sleeps.

    Each iteration emits, in order: a geometry change (only when the size
    differs from the last one seen), a tick, and an interrupt (only when the
    flag is set). Sleeping happens on the interrupt flag so a signal cuts
    the wait short.
    """

    def __init__(
        self,
        state: TimerState,
        dispatcher: EventDispatcher,
        interrupt: Sleeper,
        clock: Callable[[], datetime] = local_now,
        geometry: Callable[[], tuple[int, int]] | None = None,
        config: Config | None = None,
    ):
        self.state = state
        self.dispatcher = dispatcher
        self.interrupt = interrupt
        self.clock = clock
        self.config = config or get_config()
        self.geometry = geometry or self._terminal_geometry
        self.last_width = 0
        self.last_height = 0

    def _terminal_geometry(self) -> tuple[int, int]:
        terminal = self.config.terminal
        return terminal_size((terminal.fallback_width, terminal.fallback_height))

    def poll_interval(self, remaining: timedelta) -> float:
        """Seconds to sleep before the next redraw."""
        poll = self.config.poll
        if int(remaining.total_seconds()) > poll.long_threshold:
            return poll.long_interval
        return poll.short_interval

    def step(self) -> TimerStatus:
        """Run one iteration and return the dispatcher's status."""
        width, height = self.geometry()
        if (width, height) != (self.last_width, self.last_height):
            self.dispatcher.dispatch(GeometryChanged(width, height))
            self.last_width, self.last_height = width, height

        status = self.dispatcher.dispatch(Tick(self.clock()))
        if status != "running":
            return status

        if self.interrupt.is_set():
            return self.dispatcher.dispatch(Interrupted())
        return status

    def run(self) -> TimerStatus:
        """Count down until the end time or an interrupt.

        The terminal is reset exactly once on every way out, including an
        exception raised while drawing.
        """
        logger.info(
            "Timer started: task=%r duration=%s end=%s",
            self.state.task,
            self.state.duration,
            self.state.end.isoformat(),
        )
        try:
            while self.clock() < self.state.end:
                status = self.step()
                if status != "running":
                    return status
                self.interrupt.wait(self.poll_interval(self.state.remaining))
            return self.dispatcher.finish()
        finally:
            self.dispatcher.close()
