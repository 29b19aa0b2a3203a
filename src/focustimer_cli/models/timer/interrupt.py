"""Interrupt observer for the poll loop."""

import signal
import threading
from types import FrameType

DEFAULT_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class InterruptFlag:
    """A one-way flag set by a signal handler.

    The underlying event doubles as the loop's sleep: ``wait`` returns as
    soon as the flag is set, so an interrupt is seen no later than the next
    wake-up.

    The handler runs on the main thread between bytecodes, possibly while
    that thread holds the event's internal lock inside ``wait``. It therefore
    only records the signal and hands ``Event.set`` to a short-lived thread.
    """

    def __init__(self):
        self._event = threading.Event()
        self._signalled = False
        self._previous: dict[int, object] = {}

    def install(self, signals: tuple[int, ...] = DEFAULT_SIGNALS) -> None:
        """Register the handler. Must be called from the main thread."""
        for signum in signals:
            self._previous[signum] = signal.signal(signum, self._handle)

    def restore(self) -> None:
        """Put back whatever handlers were registered before ``install``."""
        for signum, handler in self._previous.items():
            signal.signal(signum, signal.SIG_DFL if handler is None else handler)
        self._previous.clear()

    def _handle(self, signum: int, frame: FrameType | None) -> None:
        self._signalled = True
        threading.Thread(target=self._event.set, name="interrupt-wakeup", daemon=True).start()

    def set(self) -> None:
        self._event.set()

    def is_set(self) -> bool:
        return self._signalled or self._event.is_set()

    def wait(self, timeout: float) -> bool:
        """Sleep up to *timeout* seconds; return True if interrupted."""
        if self._signalled:
            return True
        return self._event.wait(timeout)
