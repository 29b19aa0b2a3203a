"""In-place terminal display for the countdown."""

from rich.console import Console
from rich.control import Control
from rich.text import Text

from focustimer_cli.config import LayoutConfig, get_config
from focustimer_cli.utils.durations import bar_fill, format_clock, format_remaining

from .state import TimerState

LABEL_STYLE = "default"
VALUE_STYLE = "bright_blue"
TASK_STYLE = "bold bright_red"
ELAPSED_STYLE = "on blue"
PENDING_STYLE = "on white"


class TimerDisplay:
    """Draws the timer straight onto the terminal grid.

    Positions are 1-based (column, row) cells, the way the terminal counts
    them.
    """

    def __init__(self, console: Console | None = None, layout: LayoutConfig | None = None):
        self.console = console or Console()
        self.layout = layout or get_config().layout

    def _goto(self, column: int, row: int) -> None:
        self.console.control(Control.move_to(max(column, 1) - 1, max(row, 1) - 1))

    def _write(self, text: Text) -> None:
        self.console.print(text, end="", soft_wrap=True, highlight=False)

    def _labelled(self, label: str, value: str) -> Text:
        text = Text()
        text.append(f"{label}: ", style=LABEL_STYLE)
        text.append(value, style=VALUE_STYLE)
        return text

    def draw_all(self, state: TimerState) -> None:
        """Clear the screen and lay out every element for the current size."""
        margin = self.layout.margin
        row = self.layout.header_row

        self.console.clear()

        if state.task:
            self._goto(state.width // 2 - len(state.task) // 2, state.height // 2)
            self._write(Text(state.task, style=TASK_STYLE))

        self._goto(margin, row)
        self._write(self._labelled("Start", format_clock(state.start)))

        minutes = int(state.duration.total_seconds()) // 60
        duration = self._labelled("Duration", f"{minutes}m")
        self._goto(state.width // 2 - len(duration) // 2, row)
        self._write(duration)

        self._goto(state.width - self.layout.end_label_width - margin, row)
        self._write(self._labelled("End", format_clock(state.end)))

        self.console.show_cursor(False)

    def draw_changes(self, state: TimerState) -> None:
        """Repaint the remaining-time readout and the progress bar."""
        margin = self.layout.margin

        self._goto(margin, state.height - self.layout.remaining_offset)
        self._write(self._labelled("Remaining", format_remaining(state.remaining)))

        bar_width = max(state.width - 2 * margin, 0)
        filled = max(0, min(bar_fill(state.remaining, state.duration, bar_width), bar_width))
        bar = Text()
        bar.append(" " * filled, style=ELAPSED_STYLE)
        bar.append(" " * (bar_width - filled), style=PENDING_STYLE)

        self._goto(margin, state.height - self.layout.bar_offset)
        self._write(bar)

    def reset(self, state: TimerState) -> None:
        """Give the terminal back: cursor visible, default colour and style.

        Rich closes every styled segment with an SGR reset, so leaving the
        cursor on a fresh line below the bar is all that remains.
        """
        self._goto(1, state.height)
        self.console.show_cursor(True)
        self.console.line()
