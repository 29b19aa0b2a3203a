"""Main entry point for focustimer."""

import typer
from rich.text import Text

from focustimer_cli import __version__
from focustimer_cli.config import get_config
from focustimer_cli.models.timer import (
    EventDispatcher,
    InterruptFlag,
    InvalidDuration,
    PollLoop,
    TimerDisplay,
    initialize_state,
)
from focustimer_cli.utils.exit_codes import ERROR_INVALID_ARGS, SUCCESS, get_exit_code_name
from focustimer_cli.utils.logger import get_logger
from focustimer_cli.utils.terminal import terminal_size
from focustimer_cli.utils.ui.console import get_console

app = typer.Typer(
    name="focustimer",
    help="focustimer is a terminal Pomodoro timer.",
    add_completion=False,
)

console = get_console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"focustimer {__version__}", highlight=False)
        raise typer.Exit(SUCCESS)


@app.command()
def run(
    task: str | None = typer.Option(
        None,
        "--task",
        help="Display the specified task on the timer.  This will help keep you focused.",
    ),
    duration: str | None = typer.Option(
        None,
        "--duration",
        help="Specify the duration of the timer.  Defaults to 25m.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Count down a focus session in the terminal."""
    logger = get_logger("cli")
    config = get_config()

    # Registered before anything is drawn so the terminal is always restored.
    interrupt = InterruptFlag()
    interrupt.install()
    try:
        width, height = terminal_size(
            (config.terminal.fallback_width, config.terminal.fallback_height)
        )
        try:
            state = initialize_state(width, height, task, duration)
        except InvalidDuration as e:
            logger.warning(
                "Rejected duration %r, exiting with %s",
                e.text,
                get_exit_code_name(ERROR_INVALID_ARGS),
            )
            console.print(Text(str(e)))
            raise typer.Exit(ERROR_INVALID_ARGS) from e

        dispatcher = EventDispatcher(state, TimerDisplay(console))
        status = PollLoop(state, dispatcher, interrupt).run()
        logger.info("Exiting after timer %s with %s", status, get_exit_code_name(SUCCESS))
    finally:
        interrupt.restore()


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
