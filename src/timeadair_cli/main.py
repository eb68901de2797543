"""Main entry point for Tìmeadair CLI."""

import typer

from timeadair_cli.commands.decorators import command_wrapper
from timeadair_cli.models.focus import (
    SessionLoop,
    SessionRunner,
    TerminalControl,
    TimerDisplay,
    install_interrupt_handler,
)
from timeadair_cli.utils.logger import get_logger
from timeadair_cli.utils.ui.console import get_console

app = typer.Typer(
    name="timeadair",
    help="A terminal Pomodoro timer: 25 minutes of work, 5 minutes of break.",
    add_completion=False,
)


@app.command()
@command_wrapper
def start() -> None:
    """Run Pomodoro work and break sessions until you stop.

    Press 'q' to quit or 'r' to reset while a session is running.
    """
    display = TimerDisplay(get_console())
    terminal = TerminalControl(display)
    install_interrupt_handler(terminal, display)

    loop = SessionLoop(display, SessionRunner(display, terminal))
    completed = loop.run()
    get_logger().info("work sessions completed: %d", completed)


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
