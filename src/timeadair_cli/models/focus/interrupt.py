"""Process-wide handling of Ctrl+C and termination signals."""

import signal
import sys

from timeadair_cli.utils.exit_codes import SUCCESS
from timeadair_cli.utils.logger import get_child_logger

from .terminal import TerminalControl
from .ui import GOODBYE_MESSAGE, TimerDisplay

_installed = False


def _signals() -> list[signal.Signals]:
    signals = [signal.SIGINT]
    if hasattr(signal, "SIGTERM"):
        signals.append(signal.SIGTERM)
    return signals


def make_interrupt_handler(terminal: TerminalControl, display: TimerDisplay):
    """Build the signal handler that restores the terminal and exits."""

    def handle_interrupt(signum, frame):
        terminal.restore()
        display.show_farewell(GOODBYE_MESSAGE)
        get_child_logger("interrupt").info("exiting on signal %s", signum)
        sys.exit(SUCCESS)

    return handle_interrupt


def install_interrupt_handler(
    terminal: TerminalControl, display: TimerDisplay
) -> bool:
    """
    Register the interrupt handler once per process.

    Returns False if a handler was already installed.
    """
    global _installed
    if _installed:
        return False

    handler = make_interrupt_handler(terminal, display)
    for signum in _signals():
        signal.signal(signum, handler)

    _installed = True
    return True
