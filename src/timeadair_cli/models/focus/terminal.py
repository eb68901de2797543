"""Scoped ownership of the terminal during a timer session."""

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from .keyboard import create_keyboard_handler
from .ui import TimerDisplay


class TerminalControl:
    """Owns raw input mode and cursor visibility for the whole process.

    ``session()`` acquires both and always releases them through
    ``restore()``. The interrupt handler calls the same ``restore()``, so the
    normal and signal exit paths share one release routine.
    """

    def __init__(
        self,
        display: TimerDisplay,
        keyboard_factory: Callable | None = None,
    ):
        self.display = display
        self.keyboard_factory = keyboard_factory or create_keyboard_handler
        self.keyboard = None

    @property
    def active(self) -> bool:
        return self.keyboard is not None

    def acquire(self):
        """Enter raw input mode and hide the cursor."""
        if self.keyboard is None:
            # Owned before the mode changes, so a signal arriving during
            # start() still finds it for restore().
            self.keyboard = self.keyboard_factory()
            self.keyboard.start()
        self.display.hide_cursor()
        return self.keyboard

    def restore(self) -> None:
        """Show the cursor and leave raw input mode. Idempotent."""
        keyboard, self.keyboard = self.keyboard, None
        try:
            self.display.show_cursor()
        finally:
            if keyboard is not None:
                keyboard.stop()

    @contextmanager
    def session(self) -> Iterator:
        """Yield the keyboard handler with the terminal acquired."""
        try:
            yield self.acquire()
        finally:
            self.restore()
