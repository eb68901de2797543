"""Cross-platform keyboard input handler for timer controls."""

import os
import re
import select
import sys
import time
from typing import Literal, Optional

Command = Literal["quit", "reset"]

_COMMANDS: dict[str, Command] = {
    "q": "quit",
    "r": "reset",
}

# ESC followed by a CSI sequence, an SS3 sequence or a single character
_ESCAPE_SEQUENCE = re.compile(r"\x1b(\[[0-?]*[ -/]*[@-~]|O.|.)?", re.DOTALL)


def decode_key(key: Optional[str]) -> Optional[Command]:
    """
    Map a chunk of keyboard input to a timer command.

    The first recognised key in the chunk wins, so a command typed right
    after another key in the same poll is not lost. Escape sequences
    (arrows, function keys) are skipped whole; anything unknown maps to
    None.
    """
    if not key:
        return None
    for char in _ESCAPE_SEQUENCE.sub("", key):
        command = _COMMANDS.get(char.lower())
        if command is not None:
            return command
    return None


class KeyboardHandler:
    """Cbreak-mode keyboard poller for POSIX terminals.

    ``start()`` puts the terminal in cbreak mode (unbuffered, no echo);
    ``stop()`` puts it back. Construction touches nothing, so the owner can
    keep a reference before the terminal changes. Terminal errors are not
    swallowed: a terminal that cannot be configured or read is unusable for
    the timer.
    """

    def __init__(self, fd: Optional[int] = None):
        self.fd = sys.stdin.fileno() if fd is None else fd
        self.old_settings = None

    def start(self):
        """Setup terminal for unbuffered input."""
        import termios
        import tty

        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except termios.error as e:
            raise OSError(*e.args) from e

    def get_key(self, timeout: float = 0) -> Optional[str]:
        """
        Wait up to ``timeout`` seconds for a keypress.

        Returns the characters read or None if nothing arrived in time.
        """
        ready, _, _ = select.select([self.fd], [], [], timeout)
        if not ready:
            return None

        data = os.read(self.fd, 32)
        if not data:
            raise EOFError("stdin was closed while the timer was running")
        return data.decode("utf-8", errors="ignore")

    def poll(self, timeout: float = 1.0) -> Optional[Command]:
        """Wait up to ``timeout`` seconds and decode the key, if any."""
        return decode_key(self.get_key(timeout))

    def stop(self):
        """Restore terminal settings. Safe to call more than once."""
        if self.old_settings is None:
            return

        import termios

        settings, self.old_settings = self.old_settings, None
        try:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, settings)
        except termios.error as e:
            raise OSError(*e.args) from e


class WindowsKeyboardHandler:
    """Keyboard handler for Windows using msvcrt."""

    _SLICE = 0.05

    def __init__(self):
        import msvcrt

        self.msvcrt = msvcrt

    def start(self):
        """Console input needs no mode change on Windows."""
        pass

    def get_key(self, timeout: float = 0) -> Optional[str]:
        """Get key on Windows, polling kbhit() until the timeout."""
        deadline = time.monotonic() + timeout
        while True:
            if self.msvcrt.kbhit():
                key = self.msvcrt.getch()
                if isinstance(key, bytes):
                    key = key.decode("utf-8", errors="ignore")
                return key

            left = deadline - time.monotonic()
            if left <= 0:
                return None
            time.sleep(min(self._SLICE, left))

    def poll(self, timeout: float = 1.0) -> Optional[Command]:
        """Wait up to ``timeout`` seconds and decode the key, if any."""
        return decode_key(self.get_key(timeout))

    def stop(self):
        """No cleanup needed on Windows."""
        pass


def create_keyboard_handler():
    """Create the keyboard handler for the current platform."""
    if sys.platform == "win32":
        return WindowsKeyboardHandler()
    return KeyboardHandler()
