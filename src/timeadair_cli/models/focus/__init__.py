"""Focus mode - Pomodoro timer system for Tìmeadair CLI."""

from .cycling import SessionLoop
from .interrupt import install_interrupt_handler
from .keyboard import KeyboardHandler, WindowsKeyboardHandler, decode_key
from .runner import SessionRunner
from .state import SessionOutcome, TimerState
from .terminal import TerminalControl
from .ui import TimerDisplay

__all__ = [
    "TimerState",
    "SessionOutcome",
    "TimerDisplay",
    "KeyboardHandler",
    "WindowsKeyboardHandler",
    "decode_key",
    "TerminalControl",
    "SessionRunner",
    "SessionLoop",
    "install_interrupt_handler",
]
