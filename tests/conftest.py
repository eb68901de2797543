"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real terminal and log dir.
"""

from __future__ import annotations

import logging
import logging.handlers
import signal
from io import StringIO
from unittest.mock import MagicMock, patch

import pytest
from rich.console import Console

from timeadair_cli.config import TimerConfig


# ---------------------------------------------------------------------------
# Logging isolation
# ---------------------------------------------------------------------------


def _drop_file_handlers():
    """Close and detach rotating file handlers, leaving pytest's own alone."""
    logger = logging.getLogger("timeadair_cli")
    for handler in list(logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            handler.close()
            logger.removeHandler(handler)


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path):
    """Send the application log to *tmp_path* and reset the singleton."""
    import timeadair_cli.utils.logger as logger_mod

    logger_mod._logger = None
    _drop_file_handlers()
    with patch("timeadair_cli.utils.logger.user_log_dir", return_value=str(tmp_path)):
        yield tmp_path
    _drop_file_handlers()
    logger_mod._logger = None


@pytest.fixture(autouse=True)
def restore_signal_handlers():
    """Undo any handler installed by install_interrupt_handler."""
    import timeadair_cli.models.focus.interrupt as interrupt_mod

    saved = {
        signum: signal.getsignal(signum) for signum in interrupt_mod._signals()
    }
    interrupt_mod._installed = False
    yield
    for signum, handler in saved.items():
        signal.signal(signum, handler)
    interrupt_mod._installed = False


# ---------------------------------------------------------------------------
# Console / keyboard doubles
# ---------------------------------------------------------------------------


def make_console(terminal: bool = True) -> tuple[Console, StringIO]:
    """Return a Console that writes to a StringIO buffer."""
    buf = StringIO()
    con = Console(
        file=buf,
        force_terminal=terminal,
        color_system="standard" if terminal else None,
        width=100,
        highlight=False,
        legacy_windows=False,
        _environ={"TERM": "xterm-256color"},
    )
    return con, buf


class ScriptedKeyboard:
    """Keyboard stand-in that replays a list of poll results.

    Once the script runs out every poll times out with no key.
    """

    def __init__(self, script=None):
        self.script = list(script or [])
        self.polls = 0
        self.timeouts: list[float] = []
        self.started = 0
        self.stopped = 0

    def start(self):
        self.started += 1

    def poll(self, timeout: float = 1.0):
        self.polls += 1
        self.timeouts.append(timeout)
        if self.script:
            result = self.script.pop(0)
            if isinstance(result, BaseException):
                raise result
            return result
        return None

    def stop(self):
        self.stopped += 1


@pytest.fixture()
def console_buffer():
    return make_console()


@pytest.fixture()
def fast_config():
    """Short sessions so run loops finish in a handful of polls."""
    return TimerConfig(work_seconds=3, break_seconds=2, poll_interval=1.0)


@pytest.fixture()
def mock_display():
    display = MagicMock()
    display.console = MagicMock()
    return display


@pytest.fixture()
def scripted_keyboard():
    """Factory for ScriptedKeyboard instances."""
    return ScriptedKeyboard
