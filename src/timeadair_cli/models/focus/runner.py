"""Per-session run loop: poll, tick, redraw."""

from timeadair_cli.config import TimerConfig, get_timer_config
from timeadair_cli.utils.logger import get_child_logger

from .state import SessionOutcome, TimerState
from .terminal import TerminalControl
from .ui import GOODBYE_MESSAGE, RESET_MESSAGE, TimerDisplay, session_message


class SessionRunner:
    """Runs one work or break session to an outcome.

    The one-second keyboard poll doubles as the clock: every poll cycle is
    one tick, whether or not a key arrived. Within a cycle the key check
    comes first, so a quit or reset is honoured before the timer advances
    or the bar is redrawn.
    """

    def __init__(
        self,
        display: TimerDisplay,
        terminal: TerminalControl,
        config: TimerConfig | None = None,
    ):
        self.display = display
        self.terminal = terminal
        self.config = config or get_timer_config()
        self.logger = get_child_logger("runner")
        self.timer: TimerState | None = None

    def run(self, duration: int, label: str) -> SessionOutcome:
        """
        Run the timer for ``duration`` seconds.

        Returns the final outcome: 'completed', 'quit', or 'reset'.
        """
        timer = TimerState(duration)
        self.timer = timer
        message = session_message(label)
        self.logger.info("session started: %s (%ds)", label, duration)

        with self.terminal.session() as keyboard:
            self.display.draw(timer, message, full=True)
            outcome = self._loop(timer, message, keyboard)

        self.logger.info(
            "session ended: %s -> %s after %ds", label, outcome, timer.elapsed
        )

        if outcome == "quit":
            self.display.show_farewell(GOODBYE_MESSAGE)
        elif outcome == "reset":
            self.display.show_farewell(RESET_MESSAGE)
        else:
            self.display.bell()

        return outcome

    def _loop(self, timer: TimerState, message: str, keyboard) -> SessionOutcome:
        while not timer.is_complete():
            command = keyboard.poll(self.config.poll_interval)
            if command is not None:
                self.logger.debug("command %r at %ds", command, timer.elapsed)
                return command

            timer.tick()
            if timer.is_complete():
                break

            self.display.draw(timer, message)

        return "completed"
