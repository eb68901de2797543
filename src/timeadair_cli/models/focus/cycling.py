"""Work/break cycling between prompts and timer runs."""

from collections.abc import Callable
from typing import Literal

from rich.prompt import Prompt
from rich.text import Text

from timeadair_cli.config import SessionKind, TimerConfig, get_timer_config
from timeadair_cli.utils.logger import get_child_logger

from .runner import SessionRunner
from .ui import GOODBYE_MESSAGE, TimerDisplay

Phase = Literal["prompt_work", "run_work", "prompt_break", "run_break", "done"]


def is_affirmative(answer: str) -> bool:
    """Empty input or anything starting with 'y' counts as yes."""
    answer = answer.strip()
    return not answer or answer.lower().startswith("y")


class SessionLoop:
    """Sequences work and break sessions until the user stops.

    ``prompt_work -> run_work -> prompt_break -> run_break -> prompt_work``.
    Declining a work prompt or quitting any session ends the loop. Declining
    a break skips straight back to the work prompt, and a reset in either
    session restarts from the work prompt.
    """

    def __init__(
        self,
        display: TimerDisplay,
        runner: SessionRunner,
        config: TimerConfig | None = None,
        ask: Callable[[str], str] | None = None,
    ):
        self.display = display
        self.runner = runner
        self.config = config or get_timer_config()
        self.ask = ask or self._ask
        self.logger = get_child_logger("cycle")
        self.phase: Phase = "prompt_work"
        self.completed_work_sessions = 0
        self._keep_screen = False

    def _ask(self, question: str) -> str:
        return Prompt.ask(
            Text(question),
            console=self.display.console,
            default="",
            show_default=False,
        )

    def prompt(self, kind: SessionKind) -> bool:
        """Ask whether to start a session. End of input counts as no."""
        if self._keep_screen:
            self._keep_screen = False
        else:
            self.display.show_header()

        try:
            answer = self.ask(f"Start {kind} session? [Y/n]")
        except EOFError:
            self.logger.info("stdin closed at %s prompt", kind)
            return False
        return is_affirmative(answer)

    def run_session(self, kind: SessionKind) -> str:
        return self.runner.run(
            self.config.duration_for(kind), self.config.label_for(kind)
        )

    def step(self) -> Phase:
        """Advance the loop by one phase and return the new phase."""
        phase = self.phase

        if phase == "prompt_work":
            if self.prompt("work"):
                self.phase = "run_work"
            else:
                self.display.show_farewell(GOODBYE_MESSAGE)
                self.phase = "done"

        elif phase == "run_work":
            outcome = self.run_session("work")
            if outcome == "completed":
                self.completed_work_sessions += 1
                self.phase = "prompt_break"
            elif outcome == "quit":
                self.phase = "done"
            else:
                self._keep_screen = True
                self.phase = "prompt_work"

        elif phase == "prompt_break":
            self.phase = "run_break" if self.prompt("break") else "prompt_work"

        elif phase == "run_break":
            outcome = self.run_session("break")
            if outcome == "quit":
                self.phase = "done"
            else:
                self._keep_screen = outcome == "reset"
                self.phase = "prompt_work"

        self.logger.debug("phase %s -> %s", phase, self.phase)
        return self.phase

    def run(self) -> int:
        """Run until the loop is done. Returns completed work sessions."""
        while self.phase != "done":
            self.step()
        return self.completed_work_sessions
