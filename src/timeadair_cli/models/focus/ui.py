"""In-place progress bar display for timer sessions."""

from rich.console import Console
from rich.control import Control, ControlType
from rich.text import Text

from timeadair_cli.config import DisplayConfig, get_timer_config
from timeadair_cli.utils.ui.console import get_console

from .state import TimerState

CONTROLS_HINT = "Controls: 'q' to quit, 'r' to reset timer"
GOODBYE_MESSAGE = "Pomodoro session ended. See you next time!"
RESET_MESSAGE = "Timer reset."

# Blank row, title row, blank row.
HEADER_HEIGHT = 3


def bar_cells(progress: float, width: int) -> tuple[int, int]:
    """Split ``width`` bar cells into (filled, empty) for a percentage."""
    filled = int(progress * width / 100)
    filled = max(0, min(width, filled))
    return filled, width - filled


def session_message(label: str) -> str:
    """Status line shown under the bar."""
    return f"Current session: {label}"


class TimerDisplay:
    """Draws the timer frame.

    A full draw clears the screen and writes the header once per session.
    Every later draw only rewrites the rows below the header, so the header
    never flickers.
    """

    def __init__(
        self, console: Console | None = None, config: DisplayConfig | None = None
    ):
        self.console = console or get_console()
        self.config = config or get_timer_config().display

    def create_header(self) -> Text:
        """Create the title row."""
        return Text(self.config.title, style="bold")

    def create_progress_line(self, timer: TimerState) -> Text:
        """Create ``[====----] 42% 12:30`` with styled cells."""
        progress = timer.progress()
        filled, empty = bar_cells(progress, self.config.bar_width)

        line = Text("[")
        line.append(self.config.filled_char * filled, style=self.config.filled_style)
        line.append(self.config.empty_char * empty, style=self.config.empty_style)
        line.append(f"] {int(progress)}% {timer.formatted_remaining()}")
        return line

    def create_body(self, timer: TimerState, message: str) -> list[Text]:
        """Create the rows below the header."""
        return [
            self.create_progress_line(timer),
            Text(""),
            Text(message),
            Text(""),
            Text(CONTROLS_HINT, style="dim"),
        ]

    def show_header(self) -> None:
        """Clear the screen and write the header."""
        self.console.control(Control.clear(), Control.home())
        self.console.print()
        self.console.print(self.create_header(), no_wrap=True, crop=True)
        self.console.print()

    def draw(self, timer: TimerState, message: str, full: bool = False) -> None:
        """Render one frame, either from scratch or over the previous body."""
        if full:
            self.hide_cursor()
            self.show_header()
        else:
            self.console.control(Control.move_to(0, HEADER_HEIGHT))

        for line in self.create_body(timer, message):
            if not full:
                self.console.control(Control((ControlType.ERASE_IN_LINE, 2)))
            self.console.print(line, no_wrap=True, crop=True)

    def show_message(self, message: str, style: str | None = None) -> None:
        """Print a status line below whatever is on screen."""
        self.console.print(message, style=style)

    def show_farewell(self, message: str) -> None:
        """Clear to the header and print a closing line."""
        self.show_header()
        self.show_message(message)

    def bell(self) -> None:
        """Ring the terminal bell."""
        self.console.bell()

    def hide_cursor(self) -> None:
        self.console.show_cursor(False)

    def show_cursor(self) -> None:
        self.console.show_cursor(True)
