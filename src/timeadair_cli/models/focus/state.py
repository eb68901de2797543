"""Timer state for a single Pomodoro session."""

from dataclasses import dataclass
from typing import Literal

SessionOutcome = Literal["completed", "quit", "reset"]


@dataclass
class TimerState:
    """Counts whole seconds of one session.

    ``elapsed`` is a tick counter, not a wall-clock measurement: the caller
    advances it once per poll cycle and stops once ``is_complete()``.
    """

    duration: int
    elapsed: int = 0

    def __post_init__(self):
        if self.duration < 0:
            raise ValueError("Session duration cannot be negative")

    def tick(self) -> None:
        """Advance the timer by one second."""
        self.elapsed += 1

    def is_complete(self) -> bool:
        """Check if the session has run its full duration."""
        return self.elapsed >= self.duration

    def progress(self) -> float:
        """Return elapsed time as a percentage of the duration."""
        if self.duration == 0:
            return 100.0
        return self.elapsed / self.duration * 100

    def remaining(self) -> int:
        """Calculate seconds remaining in session."""
        return self.duration - self.elapsed

    def formatted_remaining(self) -> str:
        """Format the remaining time as MM:SS."""
        mins, secs = divmod(self.remaining(), 60)
        return f"{mins:02d}:{secs:02d}"
