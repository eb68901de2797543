"""Configuration for Tìmeadair CLI.

The timer has no config file: the values below are the fixed Pomodoro
contract (25 minute work, 5 minute break, 50 cell bar, 1 second tick).
They live in a model so the rest of the code never hard-codes them.
"""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SessionKind = Literal["work", "break"]


class DisplayConfig(BaseModel):
    """Display configuration."""

    model_config = ConfigDict(frozen=True)

    bar_width: int = Field(default=50, gt=0)
    title: str = Field(default="🍅 Tìmeadair - Pomodoro Timer")
    filled_char: str = Field(default="=", min_length=1, max_length=1)
    empty_char: str = Field(default="-", min_length=1, max_length=1)
    filled_style: str = Field(default="green")
    empty_style: str = Field(default="bright_black")


class TimerConfig(BaseModel):
    """Main configuration."""

    model_config = ConfigDict(frozen=True)

    work_seconds: int = Field(default=25 * 60, gt=0)
    break_seconds: int = Field(default=5 * 60, gt=0)
    poll_interval: float = Field(default=1.0, gt=0)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    def duration_for(self, kind: SessionKind) -> int:
        """Get duration in seconds for a session kind."""
        if kind == "work":
            return self.work_seconds
        return self.break_seconds

    @staticmethod
    def label_for(kind: SessionKind) -> str:
        """Get the display label for a session kind."""
        return kind.capitalize()


@lru_cache(maxsize=1)
def get_timer_config() -> TimerConfig:
    """Get the process-wide timer configuration."""
    return TimerConfig()
