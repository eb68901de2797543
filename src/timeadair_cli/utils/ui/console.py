"""Console utilities for Tìmeadair CLI."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(highlight: bool = False) -> Console:
    """Get a Rich Console instance shared by the prompts and the timer display."""
    return Console(highlight=highlight)
