"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from timeadair_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_TERMINAL,
    get_exit_code_description,
    get_exit_code_name,
)
from timeadair_cli.utils.logger import get_logger
from timeadair_cli.utils.ui.formatters import format_error

# Errors that mean the terminal itself is unusable.
TERMINAL_ERRORS = (OSError, EOFError)


def command_wrapper(func: Callable):
    """Log command start/finish and turn failures into exit codes."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except typer.Exit:
            # Re-raise Typer's own exits
            raise

        except TERMINAL_ERRORS as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) %s - %s\n%s",
                cmd,
                elapsed,
                get_exit_code_name(ERROR_TERMINAL),
                str(e),
                traceback.format_exc(),
            )
            format_error(
                f"Terminal I/O failed: {e}. {get_exit_code_description(ERROR_TERMINAL)}"
            )
            raise typer.Exit(code=ERROR_TERMINAL) from e

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
