"""Application-wide logger writing to platformdirs user_log_dir."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "timeadair_cli"
_LOG_FILE = "timeadair.log"
_MAX_BYTES = 1024 * 1024  # 1 MB
_BACKUP_COUNT = 2

_logger: logging.Logger | None = None


def _file_handler(logger: logging.Logger) -> logging.Handler | None:
    """Return the rotating file handler already attached to *logger*, if any.

    Other handlers (e.g. a test harness capturing records) may be attached
    too, so the check looks for our handler type rather than any handler.
    """
    for handler in logger.handlers:
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            return handler
    return None


def get_logger() -> logging.Logger:
    """Return the singleton application logger, initialising it on first call.

    The timer owns stdout for its frames, so diagnostics only ever go to the
    rotating log file.
    """
    global _logger
    if _logger is not None:
        return _logger

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if _file_handler(logger) is None:
        log_dir = Path(user_log_dir(_APP_NAME))
        log_dir.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            log_dir / _LOG_FILE,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )
        logger.addHandler(handler)

    _logger = logger
    return _logger


def get_child_logger(name: str) -> logging.Logger:
    """Return a named child of the application logger (e.g. ``runner``)."""
    return get_logger().getChild(name)
