"""
Logging helpers for the ``hyperint`` logger hierarchy.

The library only emits records; applications decide where they go. For
interactive sessions :func:`enable_console_logging` attaches a stream handler.
"""

import logging
import sys
from typing import Optional, TextIO

ROOT_LOGGER = "hyperint"
DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``hyperint`` or one of its children (``hyperint.<name>``)."""
    if not name or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def enable_console_logging(level: int = logging.DEBUG,
                           stream: Optional[TextIO] = None,
                           fmt: str = DEFAULT_FORMAT) -> logging.Handler:
    """
    Send ``hyperint`` records at ``level`` or above to ``stream``.

    Returns the installed handler so it can be removed with
    :func:`disable_console_logging`.
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    handler.setLevel(level)
    logger = get_logger()
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


def disable_console_logging(handler: logging.Handler) -> None:
    logger = get_logger()
    logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
