"""Utilities for hyperint."""

from .logging import disable_console_logging, enable_console_logging, get_logger

__all__ = [
    "get_logger",
    "enable_console_logging",
    "disable_console_logging",
]
