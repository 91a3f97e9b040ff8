"""
Logging utilities for termprompt.

Provides a centralized logging configuration for the entire package.
Widgets draw on the terminal, so nothing is emitted unless the caller
configures a handler.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

# Package root logger
_root_logger = logging.getLogger("termprompt")
_root_logger.addHandler(logging.NullHandler())


def setup_logging(
    level: str | int = "INFO",
    format: str | None = None,
    stream: TextIO | None = None,
    file: str | None = None,
) -> None:
    """
    Configure logging for termprompt.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL) or int
        format: Custom log format string
        stream: Output stream (defaults to stderr unless *file* is given)
        file: Optional file path to write logs; without an explicit
            *stream* this is the only destination

    Example:
        from termprompt.logging import setup_logging

        # Keystroke tracing into a file while the prompt owns the terminal
        setup_logging("DEBUG", file="termprompt.log")

        # File and stderr
        setup_logging("DEBUG", file="termprompt.log", stream=sys.stderr)
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    _root_logger.setLevel(level)
    _root_logger.handlers.clear()

    if format is None:
        format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    formatter = logging.Formatter(format)

    if stream is not None or not file:
        stream_handler = logging.StreamHandler(stream or sys.stderr)
        stream_handler.setFormatter(formatter)
        stream_handler.setLevel(level)
        _root_logger.addHandler(stream_handler)

    if file:
        file_handler = logging.FileHandler(file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        _root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a submodule.

    Args:
        name: Submodule name (e.g., "driver", "tui.keys")

    Returns:
        Logger instance
    """
    if name.startswith("termprompt."):
        return logging.getLogger(name)
    return logging.getLogger(f"termprompt.{name}")


def set_level(level: str | int) -> None:
    """Set the log level for termprompt."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    _root_logger.setLevel(level)


def disable() -> None:
    """Disable all logging for termprompt."""
    _root_logger.disabled = True


def enable() -> None:
    """Re-enable logging for termprompt."""
    _root_logger.disabled = False
