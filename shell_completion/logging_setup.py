"""Logging setup and utilities.

Completion helpers print their results on stdout, which the shell reads back,
so every handler installed here writes to stderr or to a file. While answering
a completion request the terminal is left alone entirely, see `init_logger`.
"""

import logging
import os
import sys
from typing import TextIO

from .debug import is_debug, set_debug

__all__ = [
    "LogObjects",
    "get_logger",
    "init_logger",
    "should_colorize",
]

_ESC = "\x1b["
_RESET = f"{_ESC}0m"

# (foreground, style) ANSI codes per level
_LEVEL_STYLES = {
    logging.WARNING: ("33", "2"),
    logging.ERROR: ("31", "2"),
    logging.CRITICAL: ("31", "1"),
}


class LogObjects:
    """Reusable objects for loggers."""

    handlers: list[logging.Handler] = []


def should_colorize(stream: TextIO | None = None) -> bool:
    """Determine if ANSI colors should be used for the given stream.

    Respects NO_COLOR and FORCE_COLOR, otherwise colors only when the stream is a TTY.

    Args:
        stream: The output stream to check. Defaults to sys.stderr.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if stream is None:
        stream = sys.stderr
    return hasattr(stream, "isatty") and stream.isatty()


class ScreenLogFormatter(logging.Formatter):
    """A custom formatter, adding colors based on log level."""

    def __init__(self, use_colors: bool) -> None:
        super().__init__()
        log_format = r"%(name)20s - %(message)s // %(filename)s:%(lineno)d" if is_debug() else r"%(message)s"
        self._formatters: dict[int, logging.Formatter] = {}
        for level in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL):
            codes = _LEVEL_STYLES.get(level)
            if use_colors and codes:
                fmt = f"{_ESC}{';'.join(codes)}m{log_format}{_RESET}"
            else:
                fmt = log_format
            self._formatters[level] = logging.Formatter(fmt)

    def format(self, record: logging.LogRecord) -> str:
        formatter = self._formatters.get(record.levelno, self._formatters[logging.INFO])
        return formatter.format(record)


def init_logger(filename: str | None = None, force_debug: bool = False, screen: bool = True) -> None:
    """Initialize the logging system.

    Args:
        filename: Optional filename to log to
        force_debug: If True, force debug level
        screen: Also log to stderr. Disabled while bash waits for completions,
            since it doesn't capture the helper's stderr
    """
    if force_debug:
        set_debug(True)

    LogObjects.handlers.clear()
    if filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(logging.Formatter(fmt=r"%(asctime)s [%(levelname)s] %(name)s :: %(message)s :: %(filename)s:%(lineno)d"))
        LogObjects.handlers.append(file_handler)
    if screen:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(ScreenLogFormatter(should_colorize(sys.stderr)))
        LogObjects.handlers.append(stream_handler)
    if not LogObjects.handlers:
        # Keeps logging.lastResort from writing to stderr
        LogObjects.handlers.append(logging.NullHandler())


def get_logger(name: str = "completion", level: int | None = None) -> logging.Logger:
    """Return a named logger.

    Args:
        name (str): logger's name
        level (int): logger's level (auto if not set)

    Returns:
        The logger instance
    """
    logger = logging.getLogger(name)
    if level is None:
        logger.setLevel(logging.DEBUG if is_debug() else logging.WARNING)
    else:
        logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        if handler not in LogObjects.handlers:
            logger.removeHandler(handler)
    for handler in LogObjects.handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    return logger
