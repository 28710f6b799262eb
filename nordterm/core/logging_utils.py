"""Leveled console output for nordterm.

Verbosity levels follow the installer convention:

    0 ERROR
    1 WARNING
    2 SUCCESS
    3 INFO
    4 DEBUG

A message is printed only when ``threshold >= level``. Plain messages (no
numeric level) are always printed. Everything is routed through the stdlib
``logging`` package under the ``nordterm`` logger.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import IO, Any, Iterator


ERROR = 0
WARNING = 1
SUCCESS = 2
INFO = 3
DEBUG = 4

SUCCESS_LOGGING_LEVEL = 25
logging.addLevelName(SUCCESS_LOGGING_LEVEL, "SUCCESS")

ROOT_LOGGER_NAME = "nordterm"

_TO_LOGGING = {
    ERROR: logging.ERROR,
    WARNING: logging.WARNING,
    SUCCESS: SUCCESS_LOGGING_LEVEL,
    INFO: logging.INFO,
    DEBUG: logging.DEBUG,
}
_FROM_LOGGING = {v: k for k, v in _TO_LOGGING.items()}

LABELS = {
    ERROR: "[ERR]",
    WARNING: "[WARN]",
    SUCCESS: "[SUCCESS]",
    INFO: "[INFO]",
    DEBUG: "[DEBUG]",
}

_RESET = "\033[0m"
_TEXT = "\033[0;37m"
_TEXT_BOLD = "\033[1;37m"
_STYLES = {
    ERROR: "\033[1;31m",
    WARNING: "\033[1;33m",
    SUCCESS: "\033[1;32m",
    INFO: "\033[1;36m",
    DEBUG: "\033[1;34m",
}

ABORT_NOTICE = "User aborted."


def verbosity_of(levelno: int) -> int:
    """Map a stdlib logging level onto the 0..4 verbosity scale."""

    if levelno in _FROM_LOGGING:
        return _FROM_LOGGING[levelno]
    if levelno >= logging.ERROR:
        return ERROR
    if levelno >= logging.WARNING:
        return WARNING
    if levelno >= SUCCESS_LOGGING_LEVEL:
        return SUCCESS
    if levelno >= logging.INFO:
        return INFO
    return DEBUG


class ThresholdFilter(logging.Filter):
    def __init__(self, threshold: int) -> None:
        super().__init__()
        self.threshold = int(threshold)

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "plain", False):
            return True
        return self.threshold >= verbosity_of(record.levelno)


class ConsoleFormatter(logging.Formatter):
    """Render records as ``[LABEL] message`` or ``> message`` for plain ones."""

    def __init__(self, *, color: bool = True) -> None:
        super().__init__()
        self.color = color

    def _ansi(self, code: str) -> str:
        return code if self.color else ""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        reset = self._ansi(_RESET)
        if getattr(record, "plain", False):
            style = getattr(record, "style", None)
            if style is not None:
                return f"{self._ansi(_STYLES[style])}{message}{reset}"
            return f"{self._ansi(_TEXT_BOLD)}> {self._ansi(_TEXT)}{message}{reset}"

        level = verbosity_of(record.levelno)
        return f"{self._ansi(_STYLES[level])}{LABELS[level]} {self._ansi(_TEXT)}{message}{reset}"


def log(logger: logging.Logger, level: Any, msg: str, *args: Any) -> None:
    """Log *msg* at a 0..4 verbosity *level*.

    A missing or non-numeric level logs a plain message instead.
    """

    if isinstance(level, bool) or not isinstance(level, int) or level not in _TO_LOGGING:
        plain(logger, msg, *args)
        return
    logger.log(_TO_LOGGING[level], msg, *args)


def success(logger: logging.Logger, msg: str, *args: Any) -> None:
    logger.log(SUCCESS_LOGGING_LEVEL, msg, *args)


def plain(logger: logging.Logger, msg: str, *args: Any) -> None:
    logger.info(msg, *args, extra={"plain": True})


def abort_notice(logger: logging.Logger) -> None:
    logger.error(ABORT_NOTICE, extra={"plain": True, "style": ERROR})


def _stream_is_tty(stream: IO[str]) -> bool:
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty()) if callable(isatty) else False
    except ValueError:
        return False


@contextmanager
def console_logging(
    threshold: int,
    *,
    stream: IO[str] | None = None,
    color: bool | None = None,
) -> Iterator[logging.Handler]:
    """Attach a console handler to the ``nordterm`` logger for one run.

    The handler is removed and closed on exit, and the logger's previous
    level and propagation are restored.
    """

    stream = stream if stream is not None else sys.stdout
    if color is None:
        color = _stream_is_tty(stream)

    handler = logging.StreamHandler(stream)
    handler.addFilter(ThresholdFilter(threshold))
    handler.setFormatter(ConsoleFormatter(color=color))

    root = logging.getLogger(ROOT_LOGGER_NAME)
    prev_level = root.level
    prev_propagate = root.propagate
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)
    root.propagate = False
    try:
        yield handler
    finally:
        root.removeHandler(handler)
        handler.close()
        root.setLevel(prev_level)
        root.propagate = prev_propagate
