"""Logging helpers and the library's exception type."""

from __future__ import annotations

import logging
import threading

MODULE_NAME = "KNOWHERE"
TRACE = 5
_MAX_PATTERN = 1024
_EXTRA_ROOM = 256
_THREAD_NAME_LIMIT = 15
_UNNAMED = "unamed"

logging.addLevelName(TRACE, "TRACE")
logger = logging.getLogger("knowhere")


class KnowhereException(Exception):
    """Error raised by the library, optionally with its origin."""

    def __init__(
        self,
        msg: str,
        fun_name: str | None = None,
        file: str | None = None,
        line: int | None = None,
    ) -> None:
        self.msg = msg
        self.fun_name = fun_name
        self.file = file
        self.line = line
        super().__init__(msg)

    def __str__(self) -> str:
        return self.msg


def log_out(pattern: str, *args: object) -> str:
    """Format ``pattern`` printf-style, bounded to the pattern length plus some room."""
    limit = len(pattern[:_MAX_PATTERN]) + _EXTRA_ROOM - 2
    text = pattern % args if args else pattern
    return text[:limit]


def set_thread_name(name: str) -> None:
    """Name the current thread; names longer than 15 bytes are refused."""
    if len(name.encode()) > _THREAD_NAME_LIMIT:
        return
    threading.current_thread().name = name


def get_thread_name() -> str:
    """Return the current thread's name."""
    name = threading.current_thread().name
    return name or _UNNAMED


def _emit(level: int, function: str, message: str) -> None:
    prefix = log_out("[%s][%s][%s] ", MODULE_NAME, function, get_thread_name())
    logger.log(level, "%s%s", prefix, message)


def log_trace(message: str) -> None:
    _emit(TRACE, "log_trace", message)


def log_debug(message: str) -> None:
    _emit(logging.DEBUG, "log_debug", message)


def log_info(message: str) -> None:
    _emit(logging.INFO, "log_info", message)


def log_warning(message: str) -> None:
    _emit(logging.WARNING, "log_warning", message)


def log_error(message: str) -> None:
    _emit(logging.ERROR, "log_error", message)


def log_fatal(message: str) -> None:
    _emit(logging.CRITICAL, "log_fatal", message)


def throw_if_not(condition: object, expression: str, message: str | None = None) -> None:
    """Raise :class:`KnowhereException` when ``condition`` is false."""
    if condition:
        return
    text = f"Error: '{expression}' failed"
    if message:
        text = f"{text}: {message}"
    raise KnowhereException(text)