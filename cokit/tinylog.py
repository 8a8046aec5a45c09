"""Small levelled logger writing to standard output and an optional file."""

from __future__ import annotations

import atexit
import enum
import os
import sys
from datetime import datetime
from typing import TextIO


class LogLevel(enum.IntEnum):
    """Log levels, lowest first."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    CRITICAL = 3
    WARNING = 4
    ERROR = 5
    FATAL = 6


_COLORS = {
    LogLevel.TRACE: "\x1b[37m",
    LogLevel.DEBUG: "\x1b[35m",
    LogLevel.INFO: "\x1b[32m",
    LogLevel.CRITICAL: "\x1b[34m",
    LogLevel.WARNING: "\x1b[33m",
    LogLevel.ERROR: "\x1b[31m",
    LogLevel.FATAL: "\x1b[31;1m",
}
_RESET = "\x1b[m"


def level_name(level) -> str:
    """Return the lower-case name of ``level``, or ``"unknown"``."""
    try:
        return LogLevel(level).name.lower()
    except ValueError:
        return "unknown"


def level_from_name(name: str) -> LogLevel:
    """Return the level called ``name``; unknown names give ``INFO``."""
    for level in LogLevel:
        if level.name.lower() == name:
            return level
    return LogLevel.INFO


class _Sink:
    def __init__(self) -> None:
        env_level = os.environ.get("LOG_LEVEL")
        self.max_level = level_from_name(env_level) if env_level else LogLevel.INFO
        self.file: TextIO | None = None
        env_path = os.environ.get("LOG_FILE")
        if env_path:
            self.open(env_path)

    def open(self, path: str | os.PathLike | None) -> None:
        self.close()
        if path is not None:
            self.file = open(path, "a", encoding="utf-8")

    def close(self) -> None:
        if self.file is not None:
            self.file.close()
            self.file = None

    def output(self, level: LogLevel, message: str, filename: str, lineno: int) -> None:
        stamp = datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S.%f %Z")
        line = f"{stamp} {filename}:{lineno} [{level_name(level)}] {message}"
        if self.file is not None:
            self.file.write(line + "\n")
            self.file.flush()
        if level >= self.max_level:
            sys.stdout.write(_COLORS[level] + line + _RESET + "\n")


_sink = _Sink()
atexit.register(_sink.close)


def set_log_level(level: LogLevel) -> None:
    """Show only messages at ``level`` or above on standard output."""
    _sink.max_level = LogLevel(level)


def set_log_file(path) -> None:
    """Append every message to ``path``; ``None`` stops file logging."""
    _sink.open(path)


def _log(level: LogLevel, fmt: str, args: tuple, depth: int) -> None:
    frame = sys._getframe(depth)
    message = fmt.format(*args)
    _sink.output(LogLevel(level), message, frame.f_code.co_filename, frame.f_lineno)


def log(level: LogLevel, fmt: str, *args) -> None:
    """Log ``fmt.format(*args)`` at ``level`` with the caller's location."""
    _log(level, fmt, args, 2)


def log_trace(fmt: str, *args) -> None:
    """Log ``fmt.format(*args)`` at trace level."""
    _log(LogLevel.TRACE, fmt, args, 2)


def log_debug(fmt: str, *args) -> None:
    """Log ``fmt.format(*args)`` at debug level."""
    _log(LogLevel.DEBUG, fmt, args, 2)


def log_info(fmt: str, *args) -> None:
    """Log ``fmt.format(*args)`` at info level."""
    _log(LogLevel.INFO, fmt, args, 2)


def log_critical(fmt: str, *args) -> None:
    """Log ``fmt.format(*args)`` at critical level."""
    _log(LogLevel.CRITICAL, fmt, args, 2)


def log_warning(fmt: str, *args) -> None:
    """Log ``fmt.format(*args)`` at warning level."""
    _log(LogLevel.WARNING, fmt, args, 2)


def log_error(fmt: str, *args) -> None:
    """Log ``fmt.format(*args)`` at error level."""
    _log(LogLevel.ERROR, fmt, args, 2)


def log_fatal(fmt: str, *args) -> None:
    """Log ``fmt.format(*args)`` at fatal level."""
    _log(LogLevel.FATAL, fmt, args, 2)


def main(argv: list[str] | None = None) -> int:
    """Log two sample messages to ``log.txt`` and standard output."""
    set_log_file("log.txt")
    log_debug("hello {}", 25)
    log_info("hello {}", 25)
    return 0