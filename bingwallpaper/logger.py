"""Levelled logger writing plain text lines to a stream."""

from __future__ import annotations

import io
import sys
from datetime import datetime
from enum import IntEnum
from typing import Any, TextIO


class LogLevel(IntEnum):
    """Severity of a log message; higher values are more severe."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3

    @property
    def tag(self) -> str:
        return _TAGS[self]


_TAGS = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERROR",
}

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class Logger:
    """Writes messages at or above ``level`` to ``writer`` (standard output by default)."""

    def __init__(
        self,
        level: LogLevel = LogLevel.INFO,
        *,
        show_time: bool = True,
        show_level: bool = True,
        writer: TextIO | None = None,
    ) -> None:
        self.level = LogLevel(level)
        self.show_time = show_time
        self.show_level = show_level
        self.writer = writer

    def format_message(self, level: LogLevel, message: str, *args: Any) -> str:
        """Build one log line: optional timestamp, optional level tag, then the message."""
        parts = []
        if self.show_time:
            parts.append(f"[{datetime.now().strftime(_TIME_FORMAT)}] ")
        if self.show_level:
            parts.append(f"[{LogLevel(level).tag}] ")
        parts.append(message % args if args else message)
        return "".join(parts)

    def _log(self, level: LogLevel, message: str, args: tuple) -> None:
        if level < self.level:
            return
        stream = self.writer if self.writer is not None else sys.stdout
        print(self.format_message(level, message, *args), file=stream, flush=True)

    def debug(self, message: str, *args: Any) -> None:
        self._log(LogLevel.DEBUG, message, args)

    def info(self, message: str, *args: Any) -> None:
        self._log(LogLevel.INFO, message, args)

    def warning(self, message: str, *args: Any) -> None:
        self._log(LogLevel.WARNING, message, args)

    def error(self, message: str, *args: Any) -> None:
        self._log(LogLevel.ERROR, message, args)


class _DiscardStream(io.TextIOBase):
    """A text sink that accepts and drops everything written to it."""

    def writable(self) -> bool:
        return True

    def write(self, text: str) -> int:
        return len(text)


class NullLogger(Logger):
    """A logger that discards everything; its level is fixed at ERROR."""

    def __init__(self) -> None:
        super().__init__(
            LogLevel.ERROR,
            show_time=False,
            show_level=False,
            writer=_DiscardStream(),
        )

    @property
    def level(self) -> LogLevel:
        return LogLevel.ERROR

    @level.setter
    def level(self, value: LogLevel) -> None:
        LogLevel(value)

    def debug(self, message: str, *args: Any) -> None:
        self._log(LogLevel.DEBUG, message, args)

    def info(self, message: str, *args: Any) -> None:
        self._log(LogLevel.INFO, message, args)

    def warning(self, message: str, *args: Any) -> None:
        self._log(LogLevel.WARNING, message, args)

    def error(self, message: str, *args: Any) -> None:
        self._log(LogLevel.ERROR, message, args)