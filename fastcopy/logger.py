"""Leveled, user-facing logging."""

from __future__ import annotations

import enum
import threading
from typing import Any, TextIO


class Level(enum.IntEnum):
    """Severity of a log message."""

    DEBUG = -1
    INFO = 0
    ERROR = 1
    DISCARD = 2

    def __str__(self) -> str:
        if self in (Level.DEBUG, Level.INFO, Level.ERROR):
            return self.name.lower()
        return str(int(self))


class Logger:
    """Thread-safe logger writing one line per message to a text stream."""

    def __init__(
        self,
        stream: TextIO,
        *,
        name: str = "",
        level: Level = Level.INFO,
        lock: threading.Lock | None = None,
    ) -> None:
        self._stream = stream
        self._name = name
        self._level = level
        self._lock = lock if lock is not None else threading.Lock()

    @property
    def level(self) -> Level:
        """Minimum level of messages this logger writes."""
        return self._level

    @property
    def name(self) -> str:
        return self._name

    def with_name(self, name: str) -> Logger:
        """Return a logger sharing this one's stream, with the given name."""
        return Logger(self._stream, name=name, level=self._level, lock=self._lock)

    def with_level(self, level: Level) -> Logger:
        """Return a logger sharing this one's stream, at the given level."""
        return Logger(self._stream, name=self._name, level=level, lock=self._lock)

    def debug(self, msg: str, *args: Any) -> None:
        self.log(Level.DEBUG, msg, *args)

    def info(self, msg: str, *args: Any) -> None:
        self.log(Level.INFO, msg, *args)

    def error(self, msg: str, *args: Any) -> None:
        self.log(Level.ERROR, msg, *args)

    def log(self, level: Level, msg: str, *args: Any) -> None:
        """Log a %-style message at the given level."""
        if level < self._level:
            return

        prefix = f"[{self._name}] " if self._name else ""
        msg = msg.rstrip()
        text = msg % args if args else msg
        line = f"{prefix}{text}\n"
        with self._lock:
            try:
                self._stream.write(line)
            except OSError:
                pass


class _NullStream:
    def write(self, text: str) -> int:
        return len(text)


DISCARD = Logger(_NullStream(), level=Level.DISCARD)  # type: ignore[arg-type]


class LogWriter:
    """File-like object that turns each written line into a log entry."""

    def __init__(self, log: Logger, level: Level = Level.INFO) -> None:
        self.log = log
        self.level = level
        self._buffer: list[str] = []

    def write(self, data: str | bytes) -> int:
        """Buffer data and log every complete line in it."""
        text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
        while text:
            text = self._take_next_line(text)
        return len(data)

    def _take_next_line(self, text: str) -> str:
        line, sep, remaining = text.partition("\n")
        if not sep:
            self._buffer.append(line)
            return ""

        if not self._buffer:
            self._log_line(line)
            return remaining

        self._buffer.append(line)
        # Keep empty lines in the middle of the stream.
        self._flush(allow_empty=True)
        return remaining

    def flush(self) -> None:
        """Partial lines stay buffered until a newline or close."""

    def close(self) -> None:
        """Log any buffered partial line."""
        # A trailing newline at the end of the stream is not a message.
        self._flush(allow_empty=False)

    def _flush(self, allow_empty: bool) -> None:
        pending = "".join(self._buffer)
        if allow_empty or pending:
            self._log_line(pending)
        self._buffer.clear()

    def _log_line(self, line: str) -> None:
        self.log.log(self.level, "%s", line)

    def __enter__(self) -> LogWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()