"""File-like adapter that forwards writes to a test logger."""

from __future__ import annotations

from typing import Any, Protocol, Union


class TestLogger(Protocol):
    """Destination for messages: anything with a printf-style logf."""

    def logf(self, fmt: str, *args: Any) -> None: ...


class LoggerWriter:
    """Writes each chunk as one message, minus a single trailing newline."""

    def __init__(self, logger: TestLogger) -> None:
        self.logger = logger

    def write(self, data: Union[str, bytes]) -> int:
        text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
        text = text.removesuffix("\n")
        self.logger.logf("%s", text)
        return len(data)


def writer(logger: TestLogger) -> LoggerWriter:
    """Build a file-like writer that sends writes to logger."""
    return LoggerWriter(logger)