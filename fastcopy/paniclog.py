"""Logging of unexpected exceptions to a text stream."""

from __future__ import annotations

import traceback
from types import TracebackType
from typing import Any, TextIO


class PanicError(Exception):
    """Error built from a non-exception failure value."""


def handle(pval: Any, stream: TextIO) -> BaseException | None:
    """Log a failure value with a stack trace and return it as an exception."""
    if pval is None:
        return None

    if isinstance(pval, BaseException) and pval.__traceback__ is not None:
        stack = "".join(
            traceback.format_exception(type(pval), pval, pval.__traceback__)
        )
    else:
        stack = "".join(traceback.format_stack())
    stream.write(f"panic: {pval}\n{stack}")

    if isinstance(pval, BaseException):
        return pval
    if isinstance(pval, str):
        return PanicError(pval)
    return PanicError(f"panic: {pval}")


class Recovery:
    """Context manager that swallows an exception, logging it to a stream."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.error: BaseException | None = None

    def __enter__(self) -> Recovery:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc is None or not isinstance(exc, Exception):
            return False
        self.error = handle(exc, self.stream)
        return True


def recover(stream: TextIO) -> Recovery:
    """Return a context manager that records and logs a raised exception."""
    return Recovery(stream)