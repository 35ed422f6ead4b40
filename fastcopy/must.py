"""Assertions for program invariants."""

from __future__ import annotations

from typing import Any, Optional


class InvariantError(RuntimeError):
    """Raised when a program invariant is violated."""


def not_errorf(err: Optional[BaseException], fmt: str, *args: Any) -> None:
    """Raise InvariantError with the formatted message if err is set."""
    if err is None:
        return
    detail = fmt % args if args else fmt
    raise InvariantError("unexpected error: %s\n%s" % (err, detail))