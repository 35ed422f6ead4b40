"""Builder for brace-delimited, sorted attribute strings."""

from __future__ import annotations

from typing import Any

_SCALARS = (str, int, float, complex)


def _is_zero(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, _SCALARS) and not value


def _format(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_format(item) for item in value) + "]"
    return str(value)


class Builder:
    """Collects name/value pairs, skipping zero values."""

    def __init__(self) -> None:
        self._attrs: list[str] = []

    def put(self, name: str, value: Any) -> None:
        """Add an attribute unless its value is None or a zero scalar."""
        if _is_zero(value):
            return
        self._attrs.append(f"{name}: {_format(value)}")

    def __str__(self) -> str:
        return "{" + ", ".join(sorted(self._attrs)) + "}"