"""Core value types shared by the hint and widget modules."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Range:
    """The half-open range ``[start, end)`` of offsets into a text."""

    start: int = 0
    end: int = 0

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"


@dataclass(frozen=True)
class Match:
    """A single area of text found by a named matcher."""

    matcher: str
    range: Range

    def __str__(self) -> str:
        return f"({json.dumps(self.matcher, ensure_ascii=False)}) {self.range}"


@dataclass(frozen=True)
class Style:
    """Display styles used by the widget.

    The style values are opaque to this package; they are handed to the
    renderer unchanged.
    """

    normal: Any = None
    match: Any = None
    skipped_match: Any = None
    hint_label: Any = None
    hint_label_input: Any = None
    selected_match: Any = None
    deselect_label: Any = None


@dataclass(frozen=True)
class Selection:
    """A choice made by the user."""

    text: str
    matchers: tuple[str, ...] = field(default_factory=tuple)
    shift: bool = False