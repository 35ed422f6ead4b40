"""The fastcopy widget: text with hint labels that select matches."""

from __future__ import annotations

import enum
import threading
from dataclasses import dataclass, field
from typing import Callable, Sequence

from fastcopy.hint import Annotation, AnnotationStyle, Hint, generate_hints
from fastcopy.model import Match, Selection, Style

SelectionHandler = Callable[[Selection], None]
HintGenerator = Callable[[Sequence[str], str, Sequence[Match]], list[Hint]]


class Key(enum.Enum):
    """Keys the widget distinguishes."""

    RUNE = enum.auto()
    BACKSPACE = enum.auto()
    BACKSPACE2 = enum.auto()
    TAB = enum.auto()
    ENTER = enum.auto()
    ESCAPE = enum.auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press; ``rune`` holds the character for ``Key.RUNE``."""

    key: Key
    rune: str = ""
    shift: bool = False


@dataclass
class WidgetConfig:
    """Configuration from which a Widget is built."""

    text: str
    matches: Sequence[Match]
    hint_alphabet: Sequence[str]
    handler: SelectionHandler
    style: Style = field(default_factory=Style)
    hint_generator: HintGenerator | None = None

    def build(self) -> Widget:
        """Generate hints and build the widget."""
        generator = self.hint_generator or generate_hints
        hints = generator(self.hint_alphabet, self.text, self.matches)
        return Widget(self.text, hints, self.style, self.handler)


class Widget:
    """Displays text with prefix-free labels next to each hint."""

    def __init__(
        self,
        text: str,
        hints: Sequence[Hint],
        style: Style,
        handler: SelectionHandler,
    ) -> None:
        self._text = text
        self._hints = list(hints)
        self._by_label = {h.label: i for i, h in enumerate(self._hints)}
        self._style = style
        self._handler = handler

        self._lock = threading.RLock()
        self._input = ""
        self._shift_down = False
        self._multi_select = False
        self._annotations: list[Annotation] = []
        self._annotate()

    @property
    def text(self) -> str:
        return self._text

    @property
    def input(self) -> str:
        """Label text typed so far."""
        with self._lock:
            return self._input

    def annotations(self) -> list[Annotation]:
        """Annotations to draw over the text in the current state."""
        with self._lock:
            return list(self._annotations)

    def handle_event(self, event: object) -> bool:
        """Handle a key event; return whether the widget consumed it."""
        if not isinstance(event, KeyEvent):
            return False

        if event.key in (Key.BACKSPACE, Key.BACKSPACE2):
            with self._lock:
                changed = bool(self._input)
                if changed:
                    self._input = self._input[:-1]
            if changed:
                self._input_changed()
            return True

        if event.key is Key.TAB:
            if not self._multi_select:
                self._multi_select = True
            else:
                self._multi_select = False
                self._handle_selection()
            return True

        if event.key is Key.ENTER:
            # In multi-select mode, enter confirms the current selection.
            if self._multi_select:
                self._handle_selection()
                return True
            return False

        if event.key is Key.RUNE:
            char = event.rune
            with self._lock:
                # An upper-case rune may arrive without the shift flag.
                if char.isupper():
                    char = char.lower()
                    self._shift_down = True
                else:
                    self._shift_down = event.shift
                self._input += char
            self._input_changed()
            return True

        return False

    def _input_changed(self) -> None:
        # Labels are prefix-free, so an exact match is a definite choice.
        with self._lock:
            idx = self._by_label.get(self._input)
            if idx is not None:
                hint = self._hints[idx]
                hint.selected = not hint.selected
                self._input = ""
            multi = self._multi_select

        if idx is not None and not multi:
            self._handle_selection()
        self._annotate()

    def _handle_selection(self) -> None:
        with self._lock:
            selected = [h for h in self._hints if h.selected]
            matchers = {m.matcher for h in selected for m in h.matches}
            for h in selected:
                h.selected = False
            shift = self._shift_down

        if not selected:
            return

        self._handler(
            Selection(
                text=" ".join(h.text for h in selected),
                matchers=tuple(sorted(matchers)),
                shift=shift,
            )
        )

    def _annotate(self) -> None:
        with self._lock:
            base = AnnotationStyle(
                match=self._style.match,
                skipped=self._style.skipped_match,
                label=self._style.hint_label,
                label_typed=self._style.hint_label_input,
            )
            selected = AnnotationStyle(
                match=self._style.selected_match,
                skipped=self._style.skipped_match,
                label=self._style.deselect_label,
                label_typed=self._style.hint_label_input,
            )
            anns: list[Annotation] = []
            for hint in self._hints:
                if hint.selected:
                    # Selected hints show their label again for deselection.
                    anns.extend(hint.annotations("", selected))
                else:
                    anns.extend(hint.annotations(self._input, base))
            self._annotations = anns