"""Hints: labelled groups of identical matched text."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence, Union

from fastcopy.huffman import label as huffman_label
from fastcopy.model import Match


@dataclass(frozen=True)
class OverlayAnnotation:
    """Draw ``overlay`` over the text starting at ``offset``."""

    offset: int
    overlay: str
    style: Any


@dataclass(frozen=True)
class StyleAnnotation:
    """Restyle ``length`` characters of the text starting at ``offset``."""

    offset: int
    length: int
    style: Any


Annotation = Union[OverlayAnnotation, StyleAnnotation]


@dataclass(frozen=True)
class AnnotationStyle:
    """Styles for hint labels and matched text."""

    match: Any = None
    skipped: Any = None
    label: Any = None
    label_typed: Any = None


@dataclass
class Hint:
    """A label selecting a piece of text, which may appear several times."""

    label: str
    text: str
    matches: list[Match] = field(default_factory=list)
    selected: bool = False

    def annotations(self, user_input: str, style: AnnotationStyle) -> list[Annotation]:
        """Return annotations that draw this hint given the input typed so far."""
        matched = self.label.startswith(user_input)
        match_style = style.match if matched else style.skipped

        anns: list[Annotation] = []
        for match in self.matches:
            start, end = match.range.start, match.range.end
            if matched:
                typed = len(user_input)
                if user_input:
                    anns.append(OverlayAnnotation(start, user_input, style.label_typed))
                if typed < len(self.label):
                    anns.append(
                        OverlayAnnotation(start + typed, self.label[typed:], style.label)
                    )
                start += len(self.label)

            # The label may cover the whole matched text.
            if end > start:
                anns.append(StyleAnnotation(start, end - start, match_style))
        return anns


def generate_hints(
    alphabet: Sequence[str], text: str, matches: Iterable[Match]
) -> list[Hint]:
    """Group matches by their text and give each group a prefix-free label."""
    by_text: dict[str, list[Match]] = defaultdict(list)
    for m in matches:
        by_text[text[m.range.start : m.range.end]].append(m)

    unique = sorted(by_text)
    labels = huffman_label(len(alphabet), [len(by_text[t]) for t in unique])
    return [
        Hint(
            label="".join(alphabet[i] for i in indexes),
            text=t,
            matches=by_text[t],
        )
        for t, indexes in zip(unique, labels)
    ]