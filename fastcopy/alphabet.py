"""Hint alphabets: the characters labels are built from."""

from __future__ import annotations

DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


class AlphabetError(ValueError):
    """Raised when an alphabet cannot be used to build labels."""


def _quote_char(char: str) -> str:
    if char == "\\":
        return "'\\\\'"
    if char == "'":
        return "'\\''"
    if char.isprintable():
        return f"'{char}'"
    code = ord(char)
    if code <= 0xFFFF:
        return f"'\\u{code:04x}'"
    return f"'\\U{code:08x}'"


def validate_alphabet(alphabet: str) -> None:
    """Raise AlphabetError unless alphabet has two or more distinct characters."""
    if len(alphabet) < 2:
        raise AlphabetError("alphabet must have at least two items")

    seen: set[str] = set()
    dupes: set[str] = set()
    for char in alphabet:
        if char in seen:
            dupes.add(char)
        seen.add(char)

    if dupes:
        listing = " ".join(_quote_char(c) for c in sorted(dupes))
        raise AlphabetError(f"alphabet has duplicates: [{listing}]")


def parse_alphabet(alphabet: str) -> str:
    """Validate alphabet and return it."""
    validate_alphabet(alphabet)
    return alphabet