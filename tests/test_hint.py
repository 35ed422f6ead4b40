import pytest

from fastcopy.hint import (
    AnnotationStyle,
    Hint,
    OverlayAnnotation,
    StyleAnnotation,
    generate_hints,
)
from fastcopy.model import Match, Range

ALPHABET = list("abc")

STYLE = AnnotationStyle(
    match="green",
    skipped="gray",
    label="red",
    label_typed="yellow",
)


def test_generate_hints_no_matches():
    assert generate_hints(ALPHABET, "foo", []) == []


def test_generate_hints_single_match():
    got = generate_hints(ALPHABET, "foo bar", [Match("name", Range(1, 3))])
    assert got == [Hint(label="a", text="oo", matches=[Match("name", Range(1, 3))])]


def test_generate_hints_duplicated_match():
    matches = [Match("name1", Range(4, 6)), Match("name2", Range(8, 10))]
    got = generate_hints(ALPHABET, "foo bar baz qux", matches)
    assert got == [Hint(label="a", text="ba", matches=matches)]


def test_generate_hints_multiple_matches():
    matches = [
        Match("p", Range(0, 3)),
        Match("q", Range(4, 6)),
        Match("r", Range(8, 10)),
        Match("s", Range(13, 15)),
    ]
    got = generate_hints(ALPHABET, "foo bar baz qux", matches)
    assert got == [
        Hint(
            label="c",
            text="ba",
            matches=[Match("q", Range(4, 6)), Match("r", Range(8, 10))],
        ),
        Hint(label="a", text="foo", matches=[Match("p", Range(0, 3))]),
        Hint(label="b", text="ux", matches=[Match("s", Range(13, 15))]),
    ]


def test_generate_hints_labels_are_prefix_free():
    text = "aa bb cc dd ee ff gg"
    matches = [Match("m", Range(i, i + 2)) for i in range(0, len(text), 3)]
    labels = [h.label for h in generate_hints(ALPHABET, text, matches)]
    assert len(set(labels)) == len(labels) == 7
    for left in labels:
        for right in labels:
            if left != right:
                assert not left.startswith(right)


@pytest.mark.parametrize(
    ("give", "user_input", "want"),
    [
        pytest.param(
            Hint("a", "foo", [Match("x", Range(0, 3)), Match("y", Range(7, 10))]),
            "",
            [
                OverlayAnnotation(0, "a", "red"),
                StyleAnnotation(1, 2, "green"),
                OverlayAnnotation(7, "a", "red"),
                StyleAnnotation(8, 2, "green"),
            ],
            id="multiple matches",
        ),
        pytest.param(
            Hint("a", "foo", [Match("x", Range(0, 3))]),
            "a",
            [
                OverlayAnnotation(0, "a", "yellow"),
                StyleAnnotation(1, 2, "green"),
            ],
            id="full input match",
        ),
        pytest.param(
            Hint("ab", "foobar", [Match("x", Range(1, 7))]),
            "",
            [
                OverlayAnnotation(1, "ab", "red"),
                StyleAnnotation(3, 4, "green"),
            ],
            id="multi character label",
        ),
        pytest.param(
            Hint("ab", "foobar", [Match("x", Range(1, 7))]),
            "a",
            [
                OverlayAnnotation(1, "a", "yellow"),
                OverlayAnnotation(2, "b", "red"),
                StyleAnnotation(3, 4, "green"),
            ],
            id="multi character label input match",
        ),
        pytest.param(
            Hint("ab", "foobar", [Match("x", Range(1, 7))]),
            "x",
            [StyleAnnotation(1, 6, "gray")],
            id="multi character label input mismatch",
        ),
        pytest.param(
            Hint("abcd", "foo", [Match("x", Range(0, 3))]),
            "",
            [OverlayAnnotation(0, "abcd", "red")],
            id="long label",
        ),
    ],
)
def test_hint_annotations(give, user_input, want):
    assert give.annotations(user_input, STYLE) == want