import pytest

from fastcopy.alphabet import (
    DEFAULT_ALPHABET,
    AlphabetError,
    parse_alphabet,
    validate_alphabet,
)


@pytest.mark.parametrize(
    "give, want_err",
    [
        ("", "must have at least two items"),
        ("a", "must have at least two items"),
        ("asdffghhjjkl", "alphabet has duplicates: ['f' 'h' 'j']"),
    ],
)
def test_validate_alphabet_errors(give, want_err):
    with pytest.raises(AlphabetError) as excinfo:
        validate_alphabet(give)
    assert want_err in str(excinfo.value)


def test_parse_alphabet_good():
    assert parse_alphabet("0123456789") == "0123456789"


def test_default_alphabet_is_valid():
    assert parse_alphabet(DEFAULT_ALPHABET) == DEFAULT_ALPHABET


def test_duplicate_quote_is_escaped():
    with pytest.raises(AlphabetError) as excinfo:
        validate_alphabet("a''b")
    assert str(excinfo.value) == "alphabet has duplicates: ['\\'']"


def test_alphabet_error_is_value_error():
    with pytest.raises(ValueError, match="at least two"):
        parse_alphabet("x")