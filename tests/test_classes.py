import pytest

from cctr.classes import (
    CharClass,
    get_char_class,
    is_digit,
    is_letter,
    is_lower,
    is_print,
    is_punct,
    is_space,
    is_upper,
    to_digit,
    to_letter,
    to_lower,
    to_print,
    to_punct,
    to_space,
    to_upper,
)


@pytest.mark.parametrize(
    "given, expected",
    [("a", "a"), ("A", "A"), ("1", "x"), ("!", "h"), (" ", "g")],
)
def test_to_letter(given, expected):
    assert to_letter(given) == expected


def test_to_digit_letter():
    assert to_digit("h") == "7"


def test_to_digit_keeps_digits_and_defaults_to_nine():
    assert to_digit("5") == "5"
    assert to_digit("%") == "9"
    assert to_digit("z") == "9"


def test_to_digit_alpha_sample():
    assert "".join(to_digit(c) for c in "Coding") == "293896"


def test_to_punct():
    assert to_punct("?") == "?"
    assert to_punct("a") == "."


def test_to_space():
    assert to_space("\t") == "\t"
    assert to_space("a") == " "


def test_to_print():
    assert to_print("a") == "a"
    assert to_print("\x00") == "x"


def test_case_conversion():
    assert to_upper("a") == "A"
    assert to_lower("A") == "a"
    assert to_upper("ß") == "ß"


def test_predicates():
    assert is_letter("æ") and not is_letter("1")
    assert is_upper("A") and not is_upper("a")
    assert is_lower("a") and not is_lower("A")
    assert is_digit("7") and not is_digit("x")
    assert is_punct(".") and not is_punct("a")
    assert is_space(" ") and is_space("\n") and not is_space("a")
    assert is_print(" ") and not is_print("\n")


def test_get_char_class():
    cls = get_char_class("lower")
    assert isinstance(cls, CharClass)
    assert cls.check("a") is True
    assert cls.check("A") is False
    assert get_char_class("upper").translate("q") == "Q"


def test_get_char_class_unknown():
    with pytest.raises(KeyError):
        get_char_class("bogus")