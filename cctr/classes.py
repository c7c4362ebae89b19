"""Character classes and per-character conversion rules."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Callable

_LATIN1_SPACES = frozenset("\t\n\v\f\r \x85\xa0")


def _category(ch: str) -> str:
    return unicodedata.category(ch)


def is_letter(ch: str) -> bool:
    """Return True if ``ch`` is a Unicode letter."""
    return _category(ch).startswith("L")


def is_upper(ch: str) -> bool:
    """Return True if ``ch`` is an upper-case letter."""
    return _category(ch) == "Lu"


def is_lower(ch: str) -> bool:
    """Return True if ``ch`` is a lower-case letter."""
    return _category(ch) == "Ll"


def is_digit(ch: str) -> bool:
    """Return True if ``ch`` is a decimal digit."""
    return _category(ch) == "Nd"


def is_print(ch: str) -> bool:
    """Return True for letters, marks, numbers, punctuation, symbols and the ASCII space."""
    return ch == " " or _category(ch)[0] in "LMNPS"


def is_punct(ch: str) -> bool:
    """Return True if ``ch`` is punctuation."""
    return _category(ch).startswith("P")


def is_space(ch: str) -> bool:
    """Return True if ``ch`` is white space."""
    if ord(ch) <= 0xFF:
        return ch in _LATIN1_SPACES
    return ch.isspace()


def _single(converted: str, original: str) -> str:
    return converted if len(converted) == 1 else original


def to_upper(ch: str) -> str:
    """Map ``ch`` to upper case when that is a single character."""
    return _single(ch.upper(), ch)


def to_lower(ch: str) -> str:
    """Map ``ch`` to lower case when that is a single character."""
    return _single(ch.lower(), ch)


def to_digit(ch: str) -> str:
    """Map letters a-i to 0-8, other letters and non-digits to 9."""
    if is_digit(ch):
        return ch
    if is_letter(ch):
        lowered = to_lower(ch)
        if "a" <= lowered <= "i":
            return chr(ord("0") + ord(lowered) - ord("a"))
    return "9"


def to_punct(ch: str) -> str:
    """Keep punctuation, map anything else to a full stop."""
    return ch if is_punct(ch) else "."


def to_space(ch: str) -> str:
    """Keep white space, map anything else to a space."""
    return ch if is_space(ch) else " "


def to_print(ch: str) -> str:
    """Keep printable characters, map anything else to ``x``."""
    return ch if is_print(ch) else "x"


def to_letter(ch: str) -> str:
    """Keep letters, map anything else to a lower-case letter by code point."""
    if is_letter(ch):
        return ch
    return chr(ord("a") + ord(ch) % 26)


@dataclass(frozen=True)
class CharClass:
    """A named character class: a membership test and a conversion into it."""

    name: str
    check: Callable[[str], bool]
    translate: Callable[[str], str]


_CLASSES = {
    cls.name: cls
    for cls in (
        CharClass("alpha", is_letter, to_letter),
        CharClass("upper", is_upper, to_upper),
        CharClass("lower", is_lower, to_lower),
        CharClass("digit", is_digit, to_digit),
        CharClass("print", is_print, to_print),
        CharClass("punct", is_punct, to_punct),
        CharClass("space", is_space, to_space),
    )
}


def get_char_class(name: str) -> CharClass:
    """Return the class called ``name``; raise KeyError if there is none."""
    try:
        return _CLASSES[name]
    except KeyError:
        raise KeyError(name) from None