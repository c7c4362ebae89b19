"""Parsing of tr-style expressions and building of substitution tables."""

from __future__ import annotations

import re
from enum import Enum

from cctr.classes import CharClass, get_char_class

_CLASS_PATTERN = re.compile(r'"?:(\w+):"?', re.ASCII)


class ExpressionType(Enum):
    """The kind of an expression given on the command line."""

    REGULAR = "regular"
    RANGE = "range"
    FUNCTION = "function"


class InputType(Enum):
    """How target and translation combine."""

    REGULAR_TO_REGULAR = 0
    REGULAR_TO_FUNCTION = 1
    FUNCTION_TO_REGULAR = 2
    FUNCTION_TO_FUNCTION = 3


class ClassNotFoundError(ValueError):
    """Raised when an expression names no known character class."""

    def __init__(self, name: str) -> None:
        super().__init__(f"class specifier not found: {name!r}")
        self.name = name


def build_substitution_map(target: str, translation: str | None) -> dict[str, str | None]:
    """Map each target character to its replacement.

    Extra target characters map to the last translation character; with no
    translation every target character maps to None, meaning deletion.
    """
    if not translation:
        return dict.fromkeys(target)
    last = translation[-1]
    return {ch: translation[i] if i < len(translation) else last for i, ch in enumerate(target)}


def is_valid_range(text: str) -> bool:
    """Return True if ``text`` has a dash with a character on each side."""
    idx = text.find("-")
    return idx != -1 and len(text) >= 3 and 0 < idx < len(text) - 1


def classify_expression(text: str) -> ExpressionType:
    """Tell whether ``text`` is a class specifier, a range or plain characters."""
    if _CLASS_PATTERN.search(text):
        return ExpressionType.FUNCTION
    if is_valid_range(text):
        return ExpressionType.RANGE
    return ExpressionType.REGULAR


def expand_expression(text: str) -> tuple[ExpressionType, str]:
    """Classify ``text`` and expand its first range, if it has an ascending one."""
    kind = classify_expression(text)
    if kind is not ExpressionType.RANGE:
        return kind, text
    idx = text.index("-")
    start, end = text[idx - 1], text[idx + 1]
    if start > end:
        return kind, text
    span = "".join(chr(code) for code in range(ord(start), ord(end) + 1))
    return kind, text[: idx - 1] + span + text[idx + 2 :]


def load_char_class(text: str) -> CharClass:
    """Return the character class named in ``text``."""
    match = _CLASS_PATTERN.search(text)
    name = match.group(1) if match else ""
    if match:
        try:
            return get_char_class(name)
        except KeyError:
            pass
    raise ClassNotFoundError(name)


def determine_input_type(target_type: ExpressionType, translation_type: ExpressionType) -> InputType:
    """Combine the kinds of target and translation."""
    target_fn = target_type is ExpressionType.FUNCTION
    translation_fn = translation_type is ExpressionType.FUNCTION
    if target_fn and translation_fn:
        return InputType.FUNCTION_TO_FUNCTION
    if target_fn:
        return InputType.FUNCTION_TO_REGULAR
    if translation_fn:
        return InputType.REGULAR_TO_FUNCTION
    return InputType.REGULAR_TO_REGULAR