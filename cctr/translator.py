"""Character-by-character translation and deletion of text streams."""

from __future__ import annotations

import sys
from typing import Callable, Iterable, Sequence, TextIO

from cctr.substitution import (
    InputType,
    build_substitution_map,
    determine_input_type,
    expand_expression,
    load_char_class,
)

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class UsageError(ValueError):
    """Raised when the command line cannot be understood."""


class Translator:
    """Translates or deletes characters according to a target and a translation.

    A result of None from :meth:`translate_char` means the character is dropped.
    """

    def __init__(self, target: str, translation: str = "", delete: bool = False) -> None:
        self.delete = delete
        if delete:
            translation = ""
        target_type, target = expand_expression(target)
        translation_type, translation = expand_expression(translation)
        self.input_type = determine_input_type(target_type, translation_type)

        self._table: dict[str, str | None] = {}
        self._pending = ""
        self._check: Callable[[str], bool] | None = None
        self._convert: Callable[[str], str] | None = None

        if self.input_type is InputType.REGULAR_TO_REGULAR:
            self._table = build_substitution_map(target, translation)
            self._substitute = self._regular_to_regular
        elif self.input_type is InputType.REGULAR_TO_FUNCTION:
            self._table = build_substitution_map(target, None)
            self._convert = load_char_class(translation).translate
            self._substitute = self._regular_to_function
        elif self.input_type is InputType.FUNCTION_TO_REGULAR:
            self._check = load_char_class(target).check
            self._pending = translation
            self._substitute = self._function_to_regular
        else:
            self._check = load_char_class(target).check
            self._convert = load_char_class(translation).translate
            self._substitute = self._function_to_function

    def _regular_to_regular(self, ch: str) -> str | None:
        return self._table[ch] if ch in self._table else ch

    def _regular_to_function(self, ch: str) -> str | None:
        if ch not in self._table:
            return ch
        converted = self._convert(ch)
        self._table[ch] = converted
        return converted

    def _function_to_regular(self, ch: str) -> str | None:
        if not self._check(ch):
            return ch
        if self.delete or not self._pending:
            return None
        replacement = self._pending[0]
        self._table[ch] = replacement
        if len(self._pending) > 1:
            self._pending = self._pending[1:]
        return replacement

    def _function_to_function(self, ch: str) -> str | None:
        return self._convert(ch) if self._check(ch) else ch

    def translate_char(self, ch: str) -> str | None:
        """Return the replacement for ``ch``, or None if it is to be dropped."""
        cached = self._table.get(ch)
        if cached is not None:
            return None if self.delete else cached
        return self._substitute(ch)

    def translate_line(self, line: str) -> str:
        """Translate every character of ``line``."""
        return "".join(out for out in map(self.translate_char, line) if out is not None)

    def translate_stream(self, source: Iterable[str], sink: TextIO) -> None:
        """Translate ``source`` line by line, joining the results with newlines.

        No newline is written after the last line.
        """
        first = True
        for raw in source:
            line = raw[:-1] if raw.endswith("\n") else raw
            line = line.removesuffix("\r")
            if not first:
                sink.write("\n")
            first = False
            sink.write(self.translate_line(line))


def _parse_bool(flag: str, value: str) -> bool:
    if value in _TRUE_WORDS:
        return True
    if value in _FALSE_WORDS:
        return False
    raise UsageError(f"invalid boolean value {value!r} for flag {flag}")


def parse_args(argv: Sequence[str]) -> tuple[str, str, bool]:
    """Parse ``[-d] target [translation]`` into (target, translation, delete)."""
    args = list(argv)
    delete = False
    while args and args[0].startswith("-") and args[0] != "-":
        flag = args.pop(0)
        if flag == "--":
            break
        body = flag[2:] if flag.startswith("--") else flag[1:]
        if not body or body.startswith("-") or body.startswith("="):
            raise UsageError(f"bad flag syntax: {flag}")
        name, has_value, value = body.partition("=")
        if name != "d":
            raise UsageError(f"flag provided but not defined: -{name}")
        delete = _parse_bool(flag, value) if has_value else True

    if len(args) == 1 and delete:
        return args[0], "", True
    if len(args) < 2:
        raise UsageError(
            f"please provide chars to translate and chars to translate into: {args}"
        )
    if len(args) == 2:
        target, translation = args
        return target, "" if delete else translation, delete
    raise UsageError(f"please provide cmd <target> <translation>: {args}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command: translate standard input to standard output."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        target, translation, delete = parse_args(argv)
        translator = Translator(target, translation, delete)
    except ValueError as exc:
        print(f"couldn't load config {exc}")
        return 1
    translator.translate_stream(sys.stdin, sys.stdout)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())