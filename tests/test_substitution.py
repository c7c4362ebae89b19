import pytest

from cctr.substitution import (
    ClassNotFoundError,
    ExpressionType,
    InputType,
    build_substitution_map,
    classify_expression,
    determine_input_type,
    expand_expression,
    is_valid_range,
    load_char_class,
)


def test_build_map_pairs_characters():
    assert build_substitution_map("lo12", "bo34") == {"l": "b", "o": "o", "1": "3", "2": "4"}


def test_build_map_repeats_last_translation_char():
    assert build_substitution_map("abc", "x") == {"a": "x", "b": "x", "c": "x"}


def test_build_map_without_translation_deletes():
    assert build_substitution_map("e.", "") == {"e": None, ".": None}
    assert build_substitution_map("e.", None) == {"e": None, ".": None}


def test_build_map_ignores_extra_translation():
    result = build_substitution_map("æ%", "å=.")
    assert result == {"æ": "å", "%": "="}


@pytest.mark.parametrize(
    "text, expected",
    [("a-d", True), ("abc-f", True), ("-ab", False), ("ab-", False), ("a-", False), ("abc", False)],
)
def test_is_valid_range(text, expected):
    assert is_valid_range(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("[:lower:]", ExpressionType.FUNCTION),
        (":upper:", ExpressionType.FUNCTION),
        ("a-d", ExpressionType.RANGE),
        ("lo12", ExpressionType.REGULAR),
    ],
)
def test_classify_expression(text, expected):
    assert classify_expression(text) is expected


def test_expand_simple_range_is_contiguous():
    kind, expanded = expand_expression("a-d")
    assert kind is ExpressionType.RANGE
    assert expanded[0] == "a" and expanded[-1] == "d"
    codes = [ord(c) for c in expanded]
    assert codes == list(range(codes[0], codes[0] + len(codes)))


def test_expand_keeps_prefix_and_suffix():
    kind, expanded = expand_expression("xa-cy")
    assert kind is ExpressionType.RANGE
    assert expanded.startswith("xa") and expanded.endswith("cy")
    assert "-" not in expanded
    assert len(expanded) == len("xa-cy") - 3 + 3


def test_expand_descending_range_is_left_alone():
    assert expand_expression("d-a") == (ExpressionType.RANGE, "d-a")


def test_expand_non_range_unchanged():
    assert expand_expression("lo12") == (ExpressionType.REGULAR, "lo12")
    assert expand_expression("[:lower:]") == (ExpressionType.FUNCTION, "[:lower:]")


def test_load_char_class():
    cls = load_char_class("[:upper:]")
    assert cls.translate("a") == "A"
    assert cls.check("A") is True


def test_load_char_class_unknown():
    with pytest.raises(ClassNotFoundError) as info:
        load_char_class("[:nope:]")
    assert info.value.name == "nope"


def test_load_char_class_without_specifier():
    with pytest.raises(ClassNotFoundError) as info:
        load_char_class("abc")
    assert info.value.name == ""


@pytest.mark.parametrize(
    "target, translation, expected",
    [
        (ExpressionType.FUNCTION, ExpressionType.REGULAR, InputType.FUNCTION_TO_REGULAR),
        (ExpressionType.FUNCTION, ExpressionType.RANGE, InputType.FUNCTION_TO_REGULAR),
        (ExpressionType.REGULAR, ExpressionType.FUNCTION, InputType.REGULAR_TO_FUNCTION),
        (ExpressionType.FUNCTION, ExpressionType.FUNCTION, InputType.FUNCTION_TO_FUNCTION),
        (ExpressionType.RANGE, ExpressionType.REGULAR, InputType.REGULAR_TO_REGULAR),
    ],
)
def test_determine_input_type(target, translation, expected):
    assert determine_input_type(target, translation) is expected