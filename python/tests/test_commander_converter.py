"""Parameter conversion tests for commander."""

from __future__ import annotations

import enum

import pytest

from commander.converter import ConversionError, ParameterConverter, convert, parse_color
from commander.kinds import (
    BOOLEAN,
    COLOR,
    DECIMAL,
    INTEGER,
    TEXT,
    VECTOR2,
    VECTOR3,
    Color,
    Vector2,
    Vector3,
    array_of,
    enum_of,
    list_of,
    map_of,
)


class Speed(enum.Enum):
    SLOW = 1
    FAST = 2


def test_vector3_from_three_tokens():
    assert convert([VECTOR3], ["1", "2", "3"]) == [Vector3(1.0, 2.0, 3.0)]


def test_vector3_from_single_token():
    assert convert([VECTOR3], ["1,2,3"]) == [Vector3(1.0, 2.0, 3.0)]
    assert convert([VECTOR3], ["(1;2;3)"]) == [Vector3(1.0, 2.0, 3.0)]


def test_vector3_with_comma_decimals_across_tokens():
    assert convert([VECTOR3], ["1,5", "2,5", "3,5"]) == [Vector3(1.5, 2.5, 3.5)]


def test_vector3_with_too_few_tokens_degrades_without_consuming():
    assert convert([VECTOR3, TEXT], ["1", "2"]) == [Vector3(), "1"]


def test_vector3_with_bad_component_consumes_arity():
    assert convert([VECTOR3, TEXT], ["1", "x", "3", "tail"]) == [Vector3(), "tail"]


def test_vector2_with_comma_decimals_across_tokens():
    assert convert([VECTOR2], ["1,5", "2,5"]) == [Vector2(1.5, 2.5)]


def test_malformed_single_token_vector_consumes_one_token():
    assert convert([VECTOR3, TEXT, TEXT], ["1,2,x", "hello", "world"]) == [Vector3(), "hello", "world"]


def test_single_token_vector_followed_by_words():
    assert convert([VECTOR2, TEXT], ["3,4", "left"]) == [Vector2(3.0, 4.0), "left"]


def test_vector2_consumes_two_tokens():
    assert convert([VECTOR2, INTEGER], ["4", "5", "6"]) == [Vector2(4.0, 5.0), 6]


@pytest.mark.parametrize(
    "token,expected",
    [("on", True), ("TRUE", True), ("1", True), ("yes", True), ("off", False), ("no", False), ("maybe", False)],
)
def test_boolean_words(token, expected):
    assert convert([BOOLEAN], [token]) == [expected]


def test_integer_rejects_fractions():
    assert convert([INTEGER], ["3.5"]) == [0]
    assert convert([INTEGER], ["-12"]) == [-12]


def test_decimal_accepts_comma_separator():
    assert convert([DECIMAL], ["2,5"]) == [2.5]
    assert convert([DECIMAL], ["abc"]) == [0.0]


def test_missing_tokens_get_zero_values():
    assert convert([TEXT, INTEGER, DECIMAL, BOOLEAN, COLOR], []) == ["", 0, 0.0, False, Color(1.0, 1.0, 1.0, 1.0)]


def test_extra_tokens_are_ignored():
    assert convert([TEXT], ["a", "b", "c"]) == ["a"]


@pytest.mark.parametrize(
    "token,expected",
    [
        ("red", Color(1.0, 0.0, 0.0, 1.0)),
        ("RED", Color(1.0, 0.0, 0.0, 1.0)),
        ("vermelho", Color(1.0, 0.0, 0.0, 1.0)),
        ("#FF0000", Color(1.0, 0.0, 0.0, 1.0)),
        ("#f00", Color(1.0, 0.0, 0.0, 1.0)),
        ("#00FF0080", Color(0.0, 1.0, 0.0, 128 / 255.0)),
        ("(255,0,0)", Color(1.0, 0.0, 0.0, 1.0)),
        ("(0,0,1,0.5)", Color(0.0, 0.0, 1.0, 0.5)),
    ],
)
def test_color_forms(token, expected):
    assert parse_color(token) == pytest.approx(expected)


def test_unknown_color_degrades_to_white():
    assert convert([COLOR], ["chartreuse-ish"]) == [Color()]


def test_enum_by_name_or_value():
    kind = enum_of(Speed)
    assert convert([kind], ["fast"]) == [Speed.FAST]
    assert convert([kind], ["1"]) == [Speed.SLOW]
    assert convert([kind], ["warp"]) == [Speed.SLOW]


def test_collections():
    assert convert([list_of(INTEGER)], ["1,2;3"]) == [[1, 2, 3]]
    assert convert([array_of(TEXT)], ["a, b"]) == [("a", "b")]
    assert convert([map_of(TEXT, INTEGER)], ["a:1;b:2;junk"]) == [{"a": 1, "b": 2}]


def test_collection_with_bad_element_degrades_whole_slot():
    assert convert([list_of(INTEGER)], ["1,x,3"]) == [[]]


def test_strict_mode_raises_conversion_error():
    converter = ParameterConverter(strict=True)
    with pytest.raises(ConversionError) as excinfo:
        converter.convert([TEXT, INTEGER], ["name", "many"])
    assert excinfo.value.token == "many"
    assert excinfo.value.kind == INTEGER


def test_strict_mode_still_fills_missing_slots():
    assert ParameterConverter(strict=True).convert([TEXT, VECTOR3], ["name"]) == ["name", Vector3()]


def test_convert_token_wraps_errors():
    with pytest.raises(ConversionError):
        ParameterConverter().convert_token("nope", BOOLEAN)
