from __future__ import annotations

import math
from enum import Enum, IntEnum

import pytest

from inistore.convert import try_parse, value_to_string
from inistore.errors import ConversionError


class Aspect(Enum):
    AUTO = "auto"
    WIDE = "16:9"


class Level(IntEnum):
    LOW = 1
    HIGH = 2


def test_value_to_string_canonical_forms():
    assert value_to_string(True) == "True"
    assert value_to_string(False) == "False"
    assert value_to_string(-42) == "-42"
    assert value_to_string(0.1) == "0.1"
    assert value_to_string(Aspect.WIDE) == "WIDE"
    assert value_to_string(Level.HIGH) == "HIGH"
    assert value_to_string(["a", "b"]) == "a,b"
    assert value_to_string("text") == "text"


def test_value_to_string_rejects_unknown_types():
    with pytest.raises(ConversionError):
        value_to_string({"a": 1})
    with pytest.raises(TypeError):
        value_to_string(object())


@pytest.mark.parametrize("text", ["True", "true", "YES", "on", "1", " true "])
def test_parse_bool_true(text: str):
    assert try_parse(text, bool) is True


@pytest.mark.parametrize("text", ["False", "no", "OFF", "0"])
def test_parse_bool_false(text: str):
    assert try_parse(text, bool) is False


def test_parse_bool_invalid():
    assert try_parse("maybe", bool) is None


def test_parse_int():
    assert try_parse("17", int) == 17
    assert try_parse("-3 ", int) == -3
    assert try_parse("0x1F", int) == 31
    assert try_parse("-0x10", int) == -16
    assert try_parse("12abc", int) is None
    assert try_parse("1.5", int) is None
    assert try_parse("", int) is None


def test_parse_float():
    assert try_parse("3.25", float) == 3.25
    assert try_parse("1e3 ", float) == 1000.0
    assert math.isinf(try_parse("inf", float))
    assert try_parse("1.0x", float) is None


@pytest.mark.parametrize("value", [0.1, 1 / 3, 1e-310, 123456789.123456789, -2.5e100])
def test_float_round_trip_is_exact(value: float):
    assert try_parse(value_to_string(value), float) == value


def test_parse_enum_by_name_or_value():
    assert try_parse("wide", Aspect) is Aspect.WIDE
    assert try_parse("16:9", Aspect) is Aspect.WIDE
    assert try_parse("2", Level) is Level.HIGH
    assert try_parse("medium", Level) is None


def test_parse_str_and_list():
    assert try_parse(" as is ", str) == " as is "
    assert try_parse("a, b,,c", list) == ["a", "b", "c"]


def test_unsupported_kind():
    with pytest.raises(ConversionError):
        try_parse("x", dict)
