from datetime import date, datetime, time
from enum import Enum

import pytest

from cmdtree.parser.utils import (
    coerce_bool,
    coerce_date,
    coerce_double,
    coerce_float,
    coerce_int,
    coerce_time,
    coerce_value,
    get_converter,
)
from cmdtree.parser.value_type import ValueType


@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", ValueType.INTEGER, 42),
        ("-7", ValueType.INTEGER, -7),
        ("+3", ValueType.INTEGER, 3),
        ("3.14", ValueType.DOUBLE, 3.14),
        ("1e3", ValueType.DOUBLE, 1000.0),
        ("hello", ValueType.TEXT, "hello"),
        ("", ValueType.TEXT, ""),
        ("TRUE", ValueType.BOOLEAN, True),
        ("False", ValueType.BOOLEAN, False),
        ("2025-06-07", ValueType.DATE, date(2025, 6, 7)),
        ("12:13:14", ValueType.TIME, time(12, 13, 14)),
        ("12:13", ValueType.TIME, time(12, 13)),
    ],
)
def test_coerce_value_basic(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int, 42),
        ("2.5", float, 2.5),
        ("true", bool, True),
        ("text", str, "text"),
        ("2021-02-03", date, date(2021, 2, 3)),
        ("01:02:03", time, time(1, 2, 3)),
    ],
)
def test_coerce_value_builtin_types(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


def test_coerce_value_string_alias():
    assert coerce_value("11", "int") == 11
    assert coerce_value("x", "str") == "x"


@pytest.mark.parametrize("value", ["abc", "1.5", "", " 42", "4_2", "0x10", "٤٢"])
def test_coerce_int_rejects(value):
    with pytest.raises(ValueError):
        coerce_int(value)


@pytest.mark.parametrize("value", ["abc", "1,5", "", "1_0", "1.5.2"])
def test_coerce_double_rejects(value):
    with pytest.raises(ValueError):
        coerce_double(value)


def test_coerce_double_special_values():
    assert coerce_double("inf") == float("inf")
    assert coerce_double("-Infinity") == float("-inf")


def test_coerce_float_rounds_to_single_precision():
    result = coerce_float("11.1")
    assert result != 11.1
    assert result == pytest.approx(11.1, rel=1e-6)


def test_coerce_float_out_of_range():
    with pytest.raises(ValueError):
        coerce_float("1e39")
    with pytest.raises(ValueError):
        coerce_float("-3.5e38")


def test_coerce_float_keeps_infinity():
    assert coerce_float("inf") == float("inf")
    assert coerce_float("3.4e38") == pytest.approx(3.4e38, rel=1e-6)


@pytest.mark.parametrize("value", ["yes", "1", "on", "", "t", " true ", "false\n"])
def test_coerce_bool_rejects_anything_but_true_false(value):
    with pytest.raises(ValueError):
        coerce_bool(value)


@pytest.mark.parametrize(
    "value", ["2021-13-01", "2021-02-30", "20210203", "2021-02", "03/02/2021"]
)
def test_coerce_date_rejects(value):
    with pytest.raises(ValueError):
        coerce_date(value)


@pytest.mark.parametrize(
    "value", ["25:00", "24:00", "24:00:00", "12", "1:02:03", "12:60", "noon"]
)
def test_coerce_time_rejects(value):
    with pytest.raises(ValueError):
        coerce_time(value)


def test_coerce_datetime():
    assert coerce_value("2025-06-07 12:13", ValueType.DATETIME) == datetime(
        2025, 6, 7, 12, 13
    )
    with pytest.raises(ValueError) as excinfo:
        coerce_value("not a date", ValueType.DATETIME)
    assert "could not be parsed as a datetime" in str(excinfo.value)


def test_coerce_value_enum():
    class Color(Enum):
        RED = "red"
        GREEN = "green"

    assert coerce_value("red", Color) == Color.RED
    assert coerce_value("GREEN", Color) == Color.GREEN

    with pytest.raises(ValueError):
        coerce_value("yellow", Color)


def test_get_converter():
    assert get_converter(ValueType.INTEGER)("5") == 5
    assert get_converter("bool")("true") is True


def test_coerce_value_unknown_type():
    with pytest.raises(ValueError):
        coerce_value("1", "complex")
