# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains the canonical value converters used by Cmdtree options.

Each converter turns one raw command line token into a typed Python value or
raises `ValueError`. Converters are pure: they never touch option or command
state, so the parser can call them without side effects and `Option.bind()`
can wrap their failures into `InvalidOptionValueError`.

Functions:
- coerce_text: Identity conversion.
- coerce_int: Base-10 integer with an optional sign.
- coerce_float: Decimal number rounded to 32-bit precision.
- coerce_double: Decimal number with 64-bit precision.
- coerce_date: ISO-8601 calendar date (`YYYY-MM-DD`).
- coerce_time: ISO-8601 wall-clock time (`HH:MM[:SS[.ffffff]]`).
- coerce_datetime: Anything `dateutil` can parse as a datetime.
- coerce_bool: Case-insensitive `true` / `false`.
- coerce_enum: Member of an Enum class, by name or value.
- get_converter: Look up the canonical converter for a `ValueType`.
- coerce_value: General-purpose coercion to a `ValueType`, Enum or builtin type.
"""
import math
import re
import struct
from datetime import date, datetime, time
from enum import Enum, EnumMeta
from typing import Any, Callable

from dateutil import parser as date_parser
from dateutil.parser import isoparser

from cmdtree.parser.value_type import ValueType

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")
_SPECIAL_DECIMALS = {"nan", "inf", "infinity"}
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_TIME_PATTERN = re.compile(r"[0-9]{2}:[0-9]{2}(:[0-9]{2}(\.[0-9]{1,6})?)?")

_iso_parser = isoparser()


def coerce_text(value: str) -> str:
    """Return the token unchanged."""
    return value


def coerce_int(value: str) -> int:
    """
    Convert a base-10 integer token.

    Only ASCII digits with an optional leading sign are accepted; whitespace,
    underscores and other bases are rejected.

    Raises:
        ValueError: If the token is not a base-10 integer.
    """
    if not _INTEGER_PATTERN.fullmatch(value):
        raise ValueError(f"'{value}' is not a valid integer")
    return int(value, 10)


def coerce_double(value: str) -> float:
    """
    Convert a decimal token to a 64-bit float.

    Parsing is locale-independent: the decimal separator is always `.`.
    `nan`, `inf` and `infinity` (with an optional sign) are accepted.

    Raises:
        ValueError: If the token is not a decimal number.
    """
    if (
        not _DECIMAL_PATTERN.fullmatch(value)
        and value.lstrip("+-").lower() not in _SPECIAL_DECIMALS
    ):
        raise ValueError(f"'{value}' is not a valid decimal number")
    return float(value)


def coerce_float(value: str) -> float:
    """
    Convert a decimal token and round it to 32-bit precision.

    Raises:
        ValueError: If the token is not a decimal number or does not fit in 32 bits.
    """
    number = coerce_double(value)
    try:
        result = struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError as error:
        raise ValueError(f"'{value}' is out of range for a 32-bit float") from error
    if math.isinf(result) and not math.isinf(number):
        raise ValueError(f"'{value}' is out of range for a 32-bit float")
    return result


def coerce_date(value: str) -> date:
    """
    Convert an ISO-8601 `YYYY-MM-DD` token to a `date`.

    Raises:
        ValueError: If the token is not a valid calendar date.
    """
    if not _DATE_PATTERN.fullmatch(value):
        raise ValueError(f"'{value}' is not an ISO-8601 date (YYYY-MM-DD)")
    return _iso_parser.parse_isodate(value)


def coerce_time(value: str) -> time:
    """
    Convert an ISO-8601 `HH:MM[:SS[.ffffff]]` token to a `time`.

    Raises:
        ValueError: If the token is not a valid wall-clock time.
    """
    if not _TIME_PATTERN.fullmatch(value):
        raise ValueError(f"'{value}' is not an ISO-8601 time (HH:MM:SS)")
    # dateutil reads 24:00 as midnight
    if value.startswith("24"):
        raise ValueError(f"'{value}' is not a valid time of day")
    return _iso_parser.parse_isotime(value)


def coerce_datetime(value: str) -> datetime:
    """Convert a token to a `datetime` using `dateutil`'s flexible parser."""
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError) as error:
        raise ValueError(
            f"Value '{value}' could not be parsed as a datetime"
        ) from error


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Only `true` and `false` are accepted, in any letter case. Every other token
    is a conversion failure rather than `False`.

    Args:
        value (str): The raw token.

    Returns:
        bool: Parsed boolean result.
    """
    normalized = value.lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    raise ValueError(f"'{value}' is not a boolean (expected 'true' or 'false')")


def coerce_enum(value: str, enum_type: type[Enum]) -> Enum:
    """
    Resolve a token to a member of `enum_type`.

    The token is matched against member names first, then against the string
    form of member values, so both `RED` and `red` select `Color.RED = "red"`.

    Raises:
        ValueError: If no member matches.
    """
    try:
        return enum_type[value]
    except KeyError:
        pass
    for member in enum_type:
        if str(member.value) == value:
            return member
    choices = ", ".join(str(member.value) for member in enum_type)
    raise ValueError(f"'{value}' should be one of {{{choices}}}")


CONVERTERS: dict[ValueType, Callable[[str], Any]] = {
    ValueType.TEXT: coerce_text,
    ValueType.INTEGER: coerce_int,
    ValueType.FLOAT: coerce_float,
    ValueType.DOUBLE: coerce_double,
    ValueType.DATE: coerce_date,
    ValueType.TIME: coerce_time,
    ValueType.DATETIME: coerce_datetime,
    ValueType.BOOLEAN: coerce_bool,
}

_BUILTIN_TYPES: dict[type, ValueType] = {
    str: ValueType.TEXT,
    int: ValueType.INTEGER,
    float: ValueType.DOUBLE,
    bool: ValueType.BOOLEAN,
    date: ValueType.DATE,
    time: ValueType.TIME,
    datetime: ValueType.DATETIME,
}


def get_converter(value_type: ValueType | str) -> Callable[[str], Any]:
    """Return the canonical converter for a value type or one of its aliases."""
    return CONVERTERS[ValueType(value_type)]


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Attempt to convert a string to the given target type.

    The target can be a `ValueType` (or its string alias), an Enum class, or one
    of the builtin types `str`, `int`, `float`, `bool`, `date`, `time` and
    `datetime`.

    Args:
        value (str): The input string to convert.
        target_type (Any): The desired type.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If conversion fails or the target type is unsupported.
    """
    if isinstance(target_type, EnumMeta) and target_type is not ValueType:
        return coerce_enum(value, target_type)

    if isinstance(target_type, type) and target_type in _BUILTIN_TYPES:
        return CONVERTERS[_BUILTIN_TYPES[target_type]](value)

    return get_converter(target_type)(value)
