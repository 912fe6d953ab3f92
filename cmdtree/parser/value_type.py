# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ValueType`, an enum naming the value types an `Option` can hold.

Each member selects a canonical converter in `cmdtree.parser.utils`. Options
declared in code usually go through the typed `Command.add_*_option()` helpers;
options declared in YAML/TOML configuration name their type as a string, so
the enum accepts Python-flavoured aliases as well.

Exports:
    - ValueType: Enum of supported option value types.

Example:
    ValueType("int")     → ValueType.INTEGER
    ValueType("str")     → ValueType.TEXT
    ValueType("Boolean") → ValueType.BOOLEAN
"""
from __future__ import annotations

from enum import Enum


class ValueType(Enum):
    """
    Supported option value types.

    Members:
        TEXT: Raw string, returned as given.
        INTEGER: Base-10 integer.
        FLOAT: Decimal number rounded to 32-bit precision.
        DOUBLE: Decimal number with 64-bit precision.
        DATE: ISO-8601 calendar date (`YYYY-MM-DD`).
        TIME: ISO-8601 wall-clock time (`HH:MM[:SS]`).
        DATETIME: Free-form date and time.
        BOOLEAN: `true` or `false`; options of this type are flags.

    Aliases:
        - "str", "string" → "text"
        - "int" → "integer"
        - "float32" → "float"
        - "float64" → "double"
        - "bool", "flag" → "boolean"
    """

    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    DOUBLE = "double"
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    BOOLEAN = "boolean"

    @property
    def takes_value(self) -> bool:
        """Return True unless options of this type are pure flags."""
        return self is not ValueType.BOOLEAN

    @classmethod
    def choices(cls) -> list[ValueType]:
        """Return a list of all value types."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "str": "text",
            "string": "text",
            "int": "integer",
            "float32": "float",
            "float64": "double",
            "bool": "boolean",
            "flag": "boolean",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ValueType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls.choices())
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the value type."""
        return self.value
