# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass, a named and typed command line switch.

An option is declared once on a `Command` and bound at most once per parse
run. It is generic over the Python type of its value: the converter chosen at
declaration time (canonical for its `ValueType`, or a caller-supplied one) is
the only place that knows the concrete type, so the parser can treat every
option the same way through `bind()`, `given` and `value`.

Key Attributes:
- `short_name`: Matched against `-x` tokens.
- `long_name`: Matched against `--name` tokens.
- `value_type`: Selects the canonical converter and whether a value is consumed.
- `default`: Fallback value; an option without one is required.
- `converter`: `str -> T` callable used to bind raw tokens.
- `on_set`: Callback invoked with the owning command right after binding.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from cmdtree.exceptions import InvalidOptionValueError, MissingRequiredValueError
from cmdtree.logger import logger
from cmdtree.parser.utils import get_converter
from cmdtree.parser.value_type import ValueType

if TYPE_CHECKING:
    from cmdtree.command import Command

T = TypeVar("T")

TRUE_TOKEN = "true"


@dataclass(eq=False)
class Option(Generic[T]):
    """
    Represents a command line option.

    Attributes:
        short_name (str): Name matched by a single-dash token, e.g. `i` for `-i`.
        long_name (str | None): Name matched by a double-dash token, e.g. `index` for `--index`.
        description (str): Help text for the option.
        value_type (ValueType): The type of the option value.
        default (T | None): Value used when the option is not given.
        converter (Callable[[str], T] | None): Converts a raw token to the option value.
            Defaults to the canonical converter of `value_type`.
        on_set (Callable[[Command], Any] | None): Called with the owning command after binding.
    """

    short_name: str
    long_name: str | None = None
    description: str = ""
    value_type: ValueType = ValueType.TEXT
    default: T | None = None
    converter: Callable[[str], T] | None = None
    on_set: Callable[[Command], Any] | None = None
    bound_value: T | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.value_type = ValueType(self.value_type)
        if self.converter is None:
            self.converter = get_converter(self.value_type)

    @property
    def takes_value(self) -> bool:
        """True if the option consumes the next token as its value."""
        return self.value_type.takes_value

    @property
    def required(self) -> bool:
        return self.default is None

    @property
    def given(self) -> bool:
        return self.bound_value is not None

    @property
    def display_name(self) -> str:
        """Name used in error messages: the long name if declared, else the short one."""
        return self.long_name or self.short_name

    @property
    def flags(self) -> tuple[str, ...]:
        if self.long_name:
            return (f"-{self.short_name}", f"--{self.long_name}")
        return (f"-{self.short_name}",)

    @property
    def value(self) -> T:
        """
        Return the bound value, falling back to the default.

        Raises:
            MissingRequiredValueError: If the option has neither.
        """
        if self.bound_value is not None:
            return self.bound_value
        if self.default is not None:
            return self.default
        raise MissingRequiredValueError(self.display_name)

    def convert(self, raw_token: str) -> T:
        """
        Run the converter on a raw token.

        Raises:
            InvalidOptionValueError: If the converter raises or returns None.
        """
        assert self.converter is not None, "converter should be set in __post_init__"
        try:
            converted = self.converter(raw_token)
        except Exception as error:
            raise InvalidOptionValueError(
                self.display_name, raw_token, str(error)
            ) from error
        if converted is None:
            raise InvalidOptionValueError(self.display_name, raw_token)
        return converted

    def bind(self, raw_token: str, command: Command | None = None) -> T:
        """
        Convert and store a raw token, then fire `on_set`.

        Args:
            raw_token (str): The token following the switch, or `"true"` for flags.
            command (Command | None): The command owning this option, passed to `on_set`.

        Returns:
            T: The converted value.
        """
        self.bound_value = self.convert(raw_token)
        logger.debug("Option '%s' bound to %r", self.display_name, self.bound_value)
        if self.on_set is not None:
            self.on_set(command)
        return self.bound_value

    def bind_flag(self, command: Command | None = None) -> T:
        """Bind a flag option with the synthesized `"true"` token."""
        return self.bind(TRUE_TOKEN, command)

    def reset(self) -> None:
        """Forget the bound value so the option can be parsed again."""
        self.bound_value = None

    def matches_short(self, name: str) -> bool:
        return self.short_name == name

    def matches_long(self, name: str) -> bool:
        return self.long_name is not None and self.long_name == name

    def get_default_text(self) -> str:
        """Get the default value as shown in help output."""
        if self.default is None or self.value_type is ValueType.BOOLEAN:
            return ""
        default = self.default
        if isinstance(default, Enum):
            default = default.value
        elif hasattr(default, "isoformat"):
            default = default.isoformat()
        return f"(default: '{default}')"

    def get_flags_text(self) -> str:
        """Get the flags as shown in help output, e.g. `-i --index`."""
        return " ".join(self.flags)

    def __str__(self) -> str:
        required = " *" if self.required else ""
        return (
            f"Option({self.get_flags_text()}{required}, type={self.value_type}, "
            f"given={self.given})"
        )
