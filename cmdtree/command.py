# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Command` class, a node of a declarative command tree.

A command owns its options, its subcommands and exactly one positional
`ArgumentSpec`. The tree is built once, before any parsing, and then handed
the process arguments through `parse()`:

    callgraph = Command("callgraph", "Call graph generator")
    index_file = callgraph.add_text_option("i", "index", "Index file.", default="INDEX.TXT")
    callgraph.add_help_option()

    query = callgraph.add_subcommand("query", "Print call graph as list.")
    fmt = query.add_text_option("f", "format", "Output columns.")
    query.set_argument("program_name", minimum=1, maximum=1)

    @query.set_on_complete
    def run_query(command: Command) -> None:
        print(fmt.value, command.argument.values[0])

    callgraph.parse(sys.argv[1:])

Children are owned by their parent's subcommand mapping. The parent link held
by a child is a weak reference and only answers `is_root()` and upward walks.

Binding state lives on the options and argument specs themselves, so a tree
keeps the values of its last parse until `reset()` is called.
"""
from __future__ import annotations

import sys
import weakref
from datetime import date, datetime, time
from enum import Enum
from functools import partial
from typing import Any, Callable, Iterator, Sequence

from cmdtree.console import console
from cmdtree.exceptions import CommandDeclarationError, DuplicateDeclarationError
from cmdtree.help import get_help_text, get_usage, render_help
from cmdtree.parser.argument_spec import ArgumentSpec
from cmdtree.parser.command_parser import parse_command
from cmdtree.parser.option import Option
from cmdtree.parser.utils import coerce_enum
from cmdtree.parser.value_type import ValueType

CommandCallback = Callable[["Command"], Any]


class Command:
    """
    A node in the command tree.

    Attributes:
        name (str): Token that selects this command as a subcommand.
        description (str): Summary shown in help output.
        argument (ArgumentSpec): Positional capture rule, accepting no values by default.
        on_complete (Callable[[Command], Any] | None): Called with this command once it
            has parsed and validated successfully.
    """

    def __init__(
        self,
        name: str,
        description: str = "",
        on_complete: CommandCallback | None = None,
        parent: Command | None = None,
    ) -> None:
        self._validate_name(name, "command")
        self.name: str = name
        self.description: str = description
        self.on_complete: CommandCallback | None = on_complete
        self.argument: ArgumentSpec = ArgumentSpec()
        self._options: list[Option] = []
        self._short_map: dict[str, Option] = {}
        self._long_map: dict[str, Option] = {}
        self._children: dict[str, Command] = {}
        self._parent: weakref.ReferenceType[Command] | None = (
            weakref.ref(parent) if parent is not None else None
        )

    @staticmethod
    def _validate_name(name: Any, kind: str) -> None:
        if not isinstance(name, str) or not name:
            raise CommandDeclarationError(f"{kind} name must be a non-empty string")
        if name.startswith("-"):
            raise CommandDeclarationError(
                f"{kind} name '{name}' must be given without leading dashes"
            )
        if any(char.isspace() for char in name):
            raise CommandDeclarationError(
                f"{kind} name '{name}' must not contain spaces"
            )

    @property
    def parent(self) -> Command | None:
        return self._parent() if self._parent is not None else None

    def is_root(self) -> bool:
        return self._parent is None

    @property
    def root(self) -> Command:
        command = self
        while command.parent is not None:
            command = command.parent
        return command

    @property
    def path(self) -> list[str]:
        """Names from the root down to this command."""
        names = [self.name]
        command = self.parent
        while command is not None:
            names.append(command.name)
            command = command.parent
        return list(reversed(names))

    @property
    def options(self) -> list[Option]:
        """Options in declaration order."""
        return list(self._options)

    @property
    def subcommands(self) -> list[Command]:
        """Subcommands in declaration order."""
        return list(self._children.values())

    def get_short_option(self, name: str) -> Option | None:
        return self._short_map.get(name)

    def get_long_option(self, name: str) -> Option | None:
        return self._long_map.get(name)

    def get_option(self, name: str) -> Option | None:
        """Return the option declared with this short or long name, if any."""
        return self._long_map.get(name) or self._short_map.get(name)

    def get_subcommand(self, name: str) -> Command | None:
        return self._children.get(name)

    def walk(self) -> Iterator[Command]:
        """Yield this command and every command below it, depth first."""
        yield self
        for child in self._children.values():
            yield from child.walk()

    def add_option(
        self,
        short_name: str,
        long_name: str | None = None,
        description: str = "",
        default: Any = None,
        type: ValueType | str = ValueType.TEXT,
        converter: Callable[[str], Any] | None = None,
        on_set: CommandCallback | None = None,
    ) -> Option:
        """
        Declare a new option on this command.

        An option without a default is required. Boolean options are flags and
        default to False. A string default for a non-text option is converted with
        the option's converter, so `default="2021-02-03"` works for date options.

        Args:
            short_name (str): Name matched by `-short_name`.
            long_name (str | None): Name matched by `--long_name`.
            description (str): Help text.
            default (Any): Value used when the option is not given.
            type (ValueType | str): Value type, selecting the canonical converter.
            converter (Callable[[str], Any] | None): Custom converter overriding the canonical one.
            on_set (Callable[[Command], Any] | None): Called with this command right after binding.

        Returns:
            Option: The declared option.

        Raises:
            DuplicateDeclarationError: If the short or long name is already declared here.
            CommandDeclarationError: If a name or the default value is invalid.
        """
        self._validate_name(short_name, "option")
        if long_name is not None:
            self._validate_name(long_name, "option")
        if short_name in self._short_map:
            raise DuplicateDeclarationError(short_name, "option")
        if long_name is not None and long_name in self._long_map:
            raise DuplicateDeclarationError(long_name, "option")
        try:
            value_type = ValueType(type)
        except ValueError as error:
            raise CommandDeclarationError(str(error)) from error

        option: Option = Option(
            short_name=short_name,
            long_name=long_name,
            description=description,
            value_type=value_type,
            converter=converter,
            on_set=on_set,
        )
        if value_type is ValueType.BOOLEAN and default is None:
            default = False
        if isinstance(default, str) and value_type is not ValueType.TEXT:
            try:
                default = option.convert(default)
            except Exception as error:
                raise CommandDeclarationError(
                    f"Default value {default!r} for option '{option.display_name}' "
                    f"is not a valid {value_type}: {error}"
                ) from error
        option.default = default

        self._options.append(option)
        self._short_map[short_name] = option
        if long_name is not None:
            self._long_map[long_name] = option
        return option

    def add_text_option(
        self,
        short_name: str,
        long_name: str | None = None,
        description: str = "",
        default: str | None = None,
        on_set: CommandCallback | None = None,
        converter: Callable[[str], str] | None = None,
    ) -> Option[str]:
        return self.add_option(
            short_name,
            long_name,
            description,
            default,
            ValueType.TEXT,
            converter,
            on_set,
        )

    def add_int_option(
        self,
        short_name: str,
        long_name: str | None = None,
        description: str = "",
        default: int | None = None,
        on_set: CommandCallback | None = None,
        converter: Callable[[str], int] | None = None,
    ) -> Option[int]:
        return self.add_option(
            short_name,
            long_name,
            description,
            default,
            ValueType.INTEGER,
            converter,
            on_set,
        )

    def add_float_option(
        self,
        short_name: str,
        long_name: str | None = None,
        description: str = "",
        default: float | None = None,
        on_set: CommandCallback | None = None,
        converter: Callable[[str], float] | None = None,
    ) -> Option[float]:
        return self.add_option(
            short_name,
            long_name,
            description,
            default,
            ValueType.FLOAT,
            converter,
            on_set,
        )

    def add_double_option(
        self,
        short_name: str,
        long_name: str | None = None,
        description: str = "",
        default: float | None = None,
        on_set: CommandCallback | None = None,
        converter: Callable[[str], float] | None = None,
    ) -> Option[float]:
        return self.add_option(
            short_name,
            long_name,
            description,
            default,
            ValueType.DOUBLE,
            converter,
            on_set,
        )

    def add_date_option(
        self,
        short_name: str,
        long_name: str | None = None,
        description: str = "",
        default: date | str | None = None,
        on_set: CommandCallback | None = None,
        converter: Callable[[str], date] | None = None,
    ) -> Option[date]:
        return self.add_option(
            short_name,
            long_name,
            description,
            default,
            ValueType.DATE,
            converter,
            on_set,
        )

    def add_time_option(
        self,
        short_name: str,
        long_name: str | None = None,
        description: str = "",
        default: time | str | None = None,
        on_set: CommandCallback | None = None,
        converter: Callable[[str], time] | None = None,
    ) -> Option[time]:
        return self.add_option(
            short_name,
            long_name,
            description,
            default,
            ValueType.TIME,
            converter,
            on_set,
        )

    def add_datetime_option(
        self,
        short_name: str,
        long_name: str | None = None,
        description: str = "",
        default: datetime | str | None = None,
        on_set: CommandCallback | None = None,
        converter: Callable[[str], datetime] | None = None,
    ) -> Option[datetime]:
        return self.add_option(
            short_name,
            long_name,
            description,
            default,
            ValueType.DATETIME,
            converter,
            on_set,
        )

    def add_bool_option(
        self,
        short_name: str,
        long_name: str | None = None,
        description: str = "",
        on_set: CommandCallback | None = None,
        converter: Callable[[str], bool] | None = None,
    ) -> Option[bool]:
        return self.add_option(
            short_name,
            long_name,
            description,
            False,
            ValueType.BOOLEAN,
            converter,
            on_set,
        )

    def add_enum_option(
        self,
        short_name: str,
        long_name: str | None = None,
        description: str = "",
        enum_type: type[Enum] | None = None,
        default: Enum | str | None = None,
        on_set: CommandCallback | None = None,
    ) -> Option[Enum]:
        """
        Declare an option whose value is a member of `enum_type`.

        Tokens and string defaults select a member by name or by value.

        Raises:
            CommandDeclarationError: If `enum_type` is not an Enum class or the
                default is not one of its members.
        """
        if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
            raise CommandDeclarationError(
                f"option '{long_name or short_name}' needs an Enum class, "
                f"got {enum_type!r}"
            )
        if isinstance(default, str):
            try:
                default = coerce_enum(default, enum_type)
            except ValueError as error:
                raise CommandDeclarationError(
                    f"Default value {default!r} for option '{long_name or short_name}' "
                    f"is not valid: {error}"
                ) from error
        return self.add_option(
            short_name,
            long_name,
            description,
            default,
            ValueType.TEXT,
            partial(coerce_enum, enum_type=enum_type),
            on_set,
        )

    def add_help_option(
        self,
        short_name: str = "h",
        long_name: str | None = "help",
        description: str = "Show this help message.",
    ) -> Option[bool]:
        """Add a flag that renders this command's help and exits with status 0."""

        def _show_help(command: Command) -> None:
            command.render_help()
            sys.exit(0)

        return self.add_bool_option(
            short_name, long_name, description, on_set=_show_help
        )

    def add_subcommand(
        self,
        name: str,
        description: str = "",
        on_complete: CommandCallback | None = None,
    ) -> Command:
        """
        Declare a subcommand of this command.

        Raises:
            DuplicateDeclarationError: If a subcommand with this name already exists here.
        """
        self._validate_name(name, "subcommand")
        if name in self._children:
            raise DuplicateDeclarationError(name, "subcommand")
        subcommand = Command(name, description, on_complete=on_complete, parent=self)
        self._children[name] = subcommand
        return subcommand

    def set_argument(
        self,
        name: str,
        minimum: int = 1,
        maximum: int = 1,
        defaults: Sequence[str] | None = None,
    ) -> ArgumentSpec:
        """
        Replace the positional argument specification of this command.

        Raises:
            CommandDeclarationError: If the bounds are negative or `minimum > maximum`.
        """
        self.argument = ArgumentSpec(
            name=name, minimum=minimum, maximum=maximum, defaults=list(defaults or [])
        )
        return self.argument

    def set_on_complete(self, callback: CommandCallback) -> CommandCallback:
        """Set the completion callback; returns it so this works as a decorator."""
        self.on_complete = callback
        return callback

    def parse(self, tokens: Sequence[str]) -> Command:
        """
        Parse command line tokens against this command and its subcommands.

        Returns:
            Command: The deepest command reached.
        """
        return parse_command(self, tokens)

    def __call__(self, tokens: Sequence[str]) -> Command:
        return self.parse(tokens)

    def reset(self) -> None:
        """Clear every option binding and restore argument defaults in this subtree."""
        for command in self.walk():
            for option in command._options:
                option.reset()
            command.argument.reset()

    def get_usage(self, plain_text: bool = False) -> str:
        return get_usage(self, plain_text=plain_text)

    def get_help_text(self) -> str:
        return get_help_text(self)

    def render_help(self) -> None:
        render_help(self, console)

    def __str__(self) -> str:
        return (
            f"Command(name='{self.name}', options={len(self._options)}, "
            f"subcommands={len(self._children)}, argument='{self.argument}')"
        )

    def __repr__(self) -> str:
        return str(self)
