# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Builds a command tree from a YAML or TOML configuration file.

A configuration file describes the root command. Every command entry may
declare options, one positional argument and nested subcommands; callbacks
are given as dotted import paths and resolved at load time.

Example (YAML):

    name: callgraph
    description: Cobol, RPG, CL Source parser and call graph generator
    options:
      - short: i
        long: index
        description: Index file.
        default: INDEX.TXT
      - short: I
        long: Int
        type: int
        default: 1
    subcommands:
      - name: query
        description: Print call graph as list.
        on_complete: callgraph_callbacks.query_programs
        options:
          - {short: f, long: format, description: Output columns.}
          - {short: t, long: thin-column, type: bool}
        argument: {name: program_name, minimum: 1, maximum: 1}

Defaults are converted with the option's converter, so dates and times can be
written as ISO strings. Quote times in YAML: unquoted `01:02:03` is read as
a base-60 integer.
"""
from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import Any, Callable

import toml
import yaml
from pydantic import BaseModel, Field, field_validator

from cmdtree.command import Command
from cmdtree.console import console
from cmdtree.logger import logger
from cmdtree.parser.argument_spec import UNBOUNDED
from cmdtree.parser.value_type import ValueType
from cmdtree.themes import OneColors

MAX_DEPTH = 16


def import_callback(dotted_path: str) -> Callable[..., Any]:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        console.print(
            f"[{OneColors.DARK_RED}]❌ Invalid callback path:[/] {dotted_path}"
        )
        sys.exit(1)
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        console.print(
            f"[{OneColors.DARK_RED}]❌ Could not import '{dotted_path}': {error}[/]\n"
            f"[{OneColors.COMMENT_GREY}]Ensure the module is installed and discoverable "
            "via PYTHONPATH."
        )
        sys.exit(1)
    try:
        callback = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        console.print(
            f"[{OneColors.DARK_RED}]❌ Module '{module_path}' has no attribute "
            f"'{attr}': {error}[/]"
        )
        sys.exit(1)
    if not callable(callback):
        console.print(f"[{OneColors.DARK_RED}]❌ '{dotted_path}' is not callable.[/]")
        sys.exit(1)
    return callback


class RawOption(BaseModel):
    """Raw option model for Cmdtree configuration."""

    short: str
    long: str | None = None
    description: str = ""
    type: ValueType = ValueType.TEXT
    default: Any = None
    converter: str | None = None
    on_set: str | None = None

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value: Any) -> ValueType:
        return ValueType(value)

    @field_validator("default", mode="before")
    @classmethod
    def validate_default(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (list, dict)):
            raise ValueError("option defaults must be scalar values")
        return str(value)


class RawArgument(BaseModel):
    """Raw positional argument model for Cmdtree configuration."""

    name: str
    minimum: int = 1
    maximum: int = 1
    defaults: list[str] = Field(default_factory=list)

    @field_validator("maximum", mode="before")
    @classmethod
    def validate_maximum(cls, value: Any) -> Any:
        if value in ("*", "unbounded"):
            return UNBOUNDED
        return value

    @field_validator("defaults", mode="before")
    @classmethod
    def validate_defaults(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        if isinstance(value, list):
            return [str(item) for item in value]
        return value


class RawCommand(BaseModel):
    """Raw command model for Cmdtree configuration."""

    name: str
    description: str = ""
    on_complete: str | None = None
    options: list[RawOption] = Field(default_factory=list)
    argument: RawArgument | None = None
    subcommands: list[RawCommand] = Field(default_factory=list)

    def populate(self, command: Command, depth: int = 0) -> Command:
        """Declare this entry's options, argument and subcommands on `command`."""
        if depth > MAX_DEPTH:
            raise ValueError(
                f"Maximum command depth exceeded ({MAX_DEPTH} levels deep)"
            )
        if self.on_complete:
            command.set_on_complete(import_callback(self.on_complete))
        for raw_option in self.options:
            command.add_option(
                raw_option.short,
                raw_option.long,
                raw_option.description,
                default=raw_option.default,
                type=raw_option.type,
                converter=(
                    import_callback(raw_option.converter)
                    if raw_option.converter
                    else None
                ),
                on_set=(
                    import_callback(raw_option.on_set) if raw_option.on_set else None
                ),
            )
        if self.argument is not None:
            command.set_argument(
                self.argument.name,
                minimum=self.argument.minimum,
                maximum=self.argument.maximum,
                defaults=self.argument.defaults,
            )
        for raw_subcommand in self.subcommands:
            subcommand = command.add_subcommand(
                raw_subcommand.name, raw_subcommand.description
            )
            raw_subcommand.populate(subcommand, depth + 1)
        return command

    def to_command(self) -> Command:
        return self.populate(Command(self.name, self.description))


def load_raw_config(path: Path) -> Any:
    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(config_file)
        elif suffix == ".toml":
            return toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")


def loader(file_path: Path | str) -> Command:
    """
    Load a command tree from a YAML or TOML file.

    The file should contain a dictionary describing the root command with at
    least a `name`; see the module docstring for the full format.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        Command: The root of the loaded command tree.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or the content is not a dictionary.
        pydantic.ValidationError: If an entry does not match the expected schema.
        CommandDeclarationError: If the declared tree is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    raw_config = load_raw_config(path)
    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a dictionary describing the root command.\n"
            "Example:\n"
            "name: 'mytool'\n"
            "description: 'My tool'\n"
            "subcommands:\n"
            "  - name: 'run'\n"
            "    on_complete: 'my_module.run'"
        )

    logger.debug("Loading command tree from '%s'.", path)
    return RawCommand.model_validate(raw_config).to_command()
