"""
Cmdtree CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .command import Command
from .completer import CommandTreeCompleter
from .config import loader
from .exceptions import (
    ArityError,
    CmdtreeError,
    CommandDeclarationError,
    CommandParseError,
    DuplicateDeclarationError,
    InvalidOptionValueError,
    MissingOptionValueError,
    MissingRequiredOptionError,
    MissingRequiredValueError,
    UnknownOptionError,
)
from .logger import logger
from .parser import UNBOUNDED, ArgumentSpec, Option, ValueType
from .version import __version__

__all__ = [
    "Command",
    "CommandTreeCompleter",
    "Option",
    "ArgumentSpec",
    "ValueType",
    "UNBOUNDED",
    "loader",
    "logger",
    "CmdtreeError",
    "CommandDeclarationError",
    "CommandParseError",
    "DuplicateDeclarationError",
    "UnknownOptionError",
    "MissingOptionValueError",
    "InvalidOptionValueError",
    "MissingRequiredOptionError",
    "MissingRequiredValueError",
    "ArityError",
    "__version__",
]
