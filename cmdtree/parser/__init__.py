"""
Cmdtree CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument_spec import UNBOUNDED, ArgumentSpec
from .command_parser import find_option, parse_command, validate_command
from .option import Option
from .utils import coerce_value, get_converter
from .value_type import ValueType

__all__ = [
    "ArgumentSpec",
    "Option",
    "ValueType",
    "UNBOUNDED",
    "coerce_value",
    "get_converter",
    "find_option",
    "parse_command",
    "validate_command",
]
