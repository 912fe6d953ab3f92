# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentSpec`, the positional-value capture rule of a `Command`.

Every command owns exactly one argument specification. Once the parser meets a
token that is neither an option nor a subcommand name, that token and every
token after it become the command's positional values. The specification
enforces how many values are allowed and supplies defaults when none are given.

Exports:
    - ArgumentSpec: Named positional slot with arity bounds and defaults.
    - UNBOUNDED: Use as `maximum` to accept any number of values.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Sequence

from cmdtree.exceptions import ArityError, CommandDeclarationError

UNBOUNDED = sys.maxsize

MAX_ARGUMENT_SAMPLE = 2


@dataclass
class ArgumentSpec:
    """
    Represents the positional arguments of a command.

    Attributes:
        name (str): Name shown in usage, e.g. `<source_dir>`.
        minimum (int): Minimum number of positional values.
        maximum (int): Maximum number of positional values, or `UNBOUNDED`.
        defaults (list[str]): Values used when no positional token is given.
        values (list[str]): Values captured by the last parse, initially the defaults.
    """

    name: str = "argument"
    minimum: int = 0
    maximum: int = 0
    defaults: list[str] = field(default_factory=list)
    values: list[str] = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.minimum, int) or not isinstance(self.maximum, int):
            raise CommandDeclarationError(
                f"ArgumentSpec '{self.name}': minimum and maximum must be integers"
            )
        if self.minimum < 0 or self.maximum < 0 or self.minimum > self.maximum:
            raise CommandDeclarationError(
                f"ArgumentSpec '{self.name}': invalid minimum ({self.minimum}) "
                f"or maximum ({self.maximum}) value."
            )
        self.defaults = list(self.defaults)
        self.values = list(self.defaults)

    @property
    def is_unbounded(self) -> bool:
        return self.maximum == UNBOUNDED

    def capture(self, tokens: Sequence[str]) -> None:
        """Replace the bound values with the given tokens, in order."""
        self.values = list(tokens)

    def validate(self) -> None:
        """
        Check the number of bound values against the arity bounds.

        Raises:
            ArityError: If fewer than `minimum` or more than `maximum` values are bound.
        """
        got = len(self.values)
        too_many = not self.is_unbounded and got > self.maximum
        if got < self.minimum or too_many:
            raise ArityError(self.name, got, self.minimum, self.maximum)

    def reset(self) -> None:
        """Restore the default values."""
        self.values = list(self.defaults)

    def get_usage_text(self) -> str:
        """
        Get the usage text for the argument.

        Shows `<name>` up to twice, opening `[` at the first optional slot and
        adding `...` when more values are accepted than shown.

        Examples:
            minimum=1, maximum=1 → `<file>`
            minimum=0, maximum=1 → `[<file>]`
            minimum=1, maximum=5 → `<file> [<file> ...]`
            minimum=2, maximum=5 → `<file> <file> ...`
            minimum=0, maximum=0 → ``
        """
        if self.maximum == 0:
            return ""
        sample = min(MAX_ARGUMENT_SAMPLE, self.maximum)
        parts = []
        optional_opened = False
        for position in range(1, sample + 1):
            slot = f"<{self.name}>"
            if position == self.minimum + 1:
                slot = f"[{slot}"
                optional_opened = True
            parts.append(slot)
        usage = " ".join(parts)
        if sample < self.maximum:
            usage += " ..."
        if optional_opened:
            usage += "]"
        return usage

    def __str__(self) -> str:
        return self.get_usage_text()
