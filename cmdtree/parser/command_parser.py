# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements the recursive token parser behind `Command.parse()`.

Tokens are consumed left to right against one command at a time:

- `--name` / `-x` tokens bind an option declared on the current command. Value
  options take the next token as their value; boolean options are flags.
- A token naming a subcommand hands every remaining token to that subcommand
  and ends parsing for the current command.
- Any other token starts the positional values: it and every token after it
  are captured by the command's `ArgumentSpec`.

Once the loop ends, the command validates its own required options and
argument arity, then runs its `on_complete` callback. A dispatched subcommand
therefore completes before its parent does.

An empty token list is not an error: the command's help is rendered and the
process exits with status 0.

Public Interface:
- `parse_command(command, tokens)`: Parse tokens against a command subtree.
- `validate_command(command)`: Run the post-parse checks for one command.
- `find_option(command, token)`: Resolve a `-x` / `--name` token to an option.
"""
from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Sequence

from cmdtree.exceptions import (
    MissingOptionValueError,
    MissingRequiredOptionError,
    UnknownOptionError,
)
from cmdtree.logger import logger
from cmdtree.parser.option import Option

if TYPE_CHECKING:
    from cmdtree.command import Command


def find_option(command: Command, token: str) -> Option:
    """
    Look up an option token on the command's own options.

    Options are never inherited: a subcommand does not see its parent's options.

    Raises:
        UnknownOptionError: If no option matches.
    """
    if token.startswith("--"):
        option = command.get_long_option(token[2:])
    else:
        option = command.get_short_option(token[1:])
    if option is None:
        raise UnknownOptionError(token)
    return option


def validate_command(command: Command) -> None:
    """
    Check required options and positional arity for one command.

    Required options are checked first, in declaration order, so the first
    missing option is the one reported.

    Raises:
        MissingRequiredOptionError: If an option without a default was not given.
        ArityError: If the positional values are out of the declared range.
    """
    for option in command.options:
        if option.required and not option.given:
            raise MissingRequiredOptionError(option.display_name)
    command.argument.validate()


def parse_command(command: Command, tokens: Sequence[str]) -> Command:
    """
    Parse tokens against a command, descending into at most one subcommand.

    Args:
        command (Command): The command the tokens are addressed to.
        tokens (Sequence[str]): Already tokenized command line arguments.

    Returns:
        Command: The deepest command reached.

    Raises:
        CommandParseError: On the first unknown option, missing or invalid
            option value, missing required option or arity violation.
        SystemExit: With status 0 when `tokens` is empty, after rendering help.
    """
    tokens = list(tokens)
    if not tokens:
        logger.debug("[%s] No arguments given, rendering help.", command.name)
        command.render_help()
        sys.exit(0)

    deepest = command
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if token.startswith("-"):
            option = find_option(command, token)
            logger.debug("[%s] Option: %s", command.name, option.display_name)
            if option.takes_value:
                if index >= len(tokens):
                    raise MissingOptionValueError(option.display_name)
                raw_value = tokens[index]
                index += 1
                option.bind(raw_value, command)
            else:
                option.bind_flag(command)
            continue

        subcommand = command.get_subcommand(token)
        if subcommand is None:
            command.argument.capture(tokens[index - 1 :])
            logger.debug(
                "[%s] Values of <%s>: %s",
                command.name,
                command.argument.name,
                command.argument.values,
            )
        else:
            logger.debug("[%s] Subcommand: %s", command.name, subcommand.name)
            deepest = parse_command(subcommand, tokens[index:])
        break

    validate_command(command)
    if command.on_complete is not None:
        logger.debug("[%s] Running on_complete callback.", command.name)
        command.on_complete(command)
    return deepest
