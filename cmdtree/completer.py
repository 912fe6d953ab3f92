# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `CommandTreeCompleter`, a Prompt Toolkit completer for command lines
addressed to a Cmdtree command tree.

The completer walks the typed tokens the same way the parser does, without
binding anything:

- `-x` / `--name` tokens are resolved against the current command's options,
  and value options skip the token after them.
- A token naming a subcommand makes that subcommand the current command.
- Any other token starts the positional values, after which nothing more can
  be completed.

It then suggests the subcommand names and the option flags of the current
command that have not been typed yet. Nothing is suggested while an option
value is expected.
"""
from __future__ import annotations

import os
import shlex
from typing import TYPE_CHECKING, Iterable, NamedTuple

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from cmdtree.parser.option import Option

if TYPE_CHECKING:
    from cmdtree.command import Command


class CompletionState(NamedTuple):
    """Where a partially typed command line stands in the command tree."""

    command: Command
    used_options: set[int]
    awaiting_value: bool
    in_arguments: bool


class CommandTreeCompleter(Completer):
    """
    Prompt Toolkit completer for a Cmdtree command tree.

    Args:
        root (Command): The command that receives the typed tokens.
    """

    def __init__(self, root: Command):
        self.root = root

    def resolve(self, tokens: list[str]) -> CompletionState:
        """Walk complete tokens through the tree and report the resulting state."""
        command = self.root
        used_options: set[int] = set()
        index = 0
        while index < len(tokens):
            token = tokens[index]
            index += 1
            if token.startswith("-"):
                option = self._find_option(command, token)
                if option is None:
                    continue
                used_options.add(id(option))
                if option.takes_value:
                    if index >= len(tokens):
                        return CompletionState(command, used_options, True, False)
                    index += 1
                continue
            subcommand = command.get_subcommand(token)
            if subcommand is None:
                return CompletionState(command, used_options, False, True)
            command = subcommand
            used_options = set()
        return CompletionState(command, used_options, False, False)

    def suggest_next(self, tokens: list[str]) -> list[str]:
        """
        Suggest the next tokens after the given complete tokens.

        Returns:
            list[str]: Subcommand names followed by unused option flags.
        """
        state = self.resolve(tokens)
        if state.awaiting_value or state.in_arguments:
            return []
        suggestions = [subcommand.name for subcommand in state.command.subcommands]
        for option in state.command.options:
            if id(option) in state.used_options:
                continue
            suggestions.extend(option.flags)
        return suggestions

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        """
        Compute completions for the current user input.

        Args:
            document (Document): The current Prompt Toolkit document (input buffer & cursor).
            complete_event: The triggering event (TAB key, menu display, etc.), not used here.

        Yields:
            Completion: One or more completions matching the current stub text.
        """
        text = document.text_before_cursor
        try:
            tokens = shlex.split(text)
        except ValueError:
            return
        cursor_at_end_of_token = not tokens or text.endswith((" ", "\t"))

        parsed_tokens = tokens if cursor_at_end_of_token else tokens[:-1]
        stub = "" if cursor_at_end_of_token else tokens[-1]
        suggestions = self.suggest_next(parsed_tokens)
        yield from self._yield_lcp_completions(suggestions, stub)

    @staticmethod
    def _find_option(command: Command, token: str) -> Option | None:
        if token.startswith("--"):
            return command.get_long_option(token[2:])
        return command.get_short_option(token[1:])

    def _yield_lcp_completions(self, suggestions, stub):
        """
        Yield completions for the current stub using longest-common-prefix logic.

        Behavior:
        - If only one match → yield it fully.
        - If multiple matches share a longer prefix → insert the prefix, but also
            display all matches in the menu.
        - If no shared prefix → list all matches individually.
        """
        matches = [s for s in suggestions if s.startswith(stub)]
        if not matches:
            return

        lcp = os.path.commonprefix(matches)

        if len(matches) == 1:
            yield Completion(matches[0], start_position=-len(stub), display=matches[0])
        elif len(lcp) > len(stub) and not lcp.startswith("-"):
            yield Completion(lcp, start_position=-len(stub), display=lcp)
            for match in matches:
                yield Completion(match, start_position=-len(stub), display=match)
        else:
            for match in matches:
                yield Completion(match, start_position=-len(stub), display=match)
