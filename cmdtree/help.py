# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders usage and help text for a command tree using Rich.

Help is a recursive view of a `Command`: a usage line, the description, the
option list (required options marked with `*`, defaults shown inline), the
positional argument and, indented below, every subcommand with its own
options and arguments.

Every function can produce either Rich markup (styled with the names defined
by `cmdtree.themes.get_nord_theme`) or plain text for logs and tests.

Example output (plain text):

    usage: callgraph [options] <subcommand>

    Call graph generator

    options:
      -i --index               Index file. (default: 'INDEX.TXT')
      -h --help                Show this help message.
    subcommands:
      query [options] <program_name>    Print call graph as list.
        -f --format *            Output columns.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from cmdtree.parser.option import Option

if TYPE_CHECKING:
    from cmdtree.command import Command

FLAGS_COLUMN_WIDTH = 24


def _text(text: str, plain_text: bool) -> str:
    return text if plain_text else escape(text)


def _style(text: str, style: str, plain_text: bool) -> str:
    if plain_text or not text:
        return text
    return f"[{style}]{escape(text)}[/{style}]"


def _get_usage_parts(command: Command) -> list[str]:
    parts = []
    if command.options:
        parts.append("[options]")
    if command.subcommands:
        parts.append("<subcommand>")
    argument_text = command.argument.get_usage_text()
    if argument_text:
        parts.append(argument_text)
    return parts


def get_usage(command: Command, plain_text: bool = False) -> str:
    """
    Render the usage line for a command, prefixed with its full path.

    Returns:
        str: e.g. `callgraph query [options] <program_name>`.
    """
    usage = " ".join([" ".join(command.path), *_get_usage_parts(command)])
    return _text(usage, plain_text)


def get_option_line(
    option: Option, indent: str = "  ", plain_text: bool = False
) -> str:
    """Render one option as `-s --long *  description (default: 'X')`."""
    flags = option.get_flags_text()
    width = len(flags)
    line = f"{indent}{_style(flags, 'option', plain_text)}"
    if option.required:
        line += f" {_style('*', 'required', plain_text)}"
        width += 2
    padding = " " * max(1, FLAGS_COLUMN_WIDTH - width + 1)
    line += f"{padding}{_text(option.description, plain_text)}"
    default_text = option.get_default_text()
    if default_text:
        line += f" {_style(default_text, 'default', plain_text)}"
    return line.rstrip()


def get_argument_line(
    command: Command, indent: str = "  ", plain_text: bool = False
) -> str:
    """Render the positional argument with its defaults, if any."""
    argument = command.argument
    name = f"<{argument.name}>"
    line = f"{indent}{_style(name, 'argument', plain_text)}"
    if argument.defaults:
        padding = " " * max(1, FLAGS_COLUMN_WIDTH - len(name) + 1)
        default_text = f"default: {' '.join(argument.defaults)}"
        line += f"{padding}{_style(default_text, 'default', plain_text)}"
    return line


def get_help_lines(
    command: Command, plain_text: bool = False, depth: int = 0
) -> list[str]:
    """
    Build the help text of a command and its subcommands, one line per entry.

    Args:
        command (Command): The command to describe.
        plain_text (bool): Return plain strings instead of Rich markup.
        depth (int): Nesting level; 0 renders the full header.

    Returns:
        list[str]: Help lines in display order.
    """
    indent = "  " * depth
    lines: list[str] = []
    if depth == 0:
        heading = _style("usage:", "heading", plain_text)
        lines.append(f"{heading} {get_usage(command, plain_text)}")
        lines.append("")
        if command.description:
            lines.append(_text(command.description, plain_text))
            lines.append("")
    else:
        summary = " ".join([command.name, *_get_usage_parts(command)])
        line = f"{indent}{_style(summary, 'command', plain_text)}"
        if command.description:
            line += f"    {_text(command.description, plain_text)}"
        lines.append(line)

    if command.options:
        if depth == 0:
            lines.append(_style("options:", "heading", plain_text))
        for option in command.options:
            lines.append(get_option_line(option, indent + "  ", plain_text))

    if command.argument.maximum > 0:
        if depth == 0:
            lines.append(_style("arguments:", "heading", plain_text))
        lines.append(get_argument_line(command, indent + "  ", plain_text))

    if command.subcommands:
        heading = f"{indent}{_style('subcommands:', 'heading', plain_text)}"
        if depth > 0:
            heading = f"{indent}  {_style('subcommands:', 'heading', plain_text)}"
        lines.append(heading)
        for subcommand in command.subcommands:
            lines.extend(get_help_lines(subcommand, plain_text, depth + 1))
    return lines


def get_help_text(command: Command) -> str:
    """Return the full help of a command as plain text."""
    return "\n".join(get_help_lines(command, plain_text=True))


def render_help(command: Command, console: Console) -> None:
    """Print the help of a command to a Rich console."""
    for line in get_help_lines(command):
        console.print(line, highlight=False, soft_wrap=True)
