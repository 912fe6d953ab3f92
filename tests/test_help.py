import re

import pytest

from cmdtree import Command
from cmdtree.help import get_argument_line, get_option_line, get_usage

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


@pytest.fixture
def callgraph():
    root = Command("callgraph", "Call graph generator")
    root.add_text_option("i", "index", "Index file.", default="INDEX.TXT")
    root.add_help_option()
    index = root.add_subcommand("index", "Index sources.")
    index.add_bool_option("d", "dry-run", "It runs without write.")
    index.set_argument("source_dir", minimum=1, maximum=1, defaults=["./"])
    query = root.add_subcommand("query", "Print call graph as list.")
    query.add_text_option("f", "format", "Output columns.")
    query.set_argument("program_name", minimum=1, maximum=1)
    return root


def test_usage(callgraph):
    assert get_usage(callgraph, plain_text=True) == "callgraph [options] <subcommand>"
    query = callgraph.get_subcommand("query")
    assert query.get_usage(plain_text=True) == "callgraph query [options] <program_name>"


def test_usage_markup_is_escaped(callgraph):
    assert "\\[options]" in callgraph.get_usage()


def test_option_line():
    root = Command("root")
    index = root.add_text_option("i", "index", "Index file.", default="INDEX.TXT")
    fmt = root.add_text_option("f", "format", "Output columns.")
    assert get_option_line(index, plain_text=True) == (
        "  -i --index" + " " * 15 + "Index file. (default: 'INDEX.TXT')"
    )
    line = get_option_line(fmt, plain_text=True)
    assert line.startswith("  -f --format *")
    assert line.endswith("Output columns.")


def test_argument_line(callgraph):
    index = callgraph.get_subcommand("index")
    line = get_argument_line(index, plain_text=True)
    assert line.startswith("  <source_dir>")
    assert line.endswith("default: ./")


def test_help_text(callgraph):
    lines = callgraph.get_help_text().splitlines()
    assert lines[0] == "usage: callgraph [options] <subcommand>"
    assert "Call graph generator" in lines
    assert "options:" in lines
    assert "subcommands:" in lines
    assert "arguments:" not in lines
    text = "\n".join(lines)
    assert "  index [options] <source_dir>    Index sources." in text
    assert "  query [options] <program_name>    Print call graph as list." in text
    assert "-d --dry-run" in text
    assert "-f --format *" in text


def test_render_help(callgraph, capsys):
    callgraph.get_subcommand("query").render_help()
    out = ANSI_ESCAPE.sub("", capsys.readouterr().out)
    assert "usage: callgraph query [options] <program_name>" in out
    assert "arguments:" in out
    assert "<program_name>" in out
    assert "-f --format *" in out
