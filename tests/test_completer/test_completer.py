import pytest
from prompt_toolkit.completion import Completion
from prompt_toolkit.document import Document

from cmdtree import Command, CommandTreeCompleter


@pytest.fixture
def callgraph():
    root = Command("callgraph")
    root.add_text_option("i", "index", default="INDEX.TXT")
    root.add_help_option()
    index = root.add_subcommand("index")
    index.add_bool_option("d", "dry-run")
    index.set_argument("source_dir", minimum=1, maximum=1, defaults=["./"])
    query = root.add_subcommand("query")
    query.add_text_option("f", "format")
    query.add_bool_option("t", "thin-column")
    query.set_argument("program_name")
    return root


def test_resolve_root(callgraph):
    state = CommandTreeCompleter(callgraph).resolve([])
    assert state.command is callgraph
    assert not state.awaiting_value
    assert not state.in_arguments


def test_resolve_subcommand(callgraph):
    state = CommandTreeCompleter(callgraph).resolve(["-i", "X.TXT", "query", "-t"])
    assert state.command is callgraph.get_subcommand("query")
    assert state.used_options == {id(callgraph.get_subcommand("query").get_option("t"))}


def test_resolve_awaiting_value(callgraph):
    state = CommandTreeCompleter(callgraph).resolve(["query", "--format"])
    assert state.awaiting_value


def test_resolve_in_arguments(callgraph):
    state = CommandTreeCompleter(callgraph).resolve(["query", "ACCVTDAT"])
    assert state.in_arguments


def test_suggest_next_root(callgraph):
    suggestions = CommandTreeCompleter(callgraph).suggest_next([])
    assert suggestions == ["index", "query", "-i", "--index", "-h", "--help"]


def test_suggest_next_skips_used_options(callgraph):
    suggestions = CommandTreeCompleter(callgraph).suggest_next(["--index", "X.TXT"])
    assert "-i" not in suggestions
    assert "--index" not in suggestions
    assert "query" in suggestions


def test_suggest_next_nothing_after_values(callgraph):
    completer = CommandTreeCompleter(callgraph)
    assert completer.suggest_next(["query", "-f"]) == []
    assert completer.suggest_next(["query", "ACCVTDAT"]) == []


def test_suggest_next_ignores_unknown_options(callgraph):
    suggestions = CommandTreeCompleter(callgraph).suggest_next(["-x"])
    assert "query" in suggestions


def test_get_completions_no_input(callgraph):
    results = list(CommandTreeCompleter(callgraph).get_completions(Document(""), None))
    assert all(isinstance(c, Completion) for c in results)
    assert [c.text for c in results] == ["index", "query", "-i", "--index", "-h", "--help"]


def test_get_completions_partial_subcommand(callgraph):
    results = list(CommandTreeCompleter(callgraph).get_completions(Document("qu"), None))
    assert [c.text for c in results] == ["query"]
    assert results[0].start_position == -2


def test_get_completions_subcommand_options(callgraph):
    completer = CommandTreeCompleter(callgraph)
    results = list(completer.get_completions(Document("query --t"), None))
    assert [c.text for c in results] == ["--thin-column"]


def test_get_completions_partial_flag_lists_all(callgraph):
    completer = CommandTreeCompleter(callgraph)
    results = list(completer.get_completions(Document("query -"), None))
    assert [c.text for c in results] == ["-f", "--format", "-t", "--thin-column"]


def test_get_completions_no_match(callgraph):
    completer = CommandTreeCompleter(callgraph)
    assert not list(completer.get_completions(Document("zz"), None))
    assert not list(completer.get_completions(Document("query -f "), None))


def test_get_completions_unbalanced_quote(callgraph):
    completer = CommandTreeCompleter(callgraph)
    assert not list(completer.get_completions(Document('query -f "n'), None))


def test_lcp_completions(callgraph):
    completer = CommandTreeCompleter(callgraph)
    results = list(completer._yield_lcp_completions(["AETHERWARP", "AETHERZOOM"], "A"))
    assert [c.text for c in results] == ["AETHER", "AETHERWARP", "AETHERZOOM"]
