"""Callbacks referenced by cmdtree.yaml."""
from cmdtree import Command


def index_programs(command: Command) -> None:
    index_file = command.parent.get_option("index").value
    dry_run = command.get_option("dry-run").value
    print(f"Indexing {command.argument.values[0]} into {index_file} (dry run: {dry_run})")


def query_programs(command: Command) -> None:
    output_format = command.get_option("format").value
    thin_column = command.get_option("thin-column").value
    print(
        f"Call graph of {command.argument.values[0]}: "
        f"format={output_format} thin={thin_column}"
    )


def print_help(command: Command) -> None:
    command.render_help()
    raise SystemExit(0)
