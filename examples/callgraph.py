import logging
import sys

from cmdtree import Command
from cmdtree.utils import setup_logging

setup_logging(console_log_level=logging.WARNING)

callgraph = Command("callgraph", "Cobol, RPG, CL Source parser and call graph generator")
index_file = callgraph.add_text_option("i", "index", "Index file.", default="INDEX.TXT")
max_depth = callgraph.add_int_option("I", "max-depth", "Maximum call depth.", default=5)
since = callgraph.add_date_option("D", "since", "Only sources changed since.", default="2021-02-03")
callgraph.add_help_option()

# Subcommand 1: index
index = callgraph.add_subcommand(
    "index", "Parses and indexes program source files from the given directory"
)
run_time = index.add_bool_option("r", "run-time", "Measure running time.")
dry_run = index.add_bool_option("d", "dry-run", "It runs without write.")
index.set_argument("source_dir", minimum=1, maximum=1, defaults=["./"])


@index.set_on_complete
def index_programs(command: Command) -> None:
    source_dir = command.argument.values[0]
    print(f"Indexing {source_dir} into {index_file.value} (dry run: {dry_run.value})")


# Subcommand 2: query
query = callgraph.add_subcommand("query", "Print call graph as list.")
output_format = query.add_text_option(
    "f", "format", "Output columns: n:name, l:line number, f:file_name, p:path"
)
thin_column = query.add_bool_option(
    "t", "thin-column", "Print columns without padding them to the same size."
)
query.set_argument("program_name", minimum=1, maximum=1)


@query.set_on_complete
def query_programs(command: Command) -> None:
    program_name = command.argument.values[0]
    print(
        f"Call graph of {program_name} from {index_file.value}, "
        f"depth {max_depth.value}, since {since.value}: "
        f"format={output_format.value} thin={thin_column.value}"
    )


if __name__ == "__main__":
    callgraph.parse(sys.argv[1:])
