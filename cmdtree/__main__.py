"""
Cmdtree CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from rich.markup import escape

from cmdtree.command import Command
from cmdtree.config import loader
from cmdtree.console import console
from cmdtree.exceptions import CmdtreeError
from cmdtree.logger import logger
from cmdtree.themes import OneColors
from cmdtree.utils import setup_logging


def find_cmdtree_config() -> Path | None:
    candidates = [
        Path.cwd() / "cmdtree.yaml",
        Path.cwd() / "cmdtree.toml",
        Path.cwd() / ".cmdtree.yaml",
        Path.cwd() / ".cmdtree.toml",
        Path(os.environ.get("CMDTREE_CONFIG", "cmdtree.yaml")),
        Path.home() / ".config" / "cmdtree" / "cmdtree.yaml",
        Path.home() / ".config" / "cmdtree" / "cmdtree.toml",
    ]
    return next((p for p in candidates if p.exists()), None)


def bootstrap() -> Path | None:
    config_path = find_cmdtree_config()
    if config_path and str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    return config_path


def run(root: Command, args: Sequence[str]) -> Command:
    """Parse `args` against `root`, reporting errors and exiting with status 1."""
    try:
        return root.parse(args)
    except CmdtreeError as error:
        logger.debug("Parse failed: %r", error)
        console.print(f"[{OneColors.DARK_RED}]❌ {escape(str(error))}[/]")
        console.print(f"[bold]usage:[/] {root.get_usage()}", highlight=False)
        sys.exit(1)


def main(argv: Sequence[str] | None = None) -> None:
    if os.getenv("CMDTREE_DEBUG"):
        setup_logging(
            console_log_level=logging.DEBUG,
            log_filename=os.getenv("CMDTREE_LOG_FILE"),
        )

    config_path = bootstrap()
    if not config_path:
        console.print(
            f"[{OneColors.DARK_RED}]❌ No cmdtree configuration found.[/]\n"
            f"[{OneColors.COMMENT_GREY}]Create a cmdtree.yaml or cmdtree.toml in the "
            "current directory, or point CMDTREE_CONFIG at one."
        )
        sys.exit(1)

    try:
        root = loader(config_path)
    except (CmdtreeError, ValueError) as error:
        logger.debug("Loading '%s' failed: %r", config_path, error)
        console.print(
            f"[{OneColors.DARK_RED}]❌ Invalid configuration in {config_path}:[/]\n"
            f"{escape(str(error))}"
        )
        sys.exit(1)
    run(root, sys.argv[1:] if argv is None else argv)
    sys.exit(0)


if __name__ == "__main__":
    main()
