from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .config import ConfigError
from .config import load_config
from .logging import LogConfig
from .logging import configure_logging
from .reporting import render_errors
from .reporting import render_json
from .reporting import render_summary
from .validation.checker import WireBindingChecker

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wire-linter",
        description=(
            "Check that wire: directives and $wire expressions in component "
            "templates reference public members of their components."
        ),
    )
    parser.add_argument(
        "root",
        nargs="?",
        type=Path,
        default=Path.cwd(),
        help="Project root (default: current directory).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="TOML file with a [tool.wire-linter] table (default: ROOT/pyproject.toml).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit JSON instead of human-readable output.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Show skipped files (-v) and debug details (-vv).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console(soft_wrap=True, emoji=False, highlight=False)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    configure_logging(LogConfig(log_level=level))

    root: Path = args.root
    try:
        config = load_config(root, args.config)
    except ConfigError as e:
        Console(stderr=True).print(f"[red]✗[/red] {escape(str(e))}")
        return EXIT_CONFIG_ERROR

    if not args.json:
        console.print("Running $wire binding checks...")
        console.print()

    result = WireBindingChecker(root, config).check()

    if args.json:
        print(render_json(result))
    else:
        render_errors(result.errors, console)
        render_summary(result, console)

    return EXIT_OK if result.passed else EXIT_ISSUES
