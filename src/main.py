# src/main.py — v1
"""CLI entry point.

Usage:
    rudolf input <year> <day> [--db PATH] [--cookie PATH]
    rudolf split [-d DELIMITERS] < file
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from rudolf.version import __version__

if TYPE_CHECKING:
    from rudolf.config.settings import Settings

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="rudolf",
        description=f"rudolf v{__version__} - Advent of Code puzzle input cache",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- input ---
    p_input = subparsers.add_parser(
        "input", help="Print the puzzle input for a year and day",
    )
    p_input.add_argument("year", type=int, help="Event year, e.g. 2022")
    p_input.add_argument("day", type=int, help="Puzzle day (1-25)")
    p_input.add_argument(
        "--db", type=Path, default=None,
        help="Puzzle database file (default: PUZZLE_DB_PATH or ./rudolf.db)",
    )
    p_input.add_argument(
        "--cookie", type=Path, default=None,
        help="Cookie jar file (default: AOC_COOKIE_FILE or ./cookie.txt)",
    )
    p_input.set_defaults(func=_cmd_input)

    # --- split ---
    p_split = subparsers.add_parser(
        "split", help="Split stdin on delimiter characters, one part per line",
    )
    p_split.add_argument(
        "-d", "--delimiters", default="\n",
        help="Delimiter characters (default: newline)",
    )
    p_split.set_defaults(func=_cmd_split)

    return parser


def _cmd_input(args: argparse.Namespace) -> int:
    """Resolve and print one puzzle input."""
    from rudolf.config.settings import load_settings
    from rudolf.resolver.puzzle_resolver import PuzzleInputResolver

    overrides: dict[str, object] = {}
    if args.db is not None:
        overrides["puzzle_db_path"] = args.db
    if args.cookie is not None:
        overrides["aoc_cookie_file"] = args.cookie
    settings = load_settings(**overrides)
    _setup_logging(settings, args.verbose)

    text = PuzzleInputResolver(settings=settings).resolve(args.year, args.day)
    sys.stdout.write(text)
    return 0


def _cmd_split(args: argparse.Namespace) -> int:
    """Tokenize stdin."""
    from rudolf.text.splitter import split

    for part in split(sys.stdin.read(), args.delimiters):
        print(part)
    return 0


def _setup_logging(settings: Settings, verbose: bool) -> None:
    """Configure logging for CLI usage."""
    from rudolf.logging.logger import setup_logging

    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )
    # Quiet noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


if __name__ == "__main__":
    sys.exit(main())
