"""Command-line entry point: print every literal found in files or stdin."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Iterable

from rich.console import Console
from rich.text import Text

from string_finder.config import FinderConfig, load_config
from string_finder.finder import StringFinder
from string_finder.source import STDIN, chain_sources

logger = logging.getLogger(__name__)

LITERAL_STYLE = "bold green"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="string-finder",
        description="Extract fenced string literals (runs of N quotes) from text.",
    )
    parser.add_argument(
        "files", nargs="*", metavar="FILE", help="Files to read ('-' or none for stdin)"
    )
    parser.add_argument("--quote", default=None, help="Quote character (default: \")")
    parser.add_argument("--escape", default=None, help="Escape character (default: \\)")
    parser.add_argument(
        "-0",
        "--null",
        action="store_true",
        default=None,
        help="Terminate each literal with NUL instead of a newline",
    )
    parser.add_argument("--encoding", default=None, help="Input file encoding")
    parser.add_argument(
        "--highlight", action="store_true", default=None, help="Style literals on a terminal"
    )
    parser.add_argument(
        "--logging", action="store_true", default=None, help="Enable logging"
    )
    return parser


def apply_args(config: FinderConfig, args: argparse.Namespace) -> None:
    """Command-line arguments override config."""
    if args.quote is not None:
        config.quote = args.quote
    if args.escape is not None:
        config.escape = args.escape
    if args.null:
        config.null_separator = True
    if args.encoding is not None:
        config.encoding = args.encoding
    if args.highlight:
        config.highlight = True


def write_literals(
    literals: Iterable[str], config: FinderConfig, console: Console | None = None
) -> int:
    """Write each literal followed by the configured separator.

    Output is written verbatim to stdout. Only when highlighting is on and
    ``console`` is attached to a terminal does it go through rich, which
    expands tabs and drops control characters.

    Returns:
        Number of literals written.
    """
    separator = config.separator
    styled = config.highlight and console is not None and console.is_terminal
    count = 0
    for literal in literals:
        if styled:
            console.print(Text(literal, style=LITERAL_STYLE), end=separator)
        else:
            sys.stdout.write(literal + separator)
        count += 1
    sys.stdout.flush()
    return count


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the string-finder command."""
    args = build_parser().parse_args(argv)
    errors = Console(stderr=True, highlight=False, soft_wrap=True)

    config, config_error = load_config()
    apply_args(config, args)

    if args.logging:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            filename="string_finder.log",
            filemode="a",  # append mode
        )
        logging.getLogger("string_finder").setLevel(logging.DEBUG)

    if config_error:
        logger.warning("%s", config_error)
        errors.print(f"Config error: {config_error}", style="yellow", markup=False)

    paths = args.files or [STDIN]
    try:
        finder = StringFinder(
            chain_sources(paths, encoding=config.encoding),
            quote=config.quote,
            escape=config.escape,
        )
    except ValueError as e:
        errors.print(f"string-finder: {e}", style="red", markup=False)
        return 2

    console = Console(highlight=False, soft_wrap=True, markup=False, emoji=False)
    try:
        count = write_literals(finder, config, console)
    except BrokenPipeError:
        # Reader went away; stop pulling and keep the exit flush quiet
        logger.debug("Output pipe closed")
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        os.close(devnull)
        return 0
    except (OSError, UnicodeDecodeError, LookupError) as e:
        logger.exception("Failed to read input")
        errors.print(f"string-finder: {e}", style="red", markup=False)
        return 1

    logger.info("Extracted %d literals from %d source(s)", count, len(paths))
    return 0


if __name__ == "__main__":
    sys.exit(main())
