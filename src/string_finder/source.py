"""Character sources that feed the automaton from lines and files."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)

STDIN = "-"


def line_chars(lines: Iterable[str]) -> Iterator[str]:
    """Yield the characters of each line, ending every line with a single newline.

    Each line loses one trailing ``\\n`` and then at most one ``\\r``, so
    ``\\r\\n`` input and a missing final newline both come out the same way.
    A lone ``\\r`` anywhere else is content.
    """
    for line in lines:
        if line.endswith("\n"):
            line = line.removesuffix("\n").removesuffix("\r")
        yield from line
        yield "\n"


def file_chars(path: str | Path, encoding: str = "utf-8") -> Iterator[str]:
    """Yield the characters of a file line by line.

    The file is opened when iteration starts and closed when it finishes.
    ``"-"`` reads standard input. Lines are split on ``\\n`` only.
    """
    if str(path) == STDIN:
        logger.debug("Reading from standard input")
        if hasattr(sys.stdin, "reconfigure"):
            sys.stdin.reconfigure(newline="\n")
        yield from line_chars(sys.stdin)
        return
    logger.debug("Reading %s", path)
    with open(path, "r", encoding=encoding, newline="\n") as f:
        yield from line_chars(f)


def chain_sources(paths: Iterable[str | Path], encoding: str = "utf-8") -> Iterator[str]:
    """Yield the characters of several files as one continuous stream."""
    for path in paths:
        yield from file_chars(path, encoding=encoding)
