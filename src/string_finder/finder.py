"""Fence-counting extraction of quoted string literals."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from string_finder.state import (
    CountingClose,
    CountingOpen,
    FenceState,
    Inside,
    Searching,
)

logger = logging.getLogger(__name__)

DEFAULT_QUOTE = '"'
DEFAULT_ESCAPE = "\\"


class FenceAutomaton:
    """Extracts literals delimited by runs of N identical quote characters.

    Processes text character-by-character using a state machine:
    Searching -> CountingOpen (on quote) -> Inside (on first non-quote)
    Inside -> CountingClose (on quote) -> Searching (after N quotes)
    CountingClose -> Inside (on a non-quote before N quotes were seen)

    The opening run fixes the fence length N. Inside a literal, shorter quote
    runs are kept as content. An escape character suppresses a fence outside
    a literal and is kept verbatim, together with the character it protects,
    inside one.
    """

    def __init__(self, quote: str = DEFAULT_QUOTE, escape: str = DEFAULT_ESCAPE) -> None:
        if len(quote) != 1 or len(escape) != 1:
            raise ValueError(
                f"quote and escape must be single characters, got {quote!r} and {escape!r}"
            )
        if quote == escape:
            raise ValueError(f"quote and escape must differ, both are {quote!r}")
        self._quote = quote
        self._escape = escape
        self._state: FenceState = Searching()
        self._buffer: list[str] = []
        self._pending: str | None = None

    @property
    def quote(self) -> str:
        return self._quote

    @property
    def escape(self) -> str:
        return self._escape

    @property
    def state(self) -> FenceState:
        """The current state variant."""
        return self._state

    @property
    def in_string(self) -> bool:
        """True while a fence is open."""
        return not isinstance(self._state, Searching)

    @property
    def pending_text(self) -> str:
        """Characters buffered so far for the literal currently open."""
        return "".join(self._buffer)

    def reset(self) -> None:
        """Return to the initial state, dropping any partial literal."""
        self._state = Searching()
        self._buffer = []
        self._pending = None

    def feed_char(self, ch: str) -> str | None:
        """Advance by one character.

        Returns:
            The completed literal if ``ch`` closed one, otherwise None.
        """
        self._dispatch(ch)
        literal = self._pending
        self._pending = None
        return literal

    def feed(self, text: Iterable[str]) -> list[str]:
        """Process a chunk of text and return the literals it completed."""
        completed = []
        for ch in text:
            literal = self.feed_char(ch)
            if literal is not None:
                completed.append(literal)
        return completed

    def _dispatch(self, ch: str) -> None:
        state = self._state
        if isinstance(state, Searching):
            self._search(state, ch)
        elif isinstance(state, CountingOpen):
            self._count_open(state, ch)
        elif isinstance(state, Inside):
            self._inside(state, ch)
        elif isinstance(state, CountingClose):
            self._count_close(state, ch)

    def _search(self, state: Searching, ch: str) -> None:
        if state.escape_next:
            self._state = Searching()
        elif ch == self._quote:
            self._state = CountingOpen()
            self._dispatch(ch)
        elif ch == self._escape:
            self._state = Searching(escape_next=True)

    def _count_open(self, state: CountingOpen, ch: str) -> None:
        if ch == self._quote:
            self._state = CountingOpen(state.count + 1)
            return
        logger.debug("Opened fence of length %d", state.count)
        self._state = Inside(state.count)
        self._dispatch(ch)

    def _inside(self, state: Inside, ch: str) -> None:
        if state.escape_next:
            self._buffer.append(ch)
            self._state = Inside(state.fence)
        elif ch == self._escape:
            self._buffer.append(ch)
            self._state = Inside(state.fence, escape_next=True)
        elif ch == self._quote:
            self._state = CountingClose(state.fence, state.fence)
            self._dispatch(ch)
        else:
            self._buffer.append(ch)

    def _count_close(self, state: CountingClose, ch: str) -> None:
        if ch == self._quote:
            remaining = state.remaining - 1
            if remaining == 0:
                self._pending = "".join(self._buffer)
                self._buffer = []
                self._state = Searching()
                logger.debug("Closed fence of length %d (%d chars)", state.fence, len(self._pending))
            else:
                self._state = CountingClose(state.fence, remaining)
            return
        # Run too short to close: the quotes were content
        self._buffer.append(self._quote * state.consumed)
        self._state = Inside(state.fence)
        self._dispatch(ch)


class StringFinder:
    """Lazy iterator over the literals found in a stream of characters.

    Pulls characters from ``chars`` only until the next literal closes, so it
    can run over unbounded sources. A literal still open when the source is
    exhausted is never produced.

    Usage:
        for literal in StringFinder('He said "hi"'):
            print(literal)
    """

    def __init__(
        self,
        chars: Iterable[str],
        quote: str = DEFAULT_QUOTE,
        escape: str = DEFAULT_ESCAPE,
    ) -> None:
        self._chars = iter(chars)
        self._automaton = FenceAutomaton(quote=quote, escape=escape)
        self._exhausted = False

    def __iter__(self) -> StringFinder:
        return self

    def __next__(self) -> str:
        if self._exhausted:
            raise StopIteration
        for ch in self._chars:
            literal = self._automaton.feed_char(ch)
            if literal is not None:
                return literal
        self._exhausted = True
        if self._automaton.in_string:
            logger.debug(
                "Dropping unterminated literal (%d chars)", len(self._automaton.pending_text)
            )
        raise StopIteration


def find_strings(
    chars: Iterable[str], quote: str = DEFAULT_QUOTE, escape: str = DEFAULT_ESCAPE
) -> Iterator[str]:
    """Lazily yield each literal in ``chars``."""
    return StringFinder(chars, quote=quote, escape=escape)


def extract_strings(
    chars: Iterable[str], quote: str = DEFAULT_QUOTE, escape: str = DEFAULT_ESCAPE
) -> list[str]:
    """Return every literal in ``chars`` as a list."""
    return list(StringFinder(chars, quote=quote, escape=escape))
