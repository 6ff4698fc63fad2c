"""State variants for the fence extraction automaton."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Searching:
    """Outside any fence, looking for an opening quote run."""

    escape_next: bool = False


@dataclass(frozen=True)
class CountingOpen:
    """Counting the quote characters of an opening fence."""

    count: int = 0


@dataclass(frozen=True)
class Inside:
    """Accumulating literal content inside a fence of ``fence`` quotes."""

    fence: int
    escape_next: bool = False


@dataclass(frozen=True)
class CountingClose:
    """Matching a closing run; ``remaining`` quotes are still needed."""

    fence: int
    remaining: int

    @property
    def consumed(self) -> int:
        """Quote characters swallowed so far by this closing attempt."""
        return self.fence - self.remaining


FenceState = Union[Searching, CountingOpen, Inside, CountingClose]

__all__ = ["Searching", "CountingOpen", "Inside", "CountingClose", "FenceState"]
