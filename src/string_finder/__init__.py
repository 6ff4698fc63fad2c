from .finder import FenceAutomaton, StringFinder, extract_strings, find_strings
from .source import chain_sources, file_chars, line_chars
from .state import CountingClose, CountingOpen, FenceState, Inside, Searching

__all__ = [
    "FenceAutomaton",
    "StringFinder",
    "find_strings",
    "extract_strings",
    "line_chars",
    "file_chars",
    "chain_sources",
    "FenceState",
    "Searching",
    "CountingOpen",
    "Inside",
    "CountingClose",
]
__version__ = "0.1.0"
