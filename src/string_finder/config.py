"""Configuration management for string_finder.

This module handles loading user configuration from
~/.config/string_finder/init.py and provides a sandboxed execution
environment for user settings.
"""

from __future__ import annotations

import os
import traceback
from pathlib import Path
from typing import Any

from string_finder.finder import DEFAULT_ESCAPE, DEFAULT_QUOTE


class FinderConfig:
    """Configuration container for string_finder settings.

    Values are set by the user's init.py file and can be overridden on the
    command line.
    """

    def __init__(self):
        # Automaton characters
        self.quote: str = DEFAULT_QUOTE
        self.escape: str = DEFAULT_ESCAPE

        # Input settings
        self.encoding: str = "utf-8"

        # Output settings
        self.null_separator: bool = False  # NUL-terminate records, for literals spanning lines
        self.highlight: bool = False

        self._custom: dict[str, Any] = {}

    def set(self, key: str, value: Any) -> None:
        """Set a custom configuration value."""
        self._custom[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Get a custom configuration value."""
        return self._custom.get(key, default)

    @property
    def separator(self) -> str:
        """Record terminator written after each literal."""
        return "\0" if self.null_separator else "\n"


def get_config_path() -> Path:
    """Get the path to the user's config directory."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "string_finder"
    return Path.home() / ".config" / "string_finder"


def get_init_script_path() -> Path:
    """Get the path to the user's init.py script."""
    return get_config_path() / "init.py"


def load_config() -> tuple[FinderConfig, str | None]:
    """Load configuration from ~/.config/string_finder/init.py.

    The init.py file is executed in a sandboxed environment where it can set
    values on a 'config' object.

    Returns:
        A tuple of (config, error_message). If loading fails, error_message
        will contain details about the failure.
    """
    config = FinderConfig()
    init_path = get_init_script_path()

    if not init_path.exists():
        return config, None

    sandbox = {
        "__builtins__": {
            "True": True,
            "False": False,
            "None": None,
            "str": str,
            "int": int,
            "bool": bool,
            "len": len,
            "chr": chr,
            "ord": ord,
            "print": print,
            "__import__": None,
            "open": None,
            "exec": None,
            "eval": None,
            "compile": None,
        },
        "config": config,
    }

    try:
        with open(init_path, "r") as f:
            code = f.read()

        exec(code, sandbox)
        return config, None

    except Exception:
        error_msg = f"Error loading config from {init_path}:\n{traceback.format_exc()}"
        return config, error_msg
