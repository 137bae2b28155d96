"""Shared constants for shell_completion."""

import os
from pathlib import Path

__all__ = [
    "COMP_LINE_ENV",
    "COMP_POINT_ENV",
    "COMPLETED_COMMAND",
    "CONFIG_ENV",
    "CONFIG_FILE",
    "DEBUG_ENV",
    "DEFAULT_DISCOVERY_TIMEOUT",
    "FLAG_PREFIX",
    "HELPER_NAME",
    "LOG_FILE_ENV",
    "PATH_SEPARATOR",
    "SUPPORTED_SHELLS",
]

# Variables set by bash before running a `complete -C` helper
COMP_LINE_ENV = "COMP_LINE"
COMP_POINT_ENV = "COMP_POINT"

DEBUG_ENV = "SHELL_COMPLETION_DEBUG"
LOG_FILE_ENV = "SHELL_COMPLETION_LOG"
CONFIG_ENV = "SHELL_COMPLETION_CONFIG"

# Config file path - use XDG_CONFIG_HOME with fallback to ~/.config
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
CONFIG_FILE = _xdg_config_home / "shell-completion" / "config.toml"

# Executable installed by this package, and the command it completes
HELPER_NAME = "cargo-completions"
COMPLETED_COMMAND = "cargo"

FLAG_PREFIX = "-"
PATH_SEPARATOR = "/"

# Seconds allowed for `<program> --list`
DEFAULT_DISCOVERY_TIMEOUT = 2.0

# Shells able to register a `complete -C` helper
SUPPORTED_SHELLS = ("bash", "zsh")
