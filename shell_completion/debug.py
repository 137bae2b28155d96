"""Debug mode state management."""

import os

from .constants import DEBUG_ENV

__all__ = [
    "is_debug",
    "set_debug",
]


class _DebugState:
    """Debug flag, read from the environment on first use unless set before."""

    value: bool | None = None


_debug_state = _DebugState()


def is_debug() -> bool:
    """Return the current debug state.

    SHELL_COMPLETION_DEBUG follows the config boolean rules: "0", "false", "no",
    "off" and "disabled" leave debug mode off.
    """
    if _debug_state.value is None:
        # config imports the logging setup, which imports this module
        from .config import coerce_to_bool  # pylint: disable=import-outside-toplevel

        _debug_state.value = coerce_to_bool(os.environ.get(DEBUG_ENV))
    return _debug_state.value


def set_debug(value: bool) -> None:
    """Set the debug state."""
    _debug_state.value = value
