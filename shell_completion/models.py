"""Errors and exit codes shared by the completion engine and its CLI."""

from enum import IntEnum, StrEnum

__all__ = [
    "CompletionError",
    "ConfigError",
    "ExitCode",
    "InputErrorKind",
    "InputParsingError",
    "MalformedInput",
    "NoPreviousWord",
]


class CompletionError(Exception):
    """Base class for errors which abort a completion request."""


class MalformedInput(CompletionError):
    """The line and cursor offset given by the shell are inconsistent."""


class NoPreviousWord(CompletionError):
    """The cursor sits on the command name, there is nothing before it."""


class ConfigError(CompletionError):
    """Used for configuration errors which already triggered logging."""


class InputErrorKind(StrEnum):
    """What was wrong with the data passed by the shell."""

    MISSING_ARG = "missing positional argument"
    MISSING_ENV_VAR = "missing environment variable"
    CURSOR_NOT_NUMBER = "cursor position is not a number"


class InputParsingError(CompletionError):
    """The shell did not provide the expected arguments or environment."""

    def __init__(self, kind: InputErrorKind, detail: str = "") -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind}: {detail}" if detail else str(kind))


# Exit codes for the completion helpers
class ExitCode(IntEnum):
    """Standard exit codes for completion helpers."""

    SUCCESS = 0
    USAGE_ERROR = 1  # Missing positional argument
    ENV_ERROR = 2  # Missing or invalid COMP_* variables, broken config
    INPUT_ERROR = 3  # Cursor out of bounds or on the command name
    INTERNAL_ERROR = 4  # Unexpected failure

    @classmethod
    def for_error(cls, error: CompletionError) -> "ExitCode":
        """Map an engine error to the exit code reported to the shell."""
        if isinstance(error, InputParsingError):
            return cls.USAGE_ERROR if error.kind is InputErrorKind.MISSING_ARG else cls.ENV_ERROR
        if isinstance(error, ConfigError):
            return cls.ENV_ERROR
        return cls.INPUT_ERROR
