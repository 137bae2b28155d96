"""Input passed by bash to a `complete -C` helper.

Bash runs the helper as `helper COMMAND CURRENT_WORD PREVIOUS_WORD` with the
whole line in $COMP_LINE and the cursor offset in $COMP_POINT.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .constants import COMP_LINE_ENV, COMP_POINT_ENV
from .line import CursorPosition, current_word, previous_word, tokenize
from .models import InputErrorKind, InputParsingError, NoPreviousWord

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

__all__ = ["BashCompletionInput"]

_POSITIONAL_NAMES = ("command", "current word", "preceding word")


@dataclass(frozen=True)
class BashCompletionInput:
    """Data handed over by bash to a completion helper."""

    # Argument 1 - the name of the command whose arguments are being completed
    command: str
    # Argument 2 - the word under the cursor when tab was pressed
    current_word: str
    # Argument 3 - the word preceding the word under the cursor
    preceding_word: str
    # $COMP_LINE - the full text entered by the user
    line: str
    # $COMP_POINT - the cursor position, an index into `line`
    cursor_position: int
    position: CursorPosition = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", tokenize(self.line, self.cursor_position))

    @classmethod
    def from_args(
        cls,
        argv: Sequence[str] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> BashCompletionInput:
        """Read the positional arguments and the environment.

        Args:
            argv: Arguments after the program name (defaults to sys.argv[1:])
            environ: Environment (defaults to os.environ)

        Raises:
            InputParsingError: an argument or variable is missing, or the cursor isn't a number
            MalformedInput: the cursor is outside of the line
        """
        args = list(sys.argv[1:] if argv is None else argv)
        env = os.environ if environ is None else environ

        if len(args) < len(_POSITIONAL_NAMES):
            raise InputParsingError(InputErrorKind.MISSING_ARG, _POSITIONAL_NAMES[len(args)])
        try:
            line = env[COMP_LINE_ENV]
            point = env[COMP_POINT_ENV]
        except KeyError as e:
            raise InputParsingError(InputErrorKind.MISSING_ENV_VAR, e.args[0]) from e
        try:
            cursor_position = int(point)
        except ValueError as e:
            raise InputParsingError(InputErrorKind.CURSOR_NOT_NUMBER, repr(point)) from e

        command, cur, prev = args[:3]
        return cls(command, cur, prev, line, cursor_position)

    def args(self) -> list[str]:
        # No quoting support: a space always splits arguments
        return self.line.split(" ")

    def arg_index(self) -> int:
        return self.position.arg_index

    def char_index(self) -> int:
        return self.position.char_index

    def positional_words_agree(self) -> bool:
        """Check the words given as arguments match the ones derived from the line.

        Bash splits on COMP_WORDBREAKS (":", "=", ...) so they can legitimately differ.
        """
        try:
            derived_previous = previous_word(self)
        except NoPreviousWord:
            derived_previous = ""
        return (current_word(self), derived_previous) == (self.current_word, self.preceding_word)
