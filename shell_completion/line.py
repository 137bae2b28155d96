"""Command line tokenizer and word accessors.

The shell hands over the raw line and a cursor offset. Arguments are split on
every literal space, without any quoting or escaping support, so the index of
the argument under the cursor is simply the number of spaces before it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from .models import MalformedInput, NoPreviousWord

__all__ = [
    "CompletionInput",
    "CursorPosition",
    "LineInput",
    "current_word",
    "previous_word",
    "tokenize",
]

_SPACE = " "


class CompletionInput(Protocol):
    """What a completion strategy needs to know about the typed line."""

    def args(self) -> list[str]:
        """Return the arguments typed so far, including the command name."""
        ...

    def arg_index(self) -> int:
        """Return the index of the argument under the cursor."""
        ...

    def char_index(self) -> int:
        """Return the cursor offset inside that argument."""
        ...


@dataclass(frozen=True)
class CursorPosition:
    """Location of the cursor in a tokenized line."""

    arg_index: int
    char_index: int


def tokenize(line: str, cursor: int) -> CursorPosition:
    """Locate the cursor within the arguments of `line`.

    Args:
        line: The full text typed by the user (may extend past the cursor)
        cursor: Offset of the cursor in `line`

    Raises:
        MalformedInput: the cursor is outside of the line
    """
    if cursor < 0 or cursor > len(line):
        msg = f"cursor position {cursor} is outside of a {len(line)} characters line"
        raise MalformedInput(msg)
    before_cursor = line[:cursor]
    return CursorPosition(
        arg_index=before_cursor.count(_SPACE),
        char_index=len(before_cursor.rsplit(_SPACE, 1)[-1]),
    )


@dataclass(frozen=True)
class LineInput:
    """A line typed by the user and the cursor position in it."""

    line: str
    cursor: int
    position: CursorPosition = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", tokenize(self.line, self.cursor))

    @classmethod
    def from_line(cls, line: str) -> LineInput:
        """Build an input with the cursor at the end of `line`."""
        return cls(line, len(line))

    def args(self) -> list[str]:
        return self.line.split(_SPACE)

    def arg_index(self) -> int:
        return self.position.arg_index

    def char_index(self) -> int:
        return self.position.char_index


def current_word(inp: CompletionInput) -> str:
    """Return the word under the cursor, without the characters after the cursor."""
    return inp.args()[inp.arg_index()][: inp.char_index()]


def previous_word(inp: CompletionInput) -> str:
    """Return the word before the one under the cursor.

    Raises:
        NoPreviousWord: the cursor is on the command name
    """
    index = inp.arg_index()
    if index == 0:
        msg = "the cursor is on the command name, there is no previous word"
        raise NoPreviousWord(msg)
    return inp.args()[index - 1]
