"""Flag grammar tables and the dispatcher deciding what to complete.

A command line is read as `program subcommand [flags and values...]`. For the
subcommand position the dispatcher offers the known subcommands. After it,
the previous word tells whether the user is starting a new flag or typing
the value of a value-taking flag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from .constants import FLAG_PREFIX
from .line import previous_word
from .logging_setup import get_logger
from .models import NoPreviousWord
from .strategies import complete_directory, complete_file, complete_subcommand

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from .line import CompletionInput

__all__ = [
    "Dispatcher",
    "FlagGrammar",
    "ValueCompletion",
    "ValueKind",
]


class ValueKind(StrEnum):
    """How the value of a value-taking flag is completed."""

    TEXT = "text"  # free text, nothing to suggest
    DIRECTORY = "directory"
    FILE = "file"
    CHOICES = "choices"


@dataclass(frozen=True)
class ValueCompletion:
    """How the value of a flag is completed."""

    kind: ValueKind
    choices: tuple[str, ...] = ()

    @classmethod
    def one_of(cls, *choices: str) -> ValueCompletion:
        """Build a fixed enumeration, completed in the given order."""
        return cls(ValueKind.CHOICES, choices)


DIRECTORY = ValueCompletion(ValueKind.DIRECTORY)
FILE = ValueCompletion(ValueKind.FILE)
TEXT = ValueCompletion(ValueKind.TEXT)


@dataclass(frozen=True)
class FlagGrammar:
    """Flags accepted by a subcommand.

    `unary` flags take no value, `valued` flags consume the next word.
    `values` maps some valued flags to the way their value is completed;
    valued flags missing from it are free text.
    """

    name: str
    unary: tuple[str, ...] = ()
    valued: tuple[str, ...] = ()
    values: Mapping[str, ValueCompletion] = field(default_factory=dict)

    def __post_init__(self) -> None:
        overlap = set(self.unary) & set(self.valued)
        if overlap:
            msg = f"{self.name}: flags both unary and valued: {', '.join(sorted(overlap))}"
            raise ValueError(msg)
        unknown = set(self.values) - set(self.valued)
        if unknown:
            msg = f"{self.name}: value completion for flags not taking a value: {', '.join(sorted(unknown))}"
            raise ValueError(msg)

    @property
    def flags(self) -> tuple[str, ...]:
        """All the flags, unary ones first."""
        return self.unary + self.valued

    def starts_new_flag(self, word: str) -> bool:
        """Tell if the word following `word` is a new flag rather than a value."""
        return word == self.name or not word.startswith(FLAG_PREFIX) or word in self.unary

    def value_for(self, flag: str) -> ValueCompletion | None:
        """Return the value completion of a valued flag, None for unknown flags."""
        if flag not in self.valued:
            return None
        return self.values.get(flag, TEXT)


def complete_value(inp: CompletionInput, value: ValueCompletion) -> list[str]:
    """Complete the value of a flag."""
    if value.kind == ValueKind.DIRECTORY:
        return complete_directory(inp)
    if value.kind == ValueKind.FILE:
        return complete_file(inp)
    if value.kind == ValueKind.CHOICES:
        return complete_subcommand(inp, value.choices)
    # Free text
    return []


class Dispatcher:
    """Pick the completion strategy matching the cursor position.

    Args:
        grammars: Flag grammars of the subcommands with flag completion
        subcommands: Returns the names offered right after the program name
    """

    def __init__(
        self,
        grammars: Iterable[FlagGrammar],
        subcommands: Callable[[], Iterable[str]],
    ) -> None:
        self.grammars = {grammar.name: grammar for grammar in grammars}
        self.subcommands = subcommands
        self.log = get_logger("dispatcher")

    def complete(self, inp: CompletionInput) -> list[str]:
        """Return the suggestions for the word under the cursor.

        Raises:
            NoPreviousWord: the cursor is on the program name
        """
        index = inp.arg_index()
        if index == 0:
            msg = "refusing to complete the program name"
            raise NoPreviousWord(msg)
        if index == 1:
            return complete_subcommand(inp, self.subcommands())

        grammar = self.grammars.get(inp.args()[1])
        if grammar is None:
            self.log.debug("No grammar for subcommand %r", inp.args()[1])
            return []
        return self.complete_flags(inp, grammar)

    def complete_flags(self, inp: CompletionInput, grammar: FlagGrammar) -> list[str]:
        """Complete a flag or a flag value of a subcommand."""
        previous = previous_word(inp)
        if grammar.starts_new_flag(previous):
            return complete_subcommand(inp, grammar.flags)

        value = grammar.value_for(previous)
        if value is None:
            self.log.debug("Unknown flag %r for %s", previous, grammar.name)
            return []
        return complete_value(inp, value)
