"""Completion strategies.

Each strategy takes the typed input and returns the ordered list of
suggestions for the word under the cursor. None of them print anything.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .constants import PATH_SEPARATOR
from .line import current_word
from .logging_setup import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .line import CompletionInput

__all__ = [
    "complete_directory",
    "complete_file",
    "complete_subcommand",
    "split_path",
]


def complete_subcommand(inp: CompletionInput, candidates: Iterable[str]) -> list[str]:
    """Return the candidates starting with the current word, in their original order.

    Args:
        inp: The typed input
        candidates: Literal names (subcommands, flags, enum values)
    """
    word = current_word(inp)
    return [candidate for candidate in candidates if candidate.startswith(word)]


def complete_directory(inp: CompletionInput) -> list[str]:
    """Return the directories matching the current word, read as a partial path."""
    return _complete_path(current_word(inp), include_files=False)


def complete_file(inp: CompletionInput) -> list[str]:
    """Return the files and directories matching the current word.

    Directories are included because the user may be heading to a file
    several levels deep.
    """
    return _complete_path(current_word(inp), include_files=True)


def split_path(word: str) -> tuple[str, str, str]:
    """Split a partial path into the directory to list, the display prefix and the partial leaf.

    The prefix is everything the user typed up to the last separator, kept
    verbatim in the suggestions ("./", "../", "a/b/" or "/").

    >>> split_path("src/li")
    ('src', 'src/', 'li')
    >>> split_path("sr")
    ('.', '', 'sr')
    """
    head, sep, leaf = word.rpartition(PATH_SEPARATOR)
    if not sep:
        return (".", "", word)
    prefix = head + sep
    return (head or PATH_SEPARATOR, prefix, leaf)


def _is_directory(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def _complete_path(word: str, include_files: bool) -> list[str]:
    root, prefix, leaf = split_path(word)
    try:
        with os.scandir(root) as iterator:
            entries = sorted(iterator, key=lambda entry: entry.name)
    except OSError as e:
        get_logger("strategies").debug("Cannot list %s: %s", root, e)
        return []

    return [
        prefix + entry.name
        for entry in entries
        if entry.name.startswith(leaf) and (include_files or _is_directory(entry))
    ]
