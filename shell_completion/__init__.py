"""shell_completion - tab completion helpers for command line tools.

Provides the pieces needed to answer a shell completion request:

- Tokenizing the typed line and locating the cursor
- Subcommand, directory and file completion strategies
- A flag grammar dispatcher deciding what the next word should be
- A ready to use completer for `cargo`, registered with `complete -C`
"""

from __future__ import annotations

from .grammar import Dispatcher, FlagGrammar, ValueCompletion, ValueKind
from .line import CompletionInput, LineInput, current_word, previous_word, tokenize
from .strategies import complete_directory, complete_file, complete_subcommand

__all__ = [
    "CompletionInput",
    "Dispatcher",
    "FlagGrammar",
    "LineInput",
    "ValueCompletion",
    "ValueKind",
    "complete_directory",
    "complete_file",
    "complete_subcommand",
    "current_word",
    "previous_word",
    "tokenize",
]
