"""Completion of the `cargo` command line."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from .constants import DEFAULT_DISCOVERY_TIMEOUT
from .discovery import discover_subcommands, merge_candidates
from .grammar import DIRECTORY, FILE, Dispatcher, FlagGrammar, ValueCompletion
from .logging_setup import get_logger

if TYPE_CHECKING:
    from .config import Configuration

__all__ = [
    "CARGO_GRAMMARS",
    "CONFIG_DEFAULTS",
    "STATIC_SUBCOMMANDS",
    "build_dispatcher",
    "list_subcommands",
]

# Built-in commands, offered when `cargo --list` can't be used
STATIC_SUBCOMMANDS = (
    "add",
    "bench",
    "build",
    "check",
    "clean",
    "doc",
    "fetch",
    "fix",
    "generate-lockfile",
    "help",
    "info",
    "init",
    "install",
    "locate-project",
    "login",
    "logout",
    "metadata",
    "new",
    "owner",
    "package",
    "pkgid",
    "publish",
    "remove",
    "report",
    "run",
    "rustc",
    "rustdoc",
    "search",
    "test",
    "tree",
    "uninstall",
    "update",
    "vendor",
    "verify-project",
    "version",
    "yank",
)

# Section [cargo] of the config file
CONFIG_DEFAULTS: dict[str, float | bool | str | list] = {
    "program": "cargo",
    "discover": True,
    "timeout": DEFAULT_DISCOVERY_TIMEOUT,
    "extra_subcommands": [],
}

_SHARED_UNARY = (
    "--release",
    "--all-features",
    "--no-default-features",
    "--verbose",
    "--quiet",
    "--frozen",
    "--locked",
    "--help",
)

_SHARED_VALUES = {
    "--target-dir": DIRECTORY,
    "--manifest-path": FILE,
    "--message-format": ValueCompletion.one_of("human", "json", "short"),
    "--color": ValueCompletion.one_of("auto", "always", "never"),
}

CARGO_GRAMMARS = (
    FlagGrammar(
        name="run",
        unary=_SHARED_UNARY,
        valued=(
            "--bin",
            "--example",
            "--package",
            "--jobs",
            "--features",
            "--target",
            "--target-dir",
            "--manifest-path",
            "--message-format",
            "--color",
        ),
        values=_SHARED_VALUES,
    ),
    FlagGrammar(
        name="test",
        unary=(
            "--lib",
            "--bins",
            "--examples",
            "--tests",
            "--benches",
            "--all-targets",
            "--doc",
            "--no-run",
            "--no-fail-fast",
            "--all",
            *_SHARED_UNARY,
        ),
        valued=(
            "--bin",
            "--example",
            "--test",
            "--bench",
            "--package",
            "--exclude",
            "--jobs",
            "--features",
            "--target",
            "--target-dir",
            "--manifest-path",
            "--message-format",
            "--color",
        ),
        values=_SHARED_VALUES,
    ),
)


def list_subcommands(config: Configuration) -> list[str]:
    """Return the cargo subcommands to offer.

    Discovered commands come first, then the configured extra ones.
    Falls back to the built-in list when discovery is disabled or fails.
    """
    names: list[str] = []
    if config.get_bool("discover", default=True):
        names = discover_subcommands(
            config.get_str("program", "cargo"),
            timeout=config.get_float("timeout", DEFAULT_DISCOVERY_TIMEOUT),
        )
    if not names:
        get_logger("cargo").debug("Using the built-in subcommand list")
        names = list(STATIC_SUBCOMMANDS)
    return merge_candidates(names, config.get_list("extra_subcommands"))


def build_dispatcher(config: Configuration) -> Dispatcher:
    """Create the dispatcher completing cargo command lines.

    Args:
        config: The [cargo] config section
    """
    return Dispatcher(CARGO_GRAMMARS, partial(list_subcommands, config))
