"""Subcommand discovery.

Asks the completed program for its own subcommands (e.g. `cargo --list`),
which also reports third party subcommands installed on the PATH.
"""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING

from .constants import DEFAULT_DISCOVERY_TIMEOUT
from .logging_setup import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = ["discover_subcommands", "merge_candidates", "parse_subcommand_listing"]


def parse_subcommand_listing(text: str, skip_header: bool = True) -> list[str]:
    """Extract subcommand names from a listing.

    Each entry line reads "NAME  description", the first word is kept.

    Args:
        text: The program output
        skip_header: Ignore the first line ("Installed Commands:")
    """
    lines = text.splitlines()
    if skip_header:
        lines = lines[1:]
    names: list[str] = []
    for line in lines:
        words = line.split()
        if words:
            names.append(words[0])
    return names


def discover_subcommands(
    program: str,
    list_flag: str = "--list",
    skip_header: bool = True,
    timeout: float = DEFAULT_DISCOVERY_TIMEOUT,
) -> list[str]:
    """Run `program list_flag` and return the subcommands it reports.

    Failures are logged and return an empty list, the caller provides a fallback.

    Args:
        program: Executable to query
        list_flag: Argument making the program list its subcommands
        skip_header: Ignore the first output line
        timeout: Seconds to wait for the program
    """
    log = get_logger("discovery")
    try:
        result = subprocess.run(
            [program, list_flag],
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired, UnicodeDecodeError) as e:
        log.info("Unable to query %s for subcommands: %s", program, e)
        return []
    if result.returncode != 0:
        log.info("%s %s exited with code %d", program, list_flag, result.returncode)
        return []
    names = parse_subcommand_listing(result.stdout, skip_header)
    log.debug("Discovered %d subcommands from %s", len(names), program)
    return names


def merge_candidates(*sources: Iterable[str]) -> list[str]:
    """Concatenate candidate sets, keeping the first occurrence of each name."""
    seen: set[str] = set()
    merged: list[str] = []
    for source in sources:
        for name in source:
            if name not in seen:
                seen.add(name)
                merged.append(name)
    return merged
