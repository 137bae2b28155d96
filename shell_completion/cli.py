"""Command line entry point of the cargo completion helper.

When bash runs it through `complete -C`, the helper receives the raw words as
arguments and the line in the environment. Those words are never parsed as
options since they routinely start with "-". Without that environment it
behaves as a regular CLI generating the shell registration snippet.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import shtab

from .bash import BashCompletionInput
from .cargo import CONFIG_DEFAULTS, build_dispatcher
from .config import get_config_path, load_config
from .constants import COMP_LINE_ENV, COMP_POINT_ENV, COMPLETED_COMMAND, HELPER_NAME, LOG_FILE_ENV, SUPPORTED_SHELLS
from .hooks import generate_hook, install_hook
from .logging_setup import get_logger, init_logger
from .models import CompletionError, ExitCode

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

__all__ = ["get_parser", "main", "run_completion", "suggest"]


def suggest(completions: Iterable[str], stream: TextIO | None = None) -> None:
    """Print the completions, one per line."""
    out = sys.stdout if stream is None else stream
    for completion in completions:
        print(completion, file=out)


def run_completion(words: Sequence[str], environ: Mapping[str, str], config_file: str | None = None) -> ExitCode:
    """Answer a completion request.

    Nothing is printed unless the request succeeds.

    Args:
        words: Command, current word and previous word, as given by bash
        environ: Environment holding COMP_LINE and COMP_POINT
        config_file: Alternate configuration file
    """
    log = get_logger("cli")
    try:
        inp = BashCompletionInput.from_args(words, environ)
        if not inp.positional_words_agree():
            log.debug("Shell words %r differ from the line %r", words, inp.line)
        config = load_config(get_config_path(config_file)).section("cargo", CONFIG_DEFAULTS)
        completions = build_dispatcher(config).complete(inp)
    except CompletionError as e:
        log.critical("Completion failed: %s", e)
        return ExitCode.for_error(e)
    log.debug("%d completions for %r", len(completions), inp.line)
    suggest(completions)
    return ExitCode.SUCCESS


def get_parser() -> argparse.ArgumentParser:
    """Parses the command line arguments."""
    parser = argparse.ArgumentParser(
        prog=HELPER_NAME,
        description=f"Tab completion helper for {COMPLETED_COMMAND}",
        allow_abbrev=False,
    )
    parser.add_argument(
        "words",
        nargs="*",
        metavar="word",
        help="command, current word and previous word, as passed by `complete -C`",
    )
    parser.add_argument(
        "--debug",
        help="Enable debug mode and log to a file",
        metavar="filename",
    ).complete = shtab.FILE  # type: ignore[attr-defined]
    parser.add_argument(
        "--config",
        help="Use a different configuration file",
        metavar="filename",
    ).complete = shtab.FILE  # type: ignore[attr-defined]
    parser.add_argument(
        "--hook",
        choices=SUPPORTED_SHELLS,
        help="Print the snippet registering this helper in the given shell",
    )
    parser.add_argument(
        "--install",
        nargs="?",
        const="default",
        metavar="path",
        help="With --hook, write the snippet to a file instead ('default' or an absolute path)",
    ).complete = shtab.FILE  # type: ignore[attr-defined]
    shtab.add_argument_to(parser, ["--print-completion"])
    return parser


def _run_hook(shell: str, install: str | None) -> ExitCode:
    """Print or install the registration snippet."""
    if install is None:
        sys.stdout.write(generate_hook(shell, COMPLETED_COMMAND, HELPER_NAME))
        return ExitCode.SUCCESS
    success, message = install_hook(shell, COMPLETED_COMMAND, HELPER_NAME, install)
    if not success:
        get_logger("cli").error(message)
        return ExitCode.USAGE_ERROR
    print(message)
    return ExitCode.SUCCESS


def _dispatch(argv: Sequence[str], environ: Mapping[str, str]) -> ExitCode:
    if COMP_LINE_ENV in environ or COMP_POINT_ENV in environ:
        init_logger(filename=environ.get(LOG_FILE_ENV), screen=False)
        return run_completion(argv, environ)

    parser = get_parser()
    args = parser.parse_args(argv)
    if args.debug:
        init_logger(filename=args.debug, force_debug=True)
    else:
        init_logger()

    if args.install is not None and args.hook is None:
        parser.error("--install requires --hook")
    if args.hook:
        return _run_hook(args.hook, args.install)
    if args.config and not Path(args.config).expanduser().exists():
        get_logger("cli").warning("Config file %s not found, using defaults", args.config)
    if args.words:
        return run_completion(args.words, environ, args.config)
    parser.print_usage(sys.stderr)
    return ExitCode.USAGE_ERROR


def main(argv: Sequence[str] | None = None) -> None:
    """Run the command."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        code = _dispatch(args, os.environ)
    except KeyboardInterrupt:
        code = ExitCode.INTERNAL_ERROR
    except Exception:  # pylint: disable=W0718
        get_logger("cli").critical("Unhandled exception:", exc_info=True)
        code = ExitCode.INTERNAL_ERROR
    sys.exit(code)


if __name__ == "__main__":
    main()
