"""Tests for the logging setup."""

import logging
import os
import sys
from io import StringIO
from unittest.mock import patch

from shell_completion.logging_setup import LogObjects, ScreenLogFormatter, get_logger, init_logger, should_colorize


def make_record(level, message="hello"):
    return logging.LogRecord("test", level, __file__, 1, message, None, None)


def test_should_colorize_respects_no_color():
    """Test that NO_COLOR environment variable disables colors."""
    with patch.dict(os.environ, {"NO_COLOR": "1"}, clear=False):
        assert should_colorize() is False


def test_should_colorize_respects_force_color():
    """Test that FORCE_COLOR environment variable forces colors."""
    with patch.dict(os.environ, {"FORCE_COLOR": "1", "NO_COLOR": ""}, clear=False):
        assert should_colorize(StringIO()) is True


def test_should_colorize_non_tty():
    """Test that non-TTY streams don't get colors."""
    with patch.dict(os.environ, {"NO_COLOR": "", "FORCE_COLOR": ""}, clear=False):
        assert should_colorize(StringIO()) is False


def test_formatter_colors_errors_only():
    formatter = ScreenLogFormatter(use_colors=True)
    assert formatter.format(make_record(logging.ERROR)).startswith("\x1b[31;2m")
    assert formatter.format(make_record(logging.CRITICAL)).endswith("\x1b[0m")
    assert not formatter.format(make_record(logging.INFO)).startswith("\x1b[")


def test_formatter_without_colors():
    formatter = ScreenLogFormatter(use_colors=False)
    assert "\x1b[" not in formatter.format(make_record(logging.WARNING))


def test_handlers_never_write_to_stdout(tmp_path):
    init_logger(str(tmp_path / "log.txt"))
    try:
        logger = get_logger("test-handlers")
        assert len(logger.handlers) == 2
        for handler in logger.handlers:
            assert getattr(handler, "stream", None) is not sys.stdout
        assert not logger.propagate
    finally:
        init_logger("/dev/null", force_debug=True)


def test_get_logger_drops_stale_handlers():
    logger = get_logger("test-stale")
    init_logger("/dev/null", force_debug=True)
    logger = get_logger("test-stale")
    assert logger.handlers == LogObjects.handlers


def test_explicit_level():
    assert get_logger("test-level", logging.ERROR).level == logging.ERROR


def test_without_screen_nothing_reaches_stderr(capfd):
    init_logger(screen=False)
    try:
        assert [type(handler) for handler in LogObjects.handlers] == [logging.NullHandler]
        get_logger("test-silent").critical("not shown")
        assert capfd.readouterr().err == ""
    finally:
        init_logger("/dev/null", force_debug=True)


def test_without_screen_logs_to_file(tmp_path, capfd):
    log_file = tmp_path / "log.txt"
    init_logger(str(log_file), screen=False)
    try:
        get_logger("test-file-only").error("kept in the file")
        assert capfd.readouterr().err == ""
        assert "kept in the file" in log_file.read_text()
    finally:
        init_logger("/dev/null", force_debug=True)
