"""Tests for the bash `complete -C` input."""

import pytest

from shell_completion.bash import BashCompletionInput
from shell_completion.line import current_word, previous_word
from shell_completion.models import InputErrorKind, InputParsingError, MalformedInput


def bash_env(line, point=None):
    return {"COMP_LINE": line, "COMP_POINT": str(len(line) if point is None else point)}


def test_trait_impl():
    inp = BashCompletionInput(
        command="democli",
        current_word="src/li",
        preceding_word="democli",
        line="democli src/li",
        cursor_position=14,
    )
    assert inp.args() == ["democli", "src/li"]
    assert inp.arg_index() == 1
    assert inp.char_index() == 6
    assert current_word(inp) == "src/li"
    assert previous_word(inp) == "democli"


class TestFromArgs:
    """Tests for BashCompletionInput.from_args."""

    def test_reads_arguments_and_environment(self):
        inp = BashCompletionInput.from_args(["cargo", "--bi", "run"], bash_env("cargo run --bi"))
        assert inp.command == "cargo"
        assert inp.current_word == "--bi"
        assert inp.preceding_word == "run"
        assert inp.cursor_position == 14
        assert inp.arg_index() == 2

    def test_extra_arguments_are_ignored(self):
        inp = BashCompletionInput.from_args(["cargo", "", "run", "extra"], bash_env("cargo run "))
        assert inp.preceding_word == "run"

    @pytest.mark.parametrize(
        ("argv", "missing"),
        [([], "command"), (["cargo"], "current word"), (["cargo", "fe"], "preceding word")],
    )
    def test_missing_argument(self, argv, missing):
        with pytest.raises(InputParsingError) as excinfo:
            BashCompletionInput.from_args(argv, bash_env("cargo fe"))
        assert excinfo.value.kind is InputErrorKind.MISSING_ARG
        assert excinfo.value.detail == missing

    @pytest.mark.parametrize("variable", ["COMP_LINE", "COMP_POINT"])
    def test_missing_environment(self, variable):
        env = bash_env("cargo fe")
        del env[variable]
        with pytest.raises(InputParsingError) as excinfo:
            BashCompletionInput.from_args(["cargo", "fe", "cargo"], env)
        assert excinfo.value.kind is InputErrorKind.MISSING_ENV_VAR
        assert excinfo.value.detail == variable

    def test_cursor_not_a_number(self):
        with pytest.raises(InputParsingError) as excinfo:
            BashCompletionInput.from_args(["cargo", "fe", "cargo"], bash_env("cargo fe", "eight"))
        assert excinfo.value.kind is InputErrorKind.CURSOR_NOT_NUMBER

    def test_cursor_out_of_bounds(self):
        with pytest.raises(MalformedInput):
            BashCompletionInput.from_args(["cargo", "fe", "cargo"], bash_env("cargo fe", 42))

    def test_defaults_to_process_arguments(self, monkeypatch):
        monkeypatch.setattr("sys.argv", ["cargo-completions", "cargo", "fe", "cargo"])
        monkeypatch.setenv("COMP_LINE", "cargo fe")
        monkeypatch.setenv("COMP_POINT", "8")
        inp = BashCompletionInput.from_args()
        assert inp.line == "cargo fe"
        assert current_word(inp) == "fe"


class TestPositionalWordsAgree:
    """Tests for the consistency check between bash words and the line."""

    def test_agree(self):
        inp = BashCompletionInput.from_args(["cargo", "--bi", "run"], bash_env("cargo run --bi"))
        assert inp.positional_words_agree()

    def test_disagree(self):
        """Bash breaks words on '=' while the line is only split on spaces."""
        inp = BashCompletionInput.from_args(["cargo", "auto", "="], bash_env("cargo run --color=auto"))
        assert not inp.positional_words_agree()

    def test_cursor_on_command(self):
        inp = BashCompletionInput.from_args(["cargo", "car", ""], bash_env("car"))
        assert inp.positional_words_agree()
