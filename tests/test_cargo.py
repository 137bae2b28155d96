"""Tests for the cargo completer."""

import pytest

from shell_completion.cargo import CARGO_GRAMMARS, CONFIG_DEFAULTS, STATIC_SUBCOMMANDS, build_dispatcher, list_subcommands
from shell_completion.config import Configuration
from shell_completion.line import LineInput
from shell_completion.logging_setup import get_logger


def make_config(**values):
    return Configuration(values, logger=get_logger("test"), defaults=CONFIG_DEFAULTS)


def complete(line, **config):
    return build_dispatcher(make_config(**config)).complete(LineInput.from_line(line))


@pytest.mark.usefixtures("cargo_listing")
class TestCargo:
    """Completion scenarios for cargo command lines."""

    def test_subcommand_fetch(self):
        assert complete("cargo fe") == ["fetch"]

    def test_subcommand_test(self):
        assert complete("cargo tes") == ["test"]

    def test_run_option_bin(self):
        assert complete("cargo run --bi") == ["--bin"]

    def test_run_option_bin_requires_name(self):
        assert complete("cargo run --bin ") == []

    def test_run_option_target_dir(self, project_tree):
        assert complete("cargo run --target-dir sr") == ["src"]

    def test_run_option_manifest_path(self, project_tree):
        assert complete("cargo run --manifest-path Cargo.to") == ["Cargo.toml"]

    def test_run_option_message_format(self):
        assert complete("cargo run --message-format ") == ["human", "json", "short"]

    def test_run_option_color(self, project_tree):
        assert complete("cargo run --color ") == ["auto", "always", "never"]

    def test_run_option_chaining(self):
        assert complete("cargo run --color auto --manif") == ["--manifest-path"]

    def test_test_option_lib(self):
        assert complete("cargo test --li") == ["--lib"]

    def test_test_after_unary(self):
        assert complete("cargo test --lib --no") == ["--no-run", "--no-fail-fast", "--no-default-features"]

    def test_test_jobs_takes_a_value(self):
        assert complete("cargo test --jobs ") == []

    def test_test_target_dir(self, project_tree):
        assert complete("cargo test --target-dir ./") == ["./scripts", "./src"]

    def test_unknown_flag(self):
        assert complete("cargo run --bogus ") == []

    def test_subcommand_without_grammar(self):
        assert complete("cargo build --re") == []

    def test_idempotent(self, project_tree):
        assert complete("cargo run --manifest-path ") == complete("cargo run --manifest-path ")


class TestSubcommandList:
    """Tests for the top-level candidate set."""

    def test_discovered(self, cargo_listing):
        names = list_subcommands(make_config())
        assert names[:3] == ["add", "bench", "build"]
        cargo_listing.assert_called_once_with("cargo", timeout=2.0)

    def test_configured_program_and_timeout(self, cargo_listing):
        list_subcommands(make_config(program="/opt/cargo", timeout="0.5"))
        cargo_listing.assert_called_once_with("/opt/cargo", timeout=0.5)

    def test_extra_subcommands_appended_once(self, cargo_listing):
        names = list_subcommands(make_config(extra_subcommands=["watch", "expand"]))
        assert names[-2:] == ["watch", "expand"]
        assert names.count("watch") == 1

    def test_fallback_when_discovery_fails(self, mocker):
        mocker.patch("shell_completion.cargo.discover_subcommands", return_value=[])
        assert list_subcommands(make_config()) == list(STATIC_SUBCOMMANDS)
        assert complete("cargo fe") == ["fetch"]

    def test_discovery_disabled(self, cargo_listing):
        assert list_subcommands(make_config(discover=False)) == list(STATIC_SUBCOMMANDS)
        cargo_listing.assert_not_called()

    def test_discovery_disabled_as_string(self, cargo_listing):
        list_subcommands(make_config(discover="no"))
        cargo_listing.assert_not_called()


def test_grammars_cover_run_and_test():
    assert [grammar.name for grammar in CARGO_GRAMMARS] == ["run", "test"]


@pytest.mark.parametrize("grammar", CARGO_GRAMMARS, ids=lambda g: g.name)
def test_every_flag_is_a_long_option(grammar):
    assert all(flag.startswith("--") for flag in grammar.flags)
