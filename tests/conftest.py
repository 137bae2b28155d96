" generic fixtures "
from pathlib import Path

import pytest

from shell_completion.constants import CONFIG_ENV, LOG_FILE_ENV


def pytest_configure():
    "Runs once before all"
    from shell_completion.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    "Never read the user's configuration file"
    monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "missing-config.toml"))
    monkeypatch.delenv(LOG_FILE_ENV, raising=False)
    yield


@pytest.fixture
def project_tree(monkeypatch, tmp_path) -> Path:
    "A small cargo project, used as working directory"
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "src" / "lib.rs").write_text("")
    (root / "src" / "main.rs").write_text("fn main() {}\n")
    (root / "scripts").mkdir()
    (root / "Cargo.toml").write_text('[package]\nname = "demo"\n')
    (root / "README.md").write_text("demo\n")
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def cargo_listing(mocker):
    "Replace `cargo --list` with a fixed set of subcommands"
    return mocker.patch(
        "shell_completion.cargo.discover_subcommands",
        return_value=["add", "bench", "build", "check", "fetch", "fix", "run", "test", "watch"],
    )
