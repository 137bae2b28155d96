"""Shell registration of completion helpers.

A helper is registered with `complete -C HELPER COMMAND`; zsh understands it
once `bashcompinit` is loaded.
"""

from __future__ import annotations

from pathlib import Path

from .constants import SUPPORTED_SHELLS
from .logging_setup import get_logger

__all__ = ["generate_hook", "get_default_path", "install_hook"]

# Default user-level completion paths, formatted with the completed command
DEFAULT_PATHS = {
    "bash": "~/.local/share/bash-completion/completions/{command}",
    "zsh": "~/.zsh/{command}-completion.zsh",
}


def generate_hook(shell: str, command: str, helper: str) -> str:
    """Return the snippet registering `helper` as the completer of `command`.

    Raises:
        ValueError: unsupported shell
    """
    if shell not in SUPPORTED_SHELLS:
        msg = f"Unsupported shell: {shell}. Supported: {', '.join(SUPPORTED_SHELLS)}"
        raise ValueError(msg)
    registration = f"complete -C {helper} {command}\n"
    if shell == "zsh":
        return f"autoload -U +X bashcompinit && bashcompinit\n{registration}"
    return registration


def get_default_path(shell: str, command: str) -> str:
    """Get the default user-level completion path for a shell.

    Returns:
        Expanded absolute path to the default completion file
    """
    return str(Path(DEFAULT_PATHS[shell].format(command=command)).expanduser())


def _get_success_message(shell: str, output_path: str, used_default: bool) -> str:
    """Generate a friendly success message after installing a hook."""
    # Use ~ in display path for readability
    display_path = output_path.replace(str(Path.home()), "~")

    if not used_default:
        return f"Completion hook written to {display_path}"

    if shell == "zsh":
        return (
            f"Completion hook installed to {display_path}\n"
            "Load it from ~/.zshrc:\n"
            f"  source {display_path}\n"
            "Then reload your shell."
        )

    return f"Completion hook installed to {display_path}\nReload your shell or run: source ~/.bashrc"


def install_hook(shell: str, command: str, helper: str, target: str = "default") -> tuple[bool, str]:
    """Write the registration snippet to a file.

    Args:
        shell: Shell type ("bash" or "zsh")
        command: The completed command
        helper: The completion helper executable
        target: "default" or an absolute (or ~) path

    Returns:
        Tuple of (success, message)
    """
    if target != "default" and not target.startswith(("/", "~")):
        return (False, "Relative paths not supported. Use absolute path, ~/path, or 'default'.")

    try:
        content = generate_hook(shell, command, helper)
    except ValueError as e:
        return (False, str(e))

    if target == "default":
        output_path = get_default_path(shell, command)
        used_default = True
    else:
        output_path = str(Path(target).expanduser())
        used_default = False

    get_logger("hooks").debug("Writing completion hook to: %s", output_path)

    try:
        parent_dir = Path(output_path).parent
        parent_dir.mkdir(parents=True, exist_ok=True)
        Path(output_path).write_text(content, encoding="utf-8")
    except OSError as e:
        return (False, f"Failed to write completion file: {e}")

    return (True, _get_success_message(shell, output_path, used_default))
