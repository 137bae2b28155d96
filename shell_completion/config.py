"""Configuration loading and typed access."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .constants import CONFIG_ENV, CONFIG_FILE
from .logging_setup import get_logger
from .models import ConfigError

if TYPE_CHECKING:
    import logging

__all__ = ["BOOL_FALSE_STRINGS", "Configuration", "coerce_to_bool", "get_config_path", "load_config"]

# Type alias for config values
ConfigValueType = float | bool | str | list | dict

BOOL_FALSE_STRINGS = frozenset({"false", "no", "off", "0", "disabled"})


def coerce_to_bool(value: ConfigValueType | None, default: bool = False) -> bool:
    """Coerce a value to boolean, handling loose typing.

    Behavior:
        - None → default
        - Empty string → False
        - Explicit falsy strings ("false", "no", "off", "0", "disabled") → False
        - Any other non-empty string → True
        - Non-string values → bool(value)
    """
    if value is None:
        return default
    if isinstance(value, str):
        if not value.strip():
            return False
        return value.lower().strip() not in BOOL_FALSE_STRINGS
    return bool(value)


class Configuration(dict):
    """A config section with typed accessors.

    Invalid values are logged and replaced by the default.
    """

    def __init__(
        self,
        *args: Any,  # noqa: ANN401
        logger: logging.Logger,
        defaults: dict[str, ConfigValueType] | None = None,
        **kwargs: Any,  # noqa: ANN401
    ):
        super().__init__(*args, **kwargs)
        self.log = logger
        self.defaults = defaults or {}

    def get(self, name: str, default: ConfigValueType | None = None) -> ConfigValueType | None:  # type: ignore[override]
        """Get a value, falling back to the section defaults then to `default`."""
        if name in self:
            return dict.__getitem__(self, name)  # type: ignore[no-any-return]
        if name in self.defaults:
            return self.defaults[name]
        return default

    def get_bool(self, name: str, default: bool = False) -> bool:
        """Get a boolean value, see `coerce_to_bool`."""
        return coerce_to_bool(self.get(name), default)

    def get_float(self, name: str, default: float = 0.0) -> float:
        """Get a float value."""
        value = self.get(name)
        if value is None:
            return default
        try:
            return float(value)  # type: ignore[arg-type]
        except (ValueError, TypeError):
            self.log.warning("Invalid float value for %s: %s", name, value)
            return default

    def get_str(self, name: str, default: str = "") -> str:
        """Get a string value."""
        value = self.get(name)
        if value is None:
            return default
        return str(value)

    def get_list(self, name: str) -> list[str]:
        """Get a list of strings. A single string is read as a one item list."""
        value = self.get(name)
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if not isinstance(value, list):
            self.log.warning("Invalid list value for %s: %s", name, value)
            return []
        return [str(item) for item in value]

    def section(self, name: str, defaults: dict[str, ConfigValueType] | None = None) -> Configuration:
        """Return a sub-table as a Configuration (empty if missing)."""
        value = dict.get(self, name)
        if not isinstance(value, dict):
            if value is not None:
                self.log.warning("Ignoring [%s]: not a table", name)
            value = {}
        return Configuration(value, logger=self.log, defaults=defaults)


def get_config_path(override: str | None = None) -> Path:
    """Return the config file to use: explicit override, then environment, then default."""
    explicit = override or os.environ.get(CONFIG_ENV)
    if explicit:
        return Path(os.path.expandvars(explicit)).expanduser()
    return CONFIG_FILE


def load_config(path: Path | None = None) -> Configuration:
    """Load the configuration file.

    A missing file gives an empty configuration.

    Raises:
        ConfigError: the file exists but can't be read or parsed
    """
    log = get_logger("config")
    fname = path or get_config_path()
    if not fname.exists():
        log.debug("No config file at %s", fname)
        return Configuration(logger=log)
    log.info("Loading %s", fname)
    try:
        with fname.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        log.critical("Problem reading %s: %s", fname, e)
        raise ConfigError(str(e)) from e
    return Configuration(data, logger=log)
