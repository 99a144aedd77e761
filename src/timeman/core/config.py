"""Configuration loading and management."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from timeman.core.exceptions import ConfigError
from timeman.core.formatter import DEFAULT_FORMAT

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "timeman.toml"
USER_CONFIG_DIR = (".config", "timeman")

# Places find_config_file() looks, in priority order
SEARCH_LOCATIONS: tuple[str, ...] = (
    f"./{CONFIG_FILENAME}",
    "./pyproject.toml [tool.timeman]",
    f"<git root>/{CONFIG_FILENAME}",
    "~/" + "/".join(USER_CONFIG_DIR) + "/config.toml",
)

# Environment variable -> config key
ENV_OVERRIDES: dict[str, str] = {
    "TIMEMAN_FORMAT": "format",
    "TIMEMAN_OFFSET": "offset",
}


@dataclass
class TimeManConfig:
    """Loaded configuration.

    ``offset`` of None means the host's local offset.
    """

    format: str = DEFAULT_FORMAT
    offset: str | None = None
    duration_flags: str = ""
    pretty: bool = False

    _source_path: Path | None = field(default=None, repr=False)

    @property
    def source_path(self) -> Path | None:
        return self._source_path

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TimeManConfig":
        """Build a config from a ``[defaults]`` table, rejecting unknown keys."""
        known = {f.name for f in fields(cls) if not f.name.startswith("_")}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        config = cls(**data)
        if not isinstance(config.format, str):
            raise ConfigError("Config key 'format' must be a string")
        if config.offset is not None and not isinstance(config.offset, str):
            raise ConfigError("Config key 'offset' must be a string like \"+00:00\"")
        if not isinstance(config.duration_flags, str):
            raise ConfigError("Config key 'duration_flags' must be a string like \"sn\"")
        if not isinstance(config.pretty, bool):
            raise ConfigError("Config key 'pretty' must be true or false")
        return config

    def apply_env(self, environ: dict[str, str] | None = None) -> "TimeManConfig":
        """Override values from ``TIMEMAN_*`` environment variables."""
        environ = dict(os.environ) if environ is None else environ
        for var, key in ENV_OVERRIDES.items():
            if value := environ.get(var):
                logger.debug("Config %s overridden by %s", key, var)
                setattr(self, key, value)
        return self


def find_config_file() -> Path | None:
    """Find configuration file in priority order.

    The order is :data:`SEARCH_LOCATIONS`: the current directory, its
    ``pyproject.toml``, the git repository root, then the user config.
    """
    cwd = Path.cwd()
    if (cwd / CONFIG_FILENAME).exists():
        return cwd / CONFIG_FILENAME

    if (cwd / "pyproject.toml").exists():
        try:
            with open(cwd / "pyproject.toml", "rb") as f:
                pyproject = tomllib.load(f)
            if "timeman" in pyproject.get("tool", {}):
                return cwd / "pyproject.toml"
        except tomllib.TOMLDecodeError:
            logger.warning("Ignoring unreadable %s", cwd / "pyproject.toml")

    git_root = _find_git_root(cwd)
    if git_root and (git_root / CONFIG_FILENAME).exists():
        return git_root / CONFIG_FILENAME

    user_config = user_config_path()
    if user_config.exists():
        return user_config

    return None


def user_config_path() -> Path:
    """Path of the per-user config file."""
    return Path.home().joinpath(*USER_CONFIG_DIR) / "config.toml"


def _find_git_root(start: Path) -> Path | None:
    """Find git repository root."""
    current = start.resolve()
    while current != current.parent:
        if (current / ".git").exists():
            return current
        current = current.parent
    return None


def load_config(path: Path | str | None = None, *, use_env: bool = True) -> TimeManConfig:
    """Load configuration from file.

    Args:
        path: Explicit config path or None to auto-discover
        use_env: Apply ``TIMEMAN_*`` environment overrides

    Raises:
        ConfigError: If the file is missing, is not valid TOML or has
            unknown keys.
    """
    if path is None:
        path = find_config_file()

    if path is None:
        config = TimeManConfig()
    else:
        path = Path(path)
        logger.debug("Loading config from %s", path)
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError:
            raise ConfigError(f"Config file not found: {path}") from None
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e

        if path.name == "pyproject.toml":
            data = data.get("tool", {}).get("timeman", {})

        config = TimeManConfig.from_dict(data.get("defaults", {}))
        config._source_path = path

    if use_env:
        config.apply_env()
    return config


DEFAULT_CONFIG_TEMPLATE = f'''# timeman configuration

[defaults]
# Format used to read and print timestamps (see `timeman help-format`)
format = "{DEFAULT_FORMAT}"

# UTC offset for `now` and `since`, local offset if unset
# offset = "+00:00"

# Units used by `since` and `sub` (see `timeman help-duration`)
duration_flags = "YMWDhmsn"

# Print durations as "8 Minutes, 15 Seconds"
pretty = false
'''
