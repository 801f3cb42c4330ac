"""CLI settings loading.

Settings come from environment variables, optionally extended by a TOML file
(`jfcli.toml`) in the CLI home directory:

    [cli]
    namespaces = ["mycompany.jf_namespace"]
    embedded_plugins = ["mycompany.jf_plugin"]
"""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .constants import (
    CI_ENV,
    CLIENT_AGENT,
    CONFIG_FILE_NAME,
    HOME_DIR_ENV,
    LOG_LEVEL_ENV,
    PLUGINS_DIR_ENV,
    SERVERS_CONFIG_FILE_NAME,
    USER_AGENT_ENV,
    VERSION,
)
from .models import ConfigError

__all__ = [
    "Settings",
    "load_config_file",
    "load_settings",
    "parse_bool",
    "server_config_exists",
    "split_agent_name_and_version",
]

_TRUE_VALUES = frozenset(("1", "t", "true", "yes", "on"))
_FALSE_VALUES = frozenset(("", "0", "f", "false", "no", "off"))


@dataclass
class Settings:
    """Runtime settings of the CLI."""

    home_dir: Path
    plugins_dir: Path
    log_level: str = "INFO"
    ci: bool = False
    user_agent_name: str = CLIENT_AGENT
    user_agent_version: str = VERSION
    namespaces: list[str] = field(default_factory=list)  # extra namespace provider modules
    embedded_plugins: list[str] = field(default_factory=list)  # extra embedded plugin modules

    @property
    def user_agent(self) -> str:
        """Return the `name/version` user agent."""
        if not self.user_agent_version:
            return self.user_agent_name
        return f"{self.user_agent_name}/{self.user_agent_version}"


def parse_bool(value: str) -> bool:
    """Parse a boolean the way environment variables and flag values are written.

    Raises:
        ValueError: if `value` is not a recognized boolean
    """
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean value: {value!r}")


def split_agent_name_and_version(full_agent_name: str) -> tuple[str, str]:
    """Split a `name/version` agent string on its last slash.

    If there is no slash, the whole string is the name and the version is empty.
    """
    name, sep, version = full_agent_name.rpartition("/")
    if not sep:
        return full_agent_name, ""
    return name, version


def load_config_file(path: Path) -> dict[str, Any]:
    """Load the optional `jfcli.toml` file.

    Returns:
        The parsed document, or an empty dict if the file does not exist

    Raises:
        ConfigError: If the file can't be parsed
    """
    if not path.exists():
        return {}
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Problem reading {path}: {e}") from e


def _get_module_list(section: Mapping[str, Any], key: str, path: Path) -> list[str]:
    value = section.get(key, [])
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{path}: [cli] {key} must be a list of module names")
    return list(value)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build the settings from the environment and the home directory config file.

    Args:
        environ: Environment mapping (defaults to os.environ)

    Raises:
        ConfigError: On invalid environment values or a malformed config file
    """
    if environ is None:
        environ = os.environ

    home_dir = Path(environ.get(HOME_DIR_ENV) or "~/.jfrog").expanduser()
    plugins_dir = Path(environ.get(PLUGINS_DIR_ENV) or home_dir / "plugins").expanduser()

    try:
        ci = parse_bool(environ.get(CI_ENV, ""))
    except ValueError as e:
        raise ConfigError(f"{CI_ENV} environment variable: {e}") from e

    settings = Settings(
        home_dir=home_dir,
        plugins_dir=plugins_dir,
        log_level=environ.get(LOG_LEVEL_ENV, "INFO").upper() or "INFO",
        ci=ci,
    )
    user_agent = environ.get(USER_AGENT_ENV)
    if user_agent:
        settings.user_agent_name, settings.user_agent_version = split_agent_name_and_version(user_agent)

    config_path = home_dir / CONFIG_FILE_NAME
    section = load_config_file(config_path).get("cli", {})
    if not isinstance(section, dict):
        raise ConfigError(f"{config_path}: [cli] must be a table")
    settings.namespaces = _get_module_list(section, "namespaces", config_path)
    settings.embedded_plugins = _get_module_list(section, "embedded_plugins", config_path)
    return settings


def server_config_exists(settings: Settings) -> bool:
    """Return True if at least one server is configured in the CLI home directory.

    Raises:
        ConfigError: If the servers configuration file is corrupted
    """
    path = settings.home_dir / SERVERS_CONFIG_FILE_NAME
    if not path.exists():
        return False
    try:
        data = json.loads(path.read_text(encoding="utf-8") or "{}")
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON syntax in {path}: {e.args[0]}") from e
    return bool(isinstance(data, dict) and data.get("servers"))
