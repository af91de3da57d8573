"""
Config for the read guard.

Only logging is configurable. A config file that cannot be read or has the
wrong shape raises ConfigError; the hook then runs on DEFAULT_LOGGING so a
broken file never changes whether a read is allowed.
"""

import os
from pathlib import Path
from typing import Any

import yaml

DEFAULT_LOGGING: dict[str, Any] = {
    "level": "WARNING",     # INFO logs blocks, DEBUG logs every decision
    "file": None,           # None = stderr only
    "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
}

CONFIG_ENV_VAR = "READ_GUARD_CONFIG"

CONFIG_SEARCH_PATHS = [
    Path.home() / ".claude" / "read-guard" / "config.yml",
    Path.cwd() / "read-guard.config.yml",
    Path(__file__).parent.parent / "config.yml",
]


class ConfigError(Exception):
    """Config file exists but is unusable."""


def default_config() -> dict:
    return {"logging": dict(DEFAULT_LOGGING)}


def find_config_path(config_path: str | None = None) -> Path | None:
    """$READ_GUARD_CONFIG, then config_path, then the standard locations."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidates = [Path(env_path)]
    elif config_path:
        candidates = [Path(config_path)]
    else:
        candidates = CONFIG_SEARCH_PATHS
    return next((path for path in candidates if path.is_file()), None)


def _read_yaml(path: Path) -> dict:
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot read {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping, got {type(data).__name__}")
    return data


def load_config(config_path: str | None = None) -> dict:
    """
    Return the effective config. Keys left out of the file keep their
    defaults; sections other than `logging` are ignored.
    """
    config = default_config()
    path = find_config_path(config_path)
    if path is None:
        return config

    section = _read_yaml(path).get("logging") or {}
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: 'logging' must be a mapping")
    config["logging"].update(section)
    return config
