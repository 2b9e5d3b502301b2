"""Utility helpers for loading project-wide configuration."""

from __future__ import annotations

import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping

_CONFIG_FILENAME = "config.toml"
_CONFIG_ENV = "SUDOKU_CONFIG"

# Environment variables that override dotted configuration keys.
_ENV_OVERRIDES = {
    "SUDOKU_EVENTS_ENABLED": "events.enabled",
    "SUDOKU_EVENTS_DIR": "events.dir",
    "SUDOKU_CLI_OUTPUT": "cli.output",
}


def _config_path() -> Path:
    override = os.environ.get(_CONFIG_ENV)
    if override:
        return Path(override)
    return Path(__file__).resolve().parents[1] / _CONFIG_FILENAME


@lru_cache(maxsize=1)
def get_config() -> Dict[str, Any]:
    """Load and cache the project configuration as a dictionary.

    A missing file yields an empty configuration so that installed copies of
    the package fall back to the built-in defaults.
    """
    path = _config_path()
    if not path.exists():
        return {}
    with path.open("rb") as fh:
        return tomllib.load(fh)


def reload() -> None:
    """Clear the cached configuration."""

    get_config.cache_clear()


def build_env(overrides: Mapping[str, str] | None = None) -> Dict[str, str]:
    """Merge process environment with optional overrides."""

    env: Dict[str, str] = {str(k): str(v) for k, v in os.environ.items()}
    if overrides:
        env.update({str(k): str(v) for k, v in overrides.items()})
    return env


def _coerce_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalised = value.strip().lower()
        if normalised in {"1", "true", "yes", "on"}:
            return True
        if normalised in {"0", "false", "no", "off"}:
            return False
    return None


def get_section(path: str, default: Any = None) -> Any:
    """Retrieve a nested configuration value using dotted notation."""

    data: Any = get_config()
    for part in path.split("."):
        if isinstance(data, dict) and part in data:
            data = data[part]
        else:
            if default is not None:
                return default
            raise KeyError(f"Configuration path '{path}' not found")
    return data


def resolve(path: str, default: Any = None, env: Mapping[str, str] | None = None) -> Any:
    """Like :func:`get_section` but honouring ``SUDOKU_*`` environment overrides.

    ``env`` is layered over the process environment via :func:`build_env`.
    """

    env = build_env(env)
    for name, target in _ENV_OVERRIDES.items():
        if target == path and env.get(name):
            raw = env[name]
            if isinstance(default, bool):
                maybe = _coerce_bool(raw)
                if maybe is not None:
                    return maybe
                continue
            return raw
    return get_section(path, default)


__all__ = ["build_env", "get_config", "get_section", "reload", "resolve"]
