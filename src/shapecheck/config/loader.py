"""
shapecheck — settings loader.

File: src/shapecheck/config/loader.py

Purpose
- Load effective engine settings from defaults, a TOML file, and env vars.

What should be included in this file
- Precedence logic: env (SHAPECHECK_) > file > defaults.
- TOML loading via ``tomllib``.
- Deterministic environment variable mapping and coercion.

Functional requirements
- Reject invalid settings via schema validation.
- A missing default file is not an error; a missing explicit file is.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final, Literal

from shapecheck.config.settings import EngineSettings, assert_valid_settings
from shapecheck.constants import DEFAULT_SETTINGS_FILE, ENV_PREFIX, SETTINGS_TABLE

_BOOLEAN_TRUE: Final[frozenset[str]] = frozenset({"1", "true", "t", "yes", "y", "on"})
_BOOLEAN_FALSE: Final[frozenset[str]] = frozenset({"0", "false", "f", "no", "n", "off"})


@dataclass(frozen=True, slots=True)
class _Binding:
    key: str
    value_type: Literal["str", "int", "bool"]


_BINDINGS: Final[tuple[_Binding, ...]] = (
    _Binding("accept_integral_floats", "bool"),
    _Binding("max_schema_depth", "int"),
    _Binding("log_level", "str"),
    _Binding("log_format", "str"),
)


class ConfigLoadError(ValueError):
    """Raised when settings cannot be loaded or overrides cannot be coerced."""


def load_settings(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> EngineSettings:
    """Load effective settings with precedence: env > file > defaults."""

    resolved_path = _resolve_config_path(config_path)
    env_map = dict(os.environ if environ is None else environ)

    payload = _settings_table(_load_toml_file(resolved_path, required=config_path is not None))
    payload.update(_collect_env_overrides(env_map))
    return assert_valid_settings(payload)


def env_name_for(key: str) -> str:
    return ENV_PREFIX + key.upper()


def _resolve_config_path(config_path: str | Path | None) -> Path:
    if config_path is None:
        return (Path.cwd() / DEFAULT_SETTINGS_FILE).resolve()
    return Path(config_path).expanduser().resolve()


def _load_toml_file(path: Path, *, required: bool) -> dict[str, Any]:
    if not path.exists():
        if required:
            raise ConfigLoadError(f"settings file not found: {path}")
        return {}

    try:
        with path.open("rb") as handle:
            parsed = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigLoadError(f"invalid TOML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigLoadError(f"unable to read settings file {path}: {exc}") from exc

    return parsed


def _settings_table(document: Mapping[str, Any]) -> dict[str, Any]:
    """Use the ``[shapecheck]`` table when present, else the document root."""

    table = document.get(SETTINGS_TABLE)
    if table is None:
        return dict(document)
    if not isinstance(table, Mapping):
        raise ConfigLoadError(f"[{SETTINGS_TABLE}] must be a table")
    return dict(table)


def _collect_env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for binding in _BINDINGS:
        env_name = env_name_for(binding.key)
        raw = environ.get(env_name)
        if raw is None:
            continue
        overrides[binding.key] = _coerce_env(raw, binding.value_type, env_name)
    return overrides


def _coerce_env(
    raw: str,
    value_type: Literal["str", "int", "bool"],
    env_name: str,
) -> object:
    value = raw.strip()
    if value_type == "str":
        return value
    if value_type == "int":
        try:
            return int(value)
        except ValueError as exc:
            raise ConfigLoadError(f"{env_name} must be an integer") from exc

    lowered = value.lower()
    if lowered in _BOOLEAN_TRUE:
        return True
    if lowered in _BOOLEAN_FALSE:
        return False
    raise ConfigLoadError(f"{env_name} must be a boolean (true/false/1/0/yes/no/on/off)")


__all__ = [
    "ConfigLoadError",
    "env_name_for",
    "load_settings",
]
