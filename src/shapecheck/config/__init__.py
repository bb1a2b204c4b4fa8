"""
shapecheck config package public API.

File: src/shapecheck/config/__init__.py

Purpose
- Export settings types, validation, and the TOML/env loader.

Functional requirements
- Support loading from ``shapecheck.toml`` + ``SHAPECHECK_`` env overrides.
- Fail fast with clear structured validation/load errors.
"""

from shapecheck.config.loader import ConfigLoadError, env_name_for, load_settings
from shapecheck.config.settings import (
    DEFAULT_SETTINGS,
    LOG_FORMATS,
    LOG_LEVELS,
    EngineSettings,
    SettingsValidationError,
    SettingsValidationIssue,
    SettingsValidationResult,
    assert_valid_settings,
    validate_settings,
)

__all__ = [
    "ConfigLoadError",
    "DEFAULT_SETTINGS",
    "EngineSettings",
    "LOG_FORMATS",
    "LOG_LEVELS",
    "SettingsValidationError",
    "SettingsValidationIssue",
    "SettingsValidationResult",
    "assert_valid_settings",
    "env_name_for",
    "load_settings",
    "validate_settings",
]
