"""
shapecheck — engine settings schema and validation.

File: src/shapecheck/config/settings.py

Purpose
- Define the engine's tunable policies and strict validation of raw settings
  payloads (TOML tables, env overrides).

What should be included in this file
- Defaults for every setting.
- Validation rules for types, enums, and numeric constraints with
  structured issues (path + message).

Functional requirements
- Unknown keys are rejected; validation collects every issue.

Non-functional requirements
- Deterministic issue ordering.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Final, Literal

LogFormat = Literal["text", "json"]

LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMATS: Final[tuple[str, ...]] = ("text", "json")

SETTING_KEYS: Final[frozenset[str]] = frozenset(
    {"accept_integral_floats", "max_schema_depth", "log_level", "log_format"}
)


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Engine policies.

    ``accept_integral_floats`` lets a float with no fractional part satisfy a
    declared ``int``; strict separation is the default. ``max_schema_depth``
    bounds nesting accepted by the schema validator (``None`` = unlimited).
    """

    accept_integral_floats: bool = False
    max_schema_depth: int | None = None
    log_level: str = "WARNING"
    log_format: LogFormat = "text"

    def __post_init__(self) -> None:
        _, issues = _check_payload(self.to_dict())
        if issues:
            raise SettingsValidationError(issues)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "accept_integral_floats": self.accept_integral_floats,
            "log_level": self.log_level,
            "log_format": self.log_format,
        }
        if self.max_schema_depth is not None:
            out["max_schema_depth"] = self.max_schema_depth
        return out


@dataclass(frozen=True, slots=True)
class SettingsValidationIssue:
    """Single structured validation failure."""

    path: str
    message: str


@dataclass(frozen=True, slots=True)
class SettingsValidationResult:
    settings: EngineSettings | None
    issues: tuple[SettingsValidationIssue, ...]

    @property
    def is_valid(self) -> bool:
        return not self.issues


class SettingsValidationError(ValueError):
    """Raised when settings validation fails."""

    def __init__(self, issues: Sequence[SettingsValidationIssue]) -> None:
        self.issues = tuple(issues)
        if not self.issues:
            rendered = "unknown validation failure"
        else:
            rendered = "\n".join(f"- {item.path}: {item.message}" for item in self.issues)
        super().__init__(f"invalid settings:\n{rendered}")


class _IssueCollector:
    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[SettingsValidationIssue] = []

    def add(self, path: str, message: str) -> None:
        self._items.append(SettingsValidationIssue(path=path, message=message))

    def items(self) -> tuple[SettingsValidationIssue, ...]:
        return tuple(self._items)


def validate_settings(payload: Mapping[str, object] | object) -> SettingsValidationResult:
    """Validate a raw settings payload and return structured issues."""

    normalized, issues = _check_payload(payload)
    if issues:
        return SettingsValidationResult(settings=None, issues=issues)
    return SettingsValidationResult(settings=EngineSettings(**normalized), issues=())


def _check_payload(
    payload: Mapping[str, object] | object,
) -> tuple[dict[str, Any], tuple[SettingsValidationIssue, ...]]:
    issues = _IssueCollector()
    if not isinstance(payload, Mapping):
        issues.add("<root>", f"expected object, got {type(payload).__name__}")
        return {}, issues.items()

    for key in sorted(str(item) for item in payload):
        if key not in SETTING_KEYS:
            issues.add(key, "unknown field")

    normalized: dict[str, Any] = {}
    if "accept_integral_floats" in payload:
        flag = _as_bool(payload["accept_integral_floats"], "accept_integral_floats", issues)
        if flag is not None:
            normalized["accept_integral_floats"] = flag
    if "max_schema_depth" in payload:
        depth = _as_int(payload["max_schema_depth"], "max_schema_depth", issues, minimum=1)
        if depth is not None:
            normalized["max_schema_depth"] = depth
    if "log_level" in payload:
        level = _as_enum(payload["log_level"], "log_level", issues, allowed_values=LOG_LEVELS)
        if level is not None:
            normalized["log_level"] = level
    if "log_format" in payload:
        fmt = _as_enum(payload["log_format"], "log_format", issues, allowed_values=LOG_FORMATS)
        if fmt is not None:
            normalized["log_format"] = fmt

    return normalized, issues.items()


def assert_valid_settings(payload: Mapping[str, object] | object) -> EngineSettings:
    """Validate settings and raise ``SettingsValidationError`` on failure."""

    result = validate_settings(payload)
    if result.settings is None:
        raise SettingsValidationError(result.issues)
    return result.settings


def _as_bool(value: object, path: str, issues: _IssueCollector) -> bool | None:
    if isinstance(value, bool):
        return value
    issues.add(path, f"expected boolean, got {type(value).__name__}")
    return None


def _as_int(
    value: object,
    path: str,
    issues: _IssueCollector,
    *,
    minimum: int | None = None,
) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        issues.add(path, f"expected integer, got {type(value).__name__}")
        return None
    if minimum is not None and value < minimum:
        issues.add(path, f"must be >= {minimum}")
        return None
    return value


def _as_enum(
    value: object,
    path: str,
    issues: _IssueCollector,
    *,
    allowed_values: tuple[str, ...],
) -> str | None:
    if not isinstance(value, str):
        issues.add(path, f"expected string, got {type(value).__name__}")
        return None
    parsed = value.strip()
    if parsed not in allowed_values:
        expected = ", ".join(sorted(allowed_values))
        issues.add(path, f"invalid value {parsed!r}; expected one of: {expected}")
        return None
    return parsed


DEFAULT_SETTINGS: Final[EngineSettings] = EngineSettings()

__all__ = [
    "DEFAULT_SETTINGS",
    "LOG_FORMATS",
    "LOG_LEVELS",
    "EngineSettings",
    "LogFormat",
    "SettingsValidationError",
    "SettingsValidationIssue",
    "SettingsValidationResult",
    "assert_valid_settings",
    "validate_settings",
]
