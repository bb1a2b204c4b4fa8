"""
shapecheck — recursive data validator.

File: src/shapecheck/engine/validator.py

Purpose
- Walk a record against a schema and aggregate every field-addressed
  violation into one ``ValidationResult``.

What should be included in this file
- Presence, type, and per-type constraint dispatch per field, in schema
  declaration order.
- Recursion into list items and nested records with path rewriting.
- Custom checks and message override resolution.

Functional requirements
- Never raises for data problems; the result carries every violation.
- A missing required field or a type mismatch stops further checks for
  that field only.
- Fields present in the data but absent from the schema are ignored.

Non-functional requirements
- Pure with respect to the schema; no state is kept across calls.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from shapecheck.config.settings import DEFAULT_SETTINGS, EngineSettings
from shapecheck.constants import (
    DEFAULT_REQUIRED_MESSAGE,
    LIST_ITEM_FIELD,
    NUMERIC_TYPES,
    TYPE_STRING,
)
from shapecheck.domain.results import ValidationError, ValidationResult, ViolationKind
from shapecheck.domain.schema import CustomCheck, Rule, Schema
from shapecheck.domain.values import ListValue, RecordValue, Value, from_python, type_name
from shapecheck.engine.constraints import (
    Violation,
    check_allowed,
    check_numeric,
    check_string,
)
from shapecheck.engine.messages import resolve_message
from shapecheck.engine.schema_validator import validate_schema
from shapecheck.engine.type_matcher import type_matches

_logger = structlog.get_logger(__name__)


def validate(
    data: RecordValue | Mapping[str, object],
    schema: Schema | Mapping[str, Rule],
    *,
    settings: EngineSettings | None = None,
    logger: Any | None = None,
) -> ValidationResult:
    """Validate ``data`` against ``schema`` and return every violation found.

    ``data`` may be a ``RecordValue`` or a plain mapping, which is lifted with
    ``from_python``. Passing anything that is not a record raises
    ``TypeError``; that is a caller bug, not a data violation.
    """

    record = _as_record(data)
    active_schema = schema if isinstance(schema, Schema) else Schema(schema)
    walker = _Walker(
        settings=settings if settings is not None else DEFAULT_SETTINGS,
        logger=logger if logger is not None else _logger,
    )
    result = ValidationResult(errors=tuple(walker.record(record, active_schema)))
    walker.logger.debug(
        "validation_completed",
        field_count=len(active_schema),
        error_count=len(result.errors),
        is_valid=result.is_valid,
    )
    return result


def assert_valid(
    data: RecordValue | Mapping[str, object],
    schema: Schema | Mapping[str, Rule],
    *,
    settings: EngineSettings | None = None,
    logger: Any | None = None,
) -> RecordValue:
    """Validate and raise ``DataValidationError`` on failure; return the record."""

    record = _as_record(data)
    validate(record, schema, settings=settings, logger=logger).raise_for_errors()
    return record


class Validator:
    """A schema checked once up front, reused for any number of records.

    Construction runs ``validate_schema`` and raises ``SchemaError`` for a
    malformed schema. Instances hold no per-call state and may be shared
    across threads.
    """

    __slots__ = ("_logger", "_schema", "_settings")

    def __init__(
        self,
        schema: Schema | Mapping[str, Rule],
        *,
        settings: EngineSettings | None = None,
        logger: Any | None = None,
    ) -> None:
        self._schema = schema if isinstance(schema, Schema) else Schema(schema)
        self._settings = settings if settings is not None else DEFAULT_SETTINGS
        self._logger = logger if logger is not None else _logger
        validate_schema(self._schema, settings=self._settings, logger=self._logger)

    @property
    def schema(self) -> Schema:
        return self._schema

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    def validate(self, data: RecordValue | Mapping[str, object]) -> ValidationResult:
        return validate(data, self._schema, settings=self._settings, logger=self._logger)

    def assert_valid(self, data: RecordValue | Mapping[str, object]) -> RecordValue:
        return assert_valid(data, self._schema, settings=self._settings, logger=self._logger)


def _as_record(data: object) -> RecordValue:
    if isinstance(data, RecordValue):
        return data
    if isinstance(data, Mapping):
        lifted = from_python(data)
        if isinstance(lifted, RecordValue):
            return lifted
    raise TypeError(f"expected a record or mapping to validate, got {type(data).__name__}")


class _Walker:
    __slots__ = ("logger", "settings")

    def __init__(self, *, settings: EngineSettings, logger: Any) -> None:
        self.settings = settings
        self.logger = logger

    def record(self, record: RecordValue, schema: Schema) -> list[ValidationError]:
        errors: list[ValidationError] = []
        for name, rule in schema.items():
            errors.extend(self.field(name, record.get(name), rule))
        return errors

    def field(self, name: str, value: Value | None, rule: Rule) -> list[ValidationError]:
        if value is None:
            if rule.required:
                return [
                    _error(
                        name, rule, ViolationKind.MISSING_REQUIRED_FIELD, DEFAULT_REQUIRED_MESSAGE
                    )
                ]
            return []

        if not type_matches(
            value, rule.type, accept_integral_floats=self.settings.accept_integral_floats
        ):
            return [
                _error(
                    name,
                    rule,
                    ViolationKind.TYPE_MISMATCH,
                    f"Invalid type: expected {rule.type}, got {type_name(value)}",
                )
            ]

        errors: list[ValidationError] = []
        if rule.type in NUMERIC_TYPES:
            errors.extend(_resolved(name, rule, check_numeric(value, rule)))
        elif rule.type == TYPE_STRING:
            for found in check_string(value, rule):
                errors.extend(_resolved(name, rule, found))
        errors.extend(_resolved(name, rule, check_allowed(value, rule)))

        if isinstance(value, ListValue) and rule.item_rule is not None:
            errors.extend(self.items(name, value, rule.item_rule))
        elif isinstance(value, RecordValue) and rule.nested_schema is not None:
            nested = self.record(value, rule.nested_schema)
            errors.extend(error.nested_under(name) for error in nested)

        if rule.custom_check is not None:
            custom = self.custom(name, value, rule, rule.custom_check)
            if custom is not None:
                errors.append(custom)
        return errors

    def items(self, name: str, value: ListValue, item_rule: Rule) -> list[ValidationError]:
        item_schema = Schema({LIST_ITEM_FIELD: item_rule})
        errors: list[ValidationError] = []
        for index, item in enumerate(value.items):
            nested = self.record(RecordValue({LIST_ITEM_FIELD: item}), item_schema)
            for error in nested:
                suffix = error.field[len(LIST_ITEM_FIELD) :]
                errors.append(
                    ValidationError(
                        field=f"{name}[{index}]{suffix}",
                        message=error.message,
                        kind=error.kind,
                    )
                )
        return errors

    def custom(
        self, name: str, value: Value, rule: Rule, check: CustomCheck
    ) -> ValidationError | None:
        try:
            outcome = check(value)
        except Exception as exc:
            self.logger.warning(
                "custom_check_raised",
                field=name,
                error_type=type(exc).__name__,
                exc_info=True,
            )
            outcome = f"custom check raised {type(exc).__name__}: {exc}"
        if outcome is None:
            return None
        if not isinstance(outcome, str):
            self.logger.warning(
                "custom_check_invalid_result",
                field=name,
                result_type=type(outcome).__name__,
            )
            outcome = (
                f"custom check returned {type(outcome).__name__}, expected a message or None"
            )
        return _error(name, rule, ViolationKind.CUSTOM_VALIDATION_FAILURE, outcome)


def _resolved(name: str, rule: Rule, found: Violation | None) -> list[ValidationError]:
    if found is None:
        return []
    return [_error(name, rule, found.kind, found.message)]


def _error(name: str, rule: Rule, kind: ViolationKind, default: str) -> ValidationError:
    return ValidationError(field=name, message=resolve_message(rule, kind, default), kind=kind)


__all__ = ["Validator", "assert_valid", "validate"]
