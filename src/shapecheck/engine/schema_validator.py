"""
shapecheck — schema self-validation.

File: src/shapecheck/engine/schema_validator.py

Purpose
- Reject malformed schemas before they are used to validate any data.

What should be included in this file
- The ``SchemaError`` taxonomy.
- A fail-fast walk over every rule, recursing into list item rules and
  nested schemas.

Functional requirements
- The first defect wins; this is not an aggregator.
- Nested failures are wrapped so the chain names every enclosing field.

Non-functional requirements
- Runs once per schema, ahead of data validation.
"""

from __future__ import annotations

import math
import re
import unicodedata
from collections.abc import Mapping
from typing import Any

import structlog

from shapecheck.config.settings import DEFAULT_SETTINGS, EngineSettings
from shapecheck.constants import (
    DECLARED_TYPES,
    NUMERIC_TYPES,
    SCHEMA_ITEMS_FIELD,
    TYPE_LIST,
    TYPE_MAP,
    TYPE_STRING,
)
from shapecheck.domain.schema import Messages, Rule, Schema
from shapecheck.domain.values import type_name
from shapecheck.engine.constraints import compile_pattern
from shapecheck.engine.type_matcher import type_matches

_logger = structlog.get_logger(__name__)


class SchemaError(ValueError):
    """Base class for schema definition defects."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")

    @property
    def path(self) -> str:
        return self.field

    @property
    def root_cause(self) -> SchemaError:
        return self


class InvalidFieldName(SchemaError):
    pass


class UnknownType(SchemaError):
    pass


class DefaultTypeMismatch(SchemaError):
    pass


class MisplacedRangeConstraint(SchemaError):
    pass


class MisplacedStringConstraint(SchemaError):
    pass


class InvalidConstraint(SchemaError):
    pass


class InvalidPattern(SchemaError):
    pass


class AllowedValueTypeMismatch(SchemaError):
    pass


class SchemaTooDeep(SchemaError):
    pass


class InvalidNestedSchema(SchemaError):
    """A list item rule or nested schema under ``field`` failed validation."""

    def __init__(self, field: str, container: str, cause: SchemaError) -> None:
        self.container = container
        self.cause = cause
        super().__init__(field, f"invalid {container} schema: {cause}")

    @property
    def path(self) -> str:
        if self.container == TYPE_LIST:
            inner = self.cause.path[len(SCHEMA_ITEMS_FIELD) :]
            return f"{self.field}[]{inner}"
        return f"{self.field}.{self.cause.path}"

    @property
    def root_cause(self) -> SchemaError:
        return self.cause.root_cause


def validate_schema(
    schema: Schema | Mapping[str, Rule],
    *,
    settings: EngineSettings | None = None,
    logger: Any | None = None,
) -> None:
    """Raise the first ``SchemaError`` found in ``schema``; return ``None`` if sound."""

    active = settings if settings is not None else DEFAULT_SETTINGS
    log = logger if logger is not None else _logger
    target = schema if isinstance(schema, Schema) else Schema(schema)
    try:
        _check_schema(target, active, depth=1)
    except SchemaError as exc:
        root = exc.root_cause
        log.warning(
            "schema_rejected",
            path=exc.path,
            error_type=type(root).__name__,
            reason=root.reason,
        )
        raise
    log.debug("schema_validated", field_count=len(target))


def is_valid_field_name(name: str) -> bool:
    """Field names are path segments: no whitespace, no control characters."""

    return not any(ch.isspace() or unicodedata.category(ch) == "Cc" for ch in name)


def _check_schema(schema: Schema, settings: EngineSettings, *, depth: int) -> None:
    for name, rule in schema.items():
        _check_rule(name, rule, settings, depth=depth)


def _check_rule(name: str, rule: Rule, settings: EngineSettings, *, depth: int) -> None:
    if not is_valid_field_name(name):
        raise InvalidFieldName(name, f"invalid field name: {name!r}")

    if rule.type not in DECLARED_TYPES:
        expected = ", ".join(DECLARED_TYPES)
        raise UnknownType(name, f"invalid type {rule.type!r}; expected one of: {expected}")

    if rule.default is not None and not type_matches(
        rule.default, rule.type, accept_integral_floats=settings.accept_integral_floats
    ):
        raise DefaultTypeMismatch(
            name,
            f"default value of type {type_name(rule.default)} does not match type {rule.type!r}",
        )

    if (rule.min is not None or rule.max is not None) and rule.type not in NUMERIC_TYPES:
        raise MisplacedRangeConstraint(
            name, f"min/max can only be used for numeric fields, not {rule.type!r}"
        )
    _check_bounds(name, rule)
    _check_string_constraints(name, rule)

    if rule.allowed_values is not None:
        for index, allowed in enumerate(rule.allowed_values):
            if not type_matches(
                allowed, rule.type, accept_integral_floats=settings.accept_integral_floats
            ):
                raise AllowedValueTypeMismatch(
                    name,
                    f"allowed_values[{index}] of type {type_name(allowed)} "
                    f"does not match type {rule.type!r}",
                )

    if rule.custom_check is not None and not callable(rule.custom_check):
        raise InvalidConstraint(name, "custom_check must be callable")
    if rule.messages is not None and not isinstance(rule.messages, Messages):
        raise InvalidConstraint(name, "messages must be a Messages instance")

    if rule.type == TYPE_LIST and rule.item_rule is not None:
        if not isinstance(rule.item_rule, Rule):
            raise InvalidConstraint(name, "item_rule must be a Rule")
        _check_nested(
            name, TYPE_LIST, Schema({SCHEMA_ITEMS_FIELD: rule.item_rule}), settings, depth=depth
        )
    if rule.type == TYPE_MAP and rule.nested_schema is not None:
        _check_nested(name, TYPE_MAP, rule.nested_schema, settings, depth=depth)


def _check_nested(
    name: str,
    container: str,
    schema: Schema,
    settings: EngineSettings,
    *,
    depth: int,
) -> None:
    limit = settings.max_schema_depth
    if limit is not None and depth + 1 > limit:
        raise SchemaTooDeep(name, f"nesting exceeds maximum schema depth {limit}")
    try:
        _check_schema(schema, settings, depth=depth + 1)
    except SchemaError as exc:
        raise InvalidNestedSchema(name, container, exc) from exc


def _check_bounds(name: str, rule: Rule) -> None:
    for label, bound in (("min", rule.min), ("max", rule.max)):
        if bound is None:
            continue
        if isinstance(bound, bool) or not isinstance(bound, (int, float)):
            raise InvalidConstraint(name, f"{label} must be a number, got {type(bound).__name__}")
        if isinstance(bound, float) and math.isnan(bound):
            raise InvalidConstraint(name, f"{label} must not be NaN")
    if rule.min is not None and rule.max is not None and rule.min > rule.max:
        raise InvalidConstraint(name, f"min {rule.min} is greater than max {rule.max}")


def _check_string_constraints(name: str, rule: Rule) -> None:
    uses_string_constraints = (
        rule.min_length is not None or rule.max_length is not None or rule.pattern is not None
    )
    if uses_string_constraints and rule.type != TYPE_STRING:
        raise MisplacedStringConstraint(
            name,
            f"min_length/max_length/pattern can only be used for string fields, not {rule.type!r}",
        )

    for label, length in (("min_length", rule.min_length), ("max_length", rule.max_length)):
        if length is None:
            continue
        if isinstance(length, bool) or not isinstance(length, int):
            raise InvalidConstraint(
                name, f"{label} must be an integer, got {type(length).__name__}"
            )
        if length < 0:
            raise InvalidConstraint(name, f"{label} must be >= 0")
    if (
        rule.min_length is not None
        and rule.max_length is not None
        and rule.min_length > rule.max_length
    ):
        raise InvalidConstraint(
            name, f"min_length {rule.min_length} is greater than max_length {rule.max_length}"
        )

    if rule.pattern is not None:
        if not isinstance(rule.pattern, str):
            raise InvalidPattern(
                name, f"pattern must be a string, got {type(rule.pattern).__name__}"
            )
        try:
            compile_pattern(rule.pattern)
        except re.error as exc:
            raise InvalidPattern(name, f"invalid pattern {rule.pattern!r}: {exc}") from exc


__all__ = [
    "AllowedValueTypeMismatch",
    "DefaultTypeMismatch",
    "InvalidConstraint",
    "InvalidFieldName",
    "InvalidNestedSchema",
    "InvalidPattern",
    "MisplacedRangeConstraint",
    "MisplacedStringConstraint",
    "SchemaError",
    "SchemaTooDeep",
    "UnknownType",
    "is_valid_field_name",
    "validate_schema",
]
