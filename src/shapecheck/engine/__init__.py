"""
shapecheck — validation engine

File: src/shapecheck/engine/__init__.py

Purpose
- Numeric coercion, type matching, constraint checkers, the recursive data
  validator, and schema self-validation.

Functional requirements
- Data validation never raises for bad data; schema validation fails fast.
"""

from shapecheck.engine.coercion import CoercionError, extract_float, extract_int
from shapecheck.engine.constraints import (
    Violation,
    check_allowed,
    check_numeric,
    check_string,
)
from shapecheck.engine.messages import resolve_message
from shapecheck.engine.schema_validator import (
    AllowedValueTypeMismatch,
    DefaultTypeMismatch,
    InvalidConstraint,
    InvalidFieldName,
    InvalidNestedSchema,
    InvalidPattern,
    MisplacedRangeConstraint,
    MisplacedStringConstraint,
    SchemaError,
    SchemaTooDeep,
    UnknownType,
    validate_schema,
)
from shapecheck.engine.type_matcher import type_matches
from shapecheck.engine.validator import Validator, assert_valid, validate

__all__ = [
    "AllowedValueTypeMismatch",
    "CoercionError",
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
    "Validator",
    "Violation",
    "assert_valid",
    "check_allowed",
    "check_numeric",
    "check_string",
    "extract_float",
    "extract_int",
    "resolve_message",
    "type_matches",
    "validate",
    "validate_schema",
]
