"""
shapecheck — declarative data validation

File: src/shapecheck/__init__.py

Purpose
- Package root. Validate untyped, nested records against declarative
  schemas and report every field-addressed violation in one pass.

Functional requirements
- Must not have side effects at import time (no settings loading, no
  logging configuration).

Example::

    from shapecheck import Rule, Schema, validate

    schema = Schema(
        name=Rule("string", required=True, min_length=2),
        age=Rule("int", min=18, max=99),
    )
    result = validate({"name": "A", "age": 17}, schema)
    assert not result.is_valid
"""

from shapecheck.config import ConfigLoadError, EngineSettings, load_settings
from shapecheck.domain import (
    NULL,
    BoolValue,
    CustomCheck,
    DataValidationError,
    FloatValue,
    IntValue,
    ListValue,
    Messages,
    NullValue,
    RecordValue,
    Rule,
    Schema,
    StringValue,
    ValidationError,
    ValidationResult,
    Value,
    ValueKind,
    ValueModelError,
    ViolationKind,
    from_python,
    to_python,
)
from shapecheck.engine import (
    AllowedValueTypeMismatch,
    CoercionError,
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
    Validator,
    assert_valid,
    validate,
    validate_schema,
)
from shapecheck.observability import configure_logging

__version__ = "0.1.0"

__all__ = [
    "NULL",
    "AllowedValueTypeMismatch",
    "BoolValue",
    "CoercionError",
    "ConfigLoadError",
    "CustomCheck",
    "DataValidationError",
    "DefaultTypeMismatch",
    "EngineSettings",
    "FloatValue",
    "IntValue",
    "InvalidConstraint",
    "InvalidFieldName",
    "InvalidNestedSchema",
    "InvalidPattern",
    "ListValue",
    "Messages",
    "MisplacedRangeConstraint",
    "MisplacedStringConstraint",
    "NullValue",
    "RecordValue",
    "Rule",
    "Schema",
    "SchemaError",
    "SchemaTooDeep",
    "StringValue",
    "UnknownType",
    "ValidationError",
    "ValidationResult",
    "Validator",
    "Value",
    "ValueKind",
    "ValueModelError",
    "ViolationKind",
    "__version__",
    "assert_valid",
    "configure_logging",
    "from_python",
    "load_settings",
    "to_python",
    "validate",
    "validate_schema",
]
