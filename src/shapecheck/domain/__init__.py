"""
shapecheck — domain types

File: src/shapecheck/domain/__init__.py

Purpose
- Value model, schema types, and validation results shared by the engine.

Functional requirements
- Domain objects are immutable once constructed.

Non-functional requirements
- No IO and no logging in the domain layer.
"""

from shapecheck.domain.results import (
    DataValidationError,
    ValidationError,
    ValidationResult,
    ViolationKind,
)
from shapecheck.domain.schema import CustomCheck, Messages, Rule, Schema
from shapecheck.domain.values import (
    NULL,
    BoolValue,
    FloatValue,
    IntValue,
    ListValue,
    NullValue,
    RecordValue,
    StringValue,
    Value,
    ValueKind,
    ValueModelError,
    from_python,
    to_python,
    type_name,
)

__all__ = [
    "NULL",
    "BoolValue",
    "CustomCheck",
    "DataValidationError",
    "FloatValue",
    "IntValue",
    "ListValue",
    "Messages",
    "NullValue",
    "RecordValue",
    "Rule",
    "Schema",
    "StringValue",
    "ValidationError",
    "ValidationResult",
    "Value",
    "ValueKind",
    "ValueModelError",
    "ViolationKind",
    "from_python",
    "to_python",
    "type_name",
]
