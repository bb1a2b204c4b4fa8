"""
shapecheck — unit tests for schema self-validation

File: tests/unit/engine/test_schema_validator.py

Purpose
- Validate that malformed schemas are rejected with the right error type and
  that nested failures carry the enclosing path.

Functional requirements
- First defect wins; tests assert on error type, path, and root cause.
"""

from __future__ import annotations

from typing import Any

import pytest

from shapecheck.config.settings import EngineSettings
from shapecheck.domain.schema import Rule, Schema
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
    is_valid_field_name,
    validate_schema,
)


class _RecordingLogger:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def debug(self, event: str, **kwargs: Any) -> None:
        self.events.append((event, kwargs))

    def warning(self, event: str, **kwargs: Any) -> None:
        self.events.append((event, kwargs))


def test_sound_schema_passes() -> None:
    schema = Schema(
        name=Rule("string", required=True, min_length=2, max_length=50, pattern=r"^\w+$"),
        age=Rule("int", min=0, max=150, default=30),
        score=Rule("float", min=0.0, max=1.0),
        active=Rule("bool", default=True),
        tags=Rule("list", item_rule=Rule("string", allowed_values=["a", "b"])),
        address=Rule("map", nested_schema=Schema(zip=Rule("string"))),
    )
    assert validate_schema(schema) is None


def test_empty_schema_is_valid() -> None:
    validate_schema(Schema())


@pytest.mark.parametrize("name", ["first name", "tab\there", "line\n", "bell\x07", " "])
def test_field_names_reject_whitespace_and_control_characters(name: str) -> None:
    assert not is_valid_field_name(name)
    with pytest.raises(InvalidFieldName):
        validate_schema({name: Rule("string")})


@pytest.mark.parametrize("name", ["", "snake_case", "kebab-case", "dotted.name", "ünïcode"])
def test_field_names_accepted(name: str) -> None:
    assert is_valid_field_name(name)


def test_unknown_type() -> None:
    with pytest.raises(UnknownType) as excinfo:
        validate_schema({"x": Rule("text")})
    assert excinfo.value.field == "x"
    assert "invalid type 'text'" in str(excinfo.value)


def test_default_must_match_declared_type() -> None:
    with pytest.raises(DefaultTypeMismatch):
        validate_schema({"age": Rule("int", default="thirty")})


def test_integral_float_default_respects_settings() -> None:
    rule = Rule("int", default=3.0)
    with pytest.raises(DefaultTypeMismatch):
        validate_schema({"n": rule})
    validate_schema({"n": rule}, settings=EngineSettings(accept_integral_floats=True))


@pytest.mark.parametrize("declared", ["string", "bool", "list", "map"])
def test_range_on_non_numeric_type(declared: str) -> None:
    with pytest.raises(MisplacedRangeConstraint):
        validate_schema({"x": Rule(declared, min=1)})


def test_zero_max_is_still_a_range_constraint() -> None:
    with pytest.raises(MisplacedRangeConstraint):
        validate_schema({"x": Rule("string", max=0)})


def test_min_greater_than_max() -> None:
    with pytest.raises(InvalidConstraint, match="greater than max"):
        validate_schema({"x": Rule("int", min=5, max=1)})


def test_nan_bound() -> None:
    with pytest.raises(InvalidConstraint, match="NaN"):
        validate_schema({"x": Rule("float", min=float("nan"))})


@pytest.mark.parametrize(
    "rule",
    [Rule("int", min_length=1), Rule("list", max_length=3), Rule("map", pattern="x")],
)
def test_string_constraints_on_non_string_type(rule: Rule) -> None:
    with pytest.raises(MisplacedStringConstraint):
        validate_schema({"x": rule})


def test_negative_and_inverted_lengths() -> None:
    with pytest.raises(InvalidConstraint, match=">= 0"):
        validate_schema({"x": Rule("string", min_length=-1)})
    with pytest.raises(InvalidConstraint, match="greater than max_length"):
        validate_schema({"x": Rule("string", min_length=5, max_length=2)})


def test_invalid_pattern() -> None:
    with pytest.raises(InvalidPattern):
        validate_schema({"x": Rule("string", pattern="[unclosed")})


def test_allowed_values_must_match_type() -> None:
    with pytest.raises(AllowedValueTypeMismatch, match=r"allowed_values\[1\]"):
        validate_schema({"x": Rule("string", allowed_values=["a", 1])})


def test_non_callable_custom_check() -> None:
    with pytest.raises(InvalidConstraint, match="callable"):
        validate_schema({"x": Rule("string", custom_check="nope")})  # type: ignore[arg-type]


def test_invalid_item_rule_is_wrapped_with_list_path() -> None:
    schema = Schema(tags=Rule("list", item_rule=Rule("text")))
    with pytest.raises(InvalidNestedSchema) as excinfo:
        validate_schema(schema)

    error = excinfo.value
    assert error.field == "tags"
    assert error.container == "list"
    assert error.path == "tags[]"
    assert isinstance(error.root_cause, UnknownType)
    assert isinstance(error.__cause__, UnknownType)
    assert str(error).startswith("tags: invalid list schema: items: invalid type")


def test_invalid_nested_schema_is_wrapped_with_dotted_path() -> None:
    inner = Schema(address=Rule("map", nested_schema=Schema(zip=Rule("int", pattern="x"))))
    schema = Schema(user=Rule("map", nested_schema=inner))
    with pytest.raises(InvalidNestedSchema) as excinfo:
        validate_schema(schema)

    assert excinfo.value.path == "user.address.zip"
    assert isinstance(excinfo.value.root_cause, MisplacedStringConstraint)


def test_first_defect_wins() -> None:
    schema = Schema(a=Rule("text"), b=Rule("string", min=1))
    with pytest.raises(UnknownType):
        validate_schema(schema)


def test_max_schema_depth() -> None:
    schema = Schema(a=Rule("map", nested_schema=Schema(b=Rule("map", nested_schema=Schema()))))
    validate_schema(schema, settings=EngineSettings(max_schema_depth=3))
    with pytest.raises(SchemaError) as excinfo:
        validate_schema(schema, settings=EngineSettings(max_schema_depth=2))
    assert isinstance(excinfo.value.root_cause, SchemaTooDeep)
    assert excinfo.value.path == "a.b"


def test_rejection_and_success_are_logged() -> None:
    logger = _RecordingLogger()
    validate_schema({"x": Rule("int")}, logger=logger)
    assert logger.events[-1] == ("schema_validated", {"field_count": 1})

    with pytest.raises(InvalidNestedSchema):
        validate_schema({"x": Rule("list", item_rule=Rule("bogus"))}, logger=logger)
    event, fields = logger.events[-1]
    assert event == "schema_rejected"
    assert fields["path"] == "x[]"
    assert fields["error_type"] == "UnknownType"
