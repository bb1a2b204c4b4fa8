"""
shapecheck — unit tests for schema types

File: tests/unit/domain/test_schema_types.py

Purpose
- Validate Rule normalization, message override lookup, and Schema
  immutability and ordering.
"""

from __future__ import annotations

import pytest

from shapecheck.domain.schema import Messages, Rule, Schema
from shapecheck.domain.values import BoolValue, IntValue, StringValue


def test_rule_lifts_default_and_allowed_values() -> None:
    rule = Rule("string", default="draft", allowed_values=["draft", "final"])

    assert rule.default == StringValue("draft")
    assert rule.allowed_values == (StringValue("draft"), StringValue("final"))


def test_rule_zero_bounds_are_real_bounds() -> None:
    rule = Rule("int", min=0, max=0)
    assert rule.min == 0
    assert rule.max == 0
    assert Rule("int").min is None


def test_rule_wraps_plain_nested_mapping_in_schema() -> None:
    rule = Rule("map", nested_schema={"zip": Rule("string")})  # type: ignore[arg-type]
    assert isinstance(rule.nested_schema, Schema)
    assert list(rule.nested_schema) == ["zip"]


def test_rule_is_frozen() -> None:
    rule = Rule("bool", default=True)
    assert rule.default == BoolValue(True)
    with pytest.raises(AttributeError):
        rule.required = True  # type: ignore[misc]


def test_messages_lookup_by_kind() -> None:
    messages = Messages(required="The name field is mandatory", range="Out of range")

    assert messages.for_kind("required") == "The name field is mandatory"
    assert messages.for_kind("range") == "Out of range"
    assert messages.for_kind("length") is None
    assert messages.for_kind("pattern") is None
    with pytest.raises(KeyError):
        messages.for_kind("nonsense")


def test_rule_message_for_without_table_is_none() -> None:
    assert Rule("string").message_for("required") is None
    rule = Rule("string", messages=Messages(length="Name must be between 2 and 50 characters"))
    assert rule.message_for("length") == "Name must be between 2 and 50 characters"


def test_schema_preserves_declaration_order_and_keywords() -> None:
    schema = Schema({"b": Rule("int"), "a": Rule("string")}, c=Rule("bool"))
    assert list(schema) == ["b", "a", "c"]
    assert len(schema) == 3
    assert schema["a"].type == "string"


def test_schema_accepts_pairs() -> None:
    schema = Schema([("x", Rule("int")), ("y", Rule("float"))])
    assert list(schema.items()) == [("x", Rule("int")), ("y", Rule("float"))]


def test_schema_is_immutable_and_detached_from_source() -> None:
    source = {"age": Rule("int", min=18)}
    schema = Schema(source)
    source["extra"] = Rule("string")

    assert "extra" not in schema
    with pytest.raises(TypeError):
        schema["new"] = Rule("int")  # type: ignore[index]


def test_schema_rejects_non_rule_entries() -> None:
    with pytest.raises(TypeError, match="must map to a Rule"):
        Schema({"age": {"type": "int"}})  # type: ignore[dict-item]
    with pytest.raises(TypeError, match="must be strings"):
        Schema({1: Rule("int")})  # type: ignore[dict-item]


def test_rule_equality_includes_constraints() -> None:
    assert Rule("int", min=1) == Rule("int", min=1)
    assert Rule("int", min=1) != Rule("int", min=2)
    assert Rule("int", default=3).default == IntValue(3)
