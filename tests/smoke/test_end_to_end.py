"""
shapecheck — smoke tests

File: tests/smoke/test_end_to_end.py

Purpose
- Exercise the public package surface end to end: build a schema, check it,
  validate records, and read settings from a TOML file.
"""

from __future__ import annotations

from pathlib import Path

import pytest

import shapecheck
from shapecheck import (
    DataValidationError,
    Messages,
    Rule,
    Schema,
    Validator,
    ViolationKind,
    load_settings,
    validate,
)


@pytest.mark.smoke
def test_user_record_reports_every_violation() -> None:
    schema = Schema(
        name=Rule("string", required=True, min_length=2),
        age=Rule("int", min=18, max=99),
    )

    result = validate({"name": "A", "age": 17}, schema)

    assert not result.is_valid
    assert [(error.field, error.kind) for error in result.errors] == [
        ("name", ViolationKind.LENGTH_VIOLATION),
        ("age", ViolationKind.RANGE_VIOLATION),
    ]
    assert [str(error) for error in result.errors] == [
        "name: String length 1 is less than minimum 2",
        "age: Value 17 is less than minimum 18",
    ]


@pytest.mark.smoke
def test_order_payload_with_nested_lists_and_overrides() -> None:
    line = Rule(
        "map",
        nested_schema=Schema(
            sku=Rule("string", required=True, pattern=r"^SKU-\d{4}$"),
            quantity=Rule("int", required=True, min=1),
        ),
    )
    validator = Validator(
        Schema(
            order_id=Rule(
                "string",
                required=True,
                messages=Messages(required="Every order needs an id"),
            ),
            status=Rule("string", allowed_values=["open", "shipped"]),
            lines=Rule("list", required=True, item_rule=line),
            customer=Rule("map", nested_schema=Schema(email=Rule("string", required=True))),
        )
    )

    result = validator.validate(
        {
            "status": "lost",
            "lines": [{"sku": "SKU-0001", "quantity": 2}, {"sku": "bad", "quantity": 0}],
            "customer": {},
        }
    )

    assert result.to_dict()["errors"] == [
        {
            "field": "order_id",
            "message": "Every order needs an id",
            "kind": "missing_required_field",
        },
        {
            "field": "status",
            "message": "Value 'lost' is not one of the allowed values: 'open', 'shipped'",
            "kind": "allowed_values_violation",
        },
        {
            "field": "lines[1].sku",
            "message": "String does not match pattern",
            "kind": "pattern_violation",
        },
        {
            "field": "lines[1].quantity",
            "message": "Value 0 is less than minimum 1",
            "kind": "range_violation",
        },
        {
            "field": "customer.email",
            "message": "Field is required",
            "kind": "missing_required_field",
        },
    ]
    with pytest.raises(DataValidationError):
        validator.assert_valid({"lines": []})


@pytest.mark.smoke
def test_settings_file_drives_type_policy(tmp_path: Path) -> None:
    path = tmp_path / "shapecheck.toml"
    path.write_text("[shapecheck]\naccept_integral_floats = true\n", encoding="utf-8")

    settings = load_settings(path, environ={})
    schema = Schema(count=Rule("int"))

    assert validate({"count": 3.0}, schema, settings=settings).is_valid
    assert not validate({"count": 3.0}, schema).is_valid


@pytest.mark.smoke
def test_package_exports_version() -> None:
    assert shapecheck.__version__ == "0.1.0"
    assert "validate" in shapecheck.__all__
