"""
shapecheck — property tests for the data validator

File: tests/unit/engine/test_validator_properties.py

Purpose
- Check validator invariants over generated records with ``hypothesis``.

What this test file should cover
- A result is valid exactly when it carries no errors.
- Validation is deterministic for the same inputs.
- Fields absent from the schema never produce errors.
- Range violations occur exactly for out-of-range integers.
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from shapecheck.domain.results import ViolationKind
from shapecheck.domain.schema import Rule, Schema
from shapecheck.engine.validator import validate

_SCHEMA = Schema(
    name=Rule("string", required=True, min_length=2, max_length=8),
    age=Rule("int", min=0, max=120),
    tags=Rule("list", item_rule=Rule("string", pattern=r"^[a-z]+$")),
)

_scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(2**63), max_value=2**63 - 1),
    st.floats(allow_nan=False),
    st.text(max_size=12),
)
_records = st.dictionaries(
    st.sampled_from(["name", "age", "tags", "other"]),
    st.one_of(_scalars, st.lists(_scalars, max_size=4)),
    max_size=4,
)


@settings(max_examples=200, deadline=None)
@given(data=_records)
def test_valid_iff_no_errors_and_deterministic(data: dict[str, object]) -> None:
    first = validate(data, _SCHEMA)
    second = validate(data, _SCHEMA)

    assert first == second
    assert first.is_valid == (len(first.errors) == 0)
    assert all(error.field.split("[")[0] in _SCHEMA for error in first.errors)


@settings(max_examples=100, deadline=None)
@given(
    data=_records,
    extra=st.dictionaries(
        st.text(min_size=1, max_size=6).filter(lambda key: key not in _SCHEMA),
        _scalars,
        max_size=3,
    ),
)
def test_unknown_fields_never_change_the_result(
    data: dict[str, object], extra: dict[str, object]
) -> None:
    assert validate({**extra, **data}, _SCHEMA) == validate(data, _SCHEMA)


@settings(max_examples=200, deadline=None)
@given(age=st.integers(min_value=-1000, max_value=1000))
def test_range_violation_exactly_when_out_of_bounds(age: int) -> None:
    result = validate({"name": "ada", "age": age}, _SCHEMA)
    in_range = 0 <= age <= 120

    assert result.is_valid == in_range
    assert len(result.of_kind(ViolationKind.RANGE_VIOLATION)) == (0 if in_range else 1)
