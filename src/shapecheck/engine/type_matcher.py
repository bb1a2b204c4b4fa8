"""Declared-type compatibility for values."""

from __future__ import annotations

from shapecheck.constants import (
    TYPE_BOOL,
    TYPE_FLOAT,
    TYPE_INT,
    TYPE_LIST,
    TYPE_MAP,
    TYPE_STRING,
)
from shapecheck.domain.values import (
    BoolValue,
    FloatValue,
    IntValue,
    ListValue,
    RecordValue,
    StringValue,
    Value,
    is_integral_float,
)

_EXACT_MATCH: dict[str, type] = {
    TYPE_STRING: StringValue,
    TYPE_INT: IntValue,
    TYPE_FLOAT: FloatValue,
    TYPE_BOOL: BoolValue,
    TYPE_LIST: ListValue,
    TYPE_MAP: RecordValue,
}


def type_matches(
    value: Value,
    declared_type: str,
    *,
    accept_integral_floats: bool = False,
) -> bool:
    """Return whether ``value`` satisfies ``declared_type``.

    ``int`` and ``float`` are distinct: an ``IntValue`` never matches
    ``float``. With ``accept_integral_floats`` a float with no fractional
    part (``100.0``) also matches ``int``. Unknown type names never match.
    """

    expected = _EXACT_MATCH.get(declared_type)
    if expected is None:
        return False
    if isinstance(value, expected):
        return True
    return declared_type == TYPE_INT and accept_integral_floats and is_integral_float(value)


__all__ = ["type_matches"]
