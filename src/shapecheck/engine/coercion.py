"""Numeric extraction used by range checks.

These rules are deliberately looser than type identity: ``extract_int``
accepts an integral float and ``extract_float`` accepts an int, while the
type matcher keeps ``int`` and ``float`` distinct.
"""

from __future__ import annotations

import math

from shapecheck.constants import INT64_MAX, INT64_MIN
from shapecheck.domain.values import FloatValue, IntValue, Value, type_name


class CoercionError(ValueError):
    """Raised when a Value cannot be read as the requested numeric type."""


def extract_int(value: Value) -> int:
    if isinstance(value, IntValue):
        return value.value
    if isinstance(value, FloatValue):
        number = value.value
        if not math.isfinite(number) or number != math.trunc(number):
            raise CoercionError(f"Failed to convert {number!r} to integer")
        as_int = int(number)
        if not INT64_MIN <= as_int <= INT64_MAX:
            raise CoercionError(f"Failed to convert {number!r} to integer: out of range")
        return as_int
    raise CoercionError(f"Failed to convert {type_name(value)} to integer")


def extract_float(value: Value) -> float:
    if isinstance(value, FloatValue):
        return value.value
    if isinstance(value, IntValue):
        return float(value.value)
    raise CoercionError(f"Failed to convert {type_name(value)} to float")


__all__ = ["CoercionError", "extract_float", "extract_int"]
