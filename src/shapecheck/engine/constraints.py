"""
shapecheck — per-type constraint checkers

File: src/shapecheck/engine/constraints.py

Purpose
- Check numeric ranges, string length/pattern, and allowed-value membership
  for a value that already matched its declared type.

Functional requirements
- Each checker returns findings carrying a default message; it never
  consults message overrides and never raises for bad data.
- String length counts code points; min and max length are checked
  independently.
- Patterns use search semantics, so a match anywhere in the value passes.

Non-functional requirements
- Compiled patterns are cached; checkers are pure.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from shapecheck.constants import DEFAULT_PATTERN_MESSAGE, TYPE_FLOAT, TYPE_INT
from shapecheck.domain.results import ViolationKind
from shapecheck.domain.schema import Rule
from shapecheck.domain.values import StringValue, Value, to_python
from shapecheck.engine.coercion import CoercionError, extract_float, extract_int

_PATTERN_CACHE_SIZE = 256


@dataclass(frozen=True, slots=True)
class Violation:
    """Finding from one checker, before path and override resolution."""

    kind: ViolationKind
    message: str


@lru_cache(maxsize=_PATTERN_CACHE_SIZE)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile ``pattern`` once; raises ``re.error`` when malformed."""

    return re.compile(pattern)


def check_numeric(value: Value, rule: Rule) -> Violation | None:
    number: int | float
    try:
        if rule.type == TYPE_INT:
            number = extract_int(value)
        elif rule.type == TYPE_FLOAT:
            number = extract_float(value)
        else:
            return None
    except CoercionError as exc:
        return Violation(ViolationKind.RANGE_VIOLATION, str(exc))

    if rule.min is not None and number < rule.min:
        return Violation(
            ViolationKind.RANGE_VIOLATION,
            f"Value {number} is less than minimum {rule.min}",
        )
    if rule.max is not None and number > rule.max:
        return Violation(
            ViolationKind.RANGE_VIOLATION,
            f"Value {number} is greater than maximum {rule.max}",
        )
    return None


def check_string(value: Value, rule: Rule) -> tuple[Violation, ...]:
    if not isinstance(value, StringValue):
        return ()
    text = value.value
    found: list[Violation] = []

    length = len(text)
    if rule.min_length is not None and length < rule.min_length:
        found.append(
            Violation(
                ViolationKind.LENGTH_VIOLATION,
                f"String length {length} is less than minimum {rule.min_length}",
            )
        )
    if rule.max_length is not None and length > rule.max_length:
        found.append(
            Violation(
                ViolationKind.LENGTH_VIOLATION,
                f"String length {length} is greater than maximum {rule.max_length}",
            )
        )

    if rule.pattern is not None:
        try:
            compiled = compile_pattern(rule.pattern)
        except re.error as exc:
            found.append(
                Violation(
                    ViolationKind.PATTERN_VIOLATION,
                    f"Pattern {rule.pattern!r} is not a valid regular expression: {exc}",
                )
            )
        else:
            if compiled.search(text) is None:
                found.append(Violation(ViolationKind.PATTERN_VIOLATION, DEFAULT_PATTERN_MESSAGE))

    return tuple(found)


def check_allowed(value: Value, rule: Rule) -> Violation | None:
    if rule.allowed_values is None or value in rule.allowed_values:
        return None
    choices = ", ".join(repr(to_python(item)) for item in rule.allowed_values)
    return Violation(
        ViolationKind.ALLOWED_VALUES_VIOLATION,
        f"Value {to_python(value)!r} is not one of the allowed values: {choices}",
    )


__all__ = [
    "Violation",
    "check_allowed",
    "check_numeric",
    "check_string",
    "compile_pattern",
]
