"""
shapecheck — closed value model for validated data.

File: src/shapecheck/domain/values.py

Purpose
- Represent every datum the engine can inspect as one of a closed set of
  tagged, immutable variants.

What should be included in this file
- One frozen dataclass per variant plus the ``Value`` union alias.
- Lifting plain Python data into the model and lowering it back.

Functional requirements
- ``bool`` is never treated as an integer.
- Integers are limited to the signed 64-bit range.
- Containers are immutable once constructed.

Non-functional requirements
- No IO, no logging, no dependency on the engine layer.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any, TypeAlias

from shapecheck.constants import (
    INT64_MAX,
    INT64_MIN,
    TYPE_BOOL,
    TYPE_FLOAT,
    TYPE_INT,
    TYPE_LIST,
    TYPE_MAP,
    TYPE_STRING,
)


class ValueModelError(TypeError):
    """Raised when data cannot be represented in the value model."""


class ValueKind(StrEnum):
    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    LIST = "list"
    RECORD = "record"


@dataclass(frozen=True, slots=True)
class NullValue:
    @property
    def kind(self) -> ValueKind:
        return ValueKind.NULL


@dataclass(frozen=True, slots=True)
class BoolValue:
    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise ValueModelError(f"BoolValue expects bool, got {type(self.value).__name__}")

    @property
    def kind(self) -> ValueKind:
        return ValueKind.BOOL


@dataclass(frozen=True, slots=True)
class IntValue:
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueModelError(f"IntValue expects int, got {type(self.value).__name__}")
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise ValueModelError(f"integer {self.value} is outside the signed 64-bit range")

    @property
    def kind(self) -> ValueKind:
        return ValueKind.INT


@dataclass(frozen=True, slots=True)
class FloatValue:
    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise ValueModelError(f"FloatValue expects float, got {type(self.value).__name__}")
        object.__setattr__(self, "value", float(self.value))

    @property
    def kind(self) -> ValueKind:
        return ValueKind.FLOAT


@dataclass(frozen=True, slots=True)
class StringValue:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValueModelError(f"StringValue expects str, got {type(self.value).__name__}")

    @property
    def kind(self) -> ValueKind:
        return ValueKind.STRING


@dataclass(frozen=True, slots=True)
class ListValue:
    items: tuple[Value, ...] = ()

    def __post_init__(self) -> None:
        items = tuple(self.items)
        for index, item in enumerate(items):
            if not is_value(item):
                raise ValueModelError(
                    f"ListValue item {index} is not a Value: {type(item).__name__}"
                )
        object.__setattr__(self, "items", items)

    @property
    def kind(self) -> ValueKind:
        return ValueKind.LIST

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class RecordValue:
    """Named fields, each holding a Value. Field order is preserved."""

    fields: Mapping[str, Value] = field(default_factory=dict)

    def __post_init__(self) -> None:
        copied: dict[str, Value] = {}
        for key, item in self.fields.items():
            if not isinstance(key, str):
                raise ValueModelError(f"record keys must be strings, got {type(key).__name__}")
            if not is_value(item):
                raise ValueModelError(f"record field {key!r} is not a Value: {type(item).__name__}")
            copied[key] = item
        object.__setattr__(self, "fields", MappingProxyType(copied))

    @property
    def kind(self) -> ValueKind:
        return ValueKind.RECORD

    def get(self, name: str) -> Value | None:
        return self.fields.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.fields


Value: TypeAlias = (
    NullValue | BoolValue | IntValue | FloatValue | StringValue | ListValue | RecordValue
)

_VALUE_CLASSES = (
    NullValue,
    BoolValue,
    IntValue,
    FloatValue,
    StringValue,
    ListValue,
    RecordValue,
)

_DECLARED_NAMES = {
    ValueKind.NULL: "null",
    ValueKind.BOOL: TYPE_BOOL,
    ValueKind.INT: TYPE_INT,
    ValueKind.FLOAT: TYPE_FLOAT,
    ValueKind.STRING: TYPE_STRING,
    ValueKind.LIST: TYPE_LIST,
    ValueKind.RECORD: TYPE_MAP,
}

NULL = NullValue()


def is_value(obj: object) -> bool:
    return isinstance(obj, _VALUE_CLASSES)


def type_name(value: Value) -> str:
    """Return the declared-type vocabulary name of ``value`` (``map`` for records)."""

    return _DECLARED_NAMES[value.kind]


def from_python(obj: object, *, path: str = "$") -> Value:
    """Lift plain Python data into the value model.

    Values already in the model are returned unchanged. Sequences (other than
    ``str``/``bytes``) become lists and mappings with string keys become
    records. Anything else raises ``ValueModelError`` naming ``path``.
    """

    if is_value(obj):
        return obj  # type: ignore[return-value]
    if obj is None:
        return NULL
    if isinstance(obj, bool):
        return BoolValue(obj)
    if isinstance(obj, int):
        if not INT64_MIN <= obj <= INT64_MAX:
            raise ValueModelError(f"{path}: integer is outside the signed 64-bit range")
        return IntValue(obj)
    if isinstance(obj, float):
        return FloatValue(obj)
    if isinstance(obj, str):
        return StringValue(obj)
    if isinstance(obj, Mapping):
        fields: dict[str, Value] = {}
        for key, item in obj.items():
            if not isinstance(key, str):
                raise ValueModelError(f"{path}: record keys must be strings")
            fields[key] = from_python(item, path=f"{path}.{key}")
        return RecordValue(fields)
    if isinstance(obj, Sequence) and not isinstance(obj, (bytes, bytearray)):
        return ListValue(
            tuple(from_python(item, path=f"{path}[{index}]") for index, item in enumerate(obj))
        )
    raise ValueModelError(f"{path}: unsupported value type: {type(obj).__name__}")


def to_python(value: Value) -> Any:
    """Lower a Value back to plain Python data (lists and dicts)."""

    if isinstance(value, NullValue):
        return None
    if isinstance(value, (BoolValue, IntValue, FloatValue, StringValue)):
        return value.value
    if isinstance(value, ListValue):
        return [to_python(item) for item in value.items]
    if isinstance(value, RecordValue):
        return {key: to_python(item) for key, item in value.fields.items()}
    raise ValueModelError(f"not a Value: {type(value).__name__}")


def is_integral_float(value: Value) -> bool:
    return (
        isinstance(value, FloatValue)
        and math.isfinite(value.value)
        and value.value == math.trunc(value.value)
    )


__all__ = [
    "NULL",
    "BoolValue",
    "FloatValue",
    "IntValue",
    "ListValue",
    "NullValue",
    "RecordValue",
    "StringValue",
    "Value",
    "ValueKind",
    "ValueModelError",
    "from_python",
    "is_integral_float",
    "is_value",
    "to_python",
    "type_name",
]
