"""Stable constants shared across the validation engine."""

from __future__ import annotations

from typing import Final

# Closed set of declared field types. Checked by the type matcher and the
# schema validator and nowhere else.
TYPE_STRING: Final[str] = "string"
TYPE_INT: Final[str] = "int"
TYPE_FLOAT: Final[str] = "float"
TYPE_BOOL: Final[str] = "bool"
TYPE_LIST: Final[str] = "list"
TYPE_MAP: Final[str] = "map"

DECLARED_TYPES: Final[tuple[str, ...]] = (
    TYPE_STRING,
    TYPE_INT,
    TYPE_FLOAT,
    TYPE_BOOL,
    TYPE_LIST,
    TYPE_MAP,
)
NUMERIC_TYPES: Final[frozenset[str]] = frozenset({TYPE_INT, TYPE_FLOAT})

# Synthetic single-field names used when a list item rule is checked as a
# one-field schema.
LIST_ITEM_FIELD: Final[str] = "item"
SCHEMA_ITEMS_FIELD: Final[str] = "items"

# Signed 64-bit integer range of the value model.
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# Generic default message texts.
DEFAULT_REQUIRED_MESSAGE: Final[str] = "Field is required"
DEFAULT_PATTERN_MESSAGE: Final[str] = "String does not match pattern"

# Configuration.
DEFAULT_SETTINGS_FILE: Final[str] = "shapecheck.toml"
SETTINGS_TABLE: Final[str] = "shapecheck"
ENV_PREFIX: Final[str] = "SHAPECHECK_"

__all__ = [
    "DECLARED_TYPES",
    "DEFAULT_PATTERN_MESSAGE",
    "DEFAULT_REQUIRED_MESSAGE",
    "DEFAULT_SETTINGS_FILE",
    "ENV_PREFIX",
    "INT64_MAX",
    "INT64_MIN",
    "LIST_ITEM_FIELD",
    "NUMERIC_TYPES",
    "SCHEMA_ITEMS_FIELD",
    "SETTINGS_TABLE",
    "TYPE_BOOL",
    "TYPE_FLOAT",
    "TYPE_INT",
    "TYPE_LIST",
    "TYPE_MAP",
    "TYPE_STRING",
]
