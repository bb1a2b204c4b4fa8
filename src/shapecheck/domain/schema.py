"""Declarative schema types: per-field rules, message overrides, and schemas."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Protocol

from shapecheck.domain.values import Value, from_python


class CustomCheck(Protocol):
    """Caller-supplied check. Returning a message means the value failed."""

    def __call__(self, value: Value, /) -> str | None: ...


@dataclass(frozen=True, slots=True)
class Messages:
    """Per-rule overrides replacing the generic text for a violation kind."""

    required: str | None = None
    type_mismatch: str | None = None
    range: str | None = None
    length: str | None = None
    pattern: str | None = None
    custom_error: str | None = None
    allowed: str | None = None

    def for_kind(self, kind: str) -> str | None:
        if kind not in _MESSAGE_KINDS:
            raise KeyError(f"unknown message kind: {kind!r}")
        override = getattr(self, kind)
        return override if isinstance(override, str) else None


_MESSAGE_KINDS: frozenset[str] = frozenset(
    {"required", "type_mismatch", "range", "length", "pattern", "custom_error", "allowed"}
)


@dataclass(frozen=True, slots=True)
class Rule:
    """Constraints for a single field.

    ``default`` and ``allowed_values`` accept plain Python data and are lifted
    into the value model. Bounds are explicit optionals: ``min=0`` is a real
    bound, ``None`` means unset.
    """

    type: str
    required: bool = False
    default: Value | None = None
    min: int | float | None = None
    max: int | float | None = None
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    allowed_values: tuple[Value, ...] | None = None
    item_rule: Rule | None = None
    nested_schema: Schema | None = None
    custom_check: CustomCheck | None = None
    messages: Messages | None = None

    def __post_init__(self) -> None:
        if self.default is not None:
            object.__setattr__(self, "default", from_python(self.default, path="default"))
        if self.allowed_values is not None:
            lifted = tuple(
                from_python(item, path=f"allowed_values[{index}]")
                for index, item in enumerate(self.allowed_values)
            )
            object.__setattr__(self, "allowed_values", lifted)
        if self.nested_schema is not None and not isinstance(self.nested_schema, Schema):
            object.__setattr__(self, "nested_schema", Schema(self.nested_schema))

    def message_for(self, kind: str) -> str | None:
        if self.messages is None:
            return None
        return self.messages.for_kind(kind)


class Schema(Mapping[str, Rule]):
    """Immutable mapping of field name to ``Rule`` in declaration order."""

    __slots__ = ("_rules",)

    def __init__(
        self,
        rules: Mapping[str, Rule] | Iterable[tuple[str, Rule]] = (),
        /,
        **named: Rule,
    ) -> None:
        pairs = rules.items() if isinstance(rules, Mapping) else rules
        collected: dict[str, Rule] = {}
        for name, rule in (*pairs, *named.items()):
            if not isinstance(name, str):
                raise TypeError(f"schema field names must be strings, got {type(name).__name__}")
            if not isinstance(rule, Rule):
                raise TypeError(
                    f"schema field {name!r} must map to a Rule, got {type(rule).__name__}"
                )
            collected[name] = rule
        self._rules: Mapping[str, Rule] = MappingProxyType(collected)

    def __getitem__(self, name: str) -> Rule:
        return self._rules[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"Schema({dict(self._rules)!r})"


__all__ = [
    "CustomCheck",
    "Messages",
    "Rule",
    "Schema",
]
