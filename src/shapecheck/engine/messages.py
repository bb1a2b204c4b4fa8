"""Message resolution: a rule's override replaces the generic text verbatim."""

from __future__ import annotations

from shapecheck.domain.results import ViolationKind
from shapecheck.domain.schema import Rule


def resolve_message(rule: Rule, kind: ViolationKind, default: str) -> str:
    override = rule.message_for(kind.message_kind)
    return default if override is None else override


__all__ = ["resolve_message"]
