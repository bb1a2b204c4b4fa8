"""Validation outcomes: field-addressed violations and the aggregated result."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum


class ViolationKind(StrEnum):
    MISSING_REQUIRED_FIELD = "missing_required_field"
    TYPE_MISMATCH = "type_mismatch"
    RANGE_VIOLATION = "range_violation"
    LENGTH_VIOLATION = "length_violation"
    PATTERN_VIOLATION = "pattern_violation"
    ALLOWED_VALUES_VIOLATION = "allowed_values_violation"
    CUSTOM_VALIDATION_FAILURE = "custom_validation_failure"

    @property
    def message_kind(self) -> str:
        """Key into ``Messages`` that may override this kind's text."""

        return _MESSAGE_KIND_BY_VIOLATION[self]


_MESSAGE_KIND_BY_VIOLATION: dict[ViolationKind, str] = {
    ViolationKind.MISSING_REQUIRED_FIELD: "required",
    ViolationKind.TYPE_MISMATCH: "type_mismatch",
    ViolationKind.RANGE_VIOLATION: "range",
    ViolationKind.LENGTH_VIOLATION: "length",
    ViolationKind.PATTERN_VIOLATION: "pattern",
    ViolationKind.ALLOWED_VALUES_VIOLATION: "allowed",
    ViolationKind.CUSTOM_VALIDATION_FAILURE: "custom_error",
}


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Single violation addressed by a dotted/bracketed path from the root."""

    field: str
    message: str
    kind: ViolationKind

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"

    def nested_under(self, prefix: str) -> ValidationError:
        """Return a copy re-rooted under the record field ``prefix``.

        Record nesting is always dotted (``user`` + ``name``), whatever the
        nested field is called. List item paths are built by the walker.
        """

        return ValidationError(
            field=f"{prefix}.{self.field}", message=self.message, kind=self.kind
        )

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message, "kind": self.kind.value}


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating one data instance; ``is_valid`` iff no errors."""

    errors: tuple[ValidationError, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors))

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def fields(self) -> tuple[str, ...]:
        """Distinct error paths in first-seen order."""

        return tuple(dict.fromkeys(error.field for error in self.errors))

    def messages_for(self, field: str) -> tuple[str, ...]:
        return tuple(error.message for error in self.errors if error.field == field)

    def of_kind(self, kind: ViolationKind) -> tuple[ValidationError, ...]:
        return tuple(error for error in self.errors if error.kind is kind)

    def to_dict(self) -> dict[str, object]:
        return {
            "is_valid": self.is_valid,
            "errors": [error.to_dict() for error in self.errors],
        }

    def raise_for_errors(self) -> None:
        if self.errors:
            raise DataValidationError(self.errors)


class DataValidationError(ValueError):
    """Raised by the strict entrypoints when data does not conform."""

    def __init__(self, errors: Sequence[ValidationError] | Iterable[ValidationError]) -> None:
        self.errors = tuple(errors)
        if not self.errors:
            rendered = "unknown validation failure"
        else:
            rendered = "\n".join(f"- {error}" for error in self.errors)
        super().__init__(f"invalid data:\n{rendered}")


__all__ = [
    "DataValidationError",
    "ValidationError",
    "ValidationResult",
    "ViolationKind",
]
