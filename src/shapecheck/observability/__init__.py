"""Public observability primitives: structured engine logging."""

from shapecheck.observability.logging import configure_logging, validation_scope

__all__ = ["configure_logging", "validation_scope"]
