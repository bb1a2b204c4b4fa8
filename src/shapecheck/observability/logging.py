"""Structured logging setup for the validation engine via ``structlog``."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import IO, Any, Final

import structlog

from shapecheck.config.settings import DEFAULT_SETTINGS, EngineSettings

_LEVELS: Final[dict[str, int]] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(
    settings: EngineSettings | None = None,
    *,
    stream: IO[str] | None = None,
) -> None:
    """Configure structlog for engine events.

    Importing ``shapecheck`` never configures logging; applications call this
    once at startup. ``log_format="json"`` emits one JSON object per line.
    """

    active = settings if settings is not None else DEFAULT_SETTINGS
    level = _LEVELS[active.log_level]

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if active.log_format == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(
            file=stream if stream is not None else sys.stderr
        ),
        cache_logger_on_first_use=False,
    )


@contextmanager
def validation_scope(**fields: str) -> Iterator[None]:
    """Bind correlation fields (e.g. ``request_id``) to every engine event in scope."""

    tokens = structlog.contextvars.bind_contextvars(**fields)
    try:
        yield
    finally:
        structlog.contextvars.reset_contextvars(**tokens)


__all__ = ["configure_logging", "validation_scope"]
