"""Centralised logging configuration using structlog."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Any, Iterator

import structlog
from structlog import stdlib
from structlog.contextvars import bind_contextvars, unbind_contextvars

from .config import settings

_LOGGING_CONFIGURED = False


def configure_logging(level: int | str | None = None) -> None:
    """Initialise structlog with a JSON formatter and contextvars support."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    if level is None:
        level = settings.log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            structlog.stdlib.filter_by_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=stdlib.BoundLogger,
        logger_factory=stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _LOGGING_CONFIGURED = True


def get_logger(name: str | None = None):
    """Return a structlog logger ensuring the configuration is ready."""

    configure_logging()
    return structlog.get_logger(name)


@contextmanager
def evaluation_context(**values: Any) -> Iterator[None]:
    """Bind context variables for the duration of a rule evaluation.

    Typical values are a request or user identifier so every ``rule.*`` event
    emitted while evaluating can be correlated by the embedding system.
    """

    if not values:
        yield
        return
    bind_contextvars(**values)
    try:
        yield
    finally:
        unbind_contextvars(*values.keys())


__all__ = ["configure_logging", "evaluation_context", "get_logger"]
