"""Loggers for sqlgen.

Every logger lives under the ``sqlgen`` namespace and tags its records with
the correlation ID of the current context, if one is set.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from logging import LogRecord

__all__ = (
    "CorrelationIDFilter",
    "correlation_id_var",
    "get_correlation_id",
    "get_logger",
    "log_with_context",
    "set_correlation_id",
)

ROOT_LOGGER_NAME = "sqlgen"

correlation_id_var: ContextVar[str | None] = ContextVar("sqlgen_correlation_id", default=None)


def set_correlation_id(correlation_id: str | None) -> None:
    """Bind ``correlation_id`` to the current context; ``None`` unbinds it."""
    correlation_id_var.set(correlation_id)


def get_correlation_id() -> str | None:
    return correlation_id_var.get()


class CorrelationIDFilter(logging.Filter):
    """Copy the context's correlation ID onto each record as ``correlation_id``."""

    def filter(self, record: LogRecord) -> bool:
        correlation_id = get_correlation_id()
        if correlation_id:
            record.correlation_id = correlation_id  # type: ignore[attr-defined]
        return True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the logger for ``name``, placed under the ``sqlgen`` namespace.

    Args:
        name: Dotted logger name; ``sqlgen.`` is prefixed when missing.

    Returns:
        The logger, carrying exactly one :class:`CorrelationIDFilter`.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    logger = logging.getLogger(name)
    if not any(isinstance(f, CorrelationIDFilter) for f in logger.filters):
        logger.addFilter(CorrelationIDFilter())
    return logger


def log_with_context(logger: logging.Logger, level: int, message: str, **extra_fields: Any) -> None:
    """Log ``message`` with ``extra_fields`` attached to the record as ``extra_fields``.

    Handlers and observers read the dictionary instead of parsing the message.
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra={"extra_fields": extra_fields})
