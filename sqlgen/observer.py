"""Statement observer primitives for build events."""

from collections.abc import Callable
from dataclasses import dataclass
from time import time
from typing import Any

from sqlgen.utils.logging import get_correlation_id, get_logger

__all__ = ("StatementEvent", "StatementObserver", "create_event", "default_statement_observer", "format_statement_event")


logger = get_logger("sqlgen.observer")


StatementObserver = Callable[["StatementEvent"], None]


@dataclass(slots=True)
class StatementEvent:
    """Structured payload describing a built statement."""

    sql: str
    query_type: str
    fragment_count: int
    rendered_at: float
    correlation_id: "str | None"

    def as_dict(self) -> "dict[str, Any]":
        """Return event payload as a dictionary."""

        return {
            "sql": self.sql,
            "query_type": self.query_type,
            "fragment_count": self.fragment_count,
            "rendered_at": self.rendered_at,
            "correlation_id": self.correlation_id,
        }


def create_event(*, sql: str, query_type: str, fragment_count: int) -> StatementEvent:
    """Factory helper used by the builder to create events."""

    return StatementEvent(
        sql=sql,
        query_type=query_type,
        fragment_count=fragment_count,
        rendered_at=time(),
        correlation_id=get_correlation_id(),
    )


def format_statement_event(event: StatementEvent) -> str:
    """Create a concise human-readable representation of a statement event."""

    return f"[{event.query_type}] built from {event.fragment_count} fragment(s)\nSQL: {event.sql}"


def default_statement_observer(event: StatementEvent) -> None:
    """Log the built statement; used when ``print_sql`` is enabled."""

    logger.info(format_statement_event(event), extra={"correlation_id": event.correlation_id})
