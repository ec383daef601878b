"""sqlgen: fluent assembly of SQL statement text."""

from sqlgen import exceptions
from sqlgen.builder import Builder
from sqlgen.config import BuilderConfig
from sqlgen.exceptions import (
    ConditionGroupError,
    InvalidLimitError,
    QueryTypeConflictError,
    QueryTypeNotSetError,
    SQLBuilderError,
    SQLGenError,
)
from sqlgen.observer import StatementEvent
from sqlgen.statement import Boundary, QueryType, Statement

__version__ = "0.1.0"

__all__ = (
    "Boundary",
    "Builder",
    "BuilderConfig",
    "ConditionGroupError",
    "InvalidLimitError",
    "QueryTypeConflictError",
    "QueryTypeNotSetError",
    "SQLBuilderError",
    "SQLGenError",
    "QueryType",
    "Statement",
    "StatementEvent",
    "__version__",
    "builder",
    "exceptions",
)


def builder(config: "BuilderConfig | None" = None) -> Builder:
    """Create a new, independently owned statement builder.

    Args:
        config: Optional observability settings for the builder.

    Returns:
        Builder: A fresh builder with an empty statement.
    """
    return Builder(config=config)
