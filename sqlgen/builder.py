"""Fluent SQL statement builder.

Clause methods record verbatim string fragments and return the builder for
chaining. :meth:`Builder.build` renders the statement and clears it so the
same instance can assemble the next one.

Example:
    >>> from sqlgen import builder
    >>> builder().select("id", "name").from_("users").where("active = 1").build()
    'SELECT id, name \\nFROM users \\nWHERE (active = 1)'
"""

import logging

from typing_extensions import Self

from sqlgen.config import BuilderConfig
from sqlgen.observer import create_event
from sqlgen.render import render
from sqlgen.statement import ConditionTarget, QueryType, Statement
from sqlgen.utils.logging import get_logger, log_with_context

__all__ = ("Builder",)

logger = get_logger("sqlgen.builder")


class Builder:
    """Accumulates clause fragments for one statement at a time.

    A builder is not safe for concurrent use; give each construction session
    its own instance.
    """

    __slots__ = ("_statement", "config")

    def __init__(self, config: "BuilderConfig | None" = None) -> None:
        self.config = config or BuilderConfig()
        self._statement = Statement()

    @property
    def statement(self) -> Statement:
        return self._statement

    def select(self, *columns: str) -> Self:
        """Start (or extend) a SELECT statement.

        Args:
            *columns: Column expressions to select.

        Returns:
            The current builder instance for method chaining.
        """
        self._statement.set_query_type(QueryType.SELECT)
        self._statement.append(self._statement.selects, *columns)
        return self

    def select_distinct(self, *columns: str) -> Self:
        self.select(*columns)
        self._statement.distinct = True
        return self

    def from_(self, *tables: str) -> Self:
        self._statement.append(self._statement.tables, *tables)
        return self

    def where(self, *conditions: str) -> Self:
        """Add WHERE conditions, joined with AND inside one parenthesised group.

        Also makes WHERE the target of subsequent :meth:`and_`/:meth:`or_` calls.

        Returns:
            The current builder instance for method chaining.
        """
        self._statement.append(self._statement.where_conditions, *conditions)
        self._statement.start_condition_group(ConditionTarget.WHERE)
        return self

    def and_(self) -> Self:
        """Close the current condition group and open a new one joined with AND.

        Raises:
            ConditionGroupError: If neither :meth:`where` nor :meth:`having` was called.

        Returns:
            The current builder instance for method chaining.
        """
        self._statement.add_and()
        return self

    def or_(self) -> Self:
        """Close the current condition group and open a new one joined with OR.

        Raises:
            ConditionGroupError: If neither :meth:`where` nor :meth:`having` was called.

        Returns:
            The current builder instance for method chaining.
        """
        self._statement.add_or()
        return self

    def group_by(self, *columns: str) -> Self:
        self._statement.append(self._statement.group_bys, *columns)
        return self

    def having(self, *conditions: str) -> Self:
        """Add HAVING conditions and make HAVING the target of :meth:`and_`/:meth:`or_`."""
        self._statement.append(self._statement.having_conditions, *conditions)
        self._statement.start_condition_group(ConditionTarget.HAVING)
        return self

    def join(self, *joins: str) -> Self:
        """Add plain ``JOIN`` clauses, one per fragment (e.g. ``"orders o ON o.user_id = u.id"``)."""
        self._statement.append(self._statement.joins, *joins)
        return self

    def inner_join(self, *joins: str) -> Self:
        self._statement.append(self._statement.inner_joins, *joins)
        return self

    def outer_join(self, *joins: str) -> Self:
        self._statement.append(self._statement.outer_joins, *joins)
        return self

    def left_outer_join(self, *joins: str) -> Self:
        self._statement.append(self._statement.left_outer_joins, *joins)
        return self

    def right_outer_join(self, *joins: str) -> Self:
        self._statement.append(self._statement.right_outer_joins, *joins)
        return self

    def order_by(self, *columns: str) -> Self:
        self._statement.append(self._statement.order_bys, *columns)
        return self

    def limit(self, limit: int) -> Self:
        """Set the LIMIT value.

        Raises:
            InvalidLimitError: If ``limit`` is negative or not an integer.

        Returns:
            The current builder instance for method chaining.
        """
        self._statement.set_limit(limit)
        return self

    def offset(self, offset: int) -> Self:
        """Set the OFFSET value.

        Raises:
            InvalidLimitError: If ``offset`` is negative or not an integer.

        Returns:
            The current builder instance for method chaining.
        """
        self._statement.set_offset(offset)
        return self

    def update(self, table: str) -> Self:
        self._statement.set_query_type(QueryType.UPDATE, table)
        return self

    def set(self, *assignments: str) -> Self:
        self._statement.append(self._statement.settings, *assignments)
        return self

    def delete_from(self, table: str) -> Self:
        self._statement.set_query_type(QueryType.DELETE, table)
        return self

    def insert_into(self, table: str, *columns: str) -> Self:
        """Start an INSERT statement.

        Args:
            table: Target table.
            *columns: Column names rendered as the parenthesised column list.

        Returns:
            The current builder instance for method chaining.
        """
        self._statement.set_query_type(QueryType.INSERT, table)
        self._statement.append(self._statement.columns, *columns)
        return self

    def values(self, *values: str) -> Self:
        self._statement.append(self._statement.values, *values)
        return self

    def build(self) -> str:
        """Render the accumulated statement and reset the builder.

        The builder is cleared whether or not rendering succeeds.

        Raises:
            QueryTypeNotSetError: If no statement-initiating method was called.

        Returns:
            str: The assembled SQL text.
        """
        statement = self._statement
        query_type = str(statement.query_type)
        fragment_count = statement.fragment_count
        try:
            sql = render(statement)
        except Exception:
            logger.debug("Discarding statement state after failed build")
            raise
        finally:
            statement.reset()

        log_with_context(
            logger,
            logging.DEBUG,
            f"Built {query_type} statement from {fragment_count} fragment(s)",
            query_type=query_type,
            fragment_count=fragment_count,
        )
        observers = self.config.observers
        if observers:
            event = create_event(sql=sql, query_type=query_type, fragment_count=fragment_count)
            for observer in observers:
                observer(event)
        return sql

    def __str__(self) -> str:
        """Preview the SQL for the current state without resetting it.

        Returns:
            str: The rendered SQL, or an empty string when no statement was started.
        """
        if self._statement.query_type is None:
            return ""
        return render(self._statement)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(query_type={self._statement.query_type}, empty={self._statement.is_empty})"
