"""Mutable statement model for the fluent SQL builder.

The statement records, per clause, the fragments a caller supplied. It knows
nothing about punctuation; :mod:`sqlgen.render` turns it into text.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from sqlgen.exceptions import ConditionGroupError, InvalidLimitError, QueryTypeConflictError

__all__ = ("UNSET", "Boundary", "ConditionTarget", "Fragment", "QueryType", "Statement")

UNSET = -1


class QueryType(Enum):
    """Statement kinds the renderer knows how to assemble."""

    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"

    def __str__(self) -> str:
        return self.value


class Boundary(Enum):
    """AND/OR continuation markers placed between grouped predicates.

    The value is the text emitted in place of the marker; it closes the
    current group and opens the next one.
    """

    AND = ") \nAND ("
    OR = ") \nOR ("


class ConditionTarget(Enum):
    """Which condition list receives AND/OR boundary markers."""

    NONE = "none"
    WHERE = "where"
    HAVING = "having"


Fragment = Union[str, Boundary]


@dataclass
class Statement:
    """Fragments accumulated for one in-progress statement."""

    query_type: "QueryType | None" = None
    target: "str | None" = None
    distinct: bool = False
    limit: int = UNSET
    offset: int = UNSET
    selects: "list[Fragment]" = field(default_factory=list)
    tables: "list[Fragment]" = field(default_factory=list)
    where_conditions: "list[Fragment]" = field(default_factory=list)
    order_bys: "list[Fragment]" = field(default_factory=list)
    settings: "list[Fragment]" = field(default_factory=list)
    columns: "list[Fragment]" = field(default_factory=list)
    values: "list[Fragment]" = field(default_factory=list)
    group_bys: "list[Fragment]" = field(default_factory=list)
    having_conditions: "list[Fragment]" = field(default_factory=list)
    joins: "list[Fragment]" = field(default_factory=list)
    inner_joins: "list[Fragment]" = field(default_factory=list)
    outer_joins: "list[Fragment]" = field(default_factory=list)
    left_outer_joins: "list[Fragment]" = field(default_factory=list)
    right_outer_joins: "list[Fragment]" = field(default_factory=list)
    condition_target: ConditionTarget = ConditionTarget.NONE

    @property
    def fragment_lists(self) -> "tuple[list[Fragment], ...]":
        return (
            self.selects,
            self.tables,
            self.where_conditions,
            self.order_bys,
            self.settings,
            self.columns,
            self.values,
            self.group_bys,
            self.having_conditions,
            self.joins,
            self.inner_joins,
            self.outer_joins,
            self.left_outer_joins,
            self.right_outer_joins,
        )

    @property
    def is_empty(self) -> bool:
        """True when nothing has been accumulated since the last reset."""
        return (
            self.query_type is None
            and self.target is None
            and not self.distinct
            and self.limit == UNSET
            and self.offset == UNSET
            and self.condition_target is ConditionTarget.NONE
            and not any(self.fragment_lists)
        )

    @property
    def fragment_count(self) -> int:
        """Number of caller-supplied fragments, boundary markers excluded."""
        count = sum(1 for parts in self.fragment_lists for part in parts if not isinstance(part, Boundary))
        if self.target is not None:
            count += 1
        return count

    def set_query_type(self, query_type: QueryType, target: "str | None" = None) -> None:
        """Set the statement kind and, for INSERT/UPDATE/DELETE, its target table.

        SELECT may be initiated repeatedly to add columns. Any other
        combination of initiators before a reset is rejected. The target is
        kept apart from the FROM list so a stray ``from_()`` never reaches
        an INSERT, UPDATE or DELETE.

        Args:
            query_type: The statement kind.
            target: Table the INSERT/UPDATE/DELETE acts on.

        Raises:
            QueryTypeConflictError: If a statement was already initiated with a different
                type, or an INSERT/UPDATE/DELETE is initiated a second time.
        """
        if self.query_type is not None and (self.query_type is not query_type or query_type is not QueryType.SELECT):
            msg = f"Cannot start a {query_type} statement, a {self.query_type} statement is already in progress."
            raise QueryTypeConflictError(msg)
        self.query_type = query_type
        if target is not None:
            self.target = target

    def append(self, parts: "list[Fragment]", *fragments: str) -> None:
        parts.extend(fragments)

    def start_condition_group(self, target: ConditionTarget) -> None:
        self.condition_target = target

    def conditions_for(self, target: ConditionTarget) -> "list[Fragment]":
        """Return the fragment list backing ``target``.

        Raises:
            ConditionGroupError: If ``target`` is :attr:`ConditionTarget.NONE`.
        """
        if target is ConditionTarget.WHERE:
            return self.where_conditions
        if target is ConditionTarget.HAVING:
            return self.having_conditions
        raise ConditionGroupError

    def add_boundary(self, boundary: Boundary) -> None:
        """Append an AND/OR marker to whichever condition list was started last.

        Raises:
            ConditionGroupError: If neither ``where`` nor ``having`` has been called.
        """
        self.conditions_for(self.condition_target).append(boundary)

    def add_and(self) -> None:
        self.add_boundary(Boundary.AND)

    def add_or(self) -> None:
        self.add_boundary(Boundary.OR)

    def set_limit(self, limit: int) -> None:
        self.limit = _check_count("LIMIT", limit)

    def set_offset(self, offset: int) -> None:
        self.offset = _check_count("OFFSET", offset)

    def reset(self) -> None:
        """Clear every clause list and scalar back to the initial state."""
        self.query_type = None
        self.target = None
        self.distinct = False
        self.limit = UNSET
        self.offset = UNSET
        for parts in self.fragment_lists:
            parts.clear()
        self.condition_target = ConditionTarget.NONE


def _check_count(keyword: str, value: int) -> int:
    # bool is an int subclass but never a meaningful row count
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{keyword} must be an integer, got {type(value).__name__}."
        raise InvalidLimitError(msg)
    if value < 0:
        msg = f"{keyword} must be non-negative, got {value}."
        raise InvalidLimitError(msg)
    return value
