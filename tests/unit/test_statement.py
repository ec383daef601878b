"""Tests for the Statement model."""

import pytest

from sqlgen.exceptions import ConditionGroupError, InvalidLimitError, QueryTypeConflictError
from sqlgen.statement import UNSET, Boundary, ConditionTarget, QueryType, Statement


def test_new_statement_is_empty() -> None:
    statement = Statement()

    assert statement.is_empty
    assert statement.query_type is None
    assert statement.limit == UNSET
    assert statement.offset == UNSET
    assert statement.condition_target is ConditionTarget.NONE


def test_append_preserves_order_and_duplicates() -> None:
    statement = Statement()
    statement.append(statement.order_bys, "b", "a")
    statement.append(statement.order_bys)
    statement.append(statement.order_bys, "b")

    assert statement.order_bys == ["b", "a", "b"]


def test_set_query_type_records_table() -> None:
    statement = Statement()
    statement.set_query_type(QueryType.UPDATE, "accounts")

    assert statement.query_type is QueryType.UPDATE
    assert statement.target == "accounts"
    assert statement.tables == []


def test_set_query_type_conflict() -> None:
    statement = Statement()
    statement.set_query_type(QueryType.INSERT, "t")

    with pytest.raises(QueryTypeConflictError):
        statement.set_query_type(QueryType.SELECT)
    assert statement.query_type is QueryType.INSERT


def test_repeated_select_is_allowed() -> None:
    statement = Statement()
    statement.set_query_type(QueryType.SELECT)
    statement.set_query_type(QueryType.SELECT)

    assert statement.query_type is QueryType.SELECT


def test_boundary_goes_to_active_condition_list() -> None:
    statement = Statement()
    statement.start_condition_group(ConditionTarget.HAVING)
    statement.add_and()
    statement.start_condition_group(ConditionTarget.WHERE)
    statement.add_or()

    assert statement.having_conditions == [Boundary.AND]
    assert statement.where_conditions == [Boundary.OR]


def test_boundary_without_condition_group() -> None:
    statement = Statement()

    with pytest.raises(ConditionGroupError):
        statement.add_and()
    assert statement.where_conditions == []
    assert statement.having_conditions == []


def test_conditions_for_none_target() -> None:
    with pytest.raises(ConditionGroupError):
        Statement().conditions_for(ConditionTarget.NONE)


def test_fragment_count_skips_boundaries() -> None:
    statement = Statement()
    statement.append(statement.where_conditions, "a", "b")
    statement.start_condition_group(ConditionTarget.WHERE)
    statement.add_and()
    statement.append(statement.selects, "c")

    assert statement.fragment_count == 3


@pytest.mark.parametrize("value", [-1, -2])
def test_negative_counts_rejected(value: int) -> None:
    statement = Statement()

    with pytest.raises(InvalidLimitError):
        statement.set_limit(value)
    with pytest.raises(InvalidLimitError):
        statement.set_offset(value)
    assert statement.limit == UNSET
    assert statement.offset == UNSET


def test_reset_clears_everything() -> None:
    statement = Statement()
    statement.set_query_type(QueryType.SELECT)
    statement.distinct = True
    statement.set_limit(5)
    statement.set_offset(2)
    for parts in statement.fragment_lists:
        statement.append(parts, "x")
    statement.start_condition_group(ConditionTarget.WHERE)

    statement.reset()

    assert statement.is_empty
    assert statement == Statement()
