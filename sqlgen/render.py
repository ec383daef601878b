"""Render an accumulated :class:`~sqlgen.statement.Statement` into SQL text."""

from collections.abc import Callable, Sequence

from sqlgen.exceptions import QueryTypeNotSetError
from sqlgen.statement import UNSET, Boundary, Fragment, QueryType, Statement

__all__ = ("CLAUSE_BREAK", "append_clause", "render")

CLAUSE_BREAK = " \n"


def append_clause(
    out: "list[str]", keyword: str, parts: "Sequence[Fragment]", open_: str = "", close: str = "", separator: str = ", "
) -> None:
    """Append one clause to ``out``.

    Nothing is emitted for an empty fragment list. A clause that follows
    already emitted text is preceded by :data:`CLAUSE_BREAK`. No separator is
    placed next to a :class:`~sqlgen.statement.Boundary`; the marker's own
    text closes and reopens the group.

    Args:
        out: Output chunks, appended in place.
        keyword: Clause keyword, or an empty string for a bare bracketed list.
        parts: Fragments for the clause.
        open_: Text emitted before the first fragment.
        close: Text emitted after the last fragment.
        separator: Text placed between two literal fragments.
    """
    if not parts:
        return
    if out:
        out.append(CLAUSE_BREAK)
    if keyword:
        out.append(f"{keyword} ")
    out.append(open_)
    previous: "Fragment | None" = None
    for index, part in enumerate(parts):
        if index > 0 and not isinstance(part, Boundary) and not isinstance(previous, Boundary):
            out.append(separator)
        out.append(part.value if isinstance(part, Boundary) else part)
        previous = part
    out.append(close)


def _append_joins(out: "list[str]", statement: Statement) -> None:
    for keyword, parts in (
        ("JOIN", statement.joins),
        ("INNER JOIN", statement.inner_joins),
        ("OUTER JOIN", statement.outer_joins),
        ("LEFT OUTER JOIN", statement.left_outer_joins),
        ("RIGHT OUTER JOIN", statement.right_outer_joins),
    ):
        append_clause(out, keyword, parts, separator=f"{CLAUSE_BREAK}{keyword} ")


def _append_where(out: "list[str]", statement: Statement) -> None:
    append_clause(out, "WHERE", statement.where_conditions, "(", ")", " AND ")


def _target_parts(statement: Statement) -> "list[Fragment]":
    return [statement.target] if statement.target is not None else []


def _append_limit_offset(out: "list[str]", statement: Statement) -> None:
    if statement.limit != UNSET:
        out.append(f" LIMIT {statement.limit}" if out else f"LIMIT {statement.limit}")
    if statement.offset != UNSET:
        out.append(f" OFFSET {statement.offset}" if out else f"OFFSET {statement.offset}")


def _render_select(out: "list[str]", statement: Statement) -> None:
    append_clause(out, "SELECT DISTINCT" if statement.distinct else "SELECT", statement.selects)
    append_clause(out, "FROM", statement.tables)
    _append_where(out, statement)
    _append_joins(out, statement)
    append_clause(out, "GROUP BY", statement.group_bys)
    append_clause(out, "HAVING", statement.having_conditions, "(", ")", " AND ")
    append_clause(out, "ORDER BY", statement.order_bys)
    _append_limit_offset(out, statement)


def _render_insert(out: "list[str]", statement: Statement) -> None:
    append_clause(out, "INSERT INTO", _target_parts(statement))
    append_clause(out, "", statement.columns, "(", ")")
    append_clause(out, "VALUES", statement.values, "(", ")")


def _render_delete(out: "list[str]", statement: Statement) -> None:
    append_clause(out, "DELETE FROM", _target_parts(statement))
    _append_where(out, statement)
    _append_limit_offset(out, statement)


def _render_update(out: "list[str]", statement: Statement) -> None:
    append_clause(out, "UPDATE", _target_parts(statement))
    _append_joins(out, statement)
    append_clause(out, "SET", statement.settings)
    _append_where(out, statement)
    _append_limit_offset(out, statement)


_RENDERERS: "dict[QueryType, Callable[[list[str], Statement], None]]" = {
    QueryType.SELECT: _render_select,
    QueryType.INSERT: _render_insert,
    QueryType.DELETE: _render_delete,
    QueryType.UPDATE: _render_update,
}


def render(statement: Statement) -> str:
    """Assemble the SQL text for ``statement``.

    The statement is left untouched; resetting it is the caller's job.

    Args:
        statement: The accumulated statement.

    Raises:
        QueryTypeNotSetError: If no statement-initiating call was made.

    Returns:
        str: The rendered SQL.
    """
    if statement.query_type is None:
        raise QueryTypeNotSetError
    out: list[str] = []
    _RENDERERS[statement.query_type](out, statement)
    return "".join(out)
