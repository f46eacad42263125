"""SELECT statement assembly"""

from typing import Any, Iterable, Mapping, Optional

from sqlfrag.escaping import DEFAULT_ESCAPER, Escaper
from sqlfrag.utils.identifiers import quote_identifier

from .clauses import OrderBy, limit_clause, order_by_clause, where_clause
from .filters import build_conditions


def select_statement(
    table: str,
    columns: Optional[Iterable[str]] = None,
    where: str = "",
    order_by: str = "",
    limit: str = "",
    group_by: str = "",
    having: str = "",
    quote: str = "`"
) -> str:
    """Assemble a SELECT from already composed clauses

    Non-empty clauses are appended in SQL order:
    WHERE, GROUP BY, HAVING, ORDER BY, LIMIT.

    Args:
        table: Trusted table name, used as-is
        columns: Column names to quote and select, '*' when empty
        where, order_by, limit, group_by, having: Clauses from the composers in clauses.py
        quote: Identifier quote character for the column list

    Example:
        >>> select_statement("orders", [], "WHERE status = %s", "", "LIMIT 10")
        'SELECT * FROM orders WHERE status = %s LIMIT 10'
    """
    quoted = []
    for column in columns or []:
        quoted.append(quote_identifier(column, quote, stacklevel=3))
    select = ", ".join(quoted) if quoted else "*"

    parts = [f"SELECT {select} FROM {table}"]
    for clause in (where, group_by, having, order_by, limit):
        if clause:
            parts.append(clause)

    return " ".join(parts)


def build_select(
    table: str,
    conditions: Optional[Iterable[str]] = None,
    order_by: Optional[OrderBy] = None,
    limit: int = 0,
    offset: int = 0,
    quote: str = "`"
) -> str:
    """Build a SELECT * from condition fragments and raw ordering / limit inputs"""
    return select_statement(
        table,
        where=where_clause(conditions),
        order_by=order_by_clause(order_by, quote),
        limit=limit_clause(limit, offset),
    )


def build_filtered_select(
    table: str,
    filters: Optional[Mapping[str, Any]] = None,
    order_by: Optional[OrderBy] = None,
    limit: int = 0,
    column_mapping: Optional[Mapping[str, str]] = None,
    escaper: Escaper = DEFAULT_ESCAPER
) -> str:
    """Build a SELECT * whose WHERE clause comes from a filter mapping, values inline"""
    conditions = build_conditions(filters or {}, column_mapping, escaper=escaper)
    return build_select(table, conditions, order_by, limit)
