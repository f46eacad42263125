"""Clause composers.

Functions that join condition fragments into keyword-prefixed clauses
(WHERE, HAVING, ORDER BY, GROUP BY, LIMIT). Each returns an empty string
when there is nothing to render, so unused clauses can be passed straight
to select_statement().

Enum-like string inputs (operators, directions, joiners) never raise;
unrecognized values fall back to a safe default.
"""

from typing import Any, Iterable, Mapping, Optional, Union

from sqlfrag.utils.identifiers import quote_identifier

VALID_OPERATORS = ("=", "!=", "<>", ">", ">=", "<", "<=", "LIKE", "NOT LIKE")
VALID_JOINERS = ("AND", "OR")

OrderBy = Union[Mapping[str, str], Iterable[tuple[str, str]]]


def sanitize_operator(operator: Any) -> str:
    """Return the upper-cased operator if recognized, otherwise '='"""
    normalized = str(operator).strip().upper()
    return normalized if normalized in VALID_OPERATORS else "="


def sanitize_order(direction: Any) -> str:
    """Return 'DESC' for any casing of desc, otherwise 'ASC'"""
    return "DESC" if str(direction).upper() == "DESC" else "ASC"


def sanitize_joiner(joiner: Any) -> str:
    """Return 'AND' or 'OR', defaulting to 'AND'"""
    normalized = str(joiner).upper()
    return normalized if normalized in VALID_JOINERS else "AND"


def _join_conditions(keyword: str, conditions: Optional[Iterable[str]], joiner: str) -> str:
    filtered = [c for c in (conditions or []) if c]
    if not filtered:
        return ""
    return f"{keyword} " + f" {sanitize_joiner(joiner)} ".join(filtered)


def where_clause(conditions: Optional[Iterable[str]], joiner: str = "AND") -> str:
    """Join conditions into a WHERE clause

    Empty fragments are dropped before joining.

    Example:
        >>> where_clause(["a=1", "b=2"], "or")
        'WHERE a=1 OR b=2'
        >>> where_clause([])
        ''
    """
    return _join_conditions("WHERE", conditions, joiner)


def having_clause(conditions: Optional[Iterable[str]], joiner: str = "AND") -> str:
    """Join conditions into a HAVING clause, same rules as where_clause()"""
    return _join_conditions("HAVING", conditions, joiner)


def order_by_clause(order_by: Optional[OrderBy], quote: str = "`") -> str:
    """Build an ORDER BY clause from column => direction pairs

    Args:
        order_by: Mapping or iterable of (column, direction) pairs, rendered in input order
        quote: Identifier quote character

    Example:
        >>> order_by_clause({"date": "desc", "title": "asc"})
        'ORDER BY `date` DESC, `title` ASC'
    """
    if not order_by:
        return ""

    pairs = order_by.items() if isinstance(order_by, Mapping) else order_by
    terms = []
    for column, direction in pairs:
        terms.append(f"{quote_identifier(column, quote, stacklevel=3)} {sanitize_order(direction)}")
    if not terms:
        return ""
    return "ORDER BY " + ", ".join(terms)


def group_by_clause(columns: Optional[Iterable[str]], quote: str = "`") -> str:
    """Build a GROUP BY clause from column names"""
    quoted = []
    for column in columns or []:
        quoted.append(quote_identifier(column, quote, stacklevel=3))
    if not quoted:
        return ""
    return "GROUP BY " + ", ".join(quoted)


def limit_clause(limit: int, offset: int = 0) -> str:
    """Build a LIMIT clause using MySQL offset-first syntax

    A limit of zero or less means no limit and renders nothing.

    Example:
        >>> limit_clause(10, 20)
        'LIMIT 20, 10'
    """
    limit = int(limit)
    offset = int(offset)

    if limit <= 0:
        return ""
    if offset > 0:
        return f"LIMIT {offset}, {limit}"
    return f"LIMIT {limit}"
