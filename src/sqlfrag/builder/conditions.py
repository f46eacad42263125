"""Single-condition builders.

Every construct comes in two flavors:

- inline (condition, in_clause, like_clause, between_clause): the value is
  rendered into the fragment immediately by an Escaper
- safe (safe_condition, safe_in_clause, ...): the fragment keeps typed
  placeholder tokens and the values are appended to a caller-owned params
  list, in the order the tokens appear

Example:
    >>> params = []
    >>> safe_between_clause("price", 10, 100, params, data_type="int")
    'price BETWEEN %d AND %d'
    >>> params
    [10, 100]

Inline fragments are finished SQL text. Feeding them back into a template
that is later prepared again (for example with Executor.prepare) would
re-interpret any percent signs inside their literals, so keep the two modes
apart within one statement. A statement built only from inline fragments runs
with Executor.run(sql) and no params.
"""

from typing import Any, Iterable, MutableSequence, Optional

from sqlfrag.escaping import DEFAULT_ESCAPER, STRING_TOKEN, Escaper

from .clauses import sanitize_operator
from .patterns import like_pattern
from .placeholders import placeholder, placeholders, placeholders_with_params


def _special_case(column: str, value: Any, operator: str, data_type: str) -> Optional[str]:
    """NULL and empty-string comparisons that never take a placeholder"""
    if value is None:
        return f"{column} IS NULL" if operator == "=" else f"{column} IS NOT NULL"
    if data_type == "string" and value == "":
        return f"{column} = ''" if operator == "=" else f"{column} != ''"
    return None


def condition(
    column: str,
    value: Any,
    operator: str = "=",
    data_type: str = "string",
    escaper: Escaper = DEFAULT_ESCAPER
) -> str:
    """Build a comparison with the value rendered inline

    Args:
        column: Trusted column name
        value: None, str, int or float
        operator: Comparison operator, unknown operators become '='
        data_type: 'string', 'int' or 'float'
        escaper: Escaper used to render the literal

    Returns:
        Fragment such as "status = 'completed'" or "deleted_at IS NULL"
    """
    operator = sanitize_operator(operator)
    special = _special_case(column, value, operator, data_type)
    if special is not None:
        return special

    return escaper.prepare(f"{column} {operator} {placeholder(data_type)}", value)


def safe_condition(
    column: str,
    value: Any,
    params: MutableSequence[Any],
    operator: str = "=",
    data_type: str = "string"
) -> str:
    """Build a comparison with a placeholder, appending value to params"""
    operator = sanitize_operator(operator)
    special = _special_case(column, value, operator, data_type)
    if special is not None:
        return special

    params.append(value)
    return f"{column} {operator} {placeholder(data_type)}"


def in_clause(
    column: str,
    values: Iterable[Any],
    negate: bool = False,
    data_type: str = "string",
    escaper: Escaper = DEFAULT_ESCAPER
) -> str:
    """Build an IN / NOT IN condition with values rendered inline

    An empty value set renders '1=0' for IN (matches nothing) and
    '1=1' for NOT IN (matches everything).
    """
    values = list(values)
    if not values:
        return "1=1" if negate else "1=0"

    operator = "NOT IN" if negate else "IN"
    tokens = placeholders(values, placeholder(data_type))
    return escaper.prepare(f"{column} {operator} ({tokens})", *values)


def safe_in_clause(
    column: str,
    values: Iterable[Any],
    params: MutableSequence[Any],
    negate: bool = False,
    data_type: str = "string"
) -> str:
    """Build an IN / NOT IN condition with placeholders, appending every value in order"""
    values = list(values)
    if not values:
        return "1=1" if negate else "1=0"

    operator = "NOT IN" if negate else "IN"
    tokens = placeholders_with_params(values, params, placeholder(data_type))
    return f"{column} {operator} ({tokens})"


def like_clause(
    column: str,
    value: str,
    pattern_type: str = "substring",
    escaper: Escaper = DEFAULT_ESCAPER
) -> str:
    """Build a LIKE condition with the escaped pattern rendered inline"""
    pattern = like_pattern(value, pattern_type)
    return escaper.prepare(f"{column} LIKE {STRING_TOKEN}", pattern)


def safe_like_clause(
    column: str,
    value: str,
    params: MutableSequence[Any],
    pattern_type: str = "substring"
) -> str:
    """Build a LIKE condition with a placeholder, appending the computed pattern"""
    params.append(like_pattern(value, pattern_type))
    return f"{column} LIKE {STRING_TOKEN}"


def between_clause(
    column: str,
    min_value: Any,
    max_value: Any,
    data_type: str = "string",
    escaper: Escaper = DEFAULT_ESCAPER
) -> str:
    """Build a BETWEEN condition with both bounds rendered inline"""
    token = placeholder(data_type)
    return escaper.prepare(f"{column} BETWEEN {token} AND {token}", min_value, max_value)


def safe_between_clause(
    column: str,
    min_value: Any,
    max_value: Any,
    params: MutableSequence[Any],
    data_type: str = "string"
) -> str:
    """Build a BETWEEN condition with placeholders, appending min then max"""
    token = placeholder(data_type)
    params.append(min_value)
    params.append(max_value)
    return f"{column} BETWEEN {token} AND {token}"


def not_empty(column: str) -> str:
    """Condition matching values that are neither NULL nor empty"""
    return f"({column} != '' AND {column} IS NOT NULL)"


def date_range_conditions(
    column: str,
    start_date: Optional[str],
    end_date: Optional[str],
    params: MutableSequence[Any]
) -> list[str]:
    """Build >= / <= conditions for whichever bounds are set"""
    conditions: list[str] = []

    if start_date:
        conditions.append(f"{column} >= {STRING_TOKEN}")
        params.append(start_date)

    if end_date:
        conditions.append(f"{column} <= {STRING_TOKEN}")
        params.append(end_date)

    return conditions


def date_range_clause(
    column: str,
    start_date: Optional[str],
    end_date: Optional[str],
    params: MutableSequence[Any],
    prefix: str = " AND "
) -> str:
    """Date range conditions joined with AND, behind prefix, or '' when no bound is set"""
    conditions = date_range_conditions(column, start_date, end_date, params)
    return prefix + " AND ".join(conditions) if conditions else ""
