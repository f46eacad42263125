"""Utilities for building SQL queries with safe parameter binding"""

from typing import Any, Iterable, Mapping, Optional

from sqlfrag.builder.clauses import (
    OrderBy,
    group_by_clause,
    having_clause,
    limit_clause,
    order_by_clause,
    where_clause,
)
from sqlfrag.builder.conditions import (
    date_range_conditions,
    not_empty,
    safe_between_clause,
    safe_condition,
    safe_in_clause,
    safe_like_clause,
)
from sqlfrag.builder.filters import safe_build_conditions
from sqlfrag.builder.statement import select_statement
from sqlfrag.config import BuilderSettings


class ConditionBuffer:
    """Conditions and their bindings for one clause (WHERE or HAVING)"""

    def __init__(self, settings: BuilderSettings):
        self._settings = settings
        self.conditions: list[str] = []
        self.params: list[Any] = []

    def condition(
        self, column: str, value: Any, operator: str = "=", data_type: str = "string"
    ) -> 'ConditionBuffer':
        """Add a comparison"""
        self.conditions.append(safe_condition(column, value, self.params, operator, data_type))
        return self

    def like(self, column: str, value: str, pattern_type: str = "substring") -> 'ConditionBuffer':
        """Add a LIKE match"""
        self.conditions.append(safe_like_clause(column, value, self.params, pattern_type))
        return self

    def in_(
        self, column: str, values: Iterable[Any], negate: bool = False, data_type: str = "string"
    ) -> 'ConditionBuffer':
        """Add an IN / NOT IN membership test"""
        self.conditions.append(safe_in_clause(column, values, self.params, negate, data_type))
        return self

    def between(
        self, column: str, min_value: Any, max_value: Any, data_type: str = "string"
    ) -> 'ConditionBuffer':
        """Add a BETWEEN range"""
        self.conditions.append(
            safe_between_clause(column, min_value, max_value, self.params, data_type)
        )
        return self

    def date_range(
        self, column: str, start_date: Optional[str], end_date: Optional[str]
    ) -> 'ConditionBuffer':
        """Add >= / <= bounds for whichever dates are set"""
        self.conditions.extend(date_range_conditions(column, start_date, end_date, self.params))
        return self

    def not_empty(self, column: str) -> 'ConditionBuffer':
        """Require a non-NULL, non-empty value"""
        self.conditions.append(not_empty(column))
        return self

    def filters(self, filters: Mapping[str, Any]) -> 'ConditionBuffer':
        """Add conditions from a filter mapping using the configured column mapping"""
        self.conditions.extend(
            safe_build_conditions(filters, self.params, self._settings.column_mapping)
        )
        return self

    def when(self, condition: Any, template: str, *values: Any) -> 'ConditionBuffer':
        """Add a raw template and bind values only when condition is truthy"""
        if condition:
            self.conditions.append(template)
            if values:
                self.params.extend(values)
        return self

    def __len__(self) -> int:
        return len(self.conditions)


class SafeQuery:
    """Build one SELECT with safe parameter binding

    WHERE and HAVING conditions keep separate bindings so that bindings()
    follows the order placeholders appear in the final SQL, whatever order
    the conditions were added in.

    Example:
        >>> q = SafeQuery("orders")
        >>> _ = q.where.condition("status", "completed").between("total", 10, 100, "int")
        >>> _ = q.order_by({"order_date": "desc"}).limit(10)
        >>> q.as_tuple()
        ('SELECT * FROM orders WHERE status = %s AND total BETWEEN %d AND %d ORDER BY `order_date` DESC LIMIT 10', ('completed', 10, 100))
    """

    def __init__(
        self,
        table: str,
        columns: Optional[Iterable[str]] = None,
        settings: Optional[BuilderSettings] = None
    ):
        """Initialize with a trusted table name and optional column list"""
        self._table = table
        self._columns = list(columns or [])
        self._settings = settings or BuilderSettings()
        self.where = ConditionBuffer(self._settings)
        self.having = ConditionBuffer(self._settings)
        self._joiner = "AND"
        self._having_joiner = "AND"
        self._order_by: list[tuple[str, str]] = []
        self._group_by: list[str] = []
        self._limit = 0
        self._offset = 0

    def join_with(self, joiner: str, having: Optional[str] = None) -> 'SafeQuery':
        """Set the joiner for WHERE conditions, and optionally for HAVING"""
        self._joiner = joiner
        if having is not None:
            self._having_joiner = having
        return self

    def order_by(self, order_by: OrderBy) -> 'SafeQuery':
        """Append column => direction pairs"""
        pairs = order_by.items() if isinstance(order_by, Mapping) else order_by
        self._order_by.extend(pairs)
        return self

    def group_by(self, *columns: str) -> 'SafeQuery':
        """Append GROUP BY columns"""
        self._group_by.extend(columns)
        return self

    def limit(self, limit: int, offset: int = 0) -> 'SafeQuery':
        """Set LIMIT and OFFSET, a limit of 0 removes it"""
        self._limit = limit
        self._offset = offset
        return self

    def sql(self) -> str:
        """Get the SQL string with placeholders"""
        quote = self._settings.quote
        return select_statement(
            self._table,
            self._columns,
            where=where_clause(self.where.conditions, self._joiner),
            order_by=order_by_clause(self._order_by, quote),
            limit=limit_clause(self._limit, self._offset),
            group_by=group_by_clause(self._group_by, quote),
            having=having_clause(self.having.conditions, self._having_joiner),
            quote=quote,
        )

    def bindings(self) -> tuple[Any, ...]:
        """Get the bindings tuple, WHERE values first, then HAVING values"""
        return tuple(self.where.params) + tuple(self.having.params)

    def as_tuple(self) -> tuple[str, tuple[Any, ...]]:
        """Get both SQL and bindings as a tuple"""
        return self.sql(), self.bindings()

    def __repr__(self) -> str:
        return (
            f"SafeQuery(table={self._table!r}, where={len(self.where)}, "
            f"having={len(self.having)})"
        )
