"""Fragment builders and clause composers"""

from sqlfrag.builder.patterns import (
    PatternType,
    escape_like_wildcards,
    unescape_like_wildcards,
    like_pattern,
)

from sqlfrag.builder.placeholders import (
    DataType,
    PLACEHOLDERS,
    placeholder,
    placeholders,
    placeholders_with_params,
)

from sqlfrag.builder.clauses import (
    VALID_OPERATORS,
    sanitize_operator,
    sanitize_order,
    sanitize_joiner,
    where_clause,
    having_clause,
    order_by_clause,
    group_by_clause,
    limit_clause,
)

from sqlfrag.builder.conditions import (
    condition,
    safe_condition,
    in_clause,
    safe_in_clause,
    like_clause,
    safe_like_clause,
    between_clause,
    safe_between_clause,
    not_empty,
    date_range_conditions,
    date_range_clause,
)

from sqlfrag.builder.statement import (
    select_statement,
    build_select,
    build_filtered_select,
)

from sqlfrag.builder.filters import (
    DEFAULT_COLUMN_MAPPING,
    build_conditions,
    safe_build_conditions,
    resolve_column,
)

__all__ = [
    # Patterns
    "PatternType",
    "escape_like_wildcards",
    "unescape_like_wildcards",
    "like_pattern",
    # Placeholders
    "DataType",
    "PLACEHOLDERS",
    "placeholder",
    "placeholders",
    "placeholders_with_params",
    # Clauses
    "VALID_OPERATORS",
    "sanitize_operator",
    "sanitize_order",
    "sanitize_joiner",
    "where_clause",
    "having_clause",
    "order_by_clause",
    "group_by_clause",
    "limit_clause",
    # Conditions
    "condition",
    "safe_condition",
    "in_clause",
    "safe_in_clause",
    "like_clause",
    "safe_like_clause",
    "between_clause",
    "safe_between_clause",
    "not_empty",
    "date_range_conditions",
    "date_range_clause",
    # Statements
    "select_statement",
    "build_select",
    "build_filtered_select",
    # Filters
    "DEFAULT_COLUMN_MAPPING",
    "build_conditions",
    "safe_build_conditions",
    "resolve_column",
]
