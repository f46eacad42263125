"""
sqlfrag - safe SQL fragment builder

Code is organized in layers
- builder/ holds pure functions that compose condition fragments and clauses,
  either inline (values escaped into the text) or safe (placeholders plus a params list)
- utils/ wraps the safe builders in a SafeQuery session object
- config/ loads TOML profiles and builder settings
- primitives/ binds composed statements and runs them on a caller-supplied DB-API connection
"""

# Layer 1: Escaping and fragment builders
from sqlfrag.escaping import Escaper, DEFAULT_ESCAPER
from sqlfrag.builder import (
    # Patterns
    escape_like_wildcards,
    unescape_like_wildcards,
    like_pattern,
    # Placeholders
    placeholder,
    placeholders,
    placeholders_with_params,
    # Conditions
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
    # Clauses
    sanitize_operator,
    sanitize_order,
    sanitize_joiner,
    where_clause,
    having_clause,
    order_by_clause,
    group_by_clause,
    limit_clause,
    # Statements
    select_statement,
    build_select,
    build_filtered_select,
    # Filters
    build_conditions,
    safe_build_conditions,
)

# Layer 2: Query session
from sqlfrag.utils.query import SafeQuery

# Layer 3: Configuration & execution
from sqlfrag.config import BuilderSettings, load_profile, list_profiles, load_settings
from sqlfrag.primitives import BoundStatement, Executor, QueryResult, prepare

__version__ = "0.1.0"
__all__ = [
    # Layer 1: Escaping
    "Escaper",
    "DEFAULT_ESCAPER",
    # Layer 1: Builders
    "escape_like_wildcards",
    "unescape_like_wildcards",
    "like_pattern",
    "placeholder",
    "placeholders",
    "placeholders_with_params",
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
    "sanitize_operator",
    "sanitize_order",
    "sanitize_joiner",
    "where_clause",
    "having_clause",
    "order_by_clause",
    "group_by_clause",
    "limit_clause",
    "select_statement",
    "build_select",
    "build_filtered_select",
    "build_conditions",
    "safe_build_conditions",
    # Layer 2: Session
    "SafeQuery",
    # Layer 3: Configuration & execution
    "BuilderSettings",
    "load_profile",
    "list_profiles",
    "load_settings",
    "BoundStatement",
    "Executor",
    "QueryResult",
    "prepare",
]
