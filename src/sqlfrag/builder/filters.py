"""Map dynamic filter dictionaries onto condition fragments.

Filters are caller-supplied key => value pairs, e.g. request arguments.
Each key resolves to a column through the caller's mapping, then
DEFAULT_COLUMN_MAPPING, then the key itself. The kind of condition is
chosen from a dispatch table keyed by filter name; keys without an entry
produce an IN condition for list values and an equality otherwise.

Both tables are plain module-level dicts and can be extended.
"""

import logging
from typing import Any, Callable, Mapping, MutableSequence, Optional

from sqlfrag.escaping import DEFAULT_ESCAPER, Escaper

from .conditions import (
    condition,
    in_clause,
    like_clause,
    safe_condition,
    safe_in_clause,
    safe_like_clause,
)

logger = logging.getLogger(__name__)

# Column names for a posts-style table
DEFAULT_COLUMN_MAPPING: dict[str, str] = {
    "status": "post_status",
    "type": "post_type",
    "author": "post_author",
    "parent": "post_parent",
    "search": "post_title",
    "date_from": "post_date",
    "date_to": "post_date",
    "meta_key": "meta_key",
    "meta_value": "meta_value",
}

InlineHandler = Callable[[str, Any, Escaper], str]
SafeHandler = Callable[[str, Any, MutableSequence[Any]], str]

INLINE_HANDLERS: dict[str, InlineHandler] = {
    "search": lambda column, value, esc: like_clause(column, str(value), "substring", escaper=esc),
    "date_from": lambda column, value, esc: condition(column, value, ">=", "string", escaper=esc),
    "date_to": lambda column, value, esc: condition(column, value, "<=", "string", escaper=esc),
}

SAFE_HANDLERS: dict[str, SafeHandler] = {
    "search": lambda column, value, params: safe_like_clause(column, str(value), params, "substring"),
    "date_from": lambda column, value, params: safe_condition(column, value, params, ">=", "string"),
    "date_to": lambda column, value, params: safe_condition(column, value, params, "<=", "string"),
}


def _is_list(value: Any) -> bool:
    return isinstance(value, (list, tuple, set, frozenset))


def _skip(value: Any) -> bool:
    """Falsy filter values are ignored, except the string '0'"""
    return not value and value != "0"


def resolve_column(key: str, column_mapping: Optional[Mapping[str, str]] = None) -> str:
    """Column for a filter key: caller mapping, then defaults, then the key itself"""
    if column_mapping and key in column_mapping:
        return column_mapping[key]
    return DEFAULT_COLUMN_MAPPING.get(key, key)


def build_conditions(
    filters: Mapping[str, Any],
    column_mapping: Optional[Mapping[str, str]] = None,
    escaper: Escaper = DEFAULT_ESCAPER
) -> list[str]:
    """Build inline condition fragments from a filter mapping

    Example:
        >>> build_conditions({"status": "publish", "search": "news", "author": ""})
        ["post_status = 'publish'", "post_title LIKE '%news%'"]
    """
    conditions: list[str] = []

    for key, value in filters.items():
        if _skip(value):
            logger.debug("Skipping empty filter %r", key)
            continue

        column = resolve_column(key, column_mapping)
        handler = INLINE_HANDLERS.get(key)

        if handler is not None:
            conditions.append(handler(column, value, escaper))
        elif _is_list(value):
            conditions.append(in_clause(column, value, escaper=escaper))
        else:
            conditions.append(condition(column, value, escaper=escaper))

    return conditions


def safe_build_conditions(
    filters: Mapping[str, Any],
    params: MutableSequence[Any],
    column_mapping: Optional[Mapping[str, str]] = None
) -> list[str]:
    """Build placeholder condition fragments from a filter mapping, appending values to params"""
    conditions: list[str] = []

    for key, value in filters.items():
        if _skip(value):
            logger.debug("Skipping empty filter %r", key)
            continue

        column = resolve_column(key, column_mapping)
        handler = SAFE_HANDLERS.get(key)

        if handler is not None:
            conditions.append(handler(column, value, params))
        elif _is_list(value):
            conditions.append(safe_in_clause(column, value, params))
        else:
            conditions.append(safe_condition(column, value, params))

    return conditions
