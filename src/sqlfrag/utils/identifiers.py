"""Utilities for validating and quoting SQL identifiers"""

import re
import warnings

IDENTIFIER_QUOTES = ("`", '"')


def is_valid_identifier(name: str) -> bool:
    """Check if a string is a plain unquoted SQL identifier"""
    if not name:
        return False

    # Pattern: starts with letter or underscore, followed by letters, digits, or underscores
    pattern = r'^[A-Za-z_][A-Za-z0-9_]*$'
    return bool(re.match(pattern, name))


def quote_identifier(name: str, quote: str = "`", stacklevel: int = 2) -> str:
    """Wrap a column name in identifier quotes, doubling embedded quote characters

    Names that are not plain identifiers are still quoted, but a UserWarning
    is emitted since the caller is expected to pass trusted column names.
    Composers pass stacklevel=3 so the warning points at their caller.

    Example:
        >>> quote_identifier("order_date")
        '`order_date`'
        >>> quote_identifier("total", quote='"')
        '"total"'
    """
    name = str(name)
    if not is_valid_identifier(name):
        msg = (
            f"Quoting non-standard identifier: {name!r}. "
            "Column names should be letters, digits and underscores."
        )
        warnings.warn(msg, UserWarning, stacklevel=stacklevel)
    escaped = name.replace(quote, quote * 2)
    return f"{quote}{escaped}{quote}"
