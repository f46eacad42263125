"""LIKE pattern primitives"""

import re
from typing import Literal

PatternType = Literal["prefix", "suffix", "substring", "exact"]

LIKE_ESCAPE = "\\"

_UNESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def escape_like_wildcards(raw: str) -> str:
    """Escape LIKE wildcards so caller text matches literally

    The escape character is handled first so the backslashes added for
    % and _ are not escaped a second time.

    Example:
        >>> escape_like_wildcards("50%_off")
        '50\\\\%\\\\_off'
    """
    escaped = raw.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
    escaped = escaped.replace("%", LIKE_ESCAPE + "%")
    return escaped.replace("_", LIKE_ESCAPE + "_")


def unescape_like_wildcards(escaped: str) -> str:
    """Inverse of escape_like_wildcards"""
    return _UNESCAPE_RE.sub(r"\1", escaped)


def like_pattern(text: str, pattern_type: str = "exact") -> str:
    """Build a LIKE pattern with wildcards placed according to pattern_type

    Args:
        text: Literal text to match
        pattern_type: 'prefix', 'suffix', 'substring' or 'exact' (unknown types act as 'exact')

    Returns:
        Escaped pattern, e.g. 'abc%' for prefix matching
    """
    escaped = escape_like_wildcards(text)

    if pattern_type == "prefix":
        return escaped + "%"
    if pattern_type == "suffix":
        return "%" + escaped
    if pattern_type == "substring":
        return "%" + escaped + "%"
    return escaped
