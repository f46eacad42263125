"""Literal escaping for inline fragments.

The Escaper turns a typed placeholder token and a value into a SQL literal.
Inline builders receive one explicitly instead of reaching for a global
connection handle, so the same escaping rules can be swapped per dialect.
"""

import re
from typing import Any

STRING_TOKEN = "%s"
INT_TOKEN = "%d"
FLOAT_TOKEN = "%f"

TOKEN_RE = re.compile(r"%([%sdf])")

_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    '"': '\\"',
    "\x00": "\\0",
    "\n": "\\n",
    "\r": "\\r",
    "\x1a": "\\Z",
}


def _to_int(value: Any) -> int:
    """Lenient integer coercion: bools, numbers and numeric strings; anything else is 0"""
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return 0


def _to_float(value: Any) -> float:
    """Lenient float coercion, anything non-numeric is 0.0"""
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def coerce_value(value: Any, token: str) -> Any:
    """Convert a value to the Python type its placeholder token declares"""
    if value is None:
        return None
    if token == INT_TOKEN:
        return _to_int(value)
    if token == FLOAT_TOKEN:
        return _to_float(value)
    return value


class Escaper:
    """Render values as MySQL-style SQL literals"""

    def escape(self, text: str) -> str:
        """Escape a string for use between single quotes"""
        return "".join(_ESCAPES.get(ch, ch) for ch in text)

    def literal(self, value: Any, token: str = STRING_TOKEN) -> str:
        """Render a single value for the given placeholder token

        Example:
            >>> DEFAULT_ESCAPER.literal("completed")
            "'completed'"
            >>> DEFAULT_ESCAPER.literal("42", "%d")
            '42'
            >>> DEFAULT_ESCAPER.literal(9.99, "%f")
            '9.990000'
        """
        if value is None:
            return "NULL"
        value = coerce_value(value, token)
        if token == INT_TOKEN:
            return str(value)
        if token == FLOAT_TOKEN:
            return f"{value:f}"
        return f"'{self.escape(str(value))}'"

    def prepare(self, template: str, *args: Any) -> str:
        """Substitute %s/%d/%f tokens left to right with escaped literals

        A literal percent sign is written as %% in the template.

        Raises:
            ValueError: If the number of tokens and arguments differ
        """
        values = iter(args)
        used = 0

        def _replace(match: "re.Match[str]") -> str:
            nonlocal used
            token = match.group(0)
            if token == "%%":
                return "%"
            try:
                value = next(values)
            except StopIteration:
                raise ValueError(
                    f"Not enough arguments for template {template!r}: got {len(args)}"
                ) from None
            used += 1
            return self.literal(value, token)

        rendered = TOKEN_RE.sub(_replace, template)
        if used != len(args):
            raise ValueError(
                f"Too many arguments for template {template!r}: "
                f"expected {used}, got {len(args)}"
            )
        return rendered

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


DEFAULT_ESCAPER = Escaper()
