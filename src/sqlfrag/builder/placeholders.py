"""Typed placeholder tokens for prepared statements"""

from typing import Any, Literal, MutableSequence, Sequence

from sqlfrag.escaping import FLOAT_TOKEN, INT_TOKEN, STRING_TOKEN

DataType = Literal["string", "int", "float"]

PLACEHOLDERS: dict[str, str] = {
    "string": STRING_TOKEN,
    "int": INT_TOKEN,
    "float": FLOAT_TOKEN,
}


def placeholder(data_type: str = "string") -> str:
    """Token for a declared data type, unknown types fall back to the text token"""
    return PLACEHOLDERS.get(data_type, STRING_TOKEN)


def placeholders(values: Sequence[Any], token: str = STRING_TOKEN) -> str:
    """Comma-separated token list, one per value"""
    return ", ".join([token] * len(values))


def placeholders_with_params(
    values: Sequence[Any],
    params: MutableSequence[Any],
    token: str = STRING_TOKEN
) -> str:
    """Generate tokens for values and append the values to params"""
    if not values:
        return ""

    params.extend(values)
    return placeholders(values, token)
