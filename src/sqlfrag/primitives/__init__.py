"""Primitive operations that hand composed statements to a DB-API driver"""

from sqlfrag.primitives.result import QueryResult

from sqlfrag.primitives.execute import (
    BoundStatement,
    Executor,
    prepare,
)

__all__ = [
    "QueryResult",
    "BoundStatement",
    "Executor",
    "prepare",
]
