"""Execute composed statements with safe parameter binding"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

import pandas as pd

from sqlfrag.escaping import TOKEN_RE, coerce_value

from .result import QueryResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundStatement:
    """Driver-ready SQL with its parameters

    The SQL uses the DB-API format paramstyle (%s only), which MySQL-family
    drivers such as PyMySQL and mysqlclient accept.
    """
    sql: str
    params: tuple[Any, ...] = ()


def prepare(template: str, params: Optional[Sequence[Any]] = None) -> BoundStatement:
    """Bind a template built with typed tokens to its parameter list

    %d and %f tokens become %s and their values are coerced to int / float.
    Every %s, %d and %f counts as a placeholder, even when params is empty.
    Statements built entirely from inline fragments go to Executor.run
    without params instead.

    Raises:
        ValueError: If the number of tokens and params differ

    Example:
        >>> prepare("price BETWEEN %d AND %d", [10, "100"])
        BoundStatement(sql='price BETWEEN %s AND %s', params=(10, 100))
    """
    values = list(params or ())
    bound: list[Any] = []

    def _rewrite(match: Any) -> str:
        token = match.group(0)
        if token == "%%":
            return token
        index = len(bound)
        if index >= len(values):
            raise ValueError(
                f"Template has more placeholders than params ({len(values)}): {template!r}"
            )
        bound.append(coerce_value(values[index], token))
        return "%s"

    sql = TOKEN_RE.sub(_rewrite, template)
    if len(bound) != len(values):
        raise ValueError(
            f"Template has {len(bound)} placeholders but {len(values)} params: {template!r}"
        )
    return BoundStatement(sql, tuple(bound))


class Executor:
    """Run composed statements over a DB-API connection"""

    def __init__(self, connection: Any):
        """Initialize with an open DB-API connection using the format paramstyle

        Statements use MySQL syntax (backtick identifiers, LIMIT offset, count),
        so the connection should come from a MySQL-family driver.

        Raises:
            TypeError: If given a string instead of a connection
        """
        if isinstance(connection, str):
            raise TypeError(
                f"Executor needs an open DB-API connection, got {connection!r}. "
                "Open one with your MySQL driver, e.g. pymysql.connect(...)"
            )
        self.connection = connection
        self.cursor = connection.cursor()

    def prepare(self, template: str, params: Optional[Sequence[Any]] = None) -> BoundStatement:
        """Bind a template to its params, see prepare()"""
        return prepare(template, params)

    def run(
        self,
        statement: Union[str, BoundStatement],
        params: Optional[Sequence[Any]] = None
    ) -> QueryResult:
        """Execute a statement and return a QueryResult

        A string with params=None is sent as is, which is how statements built
        from inline fragments run. Any params, even an empty list, make the
        string a template that must bind through prepare().

        Args:
            statement: BoundStatement, or a template to prepare with params
            params: Params for a template, ignored for BoundStatement
        """
        if isinstance(statement, str) and params is None:
            logger.debug("Executing %r without params", statement)
            self.cursor.execute(statement)
            return QueryResult(_cursor=self.cursor)

        if not isinstance(statement, BoundStatement):
            statement = prepare(statement, params)

        logger.debug("Executing %r with %d params", statement.sql, len(statement.params))
        self.cursor.execute(statement.sql, statement.params)
        return QueryResult(_cursor=self.cursor)

    def fetch_all(
        self,
        statement: Union[str, BoundStatement],
        params: Optional[Sequence[Any]] = None
    ) -> list[tuple[Any, ...]]:
        """Execute a statement and return all rows"""
        return self.run(statement, params).fetch_all()

    def query(
        self,
        statement: Union[str, BoundStatement],
        params: Optional[Sequence[Any]] = None
    ) -> pd.DataFrame:
        """Execute a statement and return results as a DataFrame"""
        return self.run(statement, params).to_df()

    def close(self) -> None:
        """Close the cursor, the caller keeps ownership of the connection"""
        self.cursor.close()

    def __enter__(self) -> "Executor":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
