"""A unified, simplified interface for DB-API query results"""
from typing import Any, Optional
from dataclasses import dataclass
import pandas as pd


@dataclass
class QueryResult:
    """A unified, simplified interface for DB-API query results"""
    _cursor: Any

    @property
    def query_id(self) -> Optional[str]:
        """The driver's query ID when its cursor exposes one as sfqid"""
        return getattr(self._cursor, "sfqid", None)

    @property
    def rowcount(self) -> int:
        """The number of rows affected or returned"""
        return self._cursor.rowcount if self._cursor.rowcount is not None else -1

    @property
    def description(self) -> Optional[list[tuple]]:
        """A description of the result columns"""
        return self._cursor.description

    def fetch_one(self) -> Optional[tuple[Any, ...]]:
        """Fetch the next row of a query result set"""
        return self._cursor.fetchone()

    def fetch_all(self) -> list[tuple[Any, ...]]:
        """Fetch all remaining rows of a query result set"""
        result = self._cursor.fetchall()
        return list(result) if result else []

    def to_df(self, lowercase_columns: bool = True) -> pd.DataFrame:
        """Fetch all results as a single DataFrame with optional column casing"""
        if self._cursor.description:
            columns = [desc[0] for desc in self._cursor.description]
            df = pd.DataFrame(self.fetch_all(), columns=columns)
        else:
            df = pd.DataFrame()

        if lowercase_columns and len(df.columns) > 0:
            df.columns = df.columns.str.lower()

        return df

    def __repr__(self) -> str:
        """String representation"""
        return (
            f"QueryResult(query_id={self.query_id!r}, "
            f"rowcount={self.rowcount})"
        )
