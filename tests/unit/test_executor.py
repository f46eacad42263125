"""Unit tests for statement binding and execution.

Tests use mocked DB-API connections to avoid real database connections.
"""

import pytest
from unittest.mock import Mock

from sqlfrag.builder.clauses import limit_clause, where_clause
from sqlfrag.builder.conditions import like_clause, safe_condition, safe_in_clause
from sqlfrag.builder.statement import select_statement
from sqlfrag.utils.query import SafeQuery
from sqlfrag.primitives import BoundStatement, Executor, QueryResult, prepare


class TestPrepare:
    """Tests for prepare."""

    def test_typed_tokens_rewritten(self):
        bound = prepare("price BETWEEN %d AND %d AND rate > %f AND name = %s", ["10", 100, "0.5", "x"])
        assert bound == BoundStatement(
            "price BETWEEN %s AND %s AND rate > %s AND name = %s",
            (10, 100, 0.5, "x"),
        )

    def test_unbound_safe_fragment_raises(self, params):
        """A placeholder whose value never reached params is caught before execution."""
        fragment = safe_condition("status", "paid", params)
        params.clear()

        with pytest.raises(ValueError, match=r"more placeholders than params \(0\)"):
            prepare("SELECT * FROM t WHERE " + fragment, params)

        with pytest.raises(ValueError, match="more placeholders than params"):
            prepare("SELECT * FROM t WHERE " + fragment)

    def test_template_without_tokens_and_no_params(self):
        assert prepare("SELECT 1", []) == BoundStatement("SELECT 1", ())
        assert prepare("SELECT '100%%'") == BoundStatement("SELECT '100%%'", ())

    def test_escaped_percent_kept_for_driver(self):
        bound = prepare("SELECT '100%%' WHERE a = %s", ["x"])
        assert bound.sql == "SELECT '100%%' WHERE a = %s"

    def test_more_params_than_placeholders(self):
        with pytest.raises(ValueError, match="1 placeholders but 2 params"):
            prepare("a = %s", ["x", "y"])

    def test_more_placeholders_than_params(self):
        with pytest.raises(ValueError, match="more placeholders than params"):
            prepare("a = %s AND b = %d", ["x"])

    def test_safe_builders_always_balance(self, params):
        where = where_clause([
            safe_condition("status", "paid", params),
            safe_in_clause("id", [1, 2], params, data_type="int"),
            safe_condition("deleted_at", None, params),
        ])
        bound = prepare(select_statement("orders", [], where, limit=limit_clause(5)), params)
        assert bound.sql == "SELECT * FROM orders WHERE status = %s AND id IN (%s, %s) AND deleted_at IS NULL LIMIT 5"
        assert bound.params == ("paid", 1, 2)


class TestExecutor:
    """Tests for Executor."""

    def test_run_binds_params(self, mock_connection):
        cursor = mock_connection.cursor.return_value
        executor = Executor(mock_connection)

        result = executor.run("SELECT * FROM t WHERE a = %d", ["5"])

        cursor.execute.assert_called_once_with("SELECT * FROM t WHERE a = %s", (5,))
        assert isinstance(result, QueryResult)

    def test_run_without_params(self, mock_connection):
        cursor = mock_connection.cursor.return_value
        sql = "SELECT * FROM posts WHERE " + like_clause("title", "foo")

        Executor(mock_connection).run(sql)

        cursor.execute.assert_called_once_with("SELECT * FROM posts WHERE title LIKE '%foo%'")

    def test_run_bound_statement(self, mock_connection):
        cursor = mock_connection.cursor.return_value
        executor = Executor(mock_connection)

        bound = executor.prepare("a = %s", ["x"])
        executor.run(bound)

        cursor.execute.assert_called_once_with("a = %s", ("x",))

    def test_fetch_all(self, mock_connection):
        cursor = mock_connection.cursor.return_value
        cursor.fetchall.return_value = [(1, "a"), (2, "b")]

        rows = Executor(mock_connection).fetch_all("SELECT id, name FROM t")

        assert rows == [(1, "a"), (2, "b")]

    def test_query_returns_dataframe(self, mock_connection):
        cursor = mock_connection.cursor.return_value
        cursor.description = [("ID",), ("NAME",)]
        cursor.fetchall.return_value = [(1, "a"), (2, "b")]

        df = Executor(mock_connection).query("SELECT id, name FROM t WHERE id IN (%d, %d)", [1, 2])

        assert list(df.columns) == ["id", "name"]
        assert len(df) == 2
        assert df["name"].tolist() == ["a", "b"]

    def test_query_empty_result(self, mock_connection):
        df = Executor(mock_connection).query("DELETE FROM t")
        assert df.empty

    def test_driver_errors_propagate(self, mock_connection):
        cursor = mock_connection.cursor.return_value
        cursor.execute.side_effect = RuntimeError("syntax error")

        with pytest.raises(RuntimeError, match="syntax error"):
            Executor(mock_connection).run("SELEC 1")

    def test_close_only_closes_cursor_for_external_connection(self, mock_connection):
        cursor = mock_connection.cursor.return_value
        with Executor(mock_connection):
            pass

        cursor.close.assert_called_once()
        mock_connection.close.assert_not_called()

    def test_run_with_empty_params_checks_placeholders(self, mock_connection):
        cursor = mock_connection.cursor.return_value

        with pytest.raises(ValueError, match="more placeholders than params"):
            Executor(mock_connection).run("SELECT * FROM t WHERE a = %s", [])

        cursor.execute.assert_not_called()

    def test_safe_query_runs_in_mysql_syntax(self, mock_connection):
        cursor = mock_connection.cursor.return_value
        q = SafeQuery("t")
        q.where.condition("status", "paid")
        q.order_by({"created": "desc"}).limit(10, 20)

        Executor(mock_connection).run(*q.as_tuple())

        cursor.execute.assert_called_once_with(
            "SELECT * FROM t WHERE status = %s ORDER BY `created` DESC LIMIT 20, 10",
            ("paid",),
        )

    def test_safe_query_without_bindings(self, mock_connection):
        cursor = mock_connection.cursor.return_value

        Executor(mock_connection).run(*SafeQuery("t").limit(5).as_tuple())

        cursor.execute.assert_called_once_with("SELECT * FROM t LIMIT 5", ())

    def test_profile_name_rejected(self):
        with pytest.raises(TypeError, match="open DB-API connection"):
            Executor("dev")


class TestQueryResult:
    """Tests for QueryResult."""

    def test_metadata(self):
        cursor = Mock(rowcount=3, sfqid="abc-123", description=None)
        result = QueryResult(_cursor=cursor)

        assert result.rowcount == 3
        assert result.query_id == "abc-123"
        assert repr(result) == "QueryResult(query_id='abc-123', rowcount=3)"

    def test_missing_rowcount(self):
        cursor = Mock(spec=["rowcount", "description", "fetchone", "fetchall"])
        cursor.rowcount = None

        result = QueryResult(_cursor=cursor)

        assert result.rowcount == -1
        assert result.query_id is None

    def test_fetch_one(self):
        cursor = Mock()
        cursor.fetchone.return_value = (1,)
        assert QueryResult(_cursor=cursor).fetch_one() == (1,)

    def test_to_df_keeps_case(self):
        cursor = Mock(description=[("ID",)])
        cursor.fetchall.return_value = [(1,)]
        df = QueryResult(_cursor=cursor).to_df(lowercase_columns=False)
        assert list(df.columns) == ["ID"]

