"""Unit tests for the filter-to-condition mapper."""

import pytest

from sqlfrag.builder import filters as filters_module
from sqlfrag.builder.conditions import not_empty
from sqlfrag.builder.filters import (
    DEFAULT_COLUMN_MAPPING,
    build_conditions,
    resolve_column,
    safe_build_conditions,
)


class TestResolveColumn:
    """Tests for resolve_column."""

    def test_caller_mapping_wins(self):
        assert resolve_column("status", {"status": "state"}) == "state"

    def test_default_mapping(self):
        assert resolve_column("status") == DEFAULT_COLUMN_MAPPING["status"] == "post_status"

    def test_raw_key_fallback(self):
        assert resolve_column("color", {"size": "sz"}) == "color"


class TestBuildConditions:
    """Tests for build_conditions (inline)."""

    def test_mixed_filters(self):
        conditions = build_conditions({"status": "publish", "search": "news", "author": ""})
        assert conditions == ["post_status = 'publish'", "post_title LIKE '%news%'"]

    def test_date_bounds(self):
        conditions = build_conditions({"date_from": "2024-01-01", "date_to": "2024-02-01"})
        assert conditions == ["post_date >= '2024-01-01'", "post_date <= '2024-02-01'"]

    def test_list_becomes_in(self):
        assert build_conditions({"type": ["post", "page"]}) == ["post_type IN ('post', 'page')"]

    def test_string_zero_kept(self):
        assert build_conditions({"parent": "0"}) == ["post_parent = '0'"]

    @pytest.mark.parametrize("value", [None, "", 0, [], False])
    def test_falsy_values_skipped(self, value):
        assert build_conditions({"parent": value}) == []

    def test_custom_key_uses_raw_column(self):
        assert build_conditions({"color": "red"}) == ["color = 'red'"]

    def test_custom_mapping(self):
        assert build_conditions({"search": "x"}, {"search": "title"}) == ["title LIKE '%x%'"]

    def test_search_escapes_wildcards(self):
        assert build_conditions({"search": "100%"}) == ["post_title LIKE '%100\\\\%%'"]


class TestSafeBuildConditions:
    """Tests for safe_build_conditions (deferred)."""

    def test_params_follow_condition_order(self, params):
        conditions = safe_build_conditions(
            {"search": "news", "type": ["post", "page"], "date_from": "2024-01-01", "author": 3},
            params,
        )
        assert conditions == [
            "post_title LIKE %s",
            "post_type IN (%s, %s)",
            "post_date >= %s",
            "post_author = %s",
        ]
        assert params == ["%news%", "post", "page", "2024-01-01", 3]

    def test_skipped_values_bind_nothing(self, params):
        assert safe_build_conditions({"status": "", "parent": None}, params) == []
        assert params == []


class TestDispatchTables:
    """The handler tables can be extended by callers."""

    def test_registered_handler_used(self, monkeypatch, params):
        monkeypatch.setitem(
            filters_module.SAFE_HANDLERS,
            "has_email",
            lambda column, value, p: not_empty("email"),
        )
        monkeypatch.setitem(
            filters_module.INLINE_HANDLERS,
            "has_email",
            lambda column, value, esc: not_empty("email"),
        )

        assert safe_build_conditions({"has_email": True}, params) == ["(email != '' AND email IS NOT NULL)"]
        assert build_conditions({"has_email": True}) == ["(email != '' AND email IS NOT NULL)"]
        assert params == []
