"""Pytest configuration and shared fixtures."""

from unittest.mock import Mock

import pytest


@pytest.fixture
def params() -> list:
    """Fresh parameter accumulator for one query-build session."""
    return []


@pytest.fixture
def mock_connection():
    """DB-API connection mock whose cursor() always returns the same cursor."""
    conn = Mock()
    cursor = Mock()
    cursor.rowcount = 0
    cursor.description = None
    cursor.fetchall.return_value = []
    conn.cursor.return_value = cursor
    return conn


@pytest.fixture
def config_file(tmp_path):
    """Temporary connections.toml with connection and builder settings."""
    config_content = """
[default]
account = "test-account.region"
user = "test-user@example.com"

[dev]
account = "dev-account.region"
user = "dev-user@example.com"
warehouse = "DEV_WH"

[dev.builder]
quote = '"'

[dev.builder.column_mapping]
search = "title"
status = "state"

[broken]
account = "broken-account"

[broken.builder]
quote = "["
"""
    config_path = tmp_path / "connections.toml"
    config_path.write_text(config_content)
    return config_path
