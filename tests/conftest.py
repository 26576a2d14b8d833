"""Shared fixtures for the GradeBook tests."""

from unittest.mock import MagicMock

import pytest

import db.connection as connection


@pytest.fixture
def fake_pool(monkeypatch):
    """Install a mocked pool handing out a single mocked connection.

    Returns the (connection, cursor) pair so tests can script query results.
    """
    cursor = MagicMock()
    conn = MagicMock()
    conn.cursor.return_value.__enter__.return_value = cursor
    pool = MagicMock()
    pool.getconn.return_value = conn
    monkeypatch.setattr(connection, "_pool", pool)
    return conn, cursor
