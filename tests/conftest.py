"""Pytest configuration and fixtures."""

from unittest.mock import MagicMock

import pytest

import db.connection

SEED_ROWS = [
    (1, "Nineteen Eighty-Four", "George Orwell"),
    (2, "Mrs Dalloway", "Virginia Woolf"),
    (3, "Emma", "Jane Austen"),
    (4, "Dracula", "Bram Stoker"),
    (5, "The Age of Innocence", "Edith Wharton"),
]


@pytest.fixture
def cursor():
    """Cursor double; tests set `fetchall.return_value` or `execute.side_effect`."""
    cur = MagicMock()
    cur.fetchall.return_value = list(SEED_ROWS)
    return cur


@pytest.fixture
def conn(cursor):
    """Connection double whose `cursor()` context yields the cursor fixture."""
    connection = MagicMock()
    connection.cursor.return_value.__enter__.return_value = cursor
    return connection


@pytest.fixture
def fake_pool(monkeypatch, conn):
    """Install a pool double that always hands out the conn fixture."""
    pool = MagicMock()
    pool.getconn.return_value = conn
    monkeypatch.setattr(db.connection, "_pool", pool)
    return pool


@pytest.fixture
def pool_factory(monkeypatch, conn):
    """Start with no pool and replace SimpleConnectionPool with a double."""
    monkeypatch.setattr(db.connection, "_pool", None)
    factory = MagicMock()
    factory.return_value.getconn.return_value = conn
    monkeypatch.setattr(db.connection.pool, "SimpleConnectionPool", factory)
    return factory
