"""Tests for schema creation and seeding."""

import psycopg2
import pytest

from db.init_db import SCHEMA_SQL, SEED_SQL, create_tables, seed_books


def test_create_tables_executes_schema_and_commits(fake_pool, conn, cursor):
    create_tables()

    cursor.execute.assert_called_once_with(SCHEMA_SQL)
    conn.commit.assert_called_once()
    fake_pool.putconn.assert_called_once_with(conn)


def test_seed_books_executes_seed_and_commits(fake_pool, conn, cursor):
    seed_books()

    cursor.execute.assert_called_once_with(SEED_SQL)
    conn.commit.assert_called_once()


def test_seed_resets_identities():
    assert "TRUNCATE TABLE books, authors RESTART IDENTITY" in SEED_SQL
    assert "('Nineteen Eighty-Four', 1)" in SEED_SQL


def test_seed_failure_rolls_back_and_reraises(fake_pool, conn, cursor):
    cursor.execute.side_effect = psycopg2.IntegrityError("duplicate key")

    with pytest.raises(psycopg2.IntegrityError):
        seed_books()

    conn.rollback.assert_called_once()
    conn.commit.assert_not_called()
    fake_pool.putconn.assert_called_once_with(conn)


def test_seed_error_survives_failed_rollback(fake_pool, conn, cursor):
    cursor.execute.side_effect = psycopg2.OperationalError("terminating connection")
    conn.rollback.side_effect = psycopg2.InterfaceError("connection already closed")

    with pytest.raises(psycopg2.OperationalError):
        seed_books()

    fake_pool.putconn.assert_called_once_with(conn)
