"""
db/connection.py
----------------
Owns the process-wide psycopg2 connection pool for the book store.

The pool is created on first use, so repositories can be called without
any explicit setup. Entry points that want to fail fast can still call
`init_pool()` up front and `close_pool()` on shutdown.
"""

from contextlib import contextmanager
from typing import Iterator

import psycopg2
from psycopg2 import pool
from psycopg2.extensions import connection as PgConnection

from config import DATABASE_URL
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: pool.SimpleConnectionPool | None = None


def init_pool(min_conn: int = 1, max_conn: int = 5) -> None:
    """
    Open the pool against DATABASE_URL. Does nothing if it is already open.

    Raises:
        psycopg2.OperationalError: If the book store database cannot be reached.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = pool.SimpleConnectionPool(min_conn, max_conn, DATABASE_URL)
    except psycopg2.OperationalError as e:
        logger.error(f"Could not open pool for book store database: {e}")
        raise
    logger.info(f"Book store pool opened ({min_conn}-{max_conn} connections).")


def get_connection() -> PgConnection:
    """Borrow a connection, opening the pool first if needed."""
    if _pool is None:
        init_pool()
    return _pool.getconn()


def release_connection(conn: PgConnection) -> None:
    # no-op once close_pool() has run; closeall() already closed the connection
    if _pool is not None:
        _pool.putconn(conn)


def rollback_quietly(conn: PgConnection) -> None:
    """
    Roll back the current transaction on an error path.

    A failed rollback is only logged, so it never replaces the error the
    caller is about to re-raise (e.g. the server dropped the connection and
    rollback() then reports "connection already closed").
    """
    try:
        conn.rollback()
    except psycopg2.Error as e:
        logger.warning(f"Rollback skipped, connection unusable: {e}")


@contextmanager
def connection() -> Iterator[PgConnection]:
    """Yield a pooled connection; it is handed back however the block exits."""
    conn = get_connection()
    try:
        yield conn
    finally:
        release_connection(conn)


def close_pool() -> None:
    global _pool
    if _pool is None:
        return
    _pool.closeall()
    _pool = None
    logger.info("Book store pool closed.")
