"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist,
and resets the book tables to the canonical seed rows.
Run this module directly to initialize a fresh database:
    python -m db.init_db           # schema only
    python -m db.init_db --seed    # schema + seed rows
"""

import sys

from db.connection import connection, rollback_quietly
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Authors table: one row per author
CREATE TABLE IF NOT EXISTS authors (
    id              SERIAL PRIMARY KEY,
    name            TEXT NOT NULL
);

-- Books table: each book references its author
CREATE TABLE IF NOT EXISTS books (
    id              SERIAL PRIMARY KEY,
    title           TEXT NOT NULL,
    author_id       INT REFERENCES authors(id) ON DELETE CASCADE
);

CREATE INDEX IF NOT EXISTS idx_books_author ON books(author_id);
"""

SEED_SQL = """
TRUNCATE TABLE books, authors RESTART IDENTITY;

INSERT INTO authors (name) VALUES
    ('George Orwell'),
    ('Virginia Woolf'),
    ('Jane Austen'),
    ('Bram Stoker'),
    ('Edith Wharton');

INSERT INTO books (title, author_id) VALUES
    ('Nineteen Eighty-Four', 1),
    ('Mrs Dalloway', 2),
    ('Emma', 3),
    ('Dracula', 4),
    ('The Age of Innocence', 5);
"""


def _execute_script(sql: str, description: str) -> None:
    with connection() as conn:
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
            conn.commit()
        except Exception as e:
            rollback_quietly(conn)
            logger.error(f"Failed to run database {description}: {e}")
            raise
    logger.info(f"Database {description} completed successfully.")


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    _execute_script(SCHEMA_SQL, "schema initialization")


def seed_books() -> None:
    """
    Truncate `books` and `authors` and load the five seed rows.
    Identities restart, so the seeded books always get ids 1 to 5.
    """
    _execute_script(SEED_SQL, "seed")


if __name__ == "__main__":
    from db.connection import init_pool, close_pool
    init_pool()
    try:
        create_tables()
        if "--seed" in sys.argv[1:]:
            seed_books()
    finally:
        close_pool()
    print("✅ Database ready.")
