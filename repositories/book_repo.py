"""
repositories/book_repo.py
--------------------------
Data access layer for books.
All SQL queries related to the `books` table live here.
"""

from db.connection import connection, rollback_quietly
from models.book import Book
from utils.logger import get_logger

logger = get_logger(__name__)


class BookRepository:
    """Read-only repository over the books table, joined to authors."""

    def all(self) -> list[Book]:
        """
        Fetch every book with its author's name.

        Returns:
            List of Book objects in ascending id order; empty if there are none.

        Raises:
            psycopg2.Error: If the connection or the query fails.
        """
        sql = """
            SELECT books.id, books.title, authors.name
            FROM books
            JOIN authors ON authors.id = books.author_id
            ORDER BY books.id;
        """
        with connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute(sql)
                    books = [self._row_to_book(row) for row in cur.fetchall()]
                # end the read transaction so the pooled connection comes back idle
                conn.rollback()
            except Exception as e:
                rollback_quietly(conn)
                logger.error(f"Failed to fetch books: {e}")
                raise
        logger.debug(f"Fetched {len(books)} books")
        return books

    @staticmethod
    def _row_to_book(row: tuple) -> Book:
        """Convert a (id, title, author_name) row to a Book."""
        return Book(id=str(row[0]), title=row[1], author_name=row[2])
