"""
main.py
-------
Entry point: lists every book in the store with its author.

Responsibilities:
    - Initialize the database connection pool.
    - Fetch all books through the repository and print them.
    - Close the pool on the way out.
"""

from db.connection import init_pool, close_pool
from repositories.book_repo import BookRepository
from utils.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Print one line per book, in id order."""
    init_pool()
    try:
        books = BookRepository().all()
        for book in books:
            print(book)
        logger.info(f"Listed {len(books)} books.")
    finally:
        close_pool()


if __name__ == "__main__":
    main()
