"""
models/book.py
--------------
Domain model for a book together with its author's name.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Book:
    """
    A book as read from the store. Immutable and compared by value.

    Attributes:
        id: Database primary key, as a string.
        title: Book title, exactly as stored.
        author_name: Name of the author, taken from the joined authors row.
    """
    id: str
    title: str
    author_name: str

    def __str__(self) -> str:
        return f"{self.id} - {self.title} by {self.author_name}"
