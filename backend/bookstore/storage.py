"""Thread-safe in-memory storage for books."""
from dataclasses import replace
from threading import Lock
from typing import Callable, Dict, List, Optional

from bookstore.core.exceptions import NotFoundError
from bookstore.models.book import Book


class IDGenerator:
    """Hands out book ids in increasing order, starting at ``start``."""

    def __init__(self, start: int = 1):
        self._lock = Lock()
        self._next = start

    def next_id(self) -> int:
        with self._lock:
            book_id = self._next
            self._next += 1
            return book_id


class BookStore:
    """
    In-memory book store keyed by integer id.

    Every public method runs under a single lock, so each call sees and
    leaves the collection in a consistent state. Ids come from the store's
    ``IDGenerator`` and are never handed out twice, even after a delete.
    """

    def __init__(self, id_gen: Optional[IDGenerator] = None):
        self._books: Dict[int, Book] = {}
        self._id_gen = id_gen or IDGenerator()
        self._lock = Lock()

    def list(self) -> List[Book]:
        with self._lock:
            return sorted(self._books.values(), key=lambda b: b.id)

    def get(self, book_id: int) -> Book:
        with self._lock:
            try:
                return self._books[book_id]
            except KeyError:
                raise NotFoundError("Book", book_id) from None

    def create(
        self,
        title: str,
        author: str,
        year: Optional[int] = None,
        isbn: Optional[str] = None,
    ) -> Book:
        """Allocate the next id and insert a new book under it."""
        with self._lock:
            book = Book(
                id=self._id_gen.next_id(),
                title=title,
                author=author,
                year=year,
                isbn=isbn,
            )
            self._books[book.id] = book
            return book

    def update(self, book_id: int, change: Callable[[Book], Book]) -> Book:
        """
        Replace the book stored under ``book_id`` with ``change(current)``.

        Lookup and write happen in one locked region. Exceptions raised by
        ``change`` leave the stored book untouched.
        """
        with self._lock:
            current = self._books.get(book_id)
            if current is None:
                raise NotFoundError("Book", book_id)
            updated = change(current)
            if updated.id != book_id:
                updated = replace(updated, id=book_id)
            self._books[book_id] = updated
            return updated

    def delete(self, book_id: int) -> None:
        with self._lock:
            if book_id not in self._books:
                raise NotFoundError("Book", book_id)
            del self._books[book_id]

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)
