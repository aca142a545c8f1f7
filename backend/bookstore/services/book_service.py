"""Book service: validation and update rules on top of the store."""
from typing import Optional

from bookstore.core.exceptions import ValidationError
from bookstore.core.logging import get_logger
from bookstore.models.book import Book
from bookstore.schemas.book import BookInput, BookPatch
from bookstore.storage import BookStore

logger = get_logger("services.books")

REQUIRED_MESSAGE = "Both 'title' and 'author' are required"
NON_EMPTY_MESSAGE = "Both 'title' and 'author' must be non-empty"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class BookService:
    """Service for book operations."""

    def __init__(self, store: BookStore):
        self.store = store

    def list_books(self) -> list[Book]:
        """All books, ordered by id."""
        return self.store.list()

    def get_book(self, book_id: int) -> Book:
        return self.store.get(book_id)

    def create_book(self, data: BookInput) -> Book:
        """Validate ``data`` and store it under the next id."""
        self._require_title_and_author(data)
        book = self.store.create(
            title=data.title,
            author=data.author,
            year=data.year,
            isbn=data.isbn,
        )
        logger.info(f"Created book {book.id}: {book.title!r}")
        return book

    def replace_book(self, book_id: int, data: BookInput) -> Book:
        """Overwrite every field of an existing book except its id."""
        self._require_title_and_author(data)
        book = self.store.update(
            book_id,
            lambda current: Book(
                id=current.id,
                title=data.title,
                author=data.author,
                year=data.year,
                isbn=data.isbn,
            ),
        )
        logger.info(f"Replaced book {book_id}")
        return book

    def patch_book(self, book_id: int, patch: BookPatch) -> Book:
        """
        Apply the supplied fields of ``patch`` to an existing book.

        The merged result must still have a non-empty title and author,
        otherwise nothing is written.
        """

        def merge(current: Book) -> Book:
            merged = current.with_changes(**patch.changes())
            if _is_blank(merged.title) or _is_blank(merged.author):
                logger.debug(f"Rejected patch for book {book_id}: {patch}")
                raise ValidationError(NON_EMPTY_MESSAGE)
            return merged

        book = self.store.update(book_id, merge)
        if patch.is_empty():
            logger.debug(f"Empty patch for book {book_id}")
        else:
            logger.info(f"Patched book {book_id}: {sorted(patch.changes())}")
        return book

    def delete_book(self, book_id: int) -> None:
        self.store.delete(book_id)
        logger.info(f"Deleted book {book_id}")

    @staticmethod
    def _require_title_and_author(data: BookInput) -> None:
        if _is_blank(data.title) or _is_blank(data.author):
            logger.debug(f"Rejected book input: {data!r}")
            raise ValidationError(REQUIRED_MESSAGE)
