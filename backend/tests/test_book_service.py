"""BookService tests."""
import pytest

from bookstore.core.exceptions import NotFoundError, ValidationError
from bookstore.models.book import Book
from bookstore.schemas.book import BookInput, BookPatch
from bookstore.services.book_service import BookService
from bookstore.storage import BookStore


@pytest.fixture
def service(store: BookStore) -> BookService:
    return BookService(store)


def test_create_and_get(service: BookService):
    book = service.create_book(BookInput(title="Dune", author="Herbert", year=1965))
    assert book == Book(id=1, title="Dune", author="Herbert", year=1965)
    assert service.get_book(1) == book


@pytest.mark.parametrize(
    "data",
    [
        {"author": "A"},
        {"title": "T"},
        {"title": "", "author": "A"},
        {"title": "T", "author": "   "},
        {"title": "\t\n", "author": " "},
    ],
)
def test_create_requires_title_and_author(service: BookService, store: BookStore, data):
    with pytest.raises(ValidationError) as exc_info:
        service.create_book(BookInput(**data))
    assert exc_info.value.message == "Both 'title' and 'author' are required"
    assert len(store) == 0


def test_create_keeps_submitted_strings(service: BookService):
    book = service.create_book(BookInput(title="  Dune ", author="Herbert"))
    assert book.title == "  Dune "


def test_replace_overwrites_all_fields(service: BookService):
    service.create_book(BookInput(title="Old", author="A", year=1990, isbn="111"))
    book = service.replace_book(1, BookInput(title="New", author="B"))
    assert book == Book(id=1, title="New", author="B")
    assert service.get_book(1) == book


def test_replace_validates_before_lookup(service: BookService):
    with pytest.raises(ValidationError):
        service.replace_book(99, BookInput(title="", author="B"))


def test_replace_missing_book(service: BookService):
    with pytest.raises(NotFoundError):
        service.replace_book(99, BookInput(title="T", author="B"))


def test_patch_changes_only_supplied_fields(service: BookService):
    service.create_book(BookInput(title="Dune", author="Herbert", year=1965, isbn="x"))
    book = service.patch_book(1, BookPatch(author="Frank Herbert"))
    assert book == Book(id=1, title="Dune", author="Frank Herbert", year=1965, isbn="x")


def test_empty_patch_returns_current_book(service: BookService):
    created = service.create_book(BookInput(title="Dune", author="Herbert"))
    assert service.patch_book(1, BookPatch()) == created


def test_patch_rejects_blank_title(service: BookService):
    created = service.create_book(BookInput(title="Dune", author="Herbert"))
    with pytest.raises(ValidationError) as exc_info:
        service.patch_book(1, BookPatch(title="  ", year=2000))
    assert exc_info.value.message == "Both 'title' and 'author' must be non-empty"
    assert service.get_book(1) == created


def test_patch_missing_book(service: BookService):
    with pytest.raises(NotFoundError):
        service.patch_book(5, BookPatch(title="T"))


def test_delete(service: BookService):
    service.create_book(BookInput(title="Dune", author="Herbert"))
    service.delete_book(1)
    with pytest.raises(NotFoundError):
        service.get_book(1)
    with pytest.raises(NotFoundError):
        service.delete_book(1)


def test_list_books(service: BookService):
    for title in ("A", "B", "C"):
        service.create_book(BookInput(title=title, author="X"))
    assert [b.title for b in service.list_books()] == ["A", "B", "C"]


def test_validation_error_carries_code_and_status(service: BookService):
    with pytest.raises(ValidationError) as exc_info:
        service.create_book(BookInput(title="T"))
    assert exc_info.value.status_code == 400
    assert exc_info.value.error_code == "VALIDATION_ERROR"
    assert exc_info.value.details == {}
