"""Book API routes."""
from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from bookstore.dependencies import get_book_service
from bookstore.models.book import Book
from bookstore.schemas.book import BookInput, BookPatch, BookResponse
from bookstore.schemas.common import ErrorResponse
from bookstore.services.book_service import BookService

router = APIRouter(prefix="/books", tags=["Books"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Book not found."}}
BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid book data."}}


@router.get(
    "",
    response_model=list[BookResponse],
    response_model_exclude_none=True,
)
async def list_books(
    service: BookService = Depends(get_book_service),
) -> list[Book]:
    """List all books, ordered by id."""
    return service.list_books()


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    response_model_exclude_none=True,
    responses=NOT_FOUND,
)
async def get_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> Book:
    """Get a book by id."""
    return service.get_book(book_id)


@router.post(
    "",
    response_model=BookResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
async def create_book(
    response: Response,
    book_data: BookInput = Body(...),
    service: BookService = Depends(get_book_service),
) -> Book:
    """Create a new book. The new resource's path is returned in ``Location``."""
    book = service.create_book(book_data)
    response.headers["Location"] = f"/books/{book.id}"
    return book


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    response_model_exclude_none=True,
    responses={**BAD_REQUEST, **NOT_FOUND},
)
async def replace_book(
    book_id: int,
    book_data: BookInput = Body(...),
    service: BookService = Depends(get_book_service),
) -> Book:
    """Replace every field of a book except its id."""
    return service.replace_book(book_id, book_data)


@router.patch(
    "/{book_id}",
    response_model=BookResponse,
    response_model_exclude_none=True,
    responses={**BAD_REQUEST, **NOT_FOUND},
)
async def patch_book(
    book_id: int,
    payload: Any = Body(None),
    service: BookService = Depends(get_book_service),
) -> Book:
    """Update only the supplied fields of a book."""
    return service.patch_book(book_id, BookPatch.from_payload(payload))


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
async def delete_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> None:
    """Delete a book."""
    service.delete_book(book_id)
