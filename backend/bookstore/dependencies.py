"""
FastAPI dependencies for the book store, service and settings.
"""
from fastapi import Depends

from bookstore.config import Settings, get_settings
from bookstore.services.book_service import BookService
from bookstore.storage import BookStore

# Process-wide store, created empty at startup
book_store = BookStore()


def get_book_store() -> BookStore:
    """
    Dependency to get the shared BookStore instance.
    """
    return book_store


def get_book_service(store: BookStore = Depends(get_book_store)) -> BookService:
    """
    Dependency provider for BookService.
    """
    return BookService(store)


def get_app_settings() -> Settings:
    """
    Dependency to get app settings.
    """
    return get_settings()
