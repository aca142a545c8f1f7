"""Domain models."""
from bookstore.models.book import Book

__all__ = ["Book"]
