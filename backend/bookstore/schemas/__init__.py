"""Pydantic schemas for API request/response validation."""
from bookstore.schemas.book import UNSET, BookInput, BookPatch, BookResponse
from bookstore.schemas.common import ErrorResponse, RootResponse, StatusResponse

__all__ = [
    "UNSET",
    "BookInput",
    "BookPatch",
    "BookResponse",
    "ErrorResponse",
    "RootResponse",
    "StatusResponse",
]
