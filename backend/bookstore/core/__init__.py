"""Core utilities: logging and exceptions."""
from bookstore.core.exceptions import AppException, NotFoundError, ValidationError
from bookstore.core.logging import get_logger, setup_logging

__all__ = [
    "AppException",
    "NotFoundError",
    "ValidationError",
    "get_logger",
    "setup_logging",
]
