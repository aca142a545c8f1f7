"""API routes."""
from fastapi import APIRouter

from bookstore.api.books import router as books_router
from bookstore.api.health import router as health_router

# Create main API router
api_router = APIRouter()

# Include all route modules
api_router.include_router(health_router)
api_router.include_router(books_router)

__all__ = ["api_router"]
