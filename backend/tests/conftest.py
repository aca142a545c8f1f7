"""Shared test fixtures."""
import pytest
from httpx import ASGITransport, AsyncClient

from bookstore.dependencies import get_book_store
from bookstore.main import app
from bookstore.storage import BookStore


@pytest.fixture
def store() -> BookStore:
    """A fresh, empty store for each test."""
    return BookStore()


@pytest.fixture
async def client(store: BookStore):
    """Create test client bound to the per-test store."""
    app.dependency_overrides[get_book_store] = lambda: store
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
