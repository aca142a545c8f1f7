"""Book domain model."""
from dataclasses import dataclass, replace
from typing import Any, Optional


@dataclass(frozen=True)
class Book:
    """A book held by the in-memory store.

    Instances are immutable; updates produce a new ``Book`` via ``with_changes``.
    """

    id: int
    title: str
    author: str
    year: Optional[int] = None
    isbn: Optional[str] = None

    def with_changes(self, **changes: Any) -> "Book":
        """Return a copy with the given fields replaced. ``id`` cannot change."""
        changes.pop("id", None)
        return replace(self, **changes)
