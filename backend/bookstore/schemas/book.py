"""Book schemas."""
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict


class BookInput(BaseModel):
    """Payload for creating or fully replacing a book.

    ``title`` and ``author`` may be missing here; the service rejects them
    when empty so the client gets one consistent message.
    """

    title: Optional[str] = None
    author: Optional[str] = None
    year: Optional[int] = None
    isbn: Optional[str] = None

    model_config = ConfigDict(strict=True, extra="ignore")


class BookResponse(BaseModel):
    """Book as returned by the API. Unset optional fields are omitted."""

    id: int
    title: str
    author: str
    year: Optional[int] = None
    isbn: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class _Unset:
    """Marker for a patch field that was not supplied."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()

# JSON type each patchable field must carry to be applied
PATCH_FIELD_TYPES: dict[str, type] = {
    "title": str,
    "author": str,
    "year": int,
    "isbn": str,
}


@dataclass(frozen=True)
class BookPatch:
    """Partial update: each field is either ``UNSET`` or a value of its type."""

    title: Union[str, _Unset] = UNSET
    author: Union[str, _Unset] = UNSET
    year: Union[int, _Unset] = UNSET
    isbn: Union[str, _Unset] = UNSET

    @classmethod
    def from_payload(cls, payload: Any) -> "BookPatch":
        """Decode a raw JSON body.

        Keys with a value of the wrong JSON type (``null`` included) are
        treated as absent, as are unknown keys. A body that is not a JSON
        object yields an empty patch.
        """
        if not isinstance(payload, Mapping):
            return cls()

        values: dict[str, Any] = {}
        for name, expected in PATCH_FIELD_TYPES.items():
            if name not in payload:
                continue
            value = payload[name]
            # bool is a subclass of int but never a valid year
            if isinstance(value, bool) or not isinstance(value, expected):
                continue
            values[name] = value
        return cls(**values)

    def changes(self) -> dict[str, Any]:
        """Fields that were supplied, by name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def is_empty(self) -> bool:
        return not self.changes()
