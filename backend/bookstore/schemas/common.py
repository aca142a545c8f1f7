"""Common Pydantic schemas."""
from typing import Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error response schema."""

    message: str


class StatusResponse(BaseModel):
    """Status response schema."""

    status: str
    app: Optional[str] = None


class RootResponse(BaseModel):
    """Service information returned by ``GET /``."""

    name: str
    version: str
    docs: Optional[str] = None
