"""Service status routes."""
from fastapi import APIRouter, Depends

from bookstore.config import Settings
from bookstore.dependencies import get_app_settings
from bookstore.schemas.common import RootResponse, StatusResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=StatusResponse)
async def health_check(settings: Settings = Depends(get_app_settings)) -> dict:
    """Health check endpoint."""
    return {"status": "healthy", "app": settings.app_name}


@router.get("/", response_model=RootResponse)
async def root(settings: Settings = Depends(get_app_settings)) -> dict:
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.version,
        "docs": "/docs" if settings.debug else None,
    }
