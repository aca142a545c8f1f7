"""FastAPI application entry point.

Run with: uvicorn bookstore.main:app --reload
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookstore.api import api_router
from bookstore.config import settings
from bookstore.core.exceptions import AppException
from bookstore.core.logging import get_logger, setup_logging

setup_logging(settings.log_level)
logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    logger.info(f"Starting {settings.app_name} v{settings.version}")
    yield
    logger.info(f"Shutting down {settings.app_name}")


app = FastAPI(
    title=settings.app_name,
    description="In-memory CRUD API for books",
    version=settings.version,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Exception handlers
@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    """Handle application exceptions."""
    logger.debug(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as 400 with a readable message."""
    message = "Invalid request"
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        if location:
            message = f"{message}: {location}"
        message = f"{message}: {first.get('msg')}"
    logger.debug(f"{request.method} {request.url.path} -> 400: {message}")
    return JSONResponse(status_code=400, content={"message": message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {exc}")

    if settings.debug:
        return JSONResponse(
            status_code=500,
            content={"message": f"{type(exc).__name__}: {exc}"},
        )

    return JSONResponse(
        status_code=500,
        content={"message": "Internal server error"},
    )


# Include API router
app.include_router(api_router)


def run() -> None:
    """Start the server with the configured host and port."""
    import uvicorn

    uvicorn.run(
        "bookstore.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
