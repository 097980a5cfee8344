"""Catalog service main application module.

This module initializes the FastAPI application and configures
core middleware, routers, exception handlers and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_service.api import categories_router, health_router, products_router
from catalog_service.api.errors import error_response
from catalog_service.api.middleware import setup_middleware
from catalog_service.catalog.service import CatalogService
from catalog_service.domain.exceptions import (
    CatalogError,
    InvalidParameterError,
    NotFoundError,
    StoreUnavailableError,
)
from catalog_service.infrastructure.config import settings
from catalog_service.infrastructure.database import async_session_factory, dispose_engine
from catalog_service.infrastructure.logging import configure_logging

logger = structlog.get_logger()


async def seed_on_startup() -> None:
    """Load the sample catalog when the products table is empty."""
    async with async_session_factory() as session:
        result = await CatalogService(session).seed_if_empty()

    if result is None:
        logger.info("Catalog already populated, skipping seed")
    else:
        logger.info("Sample catalog loaded on startup", **result)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    configure_logging(settings.log_level, settings.log_format)

    logger.info(
        "Starting catalog service",
        version=settings.api_version,
        debug=settings.debug,
        seed_database=settings.seed_database,
    )

    if settings.seed_database:
        await seed_on_startup()

    yield

    logger.info("Shutting down catalog service")
    await dispose_engine()


app = FastAPI(
    title="Catalog Service",
    description="Product catalog with filtering, search and mock reviews",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Compress larger JSON bodies for clients sending Accept-Encoding: gzip
app.add_middleware(GZipMiddleware, minimum_size=settings.gzip_minimum_size)

# Request ID correlation and the unhandled-error envelope
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(products_router)
app.include_router(categories_router)


@app.get("/", tags=["Health"])
async def root() -> dict[str, Any]:
    """Describe the service and its endpoints."""
    return {
        "service": settings.service_name,
        "version": settings.api_version,
        "status": "running",
        "endpoints": {
            "health": "/health",
            "ready": "/ready",
            "products": "/products",
            "search": "/products/search",
            "featured": "/products/featured",
            "product": "/products/{product_id}",
            "reviews": "/products/{product_id}/reviews",
            "categories": "/categories",
            "docs": "/docs",
        },
    }


# ============================================================================
# Custom Exception Handlers
# ============================================================================


def status_for_error(exc: CatalogError) -> int:
    """Map a catalog error to its HTTP status."""
    if isinstance(exc, InvalidParameterError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, StoreUnavailableError):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    return status.HTTP_500_INTERNAL_SERVER_ERROR


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Handle catalog errors with consistent format."""
    status_code = status_for_error(exc)

    details = []
    if isinstance(exc, InvalidParameterError):
        details.append({"field": exc.parameter, "message": exc.reason})

    if status_code >= 500:
        logger.warning(
            "Catalog request failed",
            path=request.url.path,
            error_code=exc.error_code,
            error=exc.message,
        )

    return error_response(request, status_code, exc.error_code, exc.message, details)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed query parameters as 400 INVALID_PARAMETER."""
    details = [
        {
            "field": ".".join(str(part) for part in error["loc"][1:]) or None,
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    return error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        InvalidParameterError.error_code,
        "Invalid request parameters",
        details,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTP exceptions (including unknown routes) with consistent format."""
    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
        details = detail.get("details", [])
    else:
        error_code = "NOT_FOUND" if exc.status_code == 404 else "ERROR"
        message = str(detail)
        details = []

    return error_response(request, exc.status_code, error_code, message, details)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
