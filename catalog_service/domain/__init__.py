"""Domain layer - catalog error types shared by the core and the API."""

from catalog_service.domain.exceptions import (
    CatalogError,
    InvalidParameterError,
    NotFoundError,
    ProductNotFoundError,
    StoreUnavailableError,
)

__all__ = [
    "CatalogError",
    "InvalidParameterError",
    "NotFoundError",
    "ProductNotFoundError",
    "StoreUnavailableError",
]
