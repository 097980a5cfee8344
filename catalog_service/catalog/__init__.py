"""Product Catalog.

Provides the product model, the filter/sort/paginate query pipeline,
the deterministic mock review generator and catalog seeding.
"""

from catalog_service.catalog.models import CATEGORIES, Product
from catalog_service.catalog.repository import ProductRepository
from catalog_service.catalog.reviews import Review, ReviewGenerator
from catalog_service.catalog.schemas import ProductImageInput, ProductInput
from catalog_service.catalog.service import (
    CatalogService,
    PaginatedResult,
    PaginationParams,
    ProductFilter,
    ReviewsResult,
)

__all__ = [
    # Models
    "CATEGORIES",
    "Product",
    # Schemas
    "ProductImageInput",
    "ProductInput",
    # Reviews
    "Review",
    "ReviewGenerator",
    # Repository
    "ProductRepository",
    # Service
    "CatalogService",
    "PaginatedResult",
    "PaginationParams",
    "ProductFilter",
    "ReviewsResult",
]
