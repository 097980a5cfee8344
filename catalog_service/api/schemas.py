"""API schemas for the catalog service.

Pydantic models for response validation and serialization.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str
    database: str


# ============================================================================
# Product Schemas
# ============================================================================


class ProductImageSchema(BaseModel):
    """Product image."""

    url: str
    alt: str | None = None
    is_primary: bool = False


class ProductResponse(BaseModel):
    """Product as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Product ID")
    name: str
    description: str
    price: float
    original_price: float | None = None
    discount_percentage: int = Field(default=0, description="Whole-number discount")
    category: str
    subcategory: str | None = None
    brand: str
    model: str | None = None
    rating: float
    review_count: int
    specifications: dict[str, Any] = Field(default_factory=dict)
    images: list[ProductImageSchema] = Field(default_factory=list)
    primary_image: ProductImageSchema | None = None
    stock: int
    in_stock: bool
    is_active: bool
    is_featured: bool
    is_on_sale: bool
    slug: str
    tags: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class PaginationSchema(BaseModel):
    """Pagination metadata for a product page."""

    current_page: int = Field(..., description="Current page number (1-based)")
    total_pages: int = Field(..., description="Total number of pages")
    total_products: int = Field(..., description="Total matching products")
    has_next_page: bool
    has_prev_page: bool


class AppliedFiltersSchema(BaseModel):
    """Filters that produced a product page."""

    category: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    min_rating: float | None = None
    search: str | None = None


class ProductListResponse(BaseModel):
    """Paginated list of products."""

    products: list[ProductResponse]
    pagination: PaginationSchema
    filters: AppliedFiltersSchema


class SearchResultSchema(ProductResponse):
    """Product with its full-text relevance score."""

    score: float = Field(..., description="Relevance score")


class SearchResponse(BaseModel):
    """Full-text search results."""

    query: str
    total_results: int
    products: list[SearchResultSchema]


class FeaturedResponse(BaseModel):
    """Featured products."""

    products: list[ProductResponse]


# ============================================================================
# Review Schemas
# ============================================================================


class ReviewSchema(BaseModel):
    """Mock product review."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    rating: int = Field(..., ge=1, le=5)
    comment: str
    reviewer: str
    date: datetime
    verified: bool
    helpful: int = Field(..., ge=0)


class ReviewsResponse(BaseModel):
    """Mock reviews for a product."""

    product_id: str
    product_name: str
    total_reviews: int
    reviews: list[ReviewSchema]


# ============================================================================
# Category Schemas
# ============================================================================


class CategorySchema(BaseModel):
    """Category with product count."""

    name: str
    count: int


class CategoriesResponse(BaseModel):
    """Categories in the catalog."""

    categories: list[CategorySchema]
    total_categories: int
