"""Product API endpoints.

Provides endpoints for listing, searching and fetching products, and
for mock product reviews.
"""

from typing import Annotated, Literal
from uuid import UUID

from fastapi import APIRouter, Query

from catalog_service.api.dependencies import CatalogServiceDep
from catalog_service.api.schemas import (
    AppliedFiltersSchema,
    ErrorResponse,
    FeaturedResponse,
    PaginationSchema,
    ProductListResponse,
    ProductResponse,
    ReviewSchema,
    ReviewsResponse,
    SearchResponse,
    SearchResultSchema,
)
from catalog_service.catalog.models import Product
from catalog_service.catalog.service import PaginationParams, ProductFilter
from catalog_service.domain.exceptions import InvalidParameterError
from catalog_service.infrastructure.config import settings

router = APIRouter(prefix="/products", tags=["Products"])

MAX_SECONDARY_LIMIT = 50

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


# ============================================================================
# Converters
# ============================================================================


def product_to_response(product: Product) -> ProductResponse:
    """Convert Product entity to response schema."""
    return ProductResponse.model_validate(product)


def check_product_id(product_id: str) -> str:
    """Reject identifiers that are not UUIDs.

    Raises:
        InvalidParameterError: If the identifier is malformed.
    """
    try:
        UUID(product_id)
    except ValueError:
        raise InvalidParameterError("product_id", product_id, "must be a UUID") from None
    return product_id


def strip_or_none(value: str | None) -> str | None:
    """Trim a text filter; blank means no filter."""
    if value is None:
        return None
    return value.strip() or None


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=ProductListResponse,
    responses=ERROR_RESPONSES,
    summary="List products",
    description="List products with optional filters, sorting and pagination.",
)
async def list_products(
    service: CatalogServiceDep,
    category: Annotated[str | None, Query(description="Category (partial match)")] = None,
    min_price: Annotated[float | None, Query(ge=0)] = None,
    max_price: Annotated[float | None, Query(ge=0)] = None,
    min_rating: Annotated[float | None, Query(ge=0, le=5)] = None,
    search: Annotated[str | None, Query(description="Search name, description, category")] = None,
    sort_by: Literal["price", "rating", "name", "created_at"] = "created_at",
    sort_order: Literal["asc", "desc"] = "desc",
    limit: Annotated[int, Query(ge=1, le=settings.max_page_size)] = settings.default_page_size,
    page: Annotated[int, Query(ge=1)] = 1,
) -> ProductListResponse:
    """List products.

    Args:
        service: Catalog service.
        category: Case-insensitive category substring.
        min_price: Inclusive lower price bound.
        max_price: Inclusive upper price bound.
        min_rating: Inclusive rating floor.
        search: Substring of name, description or category.
        sort_by: Sort field.
        sort_order: Sort direction.
        limit: Page size.
        page: Page number.

    Returns:
        Page of products with pagination metadata and the applied filters.
    """
    filters = ProductFilter(
        category=strip_or_none(category),
        min_price=min_price,
        max_price=max_price,
        min_rating=min_rating,
        search=strip_or_none(search),
    )
    pagination = PaginationParams(
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
    )

    result = await service.list_products(filters, pagination)

    return ProductListResponse(
        products=[product_to_response(p) for p in result.items],
        pagination=PaginationSchema(
            current_page=result.page,
            total_pages=result.total_pages,
            total_products=result.total,
            has_next_page=result.has_next,
            has_prev_page=result.has_prev,
        ),
        filters=AppliedFiltersSchema(**result.filters),
    )


@router.get(
    "/search",
    response_model=SearchResponse,
    responses=ERROR_RESPONSES,
    summary="Search products",
    description="Weighted full-text search over name, brand, tags and description.",
)
async def search_products(
    service: CatalogServiceDep,
    q: Annotated[str, Query(min_length=1, description="Search query")],
    limit: Annotated[int, Query(ge=1, le=MAX_SECONDARY_LIMIT)] = 10,
) -> SearchResponse:
    """Search products by relevance.

    Args:
        service: Catalog service.
        q: Free-text query.
        limit: Maximum results.

    Returns:
        Matching products with relevance scores.
    """
    results = await service.search_products(q, limit)

    return SearchResponse(
        query=q,
        total_results=len(results),
        products=[
            SearchResultSchema(
                **product_to_response(product).model_dump(),
                score=score,
            )
            for product, score in results
        ],
    )


@router.get(
    "/featured",
    response_model=FeaturedResponse,
    responses=ERROR_RESPONSES,
    summary="Featured products",
)
async def get_featured_products(
    service: CatalogServiceDep,
    limit: Annotated[int, Query(ge=1, le=MAX_SECONDARY_LIMIT)] = 10,
) -> FeaturedResponse:
    """Get featured, in-stock products, best rated first."""
    products = await service.get_featured(limit)
    return FeaturedResponse(products=[product_to_response(p) for p in products])


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={**ERROR_RESPONSES, 404: {"model": ErrorResponse}},
    summary="Get product",
)
async def get_product(
    product_id: str,
    service: CatalogServiceDep,
) -> ProductResponse:
    """Get a product by ID.

    Args:
        product_id: Product identifier (UUID).
        service: Catalog service.

    Returns:
        Product details.

    Raises:
        InvalidParameterError: If the identifier is not a UUID.
        ProductNotFoundError: If the product does not exist.
    """
    product = await service.get_product(check_product_id(product_id))
    return product_to_response(product)


@router.get(
    "/{product_id}/reviews",
    response_model=ReviewsResponse,
    responses={**ERROR_RESPONSES, 404: {"model": ErrorResponse}},
    summary="Get product reviews",
    description="Deterministic mock reviews; the same request always returns the same reviews.",
)
async def get_product_reviews(
    product_id: str,
    service: CatalogServiceDep,
    limit: Annotated[int, Query(ge=1, le=MAX_SECONDARY_LIMIT)] = 10,
    rating: Annotated[int | None, Query(ge=1, le=5)] = None,
) -> ReviewsResponse:
    """Get mock reviews for a product.

    Args:
        product_id: Product identifier (UUID).
        service: Catalog service.
        limit: Maximum number of reviews.
        rating: Only return reviews with this star rating.

    Returns:
        Reviews with the product name.
    """
    result = await service.get_reviews(
        check_product_id(product_id),
        limit=limit,
        rating=rating,
    )

    return ReviewsResponse(
        product_id=result.product_id,
        product_name=result.product_name,
        total_reviews=result.total_reviews,
        reviews=[ReviewSchema.model_validate(r) for r in result.reviews],
    )
