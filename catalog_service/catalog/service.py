"""Catalog service for product operations.

High-level service that combines repository operations with the
query pipeline rules (validation, sorting, pagination) and the mock
review generator.
"""

import math
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Generic, TypeVar

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_service.catalog.models import Product
from catalog_service.catalog.repository import SORT_COLUMNS, ProductRepository
from catalog_service.catalog.reviews import Review, ReviewGenerator
from catalog_service.catalog.seed_data import load_sample_products
from catalog_service.domain.exceptions import (
    InvalidParameterError,
    ProductNotFoundError,
    StoreUnavailableError,
)
from catalog_service.infrastructure.config import settings

logger = structlog.get_logger()

T = TypeVar("T")

SORT_ORDERS = ("asc", "desc")
MAX_RATING = 5
# Largest OFFSET a SQL BIGINT can carry
MAX_OFFSET = 2**63 - 1


def _check_non_negative_number(name: str, value: float | None) -> None:
    if value is None:
        return
    if not math.isfinite(value) or value < 0:
        raise InvalidParameterError(name, value, "must be a non-negative finite number")


@dataclass
class ProductFilter:
    """Filter parameters for product listing.

    Every supplied filter must hold for a product to match.

    Attributes:
        category: Case-insensitive substring of the category.
        min_price: Inclusive lower price bound.
        max_price: Inclusive upper price bound.
        min_rating: Inclusive rating floor (0-5).
        search: Text search in name/description/category.
    """

    category: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    min_rating: float | None = None
    search: str | None = None

    def validate(self) -> None:
        """Reject values that would otherwise produce a wrong result.

        Raises:
            InvalidParameterError: If a value is out of range.
        """
        _check_non_negative_number("min_price", self.min_price)
        _check_non_negative_number("max_price", self.max_price)
        if self.min_rating is not None and not (
            math.isfinite(self.min_rating) and 0 <= self.min_rating <= MAX_RATING
        ):
            raise InvalidParameterError(
                "min_rating", self.min_rating, f"must be between 0 and {MAX_RATING}"
            )

    def as_dict(self) -> dict[str, Any]:
        """Get filters as a dictionary (echoed back to clients)."""
        return asdict(self)


@dataclass
class PaginationParams:
    """Pagination and sort parameters.

    Attributes:
        page: Page number (1-indexed).
        limit: Items per page.
        sort_by: Sort field.
        sort_order: Sort order (asc/desc).
    """

    page: int = 1
    limit: int = 20
    sort_by: str = "created_at"
    sort_order: str = "desc"

    @property
    def offset(self) -> int:
        """Calculate offset from page number."""
        return (self.page - 1) * self.limit

    def validate(self, max_limit: int = 100) -> None:
        """Reject out-of-range values instead of clamping them.

        Args:
            max_limit: Largest accepted page size.

        Raises:
            InvalidParameterError: If a value is out of range.
        """
        if self.limit < 1 or self.limit > max_limit:
            raise InvalidParameterError("limit", self.limit, f"must be between 1 and {max_limit}")
        if self.page < 1:
            raise InvalidParameterError("page", self.page, "must be at least 1")
        if self.offset > MAX_OFFSET:
            raise InvalidParameterError(
                "page",
                self.page,
                f"must be at most {MAX_OFFSET // self.limit + 1} for limit {self.limit}",
            )
        if self.sort_by not in SORT_COLUMNS:
            raise InvalidParameterError(
                "sort_by", self.sort_by, f"must be one of {sorted(SORT_COLUMNS)}"
            )
        if self.sort_order not in SORT_ORDERS:
            raise InvalidParameterError(
                "sort_order", self.sort_order, f"must be one of {list(SORT_ORDERS)}"
            )


@dataclass
class PaginatedResult(Generic[T]):
    """Paginated result container.

    Attributes:
        items: List of items.
        total: Total count of matching items, ignoring pagination.
        page: Current page.
        limit: Items per page.
        filters: Filters that produced this result.
    """

    items: list[T]
    total: int
    page: int
    limit: int
    filters: dict[str, Any] = field(default_factory=dict)

    @property
    def total_pages(self) -> int:
        """Calculate total pages."""
        return (self.total + self.limit - 1) // self.limit

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        """Check if there's a previous page."""
        return self.page > 1


@dataclass
class ReviewsResult:
    """Mock reviews for a product."""

    product_id: str
    product_name: str
    reviews: list[Review]

    @property
    def total_reviews(self) -> int:
        """Number of reviews returned."""
        return len(self.reviews)


class CatalogService:
    """Service for catalog operations.

    Provides high-level operations for the product catalog including
    filtered listing, lookups, mock reviews and seeding.

    Example usage:
        async with async_session_factory() as session:
            service = CatalogService(session)

            results = await service.list_products(
                ProductFilter(category="laptops", max_price=1500),
                PaginationParams(page=1, sort_by="price", sort_order="asc"),
            )
    """

    def __init__(
        self,
        session: AsyncSession,
        review_generator: ReviewGenerator | None = None,
    ) -> None:
        """Initialize service with database session.

        Args:
            session: Async SQLAlchemy session.
            review_generator: Generator for mock reviews.
        """
        self.session = session
        self.repository = ProductRepository(session)
        self.review_generator = review_generator or ReviewGenerator(
            max_attempts_per_review=settings.review_max_attempts_per_review
        )

    async def list_products(
        self,
        filters: ProductFilter,
        pagination: PaginationParams,
    ) -> PaginatedResult[Product]:
        """List products with filters, sorting and pagination.

        Args:
            filters: Filter parameters.
            pagination: Pagination parameters.

        Returns:
            Paginated product results.

        Raises:
            InvalidParameterError: If a parameter is out of range.
            StoreUnavailableError: If the store query fails.
        """
        filters.validate()
        pagination.validate(max_limit=settings.max_page_size)

        logger.debug(
            "Listing products",
            filters=filters.as_dict(),
            page=pagination.page,
            limit=pagination.limit,
            sort_by=pagination.sort_by,
            sort_order=pagination.sort_order,
        )

        products = await self.repository.find_all(
            category=filters.category,
            min_price=filters.min_price,
            max_price=filters.max_price,
            min_rating=filters.min_rating,
            search=filters.search,
            sort_by=pagination.sort_by,
            sort_order=pagination.sort_order,
            limit=pagination.limit,
            offset=pagination.offset,
        )

        total = await self.repository.count(
            category=filters.category,
            min_price=filters.min_price,
            max_price=filters.max_price,
            min_rating=filters.min_rating,
            search=filters.search,
        )

        return PaginatedResult(
            items=list(products),
            total=total,
            page=pagination.page,
            limit=pagination.limit,
            filters=filters.as_dict(),
        )

    async def get_product(self, product_id: str) -> Product:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            The product.

        Raises:
            ProductNotFoundError: If no product has this ID.
        """
        product = await self.repository.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def get_reviews(
        self,
        product_id: str,
        limit: int = 10,
        rating: int | None = None,
        now: datetime | None = None,
    ) -> ReviewsResult:
        """Get mock reviews for an existing product.

        Args:
            product_id: Product ID.
            limit: Maximum number of reviews.
            rating: Only return reviews with this star rating.
            now: Generation time review dates are relative to.

        Returns:
            Reviews for the product.

        Raises:
            ProductNotFoundError: If no product has this ID.
        """
        product = await self.get_product(product_id)
        reviews = self.review_generator.generate(
            product_id=product.id,
            limit=limit,
            rating=rating,
            now=now,
        )
        return ReviewsResult(
            product_id=product.id,
            product_name=product.name,
            reviews=reviews,
        )

    async def search_products(
        self,
        query: str,
        limit: int = 10,
    ) -> list[tuple[Product, float]]:
        """Weighted full-text search over active products.

        Args:
            query: Free-text query.
            limit: Maximum results.

        Returns:
            (product, score) pairs, most relevant first.

        Raises:
            InvalidParameterError: If the query is blank.
        """
        query = query.strip()
        if not query:
            raise InvalidParameterError("q", query, "must not be empty")
        return await self.repository.search_text(query, limit)

    async def get_featured(self, limit: int = 10) -> list[Product]:
        """Get featured products.

        Args:
            limit: Maximum results.

        Returns:
            Active, in-stock featured products.
        """
        return list(await self.repository.find_featured(limit))

    async def get_categories(self) -> list[dict[str, Any]]:
        """Get categories with product counts.

        Returns:
            List of category info.
        """
        return await self.repository.get_categories()

    async def ping(self) -> None:
        """Check that the store answers.

        Raises:
            StoreUnavailableError: If the round-trip fails.
        """
        await self.repository.ping()

    async def is_store_available(self) -> bool:
        """Ping the store without raising.

        Returns:
            True if the store answered.
        """
        try:
            await self.ping()
        except StoreUnavailableError:
            await self.session.rollback()
            return False
        return True

    async def seed_catalog(self, clear_existing: bool = True) -> dict[str, Any]:
        """Load the sample product catalog.

        Args:
            clear_existing: Whether to delete existing products first.

        Returns:
            Seeding result with counts.
        """
        deleted = 0
        if clear_existing:
            deleted = await self.repository.delete_all()

        products = [entry.to_model() for entry in load_sample_products()]
        await self.repository.save_all(products)
        await self.session.commit()

        logger.info(
            "Catalog seeded",
            deleted=deleted,
            products_created=len(products),
        )

        return {
            "deleted": deleted,
            "products_created": len(products),
            "categories_used": len({p.category for p in products}),
            "brands_used": len({p.brand for p in products}),
        }

    async def seed_if_empty(self) -> dict[str, Any] | None:
        """Seed the sample catalog only when no products exist.

        Returns:
            Seeding result, or None when the catalog already has data.
        """
        if await self.repository.count() > 0:
            return None
        return await self.seed_catalog(clear_existing=False)

    async def clear_catalog(self) -> int:
        """Delete every product.

        Returns:
            Number of deleted products.
        """
        deleted = await self.repository.delete_all()
        await self.session.commit()
        logger.info("Catalog cleared", deleted=deleted)
        return deleted
