"""Tests for catalog service and the query pipeline."""

import math
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from catalog_service.catalog.models import Product
from catalog_service.catalog.service import (
    CatalogService,
    PaginatedResult,
    PaginationParams,
    ProductFilter,
)
from catalog_service.domain.exceptions import (
    InvalidParameterError,
    ProductNotFoundError,
    StoreUnavailableError,
)
from conftest import product_id


def broken_session() -> MagicMock:
    """Session whose every query fails like a lost connection."""
    session = MagicMock()
    session.execute = AsyncMock(
        side_effect=OperationalError("SELECT 1", {}, ConnectionRefusedError("refused"))
    )
    session.rollback = AsyncMock()
    return session


class TestPaginationParams:
    """Tests for PaginationParams."""

    def test_offset(self) -> None:
        """Offset is (page - 1) * limit."""
        assert PaginationParams(page=1, limit=20).offset == 0
        assert PaginationParams(page=3, limit=10).offset == 20

    def test_max_limit_accepted(self) -> None:
        """limit=100 is within range."""
        PaginationParams(limit=100).validate(max_limit=100)

    @pytest.mark.parametrize(
        ("kwargs", "parameter"),
        [
            ({"limit": 101}, "limit"),
            ({"limit": 0}, "limit"),
            ({"page": 0}, "page"),
            ({"page": -1}, "page"),
            ({"sort_by": "brand"}, "sort_by"),
            ({"sort_order": "up"}, "sort_order"),
        ],
    )
    def test_out_of_range_rejected(self, kwargs: dict, parameter: str) -> None:
        """Out-of-range values raise instead of being clamped."""
        with pytest.raises(InvalidParameterError) as exc_info:
            PaginationParams(**kwargs).validate(max_limit=100)
        assert exc_info.value.parameter == parameter

    def test_page_beyond_bigint_offset_rejected(self) -> None:
        """A page whose offset overflows a 64-bit integer is rejected."""
        with pytest.raises(InvalidParameterError) as exc_info:
            PaginationParams(page=10**18, limit=100).validate(max_limit=100)
        assert exc_info.value.parameter == "page"

    def test_last_representable_page_accepted(self) -> None:
        """The largest page whose offset fits a BIGINT still validates."""
        pagination = PaginationParams(page=(2**63 - 1) // 100 + 1, limit=100)
        pagination.validate(max_limit=100)
        assert pagination.offset <= 2**63 - 1


class TestProductFilter:
    """Tests for ProductFilter."""

    @pytest.mark.parametrize(
        ("kwargs", "parameter"),
        [
            ({"min_price": -1}, "min_price"),
            ({"max_price": math.inf}, "max_price"),
            ({"min_price": math.nan}, "min_price"),
            ({"min_rating": 5.5}, "min_rating"),
            ({"min_rating": -0.1}, "min_rating"),
        ],
    )
    def test_invalid_values_rejected(self, kwargs: dict, parameter: str) -> None:
        """Negative or non-finite numbers are rejected."""
        with pytest.raises(InvalidParameterError) as exc_info:
            ProductFilter(**kwargs).validate()
        assert exc_info.value.parameter == parameter

    def test_inverted_price_range_is_valid(self) -> None:
        """min_price > max_price is not an error."""
        ProductFilter(min_price=1500, max_price=500).validate()

    def test_as_dict(self) -> None:
        """Filters are echoed as a dict."""
        assert ProductFilter(category="laptops").as_dict() == {
            "category": "laptops",
            "min_price": None,
            "max_price": None,
            "min_rating": None,
            "search": None,
        }


class TestPaginatedResult:
    """Tests for PaginatedResult."""

    @pytest.mark.parametrize(
        ("total", "limit", "pages"),
        [(0, 20, 0), (1, 20, 1), (20, 20, 1), (21, 20, 2), (8, 3, 3), (100, 1, 100)],
    )
    def test_total_pages(self, total: int, limit: int, pages: int) -> None:
        """total_pages is ceil(total / limit)."""
        result = PaginatedResult(items=[], total=total, page=1, limit=limit)
        assert result.total_pages == pages == math.ceil(total / limit)

    def test_navigation_flags(self) -> None:
        """has_next and has_prev follow page position."""
        first = PaginatedResult(items=[], total=8, page=1, limit=3)
        middle = PaginatedResult(items=[], total=8, page=2, limit=3)
        last = PaginatedResult(items=[], total=8, page=3, limit=3)

        assert (first.has_next, first.has_prev) == (True, False)
        assert (middle.has_next, middle.has_prev) == (True, True)
        assert (last.has_next, last.has_prev) == (False, True)


class TestListProducts:
    """Tests for CatalogService.list_products."""

    async def test_huge_page_rejected_before_querying(self) -> None:
        """An overflowing page fails validation without touching the store."""
        session = broken_session()
        service = CatalogService(session)

        with pytest.raises(InvalidParameterError) as exc_info:
            await service.list_products(ProductFilter(), PaginationParams(page=10**18, limit=100))

        assert exc_info.value.parameter == "page"
        session.execute.assert_not_called()

    async def test_laptops_in_price_range(
        self, catalog_service: CatalogService, sample_products: list[Product]
    ) -> None:
        """Only laptops within [500, 1500], newest first."""
        result = await catalog_service.list_products(
            ProductFilter(category="laptops", min_price=500, max_price=1500),
            PaginationParams(),
        )

        assert [p.name for p in result.items] == ["ASUS Zenbook 14", "Dell XPS 13"]
        assert result.total == 2
        assert result.total_pages == 1
        assert not result.has_next
        assert not result.has_prev
        for product in result.items:
            assert product.category == "laptops"
            assert 500 <= product.price <= 1500

    async def test_filters_combine_with_and(
        self, catalog_service: CatalogService, sample_products: list[Product]
    ) -> None:
        """Every returned product satisfies every filter."""
        filters = ProductFilter(category="phone", min_price=300, min_rating=4.6)
        result = await catalog_service.list_products(filters, PaginationParams(limit=100))

        assert {p.name for p in result.items} == {"Sony WH-1000XM5", "iPhone 15 Pro"}
        for product in result.items:
            assert "phone" in product.category
            assert product.price >= 300
            assert product.rating >= 4.6

    async def test_inverted_price_range_is_empty(
        self, catalog_service: CatalogService, sample_products: list[Product]
    ) -> None:
        """min_price > max_price matches nothing."""
        result = await catalog_service.list_products(
            ProductFilter(min_price=1500, max_price=500), PaginationParams()
        )
        assert result.items == []
        assert result.total == 0
        assert result.total_pages == 0

    async def test_pagination_metadata(
        self, catalog_service: CatalogService, sample_products: list[Product]
    ) -> None:
        """Total ignores pagination; last page holds the remainder."""
        result = await catalog_service.list_products(
            ProductFilter(), PaginationParams(page=3, limit=3)
        )
        assert len(result.items) == 2
        assert result.total == 8
        assert result.total_pages == 3
        assert not result.has_next
        assert result.has_prev

    async def test_page_past_end_is_empty(
        self, catalog_service: CatalogService, sample_products: list[Product]
    ) -> None:
        """A page beyond the last returns no items but the full total."""
        result = await catalog_service.list_products(
            ProductFilter(), PaginationParams(page=5, limit=3)
        )
        assert result.items == []
        assert result.total == 8

    async def test_limit_boundaries(
        self, catalog_service: CatalogService, sample_products: list[Product]
    ) -> None:
        """limit=100 passes, limit=101 and page=0 are rejected."""
        result = await catalog_service.list_products(ProductFilter(), PaginationParams(limit=100))
        assert result.total == 8

        with pytest.raises(InvalidParameterError):
            await catalog_service.list_products(ProductFilter(), PaginationParams(limit=101))

        with pytest.raises(InvalidParameterError):
            await catalog_service.list_products(ProductFilter(), PaginationParams(page=0))

    async def test_sort_by_price_asc(
        self, catalog_service: CatalogService, sample_products: list[Product]
    ) -> None:
        """Products come back in ascending price order."""
        result = await catalog_service.list_products(
            ProductFilter(), PaginationParams(sort_by="price", sort_order="asc")
        )
        prices = [p.price for p in result.items]
        assert prices == sorted(prices)

    async def test_filters_echoed(
        self, catalog_service: CatalogService, sample_products: list[Product]
    ) -> None:
        """Applied filters are returned with the result."""
        result = await catalog_service.list_products(
            ProductFilter(search="tee"), PaginationParams()
        )
        assert result.filters["search"] == "tee"
        assert [p.name for p in result.items] == ["100% Cotton Tee"]

    async def test_store_failure(self) -> None:
        """Store errors surface as StoreUnavailableError."""
        service = CatalogService(broken_session())

        with pytest.raises(StoreUnavailableError) as exc_info:
            await service.list_products(ProductFilter(), PaginationParams())

        assert exc_info.value.operation == "find_all"
        assert isinstance(exc_info.value.__cause__, OperationalError)

    async def test_validation_happens_before_store_access(self) -> None:
        """Invalid parameters never reach the store."""
        session = broken_session()
        service = CatalogService(session)

        with pytest.raises(InvalidParameterError):
            await service.list_products(ProductFilter(min_price=-5), PaginationParams())

        session.execute.assert_not_called()


class TestProductLookups:
    """Tests for single-product reads and reviews."""

    async def test_get_product(
        self, catalog_service: CatalogService, sample_products: list[Product]
    ) -> None:
        """Existing product is returned."""
        product = await catalog_service.get_product(product_id(2))
        assert product.name == "MacBook Pro 16"

    async def test_get_missing_product(
        self, catalog_service: CatalogService, sample_products: list[Product]
    ) -> None:
        """Missing product raises ProductNotFoundError."""
        with pytest.raises(ProductNotFoundError) as exc_info:
            await catalog_service.get_product(product_id(404))
        assert exc_info.value.product_id == product_id(404)

    async def test_get_reviews(
        self, catalog_service: CatalogService, sample_products: list[Product]
    ) -> None:
        """Reviews carry the product name and are deterministic."""
        now = datetime(2026, 6, 1, tzinfo=timezone.utc)
        first = await catalog_service.get_reviews(product_id(1), limit=5, now=now)
        second = await catalog_service.get_reviews(product_id(1), limit=5, now=now)

        assert first.product_name == "Dell XPS 13"
        assert first.total_reviews == 5
        assert first.reviews == second.reviews
        assert first.reviews[0].id == f"review_{product_id(1)}_0"

    async def test_get_reviews_for_missing_product(
        self, catalog_service: CatalogService, sample_products: list[Product]
    ) -> None:
        """Reviews require an existing product."""
        with pytest.raises(ProductNotFoundError):
            await catalog_service.get_reviews(product_id(404))

    async def test_get_featured(
        self, catalog_service: CatalogService, sample_products: list[Product]
    ) -> None:
        """Only in-stock featured products, best rated first."""
        featured = await catalog_service.get_featured()
        assert [p.name for p in featured] == ["iPhone 15 Pro", "Sony WH-1000XM5"]

    async def test_search_rejects_blank_query(self) -> None:
        """Blank queries are invalid."""
        service = CatalogService(broken_session())
        with pytest.raises(InvalidParameterError) as exc_info:
            await service.search_products("   ")
        assert exc_info.value.parameter == "q"


class TestHealth:
    """Tests for store availability checks."""

    async def test_store_available(self, catalog_service: CatalogService) -> None:
        """Working store reports available."""
        assert await catalog_service.is_store_available() is True

    async def test_store_unavailable(self) -> None:
        """Broken store reports unavailable and rolls back."""
        session = broken_session()
        service = CatalogService(session)

        assert await service.is_store_available() is False
        session.rollback.assert_awaited_once()

        with pytest.raises(StoreUnavailableError):
            await service.ping()


class TestSeeding:
    """Tests for seeding and clearing the catalog."""

    async def test_seed_catalog(self, catalog_service: CatalogService) -> None:
        """Sample catalog is inserted and counted."""
        result = await catalog_service.seed_catalog()

        assert result["deleted"] == 0
        assert result["products_created"] > 0
        assert result["categories_used"] > 1
        assert result["brands_used"] > 1
        assert await catalog_service.repository.count() == result["products_created"]

    async def test_seed_replaces_existing(
        self, catalog_service: CatalogService, sample_products: list[Product]
    ) -> None:
        """Existing products are cleared first by default."""
        result = await catalog_service.seed_catalog()
        assert result["deleted"] == 8
        assert await catalog_service.repository.count() == result["products_created"]

    async def test_seed_if_empty_skips_populated_catalog(
        self, catalog_service: CatalogService, sample_products: list[Product]
    ) -> None:
        """Populated catalogs are left alone."""
        assert await catalog_service.seed_if_empty() is None
        assert await catalog_service.repository.count() == 8

    async def test_seed_if_empty_loads_empty_catalog(
        self, catalog_service: CatalogService
    ) -> None:
        """Empty catalogs get the sample data."""
        result = await catalog_service.seed_if_empty()
        assert result is not None
        assert result["deleted"] == 0

    async def test_seeded_products_are_normalized(
        self, catalog_service: CatalogService
    ) -> None:
        """Save-time normalization runs on seeded rows."""
        await catalog_service.seed_catalog()
        result = await catalog_service.list_products(
            ProductFilter(), PaginationParams(limit=100)
        )

        for product in result.items:
            assert product.slug
            assert product.in_stock == (product.stock > 0)
            if product.images:
                assert product.primary_image is not None

    async def test_clear_catalog(
        self, catalog_service: CatalogService, sample_products: list[Product]
    ) -> None:
        """Clearing deletes everything and reports the count."""
        assert await catalog_service.clear_catalog() == 8
        assert await catalog_service.repository.count() == 0
