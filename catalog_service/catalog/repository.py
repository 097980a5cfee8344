"""Product repository for database operations.

Provides read operations for products with filtering, sorting and
pagination, plus the bulk writes used by the seeding scripts.
"""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any

import structlog
from sqlalchemy import Select, Text, and_, cast, delete, func, or_, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_service.catalog.models import Product
from catalog_service.domain.exceptions import InvalidParameterError, StoreUnavailableError

logger = structlog.get_logger()

# Text search configuration for the weighted full-text document
TEXT_SEARCH_CONFIG = "english"

SORT_COLUMNS = {
    "price": Product.price,
    "rating": Product.rating,
    "name": Product.name,
    "created_at": Product.created_at,
}


@contextmanager
def _store_call(operation: str) -> Iterator[None]:
    """Translate driver and connection failures into StoreUnavailableError.

    Args:
        operation: Repository operation name, used in logs and the error.
    """
    try:
        yield
    except (SQLAlchemyError, OSError) as e:
        logger.error(
            "Product store call failed",
            operation=operation,
            error=str(e),
        )
        raise StoreUnavailableError(operation) from e


def weighted_search_document() -> Any:
    """Build the weighted tsvector over name, brand, tags and description.

    Weights follow field importance: name A, brand B, tags C,
    description D.
    """

    def weighted(column: Any, weight: str) -> Any:
        return func.setweight(
            func.to_tsvector(TEXT_SEARCH_CONFIG, func.coalesce(column, "")),
            weight,
        )

    return (
        weighted(Product.name, "A")
        .op("||")(weighted(Product.brand, "B"))
        .op("||")(weighted(cast(Product.tags, Text), "C"))
        .op("||")(weighted(Product.description, "D"))
    )


class ProductRepository:
    """Repository for Product database operations.

    Handles all database interactions for products including
    filtering, sorting, and pagination. Matching is delegated to the
    database; this class only assembles conditions.

    Example usage:
        async with async_session_factory() as session:
            repo = ProductRepository(session)
            products = await repo.find_all(
                category="laptops",
                min_price=500,
                limit=20,
            )
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    # ------------------------------------------------------------------
    # Query building
    # ------------------------------------------------------------------

    @staticmethod
    def build_conditions(
        category: str | None = None,
        min_price: float | None = None,
        max_price: float | None = None,
        min_rating: float | None = None,
        search: str | None = None,
    ) -> list[Any]:
        """Build filter conditions, one per supplied filter.

        Args:
            category: Case-insensitive substring of the category.
            min_price: Inclusive lower price bound.
            max_price: Inclusive upper price bound.
            min_rating: Inclusive rating floor.
            search: Case-insensitive substring of name, description or category.

        Returns:
            List of SQLAlchemy conditions to be combined with AND.
        """
        conditions = []

        if category:
            conditions.append(Product.category.icontains(category, autoescape=True))

        if min_price is not None:
            conditions.append(Product.price >= min_price)

        if max_price is not None:
            conditions.append(Product.price <= max_price)

        if min_rating is not None:
            conditions.append(Product.rating >= min_rating)

        if search:
            conditions.append(
                or_(
                    Product.name.icontains(search, autoescape=True),
                    Product.description.icontains(search, autoescape=True),
                    Product.category.icontains(search, autoescape=True),
                )
            )

        return conditions

    def build_find_query(
        self,
        conditions: list[Any],
        sort_by: str = "created_at",
        sort_order: str = "desc",
        limit: int = 20,
        offset: int = 0,
    ) -> Select:
        """Build the page query for a set of conditions.

        Args:
            conditions: Output of build_conditions.
            sort_by: Sort field (price, rating, name, created_at).
            sort_order: Sort order (asc, desc).
            limit: Maximum results.
            offset: Result offset for pagination.

        Returns:
            Select statement ordered by the sort key, then by id ascending.
        """
        query = select(Product)

        if conditions:
            query = query.where(and_(*conditions))

        sort_column = self._get_sort_column(sort_by)
        if sort_order.lower() == "desc":
            query = query.order_by(sort_column.desc(), Product.id.asc())
        else:
            query = query.order_by(sort_column.asc(), Product.id.asc())

        return query.limit(limit).offset(offset)

    def build_text_search_query(self, query_text: str, limit: int = 10) -> Select:
        """Build the weighted full-text search query (PostgreSQL only).

        Args:
            query_text: Free-text query.
            limit: Maximum results.

        Returns:
            Select of (Product, score) rows ordered by relevance.
        """
        document = weighted_search_document()
        ts_query = func.plainto_tsquery(TEXT_SEARCH_CONFIG, query_text)
        score = func.ts_rank(document, ts_query).label("score")

        return (
            select(Product, score)
            .where(
                Product.is_active.is_(True),
                document.bool_op("@@")(ts_query),
            )
            .order_by(score.desc(), Product.id.asc())
            .limit(limit)
        )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get_by_id(self, product_id: str) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found, None otherwise.
        """
        with _store_call("get_by_id"):
            result = await self.session.execute(
                select(Product).where(Product.id == product_id)
            )
            return result.scalar_one_or_none()

    async def find_all(
        self,
        category: str | None = None,
        min_price: float | None = None,
        max_price: float | None = None,
        min_rating: float | None = None,
        search: str | None = None,
        sort_by: str = "created_at",
        sort_order: str = "desc",
        limit: int = 20,
        offset: int = 0,
    ) -> Sequence[Product]:
        """Find products with filtering, sorting, and pagination.

        Args:
            category: Case-insensitive substring of the category.
            min_price: Inclusive lower price bound.
            max_price: Inclusive upper price bound.
            min_rating: Inclusive rating floor.
            search: Search in name, description and category.
            sort_by: Sort field (price, rating, name, created_at).
            sort_order: Sort order (asc, desc).
            limit: Maximum results.
            offset: Result offset for pagination.

        Returns:
            Sequence of matching products.
        """
        conditions = self.build_conditions(
            category=category,
            min_price=min_price,
            max_price=max_price,
            min_rating=min_rating,
            search=search,
        )
        query = self.build_find_query(conditions, sort_by, sort_order, limit, offset)

        with _store_call("find_all"):
            result = await self.session.execute(query)
            return result.scalars().all()

    async def count(
        self,
        category: str | None = None,
        min_price: float | None = None,
        max_price: float | None = None,
        min_rating: float | None = None,
        search: str | None = None,
    ) -> int:
        """Count products matching filters.

        Uses exactly the same conditions as find_all, ignoring pagination.

        Returns:
            Count of matching products.
        """
        query = select(func.count(Product.id))

        conditions = self.build_conditions(
            category=category,
            min_price=min_price,
            max_price=max_price,
            min_rating=min_rating,
            search=search,
        )
        if conditions:
            query = query.where(and_(*conditions))

        with _store_call("count"):
            result = await self.session.execute(query)
            return result.scalar_one()

    async def search_text(
        self,
        query_text: str,
        limit: int = 10,
    ) -> list[tuple[Product, float]]:
        """Run the weighted full-text search.

        Args:
            query_text: Free-text query.
            limit: Maximum results.

        Returns:
            List of (product, relevance score) pairs, best first.
        """
        with _store_call("search_text"):
            result = await self.session.execute(
                self.build_text_search_query(query_text, limit)
            )
            return [(row[0], float(row[1])) for row in result.all()]

    async def find_featured(self, limit: int = 10) -> Sequence[Product]:
        """Find active, in-stock featured products, best rated first.

        Args:
            limit: Maximum results.

        Returns:
            Sequence of featured products.
        """
        query = (
            select(Product)
            .where(
                Product.is_featured.is_(True),
                Product.is_active.is_(True),
                Product.in_stock.is_(True),
            )
            .order_by(Product.rating.desc(), Product.id.asc())
            .limit(limit)
        )

        with _store_call("find_featured"):
            result = await self.session.execute(query)
            return result.scalars().all()

    async def get_categories(self) -> list[dict[str, Any]]:
        """Get list of categories with product counts.

        Returns:
            List of {"name", "count"} dicts ordered by name.
        """
        query = (
            select(
                Product.category,
                func.count(Product.id).label("product_count"),
            )
            .group_by(Product.category)
            .order_by(Product.category)
        )

        with _store_call("get_categories"):
            result = await self.session.execute(query)
            return [
                {"name": row.category, "count": row.product_count}
                for row in result.all()
            ]

    async def ping(self) -> None:
        """Round-trip to the store."""
        with _store_call("ping"):
            await self.session.execute(text("SELECT 1"))

    # ------------------------------------------------------------------
    # Writes (seeding only)
    # ------------------------------------------------------------------

    async def save_all(self, products: list[Product]) -> list[Product]:
        """Save multiple products to database.

        Args:
            products: Products to save.

        Returns:
            Saved products.
        """
        with _store_call("save_all"):
            self.session.add_all(products)
            await self.session.flush()
        return products

    async def delete_all(self) -> int:
        """Delete every product.

        Returns:
            Number of deleted products.
        """
        with _store_call("delete_all"):
            result = await self.session.execute(delete(Product))
            await self.session.flush()
        return result.rowcount or 0

    def _get_sort_column(self, sort_by: str) -> Any:
        """Get SQLAlchemy column for sorting.

        Args:
            sort_by: Sort field name.

        Returns:
            SQLAlchemy column.
        """
        try:
            return SORT_COLUMNS[sort_by]
        except KeyError:
            raise InvalidParameterError(
                "sort_by", sort_by, f"must be one of {sorted(SORT_COLUMNS)}"
            ) from None
