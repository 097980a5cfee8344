"""SQLAlchemy models for the product catalog.

Defines the Product table and the save-time normalization that keeps
derived fields (slug, stock flag, sale flag, primary image) consistent.
"""

import math
import re
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    DateTime,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    event,
)
from sqlalchemy.orm import Mapped, mapped_column

from catalog_service.infrastructure.database import Base

# Fixed category set; values are stored lowercase
CATEGORIES: tuple[str, ...] = (
    "electronics",
    "laptops",
    "smartphones",
    "tablets",
    "headphones",
    "cameras",
    "gaming",
    "accessories",
    "home",
    "kitchen",
    "books",
    "fashion",
    "sports",
    "health",
    "beauty",
    "toys",
    "automotive",
)

_SLUG_INVALID_CHARS = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """Build a URL slug from a product name.

    Args:
        value: Source text.

    Returns:
        Lowercase slug with runs of non-alphanumerics collapsed to "-".
    """
    return _SLUG_INVALID_CHARS.sub("-", value.lower()).strip("-")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(Base):
    """Product entity in the catalog.

    Attributes:
        id: Unique product identifier (UUID string).
        name: Product name.
        description: Product description.
        price: Current price.
        original_price: List price before discount, if any.
        category: One of CATEGORIES.
        subcategory: Free-form lowercase subcategory.
        brand: Brand name.
        model: Model name.
        rating: Average rating (0.0-5.0).
        review_count: Number of reviews.
        specifications: Technical specifications keyed by name.
        images: List of {url, alt, is_primary} dicts.
        stock: Available quantity.
        in_stock: Derived from stock > 0.
        is_active: Whether the product is listed.
        is_featured: Whether the product is featured.
        is_on_sale: Derived from original_price > price.
        slug: Unique URL slug.
        tags: Lowercase tags.
        created_by: Creator identifier.
        updated_by: Last updater identifier.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    __tablename__ = "products"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    original_price: Mapped[float | None] = mapped_column(
        Numeric(10, 2, asdecimal=False), nullable=True
    )
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    subcategory: Mapped[str | None] = mapped_column(String(100), nullable=True)
    brand: Mapped[str] = mapped_column(String(100), nullable=False)
    model: Mapped[str | None] = mapped_column(String(100), nullable=True)
    rating: Mapped[float] = mapped_column(
        Numeric(2, 1, asdecimal=False), nullable=False, default=0.0
    )
    review_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    specifications: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    images: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    in_stock: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_on_sale: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    slug: Mapped[str] = mapped_column(String(250), nullable=False)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    created_by: Mapped[str] = mapped_column(String(100), nullable=False, default="system")
    updated_by: Mapped[str] = mapped_column(String(100), nullable=False, default="system")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint(
            "original_price IS NULL OR original_price >= 0",
            name="ck_products_original_price_non_negative",
        ),
        CheckConstraint("rating >= 0 AND rating <= 5", name="ck_products_rating_range"),
        CheckConstraint("review_count >= 0", name="ck_products_review_count_non_negative"),
        CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),
        CheckConstraint(
            "category IN ({})".format(", ".join(f"'{c}'" for c in CATEGORIES)),
            name="ck_products_category",
        ),
        UniqueConstraint("slug", name="uq_products_slug"),
        Index("ix_products_name", "name"),
        Index("ix_products_category", "category"),
        Index("ix_products_price", "price"),
        Index("ix_products_rating", "rating"),
        Index("ix_products_brand", "brand"),
        Index("ix_products_active_in_stock", "is_active", "in_stock"),
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, slug={self.slug}, name={self.name[:30]}...)>"

    @property
    def discount_percentage(self) -> int:
        """Get discount relative to the original price.

        Returns:
            Whole-number percentage, 0 when not discounted.
        """
        if self.original_price and self.original_price > self.price:
            ratio = (self.original_price - self.price) / self.original_price
            return int(math.floor(ratio * 100 + 0.5))
        return 0

    @property
    def primary_image(self) -> dict[str, Any] | None:
        """Get the primary image, falling back to the first one.

        Returns:
            Image dict or None when the product has no images.
        """
        images = self.images or []
        for image in images:
            if image.get("is_primary"):
                return image
        return images[0] if images else None

    def prepare_for_save(self) -> None:
        """Normalize fields and recompute derived ones before a write."""
        if self.category:
            self.category = self.category.strip().lower()
        if self.subcategory:
            self.subcategory = self.subcategory.strip().lower()
        self.tags = [tag.strip().lower() for tag in (self.tags or [])]

        if not self.slug and self.name:
            self.slug = slugify(self.name)

        self.in_stock = (self.stock or 0) > 0

        if self.original_price and self.original_price > self.price:
            self.is_on_sale = True

        images = [dict(image) for image in (self.images or [])]
        if images and not any(image.get("is_primary") for image in images):
            images[0]["is_primary"] = True
        self.images = images

    def set_stock(self, quantity: int) -> None:
        """Set stock to an absolute quantity (never below zero)."""
        self.stock = max(0, quantity)
        self.in_stock = self.stock > 0

    def add_stock(self, quantity: int) -> None:
        """Increase stock by quantity."""
        self.stock = (self.stock or 0) + quantity
        self.in_stock = self.stock > 0

    def remove_stock(self, quantity: int) -> None:
        """Decrease stock by quantity (never below zero)."""
        self.stock = max(0, (self.stock or 0) - quantity)
        self.in_stock = self.stock > 0


@event.listens_for(Product, "before_insert")
@event.listens_for(Product, "before_update")
def _normalize_before_save(mapper: Any, connection: Any, target: Product) -> None:
    target.prepare_for_save()
