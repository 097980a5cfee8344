"""Tests for the Product model and its save-time normalization."""

from collections.abc import Callable

import pytest
from sqlalchemy import UniqueConstraint

from catalog_service.catalog.models import Product, slugify


class TestSlugify:
    """Tests for slug generation."""

    @pytest.mark.parametrize(
        ("name", "slug"),
        [
            ("MacBook Pro 16-inch M3 Pro", "macbook-pro-16-inch-m3-pro"),
            ("  Sony WH-1000XM5  ", "sony-wh-1000xm5"),
            ("100% Cotton Tee!", "100-cotton-tee"),
            ("Apple AirPods Pro (2nd generation)", "apple-airpods-pro-2nd-generation"),
        ],
    )
    def test_slugify(self, name: str, slug: str) -> None:
        """Runs of non-alphanumerics collapse to one dash, ends trimmed."""
        assert slugify(name) == slug


class TestPrepareForSave:
    """Tests for derived fields."""

    def test_slug_generated_from_name(self, product_factory: Callable[..., Product]) -> None:
        """Missing slug is derived from the name."""
        product = product_factory(name="Dell XPS 13")
        assert product.slug == "dell-xps-13"

    def test_explicit_slug_kept(self, product_factory: Callable[..., Product]) -> None:
        """A supplied slug is not overwritten."""
        product = product_factory(name="Dell XPS 13", slug="xps-dev")
        assert product.slug == "xps-dev"

    @pytest.mark.parametrize(("stock", "in_stock"), [(0, False), (1, True), (50, True)])
    def test_in_stock_derived(
        self, product_factory: Callable[..., Product], stock: int, in_stock: bool
    ) -> None:
        """in_stock mirrors stock > 0."""
        assert product_factory(stock=stock).in_stock is in_stock

    def test_on_sale_when_discounted(self, product_factory: Callable[..., Product]) -> None:
        """Original price above price marks the product on sale."""
        assert product_factory(price=80, original_price=100).is_on_sale is True
        assert product_factory(price=100, original_price=100).is_on_sale is False
        assert product_factory(price=100, original_price=None).is_on_sale is False

    def test_lowercases_category_subcategory_tags(
        self, product_factory: Callable[..., Product]
    ) -> None:
        """Category, subcategory and tags are stored lowercase."""
        product = product_factory(category=" Laptops ", subcategory="Ultrabook", tags=["Linux", " DEV "])
        assert product.category == "laptops"
        assert product.subcategory == "ultrabook"
        assert product.tags == ["linux", "dev"]

    def test_first_image_becomes_primary(self, product_factory: Callable[..., Product]) -> None:
        """Without a flagged image, the first one is primary."""
        product = product_factory(
            images=[
                {"url": "https://example.com/a.jpg", "alt": "a"},
                {"url": "https://example.com/b.jpg", "alt": "b"},
            ]
        )
        assert product.images[0]["is_primary"] is True
        assert "is_primary" not in product.images[1]
        assert product.primary_image["url"] == "https://example.com/a.jpg"

    def test_flagged_image_kept(self, product_factory: Callable[..., Product]) -> None:
        """An explicitly flagged image stays primary."""
        product = product_factory(
            images=[
                {"url": "https://example.com/a.jpg", "is_primary": False},
                {"url": "https://example.com/b.jpg", "is_primary": True},
            ]
        )
        assert product.primary_image["url"] == "https://example.com/b.jpg"
        assert product.images[0]["is_primary"] is False


class TestDerivedProperties:
    """Tests for read-only derived values."""

    @pytest.mark.parametrize(
        ("price", "original_price", "discount"),
        [
            (2499, 2699, 7),
            (1299, 1499, 13),
            (50, 100, 50),
            (100, 100, 0),
            (120, 100, 0),
            (100, None, 0),
        ],
    )
    def test_discount_percentage(
        self,
        product_factory: Callable[..., Product],
        price: float,
        original_price: float | None,
        discount: int,
    ) -> None:
        """Discount is the rounded percentage off the original price."""
        product = product_factory(price=price, original_price=original_price)
        assert product.discount_percentage == discount

    def test_primary_image_none_without_images(
        self, product_factory: Callable[..., Product]
    ) -> None:
        """No images means no primary image."""
        assert product_factory(images=[]).primary_image is None


class TestStockHelpers:
    """Tests for stock adjustments."""

    def test_set_stock_never_negative(self, product_factory: Callable[..., Product]) -> None:
        """set_stock floors at zero."""
        product = product_factory(stock=5)
        product.set_stock(-3)
        assert product.stock == 0
        assert product.in_stock is False

    def test_add_stock(self, product_factory: Callable[..., Product]) -> None:
        """add_stock restores availability."""
        product = product_factory(stock=0)
        product.add_stock(4)
        assert product.stock == 4
        assert product.in_stock is True

    def test_remove_stock(self, product_factory: Callable[..., Product]) -> None:
        """remove_stock floors at zero."""
        product = product_factory(stock=3)
        product.remove_stock(2)
        assert (product.stock, product.in_stock) == (1, True)
        product.remove_stock(10)
        assert (product.stock, product.in_stock) == (0, False)


class TestTableSchema:
    """Tests for the ORM table definition."""

    def test_slug_constraint_matches_migration(self) -> None:
        """The slug unique constraint carries the migration's name."""
        unique = {
            constraint.name: [column.name for column in constraint.columns]
            for constraint in Product.__table__.constraints
            if isinstance(constraint, UniqueConstraint)
        }
        assert unique == {"uq_products_slug": ["slug"]}
