"""Validation schema for product records entering the catalog.

Used by the seeding scripts to reject malformed sample data before it
reaches the database.
"""

from pydantic import BaseModel, Field, field_validator

from catalog_service.catalog.models import CATEGORIES, Product


class ProductImageInput(BaseModel):
    """Product image."""

    url: str = Field(..., pattern=r"^https?://.+", description="HTTP/HTTPS image URL")
    alt: str | None = Field(default=None, max_length=200)
    is_primary: bool = False


class ProductInput(BaseModel):
    """Product record as accepted by the catalog."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=2000)
    price: float = Field(..., ge=0, allow_inf_nan=False)
    original_price: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    category: str
    subcategory: str | None = None
    brand: str = Field(..., min_length=1, max_length=100)
    model: str | None = Field(default=None, max_length=100)
    rating: float = Field(default=0.0, ge=0, le=5, allow_inf_nan=False)
    review_count: int = Field(default=0, ge=0)
    specifications: dict[str, str] = Field(default_factory=dict)
    images: list[ProductImageInput] = Field(default_factory=list)
    stock: int = Field(default=0, ge=0)
    is_active: bool = True
    is_featured: bool = False
    slug: str | None = None
    tags: list[str] = Field(default_factory=list)

    @field_validator("name", "description", "brand")
    @classmethod
    def strip_text(cls, value: str) -> str:
        """Trim surrounding whitespace."""
        return value.strip()

    @field_validator("category")
    @classmethod
    def check_category(cls, value: str) -> str:
        """Normalize and restrict category to the fixed set."""
        normalized = value.strip().lower()
        if normalized not in CATEGORIES:
            raise ValueError("Category must be one of the predefined values")
        return normalized

    @field_validator("tags")
    @classmethod
    def lowercase_tags(cls, value: list[str]) -> list[str]:
        """Lowercase and deduplicate tags, keeping first-seen order."""
        return list(dict.fromkeys(tag.strip().lower() for tag in value if tag.strip()))

    def to_model(self) -> Product:
        """Build an unsaved Product entity.

        Returns:
            Product ready to be added to a session.
        """
        return Product(**self.model_dump())
