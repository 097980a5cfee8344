"""Shared fixtures for catalog tests.

Repository, service and API tests run against an in-memory SQLite
database through aiosqlite. Each test gets a fresh database.
"""

from collections.abc import AsyncGenerator, Callable
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from catalog_service.api.dependencies import get_catalog_service
from catalog_service.catalog.models import Product
from catalog_service.catalog.service import CatalogService
from catalog_service.infrastructure.database import Base
from catalog_service.main import app

BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


def product_id(n: int) -> str:
    """Deterministic UUID-shaped product ID ending in n."""
    return f"00000000-0000-4000-8000-{n:012d}"


SAMPLE_ROWS: list[dict[str, Any]] = [
    {
        "id": product_id(1),
        "name": "Dell XPS 13",
        "description": "Compact ultrabook for developers.",
        "price": 1299,
        "original_price": 1499,
        "category": "laptops",
        "brand": "Dell",
        "rating": 4.6,
        "stock": 18,
        "tags": ["developer", "linux"],
    },
    {
        "id": product_id(2),
        "name": "MacBook Pro 16",
        "description": "Powerful laptop for creative professionals.",
        "price": 2499,
        "category": "laptops",
        "brand": "Apple",
        "rating": 4.8,
        "stock": 25,
        "tags": ["creative"],
    },
    {
        "id": product_id(3),
        "name": "ASUS Zenbook 14",
        "description": "Lightweight OLED laptop for students.",
        "price": 899,
        "category": "laptops",
        "brand": "ASUS",
        "rating": 4.4,
        "stock": 30,
    },
    {
        "id": product_id(4),
        "name": "Acer Aspire 3",
        "description": "Budget laptop for everyday tasks.",
        "price": 449,
        "category": "laptops",
        "brand": "Acer",
        "rating": 3.9,
        "stock": 40,
    },
    {
        "id": product_id(5),
        "name": "Sony WH-1000XM5",
        "description": "Wireless headphones with industry-leading noise canceling.",
        "price": 349,
        "original_price": 399,
        "category": "headphones",
        "brand": "Sony",
        "rating": 4.7,
        "stock": 60,
        "is_featured": True,
    },
    {
        "id": product_id(6),
        "name": "Google Pixel 8a",
        "description": "Affordable Android phone with a great camera.",
        "price": 499,
        "category": "smartphones",
        "brand": "Google",
        "rating": 4.5,
        "stock": 0,
        "is_featured": True,
    },
    {
        "id": product_id(7),
        "name": "iPhone 15 Pro",
        "description": "Titanium flagship phone.",
        "price": 999,
        "category": "smartphones",
        "brand": "Apple",
        "rating": 4.8,
        "stock": 40,
        "is_featured": True,
    },
    {
        "id": product_id(8),
        "name": "100% Cotton Tee",
        "description": "Soft everyday tee.",
        "price": 25,
        "category": "fashion",
        "brand": "Basics",
        "rating": 4.0,
        "stock": 200,
    },
]


@pytest.fixture
def product_factory() -> Callable[..., Product]:
    """Build unsaved products with sensible defaults.

    Derived fields are computed up front so the object is usable
    without a database round-trip.
    """

    def build(**overrides: Any) -> Product:
        fields: dict[str, Any] = {
            "id": product_id(999),
            "name": "Test Product",
            "description": "A product used in tests.",
            "price": 100.0,
            "category": "electronics",
            "brand": "Acme",
            "rating": 4.0,
            "review_count": 0,
            "specifications": {},
            "images": [],
            "stock": 10,
            "is_active": True,
            "is_featured": False,
            "is_on_sale": False,
            "tags": [],
            "created_at": BASE_TIME,
            "updated_at": BASE_TIME,
        }
        fields.update(overrides)
        product = Product(**fields)
        product.prepare_for_save()
        return product

    return build


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a session on a fresh in-memory database."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture
async def sample_products(
    db_session: AsyncSession,
    product_factory: Callable[..., Product],
) -> list[Product]:
    """Insert the sample rows, created one day apart in list order."""
    products = []
    for index, row in enumerate(SAMPLE_ROWS, start=1):
        created = BASE_TIME + timedelta(days=index)
        products.append(product_factory(created_at=created, updated_at=created, **row))

    db_session.add_all(products)
    await db_session.commit()
    return products


@pytest.fixture
def catalog_service(db_session: AsyncSession) -> CatalogService:
    """Create catalog service on the test database."""
    return CatalogService(db_session)


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create API client whose catalog service uses the test database."""
    app.dependency_overrides[get_catalog_service] = lambda: CatalogService(db_session)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
