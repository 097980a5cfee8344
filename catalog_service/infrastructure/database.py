"""Async SQLAlchemy engine and sessions for the product store.

The engine and session factory are the only process-wide state. The schema
itself is owned by the alembic migrations.
"""

from collections.abc import AsyncGenerator
from typing import Any

import structlog
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from catalog_service.infrastructure.config import settings

logger = structlog.get_logger()


def engine_options(database_url: str) -> dict[str, Any]:
    """Engine keyword arguments for a database URL.

    Pool sizing applies to server databases only; SQLite URLs get the
    driver's default pool.
    """
    options: dict[str, Any] = {"echo": settings.debug, "pool_pre_ping": True}
    if make_url(database_url).get_backend_name() != "sqlite":
        options["pool_size"] = settings.database_pool_size
        options["max_overflow"] = settings.database_max_overflow
    return options


engine = create_async_engine(settings.database_url, **engine_options(settings.database_url))

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

Base = declarative_base()


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped session: committed when the request succeeds.

    Yields:
        AsyncSession bound to the shared engine.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            logger.debug("Session rolled back")
            raise


async def create_dev_schema() -> None:
    """Create the products table straight from the ORM metadata.

    Development convenience only: the result lacks the migration's GIN
    full-text index, so deployed databases use ``alembic upgrade head``.
    """
    logger.warning("Creating schema from ORM metadata", url=engine.url.render_as_string())
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """Close pooled connections."""
    await engine.dispose()
    logger.info("Database engine disposed")
