#!/usr/bin/env python3
"""Seed product catalog script.

Loads the validated sample catalog into the products table. The table is
expected to exist already; create it with ``alembic upgrade head``.

``--create-tables`` builds the table from the ORM metadata instead. That is
meant for throwaway development databases: the resulting schema has no GIN
full-text index, so do not run alembic against it afterwards.

Usage:
    alembic upgrade head && python scripts/seed_catalog.py
    python scripts/seed_catalog.py --no-clear
    python scripts/seed_catalog.py --create-tables
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from catalog_service.catalog.service import CatalogService
from catalog_service.infrastructure.config import settings
from catalog_service.infrastructure.database import (
    async_session_factory,
    create_dev_schema,
    dispose_engine,
)
from catalog_service.infrastructure.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Command-line options for the seeder."""
    parser = argparse.ArgumentParser(
        description="Seed the product catalog with sample data",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear existing products before seeding",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Development only: create tables from ORM metadata instead of migrations",
    )
    return parser


async def seed(clear: bool = True) -> dict:
    """Seed the sample catalog.

    Args:
        clear: Whether to clear existing products.

    Returns:
        Seeding result.
    """
    async with async_session_factory() as session:
        service = CatalogService(session)
        return await service.seed_catalog(clear_existing=clear)


async def main() -> None:
    """Main entry point."""
    args = build_parser().parse_args()
    configure_logging(settings.log_level, "console")

    print("=" * 60)
    print("Catalog Seeder")
    print("=" * 60)
    print(f"Clear existing: {not args.no_clear}")
    print()

    try:
        if args.create_tables:
            print("Creating tables from ORM metadata (development only)...")
            await create_dev_schema()
            print()
        result = await seed(clear=not args.no_clear)
    except Exception as e:
        print(f"  ✗ Error: {e}")
        raise
    finally:
        await dispose_engine()

    print(f"  ✓ Deleted: {result['deleted']} existing products")
    print(f"  ✓ Created: {result['products_created']} products")
    print(f"  ✓ Categories: {result['categories_used']}")
    print(f"  ✓ Brands: {result['brands_used']}")
    print()

    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
