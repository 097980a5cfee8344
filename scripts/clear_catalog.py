#!/usr/bin/env python3
"""Clear product catalog script.

Deletes every product from the products table.

Usage:
    python scripts/clear_catalog.py
    python scripts/clear_catalog.py --yes
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from catalog_service.catalog.service import CatalogService
from catalog_service.infrastructure.config import settings
from catalog_service.infrastructure.database import async_session_factory, dispose_engine
from catalog_service.infrastructure.logging import configure_logging


async def clear() -> int:
    """Delete all products.

    Returns:
        Number of deleted products.
    """
    async with async_session_factory() as session:
        return await CatalogService(session).clear_catalog()


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Delete all products from the catalog",
    )
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Skip the confirmation prompt",
    )

    args = parser.parse_args()
    configure_logging(settings.log_level, "console")

    if not args.yes:
        answer = input("This deletes every product. Continue? [y/N] ")
        if answer.strip().lower() not in ("y", "yes"):
            print("Aborted.")
            return

    try:
        deleted = await clear()
    finally:
        await dispose_engine()

    print(f"  ✓ Deleted: {deleted} products")


if __name__ == "__main__":
    asyncio.run(main())
