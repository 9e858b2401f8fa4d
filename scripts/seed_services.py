"""
Seed the services collection with the default loan product catalog.

Usage: python scripts/seed_services.py
Reads MONGODB_URI / MONGODB_DB_NAME from the environment (or .env).
Does nothing when services are already stored.
"""

import asyncio
import logging

from loan_portal.database.connection import init_db
from loan_portal.services.catalog_service import catalog_service

logger = logging.getLogger("seed_services")


async def main() -> int:
    await init_db()
    inserted = await catalog_service.seed_services()
    logger.info("Inserted %d services", inserted)
    return inserted


if __name__ == "__main__":
    asyncio.run(main())
