import logging
from typing import Any, Dict, List, Optional, Sequence

from loan_portal.database.models import Service
from loan_portal.database.repository import DocumentRepository
from loan_portal.service_catalog import SERVICE_CATALOG

logger = logging.getLogger(__name__)


class CatalogService:
    """Read access to the loan products (services) offered by the portal."""

    def __init__(self, repository):
        self.repository = repository

    # Returns every stored service in storage order
    async def list_services(self) -> List[Dict[str, Any]]:
        services = await self.repository.find_all()
        logger.debug("Fetched %d services", len(services))
        return services

    # Returns the first service with a matching type, or None
    async def get_service_by_type(self, service_type: str) -> Optional[Dict[str, Any]]:
        service = await self.repository.find_one({"type": service_type})
        if not service:
            logger.info("No service found for type: %s", service_type)
        return service

    # Inserts the default catalog when no services are stored yet
    async def seed_services(self, catalog: Sequence[Dict[str, Any]] = SERVICE_CATALOG) -> int:
        existing = await self.repository.find_all()
        if existing:
            logger.info("Services collection already holds %d records, skipping seed", len(existing))
            return 0

        for entry in catalog:
            await self.repository.insert(dict(entry))
        logger.info("Seeded %d services", len(catalog))
        return len(catalog)


catalog_service = CatalogService(DocumentRepository(Service))
