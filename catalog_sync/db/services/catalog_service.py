import logging
from typing import Any, Dict, List, Optional, Union

from catalog_sync.canonical import to_canonical_product
from catalog_sync.db.models import Platform
from catalog_sync.db.repositories import CatalogProductRepository
from catalog_sync.db.services.reconciliation_service import ReconciliationService
from catalog_sync.platforms import PlatformRegistry
from catalog_sync.utils.sentry import monitor_errors

logger = logging.getLogger(__name__)

def build_response(items: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Response envelope shared by every catalog operation"""
    return {
        "success": True,
        "message": "OK",
        "result": {
            "count": len(items),
            "items": items,
        },
    }

class CatalogService:
    """Service for ingesting platform catalogs and reading stored products"""

    def __init__(self, repository: CatalogProductRepository, registry: PlatformRegistry):
        self.repository = repository
        self.registry = registry
        self.reconciliation = ReconciliationService(repository, registry)

    @monitor_errors
    async def ingest(self, platform: Union[Platform, str]) -> Dict[str, Any]:
        """Fetch a platform's catalog, store what is new and return it in canonical form.

        The returned items describe the fetched payloads, not the stored rows:
        products that were already stored are still listed.
        """
        client = self.registry.get(platform)
        raw_products = await client.fetch_products()
        await self.reconciliation.reconcile(raw_products, client.platform)
        items = [to_canonical_product(raw).to_dict() for raw in raw_products]
        return build_response(items)

    async def list_products(self) -> Dict[str, Any]:
        records = await self.repository.list_all()
        return build_response([record.to_dict() for record in records])

    async def search_products(
        self,
        search_text: Optional[str] = None,
        price: Optional[float] = None,
        operator: Optional[str] = None,
    ) -> Dict[str, Any]:
        records = await self.repository.search(search_text, price, operator)
        logger.debug(f"Search matched {len(records)} products")
        return build_response([record.to_dict() for record in records])
