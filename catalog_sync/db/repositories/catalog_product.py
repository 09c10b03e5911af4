import logging
from typing import Optional, List

from supabase import AsyncClient

from catalog_sync import settings
from catalog_sync.db.repositories.base import BaseRepository
from catalog_sync.db.models import CatalogProductRecord

logger = logging.getLogger(__name__)

# Search operator names accepted by search()
PRICE_OPERATORS = {
    'equal': 'eq',
    'less': 'lt',
    'more': 'gt',
}

class CatalogProductRepository(BaseRepository[CatalogProductRecord]):
    """Store gateway for persisted catalog products and variants"""

    def __init__(self, supabase: AsyncClient, table_name: Optional[str] = None):
        super().__init__(supabase, table_name or settings.PRODUCTS_TABLE, CatalogProductRecord)

    async def find_by_external_id(self, external_id: str, is_root: bool = True) -> Optional[CatalogProductRecord]:
        """Get the record with this platform id inside one scope.

        Root lookups only match rows without a parent, child lookups only
        match rows with one, so a product and a variant sharing a platform id
        never shadow each other.
        """
        query = self.supabase.table(self.table_name)\
            .select("*")\
            .eq("external_id", str(external_id))
        if is_root:
            query = query.is_("parent_id", "null")
        else:
            query = query.not_.is_("parent_id", "null")
        result = await self._execute(query.limit(1))
        return CatalogProductRecord.from_dict(result.data[0]) if result.data else None

    async def insert(self, record: CatalogProductRecord) -> CatalogProductRecord:
        """Insert a new row"""
        saved = await self.create(record)
        logger.debug(
            f"Inserted {'root' if record.init else 'child'} {record.external_id} "
            f"as {saved.product_id}"
        )
        return saved

    async def search(
        self,
        search_text: Optional[str] = None,
        price: Optional[float] = None,
        operator: Optional[str] = None,
    ) -> List[CatalogProductRecord]:
        """Search rows by case-insensitive text match and price comparison.

        ``operator`` is one of ``equal``, ``less`` or ``more`` and defaults to
        ``equal`` when only a price is given.
        """
        query = self.supabase.table(self.table_name).select("*")
        if search_text:
            query = query.ilike("search_text", f"%{search_text}%")
        if price is not None:
            method = PRICE_OPERATORS.get(operator or 'equal')
            if method is None:
                raise ValueError(f"Unknown price operator: {operator}")
            query = getattr(query, method)("price", price)
        result = await self._execute(query)
        return [CatalogProductRecord.from_dict(item) for item in result.data]
