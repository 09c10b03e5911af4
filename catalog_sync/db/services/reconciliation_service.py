"""
Reconciliation of raw platform products against the products table.

For each product, in input order, the root row is inserted unless a root row
with the same external id already exists; then each of its variants gets a
child row unless one already exists. Existing rows are never updated, so
re-ingesting the same catalog is a no-op.

Every lookup and insert is awaited before the next one starts: a variant's
parent is read back from the store and must already be committed. Storage
errors propagate immediately and nothing already written is rolled back.
"""
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from catalog_sync.db.models import CatalogProductRecord, Platform
from catalog_sync.db.repositories import CatalogProductRepository
from catalog_sync.exceptions import DuplicateRecordError
from catalog_sync.platforms import PlatformClient, PlatformRegistry
from catalog_sync.utils.fallback import first_of
from catalog_sync.utils.sentry import add_breadcrumb

logger = logging.getLogger(__name__)

CHILD_LIST_FIELDS = [
    lambda p: p['items'],
    lambda p: p['variants'],
]


def child_payloads(raw: Any) -> List[Any]:
    children = first_of(raw, CHILD_LIST_FIELDS, default=[])
    return children if isinstance(children, list) else []


@dataclass
class ReconciliationSummary:
    """Counts of what one reconcile call wrote and skipped"""
    roots_inserted: int = 0
    roots_skipped: int = 0
    children_inserted: int = 0
    children_skipped: int = 0
    orphans_inserted: int = 0

    @property
    def inserted(self) -> int:
        return self.roots_inserted + self.children_inserted


class ReconciliationService:
    """Writes the product/variant tree of a platform catalog to the store"""

    def __init__(self, repository: CatalogProductRepository, registry: PlatformRegistry):
        self.repository = repository
        self.registry = registry

    async def reconcile(self, raw_products: List[Any], platform: Union[Platform, str]) -> ReconciliationSummary:
        """Insert every product and variant of ``raw_products`` not already stored.

        Raises:
            UnsupportedPlatformError: before any store access, for an unknown tag.
            StorageError: the first failing lookup or insert, unchanged.
        """
        client = self.registry.get(platform)
        summary = ReconciliationSummary()
        add_breadcrumb(
            message=f"Reconciling {len(raw_products)} {client.platform.value} products",
            category="reconcile",
        )

        for raw in raw_products:
            await self._reconcile_product(raw, client, summary)

        logger.info(
            f"Reconciled {len(raw_products)} {client.platform.value} products: "
            f"{summary.roots_inserted} inserted, {summary.roots_skipped} skipped; "
            f"variants {summary.children_inserted} inserted, {summary.children_skipped} skipped"
        )
        return summary

    async def _reconcile_product(self, raw: Any, client: PlatformClient, summary: ReconciliationSummary) -> None:
        # The adapted row carries the external id, so lookups and stored rows
        # always agree on the key.
        record = client.to_persisted_fields(raw)
        external_id = record.external_id
        if external_id is None:
            logger.warning(f"Skipping {client.platform.value} product without an id")
            return

        existing = await self.repository.find_by_external_id(external_id, is_root=True)
        if existing:
            logger.debug(f"Product {external_id} already stored as {existing.product_id}")
            summary.roots_skipped += 1
        elif await self._insert(record):
            summary.roots_inserted += 1
        else:
            summary.roots_skipped += 1

        children = child_payloads(raw)
        if not children:
            return

        # Read the root back whether or not it was just inserted: its generated
        # id and stored image are what the children link to and inherit.
        parent = await self.repository.find_by_external_id(external_id, is_root=True)
        if parent is None:
            logger.warning(f"Parent {external_id} not found, its variants are stored without a parent")
        parent_id = parent.product_id if parent else None
        inherited_image = (parent.image or '') if parent else ''

        for child in children:
            await self._reconcile_child(child, client, parent_id, inherited_image, summary)

    async def _reconcile_child(
        self,
        raw: Any,
        client: PlatformClient,
        parent_id: Optional[str],
        inherited_image: str,
        summary: ReconciliationSummary,
    ) -> None:
        record = client.to_persisted_fields(
            raw,
            is_child=True,
            parent_id=parent_id,
            inherited_image=inherited_image,
        )
        external_id = record.external_id
        if external_id is None:
            logger.warning(f"Skipping {client.platform.value} variant without an id")
            return

        existing = await self.repository.find_by_external_id(external_id, is_root=False)
        if existing:
            logger.debug(f"Variant {external_id} already stored as {existing.product_id}")
            summary.children_skipped += 1
            return

        if await self._insert(record):
            summary.children_inserted += 1
            if parent_id is None:
                summary.orphans_inserted += 1
        else:
            summary.children_skipped += 1

    async def _insert(self, record: CatalogProductRecord) -> bool:
        """Insert ``record``; False when a concurrent ingestion stored it first"""
        try:
            await self.repository.insert(record)
        except DuplicateRecordError:
            logger.info(
                f"{'Product' if record.init else 'Variant'} {record.external_id} "
                "was inserted concurrently, skipping"
            )
            return False
        return True
