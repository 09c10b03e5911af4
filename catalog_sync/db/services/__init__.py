from catalog_sync.db.services.reconciliation_service import ReconciliationService, ReconciliationSummary
from catalog_sync.db.services.catalog_service import CatalogService

__all__ = [
    'ReconciliationService',
    'ReconciliationSummary',
    'CatalogService',
]
