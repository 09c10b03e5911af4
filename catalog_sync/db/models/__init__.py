from catalog_sync.db.models.base import BaseModel
from catalog_sync.db.models.enums import Platform
from catalog_sync.db.models.catalog_product import CatalogProductRecord

__all__ = [
    'BaseModel',
    'Platform',
    'CatalogProductRecord',
]
