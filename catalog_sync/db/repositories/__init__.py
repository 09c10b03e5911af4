from catalog_sync.db.repositories.base import BaseRepository
from catalog_sync.db.repositories.catalog_product import CatalogProductRepository

__all__ = [
    'BaseRepository',
    'CatalogProductRepository',
]
