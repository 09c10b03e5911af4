from catalog_sync.platforms.base import PlatformClient
from catalog_sync.platforms.shopify import ShopifyClient
from catalog_sync.platforms.vtex import VtexClient
from catalog_sync.platforms.registry import PlatformRegistry

__all__ = [
    'PlatformClient',
    'ShopifyClient',
    'VtexClient',
    'PlatformRegistry',
]
