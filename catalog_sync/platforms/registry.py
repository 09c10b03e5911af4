import logging
from typing import Dict, Iterable, List, Optional, Union

from catalog_sync.adapters import resolve_platform
from catalog_sync.db.models import Platform
from catalog_sync.exceptions import UnsupportedPlatformError
from catalog_sync.platforms.base import PlatformClient
from catalog_sync.platforms.shopify import ShopifyClient
from catalog_sync.platforms.vtex import VtexClient

logger = logging.getLogger(__name__)

class PlatformRegistry:
    """Explicit mapping of platform tag to client, built once at startup"""

    def __init__(self, clients: Optional[Iterable[PlatformClient]] = None):
        self._clients: Dict[Platform, PlatformClient] = {}
        for client in clients or []:
            self.register(client)

    @classmethod
    def from_settings(cls) -> 'PlatformRegistry':
        """Registry with a client for every supported platform, configured from settings"""
        return cls([ShopifyClient(), VtexClient()])

    def register(self, client: PlatformClient) -> None:
        if client.platform in self._clients:
            logger.warning(f"Replacing client registered for {client.platform.value}")
        self._clients[client.platform] = client

    def get(self, platform: Union[Platform, str]) -> PlatformClient:
        """Client for ``platform``.

        Raises:
            UnsupportedPlatformError: the tag is unknown or has no client.
        """
        client = self._clients.get(resolve_platform(platform))
        if client is None:
            raise UnsupportedPlatformError(platform)
        return client

    def platforms(self) -> List[Platform]:
        return list(self._clients)

    def __contains__(self, platform) -> bool:
        try:
            self.get(platform)
        except UnsupportedPlatformError:
            return False
        return True
