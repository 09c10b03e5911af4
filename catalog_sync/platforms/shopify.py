from typing import Any, Dict, List, Optional

import httpx

from catalog_sync import settings
from catalog_sync.db.models import Platform
from catalog_sync.platforms.base import PlatformClient

# Largest page the Admin REST API serves
PAGE_SIZE = 250

class ShopifyClient(PlatformClient):
    """Client for the Shopify Admin REST products endpoint"""

    platform = Platform.SHOPIFY

    def __init__(
        self,
        shop: Optional[str] = None,
        access_token: Optional[str] = None,
        api_version: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(timeout=timeout, transport=transport)
        self.shop = shop or settings.SHOPIFY_SHOP
        self.access_token = access_token or settings.SHOPIFY_PASSWORD
        self.api_version = api_version or settings.SHOPIFY_API_VERSION

    def products_url(self) -> str:
        return f"https://{self.shop}.myshopify.com/admin/api/{self.api_version}/products.json"

    def headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "X-Shopify-Access-Token": self.access_token or "",
        }

    def missing_settings(self) -> List[str]:
        missing = []
        if not self.shop:
            missing.append("SHOPIFY_SHOP")
        if not self.access_token:
            missing.append("SHOPIFY_PASSWORD")
        return missing

    def extract_products(self, body: Any) -> List[dict]:
        products = body.get("products") if isinstance(body, dict) else None
        return products or []

    def first_page_params(self) -> Dict[str, Any]:
        return {"limit": PAGE_SIZE}

    def next_page(self, response, params, page):
        # Cursor pagination: the next page URL carries its own page_info and limit
        next_url = response.links.get("next", {}).get("url")
        return (next_url, None) if next_url else None
