from typing import Any, Dict, List, Optional

import httpx

from catalog_sync import settings
from catalog_sync.db.models import Platform
from catalog_sync.platforms.base import PlatformClient

# The search endpoint serves at most 50 products per request and refuses
# offsets past 2500
PAGE_SIZE = 50
MAX_OFFSET = 2500

class VtexClient(PlatformClient):
    """Client for the VTEX catalog system product search endpoint"""

    platform = Platform.VTEX

    def __init__(
        self,
        account_name: Optional[str] = None,
        app_key: Optional[str] = None,
        app_token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(timeout=timeout, transport=transport)
        self.account_name = account_name or settings.VTEX_ACCOUNT_NAME
        self.app_key = app_key or settings.VTEX_APP_KEY
        self.app_token = app_token or settings.VTEX_APP_TOKEN

    def products_url(self) -> str:
        return (
            f"https://{self.account_name}.vtexcommercestable.com.br"
            "/api/catalog_system/pub/products/search"
        )

    def headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "X-VTEX-API-AppKey": self.app_key or "",
            "X-VTEX-API-AppToken": self.app_token or "",
        }

    def missing_settings(self) -> List[str]:
        missing = []
        if not self.account_name:
            missing.append("VTEX_ACCOUNT_NAME")
        if not self.app_key:
            missing.append("VTEX_APP_KEY")
        if not self.app_token:
            missing.append("VTEX_APP_TOKEN")
        return missing

    def first_page_params(self) -> Dict[str, Any]:
        return {"_from": 0, "_to": PAGE_SIZE - 1}

    def next_page(self, response, params, page):
        if len(page) < PAGE_SIZE:
            return None
        start = params["_from"] + PAGE_SIZE
        if start >= MAX_OFFSET:
            return None
        return self.products_url(), {"_from": start, "_to": start + PAGE_SIZE - 1}
