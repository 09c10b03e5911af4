"""Base class for e-commerce platform API clients."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

import httpx

from catalog_sync import settings
from catalog_sync.adapters import to_persisted_fields
from catalog_sync.db.models import CatalogProductRecord, Platform
from catalog_sync.exceptions import PlatformConfigurationError, PlatformFetchError
from catalog_sync.utils.sentry import add_breadcrumb

logger = logging.getLogger(__name__)

class PlatformClient(ABC):
    """Fetches the raw product list of one platform and maps its rows.

    Pagination and authentication are handled here; callers receive the
    complete, ordered list of raw product payloads. Subclasses describe their
    paging scheme through ``first_page_params`` and ``next_page``.
    """

    @property
    @abstractmethod
    def platform(self) -> Platform:
        """Platform tag served by this client. Must be implemented by subclass."""
        pass

    def __init__(self, timeout: Optional[float] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT
        self.transport = transport

    @abstractmethod
    def products_url(self) -> str:
        """URL of the product list endpoint"""
        pass

    @abstractmethod
    def headers(self) -> Dict[str, str]:
        """Authentication and content headers"""
        pass

    @abstractmethod
    def missing_settings(self) -> List[str]:
        """Names of the settings this client needs but does not have"""
        pass

    def extract_products(self, body: Any) -> List[dict]:
        """Pull the product list out of a decoded response body"""
        return body if isinstance(body, list) else []

    def first_page_params(self) -> Dict[str, Any]:
        """Query parameters of the first page request"""
        return {}

    def next_page(
        self, response: httpx.Response, params: Optional[Dict[str, Any]], page: List[dict]
    ) -> Optional[Tuple[str, Optional[Dict[str, Any]]]]:
        """URL and params of the page after ``response``, or None on the last page"""
        return None

    async def fetch_products(self) -> List[dict]:
        """Fetch the raw product payloads, in the order the platform returns them"""
        missing = self.missing_settings()
        if missing:
            raise PlatformConfigurationError(
                f"{self.platform.value} is not configured, missing: {', '.join(missing)}"
            )

        url: Optional[str] = self.products_url()
        params: Optional[Dict[str, Any]] = self.first_page_params()
        add_breadcrumb(
            message=f"Fetching {self.platform.value} products",
            category="platform.fetch",
            data={"url": url},
        )
        products: List[dict] = []
        pages = 0
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                while url:
                    response = await client.get(url, params=params, headers=self.headers())
                    response.raise_for_status()
                    page = self.extract_products(response.json())
                    products.extend(page)
                    pages += 1
                    following = self.next_page(response, params, page)
                    url, params = following if following else (None, None)
        except httpx.HTTPError as e:
            logger.error(f"Error fetching {self.platform.value} products: {e}")
            raise PlatformFetchError(f"{self.platform.value} request failed: {e}") from e
        except ValueError as e:
            logger.error(f"Invalid JSON from {self.platform.value}: {e}")
            raise PlatformFetchError(f"{self.platform.value} returned invalid JSON") from e

        logger.info(f"Fetched {len(products)} products from {self.platform.value} in {pages} page(s)")
        return products

    def to_persisted_fields(
        self,
        raw: dict,
        is_child: bool = False,
        parent_id: Optional[str] = None,
        inherited_image: str = '',
    ) -> CatalogProductRecord:
        """Map a raw payload of this platform to a products row"""
        return to_persisted_fields(raw, self.platform, is_child, parent_id, inherited_image)
