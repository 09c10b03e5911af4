"""
Platform adapters: map one raw platform payload to a products table row.

Each platform has a root mapping (the product itself) and a child mapping (one
of its variants or SKU items). Both stamp ``created_at`` and ``update_at`` with
the same instant and keep the raw payload verbatim in ``json_object``.
"""
from datetime import datetime
from typing import Any, Callable, Dict, Optional, Union

from catalog_sync.db.models import CatalogProductRecord, Platform
from catalog_sync.exceptions import UnsupportedPlatformError
from catalog_sync.utils.fallback import dig, first_of, to_number

# Ordered id fields per platform and scope. The first present value is the
# row's external_id, which is also the key reconciliation looks rows up by.
VTEX_ROOT_ID_FIELDS = [
    lambda p: p['productId'],
    lambda p: p['id'],
]

VTEX_CHILD_ID_FIELDS = [
    lambda v: v['itemId'],
    lambda v: v['id'],
]

SHOPIFY_ROOT_ID_FIELDS = [
    lambda p: p['id'],
    lambda p: p['productId'],
]

SHOPIFY_CHILD_ID_FIELDS = [
    lambda v: v['id'],
    lambda v: v['itemId'],
]


def _as_id(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _row(raw: dict, *, init: bool, external_id: Any, title: Any, price: Any,
         image: Any, sku: Any, parent_id: Optional[str]) -> CatalogProductRecord:
    now = datetime.now()
    external_id = _as_id(external_id)
    return CatalogProductRecord(
        parent_id=None if init else parent_id,
        init=init,
        external_id=external_id,
        search_text=title,
        name=title,
        price=price,
        image=image,
        json_object=raw,
        created_at=now,
        update_at=now,
        sku=_as_id(sku),
        store_product_id=external_id,
    )


def vtex_fields(raw: dict, is_child: bool, parent_id: Optional[str] = None,
                inherited_image: str = '') -> CatalogProductRecord:
    """VTEX catalog payloads: products carry ``items`` (SKUs) with their own images."""
    if is_child:
        return _row(
            raw,
            init=False,
            external_id=first_of(raw, VTEX_CHILD_ID_FIELDS),
            title=dig(raw, 'name'),
            price=to_number(dig(raw, 'sellers', 0, 'commertialOffer', 'Price')),
            image=dig(raw, 'images', 0, 'imageUrl'),
            sku=None,
            parent_id=parent_id,
        )
    return _row(
        raw,
        init=True,
        external_id=first_of(raw, VTEX_ROOT_ID_FIELDS),
        title=dig(raw, 'productName'),
        price=None,
        image=dig(raw, 'items', 0, 'images', 0, 'imageUrl'),
        sku=None,
        parent_id=None,
    )


def shopify_fields(raw: dict, is_child: bool, parent_id: Optional[str] = None,
                   inherited_image: str = '') -> CatalogProductRecord:
    """Shopify storefront payloads: variants have no image and take the product's."""
    if is_child:
        return _row(
            raw,
            init=False,
            external_id=first_of(raw, SHOPIFY_CHILD_ID_FIELDS),
            title=dig(raw, 'title'),
            price=to_number(dig(raw, 'price')),
            image=inherited_image,
            sku=dig(raw, 'sku'),
            parent_id=parent_id,
        )
    return _row(
        raw,
        init=True,
        external_id=first_of(raw, SHOPIFY_ROOT_ID_FIELDS),
        title=dig(raw, 'title'),
        price=None,
        image=dig(raw, 'image', 'src'),
        sku=None,
        parent_id=None,
    )


ADAPTERS: Dict[Platform, Callable[..., CatalogProductRecord]] = {
    Platform.VTEX: vtex_fields,
    Platform.SHOPIFY: shopify_fields,
}


def resolve_platform(platform: Union[Platform, str]) -> Platform:
    """Turn a platform tag into a Platform, raising UnsupportedPlatformError"""
    try:
        return Platform(platform)
    except ValueError:
        raise UnsupportedPlatformError(platform) from None


def to_persisted_fields(
    raw: dict,
    platform: Union[Platform, str],
    is_child: bool = False,
    parent_id: Optional[str] = None,
    inherited_image: str = '',
) -> CatalogProductRecord:
    """Map ``raw`` to a row for ``platform``.

    Raises:
        UnsupportedPlatformError: no adapter exists for ``platform``.
    """
    adapter = ADAPTERS.get(resolve_platform(platform))
    if adapter is None:
        raise UnsupportedPlatformError(platform)
    return adapter(raw, is_child, parent_id, inherited_image)
