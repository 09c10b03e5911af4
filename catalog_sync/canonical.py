"""
Canonical product shape returned to API callers.

The transform is total: any payload, however sparse, produces a Product, with
missing numbers resolved to 0 and missing strings to "". It never touches the
store, and ``product_id`` is a fresh identifier for each response, unrelated
to the persisted ``product_id``.
"""
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List

from catalog_sync.utils.fallback import dig, first_of, is_not_none, to_number

# Ordered extractors for each canonical attribute

PRODUCT_ID_FIELDS = [
    lambda p: p['id'],
    lambda p: p['productId'],
]

PRODUCT_IMAGE_FIELDS = [
    lambda p: p['image']['src'],
    lambda p: p['items'][0]['images'][0]['imageUrl'],
]

PRODUCT_TITLE_FIELDS = [
    lambda p: p['title'],
    lambda p: p['name'],
    lambda p: p['productName'],
]

PRODUCT_PRICE_FIELDS = [
    lambda p: p['price'],
]

PRODUCT_VARIANT_LIST_FIELDS = [
    lambda p: p['variants'],
    lambda p: p['items'],
]

VARIANT_ID_FIELDS = [
    lambda v: v['id'],
    lambda v: v['itemId'],
]

VARIANT_INVENTORY_FIELDS = [
    lambda v: v['inventory_quantity'],
    lambda v: v['sellers'][0]['commertialOffer']['AvailableQuantity'],
]

VARIANT_TITLE_FIELDS = [
    lambda v: v['title'],
    lambda v: v['name'],
]

VARIANT_PRICE_FIELDS = [
    lambda v: v['price'],
    lambda v: v['sellers'][0]['commertialOffer']['Price'],
]


@dataclass
class SelectOption:
    name: str = ''
    value: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'value': self.value}


@dataclass
class Variant:
    legacy_resource_id: Any = ''
    inventory_quantity: Any = 0
    select_options: List[SelectOption] = field(default_factory=list)
    display_name: str = ''
    price: Any = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'legacyResourceId': self.legacy_resource_id,
            'inventoryQuantity': self.inventory_quantity,
            'selectOptions': [option.to_dict() for option in self.select_options],
            'displayName': self.display_name,
            'price': self.price,
        }


@dataclass
class Product:
    external_id: Any = ''
    product_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    sku: Any = ''
    image: str = ''
    name: str = ''
    short_description: str = ''
    long_description: str = ''
    price: Any = 0
    variants: List[Variant] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'external_id': self.external_id,
            'product_id': self.product_id,
            'sku': self.sku,
            'image': self.image,
            'name': self.name,
            'short_description': self.short_description,
            'long_description': self.long_description,
            'price': self.price,
            'variants': [variant.to_dict() for variant in self.variants],
        }


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def to_canonical_options(options: Any) -> List[SelectOption]:
    """Zip each declared option name with the first of its declared values"""
    return [
        SelectOption(
            name=first_of(option, [lambda o: o['name']], default=''),
            value=first_of(option, [lambda o: o['values'][0]], default=''),
        )
        for option in _as_list(options)
    ]


def to_canonical_variants(variants: Any, options: Any) -> List[Variant]:
    """Map every raw variant on its own, sharing the product-level options.

    Options belong to the product, so each variant gets its own copy of the
    full option list even when the payload nests values per variant.
    """
    result = []
    for variant in _as_list(variants):
        result.append(Variant(
            legacy_resource_id=first_of(variant, VARIANT_ID_FIELDS, default=''),
            inventory_quantity=to_number(
                first_of(variant, VARIANT_INVENTORY_FIELDS, default=0, accept=is_not_none),
                default=0,
            ),
            select_options=to_canonical_options(options),
            display_name=first_of(variant, VARIANT_TITLE_FIELDS, default=''),
            price=to_number(first_of(variant, VARIANT_PRICE_FIELDS, default=0), default=0),
        ))
    return result


def to_canonical_product(raw: Any) -> Product:
    """Build the canonical Product for one raw platform payload"""
    title = first_of(raw, PRODUCT_TITLE_FIELDS, default='')
    external_id = first_of(raw, PRODUCT_ID_FIELDS, default='')
    image = first_of(raw, PRODUCT_IMAGE_FIELDS, default='')
    return Product(
        external_id=external_id,
        sku=external_id,
        image=image if isinstance(image, str) else '',
        name=title,
        short_description=title,
        long_description=title,
        price=to_number(first_of(raw, PRODUCT_PRICE_FIELDS, default=0), default=0),
        variants=to_canonical_variants(
            first_of(raw, PRODUCT_VARIANT_LIST_FIELDS, default=[]),
            dig(raw, 'options'),
        ),
    )
