import pytest

from catalog_sync.adapters import resolve_platform, to_persisted_fields
from catalog_sync.db.models import Platform
from catalog_sync.exceptions import UnsupportedPlatformError


def test_vtex_root(vtex_product):
    row = to_persisted_fields(vtex_product, 'vtex')

    assert row.init is True
    assert row.parent_id is None
    assert row.external_id == '2000024'
    assert row.store_product_id == '2000024'
    assert row.name == row.search_text == 'Camiseta Basica'
    assert row.price is None
    assert row.image == 'https://vtex.example/p.jpg'
    assert row.sku is None
    assert row.json_object is vtex_product


def test_vtex_child(vtex_product):
    item = vtex_product['items'][1]
    row = to_persisted_fields(item, Platform.VTEX, is_child=True, parent_id='parent-uuid',
                              inherited_image='https://ignored.example/x.png')

    assert row.init is False
    assert row.parent_id == 'parent-uuid'
    assert row.external_id == '2000040'
    assert row.store_product_id == '2000040'
    assert row.name == row.search_text == 'Camiseta Basica M'
    assert row.price == 59.9
    assert row.image == 'https://vtex.example/m.jpg'
    assert row.sku is None


def test_shopify_root(shopify_product):
    row = to_persisted_fields(shopify_product, 'shopify')

    assert row.init is True
    assert row.parent_id is None
    assert row.external_id == '632910392'
    assert row.name == row.search_text == 'IPod Nano - 8GB'
    assert row.price is None
    assert row.image == 'https://cdn.shopify.com/ipod-nano.png'
    assert row.sku is None


def test_shopify_child_takes_inherited_image(shopify_product):
    variant = shopify_product['variants'][0]
    row = to_persisted_fields(variant, 'shopify', is_child=True, parent_id='parent-uuid',
                              inherited_image='https://cdn.shopify.com/ipod-nano.png')

    assert row.init is False
    assert row.parent_id == 'parent-uuid'
    assert row.external_id == '808950810'
    assert row.name == 'Pink'
    assert row.price == 199.0
    assert row.image == 'https://cdn.shopify.com/ipod-nano.png'
    assert row.sku == 'IPOD2008PINK'


def test_timestamps_are_stamped_together(shopify_product):
    row = to_persisted_fields(shopify_product, 'shopify')
    assert row.created_at == row.update_at


def test_each_row_gets_a_new_generated_id(shopify_product):
    first = to_persisted_fields(shopify_product, 'shopify')
    second = to_persisted_fields(shopify_product, 'shopify')
    assert first.product_id != second.product_id


def test_vtex_root_falls_back_to_id():
    row = to_persisted_fields({'id': 'P9', 'productName': 'Mochila'}, 'vtex')
    assert row.external_id == row.store_product_id == 'P9'


def test_shopify_child_falls_back_to_item_id():
    row = to_persisted_fields({'itemId': 'V1'}, 'shopify', is_child=True, parent_id='p')
    assert row.external_id == 'V1'


def test_payload_without_any_id_has_no_external_id():
    assert to_persisted_fields({'title': 'x'}, 'shopify').external_id is None
    assert to_persisted_fields({'name': 'x'}, 'vtex', is_child=True).external_id is None


def test_non_numeric_child_price_is_stored_as_null():
    row = to_persisted_fields({'itemId': '1', 'sellers': []}, 'vtex', is_child=True, parent_id='p')
    assert row.price is None
    assert row.image is None


def test_unsupported_platform_is_an_error():
    with pytest.raises(UnsupportedPlatformError) as exc_info:
        to_persisted_fields({'id': 1}, 'magento')
    assert exc_info.value.platform == 'magento'


def test_resolve_platform():
    assert resolve_platform('shopify') is Platform.SHOPIFY
    assert resolve_platform(Platform.VTEX) is Platform.VTEX
    with pytest.raises(UnsupportedPlatformError):
        resolve_platform('')
