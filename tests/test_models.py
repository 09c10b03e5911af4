from datetime import datetime

from catalog_sync.db.models import CatalogProductRecord


def test_to_dict_keeps_null_columns_and_formats_dates():
    record = CatalogProductRecord(external_id='P1', created_at=datetime(2024, 1, 2, 3, 4, 5))

    data = record.to_dict()

    assert data['parent_id'] is None
    assert data['price'] is None
    assert data['created_at'] == '2024-01-02T03:04:05'
    assert set(data) == {
        'product_id', 'created_at', 'update_at', 'parent_id', 'init', 'external_id',
        'search_text', 'name', 'price', 'image', 'json_object', 'sku', 'store_product_id',
    }


def test_from_dict_ignores_unknown_columns():
    record = CatalogProductRecord.from_dict({
        'product_id': 'abc',
        'external_id': 'P1',
        'created_at': '2024-01-02 03:04:05',
        'unexpected': 1,
    })

    assert record.product_id == 'abc'
    assert record.created_at == datetime(2024, 1, 2, 3, 4, 5)


def test_generated_ids_differ():
    assert CatalogProductRecord().product_id != CatalogProductRecord().product_id
