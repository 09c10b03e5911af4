import copy
from types import SimpleNamespace

import pytest

from catalog_sync.db.models import CatalogProductRecord
from catalog_sync.exceptions import DuplicateRecordError, StorageError
from catalog_sync.platforms import PlatformRegistry, ShopifyClient, VtexClient


class InMemoryCatalogRepository:
    """Store gateway double keeping rows in a list and recording every call"""

    def __init__(self, rows=None, unique_per_scope=False):
        self.rows = list(rows or [])
        self.calls = []
        self.fail_insert = None
        # Mirrors the partial unique indexes on external_id per parent scope
        self.unique_per_scope = unique_per_scope

    async def find_by_external_id(self, external_id, is_root=True):
        self.calls.append(('find', str(external_id), is_root))
        for row in self.rows:
            if row.external_id == str(external_id) and (row.parent_id is None) == is_root:
                return row
        return None

    async def insert(self, record):
        self.calls.append(('insert', record.external_id, record.init))
        if self.fail_insert and self.fail_insert(record):
            raise StorageError(f"insert of {record.external_id} failed")
        if self.unique_per_scope and record.external_id is not None and any(
            row.external_id == record.external_id
            and (row.parent_id is None) == (record.parent_id is None)
            for row in self.rows
        ):
            raise DuplicateRecordError(f"duplicate key value: {record.external_id}")
        self.rows.append(record)
        return record

    async def list_all(self):
        return list(self.rows)

    async def search(self, search_text=None, price=None, operator=None):
        return [
            row for row in self.rows
            if (not search_text or search_text.lower() in (row.search_text or '').lower())
            and (price is None or row.price == price)
        ]

    def roots(self):
        return [row for row in self.rows if row.init]

    def children(self):
        return [row for row in self.rows if not row.init]


class FakeQuery:
    """Chainable stand-in for a PostgREST request builder"""

    def __init__(self, table, data=None, error=None):
        self.table = table
        self.data = data if data is not None else []
        self.error = error
        self.calls = []

    def _record(self, name, *args):
        self.calls.append((name, *args))
        return self

    def select(self, *columns):
        return self._record('select', *columns)

    def insert(self, data):
        return self._record('insert', data)

    def eq(self, column, value):
        return self._record('eq', column, value)

    def lt(self, column, value):
        return self._record('lt', column, value)

    def gt(self, column, value):
        return self._record('gt', column, value)

    def is_(self, column, value):
        return self._record('is_', column, value)

    def ilike(self, column, pattern):
        return self._record('ilike', column, pattern)

    def limit(self, size):
        return self._record('limit', size)

    @property
    def not_(self):
        return self._record('not_')

    async def execute(self):
        if self.error is not None:
            raise self.error
        return SimpleNamespace(data=copy.deepcopy(self.data))


class FakeSupabase:
    def __init__(self, data=None, error=None):
        self.data = data
        self.error = error
        self.queries = []

    def table(self, name):
        query = FakeQuery(name, data=self.data, error=self.error)
        self.queries.append(query)
        return query


@pytest.fixture
def repository():
    return InMemoryCatalogRepository()


@pytest.fixture
def registry():
    return PlatformRegistry([
        ShopifyClient(shop='demo', access_token='shpat_test'),
        VtexClient(account_name='demo', app_key='key', app_token='token'),
    ])


@pytest.fixture
def shopify_product():
    return {
        'id': 632910392,
        'title': 'IPod Nano - 8GB',
        'image': {'src': 'https://cdn.shopify.com/ipod-nano.png'},
        'options': [
            {'name': 'Color', 'values': ['Pink', 'Red']},
            {'name': 'Size', 'values': ['8GB']},
        ],
        'variants': [
            {'id': 808950810, 'title': 'Pink', 'price': '199.00', 'sku': 'IPOD2008PINK',
             'inventory_quantity': 10},
            {'id': 49148385, 'title': 'Red', 'price': '199.00', 'sku': 'IPOD2008RED',
             'inventory_quantity': 0},
        ],
    }


@pytest.fixture
def vtex_product():
    return {
        'productId': '2000024',
        'productName': 'Camiseta Basica',
        'items': [
            {
                'itemId': '2000039',
                'name': 'Camiseta Basica P',
                'images': [{'imageUrl': 'https://vtex.example/p.jpg'}],
                'sellers': [{'commertialOffer': {'Price': 49.9, 'AvailableQuantity': 7}}],
            },
            {
                'itemId': '2000040',
                'name': 'Camiseta Basica M',
                'images': [{'imageUrl': 'https://vtex.example/m.jpg'}],
                'sellers': [{'commertialOffer': {'Price': '59.9', 'AvailableQuantity': 0}}],
            },
        ],
    }


def make_record(external_id, parent_id=None, image='', **kwargs):
    return CatalogProductRecord(
        external_id=external_id,
        parent_id=parent_id,
        init=parent_id is None,
        image=image,
        **kwargs,
    )
