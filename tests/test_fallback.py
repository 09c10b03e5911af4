import pytest

from catalog_sync.utils.fallback import dig, first_of, is_not_none, is_present, to_number


def test_first_of_returns_first_present_value():
    payload = {'title': '', 'name': 'Shirt', 'productName': 'Other'}
    extractors = [lambda p: p['title'], lambda p: p['name'], lambda p: p['productName']]
    assert first_of(payload, extractors, default='') == 'Shirt'


def test_first_of_treats_missing_shapes_as_no_value():
    extractors = [lambda p: p['sellers'][0]['commertialOffer']['Price'], lambda p: p.price]
    assert first_of({'sellers': []}, extractors, default=0) == 0
    assert first_of(None, extractors, default=0) == 0
    assert first_of('not a dict', extractors, default=0) == 0


def test_first_of_with_is_not_none_keeps_zero():
    extractors = [lambda v: v['inventory_quantity'], lambda v: v['fallback']]
    payload = {'inventory_quantity': 0, 'fallback': 5}
    assert first_of(payload, extractors, accept=is_not_none) == 0
    assert first_of(payload, extractors) == 5


@pytest.mark.parametrize('value', [None, '', [], {}, 0, False])
def test_is_present_rejects_empty_values(value):
    assert not is_present(value)


def test_dig_walks_dicts_and_lists():
    payload = {'items': [{'images': [{'imageUrl': 'a.jpg'}]}]}
    assert dig(payload, 'items', 0, 'images', 0, 'imageUrl') == 'a.jpg'
    assert dig(payload, 'items', 3, 'images') is None
    assert dig(None, 'items') is None


@pytest.mark.parametrize('value, expected', [
    ('19.99', 19.99),
    (' 5 ', 5.0),
    (7, 7),
    (2.5, 2.5),
    ('abc', None),
    ('', None),
    (None, None),
    (True, None),
    (float('nan'), None),
])
def test_to_number(value, expected):
    assert to_number(value) == expected


def test_to_number_default():
    assert to_number('n/a', default=0) == 0
