import json

import pytest

from catalog_sync import cli


class StubService:
    def __init__(self):
        self.calls = []

    async def ingest(self, platform):
        self.calls.append(('ingest', platform))
        return {'success': True, 'message': 'OK', 'result': {'count': 0, 'items': []}}

    async def list_products(self):
        self.calls.append(('list',))
        return {'success': True, 'message': 'OK', 'result': {'count': 0, 'items': []}}

    async def search_products(self, search_text, price, operator):
        self.calls.append(('search', search_text, price, operator))
        return {'success': True, 'message': 'OK', 'result': {'count': 0, 'items': []}}


@pytest.mark.parametrize('argv, expected', [
    (['ingest', 'shopify'], ('ingest', 'shopify')),
    (['list'], ('list',)),
    (['search', '--text', 'lamp', '--price', '10', '--operator', 'less'], ('search', 'lamp', 10.0, 'less')),
])
async def test_run_dispatches_commands(argv, expected):
    service = StubService()

    response = await cli.run(cli.build_parser().parse_args(argv), service=service)

    assert service.calls == [expected]
    assert response['success'] is True


def test_parser_rejects_unknown_operator():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(['search', '--operator', 'between'])


def test_main_prints_error_and_fails(monkeypatch, capsys):
    async def failing_run(args):
        raise ValueError('Missing required environment variables.')

    monkeypatch.setattr(cli, 'setup_logging', lambda **kwargs: None)
    monkeypatch.setattr(cli, 'init_sentry', lambda **kwargs: False)
    monkeypatch.setattr(cli, 'run', failing_run)

    assert cli.main(['list']) == 1
    assert json.loads(capsys.readouterr().out) == {'error': 'Missing required environment variables.'}
