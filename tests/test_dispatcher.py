"""
Тестирование нормализации путей и HTTP-глаголов диспетчера
"""

import pytest

from pveapi import normalize_path

BASE_URL = 'https://pve.example.com:8006/api2/json'


@pytest.mark.parametrize('base, action', [
    ('/nodes/pve1', 'config'),
    ('/nodes/pve1/', '/config'),
    ('/nodes/pve1', '/config'),
    ('/nodes/pve1/', 'config'),
])
def test_normalize_path_single_separator(base, action):
    assert normalize_path(base, action) == '/nodes/pve1/config'


def test_normalize_path_empty_action():
    assert normalize_path('/nodes/pve1', '') == '/nodes/pve1/'
    assert normalize_path('/nodes/pve1/', '') == '/nodes/pve1/'


def test_normalize_path_root():
    assert normalize_path('', '/version') == '/version'
    assert normalize_path('', 'cluster/resources') == '/cluster/resources'


def test_verbs_map_to_http_methods(client, transport):
    node = client.node('pve1')
    url = f'{BASE_URL}/nodes/pve1/qemu'

    node.get('qemu')
    node.create('/qemu', {'vmid': 101})
    node.set('qemu', {'name': 'web'})
    node.delete('qemu/')

    methods = [call['method'] for call in transport.calls[1:]]
    assert methods == ['GET', 'POST', 'PUT', 'DELETE']
    assert all(call['url'].startswith(url) for call in transport.calls[1:])


def test_get_sends_query_params(client, transport):
    client.node('pve1').get('qemu', {'full': 1})

    call = transport.calls[-1]
    assert call['params'] == {'full': 1}
    assert 'data' not in call


def test_create_and_set_send_form_params(client, transport):
    vm = client.node('pve1').vm(100)
    vm.create('status/start', {'timeout': 30})
    vm.set('config', {'memory': 2048})

    start, update = transport.calls[-2:]
    assert start['data'] == {'timeout': 30}
    assert update['data'] == {'memory': 2048}
    assert 'params' not in start


def test_delete_sends_no_body(client, transport):
    client.node('pve1').vm(100).delete('snapshot/before-upgrade')

    call = transport.calls[-1]
    assert call['method'] == 'DELETE'
    assert call['url'] == f'{BASE_URL}/nodes/pve1/qemu/100/snapshot/before-upgrade'
    assert 'data' not in call
    assert 'params' not in call


def test_verbs_unwrap_envelope(client, transport):
    url = f'{BASE_URL}/nodes/pve1/status'
    for method in ('GET', 'POST', 'PUT', 'DELETE'):
        transport.add_data(method, url, {'foo': 'bar'})

    node = client.node('pve1')
    assert node.get('status') == {'foo': 'bar'}
    assert node.create('status') == {'foo': 'bar'}
    assert node.set('status') == {'foo': 'bar'}
    assert node.delete('status') == {'foo': 'bar'}


def test_repeated_get_returns_identical_payload(client, transport):
    transport.add_data('GET', f'{BASE_URL}/nodes/pve1/qemu', [{'vmid': 100}, {'vmid': 101}])

    node = client.node('pve1')
    assert node.get('qemu', {'full': True}) == node.get('qemu', {'full': True})
