"""
Тестирование валидатора данных подключения и идентификаторов
"""

import pytest

from pveapi.utils.validator import Validator


@pytest.mark.parametrize('connection', [
    {'host': '192.168.1.100:8006', 'user': 'root', 'password': 'secret'},
    {'host': 'pve.example.com', 'user': 'admin@pve', 'password': 'secret'},
    {'host': 'pve1', 'user': 'deploy', 'password': 'secret'},
])
def test_valid_connections(connection):
    validator = Validator()

    assert validator.validate_connection(connection)
    assert not validator.has_errors()


@pytest.mark.parametrize('connection', [
    {'host': '192.168.1.100:99999', 'user': 'root', 'password': 'secret'},
    {'host': '192.168.1.100:8006', 'user': 'invalid@user@domain', 'password': 'secret'},
    {'host': '192.168.1.100:8006', 'user': 'root', 'password': ''},
    {'host': '192.168.1.100:8006', 'user': 'root'},
])
def test_invalid_connections(connection):
    validator = Validator()

    assert not validator.validate_connection(connection)
    assert validator.get_errors()


@pytest.mark.parametrize('vmid', [100, '100', 1, 999999999])
def test_valid_vmid(vmid):
    assert Validator().validate_vmid(vmid)


@pytest.mark.parametrize('vmid', [0, -5, '1e3', True, None, 2.0])
def test_invalid_vmid(vmid):
    validator = Validator()

    assert not validator.validate_vmid(vmid)
    assert len(validator.get_errors()) == 1


def test_node_name():
    validator = Validator()

    assert validator.validate_node_name('pve-1.lab')
    assert not validator.validate_node_name('../pve')
