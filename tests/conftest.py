import pytest

from pveapi import ProxmoxClient

from fakes import TICKET_PAYLOAD, TICKET_URL, FakeTransport


@pytest.fixture
def transport():
    fake = FakeTransport()
    fake.add_data('POST', TICKET_URL, TICKET_PAYLOAD)
    return fake


@pytest.fixture
def client(transport):
    return ProxmoxClient('pve.example.com:8006', 'root', 'secret', transport=transport)
