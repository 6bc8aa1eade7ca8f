#!/usr/bin/env python3
"""
Иерархия ресурсов Proxmox API: клиент -> нода -> VM

Ресурсы - легкие объекты без состояния (кроме кеша конфигурации),
путь вычисляется обходом родителей:

    client = ProxmoxClient("pve.example.com:8006", "root", "secret")
    vm = client.node("pve1").vm(100)
    vm.path()       # '/nodes/pve1/qemu/100'
    vm.get('status/current')
    vm.create('status/start')
"""

from typing import Any, Mapping, Optional, Union

from .cache import ConfigCacheMixin
from .config import ClientConfig, ConnectionProfile
from .dispatcher import RequestDispatcher
from .session import Session
from ..utils.validator import Validator


class ProxmoxClient(RequestDispatcher):
    """Корневой ресурс API, создает сессию и сразу аутентифицируется"""

    def __init__(self, host: str, user: str, password: str,
                 config: Union[ClientConfig, Mapping[str, Any], None] = None,
                 transport: Optional[Any] = None):
        """
        Инициализация клиента Proxmox

        Args:
            host: Адрес сервера Proxmox (например, "192.168.1.100:8006")
            user: Имя пользователя без realm (например, "root")
            password: Пароль пользователя
            config: ClientConfig или словарь опций
                (realm, verify_ssl, proxy, proxy_auth, timeout)
            transport: Транспорт вместо requests.Session
        """
        self._session = Session(host, config, transport)
        self._session.authenticate(user, password, self._session.config.realm)

    @classmethod
    def from_profile(cls, profile: ConnectionProfile, transport: Optional[Any] = None) -> 'ProxmoxClient':
        """Создание клиента из профиля подключения"""
        return cls(profile.host, profile.user, profile.password, profile.config, transport)

    def client(self) -> 'ProxmoxClient':
        return self

    def session(self) -> Session:
        return self._session

    def path(self) -> str:
        return ''

    def node(self, name: str) -> 'ProxmoxNode':
        return ProxmoxNode(self, name)

    def request(self, method: str, action: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self._session.request(method, action, params)

    def __repr__(self) -> str:
        return f"ProxmoxClient(host={self._session.host!r}, username={self._session.username!r})"


class ProxmoxNode(ConfigCacheMixin, RequestDispatcher):
    """Нода кластера"""

    def __init__(self, client: ProxmoxClient, name: str):
        validator = Validator()
        if not validator.validate_node_name(name):
            raise ValueError('; '.join(validator.get_errors()))

        self._client = client
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def client(self) -> ProxmoxClient:
        return self._client

    def path(self) -> str:
        return f"{self._client.path()}/nodes/{self._name}"

    def vm(self, vmid: Union[int, str]) -> 'ProxmoxVM':
        return ProxmoxVM(self, vmid)

    def __repr__(self) -> str:
        return f"ProxmoxNode(name={self._name!r})"


class ProxmoxVM(ConfigCacheMixin, RequestDispatcher):
    """Виртуальная машина QEMU на ноде"""

    def __init__(self, node: ProxmoxNode, vmid: Union[int, str]):
        validator = Validator()
        if not validator.validate_vmid(vmid):
            raise ValueError('; '.join(validator.get_errors()))

        self._node = node
        self._id = int(vmid)

    @property
    def vmid(self) -> int:
        return self._id

    @property
    def node(self) -> ProxmoxNode:
        return self._node

    def client(self) -> ProxmoxClient:
        return self._node.client()

    def path(self) -> str:
        return f"{self._node.path()}/qemu/{self._id}"

    def __repr__(self) -> str:
        return f"ProxmoxVM(node={self._node.name!r}, vmid={self._id})"
