#!/usr/bin/env python3
"""
RequestDispatcher - общий контракт запросов для ресурсов Proxmox

Каждый ресурс (клиент, нода, VM) предоставляет свой путь и ссылку
на клиента; методы get/create/set/delete строят полный путь и
передают запрос в сессию.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Mapping, Optional

if TYPE_CHECKING:
    from .resources import ProxmoxClient
    from .session import Session


def normalize_path(base: str, action: str) -> str:
    """Соединение пути ресурса и действия ровно одним слешем"""
    return base.rstrip('/') + '/' + action.lstrip('/')


class RequestDispatcher(ABC):
    """Базовый класс ресурсов с унифицированными HTTP-глаголами"""

    @abstractmethod
    def client(self) -> 'ProxmoxClient':
        """Корневой клиент"""
        pass

    @abstractmethod
    def path(self) -> str:
        """Путь ресурса относительно корня API"""
        pass

    def session(self) -> 'Session':
        return self.client().session()

    def _path_for(self, action: str) -> str:
        return normalize_path(self.path(), action)

    def get(self, action: str = '', params: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client().request('GET', self._path_for(action), params)

    def create(self, action: str = '', params: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client().request('POST', self._path_for(action), params)

    def set(self, action: str = '', params: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client().request('PUT', self._path_for(action), params)

    def delete(self, action: str = '') -> Any:
        return self.client().request('DELETE', self._path_for(action))
