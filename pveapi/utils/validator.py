#!/usr/bin/env python3
"""
Validator - валидация данных подключения и идентификаторов ресурсов

Проверяет профили подключения к Proxmox, имена нод и VMID
до того, как они попадут в путь запроса.
"""

import re
import ipaddress
from typing import Dict, List, Any, Union


class Validator:
    """
    Класс для валидации данных клиента Proxmox API

    Поддерживает валидацию:
    - Хостов (IP или домен, опционально с портом)
    - Пользователей Proxmox (user или user@realm)
    - Имен нод
    - VM ID
    """

    PROXMOX_USER_PATTERN = re.compile(r'^[a-zA-Z0-9._-]+(@[a-zA-Z0-9._-]+)?$')
    NODE_NAME_PATTERN = re.compile(r'^[a-zA-Z0-9._-]+$')
    HOSTNAME_PATTERN = re.compile(r'^[a-zA-Z0-9]([a-zA-Z0-9-]*[a-zA-Z0-9])?(\.[a-zA-Z0-9]([a-zA-Z0-9-]*[a-zA-Z0-9])?)*$')

    PORT_RANGE = range(1, 65536)

    def __init__(self):
        """Инициализация валидатора"""
        self.errors = []

    def validate_connection(self, connection_data: Dict[str, Any]) -> bool:
        """
        Валидация данных подключения к Proxmox

        Args:
            connection_data: Данные подключения (host, user, password)

        Returns:
            True если валидация прошла успешно
        """
        self.errors = []

        for field in ('host', 'user', 'password'):
            if field not in connection_data:
                self.errors.append(f"Отсутствует обязательное поле: {field}")
            elif not connection_data[field]:
                self.errors.append(f"Пустое значение поля: {field}")

        if self.errors:
            return False

        if not self._validate_host(str(connection_data['host'])):
            self.errors.append(f"Некорректный хост: {connection_data['host']}")

        if not self.PROXMOX_USER_PATTERN.match(str(connection_data['user'])):
            self.errors.append(f"Некорректный пользователь: {connection_data['user']}")

        return not self.errors

    def _validate_host(self, host: str) -> bool:
        """Валидация хоста Proxmox"""
        if ':' in host:
            host_part, port_part = host.rsplit(':', 1)
            try:
                if int(port_part) not in self.PORT_RANGE:
                    return False
            except ValueError:
                return False
        else:
            host_part = host

        try:
            ipaddress.ip_address(host_part)
            return True
        except ValueError:
            return bool(self.HOSTNAME_PATTERN.match(host_part))

    def validate_node_name(self, name: Any) -> bool:
        """Валидация имени ноды"""
        self.errors = []
        if not isinstance(name, str) or not self.NODE_NAME_PATTERN.match(name):
            self.errors.append(f"Некорректное имя ноды: {name!r}")
        return not self.errors

    def validate_vmid(self, vmid: Union[int, str]) -> bool:
        """Валидация VMID: положительное целое число"""
        self.errors = []
        if isinstance(vmid, bool) or not isinstance(vmid, (int, str)):
            self.errors.append(f"Некорректный VMID: {vmid!r}")
            return False
        if isinstance(vmid, str) and not vmid.isdigit():
            self.errors.append(f"Некорректный VMID: {vmid!r}")
            return False
        if int(vmid) <= 0:
            self.errors.append(f"VMID должен быть положительным: {vmid!r}")
        return not self.errors

    def get_errors(self) -> List[str]:
        """Получить список ошибок валидации"""
        return self.errors.copy()

    def has_errors(self) -> bool:
        """Проверить наличие ошибок"""
        return len(self.errors) > 0
