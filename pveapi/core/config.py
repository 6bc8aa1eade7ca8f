#!/usr/bin/env python3
"""
Конфигурация клиента Proxmox API

ClientConfig - параметры транспорта и аутентификации.
Профили подключений хранятся в YAML-файле вида:

    default:
      host: 192.168.1.100:8006
      user: root
      password: secret
      realm: pam
      verify_ssl: false
      timeout: 10
"""

import logging
from dataclasses import dataclass, field, fields, asdict
from pathlib import Path
from typing import Dict, Any, Optional, Mapping, Union

import yaml

from .exceptions import ConfigurationError
from ..utils.validator import Validator

logger = logging.getLogger(__name__)

DEFAULT_REALM = 'pam'
DEFAULT_TIMEOUT = 5.0


@dataclass
class ClientConfig:
    """Параметры подключения к Proxmox API"""
    realm: str = DEFAULT_REALM
    verify_ssl: bool = True
    proxy: Optional[str] = None
    proxy_auth: Optional[str] = None  # формат: 'username:password'
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
            raise ConfigurationError(f"Некорректный timeout: {self.timeout!r}")
        self.timeout = float(self.timeout)
        if not self.realm:
            raise ConfigurationError("Не указан realm")
        if self.proxy_auth and ':' not in self.proxy_auth:
            raise ConfigurationError("proxy_auth должен иметь формат 'username:password'")

    @classmethod
    def option_names(cls):
        return {f.name for f in fields(cls)}

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]]) -> 'ClientConfig':
        """
        Создание конфигурации из словаря опций

        Args:
            options: Словарь опций (realm, verify_ssl, proxy, proxy_auth, timeout)

        Returns:
            Экземпляр ClientConfig
        """
        options = dict(options or {})
        unknown = set(options) - cls.option_names()
        if unknown:
            raise ConfigurationError(f"Неизвестные опции конфигурации: {', '.join(sorted(unknown))}")
        return cls(**options)

    @classmethod
    def coerce(cls, config: Union['ClientConfig', Mapping[str, Any], None]) -> 'ClientConfig':
        if isinstance(config, cls):
            return config
        return cls.from_mapping(config)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ConnectionProfile:
    """Именованный профиль подключения"""
    name: str
    host: str
    user: str
    password: str = field(repr=False)
    config: ClientConfig = field(default_factory=ClientConfig)
    description: str = ""


def load_connection_profiles(path: Union[str, Path]) -> Dict[str, ConnectionProfile]:
    """
    Загрузка профилей подключений из YAML файла

    Args:
        path: Путь к файлу профилей

    Returns:
        Словарь профилей по имени
    """
    config_file = Path(path)
    if not config_file.exists():
        raise ConfigurationError(f"Файл профилей не найден: {config_file}")

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Некорректный YAML файл {config_file}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Файл {config_file} должен содержать словарь профилей")

    validator = Validator()
    profiles = {}
    for name, entry in raw.items():
        if not isinstance(entry, dict):
            raise ConfigurationError(f"Профиль '{name}' должен быть словарем")

        if not validator.validate_connection(entry):
            raise ConfigurationError(
                f"Профиль '{name}' некорректен: {'; '.join(validator.get_errors())}"
            )

        options = {k: v for k, v in entry.items() if k in ClientConfig.option_names()}
        extra = set(entry) - ClientConfig.option_names() - {'host', 'user', 'password', 'description'}
        if extra:
            raise ConfigurationError(f"Профиль '{name}': неизвестные поля {', '.join(sorted(extra))}")

        profiles[str(name)] = ConnectionProfile(
            name=str(name),
            host=str(entry['host']),
            user=str(entry['user']),
            password=str(entry['password']),
            config=ClientConfig.from_mapping(options),
            description=entry.get('description', '') or '',
        )

    logger.debug(f"Загружено профилей подключений: {len(profiles)} из {config_file}")
    return profiles


def load_connection_profile(path: Union[str, Path], name: str) -> ConnectionProfile:
    """Получение одного профиля подключения по имени"""
    profiles = load_connection_profiles(path)
    if name not in profiles:
        raise ConfigurationError(f"Профиль '{name}' не найден в {path}")
    return profiles[name]
