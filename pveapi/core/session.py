#!/usr/bin/env python3
"""
Session - сессия подключения к Proxmox VE API

Хранит состояние аутентификации (тикет, CSRF токен, пользователь)
и единственный экземпляр транспорта (requests.Session).

Сессия рассчитана на одного владельца: вызовы блокирующие,
повторов запросов нет, таймаут общий для подключения и чтения.
"""

import logging
from typing import Dict, Any, Optional, Mapping, Union
from urllib.parse import urlsplit, urlunsplit, quote

import requests
import urllib3
from urllib3.exceptions import InsecureRequestWarning

from .config import ClientConfig
from .exceptions import (
    AuthenticationError,
    MalformedResponseError,
    RequestError,
    RequestTimeoutError,
)

logger = logging.getLogger(__name__)

REQUEST_METHODS = ('GET', 'POST', 'PUT', 'DELETE')
FORM_METHODS = ('POST', 'PUT')

TICKET_PATH = '/access/ticket'
API_PREFIX = 'api2/json'


class Session:
    """Аутентифицированная сессия к Proxmox API"""

    def __init__(self, host: str,
                 config: Union[ClientConfig, Mapping[str, Any], None] = None,
                 transport: Optional[Any] = None):
        """
        Инициализация сессии

        Args:
            host: Адрес сервера Proxmox (например, "192.168.1.100:8006")
            config: ClientConfig или словарь опций
            transport: Объект с интерфейсом requests.Session.request
                (по умолчанию создается requests.Session)
        """
        self.host = host
        self.config = ClientConfig.coerce(config)

        self._username = ''
        self._ticket = ''
        self._csrf_token = ''

        self.transport = transport if transport is not None else self._build_transport()

    @property
    def username(self) -> str:
        return self._username

    @property
    def ticket(self) -> str:
        return self._ticket

    @property
    def csrf_token(self) -> str:
        return self._csrf_token

    @property
    def is_authenticated(self) -> bool:
        return bool(self._ticket)

    @property
    def base_url(self) -> str:
        return f"https://{self.host}/{API_PREFIX}/"

    def _build_transport(self) -> requests.Session:
        """Создание HTTP транспорта по параметрам конфигурации"""
        session = requests.Session()
        session.verify = self.config.verify_ssl

        proxy_url = self._proxy_url()
        if proxy_url:
            session.proxies = {'http': proxy_url, 'https': proxy_url}

        # Отключаем предупреждения SSL если верификация отключена
        if not self.config.verify_ssl:
            urllib3.disable_warnings(InsecureRequestWarning)

        return session

    def _proxy_url(self) -> Optional[str]:
        """URL прокси с учетными данными proxy_auth"""
        proxy = self.config.proxy
        if not proxy:
            return None
        if '://' not in proxy:
            proxy = f"http://{proxy}"
        if not self.config.proxy_auth:
            return proxy

        user, password = self.config.proxy_auth.split(':', 1)
        parts = urlsplit(proxy)
        netloc = f"{quote(user, safe='')}:{quote(password, safe='')}@{parts.netloc.rsplit('@', 1)[-1]}"
        return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))

    def url_for(self, path: str) -> str:
        return self.base_url + path.lstrip('/')

    def auth_headers(self) -> Dict[str, str]:
        """Заголовки аутентификации для текущего состояния сессии"""
        headers = {}

        if self._ticket:
            headers['Cookie'] = f"PVEAuthCookie={self._ticket}"

        if self._csrf_token:
            headers['CSRFPreventionToken'] = self._csrf_token

        return headers

    def authenticate(self, username: str, password: str, realm: Optional[str] = None) -> None:
        """
        Получение тикета аутентификации

        Args:
            username: Имя пользователя
            password: Пароль пользователя
            realm: Realm аутентификации (по умолчанию из конфигурации)
        """
        realm = realm or self.config.realm
        logger.info(f"🔗 Аутентификация на {self.host} пользователем {username}@{realm}")

        try:
            payload = self.request('POST', TICKET_PATH, {
                'username': username,
                'password': password,
                'realm': realm,
            })
        except MalformedResponseError as e:
            logger.error(f"❌ Некорректный ответ сервера аутентификации {self.host}: {e}")
            raise AuthenticationError(f"Некорректный ответ аутентификации: {e.message}",
                                      e.status_code) from e
        except RequestError as e:
            if e.status_code is None:
                raise
            logger.error(f"❌ Аутентификация на {self.host} отклонена: {e}")
            raise AuthenticationError(f"Аутентификация отклонена: {e.message}", e.status_code) from e

        missing = [key for key in ('username', 'ticket', 'CSRFPreventionToken')
                   if not isinstance(payload, dict) or not payload.get(key)]
        if missing:
            logger.error(f"❌ В ответе аутентификации отсутствуют поля: {', '.join(missing)}")
            raise AuthenticationError(f"В ответе аутентификации отсутствуют поля: {', '.join(missing)}")

        self._username = payload['username']
        self._ticket = payload['ticket']
        self._csrf_token = payload['CSRFPreventionToken']

        logger.info(f"✅ Аутентификация успешна: {self._username}")

    def request(self, method: str, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Выполнение запроса к API

        Args:
            method: HTTP метод (GET, POST, PUT, DELETE)
            path: Путь API относительно /api2/json
            params: Параметры запроса (query для GET, форма для POST/PUT)

        Returns:
            Содержимое поля data ответа
        """
        method = method.upper()
        if method not in REQUEST_METHODS:
            raise ValueError(f"Неподдерживаемый HTTP метод: {method}")

        options = {
            'headers': self.auth_headers(),
            'timeout': self.config.timeout,
        }
        if method == 'GET':
            options['params'] = self._encode_params(params)
        elif method in FORM_METHODS:
            options['data'] = self._encode_params(params)

        url = self.url_for(path)
        logger.debug(f"{method} {url}")

        try:
            response = self.transport.request(method, url, **options)
        except requests.exceptions.RequestException as e:
            if self._is_timeout(e):
                logger.error(f"❌ Таймаут запроса {method} {path} ({self.config.timeout:g} сек)")
                raise RequestTimeoutError(
                    f"Proxmox API request timed out after {self.config.timeout:g} seconds",
                    timeout=self.config.timeout
                ) from e
            logger.error(f"❌ Ошибка запроса {method} {path}: {e}")
            raise RequestError(str(e)) from e

        if not 200 <= response.status_code < 300:
            message = self._error_message(response)
            logger.error(f"❌ {method} {path}: HTTP {response.status_code} {message}")
            raise RequestError(message, status_code=response.status_code)

        return self._parse_response(response)

    @staticmethod
    def _is_timeout(exc: requests.exceptions.RequestException) -> bool:
        # Таймаут чтения тела ответа приходит как ConnectionError
        return isinstance(exc, requests.exceptions.Timeout) or 'timed out' in str(exc)

    @staticmethod
    def _encode_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """Булевы значения передаются как 1/0"""
        if not params:
            return {}
        return {key: int(value) if isinstance(value, bool) else value
                for key, value in params.items()}

    @staticmethod
    def _error_message(response) -> str:
        message = response.reason or f"HTTP {response.status_code}"
        try:
            body = response.json()
        except ValueError:
            return message
        if isinstance(body, dict) and body.get('errors'):
            errors = body['errors']
            if isinstance(errors, dict):
                details = '; '.join(f"{key}: {value}" for key, value in errors.items())
            else:
                details = str(errors)
            message = f"{message} ({details})"
        return message

    @staticmethod
    def _parse_response(response) -> Any:
        """Извлечение поля data из JSON ответа"""
        try:
            body = response.json()
        except ValueError as e:
            raise MalformedResponseError("Ответ API не является корректным JSON",
                                         response.status_code) from e

        if not isinstance(body, dict) or 'data' not in body:
            raise MalformedResponseError("В ответе API отсутствует поле data",
                                         response.status_code)

        return body['data']

    def close(self) -> None:
        """Закрытие транспорта"""
        close = getattr(self.transport, 'close', None)
        if close is not None:
            close()

    def __repr__(self) -> str:
        return f"Session(host={self.host!r}, username={self._username!r})"
