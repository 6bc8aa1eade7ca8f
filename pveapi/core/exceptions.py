#!/usr/bin/env python3
"""
Исключения клиента Proxmox API

Все ошибки транспорта перехватываются один раз на границе Session.request
и пробрасываются вызывающему коду в виде одного из классов ниже.
"""

from typing import Optional


class ProxmoxAPIError(Exception):
    """Базовое исключение для ошибок Proxmox API"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"[{self.status_code}] {self.message}"
        return self.message


class AuthenticationError(ProxmoxAPIError):
    """Ошибка аутентификации (отклонены учетные данные или некорректный ответ тикета)"""
    pass


class RequestError(ProxmoxAPIError):
    """Ошибка запроса: не-2xx ответ или сбой транспорта"""
    pass


class RequestTimeoutError(ProxmoxAPIError):
    """Превышено время ожидания запроса"""

    def __init__(self, message: str, timeout: Optional[float] = None):
        super().__init__(message, status_code=408)
        self.timeout = timeout


class MalformedResponseError(ProxmoxAPIError):
    """Ответ не является JSON или не содержит поля data"""
    pass


class ConfigurationError(ProxmoxAPIError):
    """Некорректная конфигурация клиента или профиля подключения"""
    pass
