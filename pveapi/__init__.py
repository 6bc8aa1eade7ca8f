"""
Клиент Proxmox VE API

Иерархия ресурсов (клиент -> нода -> VM) поверх одной
аутентифицированной сессии.
"""

from .core.config import ClientConfig, ConnectionProfile, load_connection_profile, load_connection_profiles
from .core.dispatcher import RequestDispatcher, normalize_path
from .core.exceptions import (
    ProxmoxAPIError,
    AuthenticationError,
    RequestError,
    RequestTimeoutError,
    MalformedResponseError,
    ConfigurationError,
)
from .core.resources import ProxmoxClient, ProxmoxNode, ProxmoxVM
from .core.session import Session

__version__ = '0.1.0'

__all__ = [
    'ClientConfig',
    'ConnectionProfile',
    'load_connection_profile',
    'load_connection_profiles',
    'RequestDispatcher',
    'normalize_path',
    'ProxmoxAPIError',
    'AuthenticationError',
    'RequestError',
    'RequestTimeoutError',
    'MalformedResponseError',
    'ConfigurationError',
    'ProxmoxClient',
    'ProxmoxNode',
    'ProxmoxVM',
    'Session',
]
