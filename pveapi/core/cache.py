#!/usr/bin/env python3
"""
Кеширование конфигурации ресурсов

Конфигурация запрашивается один раз на экземпляр ресурса и больше
не обновляется. Для свежих данных нужен новый экземпляр ресурса.
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)

_NOT_FETCHED = object()


class ConfigCacheMixin:
    """Ленивая однократная загрузка конфигурации через get('config')"""

    _cached_config: Any = _NOT_FETCHED

    @property
    def config_cached(self) -> bool:
        return self._cached_config is not _NOT_FETCHED

    def config(self) -> Any:
        """
        Получение конфигурации ресурса

        Returns:
            Конфигурация из первого запроса к {path}/config
        """
        if self._cached_config is _NOT_FETCHED:
            logger.debug(f"💾 Кеш промах: {self.path()}/config")
            self._cached_config = self.get('config')
        else:
            logger.debug(f"💾 Кеш попадание: {self.path()}/config")
        return self._cached_config
