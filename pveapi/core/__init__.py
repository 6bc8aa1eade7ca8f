"""
Ядро клиента: сессия, диспетчер запросов, ресурсы и кеш конфигурации.
"""
