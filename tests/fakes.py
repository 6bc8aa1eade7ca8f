"""
Поддельный транспорт вместо requests.Session
"""

import json

TICKET_URL = 'https://pve.example.com:8006/api2/json/access/ticket'

TICKET_PAYLOAD = {
    'username': 'root@pam',
    'ticket': 'PVE:root@pam:TICKET',
    'CSRFPreventionToken': 'CSRF-TOKEN',
}


class FakeResponse:
    """Минимальный ответ с интерфейсом requests.Response"""

    def __init__(self, status_code=200, body=None, text=None, reason='OK'):
        self.status_code = status_code
        self.reason = reason
        self.text = text if text is not None else json.dumps(body)

    def json(self):
        return json.loads(self.text)


class FakeTransport:
    """Транспорт, записывающий вызовы и отвечающий заданными ответами"""

    def __init__(self):
        self.calls = []
        self.routes = {}

    def add(self, method, url, response=None, exc=None):
        self.routes[(method, url)] = exc if exc is not None else response

    def add_data(self, method, url, data):
        self.add(method, url, FakeResponse(body={'data': data}))

    def request(self, method, url, **kwargs):
        self.calls.append(dict(kwargs, method=method, url=url))
        result = self.routes.get((method, url))
        if result is None:
            return FakeResponse(body={'data': None})
        if isinstance(result, Exception):
            raise result
        return result

    def calls_to(self, method, url):
        return [call for call in self.calls if call['method'] == method and call['url'] == url]
