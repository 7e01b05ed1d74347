import json
from types import SimpleNamespace
from urllib.parse import urlsplit

import pytest
from requests.structures import CaseInsensitiveDict

from hodlit.api import ApiClient
from hodlit.client import HodlClient
from hodlit.session import MemorySessionBackend, Session, SessionStore

BASE_URL = "http://backend.test"
NOW = 1_700_000_000.0


class DummyResponse:
    def __init__(self, status_code=200, payload=None, *, text=None, content_type="application/json"):
        self.status_code = status_code
        self.headers = CaseInsensitiveDict()
        if content_type:
            self.headers["Content-Type"] = content_type
        self.text = text if text is not None else json.dumps(payload)

    def json(self):
        return json.loads(self.text)


def envelope(data=None, code=0, message="ok", status_code=200):
    return DummyResponse(status_code, {"code": code, "message": message, "data": data})


class DummySession:
    """Stand-in for ``requests.Session`` keyed by ``(method, path)``."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls: list[SimpleNamespace] = []
        self.closed = False

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        path = urlsplit(url).path
        self.calls.append(SimpleNamespace(
            method=method, url=url, path=path, params=params, json=json, headers=headers, timeout=timeout))
        route = self.routes.get((method, path))
        if route is None:  # pragma: no cover - defensive fallback for unexpected endpoints
            raise AssertionError(f"Unexpected call in dummy session: {method} {url}")
        if isinstance(route, Exception):
            raise route
        return route

    def close(self):
        self.closed = True


class FakeClock:
    def __init__(self, now=NOW):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def backend():
    return MemorySessionBackend()


@pytest.fixture
def store(backend, clock):
    return SessionStore(backend, clock=clock)


@pytest.fixture
def logged_in(store):
    session = Session(user_id="42", email="trader@example.com",
                      token="tok-123", expires_at=NOW + 3600)
    store.save(session)
    return session


@pytest.fixture
def make_client(store):
    def _make(routes=None):
        http = DummySession(routes)
        client = HodlClient(ApiClient(BASE_URL, store, session=http, timeout=5))
        return client, http

    return _make


@pytest.fixture
def replies():
    return SimpleNamespace(envelope=envelope, raw=DummyResponse)
