import json as jsonlib
import os
import sys
from urllib.parse import parse_qs, urlsplit

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

# Ensure project root is on sys.path
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from wood_inventory.api.client import ApiClient  # noqa: E402
from wood_inventory.core.session import SessionStore  # noqa: E402

BASE_URL = "http://backend.test/api"


class FakeBackend(BaseAdapter):
    """Transport adapter answering requests from registered canned responses."""

    def __init__(self):
        super().__init__()
        self.routes = {}
        self.requests = []

    def add(self, method, path, status=200, json=None, body=None, headers=None, exc=None):
        self.routes[(method, path)] = (status, json, body, headers or {}, exc)

    def send(self, request, **kwargs):
        self.requests.append(request)
        path = urlsplit(request.url).path[len(urlsplit(BASE_URL).path):]
        status, json, body, headers, exc = self.routes.get(
            (request.method, path), (404, {"message": "Not found"}, None, {}, None)
        )
        if exc is not None:
            raise exc
        response = requests.Response()
        response.status_code = status
        response.headers = CaseInsensitiveDict(headers)
        if json is not None:
            response._content = jsonlib.dumps(json).encode()
            response.headers.setdefault("Content-Type", "application/json")
        else:
            response._content = body or b""
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass

    @property
    def last(self):
        return self.requests[-1]

    def last_query(self):
        return parse_qs(urlsplit(self.last.url).query)


@pytest.fixture
def storage():
    return {}


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def client(storage, backend):
    http = requests.Session()
    http.mount("http://", backend)
    return ApiClient(BASE_URL, SessionStore(storage), http=http)


@pytest.fixture
def logged_in(storage):
    """Store a token the way a successful login does."""
    SessionStore(storage).save("tok-123", {"id": 1, "username": "sunil"})
    return storage
