import pytest
import requests

from wood_inventory.api.client import ApiClient, build_client
from wood_inventory.config import ApiConfig
from wood_inventory.core.exceptions import ApiError, UnauthorizedError
from wood_inventory.core.session import SessionStore


def test_request_without_token_has_no_authorization_header(client, backend):
    backend.add("GET", "/inventory", json=[])
    client.get("/inventory")
    assert "Authorization" not in backend.last.headers


def test_request_with_token_sends_bearer_header(client, backend, logged_in):
    backend.add("GET", "/inventory", json=[])
    client.get("/inventory")
    assert backend.last.headers["Authorization"] == "Bearer tok-123"


def test_json_content_type_is_the_default(client, backend):
    backend.add("POST", "/suppliers", status=201, json={"id": 4})
    assert client.post("/suppliers", json={"name": "Lanka Timber"}) == {"id": 4}
    assert backend.last.headers["Content-Type"] == "application/json"
    assert backend.last.body == b'{"name": "Lanka Timber"}'


def test_boolean_params_are_sent_lowercase_and_none_dropped(client, backend):
    backend.add("GET", "/inventory", json=[])
    client.get("/inventory", params={"lowStock": True, "page": 2, "search": None})
    assert backend.last_query() == {"lowStock": ["true"], "page": ["2"]}


def test_unauthorized_clears_session_and_still_raises(client, backend, logged_in):
    backend.add("GET", "/dashboard/stats", status=401, json={"message": "jwt expired"})
    with pytest.raises(UnauthorizedError) as excinfo:
        client.get("/dashboard/stats")
    assert excinfo.value.status_code == 401
    assert excinfo.value.redirect_to == "/login"
    assert excinfo.value.payload == {"message": "jwt expired"}
    assert "token" not in logged_in
    assert "user" not in logged_in


def test_other_errors_pass_through_without_touching_session(client, backend, logged_in):
    backend.add("GET", "/inventory/99", status=404, json={"message": "Item not found"})
    with pytest.raises(ApiError) as excinfo:
        client.get("/inventory/99")
    assert not isinstance(excinfo.value, UnauthorizedError)
    assert excinfo.value.status_code == 404
    assert excinfo.value.message == "Item not found"
    assert logged_in["token"] == "tok-123"


def test_api_error_is_an_http_error(client, backend):
    backend.add("DELETE", "/suppliers/3", status=409, body=b"Supplier has stock records")
    with pytest.raises(requests.HTTPError) as excinfo:
        client.delete("/suppliers/3")
    assert excinfo.value.payload == "Supplier has stock records"
    assert excinfo.value.message == "Supplier has stock records"


def test_transport_errors_propagate_unchanged(client, backend):
    backend.add("GET", "/inventory", exc=requests.ConnectionError("refused"))
    with pytest.raises(requests.ConnectionError, match="refused"):
        client.get("/inventory")


def test_empty_body_returns_none_and_text_body_returns_text(client, backend):
    backend.add("DELETE", "/inventory/1", status=204)
    backend.add("GET", "/dashboard/stats", body=b"ok", headers={"Content-Type": "text/plain"})
    assert client.delete("/inventory/1") is None
    assert client.get("/dashboard/stats") == "ok"


def test_get_bytes_asks_for_binary_body(client, backend):
    backend.add("GET", "/reports/stock-movement/pdf", body=b"%PDF-1.4")
    assert client.get_bytes("/reports/stock-movement/pdf") == b"%PDF-1.4"
    assert backend.last.headers["Accept"] == "application/octet-stream"


def test_base_url_trailing_slash_is_ignored(storage, backend):
    http = requests.Session()
    http.mount("http://", backend)
    api = ApiClient("http://backend.test/api/", SessionStore(storage), http=http)
    backend.add("GET", "/suppliers", json=[])
    api.get("/suppliers")
    assert backend.last.url == "http://backend.test/api/suppliers"


def test_build_client_uses_config_and_storage():
    storage = {}
    api = build_client(storage, ApiConfig(base_url="http://example.test/api"))
    assert api.base_url == "http://example.test/api"
    api.session.save("abc", None)
    assert storage["token"] == "abc"
