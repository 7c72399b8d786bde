import json

import pytest

from wood_inventory.services import stock_in_service, stock_out_service


@pytest.mark.parametrize(
    "service, path",
    [(stock_in_service, "/stock-in"), (stock_out_service, "/stock-out")],
)
def test_get_all_with_date_range(client, backend, service, path):
    backend.add("GET", path, json=[{"id": 1}])
    params = {"startDate": "2024-01-01", "endDate": "2024-01-31"}
    assert service.get_all(client, params) == [{"id": 1}]
    assert backend.last_query() == {"startDate": ["2024-01-01"], "endDate": ["2024-01-31"]}


@pytest.mark.parametrize(
    "service, path",
    [(stock_in_service, "/stock-in"), (stock_out_service, "/stock-out")],
)
def test_get_by_id(client, backend, service, path):
    backend.add("GET", f"{path}/5", json={"id": 5, "quantity": 10})
    assert service.get_by_id(client, 5) == {"id": 5, "quantity": 10}


def test_stock_in_create_posts_json(client, backend):
    record = {"item_id": 3, "supplier_id": 1, "quantity": 25}
    backend.add("POST", "/stock-in", status=201, json={"id": 9, **record})
    assert stock_in_service.create(client, record)["id"] == 9
    assert json.loads(backend.last.body) == record


def test_stock_out_create_posts_json(client, backend):
    record = {"item_id": 3, "quantity": 4, "customer": "Perera Furniture"}
    backend.add("POST", "/stock-out", status=201, json={"id": 10, **record})
    assert stock_out_service.create(client, record)["customer"] == "Perera Furniture"
    assert backend.last.headers["Content-Type"] == "application/json"
