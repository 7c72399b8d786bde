# wood_inventory/services/supplier_service.py
from typing import Any, Mapping

from wood_inventory.api.client import ApiClient, Params
from wood_inventory.core.constants import SUPPLIERS_PATH


def get_all(client: ApiClient, params: Params = None) -> Any:
    return client.get(SUPPLIERS_PATH, params=params)


def get_by_id(client: ApiClient, supplier_id: Any) -> Any:
    return client.get(f"{SUPPLIERS_PATH}/{supplier_id}")


def create(client: ApiClient, data: Mapping[str, Any]) -> Any:
    return client.post(SUPPLIERS_PATH, json=dict(data))


def update(client: ApiClient, supplier_id: Any, data: Mapping[str, Any]) -> Any:
    return client.put(f"{SUPPLIERS_PATH}/{supplier_id}", json=dict(data))


def delete(client: ApiClient, supplier_id: Any) -> Any:
    return client.delete(f"{SUPPLIERS_PATH}/{supplier_id}")
