# wood_inventory/services/stock_in_service.py
"""Inbound stock movement records (goods received into the yard)."""
from typing import Any, Mapping

from wood_inventory.api.client import ApiClient, Params
from wood_inventory.core.constants import STOCK_IN_PATH


def get_all(client: ApiClient, params: Params = None) -> Any:
    return client.get(STOCK_IN_PATH, params=params)


def get_by_id(client: ApiClient, record_id: Any) -> Any:
    return client.get(f"{STOCK_IN_PATH}/{record_id}")


def create(client: ApiClient, data: Mapping[str, Any]) -> Any:
    return client.post(STOCK_IN_PATH, json=dict(data))
