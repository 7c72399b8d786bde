# wood_inventory/services/inventory_service.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from wood_inventory.api.client import ApiClient, FormParts, Params
from wood_inventory.core.constants import INVENTORY_PATH, LOW_STOCK_PARAM

IMAGE_FIELD = "image"


# ─────────────────────────────────────────────────────────
# CREATE PAYLOAD
# ─────────────────────────────────────────────────────────
@dataclass
class InventoryItem:
    """Typed form payload for a new inventory item.

    Only ``name`` is required here; every other rule (ranges, duplicates,
    required backend fields) is enforced by the API. Fields left as ``None``
    are not sent. ``extra`` carries backend fields without a dedicated
    attribute and is appended after the named ones.
    """

    name: str
    wood_type: Optional[str] = None
    length: Optional[float] = None
    width: Optional[float] = None
    thickness: Optional[float] = None
    quantity: Optional[float] = None
    unit_price: Optional[float] = None
    supplier_id: Optional[int] = None
    description: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_form_fields(self) -> List[Tuple[str, str]]:
        named = [
            ("name", self.name),
            ("wood_type", self.wood_type),
            ("length", self.length),
            ("width", self.width),
            ("thickness", self.thickness),
            ("quantity", self.quantity),
            ("unit_price", self.unit_price),
            ("supplier_id", self.supplier_id),
            ("description", self.description),
        ]
        fields = [(key, _form_value(value)) for key, value in named if value is not None]
        fields.extend((key, _form_value(value)) for key, value in self.extra.items())
        return fields


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if value is None:
        return ""
    return str(value)


def encode_form(
    data: Union[InventoryItem, Mapping[str, Any]], image_file: Any = None
) -> FormParts:
    """Return multipart parts for ``data`` plus ``image`` when a file is given.

    A plain mapping contributes every key. ``image_file`` may be anything
    requests accepts as a file: bytes, a file object, or a
    ``(filename, content[, content_type])`` tuple.
    """
    if isinstance(data, InventoryItem):
        fields = data.to_form_fields()
    else:
        fields = [(key, _form_value(value)) for key, value in data.items()]
    parts: FormParts = [(key, (None, value)) for key, value in fields]
    if image_file is not None:
        parts.append((IMAGE_FIELD, image_file))
    return parts


# ─────────────────────────────────────────────────────────
# INVENTORY ENDPOINTS
# ─────────────────────────────────────────────────────────
def get_all(client: ApiClient, params: Params = None) -> Any:
    return client.get(INVENTORY_PATH, params=params)


def get_by_id(client: ApiClient, item_id: Any) -> Any:
    return client.get(f"{INVENTORY_PATH}/{item_id}")


def create(
    client: ApiClient,
    data: Union[InventoryItem, Mapping[str, Any]],
    image_file: Any = None,
) -> Any:
    return client.post_multipart(INVENTORY_PATH, encode_form(data, image_file))


def update(client: ApiClient, item_id: Any, data: Mapping[str, Any]) -> Any:
    return client.put(f"{INVENTORY_PATH}/{item_id}", json=dict(data))


def delete(client: ApiClient, item_id: Any) -> Any:
    return client.delete(f"{INVENTORY_PATH}/{item_id}")


def get_low_stock(client: ApiClient) -> Any:
    """Return items the backend flags as below their reorder threshold."""
    return client.get(INVENTORY_PATH, params={LOW_STOCK_PARAM: True})
