from typing import Any

from wood_inventory.api.client import ApiClient
from wood_inventory.core.constants import DASHBOARD_ACTIVITY_PATH, DASHBOARD_STATS_PATH


def get_stats(client: ApiClient) -> Any:
    """Return the aggregate figures shown on the dashboard."""
    return client.get(DASHBOARD_STATS_PATH)


def get_recent_activity(client: ApiClient) -> Any:
    return client.get(DASHBOARD_ACTIVITY_PATH)
