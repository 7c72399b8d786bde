from wood_inventory.services import dashboard_service


def test_get_stats(client, backend, logged_in):
    stats = {"totalItems": 120, "totalValue": 1500000, "lowStockCount": 4}
    backend.add("GET", "/dashboard/stats", json=stats)
    assert dashboard_service.get_stats(client) == stats
    assert backend.last.headers["Authorization"] == "Bearer tok-123"


def test_get_recent_activity(client, backend):
    activity = [{"type": "stock-in", "item": "Teak Beam", "date": "2024-01-05"}]
    backend.add("GET", "/dashboard/recent-activity", json=activity)
    assert dashboard_service.get_recent_activity(client) == activity
