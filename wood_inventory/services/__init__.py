"""Service modules mapping 1:1 to the backend REST endpoints."""

from . import (
    auth_service,
    dashboard_service,
    inventory_service,
    report_service,
    stock_in_service,
    stock_out_service,
    supplier_service,
)

__all__ = [
    "auth_service",
    "dashboard_service",
    "inventory_service",
    "report_service",
    "stock_in_service",
    "stock_out_service",
    "supplier_service",
]
