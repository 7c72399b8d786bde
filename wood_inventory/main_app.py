# wood_inventory/main_app.py
"""Dashboard entry point. Run with ``streamlit run wood_inventory/main_app.py``."""

import streamlit as st

from wood_inventory.auth.auth import logout_sidebar, require_login
from wood_inventory.core.formatters import format_currency, format_date
from wood_inventory.services import dashboard_service, inventory_service
from wood_inventory.ui import call_api, load_css
from wood_inventory.ui.helpers import get_client, to_frame
from wood_inventory.ui.navigation import render_sidebar_nav

st.set_page_config(page_title="Wood Inventory", page_icon="🪵", layout="wide")
load_css()

client = get_client()
require_login(client)
render_sidebar_nav()
logout_sidebar(client)

st.title("🪵 Wood Inventory Dashboard")

# ─────────────────────────────────────────────────────────
# KPI CARDS
# ─────────────────────────────────────────────────────────
_, stats = call_api(dashboard_service.get_stats, client)
stats = stats or {}
cols = st.columns(4)
cols[0].metric("Total Items", stats.get("totalItems", "–"))
cols[1].metric(
    "Stock Value",
    format_currency(stats["totalValue"]) if stats.get("totalValue") is not None else "–",
)
cols[2].metric("Suppliers", stats.get("totalSuppliers", "–"))
cols[3].metric("Low Stock", stats.get("lowStockCount", "–"))

st.divider()

# ─────────────────────────────────────────────────────────
# LOW STOCK & RECENT ACTIVITY
# ─────────────────────────────────────────────────────────
left, right = st.columns(2)
with left:
    st.subheader("⚠️ Low Stock")
    _, low_stock_rows = call_api(inventory_service.get_low_stock, client)
    low_stock = to_frame(low_stock_rows)
    if low_stock.empty:
        st.info("No items below their reorder level.")
    else:
        st.dataframe(low_stock, use_container_width=True, hide_index=True)

with right:
    st.subheader("🕒 Recent Activity")
    _, activity_rows = call_api(dashboard_service.get_recent_activity, client)
    activity = to_frame(activity_rows)
    if activity.empty:
        st.info("No recent activity.")
    else:
        if "date" in activity.columns:
            activity["date"] = activity["date"].map(format_date)
        st.dataframe(activity, use_container_width=True, hide_index=True)
