# wood_inventory/pages/3_Stock_Movements.py
from datetime import date, timedelta

import streamlit as st

from wood_inventory.auth.auth import logout_sidebar, require_login
from wood_inventory.core.formatters import format_date
from wood_inventory.services import inventory_service, stock_in_service, stock_out_service, supplier_service
from wood_inventory.ui import call_api, load_css, show_success
from wood_inventory.ui.helpers import get_client, to_frame, to_records
from wood_inventory.ui.navigation import render_sidebar_nav

st.set_page_config(page_title="Stock Movements · Wood Inventory", layout="wide")
load_css()

client = get_client()
require_login(client)
render_sidebar_nav()
logout_sidebar(client)

st.title("🔁 Stock Movements")

_, items = call_api(inventory_service.get_all, client)
item_options = {f"{i.get('name')} (#{i.get('id')})": i.get("id") for i in to_records(items)}
if not item_options:
    st.info("Add inventory items before recording stock movements.")
    st.stop()

tab_in, tab_out = st.tabs(["📥 Stock In", "📤 Stock Out"])

# ─────────────────────────────────────────────────────────
# STOCK IN
# ─────────────────────────────────────────────────────────
with tab_in:
    _, suppliers = call_api(supplier_service.get_all, client)
    supplier_options = {s.get("name", f"#{s.get('id')}"): s.get("id") for s in to_records(suppliers)}
    with st.form("stock_in_form", clear_on_submit=True):
        item_label = st.selectbox("Item", list(item_options), key="stock_in_item")
        supplier_label = st.selectbox("Supplier", ["—"] + list(supplier_options))
        quantity = st.number_input("Quantity Received", min_value=0.0, step=1.0, key="stock_in_qty")
        unit_cost = st.number_input("Unit Cost (LKR)", min_value=0.0, step=100.0)
        received_on = st.date_input("Received On", value=date.today())
        notes = st.text_area("Notes", key="stock_in_notes")
        submitted_in = st.form_submit_button("💾 Record Stock In")
    if submitted_in:
        record = {
            "item_id": item_options[item_label],
            "supplier_id": supplier_options.get(supplier_label),
            "quantity": quantity,
            "unit_cost": unit_cost,
            "date": received_on.isoformat(),
            "notes": notes.strip() or None,
        }
        created, _ = call_api(stock_in_service.create, client, record)
        if created:
            show_success("Stock in recorded.")
            st.rerun()

# ─────────────────────────────────────────────────────────
# STOCK OUT
# ─────────────────────────────────────────────────────────
with tab_out:
    with st.form("stock_out_form", clear_on_submit=True):
        item_label = st.selectbox("Item", list(item_options), key="stock_out_item")
        quantity = st.number_input("Quantity Issued", min_value=0.0, step=1.0, key="stock_out_qty")
        customer = st.text_input("Customer / Destination")
        issued_on = st.date_input("Issued On", value=date.today())
        notes = st.text_area("Notes", key="stock_out_notes")
        submitted_out = st.form_submit_button("💾 Record Stock Out")
    if submitted_out:
        record = {
            "item_id": item_options[item_label],
            "quantity": quantity,
            "customer": customer.strip() or None,
            "date": issued_on.isoformat(),
            "notes": notes.strip() or None,
        }
        created, _ = call_api(stock_out_service.create, client, record)
        if created:
            show_success("Stock out recorded.")
            st.rerun()

# ─────────────────────────────────────────────────────────
# HISTORY
# ─────────────────────────────────────────────────────────
st.divider()
st.subheader("📜 Movement History")
c1, c2 = st.columns(2)
start = c1.date_input("From", value=date.today() - timedelta(days=30))
end = c2.date_input("To", value=date.today())
params = {"startDate": start.isoformat(), "endDate": end.isoformat()}

for label, service in (("Stock In", stock_in_service), ("Stock Out", stock_out_service)):
    st.markdown(f"**{label}**")
    _, records = call_api(service.get_all, client, params)
    frame = to_frame(records)
    if frame.empty:
        st.caption("No records in this period.")
        continue
    if "date" in frame.columns:
        frame["date"] = frame["date"].map(format_date)
    st.dataframe(frame, use_container_width=True, hide_index=True)
