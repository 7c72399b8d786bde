# wood_inventory/pages/2_Suppliers.py
import streamlit as st

from wood_inventory.auth.auth import logout_sidebar, require_login
from wood_inventory.services import supplier_service
from wood_inventory.ui import call_api, load_css, show_success
from wood_inventory.ui.helpers import get_client, to_frame
from wood_inventory.ui.navigation import render_sidebar_nav

st.set_page_config(page_title="Suppliers · Wood Inventory", layout="wide")
load_css()

client = get_client()
require_login(client)
render_sidebar_nav()
logout_sidebar(client)

st.header("🤝 Supplier Management")


def supplier_form_fields(defaults: dict) -> dict:
    return {
        "name": st.text_input("Supplier Name*", value=defaults.get("name", "")).strip(),
        "contact_person": st.text_input("Contact Person", value=defaults.get("contact_person") or "").strip(),
        "phone": st.text_input("Phone Number", value=defaults.get("phone") or "").strip(),
        "email": st.text_input("Email Address", value=defaults.get("email") or "").strip(),
        "address": st.text_area("Address", value=defaults.get("address") or "").strip(),
    }


# ─────────────────────────────────────────────────────────
# ADD NEW SUPPLIER Section
# ─────────────────────────────────────────────────────────
with st.expander("➕ Add New Supplier", expanded=False):
    with st.form("add_supplier_form", clear_on_submit=True):
        new_supplier = supplier_form_fields({})
        submitted = st.form_submit_button("💾 Add Supplier")
    if submitted:
        created, _ = call_api(supplier_service.create, client, new_supplier)
        if created:
            show_success(f"Supplier '{new_supplier['name']}' added.")
            st.rerun()

# ─────────────────────────────────────────────────────────
# VIEW / EDIT / DELETE Section
# ─────────────────────────────────────────────────────────
st.divider()
st.subheader("🔍 View & Manage Existing Suppliers")

_, suppliers = call_api(supplier_service.get_all, client)
suppliers_df = to_frame(suppliers)
if suppliers_df.empty:
    st.info("No suppliers found.")
    st.stop()
st.dataframe(suppliers_df, use_container_width=True, hide_index=True)

labels = {f"{row.get('name')} (#{row.get('id')})": row.get("id") for row in suppliers_df.to_dict("records")}
selected = st.selectbox("Select a supplier to edit", ["—"] + list(labels))
if selected == "—":
    st.stop()

supplier_id = labels[selected]
_, details = call_api(supplier_service.get_by_id, client, supplier_id)
if not details:
    st.stop()

with st.form("edit_supplier_form"):
    updates = supplier_form_fields(details)
    save_col, delete_col = st.columns(2)
    save = save_col.form_submit_button("💾 Save Changes")
    remove = delete_col.form_submit_button("🗑️ Delete Supplier")

if save:
    updated, _ = call_api(supplier_service.update, client, supplier_id, updates)
    if updated:
        show_success(f"Supplier #{supplier_id} updated.")
        st.rerun()
if remove:
    deleted, _ = call_api(supplier_service.delete, client, supplier_id)
    if deleted:
        show_success(f"Supplier #{supplier_id} deleted.")
        st.rerun()
