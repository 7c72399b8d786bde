# wood_inventory/pages/1_Inventory.py
import streamlit as st

from wood_inventory.auth.auth import logout_sidebar, require_login
from wood_inventory.core.formatters import calculate_volume, format_currency
from wood_inventory.services import inventory_service, supplier_service
from wood_inventory.services.inventory_service import InventoryItem
from wood_inventory.ui import call_api, load_css, show_success
from wood_inventory.ui.helpers import get_client, to_frame, to_records
from wood_inventory.ui.navigation import render_sidebar_nav

st.set_page_config(page_title="Inventory · Wood Inventory", layout="wide")
load_css()

client = get_client()
require_login(client)
render_sidebar_nav()
logout_sidebar(client)

st.title("🪵 Timber Inventory")

_, suppliers = call_api(supplier_service.get_all, client)
supplier_options = {"— None —": None}
supplier_options.update({s.get("name", f"#{s.get('id')}"): s.get("id") for s in to_records(suppliers)})

# ─────────────────────────────────────────────────────────
# ADD NEW ITEM Section
# ─────────────────────────────────────────────────────────
with st.expander("➕ Add New Item", expanded=False):
    with st.form("add_item_form", clear_on_submit=True):
        name = st.text_input("Item Name*")
        wood_type = st.text_input("Wood Type", placeholder="Teak, Mahogany, …")
        c1, c2, c3 = st.columns(3)
        length = c1.number_input("Length (ft)", min_value=0.0, step=0.5)
        width = c2.number_input("Width (in)", min_value=0.0, step=0.5)
        thickness = c3.number_input("Thickness (in)", min_value=0.0, step=0.25)
        c4, c5 = st.columns(2)
        quantity = c4.number_input("Quantity", min_value=0.0, step=1.0)
        unit_price = c5.number_input("Unit Price (LKR)", min_value=0.0, step=100.0)
        supplier_label = st.selectbox("Supplier", list(supplier_options))
        description = st.text_area("Description")
        image = st.file_uploader("Image", type=["png", "jpg", "jpeg"])
        st.caption(f"Volume per piece: {calculate_volume(length, width, thickness)}")
        submitted = st.form_submit_button("💾 Add Item")
    if submitted:
        item = InventoryItem(
            name=name.strip(),
            wood_type=wood_type.strip() or None,
            length=length,
            width=width,
            thickness=thickness,
            quantity=quantity,
            unit_price=unit_price,
            supplier_id=supplier_options[supplier_label],
            description=description.strip() or None,
        )
        image_file = (image.name, image.getvalue(), image.type) if image else None
        created, _ = call_api(inventory_service.create, client, item, image_file)
        if created:
            show_success(f"Item '{item.name}' added.")
            st.rerun()

# ─────────────────────────────────────────────────────────
# VIEW / EDIT / DELETE Section
# ─────────────────────────────────────────────────────────
st.divider()
st.subheader("🔍 View & Manage Items")

f1, f2 = st.columns([3, 1])
search = f1.text_input("Search", placeholder="Name or wood type")
low_only = f2.toggle("Low stock only")

params = {"search": search.strip() or None}
if low_only:
    _, items = call_api(inventory_service.get_low_stock, client)
else:
    _, items = call_api(inventory_service.get_all, client, params)

items_df = to_frame(items)
if items_df.empty:
    st.info("No items found.")
    st.stop()

display_df = items_df.copy()
if "unit_price" in display_df.columns:
    display_df["unit_price"] = display_df["unit_price"].map(format_currency)
st.dataframe(display_df, use_container_width=True, hide_index=True)

item_labels = {f"{row.get('name')} (#{row.get('id')})": row.get("id") for row in items_df.to_dict("records")}
selected = st.selectbox("Select an item to edit", ["—"] + list(item_labels))
if selected == "—":
    st.stop()

item_id = item_labels[selected]
_, details = call_api(inventory_service.get_by_id, client, item_id)
if not details:
    st.stop()

with st.form("edit_item_form"):
    new_quantity = st.number_input("Quantity", value=float(details.get("quantity") or 0), step=1.0)
    new_price = st.number_input("Unit Price (LKR)", value=float(details.get("unit_price") or 0), step=100.0)
    new_description = st.text_area("Description", value=details.get("description") or "")
    save_col, delete_col = st.columns(2)
    save = save_col.form_submit_button("💾 Save Changes")
    remove = delete_col.form_submit_button("🗑️ Delete Item")

if save:
    updates = {"quantity": new_quantity, "unit_price": new_price, "description": new_description}
    updated, _ = call_api(inventory_service.update, client, item_id, updates)
    if updated:
        show_success(f"Item #{item_id} updated.")
        st.rerun()
if remove:
    deleted, _ = call_api(inventory_service.delete, client, item_id)
    if deleted:
        show_success(f"Item #{item_id} deleted.")
        st.rerun()
