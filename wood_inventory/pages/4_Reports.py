# wood_inventory/pages/4_Reports.py
from datetime import date, timedelta

import streamlit as st

from wood_inventory.auth.auth import logout_sidebar, require_login
from wood_inventory.core.constants import REPORT_TYPES
from wood_inventory.services import report_service
from wood_inventory.ui import call_api, load_css
from wood_inventory.ui.helpers import get_client, offer_download, to_frame
from wood_inventory.ui.navigation import render_sidebar_nav

st.set_page_config(page_title="Reports · Wood Inventory", layout="wide")
load_css()

client = get_client()
require_login(client)
render_sidebar_nav()
logout_sidebar(client)

st.title("📊 Reports")

c1, c2 = st.columns(2)
start = c1.date_input("From", value=date.today() - timedelta(days=30))
end = c2.date_input("To", value=date.today())
params = {"startDate": start.isoformat(), "endDate": end.isoformat()}

st.subheader("Stock Movement")
_, movement = call_api(report_service.get_stock_movement, client, params)
movement_df = to_frame(movement)
if movement_df.empty:
    st.info("No stock movement in this period.")
else:
    st.dataframe(movement_df, use_container_width=True, hide_index=True)

st.subheader("Supplier Performance")
_, performance = call_api(report_service.get_supplier_performance, client)
performance_df = to_frame(performance)
if performance_df.empty:
    st.info("No supplier data yet.")
else:
    st.dataframe(performance_df, use_container_width=True, hide_index=True)

# ─────────────────────────────────────────────────────────
# EXPORTS
# ─────────────────────────────────────────────────────────
st.divider()
st.subheader("⬇️ Export")
report_type = st.selectbox("Report", REPORT_TYPES)
pdf_col, excel_col = st.columns(2)
if pdf_col.button("Export PDF"):
    call_api(report_service.export_pdf, client, report_type, params, offer_download)
if excel_col.button("Export Excel"):
    call_api(report_service.export_excel, client, report_type, params, offer_download)
