import streamlit as st


def render_sidebar_nav() -> None:
    """Render sidebar navigation links to all app pages."""
    with st.sidebar:
        st.page_link("main_app.py", label="🏠 Dashboard")
        st.page_link("pages/1_Inventory.py", label="🪵 Inventory")
        st.page_link("pages/2_Suppliers.py", label="🤝 Suppliers")
        st.page_link("pages/3_Stock_Movements.py", label="🔁 Stock Movements")
        st.page_link("pages/4_Reports.py", label="📊 Reports")
