import requests
import streamlit as st

from wood_inventory.core.exceptions import ApiError
from wood_inventory.services import auth_service
from wood_inventory.ui import load_css, show_error, show_success
from wood_inventory.ui.helpers import get_client

st.set_page_config(page_title="Login · Wood Inventory", page_icon="🪵")
load_css()

client = get_client()
if auth_service.is_authenticated(client.session):
    st.switch_page("main_app.py")

st.title("🪵 Wood Inventory")
login_tab, register_tab = st.tabs(["Login", "Register"])

with login_tab:
    with st.form("login_form"):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Login")
    if submitted:
        try:
            auth_service.login(client, username.strip(), password)
        except ApiError as exc:
            # A 401 here means bad credentials, not an expired session.
            show_error(f"Login failed: {exc.message}")
        except requests.RequestException as exc:
            show_error(f"Could not reach the inventory API: {exc}")
        else:
            if auth_service.is_authenticated(client.session):
                st.switch_page("main_app.py")
            show_error("Login failed: no token returned.")

with register_tab:
    with st.form("register_form", clear_on_submit=True):
        new_username = st.text_input("Username*")
        email = st.text_input("Email")
        new_password = st.text_input("Password*", type="password")
        registered = st.form_submit_button("Create Account")
    if registered:
        try:
            auth_service.register(
                client,
                {"username": new_username.strip(), "email": email.strip(), "password": new_password},
            )
        except ApiError as exc:
            show_error(f"Registration failed: {exc.message}")
        except requests.RequestException as exc:
            show_error(f"Could not reach the inventory API: {exc}")
        else:
            show_success("Account created. You can log in now.")
