import streamlit as st

from wood_inventory.api.client import ApiClient
from wood_inventory.core.constants import LOGIN_PAGE
from wood_inventory.services import auth_service


def current_username(client: ApiClient, default: str = "") -> str:
    """Return the logged in user's display name from the stored user."""
    user = auth_service.get_current_user(client.session)
    if isinstance(user, dict):
        return str(user.get("username") or user.get("name") or default)
    return default


def require_login(client: ApiClient) -> None:
    """Send anonymous visitors to the login page."""
    if not auth_service.is_authenticated(client.session):
        st.switch_page(LOGIN_PAGE)


def logout_sidebar(client: ApiClient) -> None:
    """Render the logged-in user and a logout button in the sidebar."""
    with st.sidebar:
        st.markdown(f"**Logged in as:** {current_username(client, 'unknown')}")
        if st.button("Logout"):
            auth_service.logout(client.session)
            st.switch_page(LOGIN_PAGE)
