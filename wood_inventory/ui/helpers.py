from typing import Any, Callable, List, Tuple

import pandas as pd
import requests
import streamlit as st

from wood_inventory.api.client import ApiClient, build_client
from wood_inventory.core.constants import LOGIN_PAGE
from wood_inventory.core.exceptions import ApiError, UnauthorizedError
from wood_inventory.core.logging import configure_logging
from wood_inventory.services.report_service import ReportDownload


def get_client() -> ApiClient:
    """Return the API client whose login session lives in ``st.session_state``."""
    configure_logging()
    return build_client(st.session_state)


def handle_api_error(exc: requests.RequestException) -> None:
    """Top-level error boundary for page code.

    ``UnauthorizedError`` sends the user to the login page (the session is
    already cleared); other API errors are shown with the backend message.
    """
    if isinstance(exc, UnauthorizedError):
        show_warning("Your session has expired. Please log in again.")
        st.switch_page(LOGIN_PAGE)
        return
    if isinstance(exc, ApiError):
        show_error(f"Request failed ({exc.status_code}): {exc.message}")
        return
    show_error(f"Could not reach the inventory API: {exc}")


def call_api(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Tuple[bool, Any]:
    """Run a service call, routing failures through :func:`handle_api_error`.

    Returns ``(success, payload)``; the payload is ``None`` on failure.
    """
    try:
        return True, func(*args, **kwargs)
    except requests.RequestException as exc:
        handle_api_error(exc)
        return False, None


def to_records(payload: Any) -> List[dict]:
    """Return the rows of an API list payload.

    Accepts a bare list, a ``{"data": [...]}`` or ``{"items": [...]}``
    wrapper, a single object, or ``None``.
    """
    if payload is None:
        return []
    if isinstance(payload, dict):
        for key in ("data", "items"):
            if isinstance(payload.get(key), list):
                return list(payload[key])
        return [payload]
    return list(payload)


def to_frame(payload: Any) -> pd.DataFrame:
    """Return API list payloads as a DataFrame for ``st.dataframe``."""
    return pd.DataFrame(to_records(payload))


def offer_download(download: ReportDownload) -> None:
    """Render a download button for an exported report."""
    st.download_button(
        f"⬇️ {download.filename}",
        data=download.content,
        file_name=download.filename,
        mime=download.mime_type,
        key=f"download_{download.filename}",
    )


def show_success(msg: str) -> None:
    """Display a success message using toast if available."""
    if hasattr(st, "toast"):
        st.toast(msg, icon="✅")
    else:
        st.success(msg)


def show_warning(msg: str) -> None:
    """Display a warning message using toast if available."""
    if hasattr(st, "toast"):
        st.toast(msg, icon="⚠️")
    else:
        st.warning(msg)


def show_error(msg: str) -> None:
    """Display an error message using toast if available."""
    if hasattr(st, "toast"):
        st.toast(msg, icon="❌")
    else:
        st.error(msg)
