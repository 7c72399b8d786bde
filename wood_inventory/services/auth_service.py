# wood_inventory/services/auth_service.py
from typing import Any, Dict

from wood_inventory.api.client import ApiClient
from wood_inventory.core.constants import AUTH_LOGIN_PATH, AUTH_REGISTER_PATH
from wood_inventory.core.logging import get_logger
from wood_inventory.core.session import SessionStore

logger = get_logger(__name__)


def login(client: ApiClient, username: str, password: str) -> Any:
    """Exchange credentials for a token.

    When the response carries a token, token and user are saved into the
    client's session. The full response payload is returned; HTTP errors
    propagate.
    """
    data = client.post(AUTH_LOGIN_PATH, json={"username": username, "password": password})
    if isinstance(data, dict) and data.get("token"):
        client.session.save(data["token"], data.get("user"))
        logger.info("User %s logged in", username)
    return data


def register(client: ApiClient, user_data: Dict[str, Any]) -> Any:
    return client.post(AUTH_REGISTER_PATH, json=user_data)


def logout(session: SessionStore) -> None:
    session.clear()


def get_current_user(session: SessionStore) -> Any:
    return session.load_user()


def is_authenticated(session: SessionStore) -> bool:
    # Presence only; expiry and signature are the backend's concern.
    return session.token is not None
