"""Persisted login state shared by the API client and the auth service."""

from __future__ import annotations

import json
from typing import Any, MutableMapping, Optional

from .constants import TOKEN_KEY, USER_KEY


class SessionStore:
    """Token and user kept in a mutable mapping.

    The mapping is ``st.session_state`` inside the Streamlit app and a plain
    dict elsewhere. The user is stored JSON-serialised under ``USER_KEY``.
    """

    def __init__(self, storage: Optional[MutableMapping[str, Any]] = None):
        self._storage = storage if storage is not None else {}

    @property
    def token(self) -> Optional[str]:
        return self._storage.get(TOKEN_KEY) or None

    def save(self, token: str, user: Any) -> None:
        self._storage[TOKEN_KEY] = token
        self._storage[USER_KEY] = json.dumps(user)

    def load_user(self) -> Any:
        """Return the stored user, or ``None``.

        A corrupt stored value raises :class:`json.JSONDecodeError`.
        """
        raw = self._storage.get(USER_KEY)
        if not raw:
            return None
        return json.loads(raw)

    def clear(self) -> None:
        self._storage.pop(TOKEN_KEY, None)
        self._storage.pop(USER_KEY, None)
