# wood_inventory/api/client.py
from typing import Any, Dict, List, Mapping, MutableMapping, Optional, Tuple

import requests

from wood_inventory.config import ApiConfig, load_api_config
from wood_inventory.core.constants import BINARY_CONTENT_TYPE, JSON_CONTENT_TYPE
from wood_inventory.core.exceptions import ApiError, UnauthorizedError
from wood_inventory.core.logging import get_logger
from wood_inventory.core.session import SessionStore

logger = get_logger(__name__)

Params = Optional[Mapping[str, Any]]
FormParts = List[Tuple[str, Any]]


def _encode_params(params: Params) -> Optional[Dict[str, Any]]:
    """Send booleans as ``true``/``false``; ``None`` values are dropped by requests."""
    if not params:
        return None
    return {
        key: str(value).lower() if isinstance(value, bool) else value
        for key, value in params.items()
    }


class ApiClient:
    """Thin wrapper around a :class:`requests.Session` bound to the backend API.

    Every request carries ``Authorization: Bearer <token>`` when the session
    store holds a token. A 401 response clears the session and raises
    :class:`UnauthorizedError`; other non-2xx responses raise
    :class:`ApiError`. Transport errors from requests propagate unchanged.
    """

    def __init__(
        self,
        base_url: str,
        session: SessionStore,
        http: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session
        self.http = http or requests.Session()
        self.http.headers.update({"Content-Type": JSON_CONTENT_TYPE})

    # ─────────────────────────────────────────────────────────
    # LOW-LEVEL REQUEST
    # ─────────────────────────────────────────────────────────
    def _auth_headers(self) -> Dict[str, str]:
        token = self.session.token
        if not token:
            return {}
        return {"Authorization": f"Bearer {token}"}

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Params = None,
        json: Any = None,
        files: Optional[FormParts] = None,
        headers: Optional[Dict[str, Optional[str]]] = None,
    ) -> requests.Response:
        request_headers: Dict[str, Optional[str]] = dict(headers or {})
        request_headers.update(self._auth_headers())
        logger.debug("%s %s params=%s", method, path, params)
        response = self.http.request(
            method,
            f"{self.base_url}{path}",
            params=_encode_params(params),
            json=json,
            files=files,
            headers=request_headers,
        )
        if response.status_code == 401:
            logger.warning(
                "Unauthorized response for %s %s; clearing session", method, path
            )
            self.session.clear()
            raise UnauthorizedError.from_response(response)
        if not response.ok:
            logger.info("%s %s failed with status %s", method, path, response.status_code)
            raise ApiError.from_response(response)
        return response

    @staticmethod
    def _payload(response: requests.Response) -> Any:
        if not response.content:
            return None
        if "json" in response.headers.get("Content-Type", ""):
            return response.json()
        return response.text

    # ─────────────────────────────────────────────────────────
    # VERB HELPERS
    # ─────────────────────────────────────────────────────────
    def get(self, path: str, params: Params = None) -> Any:
        return self._payload(self.request("GET", path, params=params))

    def post(self, path: str, json: Any = None) -> Any:
        return self._payload(self.request("POST", path, json=json))

    def post_multipart(self, path: str, parts: FormParts) -> Any:
        # Dropping the JSON default lets requests set the multipart boundary.
        return self._payload(
            self.request("POST", path, files=parts, headers={"Content-Type": None})
        )

    def put(self, path: str, json: Any = None) -> Any:
        return self._payload(self.request("PUT", path, json=json))

    def delete(self, path: str) -> Any:
        return self._payload(self.request("DELETE", path))

    def get_bytes(self, path: str, params: Params = None) -> bytes:
        response = self.request(
            "GET", path, params=params, headers={"Accept": BINARY_CONTENT_TYPE}
        )
        return response.content


def build_client(
    storage: Optional[MutableMapping[str, Any]] = None,
    config: Optional[ApiConfig] = None,
) -> ApiClient:
    """Return an :class:`ApiClient` using ``storage`` for the login session."""
    config = config or load_api_config()
    return ApiClient(config.base_url, SessionStore(storage))
