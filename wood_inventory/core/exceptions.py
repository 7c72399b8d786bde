"""Exceptions raised by the API client for unsuccessful responses."""

from __future__ import annotations

from typing import Any

import requests

from .constants import LOGIN_PATH


class ApiError(requests.HTTPError):
    """A non-2xx response from the backend.

    The backend body is kept as-is in ``payload`` so callers can show the
    message the API returned.
    """

    def __init__(self, message: str, response: requests.Response):
        super().__init__(message, response=response)

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def payload(self) -> Any:
        try:
            return self.response.json()
        except ValueError:
            return self.response.text

    @property
    def message(self) -> str:
        """Best-effort human readable message from the backend payload."""
        payload = self.payload
        if isinstance(payload, dict):
            for key in ("message", "error", "detail"):
                if payload.get(key):
                    return str(payload[key])
        if isinstance(payload, str) and payload.strip():
            return payload.strip()
        return str(self)

    @classmethod
    def from_response(cls, response: requests.Response) -> "ApiError":
        request = response.request
        method = request.method if request is not None else "?"
        message = f"{response.status_code} error for {method} {response.url}"
        return cls(message, response)


class UnauthorizedError(ApiError):
    """HTTP 401. The session has already been cleared when this is raised."""

    redirect_to = LOGIN_PATH


__all__ = ["ApiError", "UnauthorizedError"]
