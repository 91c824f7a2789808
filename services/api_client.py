"""
Atgest API client - the single HTTP helper used by every repository.

Wraps httpx with the conventions of the Atgest backend:
- JSON request bodies
- Bearer token from the current session (when logged in)
- JSON error payloads unwrapped into ApiError

Paths are appended to the base URL verbatim, so they carry their own
slashes (e.g. "/orders/12/").
"""

import json
import logging
from typing import Any, Callable, Optional

import httpx

from config.settings import get_settings

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Error en la solicitud"
CONNECTION_ERROR_MESSAGE = "No se pudo conectar con el servidor."


class ApiError(Exception):
    """A failed API request (HTTP error status or transport failure)."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        payload: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def field_error(self, *fields: str) -> Optional[str]:
        """
        Return the first error message found under the given payload keys.

        Django REST Framework reports field errors as lists, e.g.
        {"password": ["This password is too short."]}.
        """
        if not isinstance(self.payload, dict):
            return None

        for field in fields:
            value = self.payload.get(field)
            if isinstance(value, list):
                value = value[0] if value else None
            if value:
                return str(value)
        return None


def extract_error_message(payload: Any) -> str:
    """Pick a human-readable message out of an error payload."""
    if payload is None:
        return DEFAULT_ERROR_MESSAGE

    if isinstance(payload, dict):
        for key in ("detail", "message"):
            if payload.get(key):
                return str(payload[key])

    serialized = json.dumps(payload, ensure_ascii=False)
    return serialized or DEFAULT_ERROR_MESSAGE


class ApiClient:
    """HTTP client for the Atgest backend REST API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        token_provider: Optional[Callable[[], Optional[str]]] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        settings = get_settings()
        self.base_url = base_url if base_url is not None else settings.api_base_url
        self.timeout = timeout if timeout is not None else settings.api_timeout
        self._token_provider = token_provider
        self._transport = transport

    def with_token(self, token: str) -> "ApiClient":
        """Return a client for the same backend that always sends `token`."""
        return ApiClient(
            base_url=self.base_url,
            token_provider=lambda: token,
            timeout=self.timeout,
            transport=self._transport,
        )

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        token = self._token_provider() if self._token_provider else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def request(self, method: str, path: str, data: Any = None) -> Any:
        """
        Send a request and return the decoded JSON payload.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path appended to the base URL
            data: Optional JSON body (sent only when truthy)

        Returns:
            Parsed JSON payload, or None when the response is not JSON

        Raises:
            ApiError: on a non-2xx status or a transport failure
        """
        url = f"{self.base_url}{path}"
        body = json.dumps(data) if data else None

        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.request(method, url, headers=self._headers(), content=body)
        except httpx.TimeoutException:
            logger.error(f"{method} {path} timed out")
            raise ApiError(CONNECTION_ERROR_MESSAGE)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise ApiError(CONNECTION_ERROR_MESSAGE)

        content_type = response.headers.get("content-type", "")
        payload = None
        if "application/json" in content_type:
            try:
                payload = response.json()
            except ValueError:
                logger.warning(f"{method} {path} returned malformed JSON")

        if not response.is_success:
            message = extract_error_message(payload)
            logger.warning(f"{method} {path} -> HTTP {response.status_code}: {message}")
            raise ApiError(message, status_code=response.status_code, payload=payload)

        return payload

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, data: Any) -> Any:
        return self.request("POST", path, data)

    def put(self, path: str, data: Any) -> Any:
        return self.request("PUT", path, data)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)
