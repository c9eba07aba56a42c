"""
HTTP transport for the Apixu API.

The client facade talks to the API through the Api interface only.
HttpApi is the default implementation on top of a requests session.
It adds the API key, maps HTTP failures to TransportError/ApiResponseError
and returns the raw body; it never retries.

Usage:
    from apixu.api.transport import HttpApi

    with HttpApi(api_key="...") as api:
        body = api.call("current", {"q": "London", "lang": "en"})
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests

from apixu.api.constants import BASE_URL, DEFAULT_TIMEOUT_SECONDS, RESPONSE_FORMAT
from apixu.api.exceptions import ApiKeyMissingError, ApiResponseError, TransportError

logger = logging.getLogger(__name__)


class Api(ABC):
    """Abstract base class for Apixu transports."""

    @abstractmethod
    def call(self, method: str, params: Optional[Dict[str, Any]] = None) -> str:
        """
        Call an API method.

        Args:
            method: API method name (e.g. 'current') or an absolute URL
            params: Query parameters

        Returns:
            Raw response body

        Raises:
            TransportError: For network or HTTP failures
        """
        pass


class HttpApi(Api):
    """
    Transport for the Apixu REST API.

    Attributes:
        api_key: Apixu API key
        base_url: API base URL
        timeout: Request timeout in seconds
        session: Requests session used for every call
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the HTTP transport.

        Args:
            api_key: API key sent as the `key` parameter
            base_url: API base URL
            timeout: Request timeout in seconds
            session: Session to use (a new one is created if not provided)

        Raises:
            ApiKeyMissingError: If api_key is empty
        """
        if not api_key or not api_key.strip():
            raise ApiKeyMissingError(
                "Apixu API key not configured. "
                "Set APIXU_API_KEY in your environment or .env file."
            )

        self.api_key = api_key
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.timeout = timeout
        self.session = session or requests.Session()

        logger.debug(f"HttpApi initialized for {self.base_url}")

    def __enter__(self) -> "HttpApi":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying session."""
        self.session.close()

    def build_url(self, method: str) -> str:
        """
        Resolve a method name to a request URL.

        Absolute URLs are used as-is; method names map to
        <base_url><method>.<format>.
        """
        if method.startswith(("http://", "https://")):
            return method
        return f"{self.base_url}{method}.{RESPONSE_FORMAT}"

    def call(self, method: str, params: Optional[Dict[str, Any]] = None) -> str:
        url = self.build_url(method)
        query = dict(params or {})

        # Only API methods take the key; the documentation files are public
        if url.startswith(self.base_url):
            query["key"] = self.api_key

        safe_params = {k: v for k, v in query.items() if k != "key"}
        logger.debug(f"API Request: {url} params={safe_params}")

        try:
            response = self.session.get(url, params=query, timeout=self.timeout)
        except requests.RequestException as e:
            # requests puts the full URL, key included, in its messages
            detail = str(e).replace(self.api_key, "***")
            raise TransportError(f"Request to {method} failed: {detail}") from e

        self._handle_error(response)

        logger.debug(f"API Response: {len(response.content)} bytes")
        return response.text

    def _handle_error(self, response: requests.Response) -> None:
        """
        Raise ApiResponseError for HTTP error responses.

        The API reports failures as {"error": {"code": ..., "message": ...}};
        when present, that code and message are carried on the exception.
        """
        if response.ok:
            return

        status = response.status_code
        error_code = None
        message = f"API error (HTTP {status})"

        try:
            error_data = response.json()
        except ValueError:
            error_data = None

        if isinstance(error_data, dict) and isinstance(error_data.get("error"), dict):
            error = error_data["error"]
            error_code = error.get("code")
            if error.get("message"):
                message = f"{error['message']} (HTTP {status})"

        raise ApiResponseError(message, status_code=status, error_code=error_code, response=response)
