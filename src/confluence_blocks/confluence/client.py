"""Authenticated HTTP client for the Confluence Cloud REST API v2."""

import base64
import json
import logging
from typing import Any

import requests

from ..exceptions import ConfluenceApiError, ConfluenceAuthenticationError
from ..utils.request_logging import install_request_logging
from .config import ConfluenceConfig

logger = logging.getLogger("confluence-blocks.confluence.client")


class ConfluenceClient:
    """Thin wrapper around ``requests`` for Confluence API v2 calls.

    Every request goes to ``{url}/wiki/api/v2{endpoint}`` with Basic
    authentication built from the configured email and API token. There is
    no retry, timeout or rate-limit handling: a failed call raises at once.
    """

    API_PREFIX = "/wiki/api/v2"

    def __init__(self, config: ConfluenceConfig) -> None:
        self.config = config
        self.base_url = config.url[:-1] if config.url.endswith("/") else config.url
        self._auth = base64.b64encode(
            f"{config.email}:{config.api_token}".encode()
        ).decode("ascii")

        self._session = requests.Session()
        self._session.verify = config.ssl_verify
        install_request_logging(self._session)

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Basic {self._auth}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def _request(
        self, method: str, endpoint: str, data: Any | None = None
    ) -> Any | None:
        """Issue one request and normalize the response.

        Args:
            method: HTTP verb
            endpoint: Path below the API prefix, including any query string
            data: JSON-serializable body; a falsy value sends no body

        Returns:
            The parsed JSON body, or None for empty responses

        Raises:
            ConfluenceAuthenticationError: On 401/403 responses
            ConfluenceApiError: On any other non-2xx response
        """
        url = f"{self.base_url}{self.API_PREFIX}{endpoint}"
        logger.debug(f"{method} {url}")

        response = self._session.request(
            method,
            url,
            headers=self.headers,
            data=json.dumps(data) if data else None,
        )

        if not 200 <= response.status_code < 300:
            error_text = response.text
            if response.status_code in (401, 403):
                raise ConfluenceAuthenticationError(response.status_code, error_text)
            raise ConfluenceApiError(response.status_code, error_text)

        # Empty responses (e.g. 204 No Content) carry no JSON
        if (
            response.headers.get("Content-Length") == "0"
            or response.status_code == 204
        ):
            return None

        if not response.text:
            return None

        return response.json()

    def get(self, endpoint: str) -> Any | None:
        return self._request("GET", endpoint)

    def post(self, endpoint: str, data: Any | None = None) -> Any | None:
        return self._request("POST", endpoint, data)

    def put(self, endpoint: str, data: Any | None = None) -> Any | None:
        return self._request("PUT", endpoint, data)

    def delete(self, endpoint: str) -> Any | None:
        return self._request("DELETE", endpoint)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "ConfluenceClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def create_confluence_client(config: ConfluenceConfig) -> ConfluenceClient:
    """Create a client for one block invocation."""
    return ConfluenceClient(config)
