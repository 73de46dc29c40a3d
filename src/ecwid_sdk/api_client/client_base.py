from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

import requests

from .errors import TransportError


logger = logging.getLogger(__name__)


class BaseAPIClient:
    """
    Reusable base HTTP client for the store REST API.

    Features:
    - Persistent session, one per client instance
    - Default headers and default query parameters (e.g. the access token)
    - Path parameters substituted into the endpoint template
    - Configurable timeout

    Responses are returned untouched; interpreting status codes and bodies
    is left to the response helpers.
    """

    DEFAULT_TIMEOUT = 15  # seconds

    def __init__(
        self,
        base_url: str,
        default_params: Optional[Dict[str, str]] = None,
        default_headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> None:

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout or self.DEFAULT_TIMEOUT

        self.session = requests.Session()

        # Default headers
        headers = {
            "User-Agent": "ecwid-sdk/0.1",
            "Accept": "application/json",
        }

        if default_headers:
            headers.update(default_headers)

        self.session.headers.update(headers)

        # Sent with every request, merged with per-call params by requests
        self.session.params = dict(default_params or {})

    # ---------------------------------------------------
    # Core request method
    # ---------------------------------------------------
    def request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, str]] = None,
        path_params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        body: Any = None,
        json_body: Any = None,
    ) -> requests.Response:
        """
        Send a request against a path relative to the base URL.

        ``path`` may hold ``{name}`` placeholders filled from ``path_params``.
        ``body`` is sent as-is (bytes or a file-like stream), ``json_body`` is
        serialised to JSON.

        Raises TransportError when no response was received.
        """

        if path_params:
            path = path.format(
                **{k: quote(str(v), safe="") for k, v in path_params.items()}
            )

        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug(f"{method.upper()} {url}")

        try:
            response = self.session.request(
                method.upper(),
                url,
                params=dict(params) if params else None,
                headers=headers,
                data=body,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            raise TransportError(f"Request timed out calling {url}") from e
        except requests.RequestException as e:
            raise TransportError(
                f"Request failed calling {url} ({type(e).__name__})"
            ) from e

        return response

    def get(self, path: str, **kwargs: Any) -> requests.Response:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> requests.Response:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> requests.Response:
        return self.request("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> requests.Response:
        return self.request("DELETE", path, **kwargs)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "BaseAPIClient":
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[Any],
    ) -> None:
        self.close()
