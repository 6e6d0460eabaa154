"""HTTP client for the configured backend endpoint.

Holds the endpoint, anonymous API key and, once a user has signed in, their
access token. It does not implement any authentication flow itself.
"""

from __future__ import annotations

from typing import Dict, Optional

import requests

from eldar.models import Config
from eldar.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 5.0


class DatabaseHTTPClient:
    def __init__(
        self,
        url: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.url = url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers: Dict[str, str] = {}

        # Filled in by whoever signs the user in
        self.access_token: Optional[str] = None
        self.user_id: Optional[str] = None
        self.user_email: Optional[str] = None

    @classmethod
    def from_config(cls, config: Config, timeout: float = DEFAULT_TIMEOUT) -> "DatabaseHTTPClient":
        return cls(config.endpoint, config.anon_key, timeout=timeout)

    def set_headers(self, headers: Dict[str, str]) -> None:
        self.headers = dict(headers)

    def _request_headers(self) -> Dict[str, str]:
        headers = {"apikey": self.api_key, "Accept": "application/json"}
        headers.update(self.headers)
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.url}/{path.lstrip('/')}"
        headers = self._request_headers()
        headers.update(kwargs.pop("headers", None) or {})
        kwargs.setdefault("timeout", self.timeout)

        logger.debug("%s %s", method.upper(), url)
        response = self.session.request(method.upper(), url, headers=headers, **kwargs)
        response.raise_for_status()
        return response
