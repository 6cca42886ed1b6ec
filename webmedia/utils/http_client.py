"""Transport layer: performs the actual HTTP GET for the client."""

from __future__ import annotations

import logging
from typing import Dict, Optional, Protocol
from urllib.parse import urlsplit

import requests

from ..exceptions import TransportError

USER_AGENT = "webmedia-python/0.1"

DEFAULT_HEADERS: Dict[str, str] = {
    "accept": "application/json",
    "user-agent": USER_AGENT,
}


class URLFetcher(Protocol):
    """Anything able to GET a fully built URL and hand back the response."""

    def fetch_url(self, url: str) -> requests.Response:
        ...  # pragma: no cover


class HttpFetcher:
    """Issues GET requests over a pooled ``requests`` session.

    Status codes are passed through untouched; the API reports most
    problems inside the JSON body, so callers must inspect the decoded
    result rather than rely on HTTP errors.
    """

    def __init__(self, timeout: float = 10, session: Optional[requests.Session] = None) -> None:
        self.timeout = timeout
        if session is None:
            session = requests.Session()
            session.headers.update(DEFAULT_HEADERS)
        self._session = session

    def fetch_url(self, url: str) -> requests.Response:
        logging.debug("GET %s", _redact(url))
        try:
            return self._session.get(url, timeout=self.timeout, stream=True)
        except requests.RequestException as exc:
            logging.error("HTTP GET to %s failed: %s", _redact(url), type(exc).__name__)
            raise TransportError(f"GET {_redact(url)} failed: {type(exc).__name__}") from exc

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "HttpFetcher":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


def _redact(url: str) -> str:
    # the query string carries the access token
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}{parts.path}"
