"""Shared pytest fixtures for the webmedia test suite.

No test touches the network: every request goes through
:class:`FixtureFetcher`, which maps request paths to JSON files under
``tests/fixtures``.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Dict, List, Optional
from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from webmedia import Client
from webmedia.exceptions import TransportError

FIXTURES_DIR = Path(__file__).parent / "fixtures"

ROUTES: Dict[str, str] = {
    "/videos.json": "videos.json",
    "/videos/5767587.json": "video-5767587.json",
    "/videos/6053793.json": "video-6053793.json",
    "/videos/pagination.json": "pagination-page-1.json",
    "/tags.json": "tags.json",
    "/tags/86.json": "tag-86.json",
}


class TrackingResponse(requests.Response):
    """Response that remembers whether it was closed."""

    def __init__(self) -> None:
        super().__init__()
        self.was_closed = False

    def close(self) -> None:
        self.was_closed = True
        super().close()


def make_response(body: bytes, status_code: int = 200, url: str = "") -> TrackingResponse:
    response = TrackingResponse()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    response.raw = io.BytesIO(body)
    response._content = body
    response._content_consumed = True
    return response


class FixtureFetcher:
    """Deterministic fetcher serving canned bodies by request path."""

    def __init__(self, routes: Optional[Dict[str, str]] = None) -> None:
        self.routes = dict(ROUTES if routes is None else routes)
        self.requested_urls: List[str] = []
        self.responses: List[TrackingResponse] = []

    def fetch_url(self, url: str) -> requests.Response:
        self.requested_urls.append(url)
        parts = urlsplit(url)
        name = self.routes.get(parts.path)
        if parts.path == "/videos/with_pagination.json":
            page = parse_qs(parts.query).get("page", ["1"])[0]
            name = f"with-pagination-page-{page}.json"
        if name is None or not (FIXTURES_DIR / name).exists():
            raise TransportError("unable to fetch URL, maybe a fixture needs some setup")
        response = make_response((FIXTURES_DIR / name).read_bytes(), url=url)
        self.responses.append(response)
        return response


class StaticFetcher:
    """Fetcher that answers every request with the same body."""

    def __init__(self, body: bytes, status_code: int = 200) -> None:
        self.body = body
        self.status_code = status_code
        self.responses: List[TrackingResponse] = []

    def fetch_url(self, url: str) -> requests.Response:
        response = make_response(self.body, self.status_code, url=url)
        self.responses.append(response)
        return response


@pytest.fixture
def fetcher() -> FixtureFetcher:
    return FixtureFetcher()


@pytest.fixture
def client(fetcher: FixtureFetcher) -> Client:
    return Client("fake-token", base_url="https://api.video.example.com", fetcher=fetcher)


@pytest.fixture
def static_client():
    """Factory for a client whose fetcher always returns *body*."""

    def factory(body: bytes, status_code: int = 200):
        static = StaticFetcher(body, status_code)
        return Client("fake-token", fetcher=static), static

    return factory
