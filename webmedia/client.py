"""Entry point of the library: holds configuration and builds request URLs."""

from __future__ import annotations

from typing import Callable, Mapping, Optional, Protocol, Sequence, Union
from urllib.parse import urlencode, urlsplit, urlunsplit

import requests

from .api.tag_api import TagQuery, TagsQuery
from .api.video_api import LegacyVideosQuery, VideoQuery, VideosQuery
from .exceptions import ConfigurationError, TransportError, WebmediaError
from .utils.http_client import HttpFetcher, URLFetcher

DEFAULT_BASE_URL = "https://api.video.globoi.com"
ACCESS_TOKEN_PARAM = "access_token"
MULTI_VALUE_SEPARATOR = "|"

ParamValue = Union[str, Sequence[str]]
Params = Mapping[str, ParamValue]


class Query(Protocol):
    """What the client needs from a query builder to issue it."""

    def endpoint(self) -> str:
        ...  # pragma: no cover

    def params(self) -> Params:
        ...  # pragma: no cover


class _Settings:
    def __init__(self, base_url: str, fetcher: Optional[URLFetcher]) -> None:
        self.base_url = base_url
        self.fetcher = fetcher


ClientOption = Callable[[_Settings], None]


def with_base_url(url: str) -> ClientOption:
    """Point the client at another host, e.g. a staging API."""

    def apply(settings: _Settings) -> None:
        settings.base_url = url

    return apply


def with_url_fetcher(fetcher: URLFetcher) -> ClientOption:
    """Replace the default HTTP transport."""

    def apply(settings: _Settings) -> None:
        settings.fetcher = fetcher

    return apply


class Client:
    """Read-only client for the video API.

    Configuration is fixed once the constructor returns. The client keeps
    no per-query state, so one instance can be shared by any number of
    query builders (and threads, provided the fetcher is thread-safe).
    """

    def __init__(
        self,
        access_token: str,
        *options: ClientOption,
        base_url: Optional[str] = None,
        fetcher: Optional[URLFetcher] = None,
    ) -> None:
        settings = _Settings(DEFAULT_BASE_URL, None)
        if base_url is not None:
            with_base_url(base_url)(settings)
        if fetcher is not None:
            with_url_fetcher(fetcher)(settings)
        for option in options:
            option(settings)

        self._scheme, self._netloc = _parse_base_url(settings.base_url)
        self._access_token = access_token
        self._fetcher: URLFetcher = settings.fetcher or HttpFetcher()

    @property
    def access_token(self) -> str:
        return self._access_token

    @property
    def base_url(self) -> str:
        return f"{self._scheme}://{self._netloc}"

    @property
    def fetcher(self) -> URLFetcher:
        return self._fetcher

    def build_url(self, endpoint: str, params: Optional[Params] = None) -> str:
        """Return the full URL for *endpoint* with *params* and the access token.

        Keys are emitted in ascending order and list values are joined with
        ``|``. Any ``access_token`` inside *params* is overwritten.
        """

        values = {}
        for key, value in (params or {}).items():
            if isinstance(value, str):
                values[key] = value
            else:
                values[key] = MULTI_VALUE_SEPARATOR.join(value)
        values[ACCESS_TOKEN_PARAM] = self._access_token

        query = urlencode(sorted(values.items()))
        path = "/" + endpoint
        return urlunsplit((self._scheme, self._netloc, path, query, ""))

    def fetch(self, query: Query) -> requests.Response:
        """Send *query* through the fetcher and return the raw response."""

        endpoint = query.endpoint()
        url = self.build_url(endpoint, query.params())
        try:
            return self._fetcher.fetch_url(url)
        except WebmediaError:
            raise
        except Exception as exc:
            raise TransportError(f"Fetcher failed for {endpoint}: {exc}") from exc

    def video(self, video_id: int) -> VideoQuery:
        return VideoQuery(client=self, id=video_id)

    def videos(self) -> VideosQuery:
        return VideosQuery(client=self)

    def legacy_videos(self) -> LegacyVideosQuery:
        """Listing through the older ``videos.json`` endpoint (bare array, no pager)."""

        return LegacyVideosQuery(client=self)

    def tag(self, tag_id: int) -> TagQuery:
        return TagQuery(client=self, id=tag_id)

    def tags(self) -> TagsQuery:
        return TagsQuery(client=self)


def _parse_base_url(url: str) -> tuple[str, str]:
    if not isinstance(url, str) or not url:
        raise ConfigurationError("Base URL must be a non-empty string")
    try:
        parts = urlsplit(url)
        parts.port  # raises ValueError on a non-numeric port
    except ValueError as exc:
        raise ConfigurationError(f"Invalid base URL: {url!r}") from exc
    if parts.scheme not in {"http", "https"}:
        raise ConfigurationError(
            f"Invalid base URL: {url!r}",
            hint="Base URL must start with http:// or https://",
        )
    if not parts.netloc or not parts.hostname:
        raise ConfigurationError(f"Base URL {url!r} has no host")
    if any(ch.isspace() for ch in parts.netloc):
        raise ConfigurationError(f"Base URL {url!r} has whitespace in its host")
    return parts.scheme, parts.netloc
