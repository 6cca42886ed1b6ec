"""Client library for the webmedia video API."""

from .client import Client, with_base_url, with_url_fetcher
from .exceptions import ConfigurationError, DecodeError, TransportError, WebmediaError
from .models import Pager, Tag, Video, VideoMetadata, VideoResults
from .utils.http_client import HttpFetcher, URLFetcher

__version__ = "0.1.0"

__all__ = [
    "Client",
    "with_base_url",
    "with_url_fetcher",
    "HttpFetcher",
    "URLFetcher",
    "Pager",
    "Tag",
    "Video",
    "VideoMetadata",
    "VideoResults",
    "WebmediaError",
    "ConfigurationError",
    "TransportError",
    "DecodeError",
]
