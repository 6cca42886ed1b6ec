"""Exception hierarchy shared by the client, transports and decoders."""

from __future__ import annotations

from typing import Optional


class WebmediaError(Exception):
    """Base class for every error raised by the webmedia client."""

    def __init__(self, message: str, *, hint: Optional[str] = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(WebmediaError):
    """Raised when the client is constructed with an unusable configuration."""


class TransportError(WebmediaError):
    """Raised when a request could not be sent or no response was received."""


class DecodeError(WebmediaError):
    """Raised when a response body does not match the expected shape."""
