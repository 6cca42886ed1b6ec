"""Utility helpers for HTTP transport and response decoding."""

from .decoding import decode_model, decode_model_list, read_json
from .http_client import HttpFetcher, URLFetcher

__all__ = ["HttpFetcher", "URLFetcher", "decode_model", "decode_model_list", "read_json"]
