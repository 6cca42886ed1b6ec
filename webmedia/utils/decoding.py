"""Turns JSON response bodies into typed models.

Every helper consumes the response inside a ``with`` block so the
underlying connection is released on success and on failure alike.
"""

from __future__ import annotations

from typing import Any, List, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from ..exceptions import DecodeError, TransportError

ModelT = TypeVar("ModelT", bound=BaseModel)


def read_json(response: requests.Response) -> Any:
    with response:
        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(
                f"Response body from {response.status_code} reply is not valid JSON",
                hint="The API may have returned an HTML error page.",
            ) from exc
        except requests.RequestException as exc:
            raise TransportError(f"Reading the response body failed: {type(exc).__name__}") from exc


def decode_model(response: requests.Response, model: Type[ModelT]) -> ModelT:
    """Decode a single JSON object into *model*."""

    payload = read_json(response)
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(f"Unexpected {model.__name__} payload: {exc}") from exc


def decode_model_list(response: requests.Response, model: Type[ModelT]) -> List[ModelT]:
    """Decode a bare JSON array into a list of *model*, keeping document order."""

    payload = read_json(response)
    if not isinstance(payload, list):
        raise DecodeError(f"Expected a JSON array of {model.__name__}, got {type(payload).__name__}")
    try:
        return [model.model_validate(item) for item in payload]
    except ValidationError as exc:
        raise DecodeError(f"Unexpected {model.__name__} payload: {exc}") from exc
