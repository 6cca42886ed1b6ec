"""Models describing tags."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Tag(BaseModel):
    """A tag as returned by ``tags.json`` and ``tags/{id}.json``."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
