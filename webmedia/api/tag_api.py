"""Query builders for the tag endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Dict, List, Optional

from ..models import Tag
from ..utils.decoding import decode_model, decode_model_list

if TYPE_CHECKING:
    from ..client import Client

TAG_PATH = "tags/{id}.json"
TAGS_PATH = "tags.json"


@dataclass(frozen=True)
class TagQuery:
    client: "Client" = field(repr=False, compare=False)
    id: int = 0

    def endpoint(self) -> str:
        return TAG_PATH.format(id=self.id)

    def params(self) -> Dict[str, str]:
        return {}

    def fetch(self) -> Tag:
        return decode_model(self.client.fetch(self), Tag)


@dataclass(frozen=True)
class TagsQuery:
    """Lists tags, optionally filtered by exact name."""

    client: "Client" = field(repr=False, compare=False)
    tag_name: Optional[str] = None

    def endpoint(self) -> str:
        return TAGS_PATH

    def params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.tag_name:
            params["name"] = self.tag_name
        return params

    def name(self, name: str) -> "TagsQuery":
        return replace(self, tag_name=name)

    def fetch(self) -> List[Tag]:
        return decode_model_list(self.client.fetch(self), Tag)
