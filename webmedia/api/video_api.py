"""Query builders for the video endpoints.

Every builder is a frozen dataclass: chaining methods return a modified
copy and never touch the receiver, so a partially built query can be
reused as a template.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Tuple, Union

from ..models import Pager, Video, VideoResults
from ..utils.decoding import decode_model, decode_model_list

if TYPE_CHECKING:
    from ..client import Client

VIDEO_PATH = "videos/{id}.json"
VIDEOS_PATH = "videos/with_pagination.json"
VIDEOS_PAGER_PATH = "videos/pagination.json"
LEGACY_VIDEOS_PATH = "videos.json"

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

ParamDict = Dict[str, Union[str, List[str]]]


def format_date(value: datetime) -> str:
    """Format *value* as a UTC date-time without offset or fractions.

    Naive datetimes are assumed to already be in UTC.
    """

    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(DATE_FORMAT)


@dataclass(frozen=True)
class VideoQuery:
    """Fetches a single video by id."""

    client: "Client" = field(repr=False, compare=False)
    id: int = 0
    field_names: Tuple[str, ...] = ()

    def endpoint(self) -> str:
        return VIDEO_PATH.format(id=self.id)

    def params(self) -> ParamDict:
        params: ParamDict = {}
        if self.field_names:
            params["only"] = list(self.field_names)
        return params

    def fields(self, *names: str) -> "VideoQuery":
        """Restrict the response to *names* (``only=``); repeated calls accumulate."""

        return replace(self, field_names=self.field_names + names)

    def fetch(self) -> Video:
        return decode_model(self.client.fetch(self), Video)


@dataclass(frozen=True)
class VideosQuery:
    """Paginated video listing with filters."""

    client: "Client" = field(repr=False, compare=False)
    page_number: Optional[int] = None
    page_size: Optional[int] = None
    order: Optional[str] = None
    tag_names: Tuple[str, ...] = ()
    field_names: Tuple[str, ...] = ()
    published_from: Optional[datetime] = None
    published_to: Optional[datetime] = None

    def endpoint(self) -> str:
        return VIDEOS_PATH

    def params(self) -> ParamDict:
        params: ParamDict = {}
        if self.page_number is not None:
            params["page"] = str(self.page_number)
        if self.page_size is not None:
            params["per_page"] = str(self.page_size)
        if self.tag_names:
            params["tags.all"] = list(self.tag_names)
        if self.field_names:
            params["only"] = list(self.field_names)
        if self.published_from is not None:
            params["published_at.gte"] = format_date(self.published_from)
        if self.published_to is not None:
            params["published_at.lte"] = format_date(self.published_to)
        if self.order:
            params["order_by"] = self.order
        return params

    def page(self, number: int) -> "VideosQuery":
        return replace(self, page_number=number)

    def per_page(self, count: int) -> "VideosQuery":
        return replace(self, page_size=count)

    def order_by(self, order: str) -> "VideosQuery":
        return replace(self, order=order)

    def with_tags(self, *tags: str) -> "VideosQuery":
        """Require every tag given; tags keep call order and may repeat."""

        return replace(self, tag_names=self.tag_names + tags)

    def fields(self, *names: str) -> "VideosQuery":
        return replace(self, field_names=self.field_names + names)

    def published_since(self, when: datetime) -> "VideosQuery":
        return replace(self, published_from=when)

    def published_until(self, when: datetime) -> "VideosQuery":
        return replace(self, published_to=when)

    def pager(self) -> "VideosPagerQuery":
        """Same filters, but only ask for the pagination metadata."""

        return VideosPagerQuery(
            client=self.client,
            page_number=self.page_number,
            page_size=self.page_size,
            order=self.order,
            tag_names=self.tag_names,
            field_names=self.field_names,
            published_from=self.published_from,
            published_to=self.published_to,
        )

    def fetch(self) -> VideoResults:
        return decode_model(self.client.fetch(self), VideoResults)

    def iter_pages(self) -> Iterator[VideoResults]:
        """Yield this page and every following one until ``next_page`` runs out."""

        query = self
        while True:
            results = query.fetch()
            yield results
            next_page = results.pager.next_page
            if next_page is None or next_page <= results.pager.current_page:
                return
            query = query.page(next_page)


@dataclass(frozen=True)
class VideosPagerQuery(VideosQuery):
    """Pagination metadata for a :class:`VideosQuery`."""

    def endpoint(self) -> str:
        return VIDEOS_PAGER_PATH

    def fetch(self) -> Pager:  # type: ignore[override]
        return decode_model(self.client.fetch(self), Pager)

    def iter_pages(self) -> Iterator[VideoResults]:
        raise TypeError("A pager query has no pages to iterate")


@dataclass(frozen=True)
class LegacyVideosQuery(VideosQuery):
    """Listing through the older ``videos.json`` endpoint.

    That revision answers with a bare JSON array and carries no pager, so
    it is kept apart from :class:`VideosQuery` rather than merged into it.
    """

    def endpoint(self) -> str:
        return LEGACY_VIDEOS_PATH

    def add_tags(self, *tags: str) -> "LegacyVideosQuery":
        return self.with_tags(*tags)  # type: ignore[return-value]

    def pager(self) -> VideosPagerQuery:
        raise TypeError("The legacy videos endpoint does not expose pagination metadata")

    def fetch(self) -> List[Video]:  # type: ignore[override]
        return decode_model_list(self.client.fetch(self), Video)

    def iter_pages(self) -> Iterator[VideoResults]:
        raise TypeError("The legacy videos endpoint does not expose pagination metadata")
