"""Pydantic models that describe videos and paginated video listings."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from .pager_models import Pager


class VideoMetadata(BaseModel):
    """Extended metadata, only present on some videos."""

    model_config = ConfigDict(frozen=True)

    content_rating: Optional[str] = None


class Video(BaseModel):
    """A single video.

    Only ``id`` is guaranteed: the ``only`` projection and older API
    revisions leave the other fields out, in which case they are ``None``.
    ``duration`` is kept as the raw integer sent by the server, whose unit
    differs between API revisions.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    title: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[int] = None
    published_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    exhibited_at: Optional[datetime] = None
    subscriber_only: Optional[bool] = None
    tags: Tuple[str, ...] = ()
    extended_metadata: Optional[VideoMetadata] = None

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags(cls, value):
        return () if value is None else value


class VideoResults(BaseModel):
    """Envelope returned by ``videos/with_pagination.json``."""

    model_config = ConfigDict(frozen=True)

    pager: Pager
    videos: Tuple[Video, ...]

    @field_validator("videos", mode="before")
    @classmethod
    def _null_videos(cls, value):
        return () if value is None else value
