"""Query builders for the video and tag endpoints."""

from .tag_api import TagQuery, TagsQuery
from .video_api import LegacyVideosQuery, VideoQuery, VideosPagerQuery, VideosQuery

__all__ = ["TagQuery", "TagsQuery", "VideoQuery", "VideosQuery", "VideosPagerQuery", "LegacyVideosQuery"]
