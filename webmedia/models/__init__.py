"""Data models for videos, tags and pagination."""

from .pager_models import Pager
from .tag_models import Tag
from .video_models import Video, VideoMetadata, VideoResults

__all__ = ["Pager", "Tag", "Video", "VideoMetadata", "VideoResults"]
