"""
Data models for the video client.

Entities themselves (channels, playlists, videos, items, comments) are the
upstream JSON objects, kept as ``Dict[str, Any]`` with camelCase keys. Only
query descriptors and result envelopes are modelled here.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator

T = TypeVar("T")

Channel = Dict[str, Any]
Playlist = Dict[str, Any]
Video = Dict[str, Any]
PlaylistVideo = Dict[str, Any]
Item = Dict[str, Any]
VideoCategory = Dict[str, Any]
Comment = Dict[str, Any]
CommentThread = Dict[str, Any]

SORT_KEYS = ("date", "rating", "title", "count", "viewCount")
DURATIONS = ("long", "medium", "short")
SEARCH_TYPES = ("video", "channel", "playlist")
COMMENT_ORDERS = ("time", "relevance")

DEFAULT_REGION = "US"
DEFAULT_PAGE_SIZE = 50


@dataclass
class ListResult(Generic[T]):
    """A page of entities plus the opaque cursor for the next page."""
    list: List[T] = field(default_factory=list)
    next_page_token: Optional[str] = None


def _drop_unknown(value: Any, allowed: tuple) -> Optional[str]:
    return value if value in allowed else None


class _Filter(BaseModel):
    """Immutable query descriptor; unknown enum values are dropped."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    q: str = ""
    sort: Optional[str] = None

    @field_validator("sort", mode="before")
    @classmethod
    def _valid_sort(cls, value: Any) -> Optional[str]:
        return _drop_unknown(value, SORT_KEYS)

    @field_validator("q", mode="before")
    @classmethod
    def _text_query(cls, value: Any) -> str:
        return "" if value is None else str(value)


class ChannelFilter(_Filter):
    """Channel search descriptor."""


class PlaylistFilter(_Filter):
    """Playlist search descriptor."""


class ItemFilter(_Filter):
    """Video / generic search descriptor."""

    type: Optional[str] = None
    duration: Optional[str] = None
    region_code: Optional[str] = None

    @field_validator("type", mode="before")
    @classmethod
    def _valid_type(cls, value: Any) -> Optional[str]:
        return _drop_unknown(value, SEARCH_TYPES)

    @field_validator("duration", mode="before")
    @classmethod
    def _valid_duration(cls, value: Any) -> Optional[str]:
        return _drop_unknown(value, DURATIONS)

    @property
    def video_duration(self) -> Optional[str]:
        """Duration filter, only meaningful for video searches."""
        return self.duration if self.type == "video" else None


def comment_order(value: Optional[str]) -> Optional[str]:
    return _drop_unknown(value, COMMENT_ORDERS)


def page_size(max_results: Optional[int]) -> int:
    """Requested page size; absent or non-positive values fall back to the default."""
    return max_results if max_results and max_results > 0 else DEFAULT_PAGE_SIZE
