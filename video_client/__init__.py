"""
Async client for a video catalog service.

Package layout:

- client: ``VideoClient`` / ``CommentingVideoClient`` and their factories
- caching: bounded entity cache for channels and playlists
- normalization: timestamp coercion, compacted-list expansion, not-found suppression
- youtube: YouTube Data API search and comment helpers
- adapters: HTTP transport
- shared: config, logging, errors
"""

from .client import CommentingVideoClient, VideoClient, create_client, create_client_from_settings
from .models import ChannelFilter, ItemFilter, ListResult, PlaylistFilter
from .shared.errors import TransportError, ValidationError, VideoClientException

__version__ = "1.0.0"

__all__ = [
    "CommentingVideoClient",
    "VideoClient",
    "create_client",
    "create_client_from_settings",
    "ChannelFilter",
    "ItemFilter",
    "ListResult",
    "PlaylistFilter",
    "TransportError",
    "ValidationError",
    "VideoClientException",
]
