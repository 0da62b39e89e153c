"""
Catalog client.

Exposes the catalog service as async operations. Channel and playlist
lookups go through per-client entity caches; every list response passes
through the same normalization pipeline (decode, expand, coerce timestamps)
and keeps the upstream cursor untouched.
"""

from typing import Any, Dict, List, Optional, Sequence, Union

from video_client.adapters.http_transport import HttpTransport, HttpxTransport
from video_client.caching.entity_cache import EntityCache
from video_client.models import (
    DEFAULT_REGION,
    Channel,
    ChannelFilter,
    Comment,
    CommentThread,
    Item,
    ItemFilter,
    ListResult,
    Playlist,
    PlaylistFilter,
    PlaylistVideo,
    Video,
    VideoCategory,
    page_size,
)
from video_client.normalization import (
    coerce_timestamp_list,
    decode_list,
    expand_compressed_items,
    expand_compressed_list,
    suppress_not_found,
)
from video_client.query import build_url, join_fields, path_segment
from video_client.shared.config import DEFAULT_MAX_CHANNEL, DEFAULT_MAX_PLAYLIST, ClientSettings
from video_client.shared.errors import ValidationError
from video_client.shared.logging import configure_logging, get_logger
from video_client import youtube

Fields = Optional[Sequence[str]]


class VideoClient:
    """Client for the catalog service."""

    def __init__(
        self,
        url: str,
        transport: HttpTransport,
        max_channel: int = DEFAULT_MAX_CHANNEL,
        max_playlist: int = DEFAULT_MAX_PLAYLIST,
        key: Optional[str] = None
    ):
        self.url = url.rstrip('/')
        self.transport = transport
        self.key = key
        self.logger = get_logger("video_client.client")
        self.channel_cache: EntityCache[Channel] = EntityCache(max_channel, name="channel")
        self.playlist_cache: EntityCache[Playlist] = EntityCache(max_playlist, name="playlist")

    # -- request plumbing -------------------------------------------------

    def _list_params(
        self,
        max_results: Optional[int],
        next_page_token: Optional[Union[str, int]],
        fields: Fields,
        **params: Any
    ) -> Dict[str, Any]:
        params["limit"] = page_size(max_results)
        params["nextPageToken"] = next_page_token
        params["fields"] = join_fields(fields)
        return params

    async def _get_list(
        self,
        path: str,
        params: Dict[str, Any],
        container_field: Optional[str] = None,
        items: bool = False
    ) -> ListResult[Dict[str, Any]]:
        res = await self.transport.get(build_url(f"{self.url}{path}", params)) or {}
        payload = decode_list(res.get("list"))
        if items or container_field:
            entities = expand_compressed_items(payload, container_field)
        else:
            entities = expand_compressed_list(payload)
        return ListResult(
            list=coerce_timestamp_list(entities),
            next_page_token=res.get("nextPageToken")
        )

    async def _get_batch(self, path: str, ids: Sequence[str], fields: Fields) -> List[Dict[str, Any]]:
        if not ids:
            return []
        url = build_url(f"{self.url}{path}", {"id": ",".join(ids), "fields": join_fields(fields)})
        return coerce_timestamp_list(await self.transport.get(url))

    async def _get_cached(
        self,
        cache: EntityCache[Dict[str, Any]],
        path: str,
        id: str,
        fields: Fields
    ) -> Optional[Dict[str, Any]]:
        entry = cache.lookup(id)
        if entry is not None:
            self.logger.debug("Cache hit", cache=cache.name, id=id)
            return entry.item

        self.logger.debug("Cache miss", cache=cache.name, id=id)
        url = build_url(f"{self.url}{path}/{path_segment(id)}", {"fields": join_fields(fields)})
        entity = await suppress_not_found(self.transport.get(url))
        if entity:
            cache.insert(id, entity)
        return entity

    # -- categories and channels -------------------------------------------

    async def get_categories(self, region_code: Optional[str] = None) -> List[VideoCategory]:
        """List video categories for a region (``US`` by default)."""
        url = build_url(f"{self.url}/category", {"regionCode": region_code or DEFAULT_REGION})
        return await self.transport.get(url) or []

    async def get_channels(self, ids: Sequence[str], fields: Fields = None) -> List[Channel]:
        return await self._get_batch("/channels/list", ids, fields)

    async def get_channel(self, id: str, fields: Fields = None) -> Optional[Channel]:
        """Get a channel, served from the channel cache when present."""
        if not id:
            return None
        return await self._get_cached(self.channel_cache, "/channels", id, fields)

    async def get_channel_playlists(
        self,
        channel_id: str,
        max_results: Optional[int] = None,
        next_page_token: Optional[str] = None,
        fields: Fields = None
    ) -> ListResult[Playlist]:
        params = self._list_params(max_results, next_page_token, fields, channelId=channel_id)
        return await self._get_list("/playlists", params, container_field="channelId")

    # -- playlists ----------------------------------------------------------

    async def get_playlists(self, ids: Sequence[str], fields: Fields = None) -> List[Playlist]:
        return await self._get_batch("/playlists/list", ids, fields)

    async def get_playlist(self, id: str, fields: Fields = None) -> Optional[Playlist]:
        """Get a playlist, served from the playlist cache when present."""
        if not id:
            return None
        return await self._get_cached(self.playlist_cache, "/playlists", id, fields)

    async def get_playlist_videos(
        self,
        playlist_id: str,
        max_results: Optional[int] = None,
        next_page_token: Optional[str] = None,
        fields: Fields = None
    ) -> ListResult[PlaylistVideo]:
        params = self._list_params(max_results, next_page_token, fields, playlistId=playlist_id)
        return await self._get_list("/videos", params, container_field="playlistId")

    async def get_channel_videos(
        self,
        channel_id: str,
        max_results: Optional[int] = None,
        next_page_token: Optional[str] = None,
        fields: Fields = None
    ) -> ListResult[PlaylistVideo]:
        params = self._list_params(max_results, next_page_token, fields, channelId=channel_id)
        return await self._get_list("/videos", params, container_field="channelId")

    # -- videos -------------------------------------------------------------

    async def get_popular_videos(
        self,
        region_code: Optional[str] = None,
        video_category_id: Optional[str] = None,
        max_results: Optional[int] = None,
        next_page_token: Optional[str] = None,
        fields: Fields = None
    ) -> ListResult[Video]:
        """Most popular videos for a region and/or category."""
        if not region_code and not video_category_id:
            region_code = DEFAULT_REGION
        params = self._list_params(
            max_results,
            next_page_token,
            fields,
            regionCode=region_code,
            categoryId=video_category_id
        )
        return await self._get_list("/videos/popular", params)

    async def get_popular_videos_by_region(
        self,
        region_code: Optional[str] = None,
        max_results: Optional[int] = None,
        next_page_token: Optional[str] = None,
        fields: Fields = None
    ) -> ListResult[Video]:
        return await self.get_popular_videos(region_code, None, max_results, next_page_token, fields)

    async def get_popular_videos_by_category(
        self,
        video_category_id: Optional[str] = None,
        max_results: Optional[int] = None,
        next_page_token: Optional[str] = None,
        fields: Fields = None
    ) -> ListResult[Video]:
        return await self.get_popular_videos(None, video_category_id, max_results, next_page_token, fields)

    async def get_videos(self, ids: Sequence[str], fields: Fields = None) -> List[Video]:
        return await self._get_batch("/videos/list", ids, fields)

    async def get_video(self, id: str, fields: Fields = None) -> Optional[Video]:
        """Get a video. Videos are never cached."""
        if not id:
            return None
        url = build_url(f"{self.url}/videos/{path_segment(id)}", {"fields": join_fields(fields)})
        return await suppress_not_found(self.transport.get(url))

    async def get_related_videos(
        self,
        video_id: str,
        max_results: Optional[int] = None,
        next_page_token: Optional[str] = None,
        fields: Fields = None
    ) -> ListResult[Item]:
        if not video_id:
            return ListResult(list=[])
        params = self._list_params(max_results, next_page_token, fields)
        return await self._get_list(f"/videos/{path_segment(video_id)}/related", params)

    # -- search -------------------------------------------------------------

    async def search(
        self,
        sm: ItemFilter,
        max_results: Optional[int] = None,
        next_page_token: Optional[Union[str, int]] = None
    ) -> ListResult[Item]:
        """Search through the YouTube Data API. Requires an API key."""
        if not self.key:
            raise ValidationError("An API key is required for search")
        url = build_url(f"{youtube.YOUTUBE_API_URL}/search", {
            "key": self.key,
            "part": "snippet",
            "regionCode": sm.region_code,
            "q": sm.q,
            "maxResults": page_size(max_results),
            "type": sm.type,
            "videoDuration": sm.video_duration,
            "order": sm.sort,
            "pageToken": next_page_token,
        })
        result = youtube.from_youtube_search(await self.transport.get(url))
        result.list = youtube.format_thumbnail(result.list)
        return result

    async def search_videos(
        self,
        sm: ItemFilter,
        max_results: Optional[int] = None,
        next_page_token: Optional[Union[str, int]] = None,
        fields: Fields = None
    ) -> ListResult[Item]:
        params = self._list_params(
            max_results,
            next_page_token,
            fields,
            q=sm.q,
            videoDuration=sm.video_duration,
            regionCode=sm.region_code,
            sort=sm.sort
        )
        return await self._get_list("/videos/search", params)

    async def search_playlists(
        self,
        sm: PlaylistFilter,
        max_results: Optional[int] = None,
        next_page_token: Optional[Union[str, int]] = None,
        fields: Fields = None
    ) -> ListResult[Playlist]:
        params = self._list_params(max_results, next_page_token, fields, q=sm.q, sort=sm.sort)
        return await self._get_list("/playlists/search", params, items=True)

    async def search_channels(
        self,
        sm: ChannelFilter,
        max_results: Optional[int] = None,
        next_page_token: Optional[Union[str, int]] = None,
        fields: Fields = None
    ) -> ListResult[Channel]:
        params = self._list_params(max_results, next_page_token, fields, q=sm.q, sort=sm.sort)
        return await self._get_list("/channels/search", params)


class CommentingVideoClient(VideoClient):
    """Client variant with an API key, adding the comment operations."""

    def __init__(
        self,
        url: str,
        transport: HttpTransport,
        max_channel: int = DEFAULT_MAX_CHANNEL,
        max_playlist: int = DEFAULT_MAX_PLAYLIST,
        key: Optional[str] = None
    ):
        if not key:
            raise ValidationError("An API key is required for comment operations")
        super().__init__(url, transport, max_channel, max_playlist, key)

    async def get_comment_threads(
        self,
        video_id: str,
        sort: Optional[str] = None,
        max_results: Optional[int] = None,
        next_page_token: Optional[str] = None
    ) -> ListResult[CommentThread]:
        return await youtube.get_comment_threads(
            self.transport, self.key, video_id, sort, max_results, next_page_token
        )

    async def get_comments(
        self,
        id: str,
        max_results: Optional[int] = None,
        next_page_token: Optional[str] = None
    ) -> ListResult[Comment]:
        return await youtube.get_comments(self.transport, self.key, id, max_results, next_page_token)


def create_client(
    url: str,
    transport: HttpTransport,
    max_channel: int = DEFAULT_MAX_CHANNEL,
    max_playlist: int = DEFAULT_MAX_PLAYLIST,
    key: Optional[str] = None
) -> VideoClient:
    """Build the client variant matching the supplied credentials.

    A non-empty ``key`` yields a :class:`CommentingVideoClient`; otherwise a
    plain :class:`VideoClient`, which has no comment operations at all.
    """
    if key:
        return CommentingVideoClient(url, transport, max_channel, max_playlist, key)
    return VideoClient(url, transport, max_channel, max_playlist)


def create_client_from_settings(
    settings: Optional[ClientSettings] = None,
    transport: Optional[HttpTransport] = None,
    setup_logging: bool = False
) -> VideoClient:
    """Build a client from settings.

    With ``setup_logging`` the process-wide structlog configuration is
    installed from ``settings.service_name`` and ``settings.log_level``.
    Applications that configure logging themselves leave it off.
    """
    settings = settings or ClientSettings()
    if setup_logging:
        configure_logging(settings.service_name, settings.log_level)
    return create_client(
        settings.base_url,
        transport or HttpxTransport(timeout=settings.request_timeout),
        settings.max_channel,
        settings.max_playlist,
        settings.api_key
    )
