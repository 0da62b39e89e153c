"""
YouTube Data API helpers.

The generic search and the comment endpoints talk to the YouTube Data API
directly rather than to the catalog service, so their responses arrive in
YouTube's ``{items: [{id, snippet}], nextPageToken}`` shape and are
flattened here.
"""

from typing import Any, Dict, List, Optional

from video_client.adapters.http_transport import HttpTransport
from video_client.models import Comment, CommentThread, Item, ListResult, comment_order, page_size
from video_client.normalization.timestamps import coerce_timestamp, parse_timestamp
from video_client.query import build_url

YOUTUBE_API_URL = "https://www.googleapis.com/youtube/v3"
THUMBNAIL_URL = "https://i.ytimg.com/vi"

THUMBNAIL_SIZES = {
    "thumbnail": "default",
    "mediumThumbnail": "mqdefault",
    "highThumbnail": "hqdefault",
    "standardThumbnail": "sddefault",
    "maxresThumbnail": "maxresdefault",
}

SNIPPET_THUMBNAILS = {
    "default": "thumbnail",
    "medium": "mediumThumbnail",
    "high": "highThumbnail",
    "standard": "standardThumbnail",
    "maxres": "maxresThumbnail",
}

SNIPPET_FIELDS = (
    "title",
    "description",
    "publishedAt",
    "channelId",
    "channelTitle",
    "liveBroadcastContent",
    "publishTime",
)


def _search_id(search_id: Any) -> Dict[str, Optional[str]]:
    if isinstance(search_id, str):
        return {"kind": "video", "id": search_id}
    search_id = search_id or {}
    kind = (search_id.get("kind") or "").split("#")[-1] or None
    item_id = (
        search_id.get("videoId")
        or search_id.get("channelId")
        or search_id.get("playlistId")
    )
    return {"kind": kind, "id": item_id}


def _snippet_thumbnails(thumbnails: Optional[Dict[str, Any]]) -> Dict[str, str]:
    result = {}
    for size, key in SNIPPET_THUMBNAILS.items():
        thumbnail = (thumbnails or {}).get(size)
        if thumbnail and thumbnail.get("url"):
            result[key] = thumbnail["url"]
    return result


def from_youtube_search(res: Optional[Dict[str, Any]]) -> ListResult[Item]:
    """Flatten a YouTube search response into catalog items."""
    res = res or {}
    items: List[Item] = []
    for raw in res.get("items") or []:
        snippet = raw.get("snippet") or {}
        item: Item = _search_id(raw.get("id"))
        for key in SNIPPET_FIELDS:
            if key in snippet:
                item[key] = snippet[key]
        item.update(_snippet_thumbnails(snippet.get("thumbnails")))
        items.append(coerce_timestamp(item))
    return ListResult(list=items, next_page_token=res.get("nextPageToken"))


def format_thumbnail(items: List[Item]) -> List[Item]:
    """Derive the standard thumbnail URLs for every video item."""
    for item in items:
        if item.get("kind", "video") != "video" or not item.get("id"):
            continue
        for key, size in THUMBNAIL_SIZES.items():
            item[key] = f"{THUMBNAIL_URL}/{item['id']}/{size}.jpg"
    return items


def _comment(raw: Dict[str, Any]) -> Comment:
    snippet = dict(raw.get("snippet") or {})
    author_channel = snippet.pop("authorChannelId", None)
    comment: Comment = {"id": raw.get("id"), **snippet}
    if isinstance(author_channel, dict):
        comment["authorChannelId"] = author_channel.get("value")
    elif author_channel:
        comment["authorChannelId"] = author_channel
    if isinstance(comment.get("updatedAt"), str):
        try:
            comment["updatedAt"] = parse_timestamp(comment["updatedAt"])
        except ValueError:
            pass
    return coerce_timestamp(comment)


def _comment_thread(raw: Dict[str, Any]) -> CommentThread:
    snippet = dict(raw.get("snippet") or {})
    top_level = snippet.pop("topLevelComment", None) or {}
    thread: CommentThread = _comment(top_level)
    thread.update(snippet)
    thread["id"] = raw.get("id") or thread.get("id")
    return thread


async def get_comment_threads(
    transport: HttpTransport,
    key: str,
    video_id: str,
    sort: Optional[str] = None,
    max_results: Optional[int] = None,
    next_page_token: Optional[str] = None
) -> ListResult[CommentThread]:
    """List the top-level comment threads of a video."""
    if not video_id:
        return ListResult(list=[])
    url = build_url(f"{YOUTUBE_API_URL}/commentThreads", {
        "key": key,
        "videoId": video_id,
        "part": "snippet",
        "order": comment_order(sort),
        "maxResults": page_size(max_results),
        "pageToken": next_page_token,
    })
    res = await transport.get(url) or {}
    threads = [_comment_thread(raw) for raw in res.get("items") or []]
    return ListResult(list=threads, next_page_token=res.get("nextPageToken"))


async def get_comments(
    transport: HttpTransport,
    key: str,
    id: str,
    max_results: Optional[int] = None,
    next_page_token: Optional[str] = None
) -> ListResult[Comment]:
    """List the replies to a comment thread."""
    if not id:
        return ListResult(list=[])
    url = build_url(f"{YOUTUBE_API_URL}/comments", {
        "key": key,
        "parentId": id,
        "part": "snippet",
        "maxResults": page_size(max_results),
        "pageToken": next_page_token,
    })
    res = await transport.get(url) or {}
    comments = [_comment(raw) for raw in res.get("items") or []]
    return ListResult(list=comments, next_page_token=res.get("nextPageToken"))
