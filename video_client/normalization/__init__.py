"""
Response normalization for the video client.

Pure helpers applied to every upstream response:

- timestamps: ``publishedAt`` text -> ``datetime``
- compression: decode and expand compacted list payloads
- not_found: 404/410 on single-entity fetches -> ``None``
"""

from .compression import (
    CompactItems,
    CompactList,
    ExpandedList,
    ListPayload,
    compact_items,
    compact_list,
    decode_list,
    expand_compressed_items,
    expand_compressed_list,
)
from .not_found import suppress_not_found
from .timestamps import coerce_timestamp, coerce_timestamp_list, parse_timestamp

__all__ = [
    "CompactItems",
    "CompactList",
    "ExpandedList",
    "ListPayload",
    "compact_items",
    "compact_list",
    "decode_list",
    "expand_compressed_items",
    "expand_compressed_list",
    "suppress_not_found",
    "coerce_timestamp",
    "coerce_timestamp_list",
    "parse_timestamp",
]
