"""
Bounded in-process entity cache.

Entries are kept in insertion order, so the front of the mapping is always
the entry with the smallest timestamp. Re-inserting an id moves it to the
back. Reads never reorder entries: eviction is by insertion time only.
"""

from collections import OrderedDict
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Generic, List, Optional, TypeVar

from video_client.shared.logging import get_logger


T = TypeVar("T")


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """A cached entity and the instant it was inserted."""
    item: T
    timestamp: datetime


class EntityCache(Generic[T]):
    """Capacity-bounded id -> entity store evicting the oldest insertion first."""

    def __init__(self, capacity: int, name: str = "entity"):
        self.capacity = max(0, int(capacity))
        self.name = name
        self.logger = get_logger("video_client.cache")
        self._entries: "OrderedDict[str, CacheEntry[T]]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, id: object) -> bool:
        return id in self._entries

    def lookup(self, id: str) -> Optional[CacheEntry[T]]:
        """Return the entry for ``id`` without touching its position."""
        return self._entries.get(id)

    def get(self, id: str) -> Optional[T]:
        entry = self._entries.get(id)
        return entry.item if entry is not None else None

    def insert(self, id: str, item: T) -> None:
        """Store ``item`` under ``id`` stamped with the current instant, then evict."""
        self._entries.pop(id, None)
        self._entries[id] = CacheEntry(item=item, timestamp=datetime.now(timezone.utc))
        self.evict(self.capacity)

    def evict(self, capacity: int) -> None:
        """Remove the oldest entries until at most ``capacity`` remain."""
        while len(self._entries) > max(0, capacity):
            evicted_id, _ = self._entries.popitem(last=False)
            self.logger.debug(
                "Evicted cache entry",
                cache=self.name,
                id=evicted_id,
                size=len(self._entries),
                capacity=capacity
            )

    def ids(self) -> List[str]:
        """Cached ids, oldest first."""
        return list(self._entries.keys())
