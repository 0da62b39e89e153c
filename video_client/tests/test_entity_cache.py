"""
Unit tests for the bounded entity cache.
"""

import pytest
from datetime import datetime

from video_client.caching.entity_cache import CacheEntry, EntityCache


class TestEntityCache:
    """Test cases for EntityCache."""

    @pytest.fixture
    def cache(self):
        """Create a small cache."""
        return EntityCache(3, name="channel")

    def test_lookup_miss(self, cache):
        """Lookup of an unknown id returns None."""
        assert cache.lookup("missing") is None
        assert cache.get("missing") is None
        assert len(cache) == 0

    def test_insert_and_lookup(self, cache):
        """Inserted items come back wrapped in a timestamped entry."""
        channel = {"id": "UC1", "title": "First"}
        cache.insert("UC1", channel)

        entry = cache.lookup("UC1")
        assert isinstance(entry, CacheEntry)
        assert entry.item is channel
        assert isinstance(entry.timestamp, datetime)
        assert entry.timestamp.tzinfo is not None
        assert "UC1" in cache

    def test_insert_overwrites_existing_entry(self, cache):
        """Re-inserting an id replaces the entry wholesale."""
        cache.insert("UC1", {"id": "UC1", "title": "Old"})
        first = cache.lookup("UC1")
        cache.insert("UC1", {"id": "UC1", "title": "New"})

        second = cache.lookup("UC1")
        assert second is not first
        assert second.item["title"] == "New"
        assert first.item["title"] == "Old"
        assert len(cache) == 1

    def test_evicts_oldest_insertion(self, cache):
        """The entry inserted first is evicted first."""
        for id in ("a", "b", "c", "d"):
            cache.insert(id, {"id": id})

        assert len(cache) == 3
        assert "a" not in cache
        assert cache.ids() == ["b", "c", "d"]

    def test_reads_do_not_refresh_position(self, cache):
        """Eviction follows insertion time, not access time."""
        for id in ("a", "b", "c"):
            cache.insert(id, {"id": id})

        cache.lookup("a")
        cache.get("a")
        cache.insert("d", {"id": "d"})

        assert "a" not in cache
        assert cache.ids() == ["b", "c", "d"]

    def test_reinsert_moves_entry_to_newest(self, cache):
        """Refreshing an entry protects it from the next eviction."""
        for id in ("a", "b", "c"):
            cache.insert(id, {"id": id})

        cache.insert("a", {"id": "a", "v": 2})
        cache.insert("d", {"id": "d"})

        assert cache.ids() == ["c", "a", "d"]

    def test_explicit_evict_to_smaller_capacity(self, cache):
        """evict() trims down to the requested capacity."""
        for id in ("a", "b", "c"):
            cache.insert(id, {"id": id})

        cache.evict(1)

        assert cache.ids() == ["c"]

    @pytest.mark.parametrize("capacity", [0, 1, 2, 5, 40])
    def test_size_bound_and_survivors(self, capacity):
        """Size never exceeds capacity and survivors are the most recent ids."""
        cache = EntityCache(capacity)
        inserted = []
        for n in range(60):
            id = f"id-{n}"
            cache.insert(id, {"id": id})
            inserted.append(id)

            assert len(cache) <= capacity
            expected = inserted[-capacity:] if capacity else []
            assert cache.ids() == expected
