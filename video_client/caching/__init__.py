"""
Caching package for the video client.
"""

from .entity_cache import CacheEntry, EntityCache

__all__ = ["CacheEntry", "EntityCache"]
