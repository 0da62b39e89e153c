"""
Not-found suppression for single-entity fetches.
"""

from typing import Any, Awaitable, Dict, Optional

from video_client.shared.errors import is_not_found, status_of
from video_client.shared.logging import get_logger
from .timestamps import coerce_timestamp

logger = get_logger("video_client.normalization")


async def suppress_not_found(call: Awaitable[Any]) -> Optional[Dict[str, Any]]:
    """Await a single-entity fetch, mapping 404/410 failures to ``None``.

    On success the entity's ``publishedAt`` is coerced. Every other failure
    is re-raised unchanged.
    """
    try:
        entity = await call
    except Exception as exc:
        if is_not_found(exc):
            logger.info("Entity not found", status_code=status_of(exc))
            return None
        raise
    return coerce_timestamp(entity)
