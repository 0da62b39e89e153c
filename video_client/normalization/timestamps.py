"""
Published-at coercion for catalog entities.
"""

import re
from datetime import datetime
from typing import Any, Dict, List, Optional

from video_client.shared.logging import get_logger

PUBLISHED_AT = "publishedAt"

_FRACTION = re.compile(r"\.(\d+)(?=[+-]\d{2}:\d{2}$|$)")

logger = get_logger("video_client.normalization")


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing ``Z``.

    Fractional seconds of any precision are padded or truncated to
    microseconds. Raises ``ValueError`` when the text is not a timestamp.
    """
    candidate = value.strip()
    if candidate.endswith("Z"):
        candidate = candidate[:-1] + "+00:00"
    candidate = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), candidate)
    return datetime.fromisoformat(candidate)


def coerce_timestamp(entity: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Replace a textual ``publishedAt`` with a ``datetime``, in place.

    Unparseable values are left as they are.
    """
    if not entity:
        return entity
    value = entity.get(PUBLISHED_AT)
    if isinstance(value, str) and value:
        try:
            entity[PUBLISHED_AT] = parse_timestamp(value)
        except ValueError:
            logger.debug("Unparseable publishedAt left as text", value=value, id=entity.get("id"))
    return entity


def coerce_timestamp_list(entities: Optional[List[Dict[str, Any]]]) -> List[Dict[str, Any]]:
    if not entities:
        return entities if entities is not None else []
    for entity in entities:
        coerce_timestamp(entity)
    return entities
