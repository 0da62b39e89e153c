"""
Request URL assembly.
"""

from typing import Any, Dict, Optional, Sequence
from urllib.parse import quote

import httpx


def path_segment(value: str) -> str:
    """Escape an id for use as a single URL path segment."""
    return quote(str(value), safe="")


def join_fields(fields: Optional[Sequence[str]]) -> Optional[str]:
    """Comma-join a projection list; ``None`` when there is nothing to project."""
    if not fields:
        return None
    if isinstance(fields, str):
        return fields
    return ",".join(fields)


def build_url(base: str, params: Optional[Dict[str, Any]] = None) -> str:
    """Append ``params`` to ``base``, omitting absent and empty values."""
    present = {
        key: value
        for key, value in (params or {}).items()
        if value is not None and value != ""
    }
    if not present:
        return base
    return f"{base}?{httpx.QueryParams(present)}"
