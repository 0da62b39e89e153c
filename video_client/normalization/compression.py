"""
Expansion of compacted list payloads.

The catalog service may send the ``list`` field of a list response in one of
three shapes::

    [{...}, {...}]                                   # expanded
    {"shared": {...}, "rows": [{...}, {...}]}        # compacted
    {"container": {"field": "channelId", "id": "UC1"},
     "shared": {...}, "rows": [...]}                 # compacted, one container

``shared`` holds the fields every entity has in common and each row holds the
remaining per-entity fields. In the container form every entity also belongs
to the same enclosing container, whose id is written back into ``field`` on
expansion. The payload is decoded once into one of the variants below and
expanded from there.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from video_client.shared.errors import ValidationError

SHARED = "shared"
ROWS = "rows"
CONTAINER = "container"

Entity = Dict[str, Any]


@dataclass(frozen=True)
class ExpandedList:
    items: List[Entity]
    kind: str = field(default="expanded", init=False)

    def expand(self) -> List[Entity]:
        return self.items


@dataclass(frozen=True)
class CompactList:
    shared: Entity
    rows: List[Entity]
    kind: str = field(default="compact", init=False)

    def expand(self) -> List[Entity]:
        return [{**self.shared, **row} for row in self.rows]


@dataclass(frozen=True)
class CompactItems:
    container_field: str
    container_id: Any
    shared: Entity
    rows: List[Entity]
    kind: str = field(default="compact_items", init=False)

    def expand(self) -> List[Entity]:
        return [
            {**self.shared, **row, self.container_field: self.container_id}
            for row in self.rows
        ]


ListPayload = Union[ExpandedList, CompactList, CompactItems]


def decode_list(raw: Any) -> ListPayload:
    """Decode a raw ``list`` payload into its tagged variant."""
    if isinstance(raw, (ExpandedList, CompactList, CompactItems)):
        return raw
    if raw is None:
        return ExpandedList(items=[])
    if isinstance(raw, list):
        return ExpandedList(items=raw)
    if isinstance(raw, dict) and ROWS in raw:
        shared = raw.get(SHARED) or {}
        rows = raw.get(ROWS) or []
        container = raw.get(CONTAINER)
        if container:
            try:
                return CompactItems(
                    container_field=container["field"],
                    container_id=container["id"],
                    shared=shared,
                    rows=rows
                )
            except (KeyError, TypeError) as exc:
                raise ValidationError(
                    "Malformed container in compacted list",
                    details={"container": container}
                ) from exc
        return CompactList(shared=shared, rows=rows)
    raise ValidationError(
        "Unrecognized list payload",
        details={"type": type(raw).__name__}
    )


def expand_compressed_list(raw: Any) -> List[Entity]:
    """Return the fully expanded entity list for any list payload shape."""
    return decode_list(raw).expand()


def expand_compressed_items(raw: Any, container_field: Optional[str] = None) -> List[Entity]:
    """Expand a list whose entities sit inside an enclosing container.

    When ``container_field`` is given, a container-form payload must name
    that same field.
    """
    payload = decode_list(raw)
    if (
        container_field
        and isinstance(payload, CompactItems)
        and payload.container_field != container_field
    ):
        raise ValidationError(
            "Unexpected container field in compacted list",
            details={"expected": container_field, "actual": payload.container_field}
        )
    return payload.expand()


def compact_list(entities: List[Entity]) -> Dict[str, Any]:
    """Factor the fields common to every entity out into ``shared``."""
    if not entities:
        return {SHARED: {}, ROWS: []}
    first, rest = entities[0], entities[1:]
    shared = {
        key: value
        for key, value in first.items()
        if all(key in other and other[key] == value for other in rest)
    }
    rows = [
        {key: value for key, value in entity.items() if key not in shared}
        for entity in entities
    ]
    return {SHARED: shared, ROWS: rows}


def compact_items(entities: List[Entity], container_field: str) -> Dict[str, Any]:
    """Compact a list, hoisting ``container_field`` when all entities share it."""
    if not entities or any(container_field not in entity for entity in entities):
        return compact_list(entities)
    container_id = entities[0][container_field]
    if any(entity[container_field] != container_id for entity in entities):
        return compact_list(entities)

    stripped = [
        {key: value for key, value in entity.items() if key != container_field}
        for entity in entities
    ]
    payload = compact_list(stripped)
    payload[CONTAINER] = {"field": container_field, "id": container_id}
    return payload
