# groupie/tracker/contracts/entity.py
"""
Entity contracts for schema-less artist payloads.

An entity is whatever JSON object the artists API returns for one artist.
Nothing about its shape is guaranteed: keys may be camelCase or Capitalized,
values may be missing, null or of an unexpected kind. Every traversal site
classifies values with :func:`json_kind` and handles all six kinds.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

logger = logging.getLogger(__name__)

Entity = dict[str, Any]

# Rendering priority of the logical fields of an artist.
PREFERRED_FIELDS: tuple[str, ...] = (
    "name",
    "id",
    "image",
    "creationDate",
    "firstAlbum",
    "locations",
    "concertDates",
    "relations",
    "members",
)

IMAGE_FIELD = "image"
MEMBERS_FIELD = "members"
GEOGRAPHIC_FIELD = "locations"
LIST_FIELDS = frozenset({"locations", "concertDates", "relations"})

# Field names (lower-cased) never scanned for identifiers: place names are not links.
SCAN_DENYLIST = frozenset({GEOGRAPHIC_FIELD.lower()})


class JsonKind(str, Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def json_kind(value: Any) -> JsonKind:
    """Classify a decoded JSON value.

    Raises:
        TypeError: If ``value`` is not one of the six JSON kinds. Entities
            pass through :func:`normalize_entity` first, so this only fires
            on programming errors.
    """
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def normalize_entity(raw: Any) -> Entity:
    """Return a plain JSON copy of ``raw`` (tuples become lists, unknown types strings)."""
    if not isinstance(raw, Mapping):
        logger.warning("Entity is not a mapping (%s), rendering it as empty", type(raw).__name__)
        return {}
    return json.loads(json.dumps(dict(raw), default=str))


def to_json(value: Any, *, pretty: bool = False) -> str:
    if pretty:
        return json.dumps(value, indent=2, ensure_ascii=False, default=str)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def display_string(value: Any) -> str:
    """Generic string form of a JSON value, as a browser would print it."""
    kind = json_kind(value)
    if kind is JsonKind.STRING:
        return value
    if kind is JsonKind.NULL:
        return "null"
    if kind is JsonKind.BOOLEAN:
        return "true" if value else "false"
    if kind is JsonKind.NUMBER:
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
    # ARRAY / OBJECT
    return to_json(value)


def is_truthy(value: Any) -> bool:
    """JSON truthiness: empty strings, zero, false and null are falsy; containers never are."""
    kind = json_kind(value)
    if kind in (JsonKind.ARRAY, JsonKind.OBJECT):
        return True
    return bool(value)


@dataclass(frozen=True)
class IdentifierEntry:
    """An identifier discovered somewhere in an entity.

    Attributes:
        name: Field the identifier was found in (``artist`` for the entity's own id).
        id: The identifier, always as a string.
        url: The full string it was extracted from, when it came from a URL.
    """

    name: str
    id: str
    url: str | None = None
