# groupie/tracker/core/detail/scanner.py
"""
Identifier scanner.

Walks an entity and collects every identifier it can find: the entity's own
id, numeric path segments of URL-like strings, purely numeric strings, and
``id`` members of nested objects (directly or inside arrays). The scan is a
heuristic over untyped data and never raises.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Mapping

from groupie.tracker.contracts.entity import (
    SCAN_DENYLIST,
    IdentifierEntry,
    JsonKind,
    display_string,
    is_truthy,
    json_kind,
)
from groupie.tracker.core.detail.normalize import resolve_field

logger = logging.getLogger(__name__)

PATH_ID = re.compile(r"/(\d+)\b", re.ASCII)
NUMERIC = re.compile(r"^(\d+)$", re.ASCII)

ENTITY_ID_NAME = "artist"


def _kind(value: Any) -> JsonKind | None:
    try:
        return json_kind(value)
    except TypeError:
        return None


class _Collector:
    """Ordered identifier entries, unique on ``(name, id)``."""

    def __init__(self) -> None:
        self.entries: list[IdentifierEntry] = []
        self._seen: set[tuple[str, str]] = set()

    def add(self, name: str, value: Any, url: str | None = None) -> None:
        if value is None:
            return
        ident = display_string(value)
        if (name, ident) in self._seen:
            return
        self._seen.add((name, ident))
        self.entries.append(IdentifierEntry(name=name, id=ident, url=url))

    def add_from_string(self, name: str, value: str) -> None:
        match = PATH_ID.search(value)
        if match:
            self.add(name, match.group(1), value)
            return
        match = NUMERIC.match(value)
        if match:
            self.add(name, match.group(1))

    def add_from_object(self, name: str, value: Mapping[str, Any]) -> None:
        ident = value.get("id")
        if ident is not None and is_truthy(ident):
            self.add(name, ident)


def scan_identifiers(
    entity: Mapping[str, Any],
    *,
    denylist: frozenset[str] = SCAN_DENYLIST,
) -> list[IdentifierEntry]:
    """Collect ``(name, id, url)`` entries in discovery order.

    The entity's own id comes first under the name ``artist``; then fields in
    iteration order, then array elements in order. Fields whose lower-cased
    name is in ``denylist`` are skipped.
    """
    found = _Collector()
    found.add(ENTITY_ID_NAME, resolve_field(entity, "id"))

    for name, value in entity.items():
        if name.lower() in denylist:
            continue
        kind = _kind(value)
        if kind is None:
            logger.debug("Skipping non-JSON field '%s' during identifier scan", name)
            continue
        if not is_truthy(value):
            continue

        if kind is JsonKind.STRING:
            found.add_from_string(name, value)
        elif kind is JsonKind.ARRAY:
            for item in value:
                item_kind = _kind(item)
                if item_kind is JsonKind.OBJECT:
                    found.add_from_object(name, item)
                elif item_kind is JsonKind.STRING:
                    found.add_from_string(name, item)
        elif kind is JsonKind.OBJECT:
            found.add_from_object(name, value)
        # NULL, BOOLEAN and NUMBER fields carry no discoverable identifier.

    return found.entries
