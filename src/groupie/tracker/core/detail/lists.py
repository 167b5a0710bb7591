# groupie/tracker/core/detail/lists.py
"""
Turns delimited field values into list nodes.
"""
from __future__ import annotations

import re
from typing import Any

from groupie.tracker.contracts.entity import JsonKind, display_string, is_truthy, json_kind
from groupie.tracker.contracts.render import Node, PlaceholderArena, Text, element

DELIMITERS = re.compile(r"[,;]+")
HTTP_URL = re.compile(r"^https?://", re.IGNORECASE)

EMPTY_LABEL = "—"
LOADING_LABEL = "Loading…"


def empty_marker(label: str = EMPTY_LABEL) -> Node:
    return element("em", Text(label), class_="empty")


def is_http_url(value: str) -> bool:
    return bool(HTTP_URL.match(value))


def _parts(value: Any) -> list[str]:
    if json_kind(value) is JsonKind.ARRAY:
        return [p for p in (display_string(v).strip() for v in value) if p]
    return [p.strip() for p in DELIMITERS.split(display_string(value)) if p.strip()]


def split_to_list(
    value: Any,
    allow_url_fetch: bool,
    arena: PlaceholderArena,
    *,
    loading_label: str = LOADING_LABEL,
    empty_label: str = EMPTY_LABEL,
) -> Node:
    """Render a comma/semicolon separated value as a ``<ul>``.

    HTTP(S) parts become deferred placeholders allocated in ``arena`` when
    ``allow_url_fetch`` is set. The caller decides the policy; the geographic
    field always passes ``False``.
    """
    if value is None or not is_truthy(value):
        return empty_marker(empty_label)

    parts = _parts(value)
    if not parts:
        return element("div", Text(display_string(value)))

    items: list[Node] = []
    for part in parts:
        if allow_url_fetch and is_http_url(part):
            items.append(element("li", arena.allocate(part, loading_label)))
        else:
            items.append(element("li", Text(part)))
    return element("ul", *items)
