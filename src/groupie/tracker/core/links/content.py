# groupie/tracker/core/links/content.py
"""
Turn fetched link bodies into terminal placeholder content.
"""
from __future__ import annotations

import json
from typing import Any, Callable

from groupie.tracker.contracts.entity import JsonKind, display_string, is_truthy, json_kind, to_json
from groupie.tracker.contracts.render import Node, SlotState, Text, element

# Known summary fields of linked resources, with their label keys.
SUMMARY_FIELDS: tuple[tuple[str, str], ...] = (
    ("locations", "summary.locations"),
    ("dates", "summary.dates"),
    ("relation", "summary.relation"),
)

TRUNCATION_MARKER = "..."

Content = tuple[SlotState, Node]


def _preformatted(value: Any) -> Content:
    return SlotState.PREFORMATTED, element("pre", Text(to_json(value, pretty=True)), class_="linked-json")


def from_json(body: Any, translate: Callable[[str], str]) -> Content:
    """Content for a decoded JSON body."""
    kind = json_kind(body)
    if kind is JsonKind.ARRAY:
        return SlotState.LIST, element("ul", *(element("li", Text(display_string(item))) for item in body))
    if kind is JsonKind.OBJECT:
        lines = [
            element("p", element("strong", Text(f"{translate(label)}:")), Text(" " + to_json(body[key])))
            for key, label in SUMMARY_FIELDS
            if body.get(key) is not None and is_truthy(body[key])
        ]
        if lines:
            return SlotState.SUMMARY, element("div", *lines, class_="linked-summary")
        return _preformatted(body)
    return SlotState.TEXT, Text(display_string(body))


def from_text(text: str, limit: int) -> Content:
    """Content for a non-JSON body: embedded JSON is pretty-printed, anything else truncated."""
    try:
        parsed = json.loads(text)
    except ValueError:
        if len(text) > limit:
            text = text[:limit] + TRUNCATION_MARKER
        return SlotState.TEXT, Text(text)
    return _preformatted(parsed)


def fallback_link(url: str) -> Content:
    return SlotState.LINK, element("a", Text(url), href=url, target="_blank", rel="noopener")
