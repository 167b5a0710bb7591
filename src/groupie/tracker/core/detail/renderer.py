# groupie/tracker/core/detail/renderer.py
"""
Artist detail renderer.

Builds the complete initial render tree for one entity synchronously. Output
order is fixed: raw JSON block, image, preferred fields in declared order,
residual fields, identifier table. URL-valued parts become placeholders in a
fresh :class:`PlaceholderArena`; resolving them is the link resolver's job.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from markupsafe import Markup

from groupie.tracker.contracts.entity import (
    GEOGRAPHIC_FIELD,
    IMAGE_FIELD,
    LIST_FIELDS,
    MEMBERS_FIELD,
    PREFERRED_FIELDS,
    Entity,
    IdentifierEntry,
    JsonKind,
    display_string,
    is_truthy,
    json_kind,
    normalize_entity,
    to_json,
)
from groupie.tracker.contracts.render import Element, Node, PlaceholderArena, Text, element
from groupie.tracker.core.detail.lists import EMPTY_LABEL, LOADING_LABEL, empty_marker, is_http_url, split_to_list
from groupie.tracker.core.detail.markup import to_html
from groupie.tracker.core.detail.normalize import resolve_field
from groupie.tracker.core.detail.scanner import scan_identifiers

logger = logging.getLogger(__name__)

Translate = Callable[[str], str]


def _identity(key: str) -> str:
    return key


@dataclass
class RenderedDetail:
    """Result of one render pass.

    Attributes:
        title: Artist name, or the translated fallback title.
        tree: Root ``<div class="artist-detail">`` element.
        arena: Placeholder slots allocated while rendering ``tree``.
        identifiers: Identifier table entries, in discovery order.
    """

    title: str
    tree: Element
    arena: PlaceholderArena
    identifiers: list[IdentifierEntry] = field(default_factory=list)

    def to_html(self) -> Markup:
        return to_html(self.tree, self.arena)


class DetailRenderer:
    """Renders entities with an injected ``translate(key) -> str`` function."""

    def __init__(self, translate: Translate | None = None) -> None:
        self._t = translate or _identity

    # -- helpers ---------------------------------------------------------

    def _text(self, key: str, default: str) -> str:
        text = self._t(key)
        return default if text == key else text

    def _empty(self) -> Node:
        return empty_marker(self._text("detail.empty", EMPTY_LABEL))

    def _field_label(self, name: str) -> str:
        key = f"field.{name}"
        label = self._t(key)
        return name if label == key else label

    def _label(self, text: str) -> Element:
        return element("strong", Text(f"{text}:"))

    def _split(self, value: Any, allow_url_fetch: bool, arena: PlaceholderArena) -> Node:
        return split_to_list(
            value,
            allow_url_fetch,
            arena,
            loading_label=self._text("detail.loading", LOADING_LABEL),
            empty_label=self._text("detail.empty", EMPTY_LABEL),
        )

    def _raw_json(self, entity: Entity) -> Element:
        return element(
            "details",
            element("summary", Text(self._t("detail.raw_json"))),
            element("pre", Text(to_json(entity, pretty=True)), class_="raw-json"),
            class_="raw-json-details",
        )

    def _image(self, entity: Entity, image: Any) -> Element:
        name = resolve_field(entity, "name")
        return element(
            "div",
            element(
                "img",
                src=display_string(image),
                alt=display_string(name) if name is not None else "",
            ),
            class_="detail-image",
        )

    def _members(self, value: Any) -> Node:
        if json_kind(value) is JsonKind.ARRAY:
            return element("ul", *(element("li", Text(display_string(m))) for m in value))
        if is_truthy(value):
            return element("div", Text(display_string(value)))
        return self._empty()

    # -- preferred fields ------------------------------------------------

    def _field(self, name: str, value: Any, arena: PlaceholderArena) -> Node:
        label = self._field_label(name)
        if name == MEMBERS_FIELD:
            return element("div", element("p", self._label(label)), self._members(value), class_="field")
        if name in LIST_FIELDS:
            listing = self._split(value, name != GEOGRAPHIC_FIELD, arena)
            return element("div", element("p", self._label(label)), listing, class_="field")
        return element("p", self._label(label), Text(" " + display_string(value)), class_="field")

    def render_field(
        self,
        entity: Mapping[str, Any],
        name: str,
        arena: PlaceholderArena | None = None,
    ) -> Node:
        """Render one preferred field; absent fields yield the empty marker."""
        value = resolve_field(entity, name)
        if value is None:
            return self._empty()
        return self._field(name, value, arena if arena is not None else PlaceholderArena())

    # -- residual fields -------------------------------------------------

    def _other_field(self, key: str, value: Any, arena: PlaceholderArena) -> Node:
        geographic = key.lower() == GEOGRAPHIC_FIELD.lower()
        kind = json_kind(value)
        if kind is JsonKind.STRING and is_http_url(value) and not geographic:
            placeholder = arena.allocate(value, self._text("detail.loading", LOADING_LABEL))
            return element("div", self._label(key), placeholder, class_="field")
        if kind is JsonKind.STRING and ("," in value or ";" in value):
            return element("div", self._label(key), self._split(value, not geographic, arena), class_="field")
        return element("p", self._label(key), Text(" "), element("span", Text(display_string(value))), class_="field")

    def _identifier_table(self, entries: list[IdentifierEntry]) -> list[Node]:
        items: list[Node] = []
        for entry in entries:
            if entry.url:
                shown: Node = element("a", Text(entry.id), href=entry.url, target="_blank", rel="noopener")
            else:
                shown = Text(entry.id)
            items.append(element("li", self._label(entry.name), Text(" "), shown))
        return [
            element("hr"),
            element("h3", Text(self._t("detail.identifiers"))),
            element("ul", *items, class_="identifiers"),
        ]

    # -- isolation -------------------------------------------------------

    def _guarded(self, what: str, build: Callable[[], Node], arena: PlaceholderArena) -> Node:
        mark = len(arena)
        try:
            return build()
        except Exception:
            logger.exception("Failed to render %s, showing it as empty", what)
            arena.truncate(mark)
            return self._empty()

    # -- entry point -----------------------------------------------------

    def render(self, raw: Mapping[str, Any]) -> RenderedDetail:
        entity = normalize_entity(raw)
        arena = PlaceholderArena()
        parts: list[Node] = [self._raw_json(entity)]

        image = resolve_field(entity, IMAGE_FIELD)
        if image is not None and is_truthy(image):
            parts.append(self._guarded("image", lambda: self._image(entity, image), arena))

        for name in PREFERRED_FIELDS:
            value = resolve_field(entity, name)
            if value is None or name == IMAGE_FIELD:
                continue
            parts.append(
                self._guarded(
                    f"field '{name}'",
                    lambda name=name, value=value: self._field(name, value, arena),
                    arena,
                )
            )

        shown = {name.lower() for name in PREFERRED_FIELDS}
        others = [key for key in entity if key.lower() not in shown]
        if others:
            parts.append(element("hr"))
            parts.append(element("h3", Text(self._t("detail.other_fields"))))
            for key in others:
                parts.append(
                    self._guarded(
                        f"field '{key}'",
                        lambda key=key: self._other_field(key, entity[key], arena),
                        arena,
                    )
                )

        identifiers = scan_identifiers(entity)
        if identifiers:
            parts.extend(self._identifier_table(identifiers))

        name = resolve_field(entity, "name")
        title = display_string(name) if name is not None else self._t("detail.title_fallback")

        logger.debug(
            "Rendered entity id=%s: %d field(s), %d placeholder(s), %d identifier(s)",
            resolve_field(entity, "id"),
            len(entity),
            len(arena),
            len(identifiers),
        )
        return RenderedDetail(
            title=title,
            tree=element("div", *parts, class_="artist-detail"),
            arena=arena,
            identifiers=identifiers,
        )
