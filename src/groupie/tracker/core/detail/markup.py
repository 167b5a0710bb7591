# groupie/tracker/core/detail/markup.py
"""
HTML serialization of render trees.

All text and attribute values go through ``markupsafe.escape``; nothing in a
render tree is ever trusted markup.
"""
from __future__ import annotations

from markupsafe import Markup, escape

from groupie.tracker.contracts.render import (
    Element,
    Node,
    Placeholder,
    PlaceholderArena,
    Text,
)

VOID_ELEMENTS = frozenset({"img", "hr", "br"})


def _attrs(attrs: tuple[tuple[str, str], ...]) -> str:
    return "".join(f' {name}="{escape(value)}"' for name, value in attrs)


def _placeholder(node: Placeholder, arena: PlaceholderArena | None, out: list[str]) -> None:
    slot = arena.get(node.slot) if arena is not None else None
    state = slot.state.value if slot is not None else "loading"
    out.append(
        f'<div class="placeholder" data-slot="{node.slot}" '
        f'data-url="{escape(node.url)}" data-state="{state}">'
    )
    if slot is not None and slot.settled and slot.content is not None:
        _serialize(slot.content, arena, out)
    else:
        out.append(str(escape(node.label)))
    out.append("</div>")


def _serialize(node: Node, arena: PlaceholderArena | None, out: list[str]) -> None:
    if isinstance(node, Text):
        out.append(str(escape(node.value)))
    elif isinstance(node, Placeholder):
        _placeholder(node, arena, out)
    elif isinstance(node, Element):
        out.append(f"<{node.tag}{_attrs(node.attrs)}>")
        if node.tag in VOID_ELEMENTS:
            return
        for child in node.children:
            _serialize(child, arena, out)
        out.append(f"</{node.tag}>")
    else:
        raise TypeError(f"Unknown render node: {type(node).__name__}")


def to_html(node: Node, arena: PlaceholderArena | None = None) -> Markup:
    """Serialize ``node``; placeholders show their slot's current state in ``arena``."""
    out: list[str] = []
    _serialize(node, arena, out)
    return Markup("".join(out))
