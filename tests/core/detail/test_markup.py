from __future__ import annotations

import pytest

from groupie.tracker.contracts.render import PlaceholderArena, SlotState, Text, element
from groupie.tracker.core.detail.markup import to_html


def test_elements_and_attributes():
    node = element("a", Text("x"), href='http://x.test/?a=1&b="2"', class_="link")
    assert to_html(node) == '<a href="http://x.test/?a=1&amp;b=&#34;2&#34;" class="link">x</a>'


def test_void_elements_have_no_closing_tag():
    node = element("div", element("hr"), element("img", src="i.png", alt=""))
    assert to_html(node) == '<div><hr><img src="i.png" alt=""></div>'


def test_text_is_escaped():
    assert to_html(Text("<i>&</i>")) == "&lt;i&gt;&amp;&lt;/i&gt;"


def test_loading_placeholder():
    arena = PlaceholderArena()
    node = element("li", arena.allocate("http://x.test/dates/1", "Loading…"))

    assert to_html(node, arena) == (
        '<li><div class="placeholder" data-slot="0" data-url="http://x.test/dates/1" '
        'data-state="loading">Loading…</div></li>'
    )


def test_settled_placeholder_shows_content():
    arena = PlaceholderArena()
    placeholder = arena.allocate("http://x.test/dates/1")
    arena[0].settle(SlotState.TEXT, Text("1973"))

    assert to_html(placeholder, arena) == (
        '<div class="placeholder" data-slot="0" data-url="http://x.test/dates/1" '
        'data-state="text">1973</div>'
    )


def test_placeholder_without_arena_is_loading():
    placeholder = PlaceholderArena().allocate("http://x.test/1", "…")
    assert 'data-state="loading">…</div>' in to_html(placeholder)


def test_unknown_node_rejected():
    with pytest.raises(TypeError):
        to_html(element("div", "not a node"))  # type: ignore[arg-type]
