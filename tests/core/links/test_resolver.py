from __future__ import annotations

import asyncio

import httpx
import pytest

from groupie.tracker.contracts.render import Element, PlaceholderArena, SlotState, Text
from groupie.tracker.core.links.resolver import LinkResolver


def _arena(*urls: str) -> PlaceholderArena:
    arena = PlaceholderArena()
    for url in urls:
        arena.allocate(url)
    return arena


def _resolver(handler, **kwargs) -> LinkResolver:
    return LinkResolver(transport=httpx.MockTransport(handler), **kwargs)


@pytest.mark.asyncio
async def test_array_body_becomes_list():
    arena = _arena("http://x.test/dates/1")
    await _resolver(lambda request: httpx.Response(200, json=["*1973-07-13", 4])).resolve_all(arena)

    assert arena[0].state is SlotState.LIST
    assert arena[0].content == Element(
        tag="ul",
        children=(
            Element(tag="li", children=(Text("*1973-07-13"),)),
            Element(tag="li", children=(Text("4"),)),
        ),
    )


@pytest.mark.asyncio
async def test_known_fields_become_summary(translate):
    body = {"id": 1, "locations": ["london-uk", "paris-france"], "dates": []}
    arena = _arena("http://x.test/locations/1")
    resolver = _resolver(lambda request: httpx.Response(200, json=body), translate=translate)

    await resolver.resolve_all(arena)

    assert arena[0].state is SlotState.SUMMARY
    assert arena[0].content == Element(
        tag="div",
        children=(
            Element(
                tag="p",
                children=(
                    Element(tag="strong", children=(Text("Locations:"),)),
                    Text(' ["london-uk","paris-france"]'),
                ),
            ),
            Element(
                tag="p",
                children=(
                    Element(tag="strong", children=(Text("Dates:"),)),
                    Text(" []"),
                ),
            ),
        ),
        attrs=(("class", "linked-summary"),),
    )


@pytest.mark.asyncio
async def test_other_object_is_pretty_printed():
    arena = _arena("http://x.test/misc/1")
    await _resolver(lambda request: httpx.Response(200, json={"a": 1})).resolve_all(arena)

    assert arena[0].state is SlotState.PREFORMATTED
    assert arena[0].content == Element(
        tag="pre", children=(Text('{\n  "a": 1\n}'),), attrs=(("class", "linked-json"),)
    )


@pytest.mark.asyncio
async def test_scalar_body_is_text():
    arena = _arena("http://x.test/count")
    await _resolver(lambda request: httpx.Response(200, json=42)).resolve_all(arena)

    assert arena[0].state is SlotState.TEXT
    assert arena[0].content == Text("42")


@pytest.mark.asyncio
async def test_json_in_plain_text_is_pretty_printed():
    arena = _arena("http://x.test/raw")
    await _resolver(lambda request: httpx.Response(200, text='{"b":[true]}')).resolve_all(arena)

    assert arena[0].state is SlotState.PREFORMATTED
    assert arena[0].content.children == (Text('{\n  "b": [\n    true\n  ]\n}'),)


@pytest.mark.asyncio
async def test_long_text_is_truncated():
    arena = _arena("http://x.test/readme")
    await _resolver(lambda request: httpx.Response(200, text="x" * 30), text_limit=10).resolve_all(arena)

    assert arena[0].state is SlotState.TEXT
    assert arena[0].content == Text("x" * 10 + "...")


@pytest.mark.asyncio
async def test_short_text_kept():
    arena = _arena("http://x.test/readme")
    await _resolver(lambda request: httpx.Response(200, text="hello")).resolve_all(arena)

    assert arena[0].content == Text("hello")


def _link(url: str) -> Element:
    return Element(
        tag="a",
        children=(Text(url),),
        attrs=(("href", url), ("target", "_blank"), ("rel", "noopener")),
    )


@pytest.mark.asyncio
async def test_error_status_falls_back_to_link():
    arena = _arena("http://x.test/relation/1")
    await _resolver(lambda request: httpx.Response(500)).resolve_all(arena)

    assert arena[0].state is SlotState.LINK
    assert arena[0].content == _link("http://x.test/relation/1")


@pytest.mark.asyncio
async def test_network_error_falls_back_to_link():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    arena = _arena("http://x.test/relation/1")
    await _resolver(handler).resolve_all(arena)

    assert arena[0].state is SlotState.LINK


@pytest.mark.asyncio
async def test_timeout_falls_back_to_link():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    arena = _arena("http://x.test/relation/1")
    await _resolver(handler).resolve_all(arena)

    assert arena[0].state is SlotState.LINK


@pytest.mark.asyncio
async def test_invalid_json_falls_back_to_link():
    arena = _arena("http://x.test/relation/1")
    handler = lambda request: httpx.Response(  # noqa: E731
        200, content=b"{oops", headers={"content-type": "application/json"}
    )
    await _resolver(handler).resolve_all(arena)

    assert arena[0].state is SlotState.LINK


@pytest.mark.asyncio
async def test_slots_resolve_independently():
    def handler(request):
        if request.url.path == "/broken":
            return httpx.Response(404)
        return httpx.Response(200, json=[request.url.path])

    arena = _arena("http://x.test/a", "http://x.test/broken", "http://x.test/b")
    await _resolver(handler).resolve_all(arena)

    assert [slot.state for slot in arena] == [SlotState.LIST, SlotState.LINK, SlotState.LIST]
    assert arena[0].content.children[0].children == (Text("/a"),)
    assert arena[2].content.children[0].children == (Text("/b"),)


@pytest.mark.asyncio
async def test_each_url_fetched_once():
    seen: list[str] = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, json=[])

    arena = _arena("http://x.test/1", "http://x.test/2")
    resolver = _resolver(handler)
    await resolver.resolve_all(arena)
    await resolver.resolve_all(arena)

    assert sorted(seen) == ["http://x.test/1", "http://x.test/2"]


@pytest.mark.asyncio
async def test_as_completed_yields_in_completion_order():
    async def handler(request):
        if request.url.path == "/slow":
            await asyncio.sleep(0.2)
        return httpx.Response(200, json=[request.url.path])

    arena = _arena("http://x.test/slow", "http://x.test/fast")
    done = [slot.index async for slot in _resolver(handler).resolve_as_completed(arena)]

    assert done == [1, 0]
    assert arena.pending() == []
    assert not arena.closed


@pytest.mark.asyncio
async def test_closing_stream_cancels_in_flight_fetches():
    never = asyncio.Event()

    async def handler(request):
        if request.url.path == "/hang":
            await never.wait()
        return httpx.Response(200, json=[])

    arena = _arena("http://x.test/hang", "http://x.test/ok")
    stream = _resolver(handler).resolve_as_completed(arena)

    first = await stream.__anext__()
    await stream.aclose()

    assert first.index == 1
    assert arena.closed
    assert arena[0].state is SlotState.LOADING
    assert arena[1].state is SlotState.LIST


@pytest.mark.asyncio
async def test_nothing_pending():
    called = False

    def handler(request):
        nonlocal called
        called = True
        return httpx.Response(200)

    arena = PlaceholderArena()
    resolver = _resolver(handler)
    await resolver.resolve_all(arena)
    assert [slot async for slot in resolver.resolve_as_completed(arena)] == []
    assert not called


@pytest.mark.asyncio
async def test_with_translate_keeps_transport():
    resolver = _resolver(lambda request: httpx.Response(200, json={"relation": "x"}))
    arena = _arena("http://x.test/relation/1")

    await resolver.with_translate(lambda key: key.upper()).resolve_all(arena)

    assert arena[0].content.children[0].children[0] == Element(
        tag="strong", children=(Text("SUMMARY.RELATION:"),)
    )
