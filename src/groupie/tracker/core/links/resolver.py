# groupie/tracker/core/links/resolver.py
"""
Link resolver.

Runs after the initial render tree has been delivered. Every pending slot of
a :class:`PlaceholderArena` gets exactly one fetch, run concurrently and
independently; each task writes only to its own slot. Any failure settles the
slot as a plain link to the original URL.
"""
from __future__ import annotations

import asyncio
import logging
from typing import AsyncIterator, Callable

import httpx

from groupie.tracker.contracts.render import PlaceholderArena, PlaceholderSlot
from groupie.tracker.core.links.content import Content, fallback_link, from_json, from_text

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


def _identity(key: str) -> str:
    return key


class LinkResolver:
    """Resolves deferred placeholders with httpx.

    Args:
        timeout: Per-request timeout in seconds; ``None`` waits forever.
            A timeout counts as a failure and yields the link fallback.
        text_limit: Maximum length of plain-text bodies before truncation.
        translate: Label lookup for summary fields.
        transport: Optional httpx transport (tests use ``httpx.MockTransport``).
    """

    def __init__(
        self,
        *,
        timeout: float | None = 10.0,
        text_limit: int = 1000,
        translate: Callable[[str], str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._text_limit = text_limit
        self._translate = translate or _identity
        self._transport = transport

    def with_translate(self, translate: Callable[[str], str]) -> LinkResolver:
        """Same settings, labels in another language."""
        return LinkResolver(
            timeout=self._timeout,
            text_limit=self._text_limit,
            translate=translate,
            transport=self._transport,
        )

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._timeout,
            follow_redirects=True,
            transport=self._transport,
        )

    async def _fetch(self, client: httpx.AsyncClient, url: str) -> Content:
        resp = await client.get(url)
        resp.raise_for_status()
        content_type = resp.headers.get("content-type", "")
        if JSON_CONTENT_TYPE in content_type:
            return from_json(resp.json(), self._translate)
        return from_text(resp.text, self._text_limit)

    async def resolve_slot(self, client: httpx.AsyncClient, slot: PlaceholderSlot) -> PlaceholderSlot:
        """Fetch ``slot.url`` once and settle the slot. Never raises."""
        try:
            state, content = await self._fetch(client, slot.url)
        except asyncio.CancelledError:
            raise
        except httpx.HTTPStatusError as exc:
            logger.info("Link %s answered %d, falling back to a link", slot.url, exc.response.status_code)
            state, content = fallback_link(slot.url)
        except Exception as exc:
            logger.info("Link %s could not be resolved (%s), falling back to a link", slot.url, exc)
            state, content = fallback_link(slot.url)

        if not slot.settled:
            slot.settle(state, content)
        return slot

    async def resolve_all(self, arena: PlaceholderArena) -> None:
        """Resolve every pending slot concurrently."""
        pending = arena.pending()
        if not pending:
            return
        logger.debug("Resolving %d placeholder(s)", len(pending))
        async with self._client() as client:
            await asyncio.gather(*(self.resolve_slot(client, slot) for slot in pending))

    async def resolve_as_completed(self, arena: PlaceholderArena) -> AsyncIterator[PlaceholderSlot]:
        """Yield slots as they settle, in completion order.

        Closing the iterator early (the page went away) cancels the fetches
        still in flight and closes the arena, so late results are dropped.
        """
        pending = arena.pending()
        if not pending:
            return
        async with self._client() as client:
            tasks = [asyncio.ensure_future(self.resolve_slot(client, slot)) for slot in pending]
            try:
                for next_done in asyncio.as_completed(tasks):
                    yield await next_done
            finally:
                in_flight = [task for task in tasks if not task.done()]
                if in_flight:
                    arena.close()
                    for task in in_flight:
                        task.cancel()
                    await asyncio.gather(*in_flight, return_exceptions=True)
