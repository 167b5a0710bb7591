# groupie/tracker/core/artists/source.py
"""
Where the detail page gets its entity from.

``StoreArtistSource`` reads the local in-memory store; ``HttpArtistSource``
is a thin async client for a remote artists API exposing
``GET {base_url}/artists/{id}``.
"""
from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from groupie.tracker.core.artists.store import ArtistNotFound, ArtistStore

logger = logging.getLogger(__name__)


class ArtistSourceError(RuntimeError):
    """Raised when an artist cannot be fetched for a reason other than not-found."""

    def __init__(self, artist_id: str, reason: str):
        self.artist_id = artist_id
        self.reason = reason
        super().__init__(f"Cannot fetch artist '{artist_id}': {reason}")


class ArtistSource(Protocol):
    async def fetch_artist(self, artist_id: str) -> dict[str, Any]: ...


class StoreArtistSource:
    def __init__(self, store: ArtistStore) -> None:
        self._store = store

    async def fetch_artist(self, artist_id: str) -> dict[str, Any]:
        try:
            numeric_id = int(artist_id)
        except ValueError:
            raise ArtistNotFound(artist_id) from None
        return self._store.get(numeric_id).to_payload()


class HttpArtistSource:
    """HTTP client for a remote artists API.

    Contract::

        GET /artists/{id}
        200 -> JSON object, 404 -> not found
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def fetch_artist(self, artist_id: str) -> dict[str, Any]:
        url = f"{self._base}/artists/{artist_id}"
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            try:
                resp = await client.get(url)
                resp.raise_for_status()
            except httpx.HTTPStatusError as ex:
                if ex.response.status_code == 404:
                    raise ArtistNotFound(artist_id) from ex
                logger.warning(
                    "Artist request failed url=%s status=%d", url, ex.response.status_code
                )
                raise ArtistSourceError(artist_id, f"status {ex.response.status_code}") from ex
            except httpx.HTTPError as ex:
                logger.warning("Artist request failed url=%s: %s", url, ex)
                raise ArtistSourceError(artist_id, str(ex) or type(ex).__name__) from ex

            try:
                payload = resp.json()
            except ValueError as ex:
                raise ArtistSourceError(artist_id, "response is not JSON") from ex

        if not isinstance(payload, dict):
            raise ArtistSourceError(artist_id, f"expected a JSON object, got {type(payload).__name__}")
        return payload
