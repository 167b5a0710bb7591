# groupie/tracker/api/artists.py
"""
Artists collection API backed by the in-memory store.

URL structure::

    GET    /api/artists?name=...
    POST   /api/artists
    GET    /api/artists/{artist_id}
    PUT    /api/artists/{artist_id}
    DELETE /api/artists/{artist_id}
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response

from groupie.tracker.api.dependencies import get_infra
from groupie.tracker.api.exceptions import BadRequest, NotFound
from groupie.tracker.contracts.artist import Artist
from groupie.tracker.contracts.infrastructure import Infrastructure
from groupie.tracker.core.artists.store import ArtistNotFound

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/artists", tags=["artists"])


def _parse_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise BadRequest("invalid id") from None


@router.get("")
async def list_artists(name: str | None = None, infra: Infrastructure = Depends(get_infra)) -> list[dict]:
    return [a.to_payload() for a in infra.store.list(name)]


@router.post("", status_code=201)
async def create_artist(artist: Artist, infra: Infrastructure = Depends(get_infra)) -> dict:
    return infra.store.create(artist).to_payload()


@router.get("/{artist_id}")
async def get_artist(artist_id: str, infra: Infrastructure = Depends(get_infra)) -> dict:
    try:
        return infra.store.get(_parse_id(artist_id)).to_payload()
    except ArtistNotFound:
        raise NotFound("not found") from None


@router.put("/{artist_id}")
async def update_artist(artist_id: str, artist: Artist, infra: Infrastructure = Depends(get_infra)) -> dict:
    numeric_id = _parse_id(artist_id)
    try:
        return infra.store.update(numeric_id, artist).to_payload()
    except ArtistNotFound:
        raise NotFound("not found") from None


@router.delete("/{artist_id}", status_code=204)
async def delete_artist(artist_id: str, infra: Infrastructure = Depends(get_infra)) -> Response:
    try:
        infra.store.delete(_parse_id(artist_id))
    except ArtistNotFound:
        raise NotFound("not found") from None
    return Response(status_code=204)
