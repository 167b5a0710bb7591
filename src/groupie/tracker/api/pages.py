# groupie/tracker/api/pages.py
"""
Artist detail page.

The page is streamed. The first chunk carries the complete initial render,
placeholders included; once it has been handed to the server the placeholders
count as attached and link resolution starts. Each settled slot is then
streamed as a ``<template>`` patch plus a call that swaps it into its
placeholder, if that placeholder is still in the document.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import AsyncIterator

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse, StreamingResponse
from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from groupie.tracker.api.dependencies import get_infra, get_translator
from groupie.tracker.contracts.infrastructure import Infrastructure
from groupie.tracker.contracts.render import PlaceholderArena
from groupie.tracker.core.artists.source import ArtistSourceError
from groupie.tracker.core.artists.store import ArtistNotFound
from groupie.tracker.core.detail.markup import to_html
from groupie.tracker.core.detail.renderer import DetailRenderer
from groupie.tracker.core.i18n.service import Translator
from groupie.tracker.core.links.resolver import LinkResolver

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

router = APIRouter(tags=["pages"])

_templates = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html"]),
    enable_async=True,
)


@dataclass(frozen=True)
class SlotPatch:
    index: int
    state: str
    html: Markup


async def slot_patches(resolver: LinkResolver, arena: PlaceholderArena) -> AsyncIterator[SlotPatch]:
    async for slot in resolver.resolve_as_completed(arena):
        if slot.settled and slot.content is not None:
            yield SlotPatch(index=slot.index, state=slot.state.value, html=to_html(slot.content, arena))


async def _error_page(status_code: int, message: str, translator: Translator) -> HTMLResponse:
    template = _templates.get_template("error.html")
    html = await template.render_async(lang=translator.lang, t=translator, message=message)
    return HTMLResponse(html, status_code=status_code, headers={"Content-Language": translator.lang})


async def render_artist_page(
    artist_id: str,
    *,
    infra: Infrastructure,
    translator: Translator,
) -> HTMLResponse | StreamingResponse:
    """Fetch, render and stream one artist; a failed fetch yields an error page instead."""
    try:
        entity = await infra.source.fetch_artist(artist_id)
    except ArtistNotFound:
        logger.info("Artist '%s' not found", artist_id)
        return await _error_page(404, translator("error.not_found"), translator)
    except ArtistSourceError as exc:
        logger.warning("Artist '%s' could not be fetched: %s", artist_id, exc.reason)
        return await _error_page(502, translator("error.fetch_failed"), translator)

    rendered = DetailRenderer(translator.translate).render(entity)
    resolver = infra.link_resolver.with_translate(translator.translate)

    template = _templates.get_template("artist.html")
    stream = template.generate_async(
        lang=translator.lang,
        t=translator,
        title=rendered.title,
        body=rendered.to_html(),
        patches=slot_patches(resolver, rendered.arena),
    )
    return StreamingResponse(
        stream,
        media_type="text/html; charset=utf-8",
        headers={"Content-Language": translator.lang},
    )


@router.get("/artists/{artist_id}", response_model=None)
async def artist_page(
    artist_id: str,
    infra: Infrastructure = Depends(get_infra),
    translator: Translator = Depends(get_translator),
) -> HTMLResponse | StreamingResponse:
    return await render_artist_page(artist_id, infra=infra, translator=translator)


@router.get("/artist", response_model=None)
async def artist_page_by_query(
    artist_id: str = Query(default="", alias="id"),
    infra: Infrastructure = Depends(get_infra),
    translator: Translator = Depends(get_translator),
) -> HTMLResponse | StreamingResponse:
    return await render_artist_page(artist_id, infra=infra, translator=translator)
