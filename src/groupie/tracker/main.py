# groupie/tracker/main.py
"""
Groupie Tracker application factory.

Creates a FastAPI application serving the artists API, the translations
endpoint and the streamed artist detail page.
"""
from __future__ import annotations

import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from groupie.tracker.api.artists import router as artists_router
from groupie.tracker.api.discovery import router as discovery_router
from groupie.tracker.api.exceptions import register_exception_handlers
from groupie.tracker.api.i18n import router as i18n_router
from groupie.tracker.api.pages import router as pages_router
from groupie.tracker.contracts.infrastructure import Infrastructure
from groupie.tracker.core.artists.source import ArtistSource, HttpArtistSource, StoreArtistSource
from groupie.tracker.core.artists.store import ArtistStore
from groupie.tracker.core.config import Settings, settings as default_settings
from groupie.tracker.core.i18n.service import I18nService
from groupie.tracker.core.links.resolver import LinkResolver

logger = logging.getLogger(__name__)


# -- Helpers -------------------------------------------------------------------


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        stream=sys.stdout,
        format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
    )


def _build_source(cfg: Settings, store: ArtistStore) -> ArtistSource:
    if cfg.artists_api_url:
        logger.info("Artist pages read from remote API %s", cfg.artists_api_url)
        return HttpArtistSource(base_url=cfg.artists_api_url, timeout=cfg.artists_api_timeout)
    logger.info("Artist pages read from the local store")
    return StoreArtistSource(store)


def build_infrastructure(cfg: Settings) -> Infrastructure:
    """Build the application-scoped services from settings."""
    store = ArtistStore.from_file(cfg.artists_data_path)
    i18n = I18nService.load(cfg.translations_config_paths, default_language=cfg.default_language)
    return Infrastructure(
        settings=cfg,
        store=store,
        source=_build_source(cfg, store),
        i18n=i18n,
        link_resolver=LinkResolver(timeout=cfg.link_timeout, text_limit=cfg.link_text_limit),
    )


# -- Application factory -------------------------------------------------------


def create_app(cfg: Settings | None = None) -> FastAPI:
    """Build and wire the Groupie Tracker FastAPI application."""
    cfg = cfg or default_settings
    _configure_logging(cfg.log_level)
    logger.info("Creating Groupie Tracker application (env=%s)", cfg.app_env)

    infra = build_infrastructure(cfg)

    app = FastAPI(
        title="Groupie Tracker",
        version="1.0.0",
        description="Artists API and progressively resolved artist detail pages",
    )
    app.state.infra = infra

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_allow_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    register_exception_handlers(app)

    app.include_router(discovery_router)
    app.include_router(artists_router)
    app.include_router(i18n_router)
    app.include_router(pages_router)

    logger.info(
        "Groupie Tracker ready: %d artist(s), language(s) %s",
        len(infra.store),
        infra.i18n.languages(),
    )
    return app
