# groupie/tracker/contracts/infrastructure.py
from __future__ import annotations

from dataclasses import dataclass

from groupie.tracker.core.artists.source import ArtistSource
from groupie.tracker.core.artists.store import ArtistStore
from groupie.tracker.core.config import Settings
from groupie.tracker.core.i18n.service import I18nService
from groupie.tracker.core.links.resolver import LinkResolver


@dataclass
class Infrastructure:
    """Application-scoped services, built once by ``create_app``."""

    settings: Settings
    store: ArtistStore
    source: ArtistSource
    i18n: I18nService
    link_resolver: LinkResolver
