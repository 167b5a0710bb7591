# tests/conftest.py
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from groupie.tracker.core.config import Settings
from groupie.tracker.core.i18n.service import I18nService
from groupie.tracker.main import create_app

CATALOGS = {
    "fr": {
        "title": "Groupie Tracker",
        "detail.title_fallback": "Détails",
        "detail.raw_json": "Voir JSON brut",
        "detail.loading": "Chargement…",
        "detail.empty": "—",
        "detail.other_fields": "Autres champs",
        "detail.identifiers": "Tous les IDs trouvés",
        "field.members": "Membres",
        "summary.locations": "Lieux",
        "error.title": "Erreur",
        "error.not_found": "Artiste introuvable",
        "error.fetch_failed": "Erreur lors du chargement des détails",
    },
    "en": {
        "title": "Groupie Tracker",
        "detail.title_fallback": "Details",
        "detail.raw_json": "View raw JSON",
        "detail.loading": "Loading…",
        "detail.other_fields": "Other fields",
        "detail.identifiers": "All IDs found",
        "field.members": "Members",
        "summary.locations": "Locations",
        "summary.dates": "Dates",
        "summary.relation": "Relation",
        "error.not_found": "Artist not found",
    },
}

TRANSLATIONS_YAML = """
fr:
  title: "Groupie Tracker"
  detail.loading: "Chargement…"
  detail.other_fields: "Autres champs"
  error.title: "Erreur"
  error.not_found: "Artiste introuvable"
  error.fetch_failed: "Erreur lors du chargement des détails"
  summary.relation: "Relation"
en:
  title: "Groupie Tracker"
  detail.loading: "Loading…"
  error.not_found: "Artist not found"
"""


@pytest.fixture
def i18n() -> I18nService:
    return I18nService(CATALOGS, default_language="fr")


@pytest.fixture
def translate(i18n):
    return i18n.translator("en").translate


@pytest.fixture
def settings(tmp_path) -> Settings:
    translations = tmp_path / "translations.yaml"
    translations.write_text(TRANSLATIONS_YAML, encoding="utf-8")
    return Settings(
        translations_config_paths=[str(translations)],
        artists_data_path=str(tmp_path / "missing-artists.json"),
        artists_api_url="",
        link_timeout=5.0,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
