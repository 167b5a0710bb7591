# groupie/tracker/core/i18n/service.py
"""
Translation catalogs and language negotiation.

There is no global translator: :meth:`I18nService.load` is the explicit
initialization step, and request handlers bind a language with
:meth:`I18nService.translator` before handing ``Translator.translate`` to the
renderer.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

from groupie.tracker.core.loader import load_yaml_files

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "fr"


def parse_accept_language(header: str) -> str:
    """First language of an ``Accept-Language`` header, without region or quality."""
    first = header.split(",")[0].strip()
    first = first.split(";", 1)[0].strip()
    first = first.split("-", 1)[0].strip()
    return first.lower()


@dataclass(frozen=True)
class Translator:
    """Translations bound to one language."""

    service: I18nService
    lang: str

    def translate(self, key: str) -> str:
        return self.service.get(self.lang, key)

    __call__ = translate


class I18nService:
    """In-memory translation catalogs, one mapping per language code."""

    def __init__(
        self,
        catalogs: Mapping[str, Mapping[str, str]] | None = None,
        *,
        default_language: str = DEFAULT_LANGUAGE,
    ) -> None:
        self._catalogs: dict[str, dict[str, str]] = {
            lang: {str(k): str(v) for k, v in entries.items()}
            for lang, entries in (catalogs or {}).items()
        }
        self._default = default_language

    @classmethod
    def load(cls, patterns: Iterable[str], *, default_language: str = DEFAULT_LANGUAGE) -> I18nService:
        """Load catalogs from YAML files.

        Expected YAML::

            fr:
              detail.loading: "Chargement…"
            en:
              detail.loading: "Loading…"

        Keys of later files override earlier ones per language.
        """
        merged: dict[str, dict[str, str]] = {}
        for data in load_yaml_files(patterns):
            for lang, entries in data.items():
                if not isinstance(entries, Mapping):
                    logger.warning("Ignoring translations for '%s': not a mapping", lang)
                    continue
                merged.setdefault(str(lang), {}).update(entries)

        service = cls(merged, default_language=default_language)
        logger.info("Translations loaded: %d language(s) available %s", len(merged), service.languages())
        return service

    @property
    def default_language(self) -> str:
        return self._default

    def languages(self) -> list[str]:
        return sorted(self._catalogs)

    def is_supported(self, lang: str | None) -> bool:
        return bool(lang) and lang in self._catalogs

    def negotiate(
        self,
        *,
        query: str | None = None,
        cookie: str | None = None,
        accept_language: str | None = None,
    ) -> str:
        """Pick a language: ``?lang``, then the ``lang`` cookie, then ``Accept-Language``, then the default."""
        if self.is_supported(query):
            return query  # type: ignore[return-value]
        if self.is_supported(cookie):
            return cookie  # type: ignore[return-value]
        if accept_language:
            lang = parse_accept_language(accept_language)
            if self.is_supported(lang):
                return lang
        return self._default

    def get(self, lang: str, key: str) -> str:
        for candidate in (lang, self._default):
            catalog = self._catalogs.get(candidate)
            if catalog and key in catalog:
                return catalog[key]
        return key

    def get_all(self, lang: str) -> dict[str, str]:
        if lang in self._catalogs:
            return dict(self._catalogs[lang])
        return dict(self._catalogs.get(self._default, {}))

    def translator(self, lang: str) -> Translator:
        return Translator(service=self, lang=lang)
