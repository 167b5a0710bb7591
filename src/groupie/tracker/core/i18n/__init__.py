"""Translations: catalog loading, language negotiation, bound translators."""
from groupie.tracker.core.i18n.service import I18nService, Translator, parse_accept_language

__all__ = ["I18nService", "Translator", "parse_accept_language"]
