# groupie/tracker/api/i18n.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from groupie.tracker.api.dependencies import get_infra, get_language
from groupie.tracker.contracts.infrastructure import Infrastructure

router = APIRouter(tags=["i18n"])

LANG_COOKIE_MAX_AGE = 86400 * 30


@router.get("/api/i18n")
async def get_translations(
    response: Response,
    lang: str = Depends(get_language),
    infra: Infrastructure = Depends(get_infra),
) -> dict:
    """Negotiated language and its catalog; remembers the choice in a cookie."""
    response.set_cookie("lang", lang, max_age=LANG_COOKIE_MAX_AGE, path="/", httponly=True)
    response.headers["Content-Language"] = lang
    return {"lang": lang, "translations": infra.i18n.get_all(lang)}
