# groupie/tracker/api/dependencies.py
"""
FastAPI dependencies for request-scoped services.

Provides:
- ``get_infra``: the application's :class:`Infrastructure`.
- ``get_language``: negotiated language for the current request.
- ``get_translator``: translations bound to that language.
"""
from __future__ import annotations

from fastapi import Depends, Request

from groupie.tracker.contracts.infrastructure import Infrastructure
from groupie.tracker.core.i18n.service import Translator


def get_infra(request: Request) -> Infrastructure:
    return request.app.state.infra


def get_language(request: Request, infra: Infrastructure = Depends(get_infra)) -> str:
    return infra.i18n.negotiate(
        query=request.query_params.get("lang"),
        cookie=request.cookies.get("lang"),
        accept_language=request.headers.get("accept-language"),
    )


def get_translator(
    lang: str = Depends(get_language),
    infra: Infrastructure = Depends(get_infra),
) -> Translator:
    return infra.i18n.translator(lang)
