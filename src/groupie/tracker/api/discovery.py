# groupie/tracker/api/discovery.py
"""
Root-level discovery and health endpoints.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from groupie.tracker.api.dependencies import get_infra
from groupie.tracker.contracts.infrastructure import Infrastructure

router = APIRouter()


@router.get("/health")
async def health(infra: Infrastructure = Depends(get_infra)) -> dict:
    return {
        "status": "healthy",
        "artists": len(infra.store),
        "languages": infra.i18n.languages(),
    }


@router.get("/api")
async def api_info() -> dict:
    return {"base": "/api", "artists": "/api/artists"}
