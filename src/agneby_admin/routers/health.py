"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request

from agneby_admin import __version__

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    return {"status": "ok", "version": __version__}


@router.get("/ready")
async def ready(request: Request) -> dict:
    configured = request.app.state.gateway.configured
    return {"status": "ready" if configured else "demo", "backend_configured": configured}
