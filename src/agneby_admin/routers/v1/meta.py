"""
Navigation and form-option endpoints.

Serves /v1/meta/navigation (sidebar entries) and /v1/meta/options
(every closed vocabulary, for the form and filter selects).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from agneby_shared.constants import (
    AMENITIES,
    ANNOUNCEMENT_CATEGORIES,
    CITIES,
    JOB_TYPES,
    PRICE_RANGES,
    PRODUCT_CATEGORIES,
    PUBLIC_SERVICE_CATEGORIES,
)

from agneby_admin.dependencies import require_auth
from agneby_admin.responses import wrap_response
from agneby_admin.views.registry import ENTITY_VIEWS

router = APIRouter(prefix="/meta", tags=["meta"])


def navigation_entries() -> list[dict[str, str | None]]:
    entries: list[dict[str, str | None]] = [
        {"label": "Tableau de bord", "route": "/dashboard", "entity": None},
    ]
    entries.extend(
        {"label": v.nav_label, "route": v.list_route, "entity": v.key}
        for v in ENTITY_VIEWS
    )
    return entries


@router.get("/navigation", dependencies=[Depends(require_auth)])
async def navigation():
    return wrap_response(navigation_entries())


@router.get("/options")
async def options():
    filters = {
        v.slug: {
            "search_fields": list(v.chain.search_fields),
            "filters": {f.param: list(f.options) for f in v.chain.filters},
            "row_fields": list(v.row_fields),
        }
        for v in ENTITY_VIEWS
    }
    return wrap_response(
        {
            "cities": list(CITIES),
            "price_ranges": list(PRICE_RANGES),
            "amenities": list(AMENITIES),
            "product_categories": list(PRODUCT_CATEGORIES),
            "job_types": list(JOB_TYPES),
            "public_service_categories": list(PUBLIC_SERVICE_CATEGORIES),
            "announcement_categories": list(ANNOUNCEMENT_CATEGORIES),
            "entities": filters,
        }
    )
