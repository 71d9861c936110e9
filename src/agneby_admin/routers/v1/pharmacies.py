"""Pharmacy-only endpoints: on-duty roster and duty toggle."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from agneby_admin.dependencies import get_gateway, get_notifier, require_auth
from agneby_admin.gateway import Gateway
from agneby_admin.responses import failure_response, wrap_response
from agneby_admin.views.list_view import ListView
from agneby_admin.views.notifications import Notifier
from agneby_admin.views.registry import PHARMACIES

router = APIRouter(
    prefix=f"/{PHARMACIES.slug}",
    tags=[PHARMACIES.slug],
    dependencies=[Depends(require_auth)],
)


@router.get("/on-duty")
async def list_on_duty(
    gateway: Gateway = Depends(get_gateway),
    notifier: Notifier = Depends(get_notifier),
):
    try:
        pharmacies = gateway.on_duty_pharmacies()
    except Exception as exc:
        return failure_response(exc, notifier)
    return wrap_response(
        [p.model_dump(mode="json") for p in pharmacies],
        total_count=len(pharmacies),
    )


@router.post("/{document_id}/duty")
async def toggle_duty(
    document_id: str,
    gateway: Gateway = Depends(get_gateway),
    notifier: Notifier = Depends(get_notifier),
):
    view = ListView(PHARMACIES, gateway, notifier)
    try:
        updated = view.toggle_duty(document_id)
    except Exception as exc:
        return failure_response(exc, notifier)
    return wrap_response(updated.model_dump(mode="json"), notifications=notifier)
