"""Dashboard summary endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from agneby_admin.dependencies import get_dashboard, require_auth
from agneby_admin.responses import wrap_response
from agneby_admin.services.dashboard_service import DashboardService

router = APIRouter(
    prefix="/dashboard",
    tags=["dashboard"],
    dependencies=[Depends(require_auth)],
)


@router.get("")
async def get_dashboard_summary(
    dashboard: DashboardService = Depends(get_dashboard),
):
    summary = await dashboard.summary()
    return wrap_response(summary.to_dict())
