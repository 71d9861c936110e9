"""Shared FastAPI dependencies.

Every collaborator is built once by create_app() and kept on app.state;
routes receive them through these functions instead of importing
module-level clients.
"""

from __future__ import annotations

from fastapi import Request

from agneby_admin.auth import AuthService, DisabledAuthService
from agneby_admin.gateway import Gateway
from agneby_admin.middleware.auth import AdminUser, get_current_user, require_auth
from agneby_admin.services.dashboard_service import DashboardService
from agneby_admin.services.push_service import PushNotifier
from agneby_admin.storage import DisabledStorage, ImageStorage
from agneby_admin.views.notifications import Notifier

__all__ = [
    "AdminUser",
    "get_auth",
    "get_current_user",
    "get_dashboard",
    "get_gateway",
    "get_notifier",
    "get_push",
    "get_storage",
    "require_auth",
]


def get_gateway(request: Request) -> Gateway:
    return request.app.state.gateway


def get_storage(request: Request) -> ImageStorage | DisabledStorage:
    return request.app.state.storage


def get_auth(request: Request) -> AuthService | DisabledAuthService:
    return request.app.state.auth


def get_push(request: Request) -> PushNotifier:
    return request.app.state.push


def get_dashboard(request: Request) -> DashboardService:
    return request.app.state.dashboard


def get_notifier(request: Request) -> Notifier:
    """Per-request toast queue; exception handlers drain it too."""
    notifier = getattr(request.state, "notifier", None)
    if notifier is None:
        notifier = Notifier()
        request.state.notifier = notifier
    return notifier
