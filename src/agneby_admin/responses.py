"""Standardized API response wrappers."""

from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse

from agneby_shared.errors import (
    AuthenticationFailed,
    ConfigurationError,
    ConfirmationRequired,
    DocumentNotFound,
)

from agneby_admin.views.notifications import Notifier


def _drain(notifications: Notifier | list[dict[str, Any]] | None) -> list[dict[str, Any]]:
    if notifications is None:
        return []
    if isinstance(notifications, Notifier):
        return notifications.drain()
    return list(notifications)


def wrap_response(
    data: Any,
    *,
    total_count: int | None = None,
    filtered_count: int | None = None,
    notifications: Notifier | list[dict[str, Any]] | None = None,
    redirect: str | None = None,
    links: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Build a standardized API response dict."""
    meta = {
        "total_count": total_count,
        "filtered_count": filtered_count,
    }
    body: dict[str, Any] = {
        "data": data,
        "meta": {k: v for k, v in meta.items() if v is not None},
        "links": links or {},
        "notifications": _drain(notifications),
    }
    if redirect:
        body["redirect"] = redirect
    return body


def error_response(
    code: str,
    message: str,
    *,
    details: dict[str, Any] | None = None,
    notifications: Notifier | list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Build a standardized error response dict."""
    err: dict[str, Any] = {"code": code, "message": message}
    if details:
        err["details"] = details
    return {"error": err, "notifications": _drain(notifications)}


def error_status(exc: BaseException) -> tuple[int, str]:
    """HTTP status and error code for a gateway/storage/auth failure."""
    if isinstance(exc, ConfigurationError):
        return 503, "BACKEND_NOT_CONFIGURED"
    if isinstance(exc, DocumentNotFound):
        return 404, "NOT_FOUND"
    if isinstance(exc, ConfirmationRequired):
        return 409, "CONFIRMATION_REQUIRED"
    if isinstance(exc, AuthenticationFailed):
        return 401, "AUTHENTICATION_FAILED"
    return 502, "BACKEND_ERROR"


def failure_response(
    exc: BaseException,
    notifications: Notifier | list[dict[str, Any]] | None = None,
) -> JSONResponse:
    status, code = error_status(exc)
    message = exc.message if isinstance(exc, AuthenticationFailed) else str(exc)
    return JSONResponse(
        status_code=status,
        content=error_response(code, message, notifications=notifications),
    )
