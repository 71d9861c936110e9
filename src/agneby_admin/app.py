"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from agneby_shared.config import Settings
from agneby_shared.config import settings as default_settings
from agneby_shared.db import create_auth_client, create_supabase_client
from agneby_shared.errors import (
    AuthenticationFailed,
    ConfigurationError,
    ConfirmationRequired,
    DocumentNotFound,
)
from agneby_shared.logging import configure_logging

from agneby_admin import __version__
from agneby_admin.auth import (
    AdminSession,
    AuthEvent,
    AuthService,
    DisabledAuthService,
    build_auth,
)
from agneby_admin.gateway import Gateway, build_gateway
from agneby_admin.middleware.logging import LoggingMiddleware
from agneby_admin.responses import failure_response
from agneby_admin.routers.health import router as health_router
from agneby_admin.routers.v1 import v1_router
from agneby_admin.services.dashboard_service import DashboardService
from agneby_admin.services.push_service import PushNotifier
from agneby_admin.storage import DisabledStorage, ImageStorage, build_storage

logger = structlog.get_logger()

DOMAIN_ERRORS = (
    AuthenticationFailed,
    ConfigurationError,
    ConfirmationRequired,
    DocumentNotFound,
)


def _audit_session(event: AuthEvent, session: AdminSession | None) -> None:
    logger.info(
        "session_changed",
        auth_event=event,
        user_id=session.user_id if session else None,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    unsubscribe = app.state.auth.state.subscribe(_audit_session)
    logger.info("app_started", backend_configured=app.state.gateway.configured)
    try:
        yield
    finally:
        unsubscribe()
        logger.info("app_stopped")


async def _domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return failure_response(exc, getattr(request.state, "notifier", None))


def create_app(
    settings: Settings | None = None,
    *,
    gateway: Gateway | None = None,
    auth: AuthService | DisabledAuthService | None = None,
    storage: ImageStorage | DisabledStorage | None = None,
) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level, settings.log_format)

    client = None
    if gateway is None or storage is None:
        client = create_supabase_client(settings)
    if auth is None:
        auth = build_auth(create_auth_client(settings))

    app = FastAPI(
        title="Agneby Tiassa Admin API",
        description="Back office for the Agneby Tiassa regional directory",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.gateway = gateway or build_gateway(client)
    app.state.auth = auth
    app.state.storage = storage or build_storage(client, settings.supabase_storage_bucket)
    app.state.push = PushNotifier()
    app.state.dashboard = DashboardService(
        app.state.gateway,
        upcoming_days=settings.upcoming_events_days,
        recent_days=settings.recent_jobs_days,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    for exc_class in DOMAIN_ERRORS:
        app.add_exception_handler(exc_class, _domain_error_handler)

    # Routers
    app.include_router(health_router)
    app.include_router(v1_router)

    logger.info(
        "app_created",
        cors_origins=settings.cors_origins_list,
        backend_configured=app.state.gateway.configured,
    )
    return app


app = create_app()
