"""
db.py — Supabase client construction.

Two clients are built once at startup by the application factory (or the
CLI) and never shared:

- the data client, handed to the gateway and the storage. It always
  authenticates with the configured key (service role, else anon).
- the auth client, handed to the auth service. Sign-ins on it never
  touch the data client's headers, and it keeps no session of its own.

No module-level singleton is kept.

Usage:
    from agneby_shared.db import create_auth_client, create_supabase_client

    client = create_supabase_client(settings)   # None when unconfigured
    auth_client = create_auth_client(settings)
"""

from __future__ import annotations

import structlog
from supabase import Client, ClientOptions, create_client

from agneby_shared.config import Settings

logger = structlog.get_logger(__name__)


def create_supabase_client(settings: Settings) -> Client | None:
    """
    Build the data client from settings.

    Returns:
        supabase.Client, or None when the primary credential is missing
        (demo mode; callers select their disabled implementations).
    """
    if not settings.is_configured:
        logger.warning(
            "supabase_not_configured",
            hint="set SUPABASE_URL and SUPABASE_ANON_KEY in .env",
        )
        return None

    role = "service_role" if settings.supabase_service_key else "anon"
    client = create_client(settings.supabase_url, settings.backend_key)
    logger.info("supabase_client_created", role=role, url=settings.supabase_url)
    return client


def create_auth_client(settings: Settings) -> Client | None:
    """
    Build the client used only for sign-in and token revocation.

    It uses the anon key and neither persists nor refreshes sessions, so
    one admin's login leaves no state behind for the next request.
    """
    if not settings.is_configured:
        return None

    client = create_client(
        settings.supabase_url,
        settings.supabase_anon_key,
        options=ClientOptions(persist_session=False, auto_refresh_token=False),
    )
    logger.info("supabase_auth_client_created", url=settings.supabase_url)
    return client
