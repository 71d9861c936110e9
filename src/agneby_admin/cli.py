"""
cli.py — Click CLI entrypoint for the back office.

Usage:
    agneby-admin serve --port 8000
    agneby-admin check-config
    agneby-admin dashboard
"""

from __future__ import annotations

import json

import click
import structlog

from agneby_shared.config import settings
from agneby_shared.logging import configure_logging

log = structlog.get_logger(__name__)


@click.group()
@click.option(
    "--log-level",
    default=settings.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Log level",
)
def main(log_level: str) -> None:
    """Agneby Tiassa back-office tools."""
    configure_logging(log_level=log_level)


@main.command()
@click.option("--host", default=settings.api_host, show_default=True)
@click.option("--port", default=settings.api_port, type=int, show_default=True)
@click.option("--reload", is_flag=True, help="Restart on code changes")
def serve(host: str, port: int, reload: bool) -> None:
    """Run the admin API with uvicorn."""
    import uvicorn

    log.info("serve_start", host=host, port=port)
    uvicorn.run("agneby_admin.app:app", host=host, port=port, reload=reload)


@main.command("check-config")
def check_config() -> None:
    """Report whether the Supabase backend is configured."""
    click.echo(f"Supabase URL:    {settings.supabase_url}")
    click.echo(f"Storage bucket:  {settings.supabase_storage_bucket}")
    if not settings.is_configured:
        click.echo("Backend:         not configured (demo mode)")
        raise SystemExit(1)
    role = "service_role" if settings.supabase_service_key else "anon"
    click.echo(f"Backend:         configured ({role} key)")


@main.command()
def dashboard() -> None:
    """Print the dashboard summary as JSON."""
    import asyncio

    from agneby_shared.db import create_supabase_client

    from agneby_admin.gateway import build_gateway
    from agneby_admin.services.dashboard_service import DashboardService

    gateway = build_gateway(create_supabase_client(settings))
    service = DashboardService(
        gateway,
        upcoming_days=settings.upcoming_events_days,
        recent_days=settings.recent_jobs_days,
    )
    summary = asyncio.run(service.summary())
    click.echo(json.dumps(summary.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
