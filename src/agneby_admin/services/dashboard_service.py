"""Dashboard aggregation over every collection."""

from __future__ import annotations

import asyncio
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Sequence

import structlog

from agneby_shared.constants import CITIES
from agneby_shared.models import Event, JobOffer
from agneby_shared.time_utils import utc_now, within_last, within_next

from agneby_admin.gateway import Gateway

log = structlog.get_logger(__name__)

PREVIEW_SIZE = 5


def upcoming_events(
    events: Sequence[Event], *, now: datetime, days: int = 30
) -> list[Event]:
    """Events starting between now and now + days, both inclusive."""
    return [e for e in events if within_next(e.date, days=days, now=now)]


def recent_job_offers(
    job_offers: Sequence[JobOffer], *, now: datetime, days: int = 7
) -> list[JobOffer]:
    """Job offers created in the last ``days`` days."""
    return [j for j in job_offers if within_last(j.created_at, days=days, now=now)]


@dataclass
class DashboardSummary:
    pharmacies: int = 0
    on_duty_pharmacies: int = 0
    hotels: int = 0
    products: int = 0
    upcoming_events: int = 0
    recent_job_offers: int = 0
    public_services: int = 0
    announcements: int = 0
    cities_covered: int = len(CITIES)
    on_duty_preview: list[dict[str, Any]] = field(default_factory=list)
    hotels_preview: list[dict[str, Any]] = field(default_factory=list)
    products_preview: list[dict[str, Any]] = field(default_factory=list)
    notices: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class DashboardService:
    def __init__(
        self,
        gateway: Gateway,
        *,
        upcoming_days: int = 30,
        recent_days: int = 7,
    ) -> None:
        self.gateway = gateway
        self.upcoming_days = upcoming_days
        self.recent_days = recent_days

    async def summary(self, now: datetime | None = None) -> DashboardSummary:
        """
        Fetch every collection concurrently and derive the dashboard counts.

        Any failed fetch yields the empty summary; nothing partial is shown.
        """
        now = now or utc_now()
        g = self.gateway
        try:
            (
                pharmacies,
                on_duty,
                hotels,
                products,
                events,
                job_offers,
                public_services,
                announcements,
            ) = await asyncio.gather(
                asyncio.to_thread(g.pharmacies.list_all),
                asyncio.to_thread(g.on_duty_pharmacies),
                asyncio.to_thread(g.hotels.list_all),
                asyncio.to_thread(g.products.list_all),
                asyncio.to_thread(g.events.list_all),
                asyncio.to_thread(g.job_offers.list_all),
                asyncio.to_thread(g.public_services.list_all),
                asyncio.to_thread(g.announcements.list_all),
            )
        except Exception as exc:
            log.error("dashboard_load_failed", error=str(exc))
            return DashboardSummary()

        upcoming = upcoming_events(events, now=now, days=self.upcoming_days)
        recent = recent_job_offers(job_offers, now=now, days=self.recent_days)

        notices: list[str] = []
        if upcoming:
            notices.append(f"{len(upcoming)} événement(s) à venir")
        if recent:
            notices.append(f"{len(recent)} nouvelle(s) offre(s) d'emploi")

        summary = DashboardSummary(
            pharmacies=len(pharmacies),
            on_duty_pharmacies=len(on_duty),
            hotels=len(hotels),
            products=len(products),
            upcoming_events=len(upcoming),
            recent_job_offers=len(recent),
            public_services=len(public_services),
            announcements=len(announcements),
            on_duty_preview=[
                {"id": p.id, "name": p.name, "city": p.city}
                for p in on_duty[:PREVIEW_SIZE]
            ],
            hotels_preview=[
                {
                    "id": h.id,
                    "name": h.name,
                    "city": h.city,
                    "rating": h.rating,
                    "price_range": h.price_range,
                }
                for h in hotels[:PREVIEW_SIZE]
            ],
            products_preview=[
                {
                    "id": p.id,
                    "name": p.name,
                    "city": p.city,
                    "price": p.price,
                    "category": p.category,
                }
                for p in products[:PREVIEW_SIZE]
            ],
            notices=notices,
        )
        log.info(
            "dashboard_loaded",
            upcoming_events=summary.upcoming_events,
            recent_job_offers=summary.recent_job_offers,
        )
        return summary
