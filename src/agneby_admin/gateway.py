"""
gateway.py — persistence gateway over the Supabase tables.

One collection handle per entity, each exposing the same four calls:

    gateway.pharmacies.create(PharmacyCreate(...))  -> id
    gateway.pharmacies.list_all()                   -> [Pharmacy]
    gateway.pharmacies.update(id, {"phone": ...})   -> None
    gateway.pharmacies.delete(id)                   -> None

Every call is a single independent round trip: no retries, batching or
transactions. Backend errors are logged and re-raised unchanged. When
Supabase is not configured, build_gateway() returns a gateway whose
collections raise ConfigurationError before touching the network.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import structlog
from supabase import Client

from agneby_shared.constants import TABLES
from agneby_shared.errors import ConfigurationError, DocumentNotFound
from agneby_shared.models import (
    Announcement,
    CreateSchema,
    Event,
    Hotel,
    JobOffer,
    Pharmacy,
    Product,
    PublicService,
    Record,
    UpdateSchema,
)
from agneby_shared.time_utils import Clock, MonotonicClock

log = structlog.get_logger(__name__)

R = TypeVar("R", bound=Record)


@dataclass(frozen=True)
class CollectionSpec:
    """Where an entity lives and how list_all orders it."""

    key: str
    table: str
    model: type[Record]
    order_by: str
    descending: bool = False


COLLECTIONS: dict[str, CollectionSpec] = {
    "pharmacies": CollectionSpec("pharmacies", TABLES["pharmacies"], Pharmacy, "name"),
    "hotels": CollectionSpec("hotels", TABLES["hotels"], Hotel, "name"),
    "products": CollectionSpec(
        "products", TABLES["products"], Product, "created_at", descending=True
    ),
    "events": CollectionSpec("events", TABLES["events"], Event, "date"),
    "job_offers": CollectionSpec(
        "job_offers", TABLES["job_offers"], JobOffer, "created_at", descending=True
    ),
    "public_services": CollectionSpec(
        "public_services", TABLES["public_services"], PublicService, "name"
    ),
    "announcements": CollectionSpec(
        "announcements", TABLES["announcements"], Announcement, "created_at",
        descending=True,
    ),
}


def _payload(fields: UpdateSchema | CreateSchema | dict[str, Any]) -> dict[str, Any]:
    if isinstance(fields, UpdateSchema):
        return fields.to_changes()
    if isinstance(fields, CreateSchema):
        return fields.to_document()
    return dict(fields)


# ---------------------------------------------------------------------------
# Supabase-backed collection
# ---------------------------------------------------------------------------

class DocumentCollection(Generic[R]):
    """CRUD over one Supabase table."""

    def __init__(self, client: Client, spec: CollectionSpec, clock: Clock) -> None:
        self._client = client
        self.spec = spec
        self._clock = clock
        self._log = log.bind(collection=spec.key)

    def _table(self) -> Any:
        return self._client.table(self.spec.table)

    def _parse(self, rows: list[dict[str, Any]] | None) -> list[R]:
        return [self.spec.model.from_db_row(row) for row in rows or []]  # type: ignore[misc]

    def create(self, record: CreateSchema | dict[str, Any]) -> str:
        document_id = str(uuid.uuid4())
        now = self._clock().isoformat()
        row = {
            **_payload(record),
            "id": document_id,
            "created_at": now,
            "updated_at": now,
        }
        try:
            self._table().insert(row).execute()
        except Exception as exc:
            self._log.error("create_failed", error=str(exc))
            raise
        self._log.info("document_created", id=document_id)
        return document_id

    def list_all(self) -> list[R]:
        try:
            result = (
                self._table()
                .select("*")
                .order(self.spec.order_by, desc=self.spec.descending)
                .execute()
            )
        except Exception as exc:
            self._log.error("list_failed", error=str(exc))
            raise
        return self._parse(result.data)

    def list_where(self, column: str, value: Any) -> list[R]:
        """Equality-filtered fetch; ordering is left to the caller."""
        try:
            result = self._table().select("*").eq(column, value).execute()
        except Exception as exc:
            self._log.error("list_failed", error=str(exc), column=column)
            raise
        return self._parse(result.data)

    def get(self, document_id: str) -> R | None:
        try:
            result = (
                self._table().select("*").eq("id", document_id).limit(1).execute()
            )
        except Exception as exc:
            self._log.error("get_failed", id=document_id, error=str(exc))
            raise
        rows = self._parse(result.data)
        return rows[0] if rows else None

    def update(
        self, document_id: str, fields: UpdateSchema | dict[str, Any]
    ) -> R:
        """Apply a partial change and return the stored record as written."""
        changes = _payload(fields)
        changes.pop("id", None)
        changes.pop("created_at", None)
        changes["updated_at"] = self._clock().isoformat()
        try:
            result = self._table().update(changes).eq("id", document_id).execute()
        except Exception as exc:
            self._log.error("update_failed", id=document_id, error=str(exc))
            raise
        if not result.data:
            self._log.error("update_failed", id=document_id, error="not_found")
            raise DocumentNotFound(self.spec.table, document_id)
        self._log.info("document_updated", id=document_id, fields=sorted(changes))
        return self._parse(result.data)[0]

    def delete(self, document_id: str) -> None:
        try:
            result = self._table().delete().eq("id", document_id).execute()
        except Exception as exc:
            self._log.error("delete_failed", id=document_id, error=str(exc))
            raise
        if not result.data:
            self._log.error("delete_failed", id=document_id, error="not_found")
            raise DocumentNotFound(self.spec.table, document_id)
        self._log.info("document_deleted", id=document_id)


# ---------------------------------------------------------------------------
# Demo-mode collection
# ---------------------------------------------------------------------------

class DisabledCollection(Generic[R]):
    """Same interface as DocumentCollection; every call fails fast."""

    def __init__(self, spec: CollectionSpec) -> None:
        self.spec = spec

    def _fail(self, op: str) -> ConfigurationError:
        log.warning("backend_disabled", collection=self.spec.key, op=op)
        return ConfigurationError()

    def create(self, record: Any) -> str:
        raise self._fail("create")

    def list_all(self) -> list[R]:
        raise self._fail("list_all")

    def list_where(self, column: str, value: Any) -> list[R]:
        raise self._fail("list_where")

    def get(self, document_id: str) -> R | None:
        raise self._fail("get")

    def update(self, document_id: str, fields: Any) -> R:
        raise self._fail("update")

    def delete(self, document_id: str) -> None:
        raise self._fail("delete")


# ---------------------------------------------------------------------------
# Gateway
# ---------------------------------------------------------------------------

class Gateway:
    """Entry point holding one collection handle per entity."""

    def __init__(self, collections: dict[str, Any], *, configured: bool) -> None:
        self._collections = collections
        self.configured = configured
        self.pharmacies: DocumentCollection[Pharmacy] = collections["pharmacies"]
        self.hotels: DocumentCollection[Hotel] = collections["hotels"]
        self.products: DocumentCollection[Product] = collections["products"]
        self.events: DocumentCollection[Event] = collections["events"]
        self.job_offers: DocumentCollection[JobOffer] = collections["job_offers"]
        self.public_services: DocumentCollection[PublicService] = (
            collections["public_services"]
        )
        self.announcements: DocumentCollection[Announcement] = (
            collections["announcements"]
        )

    def collection(self, key: str) -> DocumentCollection[Any]:
        try:
            return self._collections[key]
        except KeyError:
            raise KeyError(f"Unknown collection: {key}") from None

    def on_duty_pharmacies(self) -> list[Pharmacy]:
        """On-duty pharmacies sorted by city, then name."""
        pharmacies = self.pharmacies.list_where("is_on_duty", True)
        return sorted(pharmacies, key=lambda p: (p.city.casefold(), p.name.casefold()))

    def toggle_pharmacy_duty(self, document_id: str, is_on_duty: bool) -> Pharmacy:
        return self.pharmacies.update(document_id, {"is_on_duty": is_on_duty})


def build_gateway(client: Client | None, clock: Clock | None = None) -> Gateway:
    """
    Select the gateway implementation for this process.

    Args:
        client: Supabase client, or None in demo mode.
        clock:  Timestamp source (defaults to a strictly increasing UTC clock).
    """
    if client is None:
        log.warning("gateway_disabled")
        return Gateway(
            {key: DisabledCollection(spec) for key, spec in COLLECTIONS.items()},
            configured=False,
        )

    clock = clock or MonotonicClock()
    return Gateway(
        {key: DocumentCollection(client, spec, clock) for key, spec in COLLECTIONS.items()},
        configured=True,
    )
