"""Tests for the persistence gateway."""

from __future__ import annotations

from datetime import datetime

import pytest

from agneby_shared.errors import ConfigurationError, DocumentNotFound
from agneby_shared.models import (
    AnnouncementCreate,
    PharmacyCreate,
    PharmacyUpdate,
    ProductCreate,
)
from agneby_shared.time_utils import MonotonicClock

from agneby_admin.gateway import COLLECTIONS, build_gateway
from tests.conftest import FakeSupabase, StepClock, make_supabase, pharmacy_row


def _pharmacy(**overrides):
    values = {
        "name": "Pharmacie du Marché",
        "address": "Rue du commerce",
        "phone": "+225 27 35 00 00",
        "city": "Agboville",
    }
    values.update(overrides)
    return PharmacyCreate(**values)


def test_create_assigns_id_and_timestamps(gateway, fake_supabase):
    document_id = gateway.pharmacies.create(_pharmacy())

    row = fake_supabase.tables["pharmacies"][0]
    assert row["id"] == document_id
    assert row["created_at"] == row["updated_at"]
    assert row["is_on_duty"] is False
    assert row["name"] == "Pharmacie du Marché"


def test_create_then_list_returns_record(gateway):
    document_id = gateway.pharmacies.create(_pharmacy())
    records = gateway.pharmacies.list_all()
    assert [r.id for r in records] == [document_id]
    assert isinstance(records[0].created_at, datetime)


def test_create_leaves_out_absent_optional_fields(gateway, fake_supabase):
    gateway.announcements.create(
        AnnouncementCreate(
            title="Plombier disponible",
            description="Dépannage 7j/7",
            category="Plombier",
            contact="0707070707",
            city="Sikensi",
            price=0,
        )
    )
    row = fake_supabase.tables["announcements"][0]
    assert "price" not in row
    assert "image" not in row


def test_list_all_orders_pharmacies_by_name():
    client = FakeSupabase(
        {
            "pharmacies": [
                pharmacy_row("2", "Pharmacie Zénith"),
                pharmacy_row("1", "Pharmacie Alpha"),
            ]
        }
    )
    gateway = build_gateway(client, clock=StepClock())
    assert [p.name for p in gateway.pharmacies.list_all()] == [
        "Pharmacie Alpha",
        "Pharmacie Zénith",
    ]


@pytest.mark.parametrize(
    "key, column, desc",
    [
        ("pharmacies", "name", False),
        ("hotels", "name", False),
        ("products", "created_at", True),
        ("events", "date", False),
        ("job_offers", "created_at", True),
        ("public_services", "name", False),
        ("announcements", "created_at", True),
    ],
)
def test_list_all_ordering_per_collection(key, column, desc):
    client = make_supabase()
    gateway = build_gateway(client, clock=StepClock())
    gateway.collection(key).list_all()

    chain = client.chains[COLLECTIONS[key].table]
    chain.order.assert_called_once_with(column, desc=desc)


def test_update_refreshes_updated_at(gateway, fake_supabase):
    document_id = gateway.pharmacies.create(_pharmacy())
    created = fake_supabase.tables["pharmacies"][0]["updated_at"]

    gateway.pharmacies.update(document_id, PharmacyUpdate(phone="0101010101"))

    row = fake_supabase.tables["pharmacies"][0]
    assert row["phone"] == "0101010101"
    assert row["updated_at"] > created
    assert row["created_at"] == created


def test_update_cannot_overwrite_id_or_created_at(gateway, fake_supabase):
    document_id = gateway.pharmacies.create(_pharmacy())
    created = fake_supabase.tables["pharmacies"][0]["created_at"]

    gateway.pharmacies.update(
        document_id, {"id": "other", "created_at": "2000-01-01T00:00:00+00:00"}
    )

    row = fake_supabase.tables["pharmacies"][0]
    assert row["id"] == document_id
    assert row["created_at"] == created


def test_update_missing_document_raises(gateway):
    with pytest.raises(DocumentNotFound) as exc_info:
        gateway.pharmacies.update("missing", {"phone": "01"})
    assert exc_info.value.document_id == "missing"


def test_delete_removes_document(gateway, fake_supabase):
    keep = gateway.products.create(
        ProductCreate(
            name="Vélo",
            description="Bon état",
            price=25000,
            category="Sport & Loisirs",
            contact="0102030405",
            city="Taabo",
        )
    )
    gone = gateway.products.create(
        {
            "name": "Table",
            "description": "Bois massif",
            "price": 40000,
            "category": "Maison & Jardin",
            "contact": "0102030405",
            "city": "Taabo",
        }
    )

    gateway.products.delete(gone)

    assert [p.id for p in gateway.products.list_all()] == [keep]


def test_delete_missing_document_raises(gateway):
    with pytest.raises(DocumentNotFound):
        gateway.hotels.delete("missing")


def test_get_returns_none_for_missing(gateway):
    assert gateway.events.get("missing") is None


def test_backend_errors_propagate():
    client = FakeSupabase()
    client.fail_with = RuntimeError("connection reset")
    gateway = build_gateway(client, clock=StepClock())

    with pytest.raises(RuntimeError, match="connection reset"):
        gateway.hotels.list_all()


def test_on_duty_pharmacies_sorted_by_city_then_name():
    client = FakeSupabase(
        {
            "pharmacies": [
                pharmacy_row("1", "Pharmacie B", city="Tiassalé", on_duty=True),
                pharmacy_row("2", "Pharmacie A", city="Tiassalé", on_duty=True),
                pharmacy_row("3", "Pharmacie Z", city="Agboville", on_duty=True),
                pharmacy_row("4", "Pharmacie C", city="Agboville", on_duty=False),
            ]
        }
    )
    gateway = build_gateway(client, clock=StepClock())

    on_duty = gateway.on_duty_pharmacies()

    assert [(p.city, p.name) for p in on_duty] == [
        ("Agboville", "Pharmacie Z"),
        ("Tiassalé", "Pharmacie A"),
        ("Tiassalé", "Pharmacie B"),
    ]


def test_on_duty_pharmacies_sort_ignores_case():
    client = FakeSupabase(
        {
            "pharmacies": [
                pharmacy_row("1", "Pharmacie Z", city="Agboville", on_duty=True),
                pharmacy_row("2", "pharmacie du marché", city="Agboville", on_duty=True),
                pharmacy_row("3", "Pharmacie A", city="Agboville", on_duty=True),
            ]
        }
    )
    gateway = build_gateway(client, clock=StepClock())

    names = [p.name for p in gateway.on_duty_pharmacies()]

    assert names == ["Pharmacie A", "pharmacie du marché", "Pharmacie Z"]


def test_toggle_twice_restores_flag_with_increasing_updated_at():
    client = FakeSupabase({"pharmacies": [pharmacy_row("p1", "Pharmacie A")]})
    # A frozen clock still yields strictly increasing timestamps.
    frozen = datetime.fromisoformat("2026-03-01T12:00:00+00:00")
    gateway = build_gateway(client, clock=MonotonicClock(lambda: frozen))

    gateway.toggle_pharmacy_duty("p1", True)
    first = client.tables["pharmacies"][0]["updated_at"]
    gateway.toggle_pharmacy_duty("p1", False)
    second = client.tables["pharmacies"][0]["updated_at"]

    assert client.tables["pharmacies"][0]["is_on_duty"] is False
    assert second > first


def test_unknown_collection_raises_key_error(gateway):
    with pytest.raises(KeyError):
        gateway.collection("restaurants")


def test_disabled_gateway_fails_without_network(disabled_gateway):
    assert disabled_gateway.configured is False
    for key in COLLECTIONS:
        with pytest.raises(ConfigurationError):
            disabled_gateway.collection(key).list_all()
    with pytest.raises(ConfigurationError):
        disabled_gateway.pharmacies.create(_pharmacy())
    with pytest.raises(ConfigurationError):
        disabled_gateway.on_duty_pharmacies()


def test_update_returns_stored_record(gateway, fake_supabase):
    document_id = gateway.pharmacies.create(_pharmacy())

    record = gateway.pharmacies.update(document_id, {"is_on_duty": True})

    row = fake_supabase.tables["pharmacies"][0]
    assert record.is_on_duty is True
    assert record.updated_at == datetime.fromisoformat(row["updated_at"])
