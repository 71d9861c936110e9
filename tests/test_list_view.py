"""Tests for the list view: loading, filtering, delete and duty toggle."""

from __future__ import annotations

from datetime import datetime

import pytest

from agneby_shared.errors import ConfirmationRequired, DocumentNotFound

from agneby_admin.gateway import build_gateway
from agneby_admin.views.form_view import FormView
from agneby_admin.views.list_view import ListView
from agneby_admin.views.notifications import Notifier
from agneby_admin.views.registry import HOTELS, PHARMACIES
from tests.conftest import FakeSupabase, StepClock, pharmacy_row


@pytest.fixture()
def backend():
    return FakeSupabase(
        {
            "pharmacies": [
                pharmacy_row("p1", "Pharmacie A", city="Agboville", on_duty=True),
                pharmacy_row("p2", "Pharmacie B", city="Tiassalé"),
                pharmacy_row("p3", "Pharmacie C", city="Agboville"),
            ]
        }
    )


@pytest.fixture()
def view(backend):
    gateway = build_gateway(backend, clock=StepClock())
    return ListView(PHARMACIES, gateway, Notifier())


def test_starts_loading_then_ready(view):
    assert view.status == "loading"
    view.load()
    assert view.status == "ready"
    assert [p.id for p in view.items] == ["p1", "p2", "p3"]
    assert view.error is None


def test_load_failure_leaves_empty_list_and_one_error(backend, view):
    backend.fail_with = RuntimeError("offline")
    view.load()

    assert view.status == "ready"
    assert view.items == []
    assert isinstance(view.error, RuntimeError)
    assert view.notifier.drain() == [
        {"level": "error", "title": "Erreur lors du chargement des pharmacies"}
    ]


def test_disabled_backend_load_fails_gracefully():
    view = ListView(PHARMACIES, build_gateway(None))
    view.load()
    assert view.items == []
    assert view.status == "ready"


def test_filter_then_clear_restores_full_list(view):
    view.load()
    view.set_search("pharmacie")
    view.set_filter("city", "Agboville")
    view.set_filter("status", "off-duty")
    assert [p.id for p in view.filtered()] == ["p3"]

    view.clear_filters()

    assert view.search == ""
    assert view.filter_values == {"city": "all", "status": "all"}
    assert [p.id for p in view.filtered()] == ["p1", "p2", "p3"]


def test_apply_params_ignores_unknown_and_blank(view):
    view.load()
    view.apply_params({"q": None, "city": "", "colour": "red"})
    assert view.filter_values == {"city": "all", "status": "all"}


def test_set_unknown_filter_raises(view):
    with pytest.raises(KeyError):
        view.set_filter("price_range", "all")


def test_delete_requires_confirmation(backend, view):
    view.load()
    with pytest.raises(ConfirmationRequired):
        view.delete("p2")
    assert backend.executed.count("delete") == 0
    assert len(view.items) == 3


def test_confirmed_delete_removes_locally_and_remotely(backend, view):
    view.load()
    view.delete("p2", confirmed=True)

    assert [p.id for p in view.items] == ["p1", "p3"]
    assert [r["id"] for r in backend.tables["pharmacies"]] == ["p1", "p3"]
    assert view.notifier.drain() == [
        {"level": "success", "title": 'Pharmacie "Pharmacie B" supprimée avec succès'}
    ]


def test_failed_delete_keeps_local_list(backend, view):
    view.load()
    backend.fail_with = RuntimeError("permission denied")

    with pytest.raises(RuntimeError):
        view.delete("p2", confirmed=True)

    assert len(view.items) == 3
    assert view.notifier.drain() == [
        {"level": "error", "title": "Erreur lors de la suppression"}
    ]


def test_toggle_duty_flips_flag_locally_and_remotely(backend, view):
    view.load()
    updated = view.toggle_duty("p2")

    assert updated.is_on_duty is True
    assert next(p for p in view.items if p.id == "p2").is_on_duty is True
    assert backend.tables["pharmacies"][1]["is_on_duty"] is True
    assert view.notifier.drain()[0]["title"] == 'Statut de "Pharmacie B" activé'


def test_toggle_duty_twice_restores_flag(backend, view):
    view.load()
    view.toggle_duty("p1")
    view.toggle_duty("p1")
    assert backend.tables["pharmacies"][0]["is_on_duty"] is True


def test_toggle_duty_without_loaded_list_fetches_record(backend, view):
    updated = view.toggle_duty("p3")
    assert updated.is_on_duty is True
    assert backend.tables["pharmacies"][2]["is_on_duty"] is True


def test_toggle_duty_missing_pharmacy(view):
    view.load()
    with pytest.raises(DocumentNotFound):
        view.toggle_duty("nope")


def test_toggle_duty_only_for_pharmacies(backend):
    view = ListView(HOTELS, build_gateway(backend, clock=StepClock()))
    with pytest.raises(TypeError):
        view.toggle_duty("h1")


def test_created_on_duty_then_toggled_off_refreshes_updated_at(gateway, fake_supabase):
    document_id = FormView(PHARMACIES, gateway).submit(
        {
            "name": "Pharmacie du Marché",
            "address": "Rue du commerce",
            "phone": "0102030405",
            "city": "Agboville",
            "is_on_duty": True,
        }
    )
    view = ListView(PHARMACIES, gateway).load()
    original = view.items[0]

    updated = view.toggle_duty(document_id)

    assert updated.is_on_duty is False
    assert updated.updated_at > original.updated_at
    assert updated.created_at == original.created_at
    assert view.items[0] == updated
    stored = fake_supabase.tables["pharmacies"][0]
    assert updated.updated_at == datetime.fromisoformat(stored["updated_at"])


def test_toggle_response_carries_refreshed_updated_at(client, auth_headers, fake_supabase):
    fake_supabase.tables["pharmacies"] = [pharmacy_row("p1", "Pharmacie A", on_duty=True)]

    response = client.post("/v1/pharmacies/p1/duty", headers=auth_headers)

    data = response.json()["data"]
    assert data["is_on_duty"] is False
    assert data["updated_at"] > "2026-01-01T00:00:00+00:00"
