"""Shared test fixtures for agneby-admin."""

from __future__ import annotations

import copy
import time
from datetime import datetime, timedelta, timezone
from typing import Any
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from agneby_shared.config import Settings

JWT_SECRET = "test-secret"
NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)

QUERY_METHODS = (
    "select", "eq", "neq", "gt", "gte", "lt", "lte",
    "ilike", "order", "limit", "range", "insert", "update", "delete",
)


def make_chain(data=None, count=0, error: Exception | None = None):
    """Create a chainable mock that returns given data on execute()."""
    chain = MagicMock()
    if error is not None:
        chain.execute.side_effect = error
    else:
        chain.execute.return_value = MagicMock(data=data or [], count=count)
    for method in QUERY_METHODS:
        getattr(chain, method).return_value = chain
    return chain


def make_supabase(table_data=None, error: Exception | None = None):
    """Create a mock Supabase client.

    table_data: optional dict mapping table name -> list of rows.
    error: raised by every execute() call when given.
    The chain handed out for each table is kept on ``client.chains``.
    """
    client = MagicMock()
    td = table_data or {}
    client.chains = {}

    def _table(name):
        chain = client.chains.get(name)
        if chain is None:
            chain = make_chain(td.get(name, []), error=error)
            client.chains[name] = chain
        return chain

    client.table.side_effect = _table
    return client


# ---------------------------------------------------------------------------
# In-memory Supabase double
# ---------------------------------------------------------------------------

class FakeQuery:
    def __init__(self, client: "FakeSupabase", rows: list[dict], op: str, payload=None):
        self._client = client
        self._rows = rows
        self._op = op
        self._payload = payload
        self._filters: list[tuple[str, Any]] = []
        self._order: tuple[str, bool] | None = None
        self._limit: int | None = None

    def eq(self, column, value):
        self._filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self._order = (column, desc)
        return self

    def limit(self, n):
        self._limit = n
        return self

    def _matching(self) -> list[dict]:
        return [
            r for r in self._rows
            if all(r.get(c) == v for c, v in self._filters)
        ]

    def execute(self):
        self._client.executed.append(self._op)
        if self._client.fail_with is not None:
            raise self._client.fail_with

        if self._op == "insert":
            self._rows.append(copy.deepcopy(self._payload))
            return MagicMock(data=[copy.deepcopy(self._payload)])

        matching = self._matching()
        if self._op == "select":
            if self._order:
                column, desc = self._order
                matching = sorted(matching, key=lambda r: r.get(column), reverse=desc)
            if self._limit is not None:
                matching = matching[: self._limit]
        elif self._op == "update":
            for row in matching:
                row.update(copy.deepcopy(self._payload))
        elif self._op == "delete":
            for row in matching:
                self._rows.remove(row)
        return MagicMock(data=copy.deepcopy(matching))


class FakeTable:
    def __init__(self, client: "FakeSupabase", rows: list[dict]):
        self._client = client
        self._rows = rows

    def select(self, *columns):
        return FakeQuery(self._client, self._rows, "select")

    def insert(self, row):
        return FakeQuery(self._client, self._rows, "insert", row)

    def update(self, changes):
        return FakeQuery(self._client, self._rows, "update", changes)

    def delete(self):
        return FakeQuery(self._client, self._rows, "delete")


class FakeSupabase:
    """Enough of supabase.Client for the gateway, storage and auth."""

    public_base = "https://proj.supabase.co/storage/v1/object/public"

    def __init__(self, tables: dict[str, list[dict]] | None = None):
        self.tables: dict[str, list[dict]] = {
            name: [dict(r) for r in rows] for name, rows in (tables or {}).items()
        }
        self.fail_with: Exception | None = None
        self.executed: list[str] = []
        self.auth = MagicMock()
        self.storage = MagicMock()
        bucket = self.storage.from_.return_value
        bucket.get_public_url.side_effect = lambda path: f"{self.public_base}/images/{path}?"

    @property
    def bucket(self):
        return self.storage.from_.return_value

    def table(self, name):
        return FakeTable(self, self.tables.setdefault(name, []))


class StepClock:
    """Deterministic clock advancing one second per reading."""

    def __init__(self, start: datetime = NOW):
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


def make_token(sub: str = "admin-1", email: str = "admin@agneby.ci", **claims) -> str:
    payload = {
        "sub": sub,
        "email": email,
        "aud": "authenticated",
        "exp": int(time.time()) + 3600,
        **claims,
    }
    return jwt.encode(payload, JWT_SECRET, algorithm="HS256")


# ---------------------------------------------------------------------------
# Sample rows
# ---------------------------------------------------------------------------

def pharmacy_row(id: str, name: str, city: str = "Agboville", on_duty: bool = False, **extra):
    return {
        "id": id,
        "name": name,
        "address": f"{name} street",
        "phone": "+225 01 02 03 04",
        "city": city,
        "is_on_duty": on_duty,
        "created_at": "2026-01-01T00:00:00+00:00",
        "updated_at": "2026-01-01T00:00:00+00:00",
        **extra,
    }


def event_row(id: str, title: str, date: datetime, city: str = "Agboville"):
    return {
        "id": id,
        "title": title,
        "description": "Soirée culturelle",
        "date": date.isoformat(),
        "time": "18h00",
        "location": "Place de la mairie",
        "city": city,
        "contact": "0102030405",
        "created_at": "2026-01-01T00:00:00+00:00",
        "updated_at": "2026-01-01T00:00:00+00:00",
    }


def job_row(id: str, title: str, created_at: datetime, type: str = "CDI"):
    return {
        "id": id,
        "title": title,
        "company": "SODECI",
        "description": "Poste à pourvoir",
        "requirements": ["BTS"],
        "type": type,
        "city": "Tiassalé",
        "contact": "rh@sodeci.ci",
        "is_whatsapp": False,
        "created_at": created_at.isoformat(),
        "updated_at": created_at.isoformat(),
    }


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def fake_supabase():
    return FakeSupabase()


@pytest.fixture()
def fake_auth_client():
    """Separate client for sign-in, as create_app builds it."""
    return FakeSupabase()


@pytest.fixture()
def gateway(fake_supabase):
    from agneby_admin.gateway import build_gateway
    return build_gateway(fake_supabase, clock=StepClock())


@pytest.fixture()
def disabled_gateway():
    from agneby_admin.gateway import build_gateway
    return build_gateway(None)


@pytest.fixture()
def test_settings():
    return Settings(
        supabase_anon_key="test-anon-key",
        jwt_secret=JWT_SECRET,
        cors_origins="http://localhost:3000",
    )


@pytest.fixture()
def app(test_settings, fake_supabase, fake_auth_client, gateway):
    """FastAPI app wired to the in-memory backend."""
    from agneby_admin.app import create_app
    from agneby_admin.auth import build_auth
    from agneby_admin.storage import build_storage

    return create_app(
        test_settings,
        gateway=gateway,
        auth=build_auth(fake_auth_client),
        storage=build_storage(fake_supabase, "images"),
    )


@pytest.fixture()
def client(app):
    """HTTP test client (runs the app lifespan)."""
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def auth_headers():
    return {"Authorization": f"Bearer {make_token()}"}
