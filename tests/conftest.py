"""Shared fixtures for the test suite."""

from __future__ import annotations

import copy
import uuid
from types import SimpleNamespace
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.dependencies import get_current_user_id
from app.database.supabase_client import get_supabase, get_service_supabase
from app.main import app
from app.modules.auth.service import clear_auth_cache
from app.modules.onboarding.header import header_store

USER_ID = "11111111-1111-1111-1111-111111111111"
TEST_USER = {
    "id": USER_ID,
    "email": "maria@example.com",
    "user_metadata": {},
    "app_metadata": {},
    "created_at": "2026-01-01T00:00:00+00:00",
    "updated_at": None,
}


# ---------------------------------------------------------------------------
# Fake Supabase client (no real project needed)
# ---------------------------------------------------------------------------

class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    """Chainable stand-in for the postgrest query builder."""

    def __init__(self, client: "FakeSupabase", table: str):
        self._client = client
        self._table = table
        self._op = "select"
        self._payload: Any = None
        self._on_conflict: str | None = None
        self._filters: list = []
        self._order: list = []
        self._limit: int | None = None

    # query shape
    def select(self, *columns, **kwargs):
        return self

    def eq(self, column, value):
        self._filters.append(lambda row: row.get(column) == value)
        return self

    def in_(self, column, values):
        values = list(values)
        self._filters.append(lambda row: row.get(column) in values)
        return self

    def order(self, column, desc=False, **kwargs):
        self._order.append((column, desc))
        return self

    def limit(self, count):
        self._limit = count
        return self

    # writes
    def insert(self, data):
        self._op, self._payload = "insert", data
        return self

    def update(self, data):
        self._op, self._payload = "update", data
        return self

    def upsert(self, data, on_conflict=None, **kwargs):
        self._op, self._payload, self._on_conflict = "upsert", data, on_conflict
        return self

    def delete(self):
        self._op = "delete"
        return self

    def _matches(self, row) -> bool:
        return all(f(row) for f in self._filters)

    def execute(self):
        self._client.calls.append((self._table, self._op))
        if self._table in self._client.failing:
            raise Exception(f"relation {self._table} is unavailable")

        rows = self._client.tables.setdefault(self._table, [])
        if self._op == "insert":
            items = self._payload if isinstance(self._payload, list) else [self._payload]
            created = []
            for item in items:
                row = {"id": str(uuid.uuid4()), **item}
                rows.append(row)
                created.append(copy.deepcopy(row))
            return FakeResponse(created)

        if self._op == "upsert":
            key = self._on_conflict or "id"
            for row in rows:
                if key in self._payload and row.get(key) == self._payload[key]:
                    row.update(self._payload)
                    return FakeResponse([copy.deepcopy(row)])
            row = {"id": str(uuid.uuid4()), **self._payload}
            rows.append(row)
            return FakeResponse([copy.deepcopy(row)])

        matched = [row for row in rows if self._matches(row)]
        if self._op == "update":
            for row in matched:
                row.update(self._payload)
            return FakeResponse(copy.deepcopy(matched))

        if self._op == "delete":
            self._client.tables[self._table] = [row for row in rows if not self._matches(row)]
            return FakeResponse(copy.deepcopy(matched))

        for column, desc in reversed(self._order):
            matched.sort(key=lambda row: (row.get(column) is None, row.get(column)), reverse=desc)
        if self._limit is not None:
            matched = matched[:self._limit]
        return FakeResponse(copy.deepcopy(matched))


class FakeAuth:
    def __init__(self):
        self.users: dict[str, SimpleNamespace] = {}
        self.calls = 0

    def get_user(self, jwt=None):
        self.calls += 1
        user = self.users.get(jwt)
        if user is None:
            raise Exception("invalid JWT: unable to parse or verify signature")
        return SimpleNamespace(user=user)


class FakeSupabase:
    """Minimal in-memory stand-in for supabase.Client."""

    def __init__(self, tables: dict[str, list[dict[str, Any]]] | None = None):
        self.tables = copy.deepcopy(tables) if tables else {}
        self.failing: set[str] = set()
        self.calls: list[tuple[str, str]] = []
        self.auth = FakeAuth()

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def fail(self, *tables: str) -> None:
        """Make every query against these tables raise."""
        self.failing.update(tables)

    def rows(self, table: str) -> list[dict[str, Any]]:
        return self.tables.get(table, [])


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def reset_process_state():
    header_store.clear()
    clear_auth_cache()
    yield
    header_store.clear()
    clear_auth_cache()


@pytest.fixture()
def fake_supabase():
    return FakeSupabase()


@pytest.fixture()
def override_dependencies(fake_supabase):
    """Point every Supabase dependency at the fake and sign in the test user."""
    app.dependency_overrides[get_supabase] = lambda: fake_supabase
    app.dependency_overrides[get_service_supabase] = lambda: fake_supabase
    app.dependency_overrides[get_current_user_id] = lambda: dict(TEST_USER)
    yield fake_supabase
    app.dependency_overrides.clear()


@pytest.fixture()
async def client(override_dependencies):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def make_profile(user_id: str = USER_ID, **fields: Any) -> dict[str, Any]:
    """Helper to build a fake user_profile row."""
    return {
        "id": str(uuid.uuid4()),
        "user_id": user_id,
        "created_at": "2026-01-01T00:00:00+00:00",
        **fields,
    }


def make_plan(plan_id: str, **fields: Any) -> dict[str, Any]:
    """Helper to build a fake workout_plans row."""
    return {
        "id": plan_id,
        "name": f"Plan {plan_id}",
        "level": "beginner",
        "is_free": False,
        "created_at": "2026-01-01T00:00:00+00:00",
        **fields,
    }
