"""Shared test fixtures for hi-supabase tests."""
import uuid
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from postgrest.exceptions import APIError

from hi_supabase.core.config import HiSupabaseConfig, set_config


class FakeQuery:
    """Minimal stand-in for the PostgREST request builder."""

    def __init__(self, table, op, payload=None):
        self.table = table
        self.op = op
        self.payload = payload
        self.filters = []
        self.order_by = None
        self.is_single = False

    def select(self, columns="*"):
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def single(self):
        self.is_single = True
        return self

    def _matches(self, row):
        return all(row.get(column) == value for column, value in self.filters)

    def execute(self):
        if self.op == "insert":
            return SimpleNamespace(data=[self.table.insert_row(self.payload)])

        if self.op == "delete":
            removed = [row for row in self.table.rows if self._matches(row)]
            self.table.rows = [row for row in self.table.rows if not self._matches(row)]
            return SimpleNamespace(data=removed)

        rows = [dict(row) for row in self.table.rows if self._matches(row)]
        if self.order_by:
            column, desc = self.order_by
            rows.sort(key=lambda row: row[column], reverse=desc)

        if self.is_single:
            if len(rows) != 1:
                raise APIError({
                    "message": "JSON object requested, multiple (or no) rows returned",
                    "code": "PGRST116",
                    "hint": None,
                    "details": f"The result contains {len(rows)} rows",
                })
            return SimpleNamespace(data=rows[0])
        return SimpleNamespace(data=rows)


class FakeTable:
    """In-memory table that generates id and created_at like Postgres defaults."""

    def __init__(self, unique=("bot_slug",)):
        self.rows = []
        self.unique = unique
        self._tick = 0

    def insert_row(self, payload):
        for column in self.unique:
            if any(row.get(column) == payload.get(column) for row in self.rows):
                raise APIError({
                    "message": f'duplicate key value violates unique constraint "chatbots_{column}_key"',
                    "code": "23505",
                    "hint": None,
                    "details": None,
                })
        self._tick += 1
        row = dict(payload)
        row["id"] = str(uuid.uuid4())
        row["created_at"] = datetime(2024, 1, 1, 0, 0, self._tick, tzinfo=timezone.utc).isoformat()
        self.rows.append(row)
        return dict(row)


class FakeTableHandle:
    def __init__(self, table):
        self._table = table

    def insert(self, payload):
        return FakeQuery(self._table, "insert", payload)

    def select(self, columns="*"):
        return FakeQuery(self._table, "select")

    def delete(self):
        return FakeQuery(self._table, "delete")


class FakeSupabaseClient:
    """Stand-in for supabase.Client exposing only ``table()``."""

    def __init__(self):
        self.tables = {}
        self.requested = []

    def table(self, name):
        self.requested.append(name)
        return FakeTableHandle(self.tables.setdefault(name, FakeTable()))


@pytest.fixture
def fake_client():
    """In-memory Supabase client."""
    return FakeSupabaseClient()


@pytest.fixture
def project_dir(tmp_path):
    """Empty consumer project directory."""
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def credentials_config():
    """Config with both Supabase credentials set."""
    config = HiSupabaseConfig(
        supabase_url="https://abc.supabase.co",
        supabase_anon_key="anon-key",
    )
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture(autouse=True)
def reset_config():
    """Never let a cached config leak between tests."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def chatbot_data():
    """Insert payload for a chatbot."""
    return {
        'user_id': 'user-1',
        'org_name': 'Harbor Cafe',
        'org_type': 'restaurant',
        'description': 'Seafood by the docks',
        'bot_name': 'Skipper',
        'greeting': 'Ahoy! How can I help?',
        'tone': 'friendly',
        'enable_booking': True,
        'enable_top_five': False,
        'enable_map': True,
        'top_five_items': ['chowder', 'oysters'],
        'booking_link': 'https://example.com/book',
        'map_embed_url': 'https://maps.example.com/embed/1',
        'bot_slug': 'harbor-cafe',
    }
