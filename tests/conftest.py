"""
Shared test fixtures.
"""

import os
import sys
from pathlib import Path

# Add backend directory to Python path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Settings require Supabase credentials at import time
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_KEY", "test-anon-key")

import pytest
from unittest.mock import patch
from datetime import datetime
from typing import Generator, Optional
from uuid import uuid4

# ===================
# MOCK SUPABASE CLIENT
# ===================

class MockSupabaseResponse:
    """Mock Supabase query response."""

    def __init__(self, data: list = None, count: int = None):
        self.data = data or []
        self.count = count if count is not None else len(self.data)


class MockSupabaseQuery:
    """
    Mock Supabase query builder with chainable methods.

    Filters, ordering and limits are applied on execute() against the
    owning table's rows, so reads observe earlier writes.
    """

    def __init__(self, table: "MockSupabaseTable"):
        self._table = table
        self._filters: list[tuple[str, object]] = []
        self._order: Optional[tuple[str, bool]] = None
        self._limit: Optional[int] = None
        self._count: Optional[str] = None
        self._write = None

    def select(self, *args, count: Optional[str] = None, **kwargs):
        self._count = count
        return self

    def upsert(self, data, on_conflict: Optional[str] = None, **kwargs):
        self._write = lambda: self._table.apply_upsert(data, on_conflict)
        return self

    def eq(self, column, value):
        self._filters.append((column, value))
        return self

    def order(self, column, desc: bool = False, **kwargs):
        self._order = (column, desc)
        return self

    def limit(self, count):
        self._limit = count
        return self

    def execute(self) -> MockSupabaseResponse:
        self._table.client.raise_if_failing()

        if self._write is not None:
            return MockSupabaseResponse(data=self._write())

        rows = [
            row for row in self._table.rows
            if all(row.get(column) == value for column, value in self._filters)
        ]
        if self._order:
            column, desc = self._order
            rows = sorted(rows, key=lambda row: row.get(column), reverse=desc)

        total = len(rows)
        if self._limit is not None:
            rows = rows[:self._limit]

        return MockSupabaseResponse(
            data=[dict(row) for row in rows],
            count=total if self._count == "exact" else None
        )


class MockSupabaseTable:
    """In-memory table shared by all queries against it."""

    def __init__(self, client: "MockSupabaseClient", rows: list = None):
        self.client = client
        self.rows = [dict(row) for row in (rows or [])]
        self.upsert_calls: list[tuple[dict, Optional[str]]] = []

    def select(self, *args, **kwargs):
        return MockSupabaseQuery(self).select(*args, **kwargs)

    def upsert(self, data, on_conflict: Optional[str] = None, **kwargs):
        return MockSupabaseQuery(self).upsert(data, on_conflict=on_conflict)

    def apply_upsert(self, data, on_conflict: Optional[str] = None):
        self.upsert_calls.append((dict(data), on_conflict))
        keys = on_conflict.split(",") if on_conflict else ["id"]
        now = datetime.utcnow().isoformat() + "Z"

        for row in self.rows:
            if all(row.get(key) == data.get(key) for key in keys):
                row.update(data)
                row["updated_at"] = now
                return [dict(row)]

        row = {"id": str(uuid4()), "created_at": now, "updated_at": now, **data}
        self.rows.append(row)
        return [dict(row)]


class MockSupabaseClient:
    """Mock Supabase client backed by in-memory tables."""

    def __init__(self):
        self._tables: dict[str, MockSupabaseTable] = {}
        self._error: Optional[Exception] = None

    def set_table_data(self, table_name: str, data: list):
        """Configure rows for a table."""
        self._tables[table_name] = MockSupabaseTable(self, data)

    def rows(self, table_name: str) -> list:
        """Current rows of a table."""
        return self._get(table_name).rows

    def fail_with(self, error: Exception):
        """Make every subsequent query raise `error`."""
        self._error = error

    def raise_if_failing(self):
        if self._error is not None:
            raise self._error

    def table(self, name: str) -> MockSupabaseTable:
        """Get mock table."""
        return self._get(name)

    def _get(self, name: str) -> MockSupabaseTable:
        if name not in self._tables:
            self._tables[name] = MockSupabaseTable(self)
        return self._tables[name]


# ===================
# FIXTURES
# ===================

@pytest.fixture
def mock_supabase() -> MockSupabaseClient:
    """
    Create a mock Supabase client.

    Usage:
        def test_something(mock_supabase):
            mock_supabase.set_table_data("products", [
                {"id": "1", "sku": "A1", ...}
            ])
    """
    return MockSupabaseClient()


@pytest.fixture
def mock_db(mock_supabase, monkeypatch) -> Generator:
    """
    Patch the database client with mock and drop cached services.

    Usage:
        def test_something(mock_db, mock_supabase):
            mock_supabase.set_table_data("products", [...])
            # Now any code using get_supabase_client() gets the mock
    """
    monkeypatch.setattr("services.product_service._product_service", None)
    monkeypatch.setattr("services.special_price_service._special_price_service", None)

    with patch("config.database.get_supabase_client", return_value=mock_supabase):
        with patch("services.product_service.get_supabase_client", return_value=mock_supabase):
            with patch("services.special_price_service.get_supabase_client", return_value=mock_supabase):
                yield mock_supabase


@pytest.fixture
def sample_products_list() -> list:
    """Sample catalog for testing."""
    return [
        {
            "id": "uuid-1",
            "sku": "A1",
            "name": "Running Shoes",
            "description": "Lightweight trainers",
            "price": 100,
            "created_at": "2025-12-05T10:00:00Z"
        },
        {
            "id": "uuid-2",
            "sku": "B2",
            "name": "Rain Jacket",
            "description": "Waterproof shell",
            "price": 50,
            "created_at": "2025-12-05T10:00:00Z"
        },
        {
            "id": "uuid-3",
            "sku": "C3",
            "name": "Wool Socks",
            "description": "Pack of three",
            "price": 12.5,
            "created_at": "2025-12-05T10:00:00Z"
        }
    ]


@pytest.fixture
def catalog_db(mock_db, mock_supabase, sample_products_list) -> "MockSupabaseClient":
    """Mock database seeded with the sample catalog and no special prices."""
    mock_supabase.set_table_data("products", sample_products_list)
    mock_supabase.set_table_data("special_prices", [])
    return mock_supabase


# ===================
# API TEST CLIENT
# ===================

@pytest.fixture
def test_client_with_mock_db(catalog_db):
    """
    Create FastAPI test client over the seeded mock database.

    Usage:
        def test_endpoint(test_client_with_mock_db, catalog_db):
            response = test_client_with_mock_db.get("/api/products")
    """
    from fastapi.testclient import TestClient
    from main import app

    return TestClient(app)
