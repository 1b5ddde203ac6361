"""
Shared fixtures.

The app gets a fake database in place of the asyncpg-backed one, so endpoint
tests run without PostgreSQL and can assert exactly which SQL was issued.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from core.errors import ConnectivityError
from main import create_app

CREATED_AT = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class FakeDatabase:
    """Records every query; returns canned rows or raises a canned error."""

    def __init__(self, rows: list[dict] | None = None, error: Exception | None = None) -> None:
        self.rows = rows or []
        self.error = error
        self.calls: list[tuple[str, tuple]] = []

    async def fetch_all(self, sql: str, *args) -> list[dict]:
        self.calls.append((sql, args))
        if self.error is not None:
            raise self.error
        return list(self.rows)

    async def fetch_one(self, sql: str, *args) -> dict | None:
        rows = await self.fetch_all(sql, *args)
        return rows[0] if rows else None


class FlakyDatabase:
    """Refuses connections `failures` times, then accepts them."""

    def __init__(self, failures: int) -> None:
        self.failures = failures
        self.attempts = 0
        self.opened = False
        self.closed = False

    async def open(self) -> None:
        self.opened = True

    async def close(self) -> None:
        self.closed = True

    @asynccontextmanager
    async def acquire(self):
        self.attempts += 1
        if self.attempts <= self.failures:
            raise ConnectivityError("connection refused")
        yield object()


def restaurant_row(**overrides) -> dict:
    row = {
        "restaurant_id": 1,
        "name": "Trattoria Roma",
        "cuisine": "Italian",
        "city": "Paris",
        "rating": Decimal("4.5"),
        "is_open": True,
        "created_at": CREATED_AT,
    }
    row.update(overrides)
    return row


def menu_row(**overrides) -> dict:
    row = {
        "item_id": 10,
        "restaurant_id": 1,
        "name": "Margherita",
        "category": "Pizza",
        "price": Decimal("11.50"),
        "is_available": True,
        "created_at": CREATED_AT,
    }
    row.update(overrides)
    return row


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def client(fake_db: FakeDatabase) -> TestClient:
    return TestClient(create_app(fake_db))
