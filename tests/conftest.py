"""Shared test infrastructure for the estate back-office suite.

Provides:
- store: DataStore over a fresh in-memory SQLite database with every estate table
- failing_store: the same store, rejecting chosen (operation, collection) pairs
- client: TestClient with the store dependency pointed at ``store``
- make_owner / make_broker / make_tenant / make_property / make_agreement /
  make_payment: row factories writing straight to ``store``
"""
import os

# the app builds its engine at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import date, timedelta
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from shared.core.database import Base, make_engine
from shared.core.store import DataStore, DataStoreError
from shared.core.store_provider import get_store

# Import all model modules so their tables are registered with Base.metadata
from estate_service.app.models import (  # noqa: F401
    parties,
    payments,
    properties,
    property_links,
    rent_agreements,
    requirements,
)


class FailingStore(DataStore):
    """DataStore that raises for the configured (operation, collection) pairs."""

    def __init__(self, db):
        super().__init__(db)
        self.failures = set()

    def fail_on(self, operation: str, collection: str):
        self.failures.add((operation, collection))
        return self

    def _maybe_fail(self, operation: str, collection: str):
        if (operation, collection) in self.failures:
            raise DataStoreError(
                f"simulated {operation} failure on {collection}", collection)

    def select(self, collection, *args, **kwargs):
        self._maybe_fail("select", collection)
        return super().select(collection, *args, **kwargs)

    def count(self, collection, filters=None):
        self._maybe_fail("select", collection)
        return super().count(collection, filters)

    def insert(self, collection, row):
        self._maybe_fail("insert", collection)
        return super().insert(collection, row)

    def update(self, collection, patch, filters):
        self._maybe_fail("update", collection)
        return super().update(collection, patch, filters)

    def delete(self, collection, filters):
        self._maybe_fail("delete", collection)
        return super().delete(collection, filters)


# ---------------------------------------------------------------------------
# Stores
# ---------------------------------------------------------------------------

@pytest.fixture
def db_session():
    """Session on a fresh in-memory SQLite database with every table created."""
    # one shared connection, so the TestClient's worker threads see the same data
    engine = make_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()

    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def store(db_session):
    return DataStore(db_session)


@pytest.fixture
def failing_store(db_session):
    return FailingStore(db_session)


# ---------------------------------------------------------------------------
# API client
# ---------------------------------------------------------------------------

@pytest.fixture
def client(store):
    from estate_service.app.main import app

    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Row factories
# ---------------------------------------------------------------------------

@pytest.fixture
def make_owner(store):
    def _make(full_name="Ahmed Khan", phone="+92 321 1234567", **extra):
        return store.insert("owners", {"full_name": full_name, "phone": phone, **extra})
    return _make


@pytest.fixture
def make_broker(store):
    def _make(full_name="Sara Malik", phone="+92 300 7654321", **extra):
        return store.insert("brokers", {"full_name": full_name, "phone": phone, **extra})
    return _make


@pytest.fixture
def make_tenant(store):
    def _make(full_name="Bilal Ahmed", phone="+92 333 5550000", **extra):
        return store.insert("tenants", {"full_name": full_name, "phone": phone, **extra})
    return _make


@pytest.fixture
def make_property(store):
    def _make(title="Flat A", address="12 Canal Road", price=Decimal("15000"), **extra):
        row = {"title": title, "address": address, "price": price, "area_sqft": 900}
        row.update(extra)
        return store.insert("properties", row)
    return _make


@pytest.fixture
def make_agreement(store):
    def _make(property_row, tenant_row, monthly_rent=Decimal("15000"), **extra):
        today = date.today()
        row = {
            "property_id": property_row["id"],
            "tenant_id": tenant_row["id"],
            "start_date": today - timedelta(days=30),
            "end_date": today + timedelta(days=335),
            "monthly_rent": monthly_rent,
        }
        row.update(extra)
        return store.insert("rent_agreements", row)
    return _make


@pytest.fixture
def make_payment(store):
    def _make(agreement_row, amount=Decimal("15000"), **extra):
        row = {
            "rent_agreement_id": agreement_row["id"],
            "amount": amount,
            "payment_date": date.today(),
            "payment_method": "Cash",
        }
        row.update(extra)
        return store.insert("payments", row)
    return _make
