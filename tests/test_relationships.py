"""Owner/broker join rows follow the single-select forms."""
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from estate_service.app.crud.relationships_crud import (
    ensure_property_owner,
    primary_owner,
    properties_for_owner,
    restore_property_owners,
    set_property_broker,
    set_property_owner,
    set_property_status,
)
from shared.core.store import DataStoreError


def _owner_links(store, prop):
    return store.select("property_owners", {"property_id": prop["id"]})


class TestSetOwner:
    def test_owner_then_none_leaves_property_unowned(self, store, make_property, make_owner):
        prop = make_property()
        owner = make_owner()

        set_property_owner(store, prop["id"], owner["id"])
        set_property_owner(store, prop["id"], None)

        assert _owner_links(store, prop) == []

    def test_second_owner_replaces_first(self, store, make_property, make_owner):
        prop = make_property()
        first = make_owner(full_name="First")
        second = make_owner(full_name="Second")

        set_property_owner(store, prop["id"], first["id"])
        set_property_owner(store, prop["id"], second["id"])

        links = _owner_links(store, prop)
        assert len(links) == 1
        assert links[0]["owner_id"] == second["id"]
        assert links[0]["ownership_percentage"] == Decimal("100")

    def test_returns_previous_rows_for_restore(self, store, make_property, make_owner):
        prop = make_property()
        first = make_owner(full_name="First")
        second = make_owner(full_name="Second")
        set_property_owner(store, prop["id"], first["id"])

        previous = set_property_owner(store, prop["id"], second["id"])
        restore_property_owners(store, prop["id"], previous)

        assert [link["owner_id"] for link in _owner_links(store, prop)] == [first["id"]]

    def test_failed_insert_puts_previous_rows_back(self, failing_store):
        prop = failing_store.insert("properties", {
            "title": "Flat A", "address": "x", "price": 1, "area_sqft": 1})
        owner = failing_store.insert("owners", {"full_name": "A", "phone": "1"})
        set_property_owner(failing_store, prop["id"], owner["id"])

        # unknown owner: the insert hits the foreign key
        with pytest.raises(DataStoreError):
            set_property_owner(failing_store, prop["id"], prop["id"])

        links = failing_store.select("property_owners", {"property_id": prop["id"]})
        assert [link["owner_id"] for link in links] == [owner["id"]]


class TestSetBroker:
    def test_broker_replace_and_clear(self, store, make_property, make_broker):
        prop = make_property()
        first = make_broker(full_name="First")
        second = make_broker(full_name="Second")

        set_property_broker(store, prop["id"], first["id"])
        set_property_broker(store, prop["id"], second["id"])
        links = store.select("property_brokers", {"property_id": prop["id"]})
        assert [link["broker_id"] for link in links] == [second["id"]]

        set_property_broker(store, prop["id"], None)
        assert store.select("property_brokers", {"property_id": prop["id"]}) == []


class TestOwnerLookups:
    def test_primary_owner_is_oldest_link(self, store, make_property, make_owner):
        prop = make_property()
        older = make_owner(full_name="Older")
        newer = make_owner(full_name="Newer")
        now = datetime.now(timezone.utc)
        store.insert("property_owners", {
            "property_id": prop["id"], "owner_id": newer["id"], "created_at": now})
        store.insert("property_owners", {
            "property_id": prop["id"], "owner_id": older["id"],
            "created_at": now - timedelta(days=1)})

        assert primary_owner(store, prop["id"])["full_name"] == "Older"

    def test_primary_owner_none_when_unowned(self, store, make_property):
        assert primary_owner(store, make_property()["id"]) is None

    def test_properties_for_owner(self, store, make_property, make_owner):
        owner = make_owner()
        owned = make_property(title="Owned")
        make_property(title="Other")
        set_property_owner(store, owned["id"], owner["id"])

        assert [p["title"] for p in properties_for_owner(store, owner["id"])] == ["Owned"]

    def test_ensure_owner_is_idempotent(self, store, make_property, make_owner):
        prop = make_property()
        owner = make_owner()

        created = ensure_property_owner(store, prop["id"], owner["id"])
        again = ensure_property_owner(store, prop["id"], owner["id"])

        assert created is not None
        assert again is None
        assert len(_owner_links(store, prop)) == 1


def test_set_property_status_returns_previous(store, make_property):
    prop = make_property()

    previous = set_property_status(store, prop["id"], "rented")

    assert previous == "for_rent"
    assert store.select_one("properties", {"id": prop["id"]})["status"] == "rented"
