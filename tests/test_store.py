"""DataStore over SQLite: reads, embeds through model relationships, constraints."""
import uuid
from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from shared.core.store import DataStoreError


class TestReads:
    def test_insert_fills_generated_columns(self, store):
        owner = store.insert("owners", {"full_name": "Ahmed Khan", "phone": "0300"})

        assert isinstance(owner["id"], uuid.UUID)
        assert isinstance(owner["created_at"], datetime)
        assert owner["email"] is None

    def test_column_defaults_applied(self, store, make_property):
        prop = make_property()

        assert prop["status"] == "for_rent"
        assert prop["type"] == "residential"
        assert prop["furnishing_status"] == "unfurnished"
        assert prop["price"] == Decimal("15000")

    def test_filter_by_list_means_membership(self, store, make_owner):
        first = make_owner(full_name="A")
        make_owner(full_name="B")
        third = make_owner(full_name="C")

        rows = store.select("owners", {"id": [first["id"], third["id"]]}, order_by="full_name")

        assert [r["full_name"] for r in rows] == ["A", "C"]

    def test_none_filter_means_is_null(self, store, make_owner):
        make_owner(full_name="A", email="a@example.com")
        make_owner(full_name="B")

        rows = store.select("owners", {"email": None})

        assert [r["full_name"] for r in rows] == ["B"]

    def test_order_and_limit(self, store, make_owner):
        for name in ("Zara", "Ali", "Maria"):
            make_owner(full_name=name)

        rows = store.select("owners", order_by="full_name", descending=True, limit=2)

        assert [r["full_name"] for r in rows] == ["Zara", "Maria"]

    def test_zero_limit_returns_nothing(self, store, make_owner):
        make_owner()

        assert store.select("owners", limit=0) == []
        assert len(store.select("owners", limit=None)) == 1

    def test_range_bounds(self, store, make_property, make_tenant, make_agreement):
        prop = make_property()
        tenant = make_tenant()
        today = date.today()
        for days in (-5, 0, 10, 40):
            make_agreement(prop, tenant, end_date=today + timedelta(days=days))

        rows = store.select(
            "rent_agreements",
            gte={"end_date": today},
            lt={"end_date": today + timedelta(days=40)},
            order_by="end_date",
        )

        assert [(r["end_date"] - today).days for r in rows] == [0, 10]

    def test_order_by_date_descending(self, store, make_property, make_tenant, make_agreement):
        prop = make_property()
        tenant = make_tenant()
        today = date.today()
        for days in (10, 40, 20):
            make_agreement(prop, tenant, end_date=today + timedelta(days=days))

        rows = store.select("rent_agreements", order_by="end_date", descending=True)

        assert [(row["end_date"] - today).days for row in rows] == [40, 20, 10]

    def test_count(self, store, make_owner):
        make_owner()
        make_owner(full_name="Other")

        assert store.count("owners") == 2
        assert store.count("owners", {"full_name": "Other"}) == 1


class TestEmbedding:
    def test_many_to_one_embeds_object(self, store, make_property, make_tenant, make_agreement):
        prop = make_property()
        tenant = make_tenant()
        make_agreement(prop, tenant)

        row = store.select("rent_agreements", embed=["property", "tenant", "owner"])[0]

        assert row["property"]["title"] == "Flat A"
        assert row["tenant"]["full_name"] == "Bilal Ahmed"
        assert row["owner"] is None

    def test_one_to_many_embeds_list_and_nests(self, store, make_property, make_owner):
        prop = make_property()
        owner = make_owner()
        store.insert("property_owners", {
            "property_id": prop["id"], "owner_id": owner["id"], "ownership_percentage": 100})

        row = store.select_one("properties", {"id": prop["id"]}, embed=["property_owners.owner"])

        assert [link["owner"]["full_name"] for link in row["property_owners"]] == ["Ahmed Khan"]
        assert row["property_owners"][0]["ownership_percentage"] == Decimal("100")

    def test_embed_from_the_owner_side(self, store, make_property, make_owner):
        prop = make_property(title="Shop 4")
        owner = make_owner()
        store.insert("property_owners", {"property_id": prop["id"], "owner_id": owner["id"]})

        row = store.select_one("owners", {"id": owner["id"]}, embed=["property_owners.property"])

        assert row["property_owners"][0]["property"]["title"] == "Shop 4"

    def test_sibling_paths_share_one_level(self, store, make_property, make_tenant,
                                           make_agreement, make_payment):
        agreement = make_agreement(make_property(), make_tenant())
        make_payment(agreement)

        row = store.select(
            "payments", embed=["rent_agreement.property", "rent_agreement.tenant"])[0]

        assert row["rent_agreement"]["property"]["title"] == "Flat A"
        assert row["rent_agreement"]["tenant"]["full_name"] == "Bilal Ahmed"

    def test_embedded_rows_are_plain_dicts(self, store, make_property, make_tenant, make_agreement):
        make_agreement(make_property(), make_tenant())

        row = store.select("rent_agreements", embed=["property"])[0]

        assert isinstance(row["property"], dict)
        assert "rent_agreements" not in row["property"]

    def test_empty_children_embed_as_empty_list(self, store, make_property):
        make_property()

        row = store.select("properties", embed=["property_owners"])[0]

        assert row["property_owners"] == []

    def test_unknown_relationship_rejected(self, store, make_property):
        make_property()

        with pytest.raises(DataStoreError, match="Could not find a relationship"):
            store.select("properties", embed=["landlord"])


class TestConstraints:
    def test_not_null_violation_surfaces_backend_message(self, store):
        with pytest.raises(DataStoreError) as info:
            store.insert("owners", {"full_name": "No Phone"})

        assert "NOT NULL constraint failed" in info.value.message
        assert store.count("owners") == 0

    def test_foreign_key_on_insert(self, store, make_property):
        prop = make_property()

        with pytest.raises(DataStoreError) as info:
            store.insert("property_owners", {"property_id": prop["id"], "owner_id": uuid.uuid4()})

        assert "FOREIGN KEY constraint failed" in info.value.message

    def test_unknown_collection_and_column(self, store):
        with pytest.raises(DataStoreError, match='relation "landlords" does not exist'):
            store.select("landlords")
        with pytest.raises(DataStoreError, match="column owners.nickname does not exist"):
            store.insert("owners", {"full_name": "A", "phone": "1", "nickname": "x"})

    def test_session_usable_after_failure(self, store):
        with pytest.raises(DataStoreError):
            store.insert("tenants", {"full_name": "No Phone"})

        tenant = store.insert("tenants", {"full_name": "Bilal", "phone": "0333"})

        assert store.select_one("tenants", {"id": tenant["id"]})["full_name"] == "Bilal"

    def test_update_and_delete_return_rows(self, store, make_property):
        prop = make_property()

        updated = store.update("properties", {"status": "rented"}, {"id": prop["id"]})
        assert [row["status"] for row in updated] == ["rented"]

        deleted = store.delete("properties", {"id": prop["id"]})
        assert [row["id"] for row in deleted] == [prop["id"]]
        assert store.select("properties") == []

    def test_update_without_match_returns_empty(self, store):
        assert store.update("properties", {"status": "sold"}, {"id": uuid.uuid4()}) == []

    def test_delete_cascades_join_rows(self, store, make_property, make_owner, make_broker):
        prop = make_property()
        owner = make_owner()
        broker = make_broker()
        store.insert("property_owners", {"property_id": prop["id"], "owner_id": owner["id"]})
        store.insert("property_brokers", {"property_id": prop["id"], "broker_id": broker["id"]})

        store.delete("properties", {"id": prop["id"]})

        assert store.count("property_owners") == 0
        assert store.count("property_brokers") == 0
        assert store.count("owners") == 1

    def test_delete_blocked_by_referencing_agreement(self, store, make_property,
                                                     make_tenant, make_agreement):
        prop = make_property()
        make_agreement(prop, make_tenant())

        with pytest.raises(DataStoreError):
            store.delete("properties", {"id": prop["id"]})

        assert store.count("properties") == 1
        assert store.count("rent_agreements") == 1

    def test_delete_owner_nulls_agreement_owner(self, store, make_property, make_tenant,
                                                make_owner, make_agreement):
        owner = make_owner()
        agreement = make_agreement(make_property(), make_tenant(), owner_id=owner["id"])

        store.delete("owners", {"id": owner["id"]})

        assert store.select_one("rent_agreements", {"id": agreement["id"]})["owner_id"] is None

    def test_delete_agreement_cascades_payments(self, store, make_property, make_tenant,
                                                make_agreement, make_payment):
        agreement = make_agreement(make_property(), make_tenant())
        make_payment(agreement)

        store.delete("rent_agreements", {"id": agreement["id"]})

        assert store.count("payments") == 0
