"""Owners, brokers and tenants."""
import pytest
from pydantic import ValidationError

from estate_service.app.crud import brokers_crud, owners_crud, tenants_crud
from estate_service.app.schemas.brokers_schemas import BrokerCreate, BrokerRequest
from estate_service.app.schemas.owners_schemas import OwnerCreate, OwnerRequest, OwnerUpdate
from estate_service.app.schemas.tenants_schemas import TenantCreate, TenantRequest
from shared.helpers.contact_picker import Contact, ContactPickerUnavailable


class StubPicker:
    def __init__(self, contact=None, error=None):
        self.contact = contact
        self.error = error

    def pick(self):
        if self.error:
            raise self.error
        return self.contact


class TestOwners:
    def test_blank_email_stored_as_null(self, store):
        owner = owners_crud.create_owner(
            store, OwnerCreate(full_name="Ahmed Khan", phone="0321", email="  "))

        assert owner.email is None
        assert store.select("owners")[0]["email"] is None

    @pytest.mark.parametrize("field", ["full_name", "phone"])
    def test_required_fields(self, field):
        data = {"full_name": "Ahmed Khan", "phone": "0321", field: ""}
        with pytest.raises(ValidationError):
            OwnerCreate(**data)

    def test_list_reports_property_counts(self, store, make_owner, make_property):
        owner = make_owner()
        make_owner(full_name="Idle Owner", email="idle@example.com")
        for title in ("Flat A", "Flat B"):
            prop = make_property(title=title)
            store.insert("property_owners", {"property_id": prop["id"], "owner_id": owner["id"]})

        result = owners_crud.get_owners(store, OwnerRequest())
        counts = {o.full_name: o.property_count for o in result.owners}

        assert counts == {"Ahmed Khan": 2, "Idle Owner": 0}
        assert owners_crud.get_owners(store, OwnerRequest(search="EXAMPLE")).matched == 1

    def test_update(self, store, make_owner):
        owner = make_owner()

        updated = owners_crud.update_owner(store, owner["id"], OwnerUpdate(
            full_name="Ahmed Khan", phone="0321", address="House 5, DHA"))

        assert updated.address == "House 5, DHA"

    def test_new_form_prefill(self):
        picked = owners_crud.new_owner_defaults(
            StubPicker(Contact(name="Ahmed Khan", phone="+92 321 1234567")))
        assert picked.full_name == "Ahmed Khan"

        assert owners_crud.new_owner_defaults(None).full_name == ""
        unavailable = owners_crud.new_owner_defaults(
            StubPicker(error=ContactPickerUnavailable("no picker")))
        assert unavailable.phone == ""


class TestBrokers:
    def test_search_covers_agency_and_phone(self, store, make_broker):
        make_broker(full_name="Sara Malik", agency_name="Prime Estates", phone="0300-111")
        make_broker(full_name="Usman", agency_name="City Homes", phone="0345-222")

        by_agency = brokers_crud.get_brokers(store, BrokerRequest(search="prime"))
        by_phone = brokers_crud.get_brokers(store, BrokerRequest(search="0345"))

        assert [b.full_name for b in by_agency.brokers] == ["Sara Malik"]
        assert [b.full_name for b in by_phone.brokers] == ["Usman"]

    def test_detail_lists_assigned_properties(self, store, make_broker, make_property):
        broker = brokers_crud.create_broker(store, BrokerCreate(full_name="Sara", phone="0300"))
        prop = make_property()
        store.insert("property_brokers", {"property_id": prop["id"], "broker_id": broker.id})

        detail = brokers_crud.get_broker_by_id(store, broker.id)

        assert [p.title for p in detail.properties] == ["Flat A"]
        assert detail.property_count == 1


class TestTenants:
    def test_optional_fields(self, store):
        tenant = tenants_crud.create_tenant(
            store, TenantCreate(full_name="Bilal", phone="0333", email="", id_number=""))

        assert tenant.email is None
        assert tenant.id_number is None

    def test_agreement_counts(self, store, make_tenant, make_property, make_agreement):
        tenant = make_tenant()
        make_agreement(make_property(title="Now"), tenant)
        make_agreement(make_property(title="Before"), tenant, status="expired")

        listed = tenants_crud.get_tenants(store, TenantRequest()).tenants[0]

        assert (listed.active_agreements, listed.total_agreements) == (1, 2)
        assert {a.property.title for a in listed.rent_agreements} == {"Now", "Before"}

    def test_no_match_state(self, store, make_tenant):
        make_tenant()

        result = tenants_crud.get_tenants(store, TenantRequest(search="nobody"))

        assert result.state == "no_match"
