# app/crud/tenants_crud.py
import logging
from uuid import UUID

from shared.core.store import DataStore, Row
from shared.helpers.contact_picker import ContactPicker, prefill_from_contact
from shared.helpers.json_response_helper import not_found_response
from shared.helpers.list_filter import filter_rows, list_state

from ..enum.estate_enum import AgreementStatus
from ..schemas.common_schemas import AgreementBrief, ContactDefaults
from ..schemas.tenants_schemas import (
    TenantCreate,
    TenantListResponse,
    TenantOut,
    TenantRequest,
    TenantUpdate,
)
from .common_crud import fetch_one, fetch_rows

logger = logging.getLogger(__name__)

LIST_URL = "/api/tenants/all"
TENANT_EMBED = ["rent_agreements.property"]


def tenant_out(row: Row) -> TenantOut:
    agreements = sorted(
        row.get("rent_agreements") or [],
        key=lambda agreement: agreement["start_date"],
        reverse=True,
    )
    active = [a for a in agreements if a["status"] == AgreementStatus.active.value]
    return TenantOut.model_validate({
        **row,
        "rent_agreements": [AgreementBrief.model_validate(a) for a in agreements],
        "active_agreements": len(active),
        "total_agreements": len(agreements),
    })


def get_tenants(store: DataStore, params: TenantRequest) -> TenantListResponse:
    rows = fetch_rows(store, "tenants", embed=TENANT_EMBED,
                      order_by="full_name")
    matched = filter_rows(rows, params.search, ("full_name", "phone", "email"))
    return TenantListResponse(
        tenants=[tenant_out(row) for row in matched],
        total=len(rows),
        matched=len(matched),
        state=list_state(len(rows), len(matched)),
    )


def get_tenant_by_id(store: DataStore, tenant_id: UUID) -> TenantOut:
    row = fetch_one(store, "tenants", {"id": tenant_id}, embed=TENANT_EMBED)
    if row is None:
        not_found_response("Tenant", LIST_URL, tenant_id)
    return tenant_out(row)


def create_tenant(store: DataStore, payload: TenantCreate) -> TenantOut:
    row = store.insert("tenants", payload.model_dump())
    logger.info("Created tenant %s", row["id"])
    return tenant_out(row)


def update_tenant(store: DataStore, tenant_id: UUID, payload: TenantUpdate) -> TenantOut:
    rows = store.update("tenants", payload.model_dump(), {"id": tenant_id})
    if not rows:
        not_found_response("Tenant", LIST_URL, tenant_id)
    return get_tenant_by_id(store, tenant_id)


def new_tenant_defaults(picker: ContactPicker) -> ContactDefaults:
    return ContactDefaults(**prefill_from_contact(picker))
