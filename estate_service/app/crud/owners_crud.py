# app/crud/owners_crud.py
import logging
from uuid import UUID

from shared.core.store import DataStore, Row
from shared.helpers.contact_picker import ContactPicker, prefill_from_contact
from shared.helpers.json_response_helper import not_found_response
from shared.helpers.list_filter import filter_rows, list_state

from ..schemas.common_schemas import ContactDefaults
from ..schemas.owners_schemas import (
    OwnedPropertyOut,
    OwnerCreate,
    OwnerListResponse,
    OwnerOut,
    OwnerRequest,
    OwnerUpdate,
)
from .common_crud import fetch_one, fetch_rows

logger = logging.getLogger(__name__)

LIST_URL = "/api/owners/all"
OWNER_EMBED = ["property_owners.property"]


def owner_out(row: Row) -> OwnerOut:
    properties = [
        OwnedPropertyOut(
            id=link["property"]["id"],
            title=link["property"]["title"],
            status=link["property"].get("status"),
            ownership_percentage=link.get("ownership_percentage") or 100,
        )
        for link in row.get("property_owners") or []
        if link.get("property")
    ]
    return OwnerOut.model_validate({
        **row,
        "properties": properties,
        "property_count": len(properties),
    })


def get_owners(store: DataStore, params: OwnerRequest) -> OwnerListResponse:
    rows = fetch_rows(store, "owners", embed=OWNER_EMBED,
                      order_by="full_name")
    matched = filter_rows(rows, params.search, ("full_name", "email"))
    return OwnerListResponse(
        owners=[owner_out(row) for row in matched],
        total=len(rows),
        matched=len(matched),
        state=list_state(len(rows), len(matched)),
    )


def get_owner_by_id(store: DataStore, owner_id: UUID) -> OwnerOut:
    row = fetch_one(store, "owners", {"id": owner_id}, embed=OWNER_EMBED)
    if row is None:
        not_found_response("Owner", LIST_URL, owner_id)
    return owner_out(row)


def create_owner(store: DataStore, payload: OwnerCreate) -> OwnerOut:
    row = store.insert("owners", payload.model_dump())
    logger.info("Created owner %s", row["id"])
    return owner_out(row)


def update_owner(store: DataStore, owner_id: UUID, payload: OwnerUpdate) -> OwnerOut:
    rows = store.update("owners", payload.model_dump(), {"id": owner_id})
    if not rows:
        not_found_response("Owner", LIST_URL, owner_id)
    return get_owner_by_id(store, owner_id)


def new_owner_defaults(picker: ContactPicker) -> ContactDefaults:
    return ContactDefaults(**prefill_from_contact(picker))
