# app/crud/rent_agreements_crud.py
import logging
from datetime import date
from typing import Optional
from uuid import UUID

from shared.core.saga import Saga
from shared.core.store import DataStore, DataStoreError, Row
from shared.core.schemas import Lookup
from shared.helpers.currency import format_pkr
from shared.helpers.json_response_helper import not_found_response
from shared.helpers.list_filter import filter_rows, list_state

from ..enum.estate_enum import (
    OCCUPYING_AGREEMENT_STATUSES,
    AgreementStatus,
    PropertyStatus,
)
from ..schemas.rent_agreements_schemas import (
    AgreementPaymentOut,
    ExpireLapsedResult,
    PropertyOwnerLookup,
    RentAgreementCreate,
    RentAgreementFormOptions,
    RentAgreementListResponse,
    RentAgreementOut,
    RentAgreementRequest,
    RentAgreementUpdate,
)
from .common_crud import enum_lookup, fetch_one, fetch_rows, name_lookup
from .relationships_crud import (
    ensure_property_owner,
    primary_owner,
    properties_for_owner,
    remove_property_owner_link,
    restore_property_status,
    set_property_status,
)

logger = logging.getLogger(__name__)

LIST_URL = "/api/rent-agreements/all"
LIST_EMBED = ["property", "tenant"]
DETAIL_EMBED = ["property", "tenant", "owner", "payments"]


def _nested(row: Row, relation: str, field: str):
    related = row.get(relation)
    return related.get(field) if related else None


def agreement_out(row: Row) -> RentAgreementOut:
    payments = sorted(
        row.get("payments") or [],
        key=lambda payment: payment["payment_date"],
        reverse=True,
    )
    return RentAgreementOut.model_validate({
        **row,
        "monthly_rent_display": format_pkr(row.get("monthly_rent")),
        "security_deposit": row.get("security_deposit") or 0,
        "payments": [
            AgreementPaymentOut.model_validate({
                **payment, "amount_display": format_pkr(payment["amount"])})
            for payment in payments
        ],
    })


def _agreement_values(payload) -> Row:
    values = payload.model_dump()
    if values.get("security_deposit") is None:
        values["security_deposit"] = 0
    return values


# ----------------------------------------------------------------------
# occupancy
# ----------------------------------------------------------------------

def occupies_property(status: str) -> bool:
    return status in OCCUPYING_AGREEMENT_STATUSES


def sync_property_occupancy(store: DataStore, property_id: UUID) -> Optional[str]:
    """Move a property between for_rent and rented to match its agreements.

    A status set by hand, such as sold or for_sale, is left alone.
    Returns the status the property had before, for compensation.
    """
    occupying = store.count(
        "rent_agreements",
        {"property_id": property_id, "status": list(OCCUPYING_AGREEMENT_STATUSES)},
    )
    current = store.select_one("properties", {"id": property_id})
    if current is None:
        return None

    if occupying and current["status"] == PropertyStatus.for_rent.value:
        return set_property_status(store, property_id, PropertyStatus.rented.value)
    if not occupying and current["status"] == PropertyStatus.rented.value:
        return set_property_status(store, property_id, PropertyStatus.for_rent.value)
    return current["status"]


# ----------------------------------------------------------------------
# reads
# ----------------------------------------------------------------------

def get_rent_agreements(store: DataStore, params: RentAgreementRequest) -> RentAgreementListResponse:
    rows = fetch_rows(store, "rent_agreements", embed=LIST_EMBED,
                      order_by="created_at", descending=True)

    matched = filter_rows(
        rows,
        search=params.search,
        fields=(
            lambda row: _nested(row, "property", "title"),
            lambda row: _nested(row, "tenant", "full_name"),
            "status",
        ),
        choices={"status": params.status},
    )

    return RentAgreementListResponse(
        rent_agreements=[agreement_out(row) for row in matched],
        total=len(rows),
        matched=len(matched),
        state=list_state(len(rows), len(matched)),
    )


def get_rent_agreement_by_id(store: DataStore, agreement_id: UUID) -> RentAgreementOut:
    row = fetch_one(store, "rent_agreements", {"id": agreement_id}, embed=DETAIL_EMBED)
    if row is None:
        not_found_response("Rent agreement", LIST_URL, agreement_id)
    return agreement_out(row)


def get_rent_agreement_form_options(store: DataStore, owner_id: Optional[UUID] = None) -> RentAgreementFormOptions:
    if owner_id:
        try:
            properties = properties_for_owner(store, owner_id)
        except DataStoreError as exc:
            logger.error("Error fetching properties of owner %s: %s", owner_id, exc.message)
            properties = []
    else:
        properties = fetch_rows(store, "properties", order_by="title")

    tenants = fetch_rows(store, "tenants", order_by="full_name")
    owners = fetch_rows(store, "owners", order_by="full_name")

    return RentAgreementFormOptions(
        properties=name_lookup(properties, "title"),
        tenants=name_lookup(tenants),
        owners=name_lookup(owners),
        statuses=enum_lookup(AgreementStatus),
    )


def get_owner_for_property(store: DataStore, property_id: UUID) -> PropertyOwnerLookup:
    try:
        owner = primary_owner(store, property_id)
    except DataStoreError as exc:
        logger.error("Error fetching owner of property %s: %s", property_id, exc.message)
        owner = None

    return PropertyOwnerLookup(
        property_id=property_id,
        owner=Lookup(id=owner["id"], name=owner["full_name"]) if owner else None,
    )


# ----------------------------------------------------------------------
# writes
# ----------------------------------------------------------------------

def create_rent_agreement(store: DataStore, payload: RentAgreementCreate) -> RentAgreementOut:
    values = _agreement_values(payload)
    property_id = payload.property_id

    saga = Saga("create_rent_agreement").step(
        "agreement",
        lambda ctx: store.insert("rent_agreements", values),
        lambda ctx, row: store.delete("rent_agreements", {"id": row["id"]}),
    )
    if payload.owner_id:
        saga.step(
            "owner_link",
            lambda ctx: ensure_property_owner(store, property_id, payload.owner_id),
            lambda ctx, link: remove_property_owner_link(store, link),
        )
    if occupies_property(payload.status):
        saga.step(
            "occupancy",
            lambda ctx: set_property_status(store, property_id, PropertyStatus.rented.value),
            lambda ctx, previous: restore_property_status(store, property_id, previous),
        )

    context = saga.run()
    agreement_id = context["agreement"]["id"]
    logger.info("Created rent agreement %s for property %s", agreement_id, property_id)
    return get_rent_agreement_by_id(store, agreement_id)


def update_rent_agreement(store: DataStore, agreement_id: UUID, payload: RentAgreementUpdate) -> RentAgreementOut:
    current = fetch_one(store, "rent_agreements", {"id": agreement_id})
    if current is None:
        not_found_response("Rent agreement", LIST_URL, agreement_id)

    values = _agreement_values(payload)
    previous = {field: current[field] for field in values}

    saga = Saga("update_rent_agreement").step(
        "agreement",
        lambda ctx: store.update("rent_agreements", values, {"id": agreement_id}),
        lambda ctx, rows: store.update("rent_agreements", previous, {"id": agreement_id}),
    )
    if payload.owner_id:
        saga.step(
            "owner_link",
            lambda ctx: ensure_property_owner(store, payload.property_id, payload.owner_id),
            lambda ctx, link: remove_property_owner_link(store, link),
        )

    # only a new status or a move to another property changes occupancy
    affected = []
    if current["status"] != payload.status or current["property_id"] != payload.property_id:
        affected = sorted({current["property_id"], payload.property_id}, key=str)
    for property_id in affected:
        saga.step(
            f"occupancy:{property_id}",
            lambda ctx, pid=property_id: sync_property_occupancy(store, pid),
            lambda ctx, previous_status, pid=property_id: restore_property_status(
                store, pid, previous_status),
        )

    saga.run()
    return get_rent_agreement_by_id(store, agreement_id)


def expire_lapsed_agreements(store: DataStore, today: Optional[date] = None) -> ExpireLapsedResult:
    """Move active agreements whose end date has passed to expired."""
    today = today or date.today()
    lapsed = store.select(
        "rent_agreements", {"status": AgreementStatus.active.value}, lt={"end_date": today})

    for agreement in lapsed:
        store.update(
            "rent_agreements",
            {"status": AgreementStatus.expired.value},
            {"id": agreement["id"]},
        )

    for property_id in {agreement["property_id"] for agreement in lapsed}:
        sync_property_occupancy(store, property_id)

    if lapsed:
        logger.info("Expired %d lapsed rent agreements", len(lapsed))
    return ExpireLapsedResult(
        expired=len(lapsed),
        agreement_ids=[agreement["id"] for agreement in lapsed],
    )
