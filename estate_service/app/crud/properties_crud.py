# app/crud/properties_crud.py
import logging
from typing import List
from uuid import UUID

from shared.core.saga import Saga
from shared.core.store import DataStore, DataStoreError, Row
from shared.helpers.currency import format_pkr
from shared.helpers.json_response_helper import not_found_response
from shared.helpers.list_filter import filter_rows, list_state

from ..enum.estate_enum import FurnishingStatus, PropertyStatus, PropertyType
from ..schemas.properties_schemas import (
    PropertyBrokerOut,
    PropertyCreate,
    PropertyFormOptions,
    PropertyListResponse,
    PropertyOut,
    PropertyOwnerOut,
    PropertyRequest,
    PropertyUpdate,
)
from .common_crud import enum_lookup, fetch_one, fetch_rows, name_lookup
from .relationships_crud import (
    properties_for_owner,
    restore_property_brokers,
    restore_property_owners,
    set_property_broker,
    set_property_owner,
)

logger = logging.getLogger(__name__)

LIST_URL = "/api/properties/all"
PROPERTY_EMBED = ["property_owners.owner", "property_brokers.broker"]
LINK_FIELDS = {"owner_id", "broker_id"}


def property_out(row: Row) -> PropertyOut:
    owners = [
        PropertyOwnerOut(
            id=link["owner"]["id"],
            full_name=link["owner"]["full_name"],
            phone=link["owner"].get("phone"),
            email=link["owner"].get("email"),
            ownership_percentage=link.get("ownership_percentage") or 100,
        )
        for link in row.get("property_owners") or []
        if link.get("owner")
    ]
    brokers = [
        PropertyBrokerOut(
            id=link["broker"]["id"],
            full_name=link["broker"]["full_name"],
            phone=link["broker"].get("phone"),
            email=link["broker"].get("email"),
            agency_name=link["broker"].get("agency_name"),
        )
        for link in row.get("property_brokers") or []
        if link.get("broker")
    ]
    return PropertyOut.model_validate({
        **row,
        "price_display": format_pkr(row.get("price")),
        "owners": owners,
        "brokers": brokers,
    })


def get_properties(store: DataStore, params: PropertyRequest) -> PropertyListResponse:
    rows = fetch_rows(store, "properties", embed=PROPERTY_EMBED,
                      order_by="created_at", descending=True)

    matched = filter_rows(
        rows,
        search=params.search,
        fields=("title", "address", "city"),
        choices={"type": params.type, "status": params.status},
    )

    return PropertyListResponse(
        properties=[property_out(row) for row in matched],
        total=len(rows),
        matched=len(matched),
        state=list_state(len(rows), len(matched)),
    )


def get_property_by_id(store: DataStore, property_id: UUID) -> PropertyOut:
    row = fetch_one(store, "properties", {"id": property_id}, embed=PROPERTY_EMBED)
    if row is None:
        not_found_response("Property", LIST_URL, property_id)
    return property_out(row)


def get_properties_by_owner(store: DataStore, owner_id: UUID) -> List[PropertyOut]:
    try:
        rows = properties_for_owner(store, owner_id)
    except DataStoreError as exc:
        logger.error("Error fetching properties of owner %s: %s", owner_id, exc.message)
        rows = []
    return [property_out(row) for row in rows]


def create_property(store: DataStore, payload: PropertyCreate) -> PropertyOut:
    values = payload.model_dump(exclude=LINK_FIELDS)

    context = (
        Saga("create_property")
        .step(
            "property",
            lambda ctx: store.insert("properties", values),
            lambda ctx, row: store.delete("properties", {"id": row["id"]}),
        )
        .step(
            "owner",
            lambda ctx: set_property_owner(store, ctx["property"]["id"], payload.owner_id),
            lambda ctx, previous: restore_property_owners(store, ctx["property"]["id"], previous),
        )
        .step(
            "broker",
            lambda ctx: set_property_broker(store, ctx["property"]["id"], payload.broker_id),
            lambda ctx, previous: restore_property_brokers(store, ctx["property"]["id"], previous),
        )
        .run()
    )

    property_id = context["property"]["id"]
    logger.info("Created property %s (%s)", property_id, payload.title)
    return get_property_by_id(store, property_id)


def update_property(store: DataStore, property_id: UUID, payload: PropertyUpdate) -> PropertyOut:
    current = fetch_one(store, "properties", {"id": property_id})
    if current is None:
        not_found_response("Property", LIST_URL, property_id)

    values = payload.model_dump(exclude=LINK_FIELDS)
    previous = {field: current[field] for field in values}

    (
        Saga("update_property")
        .step(
            "property",
            lambda ctx: store.update("properties", values, {"id": property_id}),
            lambda ctx, rows: store.update("properties", previous, {"id": property_id}),
        )
        .step(
            "owner",
            lambda ctx: set_property_owner(store, property_id, payload.owner_id),
            lambda ctx, rows: restore_property_owners(store, property_id, rows),
        )
        .step(
            "broker",
            lambda ctx: set_property_broker(store, property_id, payload.broker_id),
            lambda ctx, rows: restore_property_brokers(store, property_id, rows),
        )
        .run()
    )

    return get_property_by_id(store, property_id)


def get_property_form_options(store: DataStore) -> PropertyFormOptions:
    owners = fetch_rows(store, "owners", order_by="full_name")
    brokers = fetch_rows(store, "brokers", order_by="full_name")
    return PropertyFormOptions(
        owners=name_lookup(owners),
        brokers=name_lookup(brokers),
        types=enum_lookup(PropertyType),
        statuses=enum_lookup(PropertyStatus),
        furnishing_statuses=enum_lookup(FurnishingStatus),
    )
