# app/crud/brokers_crud.py
import logging
from uuid import UUID

from shared.core.store import DataStore, Row
from shared.helpers.json_response_helper import not_found_response
from shared.helpers.list_filter import filter_rows, list_state

from ..schemas.brokers_schemas import (
    BrokerCreate,
    BrokerListResponse,
    BrokerOut,
    BrokerRequest,
    BrokerUpdate,
)
from ..schemas.common_schemas import PropertyBrief
from .common_crud import fetch_one, fetch_rows

logger = logging.getLogger(__name__)

LIST_URL = "/api/brokers/all"
BROKER_EMBED = ["property_brokers.property"]
SEARCH_FIELDS = ("full_name", "email", "agency_name", "phone")


def broker_out(row: Row) -> BrokerOut:
    properties = [
        PropertyBrief.model_validate(link["property"])
        for link in row.get("property_brokers") or []
        if link.get("property")
    ]
    return BrokerOut.model_validate({
        **row,
        "properties": properties,
        "property_count": len(properties),
    })


def get_brokers(store: DataStore, params: BrokerRequest) -> BrokerListResponse:
    rows = fetch_rows(store, "brokers", embed=BROKER_EMBED,
                      order_by="full_name")
    matched = filter_rows(rows, params.search, SEARCH_FIELDS)
    return BrokerListResponse(
        brokers=[broker_out(row) for row in matched],
        total=len(rows),
        matched=len(matched),
        state=list_state(len(rows), len(matched)),
    )


def get_broker_by_id(store: DataStore, broker_id: UUID) -> BrokerOut:
    row = fetch_one(store, "brokers", {"id": broker_id}, embed=BROKER_EMBED)
    if row is None:
        not_found_response("Broker", LIST_URL, broker_id)
    return broker_out(row)


def create_broker(store: DataStore, payload: BrokerCreate) -> BrokerOut:
    row = store.insert("brokers", payload.model_dump())
    logger.info("Created broker %s", row["id"])
    return broker_out(row)


def update_broker(store: DataStore, broker_id: UUID, payload: BrokerUpdate) -> BrokerOut:
    rows = store.update("brokers", payload.model_dump(), {"id": broker_id})
    if not rows:
        not_found_response("Broker", LIST_URL, broker_id)
    return get_broker_by_id(store, broker_id)
