# app/crud/requirements_crud.py
import logging
from uuid import UUID

from shared.core.store import DataStore, Row
from shared.helpers.currency import format_pkr
from shared.helpers.json_response_helper import not_found_response
from shared.helpers.list_filter import filter_rows, list_state

from ..schemas.requirements_schemas import (
    RequirementCreate,
    RequirementListResponse,
    RequirementOut,
    RequirementRequest,
    RequirementUpdate,
)
from .common_crud import fetch_one, fetch_rows

logger = logging.getLogger(__name__)

LIST_URL = "/api/requirements/all"
SEARCH_FIELDS = ("customer_name", "customer_phone", "customer_email", "preferred_location")


def budget_display(row: Row):
    low, high = row.get("budget_min"), row.get("budget_max")
    if low is None and high is None:
        return None
    if high is None:
        return f"From {format_pkr(low)}"
    if low is None:
        return f"Up to {format_pkr(high)}"
    return f"{format_pkr(low)} - {format_pkr(high)}"


def requirement_out(row: Row) -> RequirementOut:
    return RequirementOut.model_validate({**row, "budget_display": budget_display(row)})


def _requirement_values(payload) -> Row:
    values = payload.model_dump()
    # the column default stamps today
    if values.get("inquiry_date") is None:
        values.pop("inquiry_date", None)
    return values


def get_requirements(store: DataStore, params: RequirementRequest) -> RequirementListResponse:
    rows = fetch_rows(store, "requirements", order_by="inquiry_date", descending=True)
    matched = filter_rows(
        rows,
        search=params.search,
        fields=SEARCH_FIELDS,
        choices={"status": params.status, "requirement_type": params.requirement_type},
    )
    return RequirementListResponse(
        requirements=[requirement_out(row) for row in matched],
        total=len(rows),
        matched=len(matched),
        state=list_state(len(rows), len(matched)),
    )


def get_requirement_by_id(store: DataStore, requirement_id: UUID) -> RequirementOut:
    row = fetch_one(store, "requirements", {"id": requirement_id})
    if row is None:
        not_found_response("Requirement", LIST_URL, requirement_id)
    return requirement_out(row)


def create_requirement(store: DataStore, payload: RequirementCreate) -> RequirementOut:
    row = store.insert("requirements", _requirement_values(payload))
    logger.info("Logged requirement %s from %s", row["id"], payload.customer_name)
    return requirement_out(row)


def update_requirement(store: DataStore, requirement_id: UUID, payload: RequirementUpdate) -> RequirementOut:
    rows = store.update("requirements", _requirement_values(payload), {"id": requirement_id})
    if not rows:
        not_found_response("Requirement", LIST_URL, requirement_id)
    return requirement_out(rows[0])
