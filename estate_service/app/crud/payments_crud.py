# app/crud/payments_crud.py
import logging
from datetime import date
from typing import Optional
from uuid import UUID

from shared.core.schemas import Lookup
from shared.core.store import DataStore, Row
from shared.helpers.currency import format_pkr
from shared.helpers.json_response_helper import not_found_response
from shared.helpers.list_filter import filter_rows, list_state

from ..enum.estate_enum import PaymentMethod, PaymentStatus, PaymentType
from ..schemas.payments_schemas import (
    PaymentCreate,
    PaymentDefaults,
    PaymentFormOptions,
    PaymentListResponse,
    PaymentOut,
    PaymentRequest,
)
from .common_crud import enum_lookup, fetch_one, fetch_rows

logger = logging.getLogger(__name__)

LIST_URL = "/api/payments/all"
PAYMENT_EMBED = ["rent_agreement.property", "rent_agreement.tenant"]


def _agreement_field(row: Row, relation: str, field: str) -> Optional[str]:
    agreement = row.get("rent_agreement") or {}
    related = agreement.get(relation) or {}
    return related.get(field)


def payment_out(row: Row) -> PaymentOut:
    return PaymentOut.model_validate({
        **row,
        "amount_display": format_pkr(row.get("amount")),
        "property_title": _agreement_field(row, "property", "title"),
        "tenant_name": _agreement_field(row, "tenant", "full_name"),
    })


def agreement_label(agreement: Row) -> str:
    title = (agreement.get("property") or {}).get("title") or "Unknown property"
    tenant = (agreement.get("tenant") or {}).get("full_name") or "Unknown tenant"
    return f"{title} - {tenant} ({format_pkr(agreement.get('monthly_rent'))})"


def get_payments(store: DataStore, params: PaymentRequest) -> PaymentListResponse:
    rows = fetch_rows(store, "payments", embed=PAYMENT_EMBED,
                      order_by="payment_date", descending=True)

    matched = filter_rows(
        rows,
        search=params.search,
        fields=(
            lambda row: _agreement_field(row, "tenant", "full_name"),
            lambda row: _agreement_field(row, "property", "title"),
            "reference_number",
        ),
        choices={"status": params.status},
    )

    return PaymentListResponse(
        payments=[payment_out(row) for row in matched],
        total=len(rows),
        matched=len(matched),
        state=list_state(len(rows), len(matched)),
    )


def get_payment_by_id(store: DataStore, payment_id: UUID) -> PaymentOut:
    row = fetch_one(store, "payments", {"id": payment_id}, embed=PAYMENT_EMBED)
    if row is None:
        not_found_response("Payment", LIST_URL, payment_id)
    return payment_out(row)


def create_payment(store: DataStore, payload: PaymentCreate) -> PaymentOut:
    row = store.insert("payments", payload.model_dump())
    logger.info("Recorded payment %s against agreement %s",
                row["id"], payload.rent_agreement_id)
    return get_payment_by_id(store, row["id"])


def get_payment_form_options(store: DataStore, rent_agreement_id: Optional[UUID] = None) -> PaymentFormOptions:
    agreements = fetch_rows(store, "rent_agreements", embed=["property", "tenant"],
                            order_by="created_at", descending=True)

    amount = None
    if rent_agreement_id:
        selected = next(
            (a for a in agreements if str(a["id"]) == str(rent_agreement_id)), None)
        if selected is None:
            rent_agreement_id = None
        else:
            amount = selected["monthly_rent"]

    return PaymentFormOptions(
        agreements=[Lookup(id=a["id"], name=agreement_label(a)) for a in agreements],
        methods=[Lookup(id=m.value, name=m.value) for m in PaymentMethod],
        types=enum_lookup(PaymentType),
        statuses=enum_lookup(PaymentStatus),
        defaults=PaymentDefaults(
            rent_agreement_id=rent_agreement_id,
            amount=amount,
            payment_date=date.today(),
            payment_method=PaymentMethod.online_transfer.value,
            payment_type=PaymentType.rent.value,
            status=PaymentStatus.completed.value,
        ),
    )
