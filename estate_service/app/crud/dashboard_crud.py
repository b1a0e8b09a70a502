# app/crud/dashboard_crud.py
import logging
from datetime import date
from typing import Callable, List, Optional, TypeVar

from shared.core.config import settings
from shared.core.store import DataStore, DataStoreError, Row
from shared.helpers.currency import format_pkr

from ..enum.estate_enum import AgreementStatus, ExpiryUrgency
from ..schemas.dashboard_schemas import (
    DashboardOverview,
    DashboardStats,
    RecentPayment,
    RecentProperty,
    UpcomingExpiration,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

CRITICAL_DAYS = 15
WARNING_DAYS = 30


def _widget(name: str, read: Callable[[], T], fallback: T) -> T:
    try:
        return read()
    except DataStoreError as exc:
        logger.error("Dashboard widget %s unavailable: %s", name, exc.message)
        return fallback


def expiry_urgency(days_remaining: int) -> ExpiryUrgency:
    if days_remaining < CRITICAL_DAYS:
        return ExpiryUrgency.critical
    if days_remaining < WARNING_DAYS:
        return ExpiryUrgency.warning
    return ExpiryUrgency.normal


def get_dashboard_stats(store: DataStore) -> DashboardStats:
    return DashboardStats(
        total_properties=_widget("total_properties", lambda: store.count("properties"), 0),
        total_tenants=_widget("total_tenants", lambda: store.count("tenants"), 0),
        total_owners=_widget("total_owners", lambda: store.count("owners"), 0),
        active_agreements=_widget(
            "active_agreements",
            lambda: store.count("rent_agreements", {"status": AgreementStatus.active.value}),
            0,
        ),
    )


def get_recent_properties(store: DataStore, limit: int) -> List[RecentProperty]:
    rows = store.select("properties", order_by="created_at", descending=True, limit=limit)
    return [
        RecentProperty.model_validate({**row, "price_display": format_pkr(row["price"])})
        for row in rows
    ]


def get_recent_payments(store: DataStore, limit: int) -> List[RecentPayment]:
    rows = store.select(
        "payments",
        embed=["rent_agreement.property", "rent_agreement.tenant"],
        order_by="payment_date",
        descending=True,
        limit=limit,
    )
    result = []
    for row in rows:
        agreement: Row = row.get("rent_agreement") or {}
        result.append(RecentPayment.model_validate({
            **row,
            "amount_display": format_pkr(row["amount"]),
            "property_title": (agreement.get("property") or {}).get("title"),
            "tenant_name": (agreement.get("tenant") or {}).get("full_name"),
        }))
    return result


def get_upcoming_expirations(store: DataStore, limit: int, today: date) -> List[UpcomingExpiration]:
    rows = store.select(
        "rent_agreements",
        embed=["property", "tenant"],
        order_by="end_date",
        limit=limit,
        gte={"end_date": today},
    )

    result = []
    for row in rows:
        days_remaining = (row["end_date"] - today).days
        result.append(UpcomingExpiration(
            id=row["id"],
            property_title=(row.get("property") or {}).get("title"),
            tenant_name=(row.get("tenant") or {}).get("full_name"),
            end_date=row["end_date"],
            days_remaining=days_remaining,
            urgency=expiry_urgency(days_remaining).value,
            monthly_rent_display=format_pkr(row["monthly_rent"]),
        ))
    return result


def get_dashboard_overview(store: DataStore, today: Optional[date] = None) -> DashboardOverview:
    today = today or date.today()
    return DashboardOverview(
        stats=get_dashboard_stats(store),
        recent_properties=_widget(
            "recent_properties",
            lambda: get_recent_properties(store, settings.RECENT_LIMIT),
            [],
        ),
        recent_payments=_widget(
            "recent_payments",
            lambda: get_recent_payments(store, settings.RECENT_LIMIT),
            [],
        ),
        upcoming_expirations=_widget(
            "upcoming_expirations",
            lambda: get_upcoming_expirations(store, settings.EXPIRY_LOOKAHEAD_LIMIT, today),
            [],
        ),
    )
