# app/schemas/dashboard_schemas.py
from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel


class DashboardStats(BaseModel):
    total_properties: int = 0
    total_tenants: int = 0
    total_owners: int = 0
    active_agreements: int = 0


class RecentProperty(BaseModel):
    id: UUID
    title: str
    status: str
    city: Optional[str] = None
    price: float
    price_display: str
    created_at: Optional[datetime] = None


class RecentPayment(BaseModel):
    id: UUID
    amount: float
    amount_display: str
    payment_date: date
    status: str
    property_title: Optional[str] = None
    tenant_name: Optional[str] = None


class UpcomingExpiration(BaseModel):
    id: UUID
    property_title: Optional[str] = None
    tenant_name: Optional[str] = None
    end_date: date
    days_remaining: int
    urgency: str
    monthly_rent_display: str


class DashboardOverview(BaseModel):
    stats: DashboardStats
    recent_properties: List[RecentProperty] = []
    recent_payments: List[RecentPayment] = []
    upcoming_expirations: List[UpcomingExpiration] = []
