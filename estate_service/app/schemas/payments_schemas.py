# app/schemas/payments_schemas.py
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from shared.core.schemas import CommonQueryParams, ListState, Lookup
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ..enum.estate_enum import PaymentMethod, PaymentStatus, PaymentType


class PaymentCreate(EmptyStringModel):
    rent_agreement_id: UUID
    payment_type: PaymentType = PaymentType.rent
    amount: Decimal = Field(gt=0)
    payment_date: date
    payment_method: PaymentMethod = PaymentMethod.online_transfer
    reference_number: Optional[str] = None
    notes: Optional[str] = None
    status: PaymentStatus = PaymentStatus.completed


class PaymentRequest(CommonQueryParams):
    status: Optional[str] = None


class PaymentOut(BaseModel):
    id: UUID
    rent_agreement_id: UUID
    payment_type: str
    amount: float
    amount_display: str
    payment_date: date
    payment_method: str
    reference_number: Optional[str] = None
    notes: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None
    property_title: Optional[str] = None
    tenant_name: Optional[str] = None

    model_config = {"from_attributes": True}


class PaymentListResponse(BaseModel):
    payments: List[PaymentOut]
    total: int
    matched: int
    state: ListState


class PaymentDefaults(BaseModel):
    rent_agreement_id: Optional[UUID] = None
    amount: Optional[float] = None
    payment_date: date
    payment_method: str
    payment_type: str
    status: str


class PaymentFormOptions(BaseModel):
    agreements: List[Lookup]
    methods: List[Lookup]
    types: List[Lookup]
    statuses: List[Lookup]
    defaults: PaymentDefaults
