# app/schemas/rent_agreements_schemas.py
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from shared.core.schemas import CommonQueryParams, ListState, Lookup
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ..enum.estate_enum import AgreementStatus
from .common_schemas import PersonBrief, PropertyBrief


class RentAgreementBase(EmptyStringModel):
    property_id: UUID
    tenant_id: UUID
    owner_id: Optional[UUID] = None
    start_date: date
    end_date: date
    monthly_rent: Decimal = Field(gt=0)
    security_deposit: Optional[Decimal] = Field(default=None, ge=0)
    terms_conditions: Optional[str] = None
    status: AgreementStatus = AgreementStatus.active

    @model_validator(mode="after")
    def check_term(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date")
        return self


class RentAgreementCreate(RentAgreementBase):
    pass


class RentAgreementUpdate(RentAgreementBase):
    pass


class RentAgreementRequest(CommonQueryParams):
    status: Optional[str] = None


class AgreementPaymentOut(BaseModel):
    id: UUID
    amount: float
    amount_display: str
    payment_date: date
    payment_method: str
    status: str


class RentAgreementOut(BaseModel):
    id: UUID
    property_id: UUID
    tenant_id: UUID
    owner_id: Optional[UUID] = None
    start_date: date
    end_date: date
    monthly_rent: float
    monthly_rent_display: str
    security_deposit: float = 0
    terms_conditions: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None
    property: Optional[PropertyBrief] = None
    tenant: Optional[PersonBrief] = None
    owner: Optional[PersonBrief] = None
    payments: List[AgreementPaymentOut] = []

    model_config = {"from_attributes": True}


class RentAgreementListResponse(BaseModel):
    rent_agreements: List[RentAgreementOut]
    total: int
    matched: int
    state: ListState


class RentAgreementFormOptions(BaseModel):
    properties: List[Lookup]
    tenants: List[Lookup]
    owners: List[Lookup]
    statuses: List[Lookup]


class PropertyOwnerLookup(BaseModel):
    property_id: UUID
    owner: Optional[Lookup] = None


class ExpireLapsedResult(BaseModel):
    expired: int
    agreement_ids: List[UUID] = []
