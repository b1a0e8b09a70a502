# app/schemas/requirements_schemas.py
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, model_validator

from shared.core.schemas import CommonQueryParams, ListState
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ..enum.estate_enum import (
    RequirementPropertyType,
    RequirementStatus,
    RequirementType,
)


class RequirementBase(EmptyStringModel):
    customer_name: str
    customer_phone: str
    customer_email: Optional[EmailStr] = None
    profession: Optional[str] = None
    requirement_type: RequirementType
    property_type: RequirementPropertyType = RequirementPropertyType.residential
    budget_min: Optional[Decimal] = Field(default=None, ge=0)
    budget_max: Optional[Decimal] = Field(default=None, ge=0)
    preferred_location: Optional[str] = None
    area_preference: Optional[str] = None
    additional_notes: Optional[str] = None
    inquiry_date: Optional[date] = None
    follow_up_date: Optional[date] = None
    assigned_to: Optional[str] = None
    status: RequirementStatus = RequirementStatus.open

    @model_validator(mode="after")
    def check_budget(self):
        if self.budget_min is not None and self.budget_max is not None \
                and self.budget_max < self.budget_min:
            raise ValueError("budget_max must not be lower than budget_min")
        return self


class RequirementCreate(RequirementBase):
    pass


class RequirementUpdate(RequirementBase):
    pass


class RequirementRequest(CommonQueryParams):
    status: Optional[str] = None
    requirement_type: Optional[str] = None


class RequirementOut(BaseModel):
    id: UUID
    customer_name: str
    customer_phone: str
    customer_email: Optional[str] = None
    profession: Optional[str] = None
    requirement_type: str
    property_type: Optional[str] = None
    budget_min: Optional[float] = None
    budget_max: Optional[float] = None
    budget_display: Optional[str] = None
    preferred_location: Optional[str] = None
    area_preference: Optional[str] = None
    additional_notes: Optional[str] = None
    inquiry_date: Optional[date] = None
    follow_up_date: Optional[date] = None
    assigned_to: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class RequirementListResponse(BaseModel):
    requirements: List[RequirementOut]
    total: int
    matched: int
    state: ListState
