# app/schemas/tenants_schemas.py
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr

from shared.core.schemas import CommonQueryParams, ListState
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from .common_schemas import AgreementBrief


class TenantBase(EmptyStringModel):
    full_name: str
    phone: str
    email: Optional[EmailStr] = None
    address: Optional[str] = None
    id_number: Optional[str] = None


class TenantCreate(TenantBase):
    pass


class TenantUpdate(TenantBase):
    pass


class TenantRequest(CommonQueryParams):
    pass


class TenantOut(BaseModel):
    id: UUID
    full_name: str
    phone: str
    email: Optional[str] = None
    address: Optional[str] = None
    id_number: Optional[str] = None
    created_at: Optional[datetime] = None
    rent_agreements: List[AgreementBrief] = []
    active_agreements: int = 0
    total_agreements: int = 0

    model_config = {"from_attributes": True}


class TenantListResponse(BaseModel):
    tenants: List[TenantOut]
    total: int
    matched: int
    state: ListState
