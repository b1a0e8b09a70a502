# app/schemas/owners_schemas.py
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr

from shared.core.schemas import CommonQueryParams, ListState
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class OwnerBase(EmptyStringModel):
    full_name: str
    phone: str
    email: Optional[EmailStr] = None
    address: Optional[str] = None


class OwnerCreate(OwnerBase):
    pass


class OwnerUpdate(OwnerBase):
    pass


class OwnedPropertyOut(BaseModel):
    id: UUID
    title: str
    status: Optional[str] = None
    ownership_percentage: float = 100


class OwnerOut(BaseModel):
    id: UUID
    full_name: str
    phone: str
    email: Optional[str] = None
    address: Optional[str] = None
    created_at: Optional[datetime] = None
    properties: List[OwnedPropertyOut] = []
    property_count: int = 0

    model_config = {"from_attributes": True}


class OwnerRequest(CommonQueryParams):
    pass


class OwnerListResponse(BaseModel):
    owners: List[OwnerOut]
    total: int
    matched: int
    state: ListState
