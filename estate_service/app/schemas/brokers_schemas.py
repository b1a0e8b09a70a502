# app/schemas/brokers_schemas.py
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr

from shared.core.schemas import CommonQueryParams, ListState
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from .common_schemas import PropertyBrief


class BrokerBase(EmptyStringModel):
    full_name: str
    phone: str
    email: Optional[EmailStr] = None
    agency_name: Optional[str] = None
    agency_address: Optional[str] = None


class BrokerCreate(BrokerBase):
    pass


class BrokerUpdate(BrokerBase):
    pass


class BrokerOut(BaseModel):
    id: UUID
    full_name: str
    phone: str
    email: Optional[str] = None
    agency_name: Optional[str] = None
    agency_address: Optional[str] = None
    created_at: Optional[datetime] = None
    properties: List[PropertyBrief] = []
    property_count: int = 0

    model_config = {"from_attributes": True}


class BrokerRequest(CommonQueryParams):
    pass


class BrokerListResponse(BaseModel):
    brokers: List[BrokerOut]
    total: int
    matched: int
    state: ListState
