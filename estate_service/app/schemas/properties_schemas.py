# app/schemas/properties_schemas.py
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from shared.core.schemas import CommonQueryParams, ListState, Lookup
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ..enum.estate_enum import FurnishingStatus, PropertyStatus, PropertyType


class PropertyBase(EmptyStringModel):
    title: str
    type: PropertyType = PropertyType.residential
    address: str
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    area_sqft: int = Field(ge=0)
    price: Decimal = Field(ge=0)
    status: PropertyStatus = PropertyStatus.for_rent
    furnishing_status: FurnishingStatus = FurnishingStatus.unfurnished
    bedrooms: Optional[int] = Field(default=None, ge=0)
    bathrooms: Optional[int] = Field(default=None, ge=0)
    description: Optional[str] = None


class PropertyCreate(PropertyBase):
    # single-select on the form; stored through the join tables
    owner_id: Optional[UUID] = None
    broker_id: Optional[UUID] = None


class PropertyUpdate(PropertyCreate):
    pass


class PropertyRequest(CommonQueryParams):
    type: Optional[str] = None      # "all" | "residential" | "commercial"
    status: Optional[str] = None    # "all" | "for_rent" | ...


class PropertyOwnerOut(BaseModel):
    id: UUID
    full_name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    ownership_percentage: float = 100


class PropertyBrokerOut(BaseModel):
    id: UUID
    full_name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    agency_name: Optional[str] = None


class PropertyOut(BaseModel):
    id: UUID
    title: str
    type: str
    address: str
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    area_sqft: Optional[int] = None
    price: float
    price_display: str
    status: str
    furnishing_status: Optional[str] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    owners: List[PropertyOwnerOut] = []
    brokers: List[PropertyBrokerOut] = []

    model_config = {"from_attributes": True}


class PropertyListResponse(BaseModel):
    properties: List[PropertyOut]
    total: int
    matched: int
    state: ListState


class PropertyFormOptions(BaseModel):
    owners: List[Lookup]
    brokers: List[Lookup]
    types: List[Lookup]
    statuses: List[Lookup]
    furnishing_statuses: List[Lookup]
