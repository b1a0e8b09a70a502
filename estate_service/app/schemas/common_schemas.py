# app/schemas/common_schemas.py
from datetime import date
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class PropertyBrief(BaseModel):
    id: UUID
    title: str
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    status: Optional[str] = None

    model_config = {"from_attributes": True}


class PersonBrief(BaseModel):
    id: UUID
    full_name: str
    phone: Optional[str] = None
    email: Optional[str] = None

    model_config = {"from_attributes": True}


class AgreementBrief(BaseModel):
    id: UUID
    status: str
    start_date: date
    end_date: date
    monthly_rent: float
    property: Optional[PropertyBrief] = None

    model_config = {"from_attributes": True}


class ContactDefaults(BaseModel):
    full_name: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""
