# app/models/requirements.py
import uuid
from datetime import date
from sqlalchemy import Column, Date, DateTime, Numeric, String, Text, Uuid
from shared.core.database import Base

from .properties import utcnow


class Requirement(Base):
    """A walk-in or phone inquiry; not linked to properties or tenants."""
    __tablename__ = "requirements"
    __table_args__ = {'extend_existing': True}

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    customer_name = Column(String(255), nullable=False)
    customer_phone = Column(String(32), nullable=False)
    customer_email = Column(String(255))
    profession = Column(String(128))
    requirement_type = Column(String(16), nullable=False)  # rent | sale | both
    property_type = Column(String(16), default="residential")
    budget_min = Column(Numeric(14, 2))
    budget_max = Column(Numeric(14, 2))
    preferred_location = Column(String(255))
    area_preference = Column(String(255))
    additional_notes = Column(Text)
    inquiry_date = Column(Date, default=date.today, nullable=False)
    follow_up_date = Column(Date)
    assigned_to = Column(String(255))
    status = Column(String(16), default="open", nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
