# app/models/rent_agreements.py
import uuid
from sqlalchemy import Column, Date, DateTime, ForeignKey, Numeric, String, Text, Uuid
from sqlalchemy.orm import relationship
from shared.core.database import Base

from .properties import utcnow


class RentAgreement(Base):
    __tablename__ = "rent_agreements"
    __table_args__ = {'extend_existing': True}

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    property_id = Column(Uuid(as_uuid=True), ForeignKey(
        "properties.id"), nullable=False)
    tenant_id = Column(Uuid(as_uuid=True), ForeignKey(
        "tenants.id"), nullable=False)
    owner_id = Column(Uuid(as_uuid=True), ForeignKey(
        "owners.id", ondelete="SET NULL"), nullable=True)

    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    monthly_rent = Column(Numeric(14, 2), nullable=False)
    security_deposit = Column(Numeric(14, 2), default=0)
    terms_conditions = Column(Text)
    status = Column(String(24), default="active", nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # relationships
    property = relationship("Property", back_populates="rent_agreements")
    tenant = relationship("Tenant", back_populates="rent_agreements")
    owner = relationship("Owner")
    payments = relationship(
        "Payment", back_populates="rent_agreement", cascade="all, delete")
