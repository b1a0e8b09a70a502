# app/models/properties.py
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import relationship
from shared.core.database import Base


def utcnow():
    return datetime.now(timezone.utc)


class Property(Base):
    __tablename__ = "properties"
    __table_args__ = {'extend_existing': True}

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    type = Column(String(32), default="residential", nullable=False)  # residential | commercial
    address = Column(String(255), nullable=False)
    city = Column(String(128))
    state = Column(String(128))
    zip_code = Column(String(16))
    area_sqft = Column(Integer)
    price = Column(Numeric(14, 2), nullable=False)
    status = Column(String(16), default="for_rent", nullable=False)
    furnishing_status = Column(String(32), default="unfurnished")
    bedrooms = Column(Integer)
    bathrooms = Column(Integer)
    description = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    property_owners = relationship(
        "PropertyOwner", back_populates="property", cascade="all, delete")
    property_brokers = relationship(
        "PropertyBroker", back_populates="property", cascade="all, delete")
    rent_agreements = relationship("RentAgreement", back_populates="property")
