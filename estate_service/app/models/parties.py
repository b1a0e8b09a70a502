# app/models/parties.py
import uuid
from sqlalchemy import Column, DateTime, String, Text, Uuid
from sqlalchemy.orm import relationship
from shared.core.database import Base

from .properties import utcnow


class Owner(Base):
    __tablename__ = "owners"
    __table_args__ = {'extend_existing': True}

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    full_name = Column(String(255), nullable=False)
    phone = Column(String(32), nullable=False)
    email = Column(String(255))
    address = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    property_owners = relationship(
        "PropertyOwner", back_populates="owner", cascade="all, delete")


class Broker(Base):
    __tablename__ = "brokers"
    __table_args__ = {'extend_existing': True}

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    full_name = Column(String(255), nullable=False)
    phone = Column(String(32), nullable=False)
    email = Column(String(255))
    agency_name = Column(String(255))
    agency_address = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    property_brokers = relationship(
        "PropertyBroker", back_populates="broker", cascade="all, delete")


class Tenant(Base):
    __tablename__ = "tenants"
    __table_args__ = {'extend_existing': True}

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    full_name = Column(String(255), nullable=False)
    phone = Column(String(32), nullable=False)
    email = Column(String(255))
    address = Column(Text)
    id_number = Column(String(64))
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    rent_agreements = relationship("RentAgreement", back_populates="tenant")
