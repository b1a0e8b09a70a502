# app/models/property_links.py
import uuid
from sqlalchemy import Column, DateTime, ForeignKey, Index, Numeric, Uuid
from sqlalchemy.orm import relationship
from shared.core.database import Base

from .properties import utcnow


class PropertyOwner(Base):
    __tablename__ = "property_owners"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    property_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False
    )
    owner_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("owners.id", ondelete="CASCADE"),
        nullable=False
    )
    # the screens never split ownership, the column allows it
    ownership_percentage = Column(Numeric(5, 2), default=100)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    property = relationship("Property", back_populates="property_owners")
    owner = relationship("Owner", back_populates="property_owners")

    __table_args__ = (
        Index("ix_property_owners_property", "property_id"),
        {"extend_existing": True},
    )


class PropertyBroker(Base):
    __tablename__ = "property_brokers"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    property_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False
    )
    broker_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("brokers.id", ondelete="CASCADE"),
        nullable=False
    )
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    property = relationship("Property", back_populates="property_brokers")
    broker = relationship("Broker", back_populates="property_brokers")

    __table_args__ = (
        Index("ix_property_brokers_property", "property_id"),
        {"extend_existing": True},
    )
