# app/models/payments.py
import uuid
from sqlalchemy import Column, Date, DateTime, ForeignKey, Numeric, String, Text, Uuid
from sqlalchemy.orm import relationship
from shared.core.database import Base

from .properties import utcnow


class Payment(Base):
    __tablename__ = "payments"
    __table_args__ = {'extend_existing': True}

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    rent_agreement_id = Column(Uuid(as_uuid=True), ForeignKey(
        "rent_agreements.id", ondelete="CASCADE"), nullable=False)
    payment_type = Column(String(32), default="rent", nullable=False)
    amount = Column(Numeric(14, 2), nullable=False)
    payment_date = Column(Date, nullable=False)
    payment_method = Column(String(32), nullable=False)
    reference_number = Column(String(128))
    notes = Column(Text)
    status = Column(String(16), default="completed", nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    rent_agreement = relationship("RentAgreement", back_populates="payments")
