"""SQLAlchemy ORM models for accepted customers"""

import uuid
from sqlalchemy import Column, Date, DateTime, Integer, Text, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class CustomerRecord(Base):
    """Customer accepted by the eligibility check"""

    __tablename__ = "customer"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    address = Column(Text, nullable=False)
    date_of_birth = Column(Date, nullable=False)
    ni_number = Column(Text, nullable=False, index=True)
    credit_score = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
