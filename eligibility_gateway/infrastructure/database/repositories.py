"""Data access layer for customer entities"""

import uuid
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from eligibility_gateway.infrastructure.database.models import CustomerRecord
from eligibility_gateway.domain.exceptions import CustomerStorageError
from eligibility_gateway.domain.models import Customer
from eligibility_gateway.domain.ports import CustomerRepository


class SqlCustomerRepository(CustomerRepository):
    """Repository for accepted customers"""

    def __init__(self, db: Session):
        self.db = db

    def save(self, customer: Customer) -> None:
        """Persist customer to database (caller commits)"""
        db_customer = CustomerRecord(
            id=customer.customer_id,
            name=customer.name,
            address=customer.address,
            date_of_birth=customer.date_of_birth,
            ni_number=customer.ni_number,
            credit_score=customer.credit_score,
        )
        try:
            self.db.add(db_customer)
            self.db.flush()  # Surface constraint errors without committing
        except SQLAlchemyError as e:
            raise CustomerStorageError(f"Could not store customer {customer.customer_id}: {e}") from e

    def get_by_id(self, customer_id: uuid.UUID) -> Optional[CustomerRecord]:
        """Fetch a single customer"""
        return (
            self.db.query(CustomerRecord)
            .filter(CustomerRecord.id == customer_id)
            .first()
        )

    def list_by_ni_number(self, ni_number: str, limit: int = 20) -> List[CustomerRecord]:
        """Fetch customers stored under an NI number, newest first"""
        return (
            self.db.query(CustomerRecord)
            .filter(CustomerRecord.ni_number == ni_number)
            .order_by(CustomerRecord.created_at.desc())
            .limit(limit)
            .all()
        )
