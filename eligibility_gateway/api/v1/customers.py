"""GET /v1/customers - Fetch accepted customers"""

import uuid
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from eligibility_gateway.api.v1.schemas import CustomerSchema, CustomerListResponse
from eligibility_gateway.infrastructure.database.session import get_db
from eligibility_gateway.infrastructure.database.models import CustomerRecord
from eligibility_gateway.infrastructure.database.repositories import SqlCustomerRepository

router = APIRouter()


def _to_schema(record: CustomerRecord) -> CustomerSchema:
    return CustomerSchema(
        customer_id=str(record.id),
        name=record.name,
        address=record.address,
        date_of_birth=record.date_of_birth,
        ni_number=record.ni_number,
        credit_score=record.credit_score,
        created_at=record.created_at.isoformat(),
    )


@router.get("/customers", response_model=CustomerListResponse)
def list_customers(
    ni_number: str = Query(..., min_length=1, description="National Insurance number"),
    db: Session = Depends(get_db),
):
    """Customers accepted under an NI number, newest first"""
    customer_repo = SqlCustomerRepository(db)
    records = customer_repo.list_by_ni_number(ni_number, limit=20)

    return CustomerListResponse(
        ni_number=ni_number,
        customers=[_to_schema(r) for r in records],
    )


@router.get("/customers/{customer_id}", response_model=CustomerSchema)
def get_customer(customer_id: str, db: Session = Depends(get_db)):
    """
    Retrieve a stored customer.

    Returns:
        Customer details including the credit score at acceptance
    """
    try:
        customer_uuid = uuid.UUID(customer_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid customer ID format")

    customer_repo = SqlCustomerRepository(db)
    record = customer_repo.get_by_id(customer_uuid)

    if not record:
        raise HTTPException(status_code=404, detail="Customer not found")

    return _to_schema(record)
