"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from typing import List, Optional


class EligibilityRequestSchema(BaseModel):
    """Request body for POST /v1/eligibility"""

    # Presence is a business rule reported in the response, not a 422
    name: str = Field("", description="Applicant full name")
    address: str = Field("", description="Applicant postal address")
    date_of_birth: date = Field(..., description="ISO date of birth (YYYY-MM-DD)")
    ni_number: str = Field("", description="National Insurance number")


class EligibilityResponseSchema(BaseModel):
    """Response for POST /v1/eligibility"""

    name: str
    address: str
    date_of_birth: date
    ni_number: str
    credit_score: int
    accepted: bool
    customer_id: Optional[str] = None
    errors: List[str]


class CustomerSchema(BaseModel):
    """Stored customer"""

    customer_id: str
    name: str
    address: str
    date_of_birth: date
    ni_number: str
    credit_score: int
    created_at: str


class CustomerListResponse(BaseModel):
    """Response for GET /v1/customers"""

    ni_number: str
    customers: List[CustomerSchema]
