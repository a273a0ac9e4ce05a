"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from eligibility_gateway.domain.ports import CreditScoringService, CustomerRepository
from eligibility_gateway.infrastructure.clients.credit_bureau import HttpCreditScoringService
from eligibility_gateway.infrastructure.database.repositories import SqlCustomerRepository
from eligibility_gateway.infrastructure.database.session import get_db


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_credit_scoring_service() -> CreditScoringService:
    """Provide credit bureau client instance"""
    return HttpCreditScoringService()


def get_customer_repository(db: Session = Depends(get_db)) -> CustomerRepository:
    """Provide customer storage bound to the request's session"""
    return SqlCustomerRepository(db)
