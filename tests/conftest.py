"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Dict, Generator, Optional
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from eligibility_gateway.api.main import create_app
from eligibility_gateway.api.dependencies import get_credit_scoring_service
from eligibility_gateway.domain.exceptions import ApplicantNotFoundError, CreditScoringError
from eligibility_gateway.domain.models import EligibilityRequest
from eligibility_gateway.domain.ports import CreditScoringService
from eligibility_gateway.infrastructure.database.models import Base
from eligibility_gateway.infrastructure.database.session import get_db
from tests.fakes import FakeScoringService, InMemoryCustomerRepository


# Test database: one shared in-memory connection
TEST_DATABASE_URL = "sqlite://"
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def scoring_service() -> FakeScoringService:
    return FakeScoringService(score=700)


@pytest.fixture
def customer_repository() -> InMemoryCustomerRepository:
    return InMemoryCustomerRepository()


@pytest.fixture
def valid_request() -> EligibilityRequest:
    """Applicant who passes every field and age check on TODAY"""
    return EligibilityRequest(
        name="Ada Lovelace",
        address="12 St James's Square, London",
        date_of_birth=date(1990, 3, 1),
        ni_number="QQ123456A",
    )


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def bureau_scores() -> Dict[str, Optional[int]]:
    """Scores served by the fake bureau behind the API; None simulates an outage"""
    return {
        "QQ123456A": 742,
        "QQ123456B": 501,
        "QQ123456C": 500,
    }


@pytest.fixture
def client(db: Session, bureau_scores: Dict[str, Optional[int]]) -> TestClient:
    """Create FastAPI test client with test database and fake bureau"""
    app = create_app()

    class DictScoringService(CreditScoringService):
        def get_credit_score(self, ni_number: str) -> int:
            if ni_number not in bureau_scores:
                raise ApplicantNotFoundError("Credit bureau error: 404 applicant not found")
            if bureau_scores[ni_number] is None:
                raise CreditScoringError("Credit bureau timeout after 5.0s")
            return bureau_scores[ni_number]

    def override_get_db():
        try:
            yield db
        finally:
            pass

    def override_get_credit_scoring_service():
        return DictScoringService()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_credit_scoring_service] = override_get_credit_scoring_service
    return TestClient(app)
