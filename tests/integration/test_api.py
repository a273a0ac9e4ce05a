"""Integration tests for API endpoints"""

import uuid
from fastapi import Depends
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session
from eligibility_gateway.api.dependencies import get_customer_repository
from eligibility_gateway.domain.exceptions import CustomerStorageError
from eligibility_gateway.domain.models import Customer
from eligibility_gateway.infrastructure.database.repositories import SqlCustomerRepository
from eligibility_gateway.infrastructure.database.models import CustomerRecord
from eligibility_gateway.infrastructure.database.session import get_db
from tests.fakes import years_ago


def applicant(**overrides) -> dict:
    body = {
        "name": "Ada Lovelace",
        "address": "12 St James's Square, London",
        "date_of_birth": years_ago(30).isoformat(),
        "ni_number": "QQ123456A",
    }
    body.update(overrides)
    return body


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "eligibility_decision_total" in response.text


def test_request_id_header(client: TestClient):
    response = client.get("/health")
    assert response.headers["X-Request-ID"]

    response = client.get("/health", headers={"X-Request-ID": "trace-123"})
    assert response.headers["X-Request-ID"] == "trace-123"


def test_eligibility_accepted_and_stored(client: TestClient, db):
    """Score 501 is accepted and the customer persisted once"""
    response = client.post("/v1/eligibility", json=applicant(ni_number="QQ123456B"))

    assert response.status_code == 200
    data = response.json()
    assert data["accepted"] is True
    assert data["credit_score"] == 501
    assert data["errors"] == []
    assert data["customer_id"] is not None

    records = db.query(CustomerRecord).all()
    assert len(records) == 1
    assert str(records[0].id) == data["customer_id"]
    assert records[0].credit_score == 501


def test_eligibility_score_too_low(client: TestClient, db):
    """Score of 500 is declined with one error and nothing stored"""
    response = client.post("/v1/eligibility", json=applicant(ni_number="QQ123456C"))

    assert response.status_code == 200
    data = response.json()
    assert data["accepted"] is False
    assert data["credit_score"] == 500
    assert data["errors"] == ["Credit score is too low, sorry!"]
    assert data["customer_id"] is None
    assert db.query(CustomerRecord).count() == 0


def test_eligibility_empty_name(client: TestClient, db):
    response = client.post("/v1/eligibility", json=applicant(name=""))

    assert response.status_code == 200
    data = response.json()
    assert data["accepted"] is False
    assert data["errors"] == ["Name cannot be empty"]
    assert data["credit_score"] == 0
    assert db.query(CustomerRecord).count() == 0


def test_eligibility_missing_fields_default_to_empty(client: TestClient):
    response = client.post("/v1/eligibility", json={"date_of_birth": years_ago(30).isoformat()})

    assert response.status_code == 200
    assert response.json()["errors"] == [
        "Name cannot be empty",
        "Address cannot be empty",
        "National Insurance number cannot be empty",
    ]


def test_eligibility_underage(client: TestClient):
    response = client.post("/v1/eligibility", json=applicant(date_of_birth=years_ago(17).isoformat()))

    assert response.status_code == 200
    data = response.json()
    assert data["accepted"] is False
    assert data["errors"] == ["You must be at least 18 years old to apply"]


def test_eligibility_echoes_input(client: TestClient):
    body = applicant()
    data = client.post("/v1/eligibility", json=body).json()

    for field in ("name", "address", "date_of_birth", "ni_number"):
        assert data[field] == body[field]


def test_eligibility_invalid_date(client: TestClient):
    response = client.post("/v1/eligibility", json=applicant(date_of_birth="15/06/1990"))
    assert response.status_code == 422


def test_eligibility_bureau_unavailable(client: TestClient, db, bureau_scores):
    """Bureau outage maps to 503"""
    bureau_scores["QQ000000Y"] = None
    response = client.post("/v1/eligibility", json=applicant(ni_number="QQ000000Y"))

    assert response.status_code == 503
    assert response.json()["detail"] == "Credit bureau unavailable"
    assert db.query(CustomerRecord).count() == 0


def test_get_customer_after_acceptance(client: TestClient):
    customer_id = client.post("/v1/eligibility", json=applicant()).json()["customer_id"]

    response = client.get(f"/v1/customers/{customer_id}")

    assert response.status_code == 200
    data = response.json()
    assert data["customer_id"] == customer_id
    assert data["credit_score"] == 742
    assert data["date_of_birth"] == applicant()["date_of_birth"]


def test_get_customer_invalid_id(client: TestClient):
    response = client.get("/v1/customers/not-a-uuid")
    assert response.status_code == 400


def test_get_customer_not_found(client: TestClient):
    response = client.get(f"/v1/customers/{uuid.uuid4()}")
    assert response.status_code == 404


def test_list_customers_by_ni_number(client: TestClient, bureau_scores):
    bureau_scores["QQ999999X"] = 800
    client.post("/v1/eligibility", json=applicant(ni_number="QQ999999X"))
    client.post("/v1/eligibility", json=applicant(ni_number="QQ999999X", name="Ada King"))
    client.post("/v1/eligibility", json=applicant())

    response = client.get("/v1/customers", params={"ni_number": "QQ999999X"})

    assert response.status_code == 200
    data = response.json()
    assert data["ni_number"] == "QQ999999X"
    assert {c["name"] for c in data["customers"]} == {"Ada Lovelace", "Ada King"}


def test_list_customers_requires_ni_number(client: TestClient):
    assert client.get("/v1/customers").status_code == 422


def test_eligibility_unknown_applicant(client: TestClient, db):
    """Bureau has no record: 404, not an outage"""
    response = client.post("/v1/eligibility", json=applicant(ni_number="QQ000000Z"))

    assert response.status_code == 404
    assert response.json()["detail"] == "Applicant not found at credit bureau"
    assert db.query(CustomerRecord).count() == 0


def test_eligibility_storage_failure_rolls_back(client: TestClient, db):
    """Storage error after a flushed insert gives 500 and leaves no row"""

    class FailingRepository(SqlCustomerRepository):
        def save(self, customer: Customer) -> None:
            super().save(customer)
            raise CustomerStorageError("disk full")

    def override_get_customer_repository(session: Session = Depends(get_db)):
        return FailingRepository(session)

    client.app.dependency_overrides[get_customer_repository] = override_get_customer_repository

    response = client.post("/v1/eligibility", json=applicant())

    assert response.status_code == 500
    assert response.json()["detail"] == "Could not store customer"
    assert db.query(CustomerRecord).count() == 0


def test_eligibility_strips_ni_number(client: TestClient, db):
    """Padded NI number scores and stores under the trimmed key"""
    response = client.post("/v1/eligibility", json=applicant(ni_number="  QQ123456A  "))

    assert response.status_code == 200
    assert response.json()["accepted"] is True
    assert db.query(CustomerRecord).one().ni_number == "QQ123456A"
