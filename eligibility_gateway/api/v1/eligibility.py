"""POST /v1/eligibility - loan eligibility check endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from eligibility_gateway.api.v1.schemas import EligibilityRequestSchema, EligibilityResponseSchema
from eligibility_gateway.api.dependencies import get_credit_scoring_service, get_customer_repository, get_request_id
from eligibility_gateway.config import settings
from eligibility_gateway.infrastructure.database.session import get_db
from eligibility_gateway.domain.eligibility import EligibilityChecker
from eligibility_gateway.domain.exceptions import ApplicantNotFoundError, CreditScoringError, CustomerStorageError
from eligibility_gateway.domain.models import EligibilityRequest
from eligibility_gateway.domain.ports import CreditScoringService, CustomerRepository
from eligibility_gateway.infrastructure.observability.metrics import record_eligibility, credit_bureau_failures_counter
from eligibility_gateway.infrastructure.observability.logging import log_eligibility_decision

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/eligibility", response_model=EligibilityResponseSchema)
def check_eligibility(
    request_body: EligibilityRequestSchema,
    request: Request,
    db: Session = Depends(get_db),
    scoring_service: CreditScoringService = Depends(get_credit_scoring_service),
    customer_repository: CustomerRepository = Depends(get_customer_repository),
):
    """
    Check whether an applicant is eligible for a loan.

    Flow:
    1. Validate name, address, NI number and age
    2. Fetch credit score from the bureau (only if valid)
    3. Store the customer if the score clears the threshold
    4. Commit and return the outcome with any validation errors
    """
    start_time = time.time()
    request_id = get_request_id(request)

    checker = EligibilityChecker(
        scoring_service=scoring_service,
        customer_repository=customer_repository,
        minimum_age=settings.minimum_age,
        minimum_credit_score=settings.minimum_credit_score,
    )

    try:
        result = checker.execute(
            EligibilityRequest(
                name=request_body.name,
                address=request_body.address,
                date_of_birth=request_body.date_of_birth,
                ni_number=request_body.ni_number,
            )
        )
        db.commit()

    except ApplicantNotFoundError as e:
        db.rollback()
        logger.warning(f"Applicant not found: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail="Applicant not found at credit bureau")

    except CreditScoringError as e:
        credit_bureau_failures_counter.inc()
        db.rollback()
        logger.error(f"Credit bureau error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Credit bureau unavailable")

    except CustomerStorageError as e:
        db.rollback()
        logger.error(f"Customer storage error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Could not store customer")

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_eligibility(result)
    log_eligibility_decision(
        request_id,
        result.ni_number,
        result.accepted,
        result.credit_score,
        len(result.errors),
        duration_ms,
    )

    return EligibilityResponseSchema(
        name=result.name,
        address=result.address,
        date_of_birth=result.date_of_birth,
        ni_number=result.ni_number,
        credit_score=result.credit_score,
        accepted=result.accepted,
        customer_id=str(result.customer_id) if result.customer_id else None,
        errors=result.errors,
    )
