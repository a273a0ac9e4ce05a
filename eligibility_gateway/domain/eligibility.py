"""Eligibility use case - validate applicant, score, and store if accepted"""

from datetime import date
from eligibility_gateway.domain.models import Customer, EligibilityRequest, EligibilityResponse
from eligibility_gateway.domain.ports import CreditScoringService, CustomerRepository

NAME_EMPTY = "Name cannot be empty"
ADDRESS_EMPTY = "Address cannot be empty"
NI_NUMBER_EMPTY = "National Insurance number cannot be empty"
UNDERAGE = "You must be at least {minimum_age} years old to apply"
CREDIT_SCORE_TOO_LOW = "Credit score is too low, sorry!"


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class EligibilityChecker:
    """
    Decides whether a prospective customer is eligible for a loan.

    Collaborators are injected so the rules stay independent of the
    credit bureau and storage technology behind them.
    """

    def __init__(
        self,
        scoring_service: CreditScoringService,
        customer_repository: CustomerRepository,
        minimum_age: int = 18,
        minimum_credit_score: int = 500,
    ):
        self.scoring_service = scoring_service
        self.customer_repository = customer_repository
        self.minimum_age = minimum_age
        self.minimum_credit_score = minimum_credit_score

    def execute(self, request: EligibilityRequest, today: date | None = None) -> EligibilityResponse:
        """
        Run the eligibility check.

        Flow:
        1. Field presence checks (name, address, NI number), all reported
        2. Age check against the candidate customer
        3. Only if no errors so far: fetch credit score
        4. Score above threshold: store customer and accept

        Validation problems are returned as messages on the response.
        Surrounding whitespace is stripped before scoring and storage.
        Collaborator failures (CreditScoringError, CustomerStorageError)
        propagate to the caller.
        """
        response = EligibilityResponse.from_request(request)

        if _is_blank(request.name):
            response.add_error(NAME_EMPTY)
        if _is_blank(request.address):
            response.add_error(ADDRESS_EMPTY)
        if _is_blank(request.ni_number):
            response.add_error(NI_NUMBER_EMPTY)

        customer = Customer(
            name=(request.name or "").strip(),
            address=(request.address or "").strip(),
            date_of_birth=request.date_of_birth,
            ni_number=(request.ni_number or "").strip(),
        )

        if customer.age(on=today) < self.minimum_age:
            response.add_error(UNDERAGE.format(minimum_age=self.minimum_age))

        if response.has_errors:
            return response

        score = self.scoring_service.get_credit_score(customer.ni_number)
        response.credit_score = score
        response.scored = True

        if score > self.minimum_credit_score:
            customer.update_credit_score(score)
            self.customer_repository.save(customer)
            response.accepted = True
            response.customer_id = customer.customer_id
        else:
            response.add_error(CREDIT_SCORE_TOO_LOW)

        return response
