"""Domain models - pure Python dataclasses representing business entities"""

import uuid
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional
from eligibility_gateway.utils.date_utils import calculate_age


@dataclass
class Customer:
    """Prospective borrower built from applicant-supplied contact data"""

    name: str
    address: str
    date_of_birth: date
    ni_number: str  # National Insurance number, key for credit scoring
    credit_score: int = 0
    customer_id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __setattr__(self, name, value):
        # Identifier is assigned once in __init__
        if name == "customer_id" and "customer_id" in self.__dict__:
            raise AttributeError("customer_id cannot be reassigned")
        super().__setattr__(name, value)

    def age(self, on: date | None = None) -> int:
        """Whole years since date of birth"""
        return calculate_age(self.date_of_birth, on)

    def update_credit_score(self, score: int) -> bool:
        """Set a new credit score; returns False if it matches the current one"""
        if score == self.credit_score:
            return False
        self.credit_score = score
        return True


@dataclass
class EligibilityRequest:
    """Applicant contact details, unvalidated"""

    name: str
    address: str
    date_of_birth: date
    ni_number: str


@dataclass
class EligibilityResponse:
    """Outcome of an eligibility check"""

    name: str
    address: str
    date_of_birth: date
    ni_number: str
    credit_score: int = 0
    scored: bool = False  # True once the bureau returned a score
    accepted: bool = False
    customer_id: Optional[uuid.UUID] = None
    errors: List[str] = field(default_factory=list)

    @classmethod
    def from_request(cls, request: EligibilityRequest) -> "EligibilityResponse":
        return cls(
            name=request.name,
            address=request.address,
            date_of_birth=request.date_of_birth,
            ni_number=request.ni_number,
        )

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
