"""Collaborator interfaces consumed by the eligibility use case"""

from abc import ABC, abstractmethod
from eligibility_gateway.domain.models import Customer


class CreditScoringService(ABC):
    """External provider of credit scores keyed by NI number"""

    @abstractmethod
    def get_credit_score(self, ni_number: str) -> int:
        """
        Fetch the applicant's credit score.

        Raises:
            CreditScoringError: If the provider cannot return a score
        """


class CustomerRepository(ABC):
    """Storage for accepted customers"""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """
        Persist a customer record.

        Raises:
            CustomerStorageError: If the record cannot be stored
        """
