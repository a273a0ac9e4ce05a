"""Credit bureau HTTP client for fetching applicant credit scores"""

import httpx
from eligibility_gateway.domain.exceptions import ApplicantNotFoundError, CreditScoringError
from eligibility_gateway.domain.ports import CreditScoringService
from eligibility_gateway.config import settings


class HttpCreditScoringService(CreditScoringService):
    """Client for external credit bureau API"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url or settings.credit_bureau_base
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    def get_credit_score(self, ni_number: str) -> int:
        """
        Fetch the credit score for an NI number.

        Raises:
            ApplicantNotFoundError: If the bureau has no record (404)
            CreditScoringError: On timeout, HTTP errors, or invalid response
        """
        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = client.get(
                    f"{self.base_url}/bureau/scores",
                    params={"ni_number": ni_number},
                )
                response.raise_for_status()
                data = response.json()

                score = data["score"]
                # bool is an int subclass; reject it explicitly
                if isinstance(score, bool) or not isinstance(score, int):
                    raise TypeError(f"score must be an integer, got {score!r}")
                return score

            except httpx.TimeoutException as e:
                raise CreditScoringError(f"Credit bureau timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                if e.response.status_code == 404:
                    raise ApplicantNotFoundError("Credit bureau error: 404 applicant not found") from e
                raise CreditScoringError(f"Credit bureau error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise CreditScoringError(f"Credit bureau unreachable: {e}") from e
            except (KeyError, ValueError, TypeError) as e:
                raise CreditScoringError(f"Invalid score data from credit bureau: {e}") from e
