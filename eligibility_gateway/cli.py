"""Console front end: prompt for applicant details and run the eligibility check"""

import argparse
import logging
import sys
from datetime import date
from typing import Callable, List, Optional

from sqlalchemy.orm import sessionmaker

from eligibility_gateway.config import settings
from eligibility_gateway.domain.eligibility import EligibilityChecker
from eligibility_gateway.domain.exceptions import CreditScoringError, CustomerStorageError
from eligibility_gateway.domain.models import EligibilityRequest, EligibilityResponse
from eligibility_gateway.infrastructure.clients.credit_bureau import HttpCreditScoringService
from eligibility_gateway.infrastructure.database.repositories import SqlCustomerRepository
from eligibility_gateway.infrastructure.database.session import build_engine, init_db
from eligibility_gateway.infrastructure.observability.logging import setup_logging

logger = logging.getLogger(__name__)


def prompt_date(label: str, read: Optional[Callable[[str], str]] = None) -> date:
    """Ask until the answer parses as an ISO date"""
    read = read or input
    while True:
        raw = read(label).strip()
        try:
            return date.fromisoformat(raw)
        except ValueError:
            print(f"'{raw}' is not a valid date, use YYYY-MM-DD")


def prompt_request(read: Optional[Callable[[str], str]] = None) -> EligibilityRequest:
    """Collect the four applicant fields from the console"""
    read = read or input
    name = read("Name: ")
    address = read("Address: ")
    date_of_birth = prompt_date("Date of birth (YYYY-MM-DD): ", read)
    ni_number = read("National Insurance number: ")

    return EligibilityRequest(
        name=name.strip(),
        address=address.strip(),
        date_of_birth=date_of_birth,
        ni_number=ni_number.strip(),
    )


def render(response: EligibilityResponse) -> str:
    """Errors one per line, or score and outcome"""
    if not response.scored:
        return "\n".join(response.errors)

    outcome = "accepted" if response.accepted else "declined"
    lines = [f"Credit score: {response.credit_score}", f"Outcome: {outcome}"]
    lines.extend(response.errors)
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eligibility-check",
        description="Check a loan applicant's eligibility from the console",
    )
    parser.add_argument(
        "--bureau-url",
        default=settings.credit_bureau_base,
        help="Credit bureau base URL (default: %(default)s)",
    )
    parser.add_argument(
        "--database-url",
        default=settings.database_url,
        help="Customer database URL (default: %(default)s)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    # stdout carries the result; logs go to stderr
    setup_logging(settings.log_level, stream=sys.stderr)

    engine = build_engine(args.database_url)
    init_db(engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()

    checker = EligibilityChecker(
        scoring_service=HttpCreditScoringService(base_url=args.bureau_url),
        customer_repository=SqlCustomerRepository(session),
        minimum_age=settings.minimum_age,
        minimum_credit_score=settings.minimum_credit_score,
    )

    try:
        response = checker.execute(prompt_request())
        session.commit()
    except (CreditScoringError, CustomerStorageError) as e:
        session.rollback()
        logger.error(f"Eligibility check failed: {e}")
        return 2
    finally:
        session.close()

    print(render(response))
    return 0 if response.accepted else 1


if __name__ == "__main__":
    sys.exit(main())
