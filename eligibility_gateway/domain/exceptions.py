"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class OverpaymentError(DomainException):
    """Payment would take the loan balance below zero"""

    pass


class CreditScoringError(DomainException):
    """Credit bureau returned an error or is unavailable"""

    pass


class CustomerStorageError(DomainException):
    """Customer record could not be persisted or read"""

    pass


class ApplicantNotFoundError(CreditScoringError):
    """Credit bureau has no record for the NI number"""

    pass
