"""Loan entity - balance management business rules"""

from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation
from typing import Dict, Type
from eligibility_gateway.domain.exceptions import OverpaymentError

DEFAULT_LATE_FEE = Decimal("10.00")


def to_amount(value, field: str) -> Decimal:
    """
    Coerce an int, str or Decimal to a finite Decimal.

    Raises:
        TypeError: For floats and other types that cannot convert exactly
        ValueError: For unparseable or non-finite values
    """
    if isinstance(value, bool) or not isinstance(value, (int, str, Decimal)):
        raise TypeError(f"{field} must be a Decimal, int or str, got {type(value).__name__}")
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise ValueError(f"{field} is not a valid amount: {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"{field} must be finite, got {amount}")
    return amount


class Loan(ABC):
    """
    Base loan record holding principal, rate, period and running balance.

    Variants subclass this and may override `late_fee` or any of the
    balance operations. Amounts are Decimals; `rate` is a percentage.
    """

    def __init__(self, principal: Decimal, rate: Decimal, period: Decimal):
        principal = to_amount(principal, "principal")
        if principal <= 0:
            raise ValueError(f"Principal must be positive, got {principal}")

        self._principal = principal
        self._rate = to_amount(rate, "rate")
        self._period = to_amount(period, "period")
        self.balance = principal

    @property
    def principal(self) -> Decimal:
        return self._principal

    @property
    def rate(self) -> Decimal:
        return self._rate

    @property
    def period(self) -> Decimal:
        return self._period

    @property
    @abstractmethod
    def late_fee(self) -> Decimal:
        """Flat charge added for a missed payment"""

    def make_payment(self, amount: Decimal) -> Decimal:
        """
        Reduce the balance by `amount` and return the new balance.

        Raises:
            OverpaymentError: If the payment exceeds the balance (balance unchanged)
            ValueError: If the amount is negative or not a valid number
            TypeError: If the amount is a float
        """
        amount = to_amount(amount, "amount")
        if amount < 0:
            raise ValueError(f"Payment amount cannot be negative, got {amount}")
        if self.balance - amount < 0:
            raise OverpaymentError(
                f"Payment of {amount} exceeds outstanding balance of {self.balance}"
            )

        self.balance -= amount
        return self.balance

    def apply_interest(self) -> Decimal:
        """
        Recalculate the balance as principal plus one period of interest.

        This is a fixed recalculation from principal, not an accrual on the
        running balance, so repeated calls give the same balance.

        Returns:
            Interest amount: new balance minus principal
        """
        new_balance = self._principal * (1 + self._rate / 100)
        self.balance = new_balance
        return new_balance - self._principal

    def charge_late_fee(self) -> Decimal:
        """Add the late fee to the balance and return the new balance"""
        self.balance += self.late_fee
        return self.balance

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(principal={self._principal}, rate={self._rate}, "
            f"period={self._period}, balance={self.balance})"
        )


class StandardLoan(Loan):
    """Loan with the default late fee and balance rules"""

    @property
    def late_fee(self) -> Decimal:
        return DEFAULT_LATE_FEE


LOAN_KINDS: Dict[str, Type[Loan]] = {
    "standard": StandardLoan,
}


def create_loan(kind: str, principal: Decimal, rate: Decimal, period: Decimal) -> Loan:
    """Build a loan variant by name"""
    try:
        loan_class = LOAN_KINDS[kind]
    except KeyError:
        raise ValueError(f"Unknown loan kind: {kind!r}") from None

    return loan_class(principal=principal, rate=rate, period=period)
