"""Loan model."""

from pydantic import BaseModel


def annuity_payment(principal: float, rate: float, quarters: int) -> float:
    """
    Fixed quarterly payment for an amortizing loan.

    Args:
        principal: Amount borrowed
        rate: Interest rate per quarter
        quarters: Term in quarters

    Returns:
        Quarterly payment
    """
    if rate == 0:
        return principal / quarters
    return principal * rate / (1 - (1 + rate) ** (-quarters))


class Loan(BaseModel):
    """A bank loan repaid over a fixed number of quarters.

    ``quarterly_payment`` is the annuity instalment charged as an expense every
    quarter, while ``principal_payment`` is the straight-line amount taken off
    ``remaining``. The two are computed independently.
    """

    original_amount: float
    remaining: float
    quarterly_payment: float
    principal_payment: float
    quarters_remaining: int
    interest_rate: float

    @classmethod
    def originate(cls, amount: float, quarters: int, interest_rate: float) -> "Loan":
        """Create a new loan with its payment schedule fixed up front."""
        return cls(
            original_amount=amount,
            remaining=amount,
            quarterly_payment=annuity_payment(amount, interest_rate, quarters),
            principal_payment=amount / quarters,
            quarters_remaining=quarters,
            interest_rate=interest_rate,
        )

    def amortize(self) -> bool:
        """
        Apply one quarter of scheduled principal reduction.

        Returns:
            True when the loan is paid off
        """
        self.remaining -= self.principal_payment
        self.quarters_remaining -= 1
        return self.quarters_remaining <= 0 or self.remaining <= 0
