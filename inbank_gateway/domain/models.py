"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from enum import Enum


class Country(str, Enum):
    """Countries with a known expected lifetime"""

    ESTONIA = "ESTONIA"
    LATVIA = "LATVIA"
    LITHUANIA = "LITHUANIA"

    @classmethod
    def from_name(cls, name: "str | Country | None") -> "Country":
        """Case-insensitive lookup, unknown or missing names fall back to Estonia"""
        if isinstance(name, Country):
            return name
        try:
            return cls((name or "").strip().upper())
        except ValueError:
            return cls.ESTONIA


class DecisionOutcome(str, Enum):
    """Every outcome a decision can end in"""

    APPROVED = "approved"
    INVALID_PERSONAL_CODE = "invalid_personal_code"
    INVALID_AGE = "invalid_age"
    INVALID_LOAN_AMOUNT = "invalid_loan_amount"
    INVALID_LOAN_PERIOD = "invalid_loan_period"
    NO_VALID_LOAN = "no_valid_loan"
    UNEXPECTED_ERROR = "unexpected_error"


@dataclass(frozen=True)
class LoanRequest:
    """Loan application as received from the caller"""

    personal_code: str
    loan_amount: int
    loan_period: int  # months
    country: Country = Country.ESTONIA


@dataclass(frozen=True)
class Decision:
    """
    Output of the decision engine.

    Either loan_amount and loan_period are both set (approved) or
    error_message is set (rejected), never both.
    """

    loan_amount: int | None
    loan_period: int | None
    error_message: str | None
    outcome: DecisionOutcome

    def __post_init__(self) -> None:
        has_loan = self.loan_amount is not None and self.loan_period is not None
        has_partial_loan = (self.loan_amount is None) != (self.loan_period is None)
        has_error = self.error_message is not None

        if has_partial_loan or has_loan == has_error:
            raise ValueError("Decision must carry either an amount and period or an error message")
        if has_loan != (self.outcome is DecisionOutcome.APPROVED):
            raise ValueError(f"Outcome {self.outcome.value} does not match decision contents")

    @property
    def approved(self) -> bool:
        return self.outcome is DecisionOutcome.APPROVED

    @classmethod
    def approve(cls, loan_amount: int, loan_period: int) -> "Decision":
        return cls(loan_amount, loan_period, None, DecisionOutcome.APPROVED)

    @classmethod
    def reject(cls, outcome: DecisionOutcome, error_message: str) -> "Decision":
        return cls(None, None, error_message, outcome)
