"""Credit scoring and loan amount search - core business logic for loan decisions"""

from inbank_gateway.domain.constants import (
    APPROVAL_THRESHOLD,
    LOAN_AMOUNT_STEP,
    MAXIMUM_LOAN_AMOUNT,
    MINIMUM_LOAN_AMOUNT,
)


def calculate_credit_score(credit_modifier: int, loan_amount: int, loan_period: int) -> float:
    """
    Credit score = credit_modifier / loan_amount * loan_period.

    Strictly decreasing in loan_amount, strictly increasing in loan_period
    and credit_modifier. The amount search relies on this.
    """
    return credit_modifier / loan_amount * loan_period


def is_approvable(credit_score: float) -> bool:
    return credit_score >= APPROVAL_THRESHOLD


def highest_valid_loan_amount(credit_modifier: int, loan_period: int, loan_amount: int) -> int:
    """
    Search for the largest approvable amount at a fixed period, starting from loan_amount.

    - Score below threshold: step down until approvable or the minimum amount
      is reached. The result may still be unapprovable, callers must re-check.
    - Otherwise: step up while the score stays above the threshold and the
      maximum amount is not reached. Stops on the first amount whose score is
      no longer above the threshold.

    Example:
        modifier 100, period 24, amount 5000 → 2400 (score exactly 1.0)
    """
    if not is_approvable(calculate_credit_score(credit_modifier, loan_amount, loan_period)):
        while (
            not is_approvable(calculate_credit_score(credit_modifier, loan_amount, loan_period))
            and loan_amount > MINIMUM_LOAN_AMOUNT
        ):
            loan_amount = max(loan_amount - LOAN_AMOUNT_STEP, MINIMUM_LOAN_AMOUNT)
    else:
        while (
            calculate_credit_score(credit_modifier, loan_amount, loan_period) > APPROVAL_THRESHOLD
            and loan_amount < MAXIMUM_LOAN_AMOUNT
        ):
            loan_amount = min(loan_amount + LOAN_AMOUNT_STEP, MAXIMUM_LOAN_AMOUNT)

    return loan_amount
