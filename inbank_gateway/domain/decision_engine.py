"""Loan decision engine - approved loan amount and period for a customer

The credit modifier is derived from the last four digits of the personal ID
code and passed explicitly through the search, so every call is independent.
"""

import logging
from datetime import date
from typing import Tuple

from inbank_gateway.domain.age import is_adult, is_within_expected_lifetime
from inbank_gateway.domain.constants import (
    MAXIMUM_LOAN_AMOUNT,
    MAXIMUM_LOAN_PERIOD,
    MINIMUM_LOAN_AMOUNT,
    MINIMUM_LOAN_PERIOD,
)
from inbank_gateway.domain.exceptions import (
    DomainException,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonAgeError,
    InvalidPersonalCodeError,
    NoValidLoanError,
)
from inbank_gateway.domain.models import Country, Decision, DecisionOutcome, LoanRequest
from inbank_gateway.domain.scoring import (
    calculate_credit_score,
    highest_valid_loan_amount,
    is_approvable,
)
from inbank_gateway.domain.segments import Segment, applicant_key, resolve_segment
from inbank_gateway.utils.personal_code import get_age, is_valid_personal_code, normalize_personal_code

logger = logging.getLogger(__name__)

NO_VALID_LOAN_MESSAGE = "No valid loan found!"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"

_OUTCOMES = {
    InvalidPersonalCodeError: DecisionOutcome.INVALID_PERSONAL_CODE,
    InvalidPersonAgeError: DecisionOutcome.INVALID_AGE,
    InvalidLoanAmountError: DecisionOutcome.INVALID_LOAN_AMOUNT,
    InvalidLoanPeriodError: DecisionOutcome.INVALID_LOAN_PERIOD,
    NoValidLoanError: DecisionOutcome.NO_VALID_LOAN,
}


def verify_inputs(request: LoanRequest, today: date | None = None) -> int:
    """
    Verify that all inputs are valid according to business rules.

    Checks run in a fixed order and the first failure wins:
    personal code, adulthood, expected lifetime, amount, period.

    Returns:
        Applicant age in whole years

    Raises:
        InvalidPersonalCodeError, InvalidPersonAgeError,
        InvalidLoanAmountError, InvalidLoanPeriodError
    """
    if not is_valid_personal_code(request.personal_code):
        raise InvalidPersonalCodeError("Invalid personal ID code!")

    age = get_age(request.personal_code, today)

    if not is_adult(age):
        raise InvalidPersonAgeError("Loans are approved for adults only!")
    if not is_within_expected_lifetime(age, request.loan_period, request.country):
        raise InvalidPersonAgeError("Loan for selected period is not approved at your age!")
    if not MINIMUM_LOAN_AMOUNT <= request.loan_amount <= MAXIMUM_LOAN_AMOUNT:
        raise InvalidLoanAmountError("Invalid loan amount!")
    if not MINIMUM_LOAN_PERIOD <= request.loan_period <= MAXIMUM_LOAN_PERIOD:
        raise InvalidLoanPeriodError("Invalid loan period!")

    return age


def find_best_loan(
    credit_modifier: int,
    loan_amount: int,
    loan_period: int,
    age: int,
    country: Country,
) -> Tuple[int, int]:
    """
    Search amount first, then period, for an approvable loan.

    If no approvable amount exists at the requested period, the period is
    extended one month at a time while the score is below the threshold, the
    period is within the maximum and the applicant stays within the expected
    lifetime. The scan is bounded by MAXIMUM_LOAN_PERIOD.

    Returns: (loan_amount, loan_period)

    Raises:
        NoValidLoanError: If the period limit or the expected lifetime is hit
            before the score clears the threshold, or the extended period
            ends past the expected lifetime
    """
    loan_amount = highest_valid_loan_amount(credit_modifier, loan_period, loan_amount)

    if not is_approvable(calculate_credit_score(credit_modifier, loan_amount, loan_period)):
        while (
            not is_approvable(calculate_credit_score(credit_modifier, loan_amount, loan_period))
            and loan_period <= MAXIMUM_LOAN_PERIOD
            and is_within_expected_lifetime(age, loan_period, country)
        ):
            loan_period += 1

    if loan_period > MAXIMUM_LOAN_PERIOD:
        raise NoValidLoanError(NO_VALID_LOAN_MESSAGE)
    # Extension stopped by the expected lifetime, or stepped past it on the last month
    if not is_approvable(calculate_credit_score(credit_modifier, loan_amount, loan_period)) or not (
        is_within_expected_lifetime(age, loan_period, country)
    ):
        raise NoValidLoanError(NO_VALID_LOAN_MESSAGE)

    return min(MAXIMUM_LOAN_AMOUNT, loan_amount), loan_period


def calculate_approved_loan(
    personal_code: str,
    loan_amount: int,
    loan_period: int,
    country: "Country | str" = Country.ESTONIA,
    today: date | None = None,
) -> Decision:
    """
    Main entry point: maximum loan amount and period the customer is approved for.

    Loan period must be between 12 and 60 months (inclusive), loan amount
    between 2000 and 10000 euros (inclusive).

    Rejections are returned as a Decision with an error message, this
    function does not raise.
    """
    request = LoanRequest(
        personal_code=normalize_personal_code(personal_code),
        loan_amount=loan_amount,
        loan_period=loan_period,
        country=Country.from_name(country),
    )

    try:
        age = verify_inputs(request, today)

        segment = resolve_segment(applicant_key(request.personal_code))
        if segment is Segment.NONE:
            raise NoValidLoanError(NO_VALID_LOAN_MESSAGE)

        approved_amount, approved_period = find_best_loan(
            segment.credit_modifier,
            request.loan_amount,
            request.loan_period,
            age,
            request.country,
        )

    except DomainException as e:
        logger.debug("Loan rejected: %s", e.message)
        return Decision.reject(_OUTCOMES[type(e)], e.message)

    except Exception:
        logger.exception("Unexpected error while calculating loan decision")
        return Decision.reject(DecisionOutcome.UNEXPECTED_ERROR, UNEXPECTED_ERROR_MESSAGE)

    logger.debug(
        "Loan approved",
        extra={"segment": segment.name, "loan_amount": approved_amount, "loan_period": approved_period},
    )
    return Decision.approve(approved_amount, approved_period)
