"""Age based eligibility: adulthood and expected lifetime per country"""

from inbank_gateway.domain.constants import (
    ADULT_AGE,
    EXPECTED_LIFETIME_ESTONIA,
    EXPECTED_LIFETIME_LATVIA,
    EXPECTED_LIFETIME_LITHUANIA,
)
from inbank_gateway.domain.models import Country

EXPECTED_LIFETIMES = {
    Country.ESTONIA: EXPECTED_LIFETIME_ESTONIA,
    Country.LATVIA: EXPECTED_LIFETIME_LATVIA,
    Country.LITHUANIA: EXPECTED_LIFETIME_LITHUANIA,
}


def is_adult(age: int) -> bool:
    return age >= ADULT_AGE


def expected_lifetime(country: "Country | str") -> int:
    """Expected lifetime in years, unknown countries use Estonia's"""
    return EXPECTED_LIFETIMES[Country.from_name(country)]


def is_within_expected_lifetime(age: int, loan_period: int, country: "Country | str") -> bool:
    """
    Check that the loan ends before the applicant reaches the expected lifetime.

    Only whole years of the period count: age + loan_period // 12.
    """
    return age + (loan_period // 12) < expected_lifetime(country)
