"""Unit tests for age eligibility and personal code parsing"""

import pytest
from datetime import date
from inbank_gateway.domain.age import expected_lifetime, is_adult, is_within_expected_lifetime
from inbank_gateway.domain.exceptions import InvalidPersonAgeError
from inbank_gateway.domain.models import Country
from inbank_gateway.utils.date_utils import full_years_between
from inbank_gateway.utils.personal_code import (
    get_age,
    get_birth_date,
    is_valid_personal_code,
    normalize_personal_code,
)


def test_full_years_between_counts_completed_years():
    born = date(2003, 7, 17)
    assert full_years_between(born, date(2026, 7, 16)) == 22
    assert full_years_between(born, date(2026, 7, 17)) == 23
    assert full_years_between(born, date(2026, 12, 31)) == 23


def test_is_adult_boundary():
    assert is_adult(17) is False
    assert is_adult(18) is True


def test_expected_lifetime_per_country():
    assert expected_lifetime(Country.ESTONIA) == 78
    assert expected_lifetime(Country.LATVIA) == 75
    assert expected_lifetime(Country.LITHUANIA) == 76


def test_expected_lifetime_country_names():
    """Lookup is case-insensitive and unknown countries fall back to Estonia"""
    assert expected_lifetime("lithuania") == 76
    assert expected_lifetime("Latvia") == 75
    assert expected_lifetime("FINLAND") == 78
    assert expected_lifetime("") == 78


def test_is_within_expected_lifetime_counts_whole_years_only():
    # 76 + 12 // 12 = 77 < 78
    assert is_within_expected_lifetime(76, 12, Country.ESTONIA) is True
    # 76 + 23 // 12 = 77 < 78
    assert is_within_expected_lifetime(76, 23, Country.ESTONIA) is True
    # 76 + 24 // 12 = 78
    assert is_within_expected_lifetime(76, 24, Country.ESTONIA) is False


def test_is_within_expected_lifetime_uses_country():
    assert is_within_expected_lifetime(73, 12, Country.ESTONIA) is True
    assert is_within_expected_lifetime(73, 12, Country.LITHUANIA) is True
    assert is_within_expected_lifetime(73, 24, Country.LATVIA) is False


def test_is_valid_personal_code():
    assert is_valid_personal_code("50307172740") is True
    assert is_valid_personal_code("50307172741") is False  # check digit
    assert is_valid_personal_code("5030717274") is False  # length
    assert is_valid_personal_code("12345678901") is False  # birth date
    assert is_valid_personal_code("abcdefghijk") is False


def test_get_birth_date():
    assert get_birth_date("50307172740") == date(2003, 7, 17)
    assert get_birth_date("37605030299") == date(1976, 5, 3)
    assert get_birth_date("61501010002") == date(2015, 1, 1)


def test_get_age(today: date):
    assert get_age("50307172740", today) == 23
    assert get_age("35006069515", today) == 76
    assert get_age("61501010002", today) == 11


def test_get_age_unreadable_birth_date(today: date):
    """Month 13 cannot be parsed"""
    with pytest.raises(InvalidPersonAgeError) as exc_info:
        get_age("50313172740", today)

    assert exc_info.value.message == "Invalid personal code"


def test_normalize_personal_code_removes_spaces():
    assert normalize_personal_code(" 5030717274 0 ") == "50307172740"
    assert normalize_personal_code("50307172740") == "50307172740"
