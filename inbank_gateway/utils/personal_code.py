"""Estonian personal ID code (isikukood) validation and birth date parsing"""

from datetime import date
from stdnum.ee import ik
from stdnum.exceptions import ValidationError

from inbank_gateway.domain.exceptions import InvalidPersonAgeError
from inbank_gateway.utils.date_utils import full_years_between


def normalize_personal_code(personal_code: str) -> str:
    """Strip the separators and surrounding whitespace that validation also ignores"""
    return ik.compact(personal_code)


def is_valid_personal_code(personal_code: str) -> bool:
    """Format, embedded birth date and check digit are all valid"""
    return ik.is_valid(personal_code)


def get_birth_date(personal_code: str) -> date:
    """
    Read the birth date encoded in the personal ID code.

    Raises:
        InvalidPersonAgeError: If the code carries no readable birth date
    """
    try:
        return ik.get_birth_date(personal_code)
    except (ValidationError, ValueError, IndexError) as e:
        raise InvalidPersonAgeError("Invalid personal code") from e


def get_age(personal_code: str, today: date | None = None) -> int:
    """Applicant age in whole years on `today` (default: current date)"""
    if today is None:
        today = date.today()

    return full_years_between(get_birth_date(personal_code), today)
