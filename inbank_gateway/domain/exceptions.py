"""Domain-specific exceptions

Every exception carries the user-facing message for its rejection reason.
They never leave the decision engine: `calculate_approved_loan` converts
them into a rejected Decision.
"""


class DomainException(Exception):
    """Base exception for domain layer"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidPersonalCodeError(DomainException):
    """Personal ID code failed syntactic validation"""

    pass


class InvalidPersonAgeError(DomainException):
    """Applicant is underage, too old for the period, or has no readable birth date"""

    pass


class InvalidLoanAmountError(DomainException):
    """Requested amount is outside the allowed range"""

    pass


class InvalidLoanPeriodError(DomainException):
    """Requested period is outside the allowed range"""

    pass


class NoValidLoanError(DomainException):
    """No amount/period combination clears the approval threshold"""

    pass
