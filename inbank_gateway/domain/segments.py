"""Customer segmentation by the last four digits of the personal ID code"""

from enum import Enum
from inbank_gateway.domain.constants import (
    SEGMENT_1_CREDIT_MODIFIER,
    SEGMENT_2_CREDIT_MODIFIER,
    SEGMENT_3_CREDIT_MODIFIER,
)


class Segment(Enum):
    """Credit segment with its credit modifier. NONE means the customer has debt."""

    NONE = 0
    SEGMENT_1 = SEGMENT_1_CREDIT_MODIFIER
    SEGMENT_2 = SEGMENT_2_CREDIT_MODIFIER
    SEGMENT_3 = SEGMENT_3_CREDIT_MODIFIER

    @property
    def credit_modifier(self) -> int:
        return self.value


def applicant_key(personal_code: str) -> int:
    """Numeric value of the last four digits of the personal ID code"""
    return int(personal_code[-4:])


def resolve_segment(key: int) -> Segment:
    """
    Map an applicant key to a segment.

    Debt      - 0000...2499
    Segment 1 - 2500...4999
    Segment 2 - 5000...7499
    Segment 3 - 7500...9999
    """
    if key < 2500:
        return Segment.NONE
    elif key < 5000:
        return Segment.SEGMENT_1
    elif key < 7500:
        return Segment.SEGMENT_2
    else:
        return Segment.SEGMENT_3
