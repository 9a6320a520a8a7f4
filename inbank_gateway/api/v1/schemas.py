"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from inbank_gateway.config import settings


class LoanDecisionRequest(BaseModel):
    """Request body for POST /v1/loan/decision

    Amount and period ranges are checked by the decision engine so that
    out-of-range values get their own error message.
    """

    model_config = ConfigDict(populate_by_name=True)

    personal_code: str = Field(..., alias="personalCode", description="Estonian personal ID code")
    loan_amount: int = Field(..., alias="loanAmount", description="Requested loan amount in euros")
    loan_period: int = Field(..., alias="loanPeriod", description="Requested loan period in months")
    country: str = Field(default=settings.default_country, description="ESTONIA, LATVIA or LITHUANIA")


class LoanDecisionResponse(BaseModel):
    """Response for POST /v1/loan/decision"""

    model_config = ConfigDict(populate_by_name=True)

    loan_amount: Optional[int] = Field(default=None, alias="loanAmount")
    loan_period: Optional[int] = Field(default=None, alias="loanPeriod")
    error_message: Optional[str] = Field(default=None, alias="errorMessage")
