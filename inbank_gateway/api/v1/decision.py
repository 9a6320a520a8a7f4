"""POST /v1/loan/decision - loan amount and period decision endpoint"""

import time
from datetime import date
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from inbank_gateway.api.v1.schemas import LoanDecisionRequest, LoanDecisionResponse
from inbank_gateway.api.dependencies import get_request_id, get_today
from inbank_gateway.domain.decision_engine import calculate_approved_loan
from inbank_gateway.domain.models import DecisionOutcome
from inbank_gateway.infrastructure.observability.metrics import record_decision
from inbank_gateway.infrastructure.observability.logging import log_decision

router = APIRouter()

STATUS_CODES = {
    DecisionOutcome.APPROVED: 200,
    DecisionOutcome.INVALID_PERSONAL_CODE: 400,
    DecisionOutcome.INVALID_AGE: 400,
    DecisionOutcome.INVALID_LOAN_AMOUNT: 400,
    DecisionOutcome.INVALID_LOAN_PERIOD: 400,
    DecisionOutcome.NO_VALID_LOAN: 404,
    DecisionOutcome.UNEXPECTED_ERROR: 500,
}


@router.post(
    "/loan/decision",
    response_model=LoanDecisionResponse,
    responses={
        400: {"model": LoanDecisionResponse, "description": "Invalid input"},
        404: {"model": LoanDecisionResponse, "description": "No valid loan found"},
        500: {"model": LoanDecisionResponse, "description": "Unexpected error"},
    },
)
def create_loan_decision(
    request_body: LoanDecisionRequest,
    request: Request,
    today: date = Depends(get_today),
):
    """
    Decide the maximum loan amount and period for a customer.

    Flow:
    1. Validate personal code, age, amount and period
    2. Resolve credit segment from the personal code
    3. Search the highest approvable amount, extend the period if needed
    4. Record metrics and logs
    5. Return the decision with a status code matching its outcome
    """
    start_time = time.time()
    request_id = get_request_id(request)

    decision = calculate_approved_loan(
        personal_code=request_body.personal_code,
        loan_amount=request_body.loan_amount,
        loan_period=request_body.loan_period,
        country=request_body.country,
        today=today,
    )

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_decision(decision.outcome.value, decision.loan_amount, decision.loan_period)
    log_decision(request_id, decision.outcome.value, decision.loan_amount, decision.loan_period, duration_ms)

    response = LoanDecisionResponse(
        loan_amount=decision.loan_amount,
        loan_period=decision.loan_period,
        error_message=decision.error_message,
    )
    return JSONResponse(
        status_code=STATUS_CODES[decision.outcome],
        content=response.model_dump(by_alias=True),
    )
