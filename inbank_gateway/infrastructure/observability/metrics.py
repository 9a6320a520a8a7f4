"""Prometheus metrics for monitoring decision outcomes and approved loans"""

from prometheus_client import Counter, Histogram

# Decision metrics
decision_counter = Counter(
    "inbank_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | invalid_* | no_valid_loan | unexpected_error
)

approved_amount_bucket_counter = Counter(
    "inbank_approved_amount_bucket",
    "Approved loan amounts by bucket",
    ["bucket"],  # 2000-3999, 4000-5999, 6000-7999, 8000-10000
)

approved_period_histogram = Histogram(
    "inbank_approved_period_months",
    "Approved loan period in months",
    buckets=[12, 18, 24, 36, 48, 60],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def amount_bucket(loan_amount: int) -> str:
    if loan_amount < 4000:
        return "2000-3999"
    elif loan_amount < 6000:
        return "4000-5999"
    elif loan_amount < 8000:
        return "6000-7999"
    else:
        return "8000-10000"


def record_decision(outcome: str, loan_amount: int | None, loan_period: int | None) -> None:
    """Record decision metrics for monitoring approval rates and loan distribution"""
    decision_counter.labels(outcome=outcome).inc()

    if loan_amount is None or loan_period is None:
        return

    approved_amount_bucket_counter.labels(bucket=amount_bucket(loan_amount)).inc()
    approved_period_histogram.observe(loan_period)
