"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "inbank-gateway"}


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.post(
        "/v1/loan/decision",
        json={"personalCode": "50307172740", "loanAmount": 5000, "loanPeriod": 24},
    )

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "inbank_decision_total" in response.text
    assert "http_request_duration_seconds" in response.text


def test_request_id_header(client: TestClient):
    response = client.get("/health")
    assert "X-Request-ID" in response.headers


def test_request_id_header_propagated(client: TestClient):
    """An incoming request ID is kept instead of generating a new one"""
    response = client.get("/health", headers={"X-Request-ID": "frontend-42"})
    assert response.headers["X-Request-ID"] == "frontend-42"


def test_request_ids_differ_without_incoming_header(client: TestClient):
    first = client.get("/health").headers["X-Request-ID"]
    second = client.get("/health").headers["X-Request-ID"]
    assert first != second


def test_decision_latency_labelled_by_route(client: TestClient):
    client.post(
        "/v1/loan/decision",
        json={"personalCode": "50307172740", "loanAmount": 5000, "loanPeriod": 24},
    )

    response = client.get("/metrics")
    assert 'endpoint="/v1/loan/decision"' in response.text


def test_decision_endpoint_personal_code_with_spaces(client: TestClient):
    response = client.post(
        "/v1/loan/decision",
        json={"personalCode": " 5030717274 0 ", "loanAmount": 5000, "loanPeriod": 24},
    )

    assert response.status_code == 200
    assert response.json() == {"loanAmount": 2400, "loanPeriod": 24, "errorMessage": None}


def test_decision_endpoint_approval(client: TestClient):
    """Test POST /v1/loan/decision with a segment 1 customer"""
    response = client.post(
        "/v1/loan/decision",
        json={"personalCode": "50307172740", "loanAmount": 5000, "loanPeriod": 24, "country": "ESTONIA"},
    )

    assert response.status_code == 200
    assert response.json() == {"loanAmount": 2400, "loanPeriod": 24, "errorMessage": None}


def test_decision_endpoint_country_defaults_to_estonia(client: TestClient):
    response = client.post(
        "/v1/loan/decision",
        json={"personalCode": "35006069515", "loanAmount": 4000, "loanPeriod": 12},
    )

    assert response.status_code == 200
    assert response.json()["loanAmount"] == 10000


def test_decision_endpoint_no_valid_loan(client: TestClient):
    """Customer with debt"""
    response = client.post(
        "/v1/loan/decision",
        json={"personalCode": "37605030299", "loanAmount": 4000, "loanPeriod": 12},
    )

    assert response.status_code == 404
    assert response.json() == {"loanAmount": None, "loanPeriod": None, "errorMessage": "No valid loan found!"}


@pytest.mark.parametrize(
    "body, error_message",
    [
        (
            {"personalCode": "12345678901", "loanAmount": 4000, "loanPeriod": 12},
            "Invalid personal ID code!",
        ),
        (
            {"personalCode": "61501010002", "loanAmount": 4000, "loanPeriod": 12},
            "Loans are approved for adults only!",
        ),
        (
            {"personalCode": "35006069515", "loanAmount": 4000, "loanPeriod": 12, "country": "latvia"},
            "Loan for selected period is not approved at your age!",
        ),
        (
            {"personalCode": "50307172740", "loanAmount": 1999, "loanPeriod": 12},
            "Invalid loan amount!",
        ),
        (
            {"personalCode": "50307172740", "loanAmount": 4000, "loanPeriod": 61},
            "Invalid loan period!",
        ),
    ],
)
def test_decision_endpoint_invalid_input(client: TestClient, body: dict, error_message: str):
    response = client.post("/v1/loan/decision", json=body)

    assert response.status_code == 400
    data = response.json()
    assert data["errorMessage"] == error_message
    assert data["loanAmount"] is None
    assert data["loanPeriod"] is None


def test_decision_endpoint_malformed_body(client: TestClient):
    response = client.post(
        "/v1/loan/decision",
        json={"personalCode": "50307172740", "loanAmount": "a lot"},
    )

    assert response.status_code == 422
