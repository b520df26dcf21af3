"""Tests for the FastAPI adapter."""

import pytest
from fastapi.testclient import TestClient

from loan_mcp.app import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


def test_health(client) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True, "status": "MCP Server is running"}


def test_emi_endpoint(client) -> None:
    resp = client.post("/tools/emi", json={"principal": 100000, "tenure_months": 36})
    assert resp.status_code == 200
    body = resp.json()
    assert body["result"]["installment"] == 3467
    assert body["result"]["annual_rate_percent"] == 15
    assert body["display"]["totalInterest"] == "₹24,812"


def test_emi_endpoint_rejects_fractional_tenure(client) -> None:
    resp = client.post("/tools/emi", json={"principal": 100000, "tenure_months": 36.5})
    assert resp.status_code == 422
    body = resp.json()
    assert body["error"] == "validation_error"
    assert body["field"] == "tenure_months"


def test_emi_endpoint_missing_principal(client) -> None:
    resp = client.post("/tools/emi", json={"tenure_months": 36})
    assert resp.status_code == 422
    assert resp.json()["field"] == "principal"
    assert resp.json()["bound"] == "required"


def test_loan_info_endpoint(client) -> None:
    resp = client.get("/tools/loan-info/variants")
    assert resp.status_code == 200
    names = [v["name"] for v in resp.json()["data"]["variants"]]
    assert names == ["Term Loan", "Flexi Hybrid Term Loan", "Flexi Term (Dropline) Loan"]


def test_loan_info_unknown_category(client) -> None:
    resp = client.get("/tools/loan-info/bogus")
    assert resp.status_code == 404
    assert resp.json()["error"] == "not_found"


def test_loan_categories_endpoint(client) -> None:
    resp = client.get("/tools/loan-info")
    assert resp.status_code == 200
    assert "interest_rates" in resp.json()["categories"]


def test_tools_listing(client) -> None:
    resp = client.get("/tools")
    assert set(resp.json()["tools"]) == {"calculateEMI", "getPersonalLoanInfo", "list_tools"}


def test_cors_preflight(client) -> None:
    resp = client.options(
        "/tools/emi",
        headers={
            "Origin": "https://chat.example.com",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"
