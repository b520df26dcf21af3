"""Tests for LoanToolService response shaping."""

import pytest

from loan_mcp.errors import NotFoundError, ValidationError
from loan_mcp.loan_data import LoanReferenceStore
from loan_mcp.service import LoanToolService, create_default_service


@pytest.fixture
def service() -> LoanToolService:
    return create_default_service()


def test_calculate_emi_response(service) -> None:
    response = service.calculate_emi(100_000, 36)
    assert response["status"] == "success"
    assert response["result"] == {
        "principal": 100_000,
        "tenure_months": 36,
        "annual_rate_percent": 15,
        "installment": 3467,
        "total_payment": 124_812,
        "total_interest": 24_812,
    }
    assert response["display"]["monthlyEMI"] == "₹3,467"
    assert "Total Payment: ₹1,24,812" in response["text"]


def test_calculate_emi_validation_error(service) -> None:
    with pytest.raises(ValidationError) as excinfo:
        service.calculate_emi(100_000, 97)
    payload = excinfo.value.to_dict()
    assert payload["status"] == "error"
    assert payload["error"] == "validation_error"
    assert payload["field"] == "tenure_months"
    assert payload["bound"] == "<= 96"
    assert payload["value"] == 97


def test_get_loan_info(service) -> None:
    response = service.get_loan_info("eligibility")
    assert response["status"] == "success"
    assert response["category"] == "eligibility"
    assert response["data"]["criteria"]["cibilScore"] == "650 or higher"


def test_get_loan_info_all(service) -> None:
    response = service.get_loan_info("all")
    assert response["category"] == "all"
    assert set(response["data"]) == set(service.store.categories())


def test_get_loan_info_unknown(service) -> None:
    with pytest.raises(NotFoundError) as excinfo:
        service.get_loan_info("bogus")
    payload = excinfo.value.to_dict()
    assert payload["error"] == "not_found"
    assert payload["category"] == "bogus"


def test_injected_store_is_used() -> None:
    entries = {
        name: {"title": f"custom {name}"}
        for name in ["overview", "eligibility", "features", "interest_rates", "documents", "variants"]
    }
    service = LoanToolService(LoanReferenceStore(entries))
    assert service.get_loan_info("overview")["data"] == {"title": "custom overview"}


def test_list_categories(service) -> None:
    assert service.list_categories()["categories"][-1] == "all"
    assert len(service.list_categories()["categories"]) == 7


def test_responses_are_idempotent(service) -> None:
    assert service.calculate_emi(2_000_000, 84, 13.5) == service.calculate_emi(2_000_000, 84, 13.5)
    assert service.get_loan_info("all") == service.get_loan_info("all")
