"""Tests for Indian-locale display formatting."""

import pytest

from loan_mcp.emi import EmiRequest, emi_for_request
from loan_mcp.formatting import (
    PROCESSING_FEE_NOTE,
    format_inr,
    format_rate,
    format_tenure,
    group_indian,
    render_emi_summary,
)


@pytest.mark.parametrize(
    "amount, expected",
    [
        (0, "₹0"),
        (999, "₹999"),
        (3467, "₹3,467"),
        (100000, "₹1,00,000"),
        (124812, "₹1,24,812"),
        (5500000, "₹55,00,000"),
        (123456789, "₹12,34,56,789"),
        (1234.5, "₹1,234.50"),
        (-24812, "-₹24,812"),
    ],
)
def test_format_inr(amount, expected) -> None:
    assert format_inr(amount) == expected


def test_group_indian_short_strings_untouched() -> None:
    assert group_indian("12") == "12"
    assert group_indian("1234") == "1,234"


def test_format_tenure() -> None:
    assert format_tenure(36) == "36 months (3 years 0 months)"
    assert format_tenure(30) == "30 months (2 years 6 months)"
    assert format_tenure(12) == "12 months (1 years 0 months)"


def test_format_rate() -> None:
    assert format_rate(15) == "15% p.a."
    assert format_rate(12.5) == "12.5% p.a."


def test_render_emi_summary() -> None:
    request = EmiRequest.build(100_000, 36)
    summary = render_emi_summary(request, emi_for_request(request))

    assert summary["display"] == {
        "loanAmount": "₹1,00,000",
        "tenure": "36 months (3 years 0 months)",
        "interestRate": "15% p.a.",
        "monthlyEMI": "₹3,467",
        "totalInterest": "₹24,812",
        "totalPayment": "₹1,24,812",
        "processingFee": PROCESSING_FEE_NOTE,
    }
    assert summary["text"].startswith("**EMI Calculator Result**")
    assert "💳 Monthly EMI: ₹3,467" in summary["text"]
    assert summary["text"].endswith("may vary based on eligibility.")
