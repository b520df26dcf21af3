"""
EMI (equated monthly installment) engine.

EMI = P * r * (1 + r)^n / ((1 + r)^n - 1)
where r = annual_rate_percent / (12 * 100), P = principal, n = tenure in months.

The engine is locale-agnostic; display formatting lives in loan_mcp.formatting.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict

from loan_mcp.validators import validate_amount, validate_whole_number

MIN_PRINCIPAL = 40_000
MAX_PRINCIPAL = 5_500_000
MIN_TENURE_MONTHS = 12
MAX_TENURE_MONTHS = 96
MIN_ANNUAL_RATE = 10
MAX_ANNUAL_RATE = 31
DEFAULT_ANNUAL_RATE = 15


class EmiRequest(BaseModel):
    """Validated EMI inputs."""

    model_config = ConfigDict(frozen=True)

    principal: Union[int, float]
    tenure_months: int
    annual_rate_percent: Union[int, float] = DEFAULT_ANNUAL_RATE

    @classmethod
    def build(
        cls,
        principal: Any,
        tenure_months: Any,
        annual_rate_percent: Any = None,
    ) -> "EmiRequest":
        """
        Validate raw inputs; an omitted rate falls back to DEFAULT_ANNUAL_RATE.

        Raises ValidationError naming the first offending field.
        """
        if annual_rate_percent is None:
            annual_rate_percent = DEFAULT_ANNUAL_RATE
        return cls(
            principal=validate_amount("principal", principal, MIN_PRINCIPAL, MAX_PRINCIPAL),
            tenure_months=validate_whole_number(
                "tenure_months", tenure_months, MIN_TENURE_MONTHS, MAX_TENURE_MONTHS
            ),
            annual_rate_percent=validate_amount(
                "annual_rate_percent", annual_rate_percent, MIN_ANNUAL_RATE, MAX_ANNUAL_RATE
            ),
        )


class EmiResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    installment: int
    total_payment: int
    total_interest: Union[int, float]


def round_half_up(value: float) -> int:
    """Round to the nearest whole currency unit, halves away from zero."""
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def monthly_installment(principal: float, tenure_months: int, annual_rate_percent: float) -> int:
    """
    Unvalidated amortization formula. Callers should go through compute_emi.
    """
    r = annual_rate_percent / 1200
    if r == 0:
        return round_half_up(principal / tenure_months)
    factor = (1 + r) ** tenure_months
    return round_half_up(principal * r * factor / (factor - 1))


def emi_for_request(request: EmiRequest) -> EmiResult:
    installment = monthly_installment(
        request.principal, request.tenure_months, request.annual_rate_percent
    )
    total_payment = installment * request.tenure_months
    return EmiResult(
        installment=installment,
        total_payment=total_payment,
        total_interest=total_payment - request.principal,
    )


def compute_emi(
    principal: Any,
    tenure_months: Any,
    annual_rate_percent: Optional[Any] = None,
) -> EmiResult:
    """
    Validate inputs and compute installment, total payment and total interest.

    Out-of-range values are rejected with ValidationError, never clamped.
    """
    return emi_for_request(EmiRequest.build(principal, tenure_months, annual_rate_percent))
