"""
Display formatting for EMI results (Indian locale).
"""

from typing import Any, Dict, Union

from loan_mcp.emi import EmiRequest, EmiResult

RUPEE = "₹"
PROCESSING_FEE_NOTE = "Up to 3.93% of loan amount (inclusive of taxes)"
DISCLAIMER = "⚠️ This is an indicative calculation. Actual rates may vary based on eligibility."


def group_indian(digits: str) -> str:
    """
    Apply Indian digit grouping to a string of digits: 1234567 -> 12,34,567.
    """
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_inr(amount: Union[int, float]) -> str:
    """
    Format amount as a rupee string with Indian grouping, e.g. ₹1,00,000.
    Whole amounts carry no decimals; fractional ones are shown to two places.
    """
    sign = "-" if amount < 0 else ""
    amount = abs(amount)
    if float(amount).is_integer():
        whole, fraction = str(int(amount)), ""
    else:
        whole, fraction = f"{amount:.2f}".split(".")
        fraction = "." + fraction
    return f"{sign}{RUPEE}{group_indian(whole)}{fraction}"


def format_tenure(months: int) -> str:
    return f"{months} months ({months // 12} years {months % 12} months)"


def format_rate(rate: Union[int, float]) -> str:
    return f"{rate:g}% p.a."


def render_emi_summary(request: EmiRequest, result: EmiResult) -> Dict[str, Any]:
    """
    Build the display fields and the markdown text block returned to the chat host.
    """
    display = {
        "loanAmount": format_inr(request.principal),
        "tenure": format_tenure(request.tenure_months),
        "interestRate": format_rate(request.annual_rate_percent),
        "monthlyEMI": format_inr(result.installment),
        "totalInterest": format_inr(result.total_interest),
        "totalPayment": format_inr(result.total_payment),
        "processingFee": PROCESSING_FEE_NOTE,
    }
    text = (
        "**EMI Calculator Result**\n\n"
        f"💰 Loan Amount: {display['loanAmount']}\n"
        f"📅 Tenure: {display['tenure']}\n"
        f"📊 Interest Rate: {display['interestRate']}\n"
        f"💳 Monthly EMI: {display['monthlyEMI']}\n"
        f"📈 Total Interest: {display['totalInterest']}\n"
        f"💵 Total Payment: {display['totalPayment']}\n\n"
        f"{DISCLAIMER}"
    )
    return {"display": display, "text": text}
