"""
Loan tools service business logic.

Shared by the MCP server and the HTTP adapter; both are thin callers of
LoanToolService.
"""

from typing import Any, Dict, Optional

from loan_mcp.emi import EmiRequest, emi_for_request
from loan_mcp.errors import LoanToolError
from loan_mcp.formatting import render_emi_summary
from loan_mcp.loan_data import LoanCategory, LoanReferenceStore
from loan_mcp.logging_config import get_logger

logger = get_logger("loan_mcp.service")


class LoanToolService:
    """
    Business logic for EMI calculation and loan info lookups.
    """

    def __init__(self, store: LoanReferenceStore):
        self.store = store

    def calculate_emi(
        self,
        principal: Any,
        tenure_months: Any,
        annual_rate_percent: Optional[Any] = None,
    ) -> Dict[str, Any]:
        """
        Validate the request and return the numeric result plus display fields.

        Raises ValidationError when any input is out of range.
        """
        try:
            request = EmiRequest.build(principal, tenure_months, annual_rate_percent)
        except LoanToolError as e:
            logger.warning("EMI request rejected: %s", e.message)
            raise

        result = emi_for_request(request)
        logger.info(
            "EMI computed principal=%s tenure=%s rate=%s -> installment=%s",
            request.principal,
            request.tenure_months,
            request.annual_rate_percent,
            result.installment,
        )
        summary = render_emi_summary(request, result)
        return {
            "status": "success",
            "result": {**request.model_dump(), **result.model_dump()},
            "display": summary["display"],
            "text": summary["text"],
        }

    def get_loan_info(self, category: Any) -> Dict[str, Any]:
        """
        Return the loan info entry for a category, or every entry for "all".

        Raises NotFoundError for unknown categories.
        """
        try:
            parsed = LoanCategory.parse(category)
        except LoanToolError as e:
            logger.warning("Loan info lookup rejected: %s", e.message)
            raise

        logger.info("Loan info lookup category=%s", parsed.value)
        return {"status": "success", "category": parsed.value, "data": self.store.get(parsed)}

    def list_categories(self) -> Dict[str, Any]:
        return {
            "status": "success",
            "categories": self.store.categories() + [LoanCategory.ALL.value],
        }


def create_default_service() -> LoanToolService:
    """Build a service over the bundled loan info table."""
    return LoanToolService(LoanReferenceStore())
