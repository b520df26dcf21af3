"""
Personal loan MCP tools: EMI calculator and loan reference lookups.
"""

from loan_mcp.emi import EmiResult, compute_emi
from loan_mcp.errors import LoanToolError, NotFoundError, ValidationError
from loan_mcp.loan_data import LoanCategory, LoanReferenceStore
from loan_mcp.service import LoanToolService, create_default_service

__version__ = "0.1.0"

__all__ = [
    "EmiResult",
    "LoanCategory",
    "LoanReferenceStore",
    "LoanToolError",
    "LoanToolService",
    "NotFoundError",
    "ValidationError",
    "compute_emi",
    "create_default_service",
]
