"""
Standalone FastMCP HTTP Server
--------------------------------
MCP tool server for the personal loan chat app.

Tools exposed:
 - calculateEMI
 - getPersonalLoanInfo
 - list_tools
"""

import json
from typing import Annotated, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from loan_mcp import config
from loan_mcp.emi import (
    DEFAULT_ANNUAL_RATE,
    MAX_ANNUAL_RATE,
    MAX_PRINCIPAL,
    MAX_TENURE_MONTHS,
    MIN_ANNUAL_RATE,
    MIN_PRINCIPAL,
    MIN_TENURE_MONTHS,
)
from loan_mcp.errors import LoanToolError, ValidationError
from loan_mcp.loan_data import LoanCategory
from loan_mcp.logging_config import get_logger, setup_logging
from loan_mcp.service import LoanToolService, create_default_service

logger = get_logger("loan_mcp.mcp_server")

# Canonical tool metadata (name -> description/params) exposed via list_tools.
TOOL_METADATA = {
    "calculateEMI": {
        "title": "Calculate Personal Loan EMI",
        "description": "Calculate monthly EMI (Equated Monthly Installment) for Bajaj Personal Loan",
        "params": {
            "loanAmount": {
                "type": "number",
                "required": True,
                "minimum": MIN_PRINCIPAL,
                "maximum": MAX_PRINCIPAL,
            },
            "tenure": {
                "type": "integer",
                "required": True,
                "minimum": MIN_TENURE_MONTHS,
                "maximum": MAX_TENURE_MONTHS,
            },
            "interestRate": {
                "type": "number",
                "required": False,
                "default": DEFAULT_ANNUAL_RATE,
                "minimum": MIN_ANNUAL_RATE,
                "maximum": MAX_ANNUAL_RATE,
            },
        },
    },
    "getPersonalLoanInfo": {
        "title": "Get Personal Loan Information",
        "description": (
            "Get comprehensive personal loan information from Bajaj Finserv including interest "
            "rates, eligibility, features, documents required, and loan variants"
        ),
        "params": {
            "infoType": {
                "type": "string",
                "required": True,
                "enum": [category.value for category in LoanCategory],
            },
        },
    },
    "list_tools": {
        "description": "List available MCP tools",
        "params": {},
    },
}


# EmiRequest field -> calculateEMI parameter, so errors point at what the host sent
EMI_TOOL_PARAMS = {
    "principal": "loanAmount",
    "tenure_months": "tenure",
    "annual_rate_percent": "interestRate",
}


def _tool_error(error: LoanToolError) -> ToolError:
    """
    Wrap a domain error as a failed tool call whose text is the JSON error payload.
    """
    payload = error.to_dict()
    if isinstance(error, ValidationError):
        param = EMI_TOOL_PARAMS.get(error.field, error.field)
        payload["field"] = param
        payload["message"] = error.message.replace(error.field, param, 1)
    return ToolError(json.dumps(payload, ensure_ascii=False))


def create_mcp_server(service: LoanToolService, name: Optional[str] = None) -> FastMCP:
    """
    Build the FastMCP registry with every tool bound to `service`.
    """
    mcp = FastMCP(name=name or config.MCP_SERVER_NAME)

    # Amount, tenure and rate arrive as plain numbers; range and integrality
    # checks are left to the EMI validators so failures name field and bound.
    @mcp.tool(name="calculateEMI", description=TOOL_METADATA["calculateEMI"]["description"])
    def calculate_emi(
        loanAmount: Annotated[
            float,
            Field(
                description="Loan amount (₹40,000 to ₹55,00,000)",
                json_schema_extra={"minimum": MIN_PRINCIPAL, "maximum": MAX_PRINCIPAL},
            ),
        ],
        tenure: Annotated[
            float,
            Field(
                description="Loan tenure in months (12 to 96)",
                json_schema_extra={
                    "minimum": MIN_TENURE_MONTHS,
                    "maximum": MAX_TENURE_MONTHS,
                    "multipleOf": 1,
                },
            ),
        ],
        interestRate: Annotated[
            Optional[float],
            Field(
                description="Annual interest rate % (10% to 31% p.a.)",
                json_schema_extra={"minimum": MIN_ANNUAL_RATE, "maximum": MAX_ANNUAL_RATE},
            ),
        ] = DEFAULT_ANNUAL_RATE,
    ) -> dict:
        logger.info(
            "calculateEMI invoked loanAmount=%s tenure=%s interestRate=%s",
            loanAmount,
            tenure,
            interestRate,
        )
        try:
            return service.calculate_emi(loanAmount, tenure, interestRate)
        except LoanToolError as e:
            raise _tool_error(e) from e

    @mcp.tool(name="getPersonalLoanInfo", description=TOOL_METADATA["getPersonalLoanInfo"]["description"])
    def get_personal_loan_info(
        infoType: Annotated[LoanCategory, Field(description="Type of information requested")],
    ) -> dict:
        logger.info("getPersonalLoanInfo invoked infoType=%s", infoType.value)
        try:
            return service.get_loan_info(infoType)
        except LoanToolError as e:
            raise _tool_error(e) from e

    @mcp.tool(name="list_tools", description="List available MCP tools")
    def list_tools() -> dict:
        """Return metadata for all available MCP tools."""
        return {"tools": TOOL_METADATA}

    return mcp


mcp = create_mcp_server(create_default_service())


# -----------------------------
# Start MCP HTTP server
# -----------------------------
def main():
    setup_logging()
    logger.info("Starting MCP HTTP server on http://%s:%s/mcp", config.MCP_HOST, config.MCP_PORT)
    try:
        mcp.run(
            host=config.MCP_HOST,
            port=config.MCP_PORT,
            transport="streamable-http",
        )
    except KeyboardInterrupt:
        logger.info("MCP server shutdown requested")


if __name__ == "__main__":
    main()
