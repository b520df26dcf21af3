"""
HTTP adapter (FastAPI) for the loan tools.

This module wires together:
- CORS for chat-host widgets and request logging middleware
- /health
- /tools/* endpoints calling the shared LoanToolService
"""

from typing import Any, Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from loan_mcp import __version__, config
from loan_mcp.errors import NotFoundError, ValidationError
from loan_mcp.logging_config import get_logger, setup_logging
from loan_mcp.mcp_server import TOOL_METADATA
from loan_mcp.service import LoanToolService, create_default_service

logger = get_logger("loan_mcp.app")


# -----------------------
# Request models
# -----------------------

class EmiRequestIn(BaseModel):
    # Left untyped so range and type checks report through ValidationError
    principal: Any = None
    tenure_months: Any = None
    annual_rate_percent: Optional[Any] = None


# -----------------------
# Dependencies
# -----------------------
def get_service(request: Request) -> LoanToolService:
    return request.app.state.service


def create_app(service: Optional[LoanToolService] = None) -> FastAPI:
    """
    Build the FastAPI app around `service` (the bundled table when omitted).
    """
    app = FastAPI(title="Personal Loan Tools", version=__version__)
    app.state.service = service or create_default_service()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOW_ORIGINS,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info("HTTP %s %s -> %s", request.method, request.url.path, response.status_code)
        return response

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=422, content=exc.to_dict())

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content=exc.to_dict())

    # -----------------------
    # Endpoints
    # -----------------------

    @app.get("/health")
    async def health():
        return {"ok": True, "status": "MCP Server is running"}

    @app.get("/tools")
    async def tools():
        return {"tools": TOOL_METADATA}

    @app.post("/tools/emi")
    async def tool_emi(req: EmiRequestIn, svc: LoanToolService = Depends(get_service)):
        """
        Compute EMI, total payment and total interest for a loan.
        """
        return svc.calculate_emi(req.principal, req.tenure_months, req.annual_rate_percent)

    @app.get("/tools/loan-info")
    async def tool_loan_categories(svc: LoanToolService = Depends(get_service)):
        return svc.list_categories()

    @app.get("/tools/loan-info/{category}")
    async def tool_loan_info(category: str, svc: LoanToolService = Depends(get_service)):
        return svc.get_loan_info(category)

    return app


def main():
    setup_logging()
    logger.info("Starting HTTP adapter on http://%s:%s", config.HTTP_HOST, config.HTTP_PORT)
    uvicorn.run(create_app(), host=config.HTTP_HOST, port=config.HTTP_PORT)


if __name__ == "__main__":
    main()
