"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from nis_payroll import __version__
from nis_payroll.api.routes import health_router, payroll_router, periods_router
from nis_payroll.errors import InvalidPayrollInputError, PayrollError

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="NIS Payroll Engine API",
        description="Weekly payroll and NIS contribution calculations",
        version=__version__,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(PayrollError)
    async def payroll_error_handler(request: Request, exc: PayrollError) -> JSONResponse:
        """Report engine precondition failures as unprocessable requests."""
        errors = exc.to_dict()["errors"] if isinstance(exc, InvalidPayrollInputError) else []
        return JSONResponse(
            status_code=422,
            content={
                "detail": str(exc),
                "code": exc.code,
                "errors": errors,
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(payroll_router, prefix="/api/v1")
    app.include_router(periods_router, prefix="/api/v1")

    return app


# Default app instance for uvicorn
app = create_app()
