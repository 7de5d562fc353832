"""API routes."""

from nis_payroll.api.routes.health import router as health_router
from nis_payroll.api.routes.payroll import router as payroll_router
from nis_payroll.api.routes.periods import router as periods_router

__all__ = ["health_router", "payroll_router", "periods_router"]
