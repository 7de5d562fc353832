"""Payroll calculation endpoints."""

from fastapi import APIRouter, status

from nis_payroll.api.dependencies import AppSettings, Policy, resolve_schedule
from nis_payroll.api.schemas import (
    CalculateRequest,
    CalculationResponse,
    ErrorResponse,
    ValidateResponse,
    ValidationErrorItem,
)
from nis_payroll.calculators.engine import PayrollEngine
from nis_payroll.calculators.validator import InputValidator

router = APIRouter(prefix="/payroll", tags=["payroll"])


@router.post(
    "/validate",
    response_model=ValidateResponse,
    status_code=status.HTTP_200_OK,
)
def validate_payroll_input(payload: CalculateRequest) -> ValidateResponse:
    """Check an employee/input pair without calculating."""
    errors = InputValidator.validate(payload.employee.to_domain(), payload.input.to_domain())
    return ValidateResponse(
        valid=not errors,
        errors=[ValidationErrorItem.from_error(e) for e in errors],
    )


@router.post(
    "/calculate",
    response_model=CalculationResponse,
    responses={422: {"model": ErrorResponse}},
)
def calculate_payroll(
    payload: CalculateRequest,
    settings: AppSettings,
    policy: Policy,
) -> CalculationResponse:
    """Calculate gross pay, NIS contributions and net pay."""
    engine = PayrollEngine(resolve_schedule(payload.schedule, settings), policy)
    result = engine.calculate(payload.employee.to_domain(), payload.input.to_domain())
    return CalculationResponse.from_result(result)
