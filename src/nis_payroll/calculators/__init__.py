"""Payroll calculation engine."""

from nis_payroll.calculators.contributions import (
    ContributionCalculator,
    ContributionSchedule,
    EarningsClass,
    EarningsClassSchedule,
    FlatRateSchedule,
    schedule_from_payload,
)
from nis_payroll.calculators.engine import BatchCalculationResult, PayrollEngine
from nis_payroll.calculators.gross_pay import GrossPayResolver
from nis_payroll.calculators.result_builder import PayrollResultBuilder
from nis_payroll.calculators.shifts import ShiftList
from nis_payroll.calculators.types import (
    ContributionAmounts,
    Employee,
    EmploymentType,
    GrossPay,
    PayrollCalculationResult,
    PayrollInput,
    ShiftConfig,
    ShiftOccurrence,
)
from nis_payroll.calculators.validator import InputValidator

__all__ = [
    "BatchCalculationResult",
    "ContributionAmounts",
    "ContributionCalculator",
    "ContributionSchedule",
    "EarningsClass",
    "EarningsClassSchedule",
    "Employee",
    "EmploymentType",
    "FlatRateSchedule",
    "GrossPay",
    "GrossPayResolver",
    "InputValidator",
    "PayrollCalculationResult",
    "PayrollEngine",
    "PayrollInput",
    "PayrollResultBuilder",
    "ShiftConfig",
    "ShiftList",
    "ShiftOccurrence",
    "schedule_from_payload",
]
