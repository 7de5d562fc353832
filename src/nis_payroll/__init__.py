"""NIS payroll engine.

Pure calculation core for weekly payroll under hourly, daily, weekly,
monthly and shift-based employment, with NIS contribution schedules and
weekly pay period tracking.
"""

from nis_payroll.calculators import (
    ContributionSchedule,
    EarningsClassSchedule,
    Employee,
    EmploymentType,
    FlatRateSchedule,
    InputValidator,
    PayrollCalculationResult,
    PayrollEngine,
    PayrollInput,
    ShiftConfig,
    ShiftList,
    ShiftOccurrence,
)
from nis_payroll.config import PayPolicy, Settings, get_settings
from nis_payroll.errors import (
    InvalidPayrollInputError,
    InvalidRangeError,
    LineSignError,
    NoDefaultShiftError,
    PayrollError,
    ValidationError,
)
from nis_payroll.periods import (
    PayPeriod,
    PeriodAggregator,
    PeriodExporter,
    PeriodGenerator,
    PeriodTotals,
    WeeklyRecord,
    WeekStatus,
)

__version__ = "0.1.0"

__all__ = [
    "ContributionSchedule",
    "EarningsClassSchedule",
    "Employee",
    "EmploymentType",
    "FlatRateSchedule",
    "InputValidator",
    "InvalidPayrollInputError",
    "InvalidRangeError",
    "LineSignError",
    "NoDefaultShiftError",
    "PayPeriod",
    "PayPolicy",
    "PayrollCalculationResult",
    "PayrollEngine",
    "PayrollError",
    "PayrollInput",
    "PeriodAggregator",
    "PeriodExporter",
    "PeriodGenerator",
    "PeriodTotals",
    "Settings",
    "ShiftConfig",
    "ShiftList",
    "ShiftOccurrence",
    "ValidationError",
    "WeekStatus",
    "WeeklyRecord",
    "get_settings",
]
