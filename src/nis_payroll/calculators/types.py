"""Type definitions for the calculation pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

ZERO = Decimal("0")


class EmploymentType(str, Enum):
    """How an employee's pay is structured."""

    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    SHIFT_BASED = "shift_based"


class LineType(str, Enum):
    """Pay line item types."""

    EARNING = "EARNING"
    ALLOWANCE = "ALLOWANCE"
    DEDUCTION = "DEDUCTION"
    NIS_EMPLOYEE = "NIS_EMPLOYEE"
    NIS_EMPLOYER = "NIS_EMPLOYER"


@dataclass(frozen=True)
class ShiftConfig:
    """A named, independently rated recurring shift."""

    name: str
    base_rate: Decimal  # Flat amount per occurrence
    hours_label: str = ""  # Free text, e.g. "7am - 3pm"
    hourly_rate: Decimal | None = None  # For partial-hour billing
    is_default: bool = False


@dataclass(frozen=True)
class Employee:
    """Employee record as supplied by the host application."""

    employee_id: str
    employment_type: EmploymentType
    employee_number: str = ""
    first_name: str = ""
    last_name: str = ""
    nis_number: str | None = None

    # Exactly one of these is required, depending on employment_type
    hourly_rate: Decimal | None = None
    daily_rate: Decimal | None = None
    weekly_rate: Decimal | None = None
    monthly_salary: Decimal | None = None

    # Required (non-empty) for SHIFT_BASED
    shifts: tuple[ShiftConfig, ...] = ()

    @property
    def display_name(self) -> str:
        """Get full name."""
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def default_shift(self) -> ShiftConfig | None:
        return next((s for s in self.shifts if s.is_default), None)

    def find_shift(self, name: str) -> ShiftConfig | None:
        return next((s for s in self.shifts if s.name == name), None)


@dataclass(frozen=True)
class ShiftOccurrence:
    """Worked occurrences of one shift, with optional extra hours."""

    shift_name: str
    occurrences: Decimal = Decimal("1")
    extra_hours: Decimal = ZERO


@dataclass(frozen=True)
class PayrollInput:
    """Worked time and adjustments for one calculation.

    Only the fields relevant to the employee's employment type are consulted.
    """

    hours_worked: Decimal = ZERO
    days_worked: Decimal = ZERO
    other_allowances: Decimal = ZERO
    other_deductions: Decimal = ZERO
    shifts_worked: tuple[ShiftOccurrence, ...] = ()

    @classmethod
    def from_days_worked(
        cls,
        days_worked: Decimal,
        other_allowances: Decimal = ZERO,
        other_deductions: Decimal = ZERO,
        day_hours: Decimal = Decimal("8"),
    ) -> PayrollInput:
        """Build an input from days worked, deriving hours at day_hours per day."""
        return cls(
            hours_worked=days_worked * day_hours,
            days_worked=days_worked,
            other_allowances=other_allowances,
            other_deductions=other_deductions,
        )


@dataclass(frozen=True)
class GrossPay:
    """Gross pay and the weekly-equivalent wage used as contribution base."""

    gross_pay: Decimal
    weekly_wage: Decimal


@dataclass(frozen=True)
class ContributionAmounts:
    """Employee and employer NIS contributions for a weekly wage."""

    employee_amount: Decimal
    employer_amount: Decimal
    earnings_class: str | None = None  # Set by banded schedules

    @property
    def total(self) -> Decimal:
        return self.employee_amount + self.employer_amount


@dataclass(frozen=True)
class PayLine:
    """A signed line of a payroll result."""

    line_type: LineType
    amount: Decimal  # Final amount (signed per conventions)
    explanation: str | None = None

    def to_canonical_dict(self) -> dict[str, Any]:
        """Return canonical dict for hashing (deterministic ordering)."""
        return {
            "line_type": self.line_type.value,
            "amount": str(self.amount),
            "explanation": self.explanation,
        }


@dataclass(frozen=True)
class PayrollCalculationResult:
    """Result of calculating pay for one employee and one input."""

    gross_pay: Decimal
    weekly_wage: Decimal
    nis_employee_contribution: Decimal
    nis_employer_contribution: Decimal
    other_allowances: Decimal
    other_deductions: Decimal
    net_pay: Decimal
    earnings_class: str | None = None
    lines: tuple[PayLine, ...] = ()

    @property
    def total_nis_contribution(self) -> Decimal:
        return self.nis_employee_contribution + self.nis_employer_contribution

    @property
    def gross_less_nis(self) -> Decimal:
        return self.gross_pay - self.nis_employee_contribution
