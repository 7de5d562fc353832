"""Error taxonomy for the payroll engine."""

from __future__ import annotations

from datetime import date
from typing import Any


class PayrollError(Exception):
    """Base class for all payroll engine errors."""

    code = "PAYROLL_ERROR"


class ValidationError(PayrollError):
    """A single field-level validation failure.

    The validator returns these as values; they are only raised when wrapped
    in InvalidPayrollInputError.
    """

    code = "VALIDATION_ERROR"

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return self.field == other.field and self.reason == other.reason

    def __hash__(self) -> int:
        return hash((self.field, self.reason))

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "reason": self.reason}


class InvalidPayrollInputError(PayrollError):
    """Raised when a calculation is attempted on input that failed validation."""

    code = "INVALID_INPUT"

    def __init__(self, errors: list[ValidationError]):
        self.errors = list(errors)
        summary = "; ".join(str(e) for e in self.errors)
        super().__init__(f"Invalid payroll input: {summary}")

    def to_dict(self) -> dict[str, Any]:
        return {"errors": [e.to_dict() for e in self.errors]}


class InvalidRangeError(PayrollError):
    """Raised when a pay period ends before it starts."""

    code = "INVALID_RANGE"

    def __init__(self, start_date: date, end_date: date):
        self.start_date = start_date
        self.end_date = end_date
        super().__init__(
            f"Period end {end_date.isoformat()} is before start {start_date.isoformat()}"
        )


class NoDefaultShiftError(PayrollError):
    """Raised when a non-empty shift list has no default shift."""

    code = "NO_DEFAULT_SHIFT"

    def __init__(self, employee_id: str | None = None):
        self.employee_id = employee_id
        target = f" for employee {employee_id}" if employee_id else ""
        super().__init__(f"No default shift configured{target}")


class ShiftNotFoundError(PayrollError):
    """Raised when a shift occurrence names a shift the employee does not have."""

    code = "SHIFT_NOT_FOUND"

    def __init__(self, shift_name: str):
        self.shift_name = shift_name
        super().__init__(f"Shift '{shift_name}' is not configured")


class WeekIndexError(PayrollError, IndexError):
    """Raised when a week index falls outside a pay period."""

    code = "WEEK_INDEX_OUT_OF_RANGE"

    def __init__(self, index: int, week_count: int):
        self.index = index
        self.week_count = week_count
        super().__init__(f"Week index {index} out of range for period with {week_count} weeks")


class InvalidTransitionError(PayrollError):
    """Raised when an invalid week status transition is attempted."""

    code = "INVALID_TRANSITION"

    def __init__(self, from_status: str, to_status: str, reason: str | None = None):
        self.from_status = from_status
        self.to_status = to_status
        self.reason = reason
        msg = f"Invalid transition from '{from_status}' to '{to_status}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class LineSignError(PayrollError):
    """Raised when assembled pay lines break the sign conventions."""

    code = "LINE_SIGN_VIOLATION"

    def __init__(self, violations: list[str]):
        self.violations = list(violations)
        super().__init__("; ".join(self.violations))
