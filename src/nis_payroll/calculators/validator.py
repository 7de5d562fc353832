"""Business-completeness validation of employee and input pairs."""

from __future__ import annotations

from decimal import Decimal

from nis_payroll.calculators.types import Employee, EmploymentType, PayrollInput
from nis_payroll.errors import InvalidPayrollInputError, ValidationError

# Employment type -> (rate attribute, label used in messages)
REQUIRED_RATE_FIELDS: dict[EmploymentType, tuple[str, str]] = {
    EmploymentType.HOURLY: ("hourly_rate", "Hourly rate"),
    EmploymentType.DAILY: ("daily_rate", "Daily rate"),
    EmploymentType.WEEKLY: ("weekly_rate", "Weekly rate"),
    EmploymentType.MONTHLY: ("monthly_salary", "Monthly salary"),
}

NON_NEGATIVE_INPUT_FIELDS = (
    ("hours_worked", "Hours worked"),
    ("days_worked", "Days worked"),
    ("other_allowances", "Other allowances"),
    ("other_deductions", "Other deductions"),
)


class InputValidator:
    """Checks that an employee/input pair is complete enough to calculate.

    Validation never raises; it returns a list of field-level errors
    (empty if valid). Per-shift rate validity is enforced when shifts are
    configured, not here.
    """

    @staticmethod
    def validate(employee: Employee, payroll_input: PayrollInput) -> list[ValidationError]:
        """Validate employee rate configuration and input amounts.

        Returns list of errors (empty if all valid).
        """
        errors: list[ValidationError] = []

        if employee.employment_type == EmploymentType.SHIFT_BASED:
            if not employee.shifts:
                errors.append(
                    ValidationError("shifts", "Shift-based employees need at least one shift")
                )
            else:
                for i, occurrence in enumerate(payroll_input.shifts_worked):
                    if employee.find_shift(occurrence.shift_name) is None:
                        errors.append(
                            ValidationError(
                                f"shifts_worked[{i}].shift_name",
                                f"Unknown shift '{occurrence.shift_name}'",
                            )
                        )
                    if occurrence.occurrences < 0 or occurrence.extra_hours < 0:
                        errors.append(
                            ValidationError(
                                f"shifts_worked[{i}]",
                                "Occurrences and extra hours cannot be negative",
                            )
                        )
        else:
            attr, label = REQUIRED_RATE_FIELDS[employee.employment_type]
            rate: Decimal | None = getattr(employee, attr)
            if rate is None or rate <= 0:
                errors.append(ValidationError(attr, f"{label} must be greater than 0"))

        for attr, label in NON_NEGATIVE_INPUT_FIELDS:
            if getattr(payroll_input, attr) < 0:
                errors.append(ValidationError(attr, f"{label} cannot be negative"))

        return errors

    @classmethod
    def is_valid(cls, employee: Employee, payroll_input: PayrollInput) -> bool:
        return not cls.validate(employee, payroll_input)

    @classmethod
    def check(cls, employee: Employee, payroll_input: PayrollInput) -> None:
        """Validate, raising InvalidPayrollInputError if any rule fails."""
        errors = cls.validate(employee, payroll_input)
        if errors:
            raise InvalidPayrollInputError(errors)
