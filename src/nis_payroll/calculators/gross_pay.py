"""Gross pay and weekly-equivalent wage resolution."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import assert_never

from nis_payroll.calculators.money import round_to_cents
from nis_payroll.calculators.types import (
    ZERO,
    Employee,
    EmploymentType,
    GrossPay,
    PayrollInput,
    ShiftConfig,
)
from nis_payroll.config import PayPolicy
from nis_payroll.errors import NoDefaultShiftError, ShiftNotFoundError

logger = logging.getLogger(__name__)


def require_default_shift(employee: Employee) -> ShiftConfig:
    """Return the employee's default shift.

    Raises:
        NoDefaultShiftError: If no shift is flagged as default
    """
    shift = employee.default_shift
    if shift is None:
        raise NoDefaultShiftError(employee.employee_id)
    return shift


class GrossPayResolver:
    """Resolves gross pay and the weekly wage used as the NIS base.

    Weekly wage conversions (policy defaults):
    - Hourly: hourly_rate x 40 standard hours
    - Daily: daily_rate x 6 working days
    - Weekly: weekly_rate
    - Monthly: monthly_salary x 12 / 52
    - Shift based: default shift base_rate x 6 working days

    The weekly wage is derived from rates, never from worked time, so an
    input with no worked time still carries a contribution base.
    """

    def __init__(self, policy: PayPolicy | None = None):
        self.policy = policy or PayPolicy()

    def resolve(self, employee: Employee, payroll_input: PayrollInput) -> GrossPay:
        """Resolve gross pay and weekly wage for one input.

        Assumes the pair has passed InputValidator.
        """
        gross, weekly = self._resolve_unrounded(employee, payroll_input)
        result = GrossPay(gross_pay=round_to_cents(gross), weekly_wage=round_to_cents(weekly))
        logger.debug(
            "Resolved %s employee %s: gross=%s weekly_wage=%s",
            employee.employment_type.value,
            employee.employee_id,
            result.gross_pay,
            result.weekly_wage,
        )
        return result

    def _resolve_unrounded(
        self, employee: Employee, payroll_input: PayrollInput
    ) -> tuple[Decimal, Decimal]:
        policy = self.policy
        employment_type = employee.employment_type

        if employment_type is EmploymentType.HOURLY:
            rate = employee.hourly_rate or ZERO
            return payroll_input.hours_worked * rate, rate * policy.standard_weekly_hours

        elif employment_type is EmploymentType.DAILY:
            rate = employee.daily_rate or ZERO
            return payroll_input.days_worked * rate, rate * policy.working_days_per_week

        elif employment_type is EmploymentType.WEEKLY:
            rate = employee.weekly_rate or ZERO
            return rate, rate

        elif employment_type is EmploymentType.MONTHLY:
            salary = employee.monthly_salary or ZERO
            return salary, salary * policy.months_per_year / policy.weeks_per_year

        elif employment_type is EmploymentType.SHIFT_BASED:
            default = require_default_shift(employee)
            return (
                self._shift_gross(employee, default, payroll_input),
                default.base_rate * policy.working_days_per_week,
            )

        else:
            assert_never(employment_type)

    @staticmethod
    def _shift_gross(
        employee: Employee, default: ShiftConfig, payroll_input: PayrollInput
    ) -> Decimal:
        """Sum worked shift occurrences.

        With no explicit occurrences, days_worked counts default-shift days.
        """
        if not payroll_input.shifts_worked:
            return payroll_input.days_worked * default.base_rate

        gross = ZERO
        for occurrence in payroll_input.shifts_worked:
            shift = employee.find_shift(occurrence.shift_name)
            if shift is None:
                raise ShiftNotFoundError(occurrence.shift_name)

            gross += occurrence.occurrences * shift.base_rate
            if shift.hourly_rate is not None:
                gross += occurrence.extra_hours * shift.hourly_rate
        return gross

    def daily_rate_8hr(self, employee: Employee) -> Decimal:
        """Daily rate for a standard 8-hour day, rounded to cents."""
        policy = self.policy
        employment_type = employee.employment_type

        if employment_type is EmploymentType.HOURLY:
            rate = (employee.hourly_rate or ZERO) * policy.standard_day_hours
        elif employment_type is EmploymentType.DAILY:
            rate = employee.daily_rate or ZERO
        elif employment_type is EmploymentType.WEEKLY:
            rate = (employee.weekly_rate or ZERO) / policy.working_days_per_week
        elif employment_type is EmploymentType.MONTHLY:
            rate = (employee.monthly_salary or ZERO) / policy.daily_rate_divisor
        elif employment_type is EmploymentType.SHIFT_BASED:
            rate = require_default_shift(employee).base_rate
        else:
            assert_never(employment_type)

        return round_to_cents(rate)
