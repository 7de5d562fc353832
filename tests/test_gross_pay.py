"""Tests for gross pay and weekly wage resolution."""

from dataclasses import replace
from decimal import Decimal

import pytest

from nis_payroll.calculators.gross_pay import GrossPayResolver, require_default_shift
from nis_payroll.calculators.types import PayrollInput, ShiftOccurrence
from nis_payroll.config import PayPolicy
from nis_payroll.errors import NoDefaultShiftError, ShiftNotFoundError


class TestGrossPay:
    """Gross pay by employment type."""

    def test_hourly(self, hourly_employee):
        """Hourly: hours x rate, weekly wage at 40 standard hours."""
        result = GrossPayResolver().resolve(
            hourly_employee, PayrollInput(hours_worked=Decimal("40"))
        )

        assert result.gross_pay == Decimal("1000.00")
        assert result.weekly_wage == Decimal("1000.00")

    def test_hourly_part_week(self, hourly_employee):
        """The weekly wage does not follow hours worked."""
        result = GrossPayResolver().resolve(
            hourly_employee, PayrollInput(hours_worked=Decimal("12.5"))
        )

        assert result.gross_pay == Decimal("312.50")
        assert result.weekly_wage == Decimal("1000.00")

    def test_daily(self, daily_employee):
        """Daily: days x rate, weekly wage at 6 working days."""
        result = GrossPayResolver().resolve(daily_employee, PayrollInput(days_worked=Decimal("4")))

        assert result.gross_pay == Decimal("800.00")
        assert result.weekly_wage == Decimal("1200.00")

    def test_weekly(self, weekly_employee):
        """Weekly: rate is both gross and weekly wage."""
        result = GrossPayResolver().resolve(weekly_employee, PayrollInput())

        assert result.gross_pay == Decimal("1200.00")
        assert result.weekly_wage == Decimal("1200.00")

    def test_monthly(self, monthly_employee):
        """Monthly: salary x 12 / 52, rounded to cents."""
        result = GrossPayResolver().resolve(monthly_employee, PayrollInput())

        assert result.gross_pay == Decimal("5000.00")
        assert result.weekly_wage == Decimal("1153.85")

    def test_zero_worked_time(self, hourly_employee):
        """No worked time gives zero gross but keeps the weekly wage."""
        result = GrossPayResolver().resolve(hourly_employee, PayrollInput())

        assert result.gross_pay == Decimal("0.00")
        assert result.weekly_wage == Decimal("1000.00")

    def test_policy_changes_conversion(self, daily_employee):
        """A 5-day policy changes the daily weekly wage."""
        resolver = GrossPayResolver(PayPolicy(working_days_per_week=Decimal("5")))

        result = resolver.resolve(daily_employee, PayrollInput(days_worked=Decimal("5")))

        assert result.weekly_wage == Decimal("1000.00")


class TestShiftGross:
    """Shift-based gross pay."""

    def test_default_shift_occurrences(self, shift_employee):
        """5 Day-shift occurrences at 250 = 1250."""
        result = GrossPayResolver().resolve(
            shift_employee,
            PayrollInput(shifts_worked=(ShiftOccurrence("Day", Decimal("5")),)),
        )

        assert result.gross_pay == Decimal("1250.00")
        assert result.weekly_wage == Decimal("1500.00")

    def test_days_worked_counts_default_shift(self, shift_employee):
        """Without explicit occurrences, days_worked counts default shifts."""
        result = GrossPayResolver().resolve(shift_employee, PayrollInput(days_worked=Decimal("5")))

        assert result.gross_pay == Decimal("1250.00")

    def test_mixed_shifts_with_extra_hours(self, shift_employee):
        """Extra hours bill at the shift's hourly rate when it has one."""
        payroll_input = PayrollInput(
            shifts_worked=(
                ShiftOccurrence("Day", Decimal("3"), extra_hours=Decimal("2")),
                ShiftOccurrence("Night", Decimal("2"), extra_hours=Decimal("4")),
            )
        )

        result = GrossPayResolver().resolve(shift_employee, payroll_input)

        # 3 x 250 + 2 x 31.25 + 2 x 300 (Night has no hourly rate)
        assert result.gross_pay == Decimal("1412.50")

    def test_unknown_shift_raises(self, shift_employee):
        with pytest.raises(ShiftNotFoundError) as exc_info:
            GrossPayResolver().resolve(
                shift_employee, PayrollInput(shifts_worked=(ShiftOccurrence("Swing"),))
            )

        assert exc_info.value.shift_name == "Swing"

    def test_no_default_shift_raises(self, shift_employee):
        """A shift list without a default cannot produce a weekly wage."""
        employee = replace(
            shift_employee,
            shifts=tuple(replace(s, is_default=False) for s in shift_employee.shifts),
        )

        with pytest.raises(NoDefaultShiftError):
            GrossPayResolver().resolve(employee, PayrollInput(days_worked=Decimal("1")))

    def test_require_default_shift(self, shift_employee, day_shift):
        assert require_default_shift(shift_employee) == day_shift


class TestDailyRate8hr:
    """Daily rate for a standard 8-hour day."""

    def test_hourly(self, hourly_employee):
        assert GrossPayResolver().daily_rate_8hr(hourly_employee) == Decimal("200.00")

    def test_daily(self, daily_employee):
        assert GrossPayResolver().daily_rate_8hr(daily_employee) == Decimal("200.00")

    def test_weekly(self, weekly_employee):
        """Weekly rate spread over 6 working days."""
        assert GrossPayResolver().daily_rate_8hr(weekly_employee) == Decimal("200.00")

    def test_monthly(self, monthly_employee):
        """5000 / 30 = 166.67."""
        assert GrossPayResolver().daily_rate_8hr(monthly_employee) == Decimal("166.67")

    def test_shift_based(self, shift_employee):
        """Default shift base rate."""
        assert GrossPayResolver().daily_rate_8hr(shift_employee) == Decimal("250.00")
