"""Type definitions for pay periods and weekly records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from nis_payroll.calculators.types import ZERO, Employee


class WeekStatus(str, Enum):
    """Weekly record status values."""

    CALCULATED = "calculated"
    RECORDED = "recorded"
    COMPLETE = "complete"


@dataclass(frozen=True)
class WeeklyRecord:
    """One Monday-to-Sunday week of a pay period.

    calculated_pay is what the formula says; recorded_pay is what was
    actually paid. The two are kept apart so a reconciliation report can
    show both.
    """

    week_number: int  # 1-based
    week_start: date  # Always a Monday
    week_end: date  # Always a Sunday
    pay_day: date  # week_end + pay day lag
    daily_rate_8hr: Decimal
    recorded_days_worked: Decimal = ZERO
    calculated_pay: Decimal = ZERO
    recorded_pay: Decimal = ZERO
    nis_employee: Decimal = ZERO
    nis_employer: Decimal = ZERO
    net_pay: Decimal = ZERO
    status: WeekStatus = WeekStatus.CALCULATED
    recorded_pay_overridden: bool = False

    @property
    def calc_pay_less_nis(self) -> Decimal:
        return self.calculated_pay - self.nis_employee

    @property
    def total_nis(self) -> Decimal:
        return self.nis_employee + self.nis_employer

    def covers(self, day: date) -> bool:
        return self.week_start <= day <= self.week_end


@dataclass(frozen=True)
class PayPeriod:
    """A date range decomposed into weekly records."""

    start_date: date
    end_date: date  # Inclusive
    employee: Employee
    weeks: tuple[WeeklyRecord, ...]
    name: str = ""

    @property
    def total_weeks(self) -> int:
        return len(self.weeks)


@dataclass(frozen=True)
class PeriodTotals:
    """Period-level totals folded from every weekly record."""

    calculated_pay: Decimal = ZERO
    recorded_pay: Decimal = ZERO
    nis_employee: Decimal = ZERO
    nis_employer: Decimal = ZERO
    net_pay: Decimal = ZERO
    recorded_days_worked: Decimal = ZERO
    week_count: int = 0
    complete_weeks: int = 0

    @property
    def total_nis(self) -> Decimal:
        return self.nis_employee + self.nis_employer

    @property
    def recorded_vs_calculated(self) -> Decimal:
        """Difference between what was paid and what the formula says."""
        return self.recorded_pay - self.calculated_pay
