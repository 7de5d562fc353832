"""Decomposition of a date range into weekly pay records."""

from __future__ import annotations

import logging
from datetime import date, timedelta

from nis_payroll.calculators.gross_pay import GrossPayResolver
from nis_payroll.calculators.types import Employee
from nis_payroll.config import PayPolicy
from nis_payroll.errors import InvalidRangeError
from nis_payroll.periods.types import PayPeriod, WeeklyRecord

logger = logging.getLogger(__name__)

ONE_WEEK = timedelta(days=7)


def week_start_for(day: date) -> date:
    """Return the Monday on or before day."""
    return day - timedelta(days=day.weekday())


def period_name(start_date: date, end_date: date) -> str:
    """Human label for a period, e.g. 'Jan 10 - Jan 20, 2024'."""
    return f"{start_date.strftime('%b %d')} - {end_date.strftime('%b %d, %Y')}"


class PeriodGenerator:
    """Generates Monday-to-Sunday weekly records covering a date range.

    The first week starts on the Monday on or before start_date and weeks
    are emitted until one would start after end_date, so partial first and
    last weeks are covered in full. Pay lags the worked week: each pay day
    falls pay_day_lag_days after the week's Sunday.
    """

    def __init__(self, policy: PayPolicy | None = None):
        self.policy = policy or PayPolicy()
        self.resolver = GrossPayResolver(self.policy)

    def generate(self, start_date: date, end_date: date, employee: Employee) -> PayPeriod:
        """Generate a pay period for employee.

        Raises:
            InvalidRangeError: If start_date is after end_date
        """
        if start_date > end_date:
            raise InvalidRangeError(start_date, end_date)

        daily_rate = self.resolver.daily_rate_8hr(employee)
        pay_day_lag = timedelta(days=self.policy.pay_day_lag_days)

        weeks: list[WeeklyRecord] = []
        week_start = week_start_for(start_date)
        while week_start <= end_date:
            week_end = week_start + timedelta(days=6)
            weeks.append(
                WeeklyRecord(
                    week_number=len(weeks) + 1,
                    week_start=week_start,
                    week_end=week_end,
                    pay_day=week_end + pay_day_lag,
                    daily_rate_8hr=daily_rate,
                )
            )
            week_start += ONE_WEEK

        logger.debug(
            "Generated %d weeks for employee %s from %s to %s",
            len(weeks),
            employee.employee_id,
            start_date,
            end_date,
        )

        return PayPeriod(
            start_date=start_date,
            end_date=end_date,
            employee=employee,
            weeks=tuple(weeks),
            name=period_name(start_date, end_date),
        )
