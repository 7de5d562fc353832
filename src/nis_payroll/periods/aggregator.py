"""Per-week recalculation, recorded-pay overrides and period totals."""

from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal

from nis_payroll.calculators.contributions import ContributionSchedule
from nis_payroll.calculators.engine import PayrollEngine
from nis_payroll.calculators.money import round_to_cents
from nis_payroll.calculators.types import ZERO, PayrollInput
from nis_payroll.config import PayPolicy
from nis_payroll.errors import WeekIndexError
from nis_payroll.periods.state_machine import WeekStatusMachine
from nis_payroll.periods.types import PayPeriod, PeriodTotals, WeeklyRecord, WeekStatus

logger = logging.getLogger(__name__)


def _replace_week(period: PayPeriod, week_index: int, week: WeeklyRecord) -> PayPeriod:
    weeks = list(period.weeks)
    weeks[week_index] = week
    return replace(period, weeks=tuple(weeks))


def _get_week(period: PayPeriod, week_index: int) -> WeeklyRecord:
    if not 0 <= week_index < len(period.weeks):
        raise WeekIndexError(week_index, len(period.weeks))
    return period.weeks[week_index]


class PeriodAggregator:
    """Recalculates weeks of a pay period and folds them into totals.

    Periods are immutable: every operation returns a new PayPeriod and
    leaves the one passed in untouched. Totals are always a full re-fold
    over the current weeks, never a running sum.
    """

    def __init__(self, schedule: ContributionSchedule, policy: PayPolicy | None = None):
        self.engine = PayrollEngine(schedule, policy)

    def recalculate_week(
        self, period: PayPeriod, week_index: int, payroll_input: PayrollInput
    ) -> PayPeriod:
        """Run the full calculation for one week and store the figures.

        recorded_pay follows calculated_pay unless a manual override is in
        place, in which case the override is kept.

        Raises:
            WeekIndexError: If week_index is outside the period
            InvalidPayrollInputError: If the input fails validation
        """
        week = _get_week(period, week_index)
        result = self.engine.calculate(period.employee, payroll_input)

        updated = replace(
            week,
            recorded_days_worked=payroll_input.days_worked,
            calculated_pay=result.gross_pay,
            recorded_pay=week.recorded_pay if week.recorded_pay_overridden else result.gross_pay,
            nis_employee=result.nis_employee_contribution,
            nis_employer=result.nis_employer_contribution,
            net_pay=result.net_pay,
            status=WeekStatusMachine.after_recalculation(week.status),
        )

        logger.debug(
            "Recalculated week %d of %s: calculated=%s recorded=%s",
            week.week_number,
            period.name,
            updated.calculated_pay,
            updated.recorded_pay,
        )
        return _replace_week(period, week_index, updated)

    @staticmethod
    def override_recorded_pay(period: PayPeriod, week_index: int, amount: Decimal) -> PayPeriod:
        """Set what was actually paid for a week, leaving calculated_pay alone.

        Raises:
            WeekIndexError: If week_index is outside the period
        """
        week = _get_week(period, week_index)
        updated = replace(
            week,
            recorded_pay=round_to_cents(amount),
            recorded_pay_overridden=True,
            status=WeekStatusMachine.after_override(week.status),
        )

        logger.info(
            "Recorded pay for week %d of %s overridden: %s (calculated %s)",
            week.week_number,
            period.name,
            updated.recorded_pay,
            week.calculated_pay,
        )
        return _replace_week(period, week_index, updated)

    @staticmethod
    def clear_override(period: PayPeriod, week_index: int) -> PayPeriod:
        """Drop a manual recorded pay so it follows calculated_pay again."""
        week = _get_week(period, week_index)
        if not week.recorded_pay_overridden:
            return period

        updated = replace(
            week,
            recorded_pay=week.calculated_pay,
            recorded_pay_overridden=False,
            status=WeekStatusMachine.after_clear_override(week.status),
        )
        logger.info("Recorded pay override cleared for week %d of %s", week.week_number, period.name)
        return _replace_week(period, week_index, updated)

    @staticmethod
    def aggregate(period: PayPeriod) -> PeriodTotals:
        """Fold every week of the period into totals."""
        calculated_pay = ZERO
        recorded_pay = ZERO
        nis_employee = ZERO
        nis_employer = ZERO
        net_pay = ZERO
        days_worked = ZERO
        complete_weeks = 0

        for week in period.weeks:
            calculated_pay += week.calculated_pay
            recorded_pay += week.recorded_pay
            nis_employee += week.nis_employee
            nis_employer += week.nis_employer
            net_pay += week.net_pay
            days_worked += week.recorded_days_worked
            if week.status == WeekStatus.COMPLETE:
                complete_weeks += 1

        return PeriodTotals(
            calculated_pay=calculated_pay,
            recorded_pay=recorded_pay,
            nis_employee=nis_employee,
            nis_employer=nis_employer,
            net_pay=net_pay,
            recorded_days_worked=days_worked,
            week_count=len(period.weeks),
            complete_weeks=complete_weeks,
        )
